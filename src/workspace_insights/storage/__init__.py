"""SQLite storage helpers."""

from .db import (
    SQLiteRecordStore,
    connect,
    initialize_schema,
    insert_note,
    insert_records,
    insert_snippet,
    insert_task,
    list_notes,
    list_snippets,
    list_tasks,
    log_run,
    migrate_schema,
    require_schema,
)

__all__ = [
    "SQLiteRecordStore",
    "connect",
    "initialize_schema",
    "insert_note",
    "insert_records",
    "insert_snippet",
    "insert_task",
    "list_notes",
    "list_snippets",
    "list_tasks",
    "log_run",
    "migrate_schema",
    "require_schema",
]
