"""SQLite schema and data access helpers for workspace records."""

from __future__ import annotations

import json
import sqlite3
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Sequence
from uuid import uuid4

from workspace_insights.models import NoteRecord, SnippetRecord, TaskRecord

SCHEMA_VERSION = 1
_REQUIRED_TABLES = {
    "schema_meta",
    "tasks",
    "notes",
    "snippets",
    "runs",
}


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path, timeout=5.0)
    _configure_connection(conn)
    return conn


def _configure_connection(conn: sqlite3.Connection) -> None:
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    conn.execute("PRAGMA synchronous = NORMAL")
    conn.execute("PRAGMA temp_store = MEMORY")
    conn.execute("PRAGMA busy_timeout = 5000")


def _is_lock_error(exc: sqlite3.OperationalError) -> bool:
    message = str(exc).lower()
    return "locked" in message or "busy" in message


def _execute_with_retry(
    conn: sqlite3.Connection,
    sql: str,
    params: tuple | list | None = None,
    *,
    attempts: int = 3,
    base_delay: float = 0.05,
) -> sqlite3.Cursor:
    params = params or ()
    for attempt in range(attempts):
        try:
            return conn.execute(sql, params)
        except sqlite3.OperationalError as exc:
            if _is_lock_error(exc) and attempt < attempts - 1:
                time.sleep(base_delay * (2**attempt))
                continue
            raise
    raise RuntimeError("unreachable")


def _executemany_with_retry(
    conn: sqlite3.Connection,
    sql: str,
    rows: Iterable[tuple],
    *,
    attempts: int = 3,
    base_delay: float = 0.05,
) -> sqlite3.Cursor:
    rows = list(rows)
    for attempt in range(attempts):
        try:
            return conn.executemany(sql, rows)
        except sqlite3.OperationalError as exc:
            if _is_lock_error(exc) and attempt < attempts - 1:
                time.sleep(base_delay * (2**attempt))
                continue
            raise
    raise RuntimeError("unreachable")


def _ensure_schema_version(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_meta (
            id INTEGER PRIMARY KEY CHECK (id = 1),
            schema_version INTEGER NOT NULL
        )
        """
    )
    row = conn.execute("SELECT schema_version FROM schema_meta WHERE id = 1").fetchone()
    if row is None:
        conn.execute(
            "INSERT INTO schema_meta (id, schema_version) VALUES (1, ?)",
            (SCHEMA_VERSION,),
        )
        return
    current = int(row["schema_version"])
    if current > SCHEMA_VERSION:
        raise RuntimeError(
            f"Database schema version {current} is newer than supported {SCHEMA_VERSION}."
        )
    if current < SCHEMA_VERSION:
        conn.execute(
            "UPDATE schema_meta SET schema_version = ? WHERE id = 1",
            (SCHEMA_VERSION,),
        )


def migrate_schema(conn: sqlite3.Connection) -> None:
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS tasks (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            task_id TEXT NOT NULL UNIQUE,
            title TEXT NOT NULL,
            description TEXT,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS notes (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            note_id TEXT NOT NULL UNIQUE,
            title TEXT NOT NULL,
            content TEXT NOT NULL DEFAULT '',
            tags TEXT NOT NULL DEFAULT '[]',
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS snippets (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            snippet_id TEXT NOT NULL UNIQUE,
            title TEXT NOT NULL,
            description TEXT,
            code TEXT NOT NULL DEFAULT '',
            language TEXT NOT NULL DEFAULT '',
            tags TEXT NOT NULL DEFAULT '[]',
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS runs (
            run_id TEXT PRIMARY KEY,
            query TEXT NOT NULL,
            result_count INTEGER NOT NULL,
            results TEXT,
            latency_ms REAL,
            created_at TEXT NOT NULL
        );
        """
    )
    _ensure_schema_version(conn)


def initialize_schema(conn: sqlite3.Connection) -> None:
    migrate_schema(conn)


def require_schema(conn: sqlite3.Connection) -> None:
    tables = {
        row["name"]
        for row in conn.execute(
            "SELECT name FROM sqlite_master WHERE type IN ('table', 'view')"
        ).fetchall()
    }
    missing = sorted(_REQUIRED_TABLES - tables)
    if missing:
        raise RuntimeError(
            "Database schema is not initialized. "
            f"Missing tables: {', '.join(missing)}. Run scripts/maintenance.py --migrate."
        )
    row = conn.execute("SELECT schema_version FROM schema_meta WHERE id = 1").fetchone()
    if row is None:
        raise RuntimeError(
            "Database schema metadata missing. Run scripts/maintenance.py --migrate."
        )
    current = int(row["schema_version"])
    if current != SCHEMA_VERSION:
        raise RuntimeError(
            f"Database schema version {current} is incompatible with required {SCHEMA_VERSION}. "
            "Run scripts/maintenance.py --migrate."
        )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return uuid4().hex


def _decode_tags(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        return ()
    if not isinstance(payload, list):
        return ()
    return tuple(str(tag) for tag in payload)


def insert_task(
    conn: sqlite3.Connection,
    *,
    title: str,
    description: str | None = None,
    task_id: str | None = None,
) -> TaskRecord:
    record = TaskRecord(
        id=task_id or _new_id(), title=title, description=description or ""
    )
    _execute_with_retry(
        conn,
        "INSERT INTO tasks (task_id, title, description, created_at) VALUES (?, ?, ?, ?)",
        (record.id, record.title, description, _now()),
    )
    return record


def insert_note(
    conn: sqlite3.Connection,
    *,
    title: str,
    content: str = "",
    tags: Sequence[str] = (),
    note_id: str | None = None,
) -> NoteRecord:
    record = NoteRecord(
        id=note_id or _new_id(), title=title, content=content, tags=tuple(tags)
    )
    _execute_with_retry(
        conn,
        """
        INSERT INTO notes (note_id, title, content, tags, created_at)
        VALUES (?, ?, ?, ?, ?)
        """,
        (
            record.id,
            record.title,
            record.content,
            json.dumps(list(record.tags)),
            _now(),
        ),
    )
    return record


def insert_snippet(
    conn: sqlite3.Connection,
    *,
    title: str,
    code: str = "",
    language: str = "",
    description: str | None = None,
    tags: Sequence[str] = (),
    snippet_id: str | None = None,
) -> SnippetRecord:
    record = SnippetRecord(
        id=snippet_id or _new_id(),
        title=title,
        description=description or "",
        tags=tuple(tags),
        language=language,
        code=code,
    )
    _execute_with_retry(
        conn,
        """
        INSERT INTO snippets (snippet_id, title, description, code, language, tags, created_at)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (
            record.id,
            record.title,
            description,
            record.code,
            record.language,
            json.dumps(list(record.tags)),
            _now(),
        ),
    )
    return record


def insert_records(
    conn: sqlite3.Connection,
    tasks: Iterable[TaskRecord] = (),
    notes: Iterable[NoteRecord] = (),
    snippets: Iterable[SnippetRecord] = (),
) -> int:
    """Bulk insert already-built records; returns the number of rows written."""
    created_at = _now()
    task_rows = [
        (task.id, task.title, task.description or None, created_at) for task in tasks
    ]
    note_rows = [
        (note.id, note.title, note.content, json.dumps(list(note.tags)), created_at)
        for note in notes
    ]
    snippet_rows = [
        (
            snippet.id,
            snippet.title,
            snippet.description or None,
            snippet.code,
            snippet.language,
            json.dumps(list(snippet.tags)),
            created_at,
        )
        for snippet in snippets
    ]
    if task_rows:
        _executemany_with_retry(
            conn,
            "INSERT INTO tasks (task_id, title, description, created_at) VALUES (?, ?, ?, ?)",
            task_rows,
        )
    if note_rows:
        _executemany_with_retry(
            conn,
            """
            INSERT INTO notes (note_id, title, content, tags, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            note_rows,
        )
    if snippet_rows:
        _executemany_with_retry(
            conn,
            """
            INSERT INTO snippets (snippet_id, title, description, code, language, tags, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            snippet_rows,
        )
    return len(task_rows) + len(note_rows) + len(snippet_rows)


# Newest first, matching how the workspace lists its records.
def list_tasks(conn: sqlite3.Connection) -> list[TaskRecord]:
    rows = conn.execute(
        "SELECT task_id, title, description FROM tasks ORDER BY seq DESC"
    ).fetchall()
    return [
        TaskRecord(
            id=row["task_id"],
            title=row["title"],
            description=row["description"] or "",
        )
        for row in rows
    ]


def list_notes(conn: sqlite3.Connection) -> list[NoteRecord]:
    rows = conn.execute(
        "SELECT note_id, title, content, tags FROM notes ORDER BY seq DESC"
    ).fetchall()
    return [
        NoteRecord(
            id=row["note_id"],
            title=row["title"],
            content=row["content"] or "",
            tags=_decode_tags(row["tags"]),
        )
        for row in rows
    ]


def list_snippets(conn: sqlite3.Connection) -> list[SnippetRecord]:
    rows = conn.execute(
        """
        SELECT snippet_id, title, description, code, language, tags
        FROM snippets ORDER BY seq DESC
        """
    ).fetchall()
    return [
        SnippetRecord(
            id=row["snippet_id"],
            title=row["title"],
            description=row["description"] or "",
            tags=_decode_tags(row["tags"]),
            language=row["language"] or "",
            code=row["code"] or "",
        )
        for row in rows
    ]


def log_run(
    conn: sqlite3.Connection,
    *,
    query: str,
    results: list[dict],
    latency_ms: float,
) -> None:
    _execute_with_retry(
        conn,
        """
        INSERT INTO runs (run_id, query, result_count, results, latency_ms, created_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            str(uuid4()),
            query,
            len(results),
            json.dumps(results),
            latency_ms,
            _now(),
        ),
    )


class SQLiteRecordStore:
    """Read-only record store view over a workspace database."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = connect(self.db_path)
        require_schema(conn)
        return conn

    def list_tasks(self) -> list[TaskRecord]:
        with self._connect() as conn:
            return list_tasks(conn)

    def list_notes(self) -> list[NoteRecord]:
        with self._connect() as conn:
            return list_notes(conn)

    def list_snippets(self) -> list[SnippetRecord]:
        with self._connect() as conn:
            return list_snippets(conn)
