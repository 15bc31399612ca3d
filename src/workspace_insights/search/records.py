"""Adapters from store records to flattened, scorable search records."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from workspace_insights.config import SNIPPET_MAX_CHARS
from workspace_insights.models import (
    NoteRecord,
    RecordKind,
    SearchRecord,
    SnippetRecord,
    TaskRecord,
)
from workspace_insights.telemetry import get_logger, log_warning

logger = get_logger("records")

ELLIPSIS = "..."


def truncate_text(text: str, max_chars: int = SNIPPET_MAX_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars].strip() + ELLIPSIS


def task_to_search_record(
    task: TaskRecord, *, snippet_chars: int = SNIPPET_MAX_CHARS
) -> SearchRecord:
    description = task.description or ""
    return SearchRecord(
        id=task.id,
        kind=RecordKind.TASK,
        title=task.title,
        fields=(task.title, description),
        snippet=truncate_text(description or task.title, snippet_chars),
    )


def note_to_search_record(
    note: NoteRecord, *, snippet_chars: int = SNIPPET_MAX_CHARS
) -> SearchRecord:
    content = note.content or ""
    return SearchRecord(
        id=note.id,
        kind=RecordKind.NOTE,
        title=note.title,
        fields=(note.title, content, " ".join(note.tags)),
        snippet=truncate_text(content, snippet_chars),
    )


def snippet_to_search_record(
    snippet: SnippetRecord, *, snippet_chars: int = SNIPPET_MAX_CHARS
) -> SearchRecord:
    description = snippet.description or ""
    language = snippet.language or ""
    excerpt = description or f"{language} code snippet"
    return SearchRecord(
        id=snippet.id,
        kind=RecordKind.SNIPPET,
        title=snippet.title,
        fields=(snippet.title, description, " ".join(snippet.tags), language),
        snippet=truncate_text(excerpt, snippet_chars),
    )


def iter_search_records(
    tasks: Iterable[TaskRecord],
    notes: Iterable[NoteRecord],
    snippets: Iterable[SnippetRecord],
    *,
    snippet_chars: int = SNIPPET_MAX_CHARS,
) -> Iterator[SearchRecord]:
    """Yield tasks, then notes, then snippets, lazily and in input order."""
    for task in tasks:
        yield task_to_search_record(task, snippet_chars=snippet_chars)
    for note in notes:
        yield note_to_search_record(note, snippet_chars=snippet_chars)
    for snippet in snippets:
        yield snippet_to_search_record(snippet, snippet_chars=snippet_chars)


def _required_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        raise ValueError(f"record is missing required field '{key}'")
    return str(value)


def _optional_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


def _tags(payload: Mapping[str, Any]) -> tuple[str, ...]:
    raw = payload.get("tags")
    if not raw:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, (list, tuple)):
        log_warning(
            logger,
            "records_malformed",
            field="tags",
            record_id=payload.get("id"),
            value_type=type(raw).__name__,
        )
        return ()
    return tuple(str(tag) for tag in raw)


def task_from_mapping(payload: Mapping[str, Any]) -> TaskRecord:
    return TaskRecord(
        id=_required_str(payload, "id"),
        title=_required_str(payload, "title"),
        description=_optional_str(payload, "description"),
    )


def note_from_mapping(payload: Mapping[str, Any]) -> NoteRecord:
    return NoteRecord(
        id=_required_str(payload, "id"),
        title=_required_str(payload, "title"),
        content=_optional_str(payload, "content"),
        tags=_tags(payload),
    )


def snippet_from_mapping(payload: Mapping[str, Any]) -> SnippetRecord:
    return SnippetRecord(
        id=_required_str(payload, "id"),
        title=_required_str(payload, "title"),
        description=_optional_str(payload, "description"),
        tags=_tags(payload),
        language=_optional_str(payload, "language"),
        code=_optional_str(payload, "code"),
    )


def _collection(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    raw = payload.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        log_warning(
            logger,
            "records_malformed",
            collection=key,
            value_type=type(raw).__name__,
        )
        return []
    items: list[Mapping[str, Any]] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            log_warning(
                logger,
                "records_malformed",
                collection=key,
                index=index,
                value_type=type(item).__name__,
            )
            continue
        items.append(item)
    return items


def load_snapshot(
    payload: Mapping[str, Any],
) -> tuple[list[TaskRecord], list[NoteRecord], list[SnippetRecord]]:
    """Normalize an exported ``{"tasks", "notes", "snippets"}`` mapping."""
    if not isinstance(payload, Mapping):
        raise ValueError("snapshot must be an object with tasks, notes and snippets")
    tasks = [task_from_mapping(item) for item in _collection(payload, "tasks")]
    notes = [note_from_mapping(item) for item in _collection(payload, "notes")]
    snippets = [
        snippet_from_mapping(item) for item in _collection(payload, "snippets")
    ]
    return tasks, notes, snippets
