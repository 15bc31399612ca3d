"""Shared data models for workspace insights."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Sequence


class ReadabilityLevel(str, Enum):
    VERY_EASY = "Very Easy"
    EASY = "Easy"
    FAIRLY_EASY = "Fairly Easy"
    STANDARD = "Standard"
    FAIRLY_DIFFICULT = "Fairly Difficult"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class RecordKind(str, Enum):
    TASK = "task"
    NOTE = "note"
    SNIPPET = "snippet"


class SearchState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    DONE = "done"


@dataclass(frozen=True)
class TextCounts:
    word_count: int
    char_count: int
    char_count_no_spaces: int
    paragraph_count: int
    sentence_count: int


@dataclass(frozen=True)
class TextMetrics:
    word_count: int
    char_count: int
    char_count_no_spaces: int
    paragraph_count: int
    sentence_count: int
    reading_time_minutes: int
    readability_score: int
    readability_level: ReadabilityLevel
    sentiment: Sentiment
    key_phrases: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_count": self.word_count,
            "char_count": self.char_count,
            "char_count_no_spaces": self.char_count_no_spaces,
            "paragraph_count": self.paragraph_count,
            "sentence_count": self.sentence_count,
            "reading_time_minutes": self.reading_time_minutes,
            "readability_score": self.readability_score,
            "readability_level": self.readability_level.value,
            "sentiment": self.sentiment.value,
            "key_phrases": list(self.key_phrases),
        }


@dataclass(frozen=True)
class TaskRecord:
    id: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class NoteRecord:
    id: str
    title: str
    content: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SnippetRecord:
    id: str
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()
    language: str = ""
    code: str = ""


@dataclass(frozen=True)
class SearchRecord:
    """One record flattened for scoring; ``fields[0]`` is always the title."""

    id: str
    kind: RecordKind
    title: str
    fields: tuple[str, ...]
    snippet: str


@dataclass(frozen=True)
class SearchResult:
    id: str
    kind: RecordKind
    title: str
    snippet: str
    relevance: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "title": self.title,
            "snippet": self.snippet,
            "relevance": self.relevance,
        }


@dataclass
class SearchOutcome:
    query: str
    state: SearchState
    results: list[SearchResult] = field(default_factory=list)
    latency_ms: float = 0.0
    superseded: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "state": self.state.value,
            "results": [result.to_dict() for result in self.results],
            "latency_ms": self.latency_ms,
            "superseded": self.superseded,
        }


class RecordStore(Protocol):
    def list_tasks(self) -> Sequence[TaskRecord]: ...

    def list_notes(self) -> Sequence[NoteRecord]: ...

    def list_snippets(self) -> Sequence[SnippetRecord]: ...


@dataclass(frozen=True)
class LoadedDocument:
    source_path: str
    source_type: str
    title: str
    text: str


@dataclass(frozen=True)
class LoadReport:
    source_path: str
    source_type: str | None
    bytes_total: int
    pages_total: int | None
    pages_loaded: int
    pages_skipped_empty: int
    pages_skipped_limit: int
    skip_reason: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": self.source_path,
            "source_type": self.source_type,
            "bytes_total": self.bytes_total,
            "pages_total": self.pages_total,
            "pages_loaded": self.pages_loaded,
            "pages_skipped_empty": self.pages_skipped_empty,
            "pages_skipped_limit": self.pages_skipped_limit,
            "skip_reason": self.skip_reason,
        }
