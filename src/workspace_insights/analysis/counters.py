"""Whitespace/punctuation tokenization and the raw text counters."""

from __future__ import annotations

import math
import re

from workspace_insights.config import READING_WORDS_PER_MINUTE
from workspace_insights.models import TextCounts

_WHITESPACE_RE = re.compile(r"\s+")
_ANY_WHITESPACE_RE = re.compile(r"\s")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SEPARATOR = "\n\n"


def split_words(text: str) -> list[str]:
    trimmed = text.strip()
    if not trimmed:
        return []
    return _WHITESPACE_RE.split(trimmed)


def count_paragraphs(text: str) -> int:
    if not text.strip():
        return 0
    return sum(1 for part in text.split(_PARAGRAPH_SEPARATOR) if part.strip())


def count_sentences(text: str) -> int:
    if not text.strip():
        return 0
    return sum(1 for part in _SENTENCE_SPLIT_RE.split(text) if part.strip())


def count_text(text: str) -> TextCounts:
    return TextCounts(
        word_count=len(split_words(text)),
        char_count=len(text),
        char_count_no_spaces=len(_ANY_WHITESPACE_RE.sub("", text)),
        paragraph_count=count_paragraphs(text),
        sentence_count=count_sentences(text),
    )


def reading_time_minutes(
    word_count: int, *, words_per_minute: int = READING_WORDS_PER_MINUTE
) -> int:
    """Whole minutes needed to read ``word_count`` words; 0 only for no words."""
    if word_count <= 0:
        return 0
    return max(1, math.ceil(word_count / max(1, words_per_minute)))
