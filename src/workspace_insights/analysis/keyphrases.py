"""Stop-word filtered term-frequency key phrases."""

from __future__ import annotations

import re
from typing import Iterable

from workspace_insights.config import KEY_PHRASE_LIMIT

_NON_WORD_RE = re.compile(r"[^\w]", re.ASCII)

STOPWORDS = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "can",
        "this",
        "that",
        "these",
        "those",
        "i",
        "you",
        "he",
        "she",
        "it",
        "we",
        "they",
        "me",
        "him",
        "her",
        "us",
        "them",
    }
)


def normalize_token(token: str) -> str:
    return _NON_WORD_RE.sub("", token.lower())


def term_frequencies(words: Iterable[str]) -> dict[str, int]:
    """Count surviving tokens; dict order is first-occurrence order."""
    frequencies: dict[str, int] = {}
    for word in words:
        token = normalize_token(word)
        if len(token) <= 2 or token in STOPWORDS:
            continue
        frequencies[token] = frequencies.get(token, 0) + 1
    return frequencies


def extract_key_phrases(
    words: Iterable[str], *, limit: int = KEY_PHRASE_LIMIT
) -> list[str]:
    frequencies = term_frequencies(words)
    # sorted() is stable, so equal counts keep first-occurrence order.
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[: max(0, limit)]]
