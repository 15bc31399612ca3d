"""Lexicon-based sentiment vote."""

from __future__ import annotations

from workspace_insights.models import Sentiment

POSITIVE_WORDS = frozenset(
    {
        "good",
        "great",
        "excellent",
        "amazing",
        "wonderful",
        "fantastic",
        "love",
        "happy",
        "joy",
        "beautiful",
        "perfect",
        "best",
        "awesome",
        "incredible",
        "outstanding",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        "bad",
        "terrible",
        "awful",
        "horrible",
        "hate",
        "sad",
        "angry",
        "worst",
        "disappointing",
        "failed",
        "problem",
        "issue",
        "difficult",
        "hard",
        "impossible",
    }
)


def _lexicon_hits(lowered: str, lexicon: frozenset[str]) -> int:
    # Substring containment: "hardly" counts as "hard".
    return sum(1 for word in lexicon if word in lowered)


def classify_sentiment(text: str) -> Sentiment:
    lowered = text.lower()
    positive = _lexicon_hits(lowered, POSITIVE_WORDS)
    negative = _lexicon_hits(lowered, NEGATIVE_WORDS)
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
