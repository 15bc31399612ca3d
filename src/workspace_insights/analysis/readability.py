"""Flesch Reading Ease approximation and its qualitative tiers."""

from __future__ import annotations

import math

from workspace_insights.models import ReadabilityLevel

# Lower bound of each tier, checked top-down.
_LEVEL_THRESHOLDS: tuple[tuple[int, ReadabilityLevel], ...] = (
    (90, ReadabilityLevel.VERY_EASY),
    (80, ReadabilityLevel.EASY),
    (70, ReadabilityLevel.FAIRLY_EASY),
    (60, ReadabilityLevel.STANDARD),
    (50, ReadabilityLevel.FAIRLY_DIFFICULT),
    (30, ReadabilityLevel.DIFFICULT),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def readability_score(word_count: int, sentence_count: int, syllable_count: int) -> int:
    """Return the reading-ease score clamped to [0, 100] and rounded.

    With no sentences (or no words) the corresponding average is 0, so empty
    text evaluates to the formula's constant and clamps to 100.
    """
    avg_words_per_sentence = word_count / sentence_count if sentence_count > 0 else 0.0
    avg_syllables_per_word = syllable_count / word_count if word_count > 0 else 0.0
    raw = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return _round_half_up(min(100.0, max(0.0, raw)))


def readability_level(score: float) -> ReadabilityLevel:
    for threshold, level in _LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return ReadabilityLevel.VERY_DIFFICULT
