"""Deterministic text analysis: counts, readability, sentiment, key phrases."""

from .counters import (
    count_paragraphs,
    count_sentences,
    count_text,
    reading_time_minutes,
    split_words,
)
from .keyphrases import STOPWORDS, extract_key_phrases
from .pipeline import analyze
from .readability import readability_level, readability_score
from .sentiment import NEGATIVE_WORDS, POSITIVE_WORDS, classify_sentiment
from .syllables import count_syllables

__all__ = [
    "NEGATIVE_WORDS",
    "POSITIVE_WORDS",
    "STOPWORDS",
    "analyze",
    "classify_sentiment",
    "count_paragraphs",
    "count_sentences",
    "count_syllables",
    "count_text",
    "extract_key_phrases",
    "readability_level",
    "readability_score",
    "reading_time_minutes",
    "split_words",
]
