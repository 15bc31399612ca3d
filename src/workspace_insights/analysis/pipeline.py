"""Single entry point that assembles every text metric."""

from __future__ import annotations

from workspace_insights.analysis.counters import (
    count_text,
    reading_time_minutes,
    split_words,
)
from workspace_insights.analysis.keyphrases import extract_key_phrases
from workspace_insights.analysis.readability import readability_level, readability_score
from workspace_insights.analysis.sentiment import classify_sentiment
from workspace_insights.analysis.syllables import total_syllables
from workspace_insights.config import KEY_PHRASE_LIMIT, READING_WORDS_PER_MINUTE
from workspace_insights.models import TextMetrics


def analyze(
    text: str,
    *,
    words_per_minute: int = READING_WORDS_PER_MINUTE,
    key_phrase_limit: int = KEY_PHRASE_LIMIT,
) -> TextMetrics:
    """Derive counts, readability, sentiment and key phrases from ``text``.

    Pure and re-entrant: every input, including ``""``, yields a fully
    populated result and the same input always yields an equal result.
    """
    words = split_words(text)
    counts = count_text(text)
    score = readability_score(
        counts.word_count, counts.sentence_count, total_syllables(words)
    )
    return TextMetrics(
        word_count=counts.word_count,
        char_count=counts.char_count,
        char_count_no_spaces=counts.char_count_no_spaces,
        paragraph_count=counts.paragraph_count,
        sentence_count=counts.sentence_count,
        reading_time_minutes=reading_time_minutes(
            counts.word_count, words_per_minute=words_per_minute
        ),
        readability_score=score,
        readability_level=readability_level(score),
        sentiment=classify_sentiment(text),
        key_phrases=tuple(extract_key_phrases(words, limit=key_phrase_limit)),
    )
