"""Heuristic syllable estimation.

The count is approximate: it strips common silent endings and counts vowel
groups. It is not phonetic ground truth, but it is deterministic, and the
readability score depends on the exact order of the steps below.
"""

from __future__ import annotations

import re

_SILENT_ENDING_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_RE = re.compile(r"^y")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")


def count_syllables(word: str) -> int:
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = _SILENT_ENDING_RE.sub("", word, count=1)
    word = _LEADING_Y_RE.sub("", word, count=1)
    return len(_VOWEL_GROUP_RE.findall(word)) or 1


def total_syllables(words: list[str]) -> int:
    return sum(count_syllables(word) for word in words)
