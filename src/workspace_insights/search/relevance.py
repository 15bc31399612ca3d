"""Weighted multi-field match scoring for one record against a query.

Per query term and per field (weight 3 for the title, 2 for the second field,
1 for the rest), a field containing the term earns:

- ``weight * 2`` for every whole-word occurrence,
- ``weight`` for every substring occurrence (whole words count again here),
- ``weight * 3`` once if the field starts with the term.

The overlap between the first two rules boosts records with more matches and
is part of the ranking order; keep it as is.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Sequence

TITLE_WEIGHT = 3
SECONDARY_WEIGHT = 2
DEFAULT_WEIGHT = 1


def field_weight(index: int) -> int:
    if index == 0:
        return TITLE_WEIGHT
    if index == 1:
        return SECONDARY_WEIGHT
    return DEFAULT_WEIGHT


def query_terms(query: str) -> list[str]:
    return [term for term in query.lower().split() if term]


@lru_cache(maxsize=256)
def _word_boundary_re(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.ASCII)


def score_term(term: str, field_text: str, weight: int) -> int:
    if not term or term not in field_text:
        return 0
    exact_matches = len(_word_boundary_re(term).findall(field_text))
    partial_matches = field_text.count(term)
    score = exact_matches * weight * 2 + partial_matches * weight
    if field_text.startswith(term):
        score += weight * 3
    return score


def score_fields(terms: Iterable[str], fields: Sequence[str]) -> int:
    """Total relevance of ``fields`` (title first) for lowercase ``terms``."""
    term_list = [term for term in terms if term]
    score = 0
    for index, field in enumerate(fields):
        if not field:
            continue
        field_text = field.lower()
        weight = field_weight(index)
        for term in term_list:
            score += score_term(term, field_text, weight)
    return score


def score_query(query: str, fields: Sequence[str]) -> int:
    return score_fields(query_terms(query), fields)
