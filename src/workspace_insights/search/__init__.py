"""Relevance scoring and ranking across workspace records."""

from .ranking import rank_records, search
from .records import load_snapshot, truncate_text
from .relevance import field_weight, query_terms, score_fields, score_query

__all__ = [
    "field_weight",
    "load_snapshot",
    "query_terms",
    "rank_records",
    "score_fields",
    "score_query",
    "search",
    "truncate_text",
]
