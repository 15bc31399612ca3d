"""Cross-collection search ranking over tasks, notes and code snippets."""

from __future__ import annotations

from typing import Iterable

from workspace_insights.config import SEARCH_RESULT_LIMIT, SNIPPET_MAX_CHARS
from workspace_insights.models import (
    NoteRecord,
    SearchRecord,
    SearchResult,
    SnippetRecord,
    TaskRecord,
)
from workspace_insights.search.records import iter_search_records
from workspace_insights.search.relevance import query_terms, score_fields


def rank_records(
    query: str,
    records: Iterable[SearchRecord],
    *,
    limit: int = SEARCH_RESULT_LIMIT,
) -> list[SearchResult]:
    terms = query_terms(query)
    if not terms:
        return []
    results: list[SearchResult] = []
    for record in records:
        relevance = score_fields(terms, record.fields)
        if relevance <= 0:
            continue
        results.append(
            SearchResult(
                id=record.id,
                kind=record.kind,
                title=record.title,
                snippet=record.snippet,
                relevance=relevance,
            )
        )
    # Stable: equal scores keep input order.
    results.sort(key=lambda item: item.relevance, reverse=True)
    return results[: max(0, limit)]


def search(
    query: str,
    tasks: Iterable[TaskRecord],
    notes: Iterable[NoteRecord],
    snippets: Iterable[SnippetRecord],
    *,
    limit: int = SEARCH_RESULT_LIMIT,
    snippet_chars: int = SNIPPET_MAX_CHARS,
) -> list[SearchResult]:
    """Score every record against ``query`` and return the best ``limit``.

    A blank query returns ``[]`` without touching any collection.
    """
    if not query.strip():
        return []
    records = iter_search_records(tasks, notes, snippets, snippet_chars=snippet_chars)
    return rank_records(query, records, limit=limit)
