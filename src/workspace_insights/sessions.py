"""Caller-facing sessions around the pure analysis and search operations.

A session binds the latest input, exposes an in-flight flag for callers that
poll, and publishes only the result of the newest submission. Older
submissions still finish, but their results are dropped (last write wins).
Nothing is cached between inputs; every submission recomputes from scratch.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, TypeVar

from workspace_insights.analysis import analyze
from workspace_insights.config import SEARCH_RESULT_LIMIT, SESSION_WORKERS
from workspace_insights.models import (
    RecordStore,
    SearchOutcome,
    SearchResult,
    SearchState,
    TextMetrics,
)
from workspace_insights.search import search
from workspace_insights.telemetry import get_logger, log_event

T = TypeVar("T")
S = TypeVar("S", bound="_Session")

logger = get_logger("sessions")


def _resolved(value: T) -> Future[T]:
    future: Future[T] = Future()
    future.set_result(value)
    return future


class _Session:
    def __init__(self, *, max_workers: int = SESSION_WORKERS) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._max_workers = max(1, max_workers)
        self._executor: ThreadPoolExecutor | None = None

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _submit(self, fn: Callable[[], T]) -> Future[T]:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix=type(self).__name__,
            )
        return self._executor.submit(fn)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self: S) -> S:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class SearchSession(_Session):
    """``idle -> searching -> done`` search state over a record store."""

    def __init__(
        self,
        store: RecordStore,
        *,
        limit: int = SEARCH_RESULT_LIMIT,
        max_workers: int = SESSION_WORKERS,
    ) -> None:
        super().__init__(max_workers=max_workers)
        self._store = store
        self._limit = limit
        self._query = ""
        self._state = SearchState.IDLE
        self._results: list[SearchResult] = []

    @property
    def query(self) -> str:
        with self._lock:
            return self._query

    @property
    def state(self) -> SearchState:
        with self._lock:
            return self._state

    @property
    def is_searching(self) -> bool:
        return self.state == SearchState.SEARCHING

    @property
    def results(self) -> list[SearchResult]:
        with self._lock:
            return list(self._results)

    def _begin(self, query: str) -> tuple[int, SearchOutcome | None]:
        with self._lock:
            generation = self._next_generation()
            self._query = query
            if not query.strip():
                self._state = SearchState.IDLE
                self._results = []
                return generation, SearchOutcome(query=query, state=SearchState.IDLE)
            self._state = SearchState.SEARCHING
            return generation, None

    def _run(self, generation: int, query: str) -> SearchOutcome:
        start = time.perf_counter()
        try:
            results = search(
                query,
                self._store.list_tasks(),
                self._store.list_notes(),
                self._store.list_snippets(),
                limit=self._limit,
            )
        except Exception:
            # Store failures belong to the caller; drop the searching flag.
            with self._lock:
                if self._is_current(generation):
                    self._state = SearchState.IDLE
                    self._results = []
            raise
        latency_ms = (time.perf_counter() - start) * 1000
        with self._lock:
            if not self._is_current(generation):
                log_event(logger, "search_superseded", query=query)
                return SearchOutcome(
                    query=query,
                    state=SearchState.DONE,
                    results=results,
                    latency_ms=latency_ms,
                    superseded=True,
                )
            self._state = SearchState.DONE
            self._results = list(results)
        log_event(
            logger,
            "search",
            query=query,
            result_count=len(results),
            elapsed_ms=latency_ms,
            state=SearchState.DONE.value,
        )
        return SearchOutcome(
            query=query,
            state=SearchState.DONE,
            results=results,
            latency_ms=latency_ms,
        )

    def set_query(self, query: str) -> SearchOutcome:
        """Score synchronously; a blank query resets to idle without scanning."""
        generation, cleared = self._begin(query)
        if cleared is not None:
            return cleared
        return self._run(generation, query)

    def submit(self, query: str) -> Future[SearchOutcome]:
        """Score on a worker thread; only the newest submission is published."""
        generation, cleared = self._begin(query)
        if cleared is not None:
            return _resolved(cleared)
        return self._submit(lambda: self._run(generation, query))

    def clear(self) -> SearchOutcome:
        return self.set_query("")


class AnalysisSession(_Session):
    """Holds the metrics of the most recently analyzed text."""

    def __init__(self, *, max_workers: int = SESSION_WORKERS) -> None:
        super().__init__(max_workers=max_workers)
        self._in_flight = 0
        self._metrics: TextMetrics | None = None

    @property
    def is_analyzing(self) -> bool:
        with self._lock:
            return self._in_flight > 0

    @property
    def metrics(self) -> TextMetrics | None:
        with self._lock:
            return self._metrics

    def _begin(self) -> int:
        with self._lock:
            self._in_flight += 1
            return self._next_generation()

    def _run(self, generation: int, text: str) -> TextMetrics:
        start = time.perf_counter()
        try:
            metrics = analyze(text)
        except Exception:
            with self._lock:
                self._in_flight -= 1
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        with self._lock:
            self._in_flight -= 1
            current = self._is_current(generation)
            if current:
                self._metrics = metrics
        if current:
            log_event(
                logger,
                "analyze",
                word_count=metrics.word_count,
                sentiment=metrics.sentiment.value,
                readability_score=metrics.readability_score,
                elapsed_ms=elapsed_ms,
            )
        return metrics

    def analyze_now(self, text: str) -> TextMetrics | None:
        """Analyze synchronously; whitespace-only text leaves the session as is."""
        if not text.strip():
            return None
        return self._run(self._begin(), text)

    def submit(self, text: str) -> Future[TextMetrics | None]:
        if not text.strip():
            return _resolved(None)
        generation = self._begin()
        return self._submit(lambda: self._run(generation, text))
