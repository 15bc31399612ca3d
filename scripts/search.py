"""Script to search tasks, notes and code snippets."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
import time

try:
    from workspace_insights.config import DB_PATH, SEARCH_RESULT_LIMIT
    from workspace_insights.search import load_snapshot, search
    from workspace_insights.storage import (
        connect,
        initialize_schema,
        list_notes,
        list_snippets,
        list_tasks,
        log_run,
    )
    from workspace_insights.telemetry import configure_logging, log_event
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))
    from workspace_insights.config import (  # type: ignore[reportMissingImports]
        DB_PATH,
        SEARCH_RESULT_LIMIT,
    )
    from workspace_insights.search import (  # type: ignore[reportMissingImports]
        load_snapshot,
        search,
    )
    from workspace_insights.storage import (  # type: ignore[reportMissingImports]
        connect,
        initialize_schema,
        list_notes,
        list_snippets,
        list_tasks,
        log_run,
    )
    from workspace_insights.telemetry import (  # type: ignore[reportMissingImports]
        configure_logging,
        log_event,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search workspace records")
    parser.add_argument("query", type=str, help="Query string")
    parser.add_argument(
        "--records",
        type=Path,
        default=None,
        help="JSON snapshot with tasks/notes/snippets (default: the workspace database)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=SEARCH_RESULT_LIMIT,
        help="Maximum number of results",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger = configure_logging()
    start = time.perf_counter()
    if args.records is not None:
        payload = json.loads(args.records.read_text(encoding="utf-8"))
        try:
            tasks, notes, snippets = load_snapshot(payload)
        except ValueError as exc:
            raise SystemExit(f"Invalid snapshot {args.records}: {exc}") from exc
        results = search(args.query, tasks, notes, snippets, limit=args.limit)
        total_latency_ms = (time.perf_counter() - start) * 1000
    else:
        with connect(DB_PATH) as conn:
            initialize_schema(conn)
            results = search(
                args.query,
                list_tasks(conn),
                list_notes(conn),
                list_snippets(conn),
                limit=args.limit,
            )
            total_latency_ms = (time.perf_counter() - start) * 1000
            log_run(
                conn,
                query=args.query,
                results=[result.to_dict() for result in results],
                latency_ms=total_latency_ms,
            )
            conn.commit()

    log_event(
        logger,
        "search",
        query=args.query,
        source=str(args.records) if args.records else str(DB_PATH),
        result_count=len(results),
        elapsed_ms=total_latency_ms,
        state="done" if args.query.strip() else "idle",
    )
    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2))
        return
    for idx, result in enumerate(results, start=1):
        print(f"#{idx} [{result.kind.value}] {result.title} relevance={result.relevance}")
        print(result.snippet)


if __name__ == "__main__":
    main()
