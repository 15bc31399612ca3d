import logging

import pytest

from workspace_insights.models import SnippetRecord
from workspace_insights.search import load_snapshot, truncate_text
from workspace_insights.search.records import (
    iter_search_records,
    snippet_to_search_record,
    task_from_mapping,
)


def test_truncate_text_boundaries() -> None:
    exact = "a" * 100
    assert truncate_text(exact) == exact
    assert truncate_text("a" * 101) == "a" * 100 + "..."
    assert truncate_text("word " * 30) == ("word " * 20).strip() + "..."
    assert truncate_text("short", 3) == "sho..."


def test_load_snapshot_normalizes_records() -> None:
    tasks, notes, snippets = load_snapshot(
        {
            "tasks": [{"id": 1, "title": "Buy milk", "description": None}],
            "notes": [{"id": "n1", "title": "Trip", "content": "Bags", "tags": "travel"}],
            "snippets": [
                {
                    "id": "s1",
                    "title": "Loop",
                    "language": "python",
                    "code": "for x in y: pass",
                    "tags": ["basics", "loops"],
                }
            ],
        }
    )
    assert tasks[0].id == "1"
    assert tasks[0].description == ""
    assert notes[0].tags == ("travel",)
    assert snippets[0].tags == ("basics", "loops")
    assert snippets[0].description == ""


def test_load_snapshot_missing_collections_are_empty() -> None:
    assert load_snapshot({}) == ([], [], [])


def test_malformed_collection_is_logged_and_skipped(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="workspace_insights"):
        tasks, notes, snippets = load_snapshot(
            {"tasks": {"id": "t1"}, "notes": [{"id": "n1", "title": "Kept"}]}
        )
    assert tasks == []
    assert [note.id for note in notes] == ["n1"]
    assert snippets == []
    events = [getattr(record, "event", None) for record in caplog.records]
    assert "records_malformed" in events


def test_record_without_title_is_rejected() -> None:
    with pytest.raises(ValueError):
        task_from_mapping({"id": "t1"})


def test_snippet_fields_order() -> None:
    record = snippet_to_search_record(
        SnippetRecord(
            id="s1",
            title="Fetch",
            description="HTTP helper",
            tags=("net", "http"),
            language="go",
        )
    )
    assert record.fields == ("Fetch", "HTTP helper", "net http", "go")


def test_iter_search_records_is_lazy() -> None:
    def tasks():
        raise AssertionError("tasks should not be read yet")
        yield  # pragma: no cover

    records = iter_search_records(tasks(), [], [])
    with pytest.raises(AssertionError):
        next(records)


def test_non_object_items_are_logged_and_skipped(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="workspace_insights"):
        tasks, notes, snippets = load_snapshot(
            {
                "tasks": ["oops", {"id": "t1", "title": "Kept"}, 7],
                "notes": [None],
            }
        )
    assert [task.id for task in tasks] == ["t1"]
    assert notes == []
    assert snippets == []
    skipped = [
        record
        for record in caplog.records
        if getattr(record, "event", None) == "records_malformed"
    ]
    assert [(record.collection, record.index) for record in skipped] == [
        ("tasks", 0),
        ("tasks", 2),
        ("notes", 0),
    ]


def test_scalar_tags_are_logged_and_dropped(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="workspace_insights"):
        _, notes, snippets = load_snapshot(
            {
                "notes": [{"id": "n1", "title": "Trip", "tags": 5}],
                "snippets": [{"id": "s1", "title": "Loop", "tags": {"a": 1}}],
            }
        )
    assert notes[0].tags == ()
    assert snippets[0].tags == ()
    fields = [
        getattr(record, "field", None)
        for record in caplog.records
        if getattr(record, "event", None) == "records_malformed"
    ]
    assert fields == ["tags", "tags"]


def test_snapshot_must_be_an_object() -> None:
    with pytest.raises(ValueError):
        load_snapshot(["tasks"])
