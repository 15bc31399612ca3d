from workspace_insights.models import (
    NoteRecord,
    RecordKind,
    SnippetRecord,
    TaskRecord,
)
from workspace_insights.search import search


class _Untouchable:
    def __iter__(self):
        raise AssertionError("collection should not be read for a blank query")


def test_blank_query_reads_nothing() -> None:
    untouched = _Untouchable()
    assert search("", untouched, untouched, untouched) == []
    assert search("   \t", untouched, untouched, untouched) == []


def test_records_without_matches_are_excluded() -> None:
    tasks = [TaskRecord(id="t1", title="Buy milk")]
    notes = [NoteRecord(id="n1", title="Trip", content="pack bags")]
    assert search("zebra", tasks, notes, []) == []


def test_title_match_ranks_above_tag_match() -> None:
    tasks = [TaskRecord(id="t1", title="task")]
    notes = [NoteRecord(id="n1", title="Groceries", content="milk", tags=("task",))]
    results = search("task", [], notes, []) + search("task", tasks, [], [])
    assert [result.relevance for result in results] == [6, 18]

    ranked = search("task", tasks, notes, [])
    assert [result.id for result in ranked] == ["t1", "n1"]
    assert ranked[0].kind == RecordKind.TASK
    assert ranked[1].kind == RecordKind.NOTE


def test_ties_keep_tasks_notes_snippets_order() -> None:
    tasks = [TaskRecord(id="t1", title="deploy")]
    notes = [NoteRecord(id="n1", title="deploy")]
    snippets = [SnippetRecord(id="s1", title="deploy")]
    results = search("deploy", tasks, notes, snippets)
    assert [result.id for result in results] == ["t1", "n1", "s1"]
    assert {result.relevance for result in results} == {18}


def test_results_are_sorted_and_truncated_to_twenty() -> None:
    tasks = [
        TaskRecord(
            id=str(index),
            title=f"report {index}",
            description="report" if index % 5 == 0 else "",
        )
        for index in range(25)
    ]
    results = search("report", tasks, [], [])
    boosted = ["0", "5", "10", "15", "20"]
    rest = [str(index) for index in range(25) if index % 5 != 0][:15]
    assert [result.id for result in results] == boosted + rest
    assert [result.relevance for result in results[:5]] == [30] * 5
    assert all(result.relevance == 18 for result in results[5:])


def test_limit_is_configurable() -> None:
    tasks = [TaskRecord(id=str(index), title="report") for index in range(5)]
    assert len(search("report", tasks, [], [], limit=2)) == 2


def test_snippet_text_per_kind() -> None:
    tasks = [
        TaskRecord(id="t1", title="Ship release"),
        TaskRecord(id="t2", title="Ship docs", description="Write the ship notes"),
    ]
    notes = [NoteRecord(id="n1", title="Ship log", content="x" * 150)]
    snippets = [
        SnippetRecord(id="s1", title="ship script", language="python"),
        SnippetRecord(id="s2", title="ship hook", description="Runs after ship"),
    ]
    results = {result.id: result for result in search("ship", tasks, notes, snippets)}
    assert results["t1"].snippet == "Ship release"
    assert results["t2"].snippet == "Write the ship notes"
    assert results["n1"].snippet == "x" * 100 + "..."
    assert results["s1"].snippet == "python code snippet"
    assert results["s2"].snippet == "Runs after ship"


def test_snippet_language_and_tags_are_searchable() -> None:
    snippets = [
        SnippetRecord(id="s1", title="Parser", tags=("regex",), language="rust"),
    ]
    assert [result.id for result in search("rust", [], [], snippets)] == ["s1"]
    assert [result.id for result in search("regex", [], [], snippets)] == ["s1"]


def test_result_to_dict() -> None:
    tasks = [TaskRecord(id="t1", title="Plan sprint")]
    payload = search("plan", tasks, [], [])[0].to_dict()
    assert payload == {
        "id": "t1",
        "kind": "task",
        "title": "Plan sprint",
        "snippet": "Plan sprint",
        "relevance": 18,
    }
