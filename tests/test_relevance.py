from workspace_insights.search.relevance import (
    field_weight,
    query_terms,
    score_fields,
    score_query,
    score_term,
)


def test_field_weights_by_position() -> None:
    assert field_weight(0) == 3
    assert field_weight(1) == 2
    assert field_weight(2) == 1
    assert field_weight(7) == 1


def test_query_terms_lowercase_and_split_on_whitespace() -> None:
    assert query_terms("  Buy   MILK\tnow ") == ["buy", "milk", "now"]
    assert query_terms("   ") == []


def test_title_match_outranks_low_weight_field() -> None:
    title_score = score_fields(["task"], ["task"])
    tag_score = score_fields(["task"], ["", "", "task"])
    assert title_score == 18
    assert tag_score == 6
    assert title_score > tag_score


def test_whole_words_are_also_counted_as_substrings() -> None:
    # One whole-word hit plus two substring hits, no prefix bonus.
    assert score_fields(["cat"], ["concatenate cat"]) == 12


def test_matching_is_case_insensitive() -> None:
    assert score_query("HELLO", ["Hello World"]) == 18


def test_terms_sum_across_fields() -> None:
    assert score_query("Buy milk", ["Buy milk", "from the store"]) == 27


def test_absent_term_and_empty_field_score_zero() -> None:
    assert score_term("zebra", "buy milk", 3) == 0
    assert score_fields(["milk"], ["", ""]) == 0


def test_regex_metacharacters_are_literal() -> None:
    # No word boundary after "+", so only the substring and prefix rules apply.
    assert score_fields(["c++"], ["c++ tips"]) == 12
    assert score_fields(["(draft"], ["notes (draft"]) == 3
