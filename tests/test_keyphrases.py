from workspace_insights.analysis.keyphrases import (
    STOPWORDS,
    extract_key_phrases,
    normalize_token,
    term_frequencies,
)


def test_frequency_order_with_first_occurrence_ties() -> None:
    words = "cat cat dog dog dog bird".split()
    assert extract_key_phrases(words) == ["dog", "cat", "bird"]


def test_ties_keep_first_occurrence_order() -> None:
    words = "zebra apple mango apple zebra".split()
    assert extract_key_phrases(words) == ["zebra", "apple", "mango"]


def test_stopwords_and_short_tokens_are_dropped() -> None:
    words = "The cat and the hat were on it".split()
    assert extract_key_phrases(words) == ["cat", "hat"]
    assert "were" in STOPWORDS


def test_tokens_are_lowercased_and_stripped() -> None:
    assert normalize_token("PYTHON!") == "python"
    assert normalize_token("snake_case,") == "snake_case"
    assert extract_key_phrases("Python! python, PYTHON.".split()) == ["python"]


def test_limit_of_ten_distinct_tokens() -> None:
    words = [f"word{index:02d}" for index in range(12)]
    assert extract_key_phrases(words) == words[:10]
    assert extract_key_phrases(words, limit=3) == words[:3]


def test_term_frequencies_preserve_insertion_order() -> None:
    frequencies = term_frequencies("beta alpha beta gamma".split())
    assert list(frequencies) == ["beta", "alpha", "gamma"]
    assert frequencies["beta"] == 2


def test_empty_input_has_no_phrases() -> None:
    assert extract_key_phrases([]) == []
