import pytest

from html_textify.services.wrapping import InvalidArgumentError, wrap_by_length, wrap_by_words


def test_wrap_by_words_groups_fixed_counts() -> None:
    assert wrap_by_words("one two three four five", 2) == "one two\nthree four\nfive"


def test_wrap_by_words_collapses_whitespace_runs() -> None:
    assert wrap_by_words("  one\ttwo\n\nthree  ", 5) == "one two three"


def test_wrap_by_words_rejects_non_positive_count() -> None:
    with pytest.raises(InvalidArgumentError):
        wrap_by_words("one two", 0)
    with pytest.raises(ValueError):
        wrap_by_words("one two", -3)


def test_wrap_by_words_empty_text() -> None:
    assert wrap_by_words("   ", 3) == ""


def test_wrap_by_length_greedy() -> None:
    result = wrap_by_length("This is a test sentence for wrapping.", 10)
    assert result == "This is a\ntest\nsentence\nfor\nwrapping."


def test_wrap_by_length_keeps_long_word_on_its_own_line() -> None:
    assert wrap_by_length("a extraordinarily b", 5) == "a\nextraordinarily\nb"


def test_wrap_by_length_line_may_reach_budget_exactly() -> None:
    assert wrap_by_length("abc de fg", 6) == "abc de\nfg"


def test_wrap_by_length_non_positive_budget_is_a_no_op() -> None:
    assert wrap_by_length("left  as is", 0) == "left  as is"
