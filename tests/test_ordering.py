import pytest

from skin_layout_generator.ordering import (
    DefaultOrdering,
    NumericTokenOrdering,
    ordering_for_folder,
)


def test_default_ordering_preserves_input():
    names = ["zebra", "apple", "mango"]
    assert DefaultOrdering().apply(names) == names


def test_numeric_ordering_sorts_by_index_token():
    names = ["e_3_x", "e_1_y", "e_2_z"]
    assert NumericTokenOrdering().apply(names) == ["e_1_y", "e_2_z", "e_3_x"]


def test_numeric_ordering_compares_integers_not_text():
    names = ["e_10", "e_9", "e_100", "e_1"]
    assert NumericTokenOrdering().apply(names) == ["e_1", "e_9", "e_10", "e_100"]


def test_numeric_ordering_is_stable_for_equal_tokens():
    names = ["b_1_second", "a_1_first", "c_0"]
    assert NumericTokenOrdering().apply(names) == ["c_0", "b_1_second", "a_1_first"]


def test_numeric_ordering_custom_separator():
    ordering = NumericTokenOrdering(separator="-", token_index=2)
    assert ordering.apply(["x-a-5", "x-b-2"]) == ["x-b-2", "x-a-5"]


def test_numeric_ordering_rejects_non_numeric_token():
    with pytest.raises(ValueError) as exc:
        NumericTokenOrdering().apply(["e_1_x", "e_smile"])
    assert "e_smile" in str(exc.value)


def test_numeric_ordering_rejects_missing_token():
    with pytest.raises(ValueError) as exc:
        NumericTokenOrdering().apply(["plain"])
    assert "plain" in str(exc.value)


def test_ordering_for_folder():
    assert ordering_for_folder("1_Emojis") == NumericTokenOrdering()
    assert ordering_for_folder("Hats") == DefaultOrdering()
    assert ordering_for_folder("1_emojis") == DefaultOrdering()
