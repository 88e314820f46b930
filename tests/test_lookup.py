import math

from hypothesis import given
from hypothesis import strategies as st

from dict_extensions.lookup import find_key_by_value, try_find_key_by_value


class _EqualityRecorder:
    def __init__(self) -> None:
        self.compared: list[object] = []

    def __eq__(self, other: object) -> bool:
        self.compared.append(other)
        return False

    __hash__ = object.__hash__


def test_try_find_key_by_value_returns_first_match() -> None:
    assert try_find_key_by_value({"a": 1, "b": 2, "c": 1}, 1) == (True, "a")
    assert try_find_key_by_value({"a": 1, "b": 2, "c": 1}, 2) == (True, "b")


def test_try_find_key_by_value_missing_value() -> None:
    assert try_find_key_by_value({"a": 1}, 3) == (False, None)


def test_try_find_key_by_value_empty_mapping() -> None:
    assert try_find_key_by_value({}, "anything") == (False, None)


def test_try_find_key_by_value_uses_value_equality() -> None:
    mapping = {"first": [1, 2], "second": [3]}
    assert try_find_key_by_value(mapping, [3]) == (True, "second")


def test_try_find_key_by_value_identity_short_circuits_equality() -> None:
    stored = _EqualityRecorder()
    mapping = {"only": stored}

    assert try_find_key_by_value(mapping, stored) == (True, "only")
    assert stored.compared == []


def test_try_find_key_by_value_finds_nan_by_identity() -> None:
    mapping = {"number": 1.0, "missing": math.nan}
    assert try_find_key_by_value(mapping, math.nan) == (True, "missing")


def test_find_key_by_value_default() -> None:
    mapping = {"a": 1}
    assert find_key_by_value(mapping, 1) == "a"
    assert find_key_by_value(mapping, 2) is None
    assert find_key_by_value(mapping, 2, default="fallback") == "fallback"


@given(st.dictionaries(st.text(max_size=5), st.integers(min_value=0, max_value=5), max_size=10), st.integers(0, 5))
def test_try_find_key_by_value_matches_first_equal_entry(mapping: dict[str, int], value: int) -> None:
    expected = next((key for key, candidate in mapping.items() if candidate == value), None)

    found, key = try_find_key_by_value(mapping, value)

    assert found is (expected is not None)
    assert key == expected
