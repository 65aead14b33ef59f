"""Tests for the eager maps module."""

import pytest

from collection_fns import iterables, maps, pipe
from collection_fns.errors import KeyNotFoundError


class TestConstruction:
    """Test cases for building and viewing maps."""

    def test_of_iterable(self):
        """Test building from a generator of pairs."""

        def source():
            yield ("a", 1)
            yield ("b", 2)

        assert maps.of_iterable(source()) == {"a": 1, "b": 2}

    def test_of_list(self):
        """Test building from a list of pairs."""
        assert maps.of_list([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}

    def test_first_value_wins_on_construction(self):
        """Test a repeated key keeps its first value and position."""
        result = maps.of_list([("a", 1), ("b", 2), ("a", 3)])
        assert result == {"a": 1, "b": 2}
        assert list(result) == ["a", "b"]

    def test_of_set(self):
        """Test every element maps to itself."""
        assert maps.of_set({"a", "b"}) == {"a": "a", "b": "b"}

    def test_as_iterable(self):
        """Test a map iterates as key-value pairs."""
        assert iterables.to_list(maps.as_iterable({"a": 1, "b": 2})) == [("a", 1), ("b", 2)]

    def test_to_list(self):
        """Test converting to a list of pairs."""
        assert maps.to_list({"a": 1}) == [("a", 1)]


class TestMap:
    """Test cases for map."""

    def test_immediate(self):
        """Test direct invocation receives key and value."""
        assert maps.map({"a": 1, "b": 2}, lambda key, value: f"{key}{value}") == {"a": "a1", "b": "b2"}

    def test_piped(self):
        """Test partial invocation keeps key order."""
        result = pipe({"b": 2, "a": 1}, maps.map(lambda key, value: value * 10))
        assert result == {"b": 20, "a": 10}
        assert list(result) == ["b", "a"]


class TestFilterChoose:
    """Test cases for filter and choose."""

    def test_filter(self):
        """Test filtering on key and value."""
        source = {"a": 1, "b": 2, "c": 3}
        assert maps.filter(source, lambda key, value: value % 2 == 1) == {"a": 1, "c": 3}
        assert pipe(source, maps.filter(lambda key, value: key == "b")) == {"b": 2}

    def test_choose(self):
        """Test None results drop the entry."""
        source = {"a": 1, "b": 2, "c": 3}
        chooser = lambda key, value: value * 2 if value % 2 == 1 else None  # noqa: E731
        assert maps.choose(source, chooser) == {"a": 2, "c": 6}
        assert pipe(source, maps.choose(chooser)) == {"a": 2, "c": 6}


class TestAppendConcat:
    """Test cases for append and concat."""

    def test_append(self):
        """Test merging two maps."""
        assert maps.append({"a": 1, "b": 2}, {"b": 2, "c": 3}) == {"a": 1, "b": 2, "c": 3}

    def test_append_piped(self):
        """Test the partial shape takes the second map."""
        assert pipe({"a": 1}, maps.append({"b": 2, "c": 3})) == {"a": 1, "b": 2, "c": 3}

    def test_last_value_wins_on_merge(self):
        """Test the later map overrides the earlier one."""
        assert maps.append({"a": 1}, {"a": 2}) == {"a": 2}

    def test_concat(self):
        """Test merging many maps, later ones winning."""
        result = maps.concat([{"a": 1, "b": 2}, {"b": 3, "c": 3}, {"c": 4}])
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_append_does_not_mutate(self):
        """Test inputs are left unchanged."""
        first = {"a": 1}
        maps.append(first, {"a": 2})
        assert first == {"a": 1}


class TestGetFind:
    """Test cases for get and find."""

    def test_get(self):
        """Test looking up a present key in both shapes."""
        assert maps.get({"a": 1}, "a") == 1
        assert pipe({"a": 1}, maps.get("a")) == 1

    def test_get_missing_raises(self):
        """Test a missing key raises KeyNotFoundError carrying the key."""
        with pytest.raises(KeyNotFoundError, match="Specified key not found") as excinfo:
            maps.get({"a": 1}, "b")
        assert excinfo.value.key == "b"

    def test_get_missing_is_key_error(self):
        """Test KeyNotFoundError is catchable as KeyError."""
        with pytest.raises(KeyError):
            pipe({}, maps.get("a"))

    def test_find(self):
        """Test find returns the value or None, never raising."""
        assert maps.find({"a": 1}, "a") == 1
        assert pipe({"a": 1}, maps.find("b")) is None

    def test_get_with_callable_key(self):
        """Test keys that happen to be callable dispatch on arity, not type."""
        source = {len: "length"}
        assert maps.get(source, len) == "length"
        assert pipe(source, maps.get(len)) == "length"


class TestPredicates:
    """Test cases for exists, every and contains_key."""

    def test_exists(self):
        """Test exists on key-value pairs."""
        assert maps.exists({"a": 1, "b": 2}, lambda key, value: value == 2) is True
        assert pipe({"a": 1}, maps.exists(lambda key, value: key == "b")) is False

    def test_every(self):
        """Test every on key-value pairs."""
        assert maps.every({"a": 1, "b": 2}, lambda key, value: value > 0) is True
        assert pipe({"a": 1, "b": 2}, maps.every(lambda key, value: key == "a")) is False

    def test_contains_key(self):
        """Test key membership in both shapes."""
        assert maps.contains_key({"a": 1}, "a") is True
        assert pipe({"a": 1}, maps.contains_key("b")) is False


class TestCount:
    """Test cases for count."""

    def test_count(self):
        """Test the number of entries."""
        assert maps.count({"a": 1, "b": 2}) == 2
        assert pipe({}, maps.count) == 0
