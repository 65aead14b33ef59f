"""Eager operations over dicts.

Maps are insertion ordered and key unique. Two rules decide which value
survives when keys repeat, and they differ:

- construction (``of_iterable``/``of_list``) keeps the FIRST value seen for
  a key, the same rule as ``iterables.distinct_by``;
- merging (``append``/``concat``) keeps the LAST, so later maps override
  earlier ones.

Map callbacks take ``(key, value)``. Any ``Mapping`` is accepted as input;
outputs are always new dicts.

Example:
    from collection_fns import maps

    maps.of_list([("a", 1), ("a", 2)])  # {"a": 1}
    maps.append({"a": 1}, {"a": 2})     # {"a": 2}
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from collections.abc import Set as AbstractSet
from typing import Any, TypeVar

from collection_fns import iterables
from collection_fns._dispatch import dual
from collection_fns.errors import KeyNotFoundError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
U = TypeVar("U")


def _entry_key(entry: tuple[K, Any]) -> K:
    return entry[0]


def of_iterable(source: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Creates a dict from key-value pairs; the first value for a repeated key wins.

    Example:
        maps.of_iterable(iter([("a", 1), ("b", 2), ("a", 3)]))  # {"a": 1, "b": 2}
    """
    return dict(iterables.distinct_by(source, _entry_key))


def of_list(source: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Creates a dict from a list of pairs; the first value for a repeated key wins."""
    return of_iterable(source)


def of_set(source: AbstractSet[K]) -> dict[K, K]:
    """Creates a dict mapping every element of the set to itself."""
    return {item: item for item in source}


def as_iterable(source: Mapping[K, V]) -> Iterable[tuple[K, V]]:
    """Views the map as a re-iterable collection of ``(key, value)`` pairs."""
    return source.items()


def to_list(source: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(source.items())


@dual
def map(source: Mapping[K, V], mapping: Callable[[K, V], U]) -> dict[K, U]:
    """Returns a new dict with every value replaced by ``mapping(key, value)``.

    Keys and their order are preserved.

    Example:
        maps.map({"a": 1, "b": 2}, lambda key, value: f"{key}{value}")  # {"a": "a1", "b": "b2"}
    """
    return {key: mapping(key, value) for key, value in source.items()}


@dual
def filter(source: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Returns a new dict of the entries for which ``predicate(key, value)`` is true."""
    return dict(iterables.filter(source.items(), lambda entry: predicate(*entry)))


@dual
def choose(source: Mapping[K, V], chooser: Callable[[K, V], U | None]) -> dict[K, U]:
    """Returns a new dict of the non-None ``chooser(key, value)`` results under their keys."""
    return {
        key: chosen
        for key, value in source.items()
        if (chosen := chooser(key, value)) is not None
    }


@dual
def append(first: Mapping[K, V], second: Mapping[K, V]) -> dict[K, V]:
    """Merges two maps; entries in ``second`` override those in ``first``.

    The partial shape takes the map to append: ``append(second)(first)``.
    """
    return dict(iterables.append(first.items(), second.items()))


def concat(sources: Iterable[Mapping[K, V]]) -> dict[K, V]:
    """Merges every map in ``sources``; later maps override earlier ones."""
    return dict(iterables.concat(source.items() for source in sources))


@dual
def get(source: Mapping[K, V], key: K) -> V:
    """Returns the value stored under ``key``.

    Args:
        source: The input map
        key: The key to look up

    Returns:
        The stored value

    Raises:
        KeyNotFoundError: If the key is missing. Use ``find`` when absence is
            not exceptional.
    """
    if key not in source:
        logger.debug("get found no entry for key %r", key)
        raise KeyNotFoundError(key)
    return source[key]


@dual
def find(source: Mapping[K, V], key: K) -> V | None:
    """Returns the value stored under ``key``, or None when it is missing."""
    return source.get(key)


@dual
def exists(source: Mapping[K, V], predicate: Callable[[K, V], bool]) -> bool:
    """Tests whether any entry satisfies ``predicate(key, value)``."""
    return iterables.exists(source.items(), lambda entry: predicate(*entry))


@dual
def every(source: Mapping[K, V], predicate: Callable[[K, V], bool]) -> bool:
    """Tests whether all entries satisfy ``predicate(key, value)``."""
    return iterables.every(source.items(), lambda entry: predicate(*entry))


@dual
def contains_key(source: Mapping[Any, Any], key: Any) -> bool:
    return key in source


def count(source: Mapping[Any, Any]) -> int:
    return len(source)
