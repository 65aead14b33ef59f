"""Eager operations over sets.

Transformations hand the set to the matching ``collection_fns.iterables``
operation and collect the result into a new set, so duplicate outputs
collapse: ``sets.map({1, 2, 3}, lambda x: x % 2)`` is ``{0, 1}``. Any
``AbstractSet`` (including frozenset) is accepted as input; the output is
always a new ``set``.

Set callbacks take the element only. Iteration order, and therefore which
element ``get``/``find`` return when several match, is whatever Python's set
iteration order is for the given contents.
"""

from collections.abc import Callable, Hashable, Iterable
from collections.abc import Set as AbstractSet
from typing import Any, TypeVar

from collection_fns import iterables
from collection_fns._dispatch import dual

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)


def _item_only(fn: Callable[[T], Any]) -> Callable[[T], Any]:
    # Sets are unordered, so callbacks never receive an index
    return lambda item: fn(item)


def of_iterable(source: Iterable[T]) -> set[T]:
    """Creates a set from any iterable, dropping duplicates."""
    return set(source)


def of_list(source: Iterable[T]) -> set[T]:
    return set(source)


def as_iterable(source: AbstractSet[T]) -> Iterable[T]:
    return source


def to_list(source: AbstractSet[T]) -> list[T]:
    return list(source)


@dual
def map(source: AbstractSet[T], mapping: Callable[[T], U]) -> set[U]:
    """Returns the set of ``mapping(item)`` results; may be smaller than ``source``.

    Example:
        sets.map({1, 2, 3}, lambda x: x % 2)  # {0, 1}
        pipe({1, 2, 3}, sets.map(lambda x: x % 2))  # {0, 1}
    """
    return set(iterables.map(source, _item_only(mapping)))


@dual
def filter(source: AbstractSet[T], predicate: Callable[[T], bool]) -> set[T]:
    return set(iterables.filter(source, _item_only(predicate)))


@dual
def choose(source: AbstractSet[T], chooser: Callable[[T], U | None]) -> set[U]:
    """Returns the set of non-None ``chooser(item)`` results."""
    return set(iterables.choose(source, _item_only(chooser)))


@dual
def collect(source: AbstractSet[T], mapping: Callable[[T], Iterable[U]]) -> set[U]:
    """Returns the union of the iterables ``mapping`` produces for each element."""
    return set(iterables.collect(source, _item_only(mapping)))


@dual
def append(first: AbstractSet[T], second: AbstractSet[T]) -> set[T]:
    """Returns the union of two sets; ``append(second)(first)`` in partial form."""
    return set(iterables.append(first, second))


def concat(sources: Iterable[AbstractSet[T]]) -> set[T]:
    """Returns the union of every set in ``sources``."""
    return set(iterables.concat(sources))


@dual
def exists(source: AbstractSet[T], predicate: Callable[[T], bool]) -> bool:
    return iterables.exists(source, _item_only(predicate))


@dual
def every(source: AbstractSet[T], predicate: Callable[[T], bool]) -> bool:
    return iterables.every(source, _item_only(predicate))


@dual
def contains(source: AbstractSet[Any], item: Any) -> bool:
    """Tests membership using the set's own hash lookup."""
    return item in source


@dual
def get(source: AbstractSet[T], predicate: Callable[[T], bool]) -> T:
    """Returns an element for which ``predicate`` is true.

    Raises:
        ElementNotFoundError: If no element matches
    """
    return iterables.get(source, _item_only(predicate))


@dual
def find(source: AbstractSet[T], predicate: Callable[[T], bool]) -> T | None:
    """Returns an element for which ``predicate`` is true, or None."""
    return iterables.find(source, _item_only(predicate))


def count(source: AbstractSet[Any]) -> int:
    return len(source)
