"""Eager operations over lists.

The same operation set as ``collection_fns.iterables``, but every call does
its work immediately and returns a new list. Inputs are never mutated; any
sequence (list, tuple, range) is accepted wherever a list is.

Example:
    from collection_fns import arrays, pipe

    arrays.map([1, 2], lambda x: x * 2)  # [2, 4]
    pipe(
        [{"name": "amy", "age": 21}, {"name": "bob", "age": 2}],
        arrays.sort_by(lambda p: p["age"]),
        arrays.map(lambda p: p["name"]),
    )  # ["bob", "amy"]
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from collection_fns import iterables
from collection_fns._dispatch import dual, dual_optional, indexed
from collection_fns.types.ranges import Number, RangeOptions, coerce_range

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


def of_iterable(source: Iterable[T]) -> list[T]:
    """Creates a list from any iterable, e.g. a generator."""
    return list(source)


@dual
def map(source: Sequence[T], mapping: Callable[..., U]) -> list[U]:
    """Returns a new list of ``mapping(item)`` or ``mapping(item, index)`` for each element.

    Example:
        arrays.map([1, 2], lambda x: x * 2)  # [2, 4]
        pipe([1, 2], arrays.map(lambda x: x * 2))  # [2, 4]
    """
    fn = indexed(mapping)
    return [fn(item, index) for index, item in enumerate(source)]


@dual
def filter(source: Sequence[T], predicate: Callable[..., bool]) -> list[T]:
    """Returns a new list of the elements for which ``predicate`` is true.

    Example:
        arrays.filter([1, 2, 3, 4], lambda x: x % 2 == 0)  # [2, 4]
    """
    fn = indexed(predicate)
    return [item for index, item in enumerate(source) if fn(item, index)]


@dual
def choose(source: Sequence[T], chooser: Callable[..., U | None]) -> list[U]:
    """Returns a new list of the non-None results of ``chooser``.

    Example:
        arrays.choose([1, 2, 3], lambda x: x * 2 if x % 2 else None)  # [2, 6]
    """
    return list(iterables.choose(source, chooser))


@dual
def collect(source: Sequence[T], mapping: Callable[..., Iterable[U]]) -> list[U]:
    """Maps each element to an iterable and concatenates the results.

    Example:
        arrays.collect([1, 2], lambda x: [x, x * 10])  # [1, 10, 2, 20]
    """
    return list(iterables.collect(source, mapping))


@dual
def append(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Returns a new list of ``first`` followed by ``second``.

    The partial shape takes the list to append: ``append(second)(first)``.
    """
    return [*first, *second]


def concat(sources: Iterable[Sequence[T]]) -> list[T]:
    """Returns a new list concatenating every list in ``sources``."""
    return list(iterables.concat(sources))


def distinct(source: Sequence[T]) -> list[T]:
    """Returns a new list keeping the first occurrence of each (hashable) element."""
    return list(iterables.distinct(source))


@dual
def distinct_by(source: Sequence[T], selector: Callable[..., Hashable]) -> list[T]:
    """Returns a new list keeping the first element seen for each key.

    Example:
        arrays.distinct_by(
            [{"name": "amy", "id": 1}, {"name": "amy", "id": 2}],
            lambda x: x["name"],
        )  # [{"name": "amy", "id": 1}]
    """
    return list(iterables.distinct_by(source, selector))


exists = iterables.exists
every = iterables.every
get = iterables.get
find = iterables.find


@dual
def group_by(source: Sequence[T], selector: Callable[..., K]) -> list[tuple[K, list[T]]]:
    """Groups elements by key, in order of each key's first appearance.

    Example:
        arrays.group_by(
            [{"name": "amy", "age": 1}, {"name": "bob", "age": 2}, {"name": "cat", "age": 2}],
            lambda x: x["age"],
        )
        # [(1, [{"name": "amy", "age": 1}]),
        #  (2, [{"name": "bob", "age": 2}, {"name": "cat", "age": 2}])]
    """
    return list(iterables.group_by(source, selector))


def init(options: RangeOptions, initializer: Callable[[Number], T] | None = None) -> list[Any]:
    """Creates a list from a numeric progression.

    Args:
        options: A count, ``{"from", "to", "increment"?}``,
            ``{"start"?, "count", "increment"?}`` or one of the models in
            ``collection_fns.types``
        initializer: Optional function applied to every generated number

    Returns:
        The generated numbers, or the initializer's results for them

    Raises:
        NonTerminatingRangeError: If a from/to range would be of infinite size

    Example:
        arrays.init(3)  # [0, 1, 2]
        arrays.init(3, lambda x: x * x)  # [0, 1, 4]
        arrays.init({"from": 1, "to": 2, "increment": 0.5})  # [1.0, 1.5, 2.0]
        arrays.init({"count": 3, "increment": 2})  # [0, 2, 4]
    """
    progression = coerce_range(options).normalise()
    if initializer is None:
        return list(progression.values())
    return [initializer(value) for value in progression.values()]


@dual
def skip(source: Sequence[T], count: int) -> list[T]:
    """Returns a new list without the first ``count`` elements."""
    return list(source[count if count > 0 else 0 :])


@dual
def take(source: Sequence[T], count: int) -> list[T]:
    """Returns a new list of at most the first ``count`` elements."""
    return list(source[: count if count > 0 else 0])


def pairwise(source: Sequence[T]) -> list[tuple[T, T]]:
    """Returns the overlapping pairs of consecutive elements."""
    return list(iterables.pairwise(source))


def length(source: Sequence[Any]) -> int:
    return len(source)


def count(source: Sequence[Any]) -> int:
    return len(source)


@dual_optional
def sort(source: Sequence[T], selector: Callable[[T], Any] | None = None) -> list[T]:
    """Returns a new, stably sorted list.

    Elements are compared directly unless a key ``selector`` is given.

    Example:
        arrays.sort([21, 2, 18])  # [2, 18, 21]
        arrays.sort(people, lambda p: p["age"])
        pipe(people, arrays.sort(lambda p: p["age"]))
    """
    return sorted(source, key=selector)


@dual_optional
def sort_descending(source: Sequence[T], selector: Callable[[T], Any] | None = None) -> list[T]:
    """Returns a new list sorted in descending order; equal keys keep their order."""
    return sorted(source, key=selector, reverse=True)


@dual
def sort_by(source: Sequence[T], selector: Callable[[T], Any]) -> list[T]:
    """Returns a new list ordered by the key ``selector`` returns."""
    return sorted(source, key=selector)


@dual
def sort_by_descending(source: Sequence[T], selector: Callable[[T], Any]) -> list[T]:
    """Returns a new list ordered by the key ``selector`` returns, descending."""
    return sorted(source, key=selector, reverse=True)


def reverse(source: Sequence[T]) -> list[T]:
    """Returns a new list with the elements last to first."""
    reversed_ = list(source)
    reversed_.reverse()
    return reversed_


# Aggregates read the input once, so the lazy versions serve lists unchanged.
sum = iterables.sum
sum_by = iterables.sum_by
max = iterables.max
max_by = iterables.max_by
min = iterables.min
min_by = iterables.min_by
mean = iterables.mean
mean_by = iterables.mean_by
