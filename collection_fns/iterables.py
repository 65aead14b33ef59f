"""Lazy, pull-based operations over iterables.

Every transformation here returns an iterator that does no work until it is
pulled from, so operations are safe to use on infinite sources as long as a
bounding step such as ``take`` comes before anything that consumes the whole
sequence (``to_list``, ``length``, ``sort``, ``group_by``, aggregates).

Results are one-shot iterators. Running the operation again over a
re-iterable source (a list, a range, a set) produces a fresh traversal whose
callback indices start again at 0.

Transformations support a direct and a partial call shape:

    iterables.map([1, 2], lambda x: x * 2)          # direct
    pipe([1, 2], iterables.map(lambda x: x * 2))    # partial

Callbacks to map/filter/choose/collect/distinct_by/exists/every/get/find/
group_by may take ``(item)`` or ``(item, index)``.

The Set and Map modules delegate their iteration to the functions here so
that tie-breaking rules are the same everywhere.
"""

import builtins
import itertools
import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from collection_fns._dispatch import dual, dual_optional, indexed
from collection_fns.errors import ElementNotFoundError, EmptyCollectionError
from collection_fns.types.ranges import InfiniteOptions, Number, RangeOptions, coerce_infinite, coerce_range

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

_MISSING: Any = object()


def to_list(source: Iterable[T]) -> list[T]:
    """Materializes the iterable into a new list.

    Example:
        iterables.to_list(iterables.init(3))  # [0, 1, 2]
    """
    return list(source)


@dual
def map(source: Iterable[T], mapping: Callable[..., U]) -> Iterator[U]:
    """Lazily applies ``mapping`` to each element.

    Args:
        source: The input collection
        mapping: Function of ``(item)`` or ``(item, index)``

    Returns:
        An iterator over the mapped values, one per source element

    Example:
        list(iterables.map([1, 2], lambda x: x * 2))  # [2, 4]
        pipe([1, 2], iterables.map(lambda x, i: x + i), list)  # [1, 3]
    """
    fn = indexed(mapping)
    for index, item in enumerate(source):
        yield fn(item, index)


@dual
def filter(source: Iterable[T], predicate: Callable[..., bool]) -> Iterator[T]:
    """Lazily yields the elements for which ``predicate`` is true.

    Example:
        list(iterables.filter([1, 2, 3, 4], lambda x: x % 2 == 0))  # [2, 4]
    """
    fn = indexed(predicate)
    for index, item in enumerate(source):
        if fn(item, index):
            yield item


@dual
def choose(source: Iterable[T], chooser: Callable[..., U | None]) -> Iterator[U]:
    """Lazily maps each element, dropping those mapped to ``None``.

    A fused filter and map: ``chooser`` returns the value to keep, or None to
    leave the element out.

    Example:
        list(iterables.choose([1, 2, 3], lambda x: x * 2 if x % 2 else None))  # [2, 6]
    """
    fn = indexed(chooser)
    for index, item in enumerate(source):
        chosen = fn(item, index)
        if chosen is not None:
            yield chosen


@dual
def collect(source: Iterable[T], mapping: Callable[..., Iterable[U]]) -> Iterator[U]:
    """Maps each element to an iterable and lazily flattens the results.

    Example:
        list(iterables.collect([1, 2], lambda x: [x, x * 10]))  # [1, 10, 2, 20]
    """
    fn = indexed(mapping)
    for index, item in enumerate(source):
        yield from fn(item, index)


@dual
def append(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Lazily yields every element of ``first`` and then of ``second``.

    The partial shape takes the iterable to append: ``append(second)(first)``.

    Example:
        list(iterables.append([1, 2], [3]))  # [1, 2, 3]
        pipe([1, 2], iterables.append([3]), list)  # [1, 2, 3]
    """
    yield from first
    yield from second


def concat(sources: Iterable[Iterable[T]]) -> Iterator[T]:
    """Lazily flattens an iterable of iterables, in order."""
    for source in sources:
        yield from source


def distinct(source: Iterable[T]) -> Iterator[T]:
    """Lazily yields each element the first time it is seen.

    Elements must be hashable.
    """
    seen: set[Any] = set()
    for item in source:
        if item not in seen:
            seen.add(item)
            yield item


@dual
def distinct_by(source: Iterable[T], selector: Callable[..., Hashable]) -> Iterator[T]:
    """Lazily yields the first element seen for each key.

    Later elements whose key has already been produced are discarded. The set
    of seen keys lives for the whole traversal.

    Args:
        source: The input collection
        selector: Function of ``(item)`` or ``(item, index)`` returning a
            hashable key

    Example:
        list(iterables.distinct_by(
            [{"name": "amy", "id": 1}, {"name": "amy", "id": 2}],
            lambda x: x["name"],
        ))  # [{"name": "amy", "id": 1}]
    """
    fn = indexed(selector)
    seen: set[Hashable] = set()
    for index, item in enumerate(source):
        key = fn(item, index)
        if key not in seen:
            seen.add(key)
            yield item


@dual
def exists(source: Iterable[T], predicate: Callable[..., bool]) -> bool:
    """Tests whether any element satisfies ``predicate``, stopping at the first match."""
    fn = indexed(predicate)
    return any(fn(item, index) for index, item in enumerate(source))


@dual
def every(source: Iterable[T], predicate: Callable[..., bool]) -> bool:
    """Tests whether all elements satisfy ``predicate``, stopping at the first miss.

    An empty iterable satisfies every predicate.
    """
    fn = indexed(predicate)
    return all(fn(item, index) for index, item in enumerate(source))


@dual
def get(source: Iterable[T], predicate: Callable[..., bool]) -> T:
    """Returns the first element for which ``predicate`` is true.

    Args:
        source: The input collection
        predicate: Function of ``(item)`` or ``(item, index)``

    Returns:
        The first matching element

    Raises:
        ElementNotFoundError: If the iterable is exhausted without a match.
            Use ``find`` when absence is not exceptional.
    """
    fn = indexed(predicate)
    for index, item in enumerate(source):
        if fn(item, index):
            return item
    logger.debug("get exhausted its source without a match")
    raise ElementNotFoundError()


@dual
def find(source: Iterable[T], predicate: Callable[..., bool]) -> T | None:
    """Returns the first element for which ``predicate`` is true, or None."""
    fn = indexed(predicate)
    for index, item in enumerate(source):
        if fn(item, index):
            return item
    return None


@dual
def group_by(source: Iterable[T], selector: Callable[..., K]) -> Iterator[tuple[K, list[T]]]:
    """Groups elements by key.

    Grouping needs the whole input, so the source is consumed as soon as this
    is called. Keys come out in order of first appearance and each group keeps
    the source order of its elements.

    Args:
        source: The input collection
        selector: Function of ``(item)`` or ``(item, index)`` returning a
            hashable key

    Returns:
        An iterator of ``(key, elements)`` pairs

    Example:
        list(iterables.group_by([{"age": 1}, {"age": 2}, {"age": 2}], lambda x: x["age"]))
        # [(1, [{"age": 1}]), (2, [{"age": 2}, {"age": 2}])]
    """
    fn = indexed(selector)
    groups: dict[K, list[T]] = {}
    for index, item in enumerate(source):
        groups.setdefault(fn(item, index), []).append(item)
    return iter(groups.items())


def init(options: RangeOptions) -> Iterator[Number]:
    """Generates a finite numeric progression.

    The options are validated when this is called; the numbers themselves are
    produced lazily.

    Args:
        options: A count, ``{"from", "to", "increment"?}``,
            ``{"start"?, "count", "increment"?}`` or one of the models in
            ``collection_fns.types``

    Returns:
        An iterator over the progression

    Raises:
        NonTerminatingRangeError: If a from/to range has an explicit increment
            that is zero or points away from ``to``. Use ``init_infinite``
            when an unbounded sequence is really wanted.

    Example:
        list(iterables.init(3))  # [0, 1, 2]
        list(iterables.init({"from": 1, "to": -1}))  # [1, 0, -1]
        list(iterables.init({"start": 3, "count": 3, "increment": 2}))  # [3, 5, 7]
    """
    return coerce_range(options).normalise().values()


def init_infinite(options: InfiniteOptions = None) -> Iterator[Number]:
    """Generates an unbounded progression, ``start`` then every ``increment``.

    Example:
        pipe(iterables.init_infinite({"start": 5}), iterables.take(3), list)  # [5, 6, 7]
    """
    progression = coerce_infinite(options)
    return itertools.count(progression.start, progression.increment)


@dual
def skip(source: Iterable[T], count: int) -> Iterator[T]:
    """Lazily drops the first ``count`` elements and yields the rest."""
    return itertools.islice(source, count if count > 0 else 0, None)


@dual
def take(source: Iterable[T], count: int) -> Iterator[T]:
    """Lazily yields at most ``count`` elements.

    No element past ``count`` is pulled from the source, which makes this the
    way to bound an infinite sequence.
    """
    return itertools.islice(source, count if count > 0 else 0)


def pairwise(source: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Lazily yields overlapping pairs of consecutive elements.

    Fewer than two elements produce no pairs.

    Example:
        list(iterables.pairwise([1, 2, 3]))  # [(1, 2), (2, 3)]
    """
    return itertools.pairwise(source)


def length(source: Iterable[Any]) -> int:
    """Counts the elements by consuming the whole iterable."""
    return count(source)


def count(source: Iterable[Any]) -> int:
    """Counts the elements by consuming the whole iterable."""
    return builtins.sum(1 for _ in source)


@dual_optional
def sort(source: Iterable[T], selector: Callable[[T], Any] | None = None) -> Iterator[T]:
    """Lazily yields the elements in ascending order.

    Elements are compared directly unless a key ``selector`` is given. The
    sort is stable, and happens on the first pull.

    Example:
        list(iterables.sort([21, 2, 18]))  # [2, 18, 21]
        pipe(people, iterables.sort(lambda p: p.age), list)
    """
    yield from sorted(source, key=selector)


@dual_optional
def sort_descending(source: Iterable[T], selector: Callable[[T], Any] | None = None) -> Iterator[T]:
    """Lazily yields the elements in descending order; stable for equal keys."""
    yield from sorted(source, key=selector, reverse=True)


@dual
def sort_by(source: Iterable[T], selector: Callable[[T], Any]) -> Iterator[T]:
    """Lazily yields the elements ordered by the key ``selector`` returns."""
    yield from sorted(source, key=selector)


@dual
def sort_by_descending(source: Iterable[T], selector: Callable[[T], Any]) -> Iterator[T]:
    yield from sorted(source, key=selector, reverse=True)


def reverse(source: Iterable[T]) -> Iterator[T]:
    """Lazily yields the elements last to first; the source is read on the first pull."""
    yield from reversed(list(source))


def sum(source: Iterable[Number]) -> Number:
    """Adds up the elements; an empty iterable sums to 0."""
    return builtins.sum(source)


@dual
def sum_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    """Adds up ``selector(item)`` over the elements; an empty iterable sums to 0."""
    return builtins.sum(selector(item) for item in source)


def _identity(item: T) -> T:
    return item


def max(source: Iterable[Number]) -> Number:
    """Returns the largest element.

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    return max_by(source, _identity)


@dual
def max_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    """Returns the largest value of ``selector(item)`` over the elements.

    Args:
        source: The input collection
        selector: Function transforming each element into a comparable value

    Returns:
        The maximum selected value (not the element that produced it)

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    result = builtins.max((selector(item) for item in source), default=_MISSING)
    if result is _MISSING:
        logger.debug("max requested over an empty collection")
        raise EmptyCollectionError("max")
    return result


def min(source: Iterable[Number]) -> Number:
    """Returns the smallest element.

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    return min_by(source, _identity)


@dual
def min_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    """Returns the smallest value of ``selector(item)`` over the elements.

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    result = builtins.min((selector(item) for item in source), default=_MISSING)
    if result is _MISSING:
        logger.debug("min requested over an empty collection")
        raise EmptyCollectionError("min")
    return result


def mean(source: Iterable[Number]) -> float:
    """Returns the arithmetic mean of the elements.

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    return mean_by(source, _identity)


@dual
def mean_by(source: Iterable[T], selector: Callable[[T], Number]) -> float:
    """Returns the mean of ``selector(item)`` over the elements, in a single pass.

    Raises:
        EmptyCollectionError: If the iterable has no elements
    """
    total: Number = 0
    seen = 0
    for item in source:
        total += selector(item)
        seen += 1
    if seen == 0:
        logger.debug("mean requested over an empty collection")
        raise EmptyCollectionError("mean")
    return total / seen
