"""collection-fns: functional collection utilities with pipe-friendly signatures.

The package provides the same family of operations (map, filter, choose,
collect, distinct_by, group_by, sort_by, sum_by, ...) over four kinds of
container, one module per kind:

- iterables: lazy operations over any iterable, safe on infinite sources
- arrays: eager operations returning new lists
- sets: eager operations returning new sets
- maps: eager operations returning new dicts

Every operation that takes a function (or a count, key, or second
collection) can be called directly with the collection first, or partially
without it, in which case it returns a function of the collection. The
partial shape composes with ``pipe``:

Example:
    from collection_fns import arrays, iterables, pipe

    arrays.map([1, 2, 3], lambda x: x * 2)  # [2, 4, 6]

    pipe(
        iterables.init_infinite(),
        iterables.filter(lambda x: x % 3 == 0),
        iterables.take(4),
        arrays.of_iterable,
    )  # [0, 3, 6, 9]

No operation mutates its input. Failures raise subclasses of
``CollectionFnsError``. The library logs through the standard ``logging``
module under the ``collection_fns`` logger and is silent unless the
application configures logging.
"""

import logging

from . import arrays, iterables, maps, sets
from .errors import (
    CollectionFnsError,
    ElementNotFoundError,
    EmptyCollectionError,
    KeyNotFoundError,
    NonTerminatingRangeError,
)
from .pipes import Pipe, compose, pipe
from .types import InfiniteRange, InitCount, InitRange

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "arrays",
    "iterables",
    "maps",
    "sets",
    "Pipe",
    "compose",
    "pipe",
    "CollectionFnsError",
    "ElementNotFoundError",
    "EmptyCollectionError",
    "KeyNotFoundError",
    "NonTerminatingRangeError",
    "InfiniteRange",
    "InitCount",
    "InitRange",
]
