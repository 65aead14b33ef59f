"""Pydantic models for validated operation options.

The only configurable inputs in collection-fns are the range options taken by
``init`` and ``init_infinite``. They are modelled here so that malformed input
fails with a pydantic ValidationError rather than producing a silent,
surprising sequence.

Example:
    from collection_fns import iterables
    from collection_fns.types import InitRange

    list(iterables.init(InitRange(from_=1, to=-1)))  # [1, 0, -1]
    list(iterables.init({"from": 1, "to": 2, "increment": 0.5}))  # [1.0, 1.5, 2.0]
"""

from .ranges import (
    InfiniteRange,
    InitCount,
    InitRange,
    Progression,
    coerce_infinite,
    coerce_range,
)

__all__ = ["InfiniteRange", "InitCount", "InitRange", "Progression", "coerce_infinite", "coerce_range"]
