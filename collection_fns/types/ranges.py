"""Range options for generating numeric progressions.

``iterables.init``, ``arrays.init`` and ``iterables.init_infinite`` accept their
options either as pydantic models or as the equivalent plain values:

- ``5`` is shorthand for ``{"start": 0, "count": 5, "increment": 1}``
- ``{"from": 1, "to": 3, "increment": 1}`` is an inclusive range (InitRange)
- ``{"start": 3, "count": 5, "increment": 2}`` is count-bounded (InitCount)
- ``{"start": 0, "increment": 1}`` is an unbounded progression (InfiniteRange)

Every model normalises to a ``Progression``, the (start, count, increment)
triple the generators actually consume.
"""

import logging
import math
from collections.abc import Iterator, Mapping
from typing import Any, NamedTuple

import pydantic

from collection_fns.errors import NonTerminatingRangeError

logger = logging.getLogger(__name__)

Number = int | float


class Progression(NamedTuple):
    """A finite arithmetic progression of ``count`` numbers."""

    start: Number
    count: int
    increment: Number

    def values(self) -> Iterator[Number]:
        """Lazily yields ``start + k * increment`` for ``k`` in ``range(count)``."""
        return (self.start + index * self.increment for index in range(self.count))


class InitCount(pydantic.BaseModel):
    """A count-bounded progression starting at ``start``.

    Example:
        InitCount(count=3).normalise().values()              # 0, 1, 2
        InitCount(start=3, count=3, increment=2).normalise() # 3, 5, 7
    """

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    start: Number = 0
    count: int
    increment: Number = 1

    def normalise(self) -> Progression:
        return Progression(self.start, self.count, self.increment)


class InitRange(pydantic.BaseModel):
    """An inclusive range from ``from`` to ``to``.

    When ``increment`` is omitted the step is 1 or -1, whichever moves towards
    ``to``. An explicit increment that is zero, or that points away from
    ``to``, can never reach the end of the range.

    ``from`` is a Python keyword, so the field is named ``from_`` and aliased;
    both ``InitRange(from_=1, to=3)`` and ``InitRange.model_validate({"from": 1,
    "to": 3})`` are accepted.
    """

    model_config = pydantic.ConfigDict(
        extra="forbid", frozen=True, allow_inf_nan=False, validate_by_name=True, validate_by_alias=True
    )

    from_: Number = pydantic.Field(alias="from")
    to: Number
    increment: Number | None = None

    def normalise(self) -> Progression:
        """Resolves the step and the number of elements in the range.

        Returns:
            The equivalent Progression

        Raises:
            NonTerminatingRangeError: If the explicit increment is zero or has
                the opposite sign to ``to - from``, or the span overflows
        """
        sign = -1 if self.to < self.from_ else 1
        if self.increment is not None and (self.increment == 0 or self.increment / sign < 0):
            logger.debug("Rejecting non-terminating range from=%r to=%r increment=%r", self.from_, self.to, self.increment)
            raise NonTerminatingRangeError()

        increment = sign if self.increment is None else self.increment
        steps = (self.to - self.from_) / increment
        if not math.isfinite(steps):
            # Finite endpoints can still overflow, e.g. -1e308 -> 1e308
            logger.debug("Rejecting unbounded range from=%r to=%r increment=%r", self.from_, self.to, self.increment)
            raise NonTerminatingRangeError()
        # Absorb float error so that e.g. 0 -> 0.3 by 0.1 still ends on 0.3
        nearest = round(steps)
        if math.isclose(steps, nearest):
            steps = nearest
        return Progression(self.from_, math.floor(steps) + 1, increment)


class InfiniteRange(pydantic.BaseModel):
    """An unbounded progression; only meaningful for lazy sequences."""

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    start: Number = 0
    increment: Number = 1


RangeOptions = int | float | InitRange | InitCount | Mapping[str, Any]
InfiniteOptions = InfiniteRange | Mapping[str, Any] | None


def coerce_range(options: RangeOptions) -> InitRange | InitCount:
    """Builds the range model described by ``options``.

    Args:
        options: A count, a mapping in either range shape, or a model

    Returns:
        An InitRange when ``options`` carries a ``from`` key, otherwise an
        InitCount

    Raises:
        TypeError: If ``options`` is none of the accepted shapes
        pydantic.ValidationError: If the mapping or count is malformed, e.g. a
            fractional count or an infinite bound
    """
    if isinstance(options, InitRange | InitCount):
        return options
    if isinstance(options, int | float) and not isinstance(options, bool):
        # Whole floats such as 3.0 are counts; fractional ones fail validation
        return InitCount(count=options)
    if isinstance(options, Mapping):
        if "from" in options or "from_" in options:
            return InitRange.model_validate(options)
        return InitCount.model_validate(options)
    raise TypeError(f"Unsupported range options: {options!r}")


def coerce_infinite(options: InfiniteOptions = None) -> InfiniteRange:
    if options is None:
        return InfiniteRange()
    if isinstance(options, InfiniteRange):
        return options
    if isinstance(options, Mapping):
        return InfiniteRange.model_validate(options)
    raise TypeError(f"Unsupported range options: {options!r}")
