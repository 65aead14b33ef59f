"""Exception hierarchy for collection-fns.

Every failure raised by the library derives from CollectionFnsError and also
from the builtin exception a Python caller would naturally expect, so both
``except CollectionFnsError`` and ``except LookupError`` style handlers work.

All failures are immediate and deterministic; nothing is retried.
"""

from typing import Any

__all__ = [
    "CollectionFnsError",
    "ElementNotFoundError",
    "EmptyCollectionError",
    "KeyNotFoundError",
    "NonTerminatingRangeError",
]


class CollectionFnsError(Exception):
    """Base error for all collection-fns exceptions."""


class ElementNotFoundError(CollectionFnsError, LookupError):
    """Raised by ``get`` when no element matches the predicate.

    Use ``find`` instead when absence is expected.
    """

    def __init__(self, message: str = "Element not found matching criteria"):
        super().__init__(message)


class KeyNotFoundError(ElementNotFoundError, KeyError):
    """Raised by ``maps.get`` when the key is missing from the map."""

    def __init__(self, key: Any):
        super().__init__(f"Specified key not found: {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EmptyCollectionError(CollectionFnsError, ValueError):
    """Raised by max/min/mean aggregates on a collection with no elements.

    ``sum`` has an identity value (0) and never raises this.
    """

    def __init__(self, operation: str):
        super().__init__(f"Can't find {operation} of an empty collection")
        self.operation = operation


class NonTerminatingRangeError(CollectionFnsError, ValueError):
    """Raised when range options would never reach their end value."""

    def __init__(self, message: str = "Iterable will never complete.\nUse init_infinite if this is desired behaviour"):
        super().__init__(message)
