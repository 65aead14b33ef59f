"""Left-to-right function composition.

``pipe`` threads a value through a series of one-argument functions, which is
what the partial call shape of every collection operation is built for:

    pipe(
        [1, 2, 3, 4],
        arrays.filter(lambda x: x % 2 == 0),
        arrays.map(lambda x: x * 10),
        arrays.sum,
    )  # 60

``Pipe`` is the fluent form of the same thing, and ``compose`` turns a chain
into a reusable function.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Pipe(Generic[T]):
    """A value waiting to be threaded through functions.

    Each ``then`` applies a function and wraps its result in a new Pipe; the
    current value is available as ``result``. A Pipe holds no other state.

    Example:
        Pipe(1).then(lambda x: x + 1).then(str).result  # "2"
    """

    def __init__(self, value: T):
        self.result = value

    def then(self, next_: Callable[[T], U]) -> "Pipe[U]":
        """Applies ``next_`` to the current value.

        Args:
            next_: Function taking the current value

        Returns:
            A new Pipe holding ``next_(result)``
        """
        return Pipe(next_(self.result))

    def __repr__(self) -> str:
        return f"Pipe({self.result!r})"


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Applies ``functions`` to ``value`` from left to right.

    Args:
        value: The initial value
        *functions: One-argument functions, each taking the previous result

    Returns:
        The last function's result, or a ``Pipe`` around ``value`` when no
        functions are given

    Example:
        pipe(1, lambda x: x + 1, lambda x: x * 10)  # 20
        pipe(1).then(lambda x: x + 1).result        # 2
    """
    if not functions:
        return Pipe(value)
    result = value
    for function in functions:
        result = function(result)
    return result


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chains ``functions`` into a single function applying them left to right.

    ``compose(f, g)(x)`` equals ``pipe(x, f, g)``; with no functions the
    result is the identity.

    Example:
        evens_total = compose(arrays.filter(lambda x: x % 2 == 0), arrays.sum)
        evens_total([1, 2, 3, 4])  # 6
    """

    def composed(value: Any) -> Any:
        result = value
        for function in functions:
            result = function(result)
        return result

    return composed
