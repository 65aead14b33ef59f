"""Call-shape dispatch shared by every collection module.

Operations are written collection-first, e.g. ``map(source, mapping)``, and
decorated with ``dual`` so that they can also be called without the source:
``map(mapping)`` returns a one-argument function waiting for it. The partial
shape is what makes operations composable with ``pipe``:

    pipe([1, 2, 3], arrays.map(lambda x: x * 2), arrays.sum)

Callbacks may take ``(item)`` or ``(item, index)``; ``indexed`` adapts the
former to the latter by looking at the callable's signature once.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

R = TypeVar("R")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _required_positional(fn: Callable[..., Any]) -> int:
    parameters = inspect.signature(fn).parameters.values()
    return sum(1 for p in parameters if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)


def dual(fn: Callable[..., R]) -> Callable[..., Any]:
    """Gives a collection-first operation a second, source-less call shape.

    The decorated operation evaluates immediately when called with all of its
    required positional arguments. When the leading ``source`` argument is
    left out, it returns a function of ``source`` instead. Both shapes produce
    equal results for equal arguments.

    Args:
        fn: Operation whose first parameter is the source collection

    Returns:
        The dispatching wrapper

    Example:
        @dual
        def take(source, count):
            ...

        take([1, 2, 3], 2)    # direct
        take(2)([1, 2, 3])    # partial
    """
    arity = _required_positional(fn)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        supplied = len(args) + len(kwargs)
        if supplied >= arity:
            return fn(*args, **kwargs)
        if supplied == arity - 1:

            def apply(source: Any) -> R:
                return fn(source, *args, **kwargs)

            apply.__name__ = apply.__qualname__ = f"{fn.__name__}.partial"
            apply.__doc__ = fn.__doc__
            return apply
        raise TypeError(
            f"{fn.__name__}() takes {arity - 1} or {arity} positional arguments but {supplied} were given"
        )

    return wrapper


def dual_optional(fn: Callable[..., R]) -> Callable[..., Any]:
    """Like ``dual``, for operations whose only extra argument is an optional selector.

    Arity alone cannot tell ``sort(source)`` from ``sort(selector)``, so the
    shape is picked by whether the first argument is callable. A call with no
    arguments, with ``None``, or with only ``selector=`` is the partial shape.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        supplied = len(args) + len(kwargs)
        if supplied > 2:
            raise TypeError(f"{fn.__name__}() takes at most 2 arguments but {supplied} were given")
        if "source" in kwargs or (args and args[0] is not None and not callable(args[0])):
            return fn(*args, **kwargs)

        def apply(source: Any) -> R:
            return fn(source, *args, **kwargs)

        apply.__name__ = apply.__qualname__ = f"{fn.__name__}.partial"
        apply.__doc__ = fn.__doc__
        return apply

    return wrapper


def indexed(fn: Callable[..., R]) -> Callable[[Any, int], R]:
    """Returns ``fn`` as an ``(item, index)`` callback.

    Callables with two or more required positional parameters (or ``*args``)
    are returned unchanged. Anything else, including builtins without an
    introspectable signature, is wrapped so the index is dropped.

    Args:
        fn: User supplied callback

    Returns:
        A callable that always accepts ``(item, index)``

    Example:
        indexed(lambda x: x * 2)(3, 0)        # 6
        indexed(lambda x, i: x * i)(3, 2)     # 6
    """
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return lambda item, index: fn(item)

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
        return fn
    if _required_positional(fn) >= 2:
        return fn
    return lambda item, index: fn(item)
