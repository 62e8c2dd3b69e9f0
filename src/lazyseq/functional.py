"""
Small helpers for building pipelines: ``pipe`` and comparison/arithmetic builders.
"""

from functools import reduce as _reduce
from typing import Any, Callable


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``functions`` from left to right.

    Example:
        pipe(range(10), filter(gt(3)), take(2), as_array)
    """
    return _reduce(lambda acc, fn: fn(acc), functions, value)


def add(amount: Any = 1) -> Callable[[Any], Any]:
    return lambda target: amount + target


def eq(b: Any) -> Callable[[Any], bool]:
    return lambda a: a == b


def lt(b: Any) -> Callable[[Any], bool]:
    return lambda a: a < b


def le(b: Any) -> Callable[[Any], bool]:
    return lambda a: a <= b


def gt(b: Any) -> Callable[[Any], bool]:
    return lambda a: a > b


def ge(b: Any) -> Callable[[Any], bool]:
    return lambda a: a >= b
