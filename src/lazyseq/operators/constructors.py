"""
Sequence constructors.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from lazyseq.core.probes import get_iterator
from lazyseq.errors import MalformedRangeError
from lazyseq.memory.guard import guarded

T = TypeVar('T')


class _Stop:
    """End-of-generation marker usable when ``None`` is a legitimate value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "STOP"


STOP = _Stop()


def generator_from(seed: T, step: Callable[[T], Optional[T]], sentinel: Any = None) -> Iterator[T]:
    """
    Yield ``seed, step(seed), step(step(seed)), ...`` until ``step`` returns ``sentinel``.

    Args:
        seed: First value (nothing is produced when it is the sentinel)
        step: Function computing the next value from the previous one
        sentinel: End marker, ``None`` by default; pass ``STOP`` to allow ``None`` values
    """
    current = seed
    while current is not sentinel:
        yield current
        current = step(current)


new_generator = generator_from


def range(*args: int) -> Iterator[int]:
    """
    ``range(stop)`` or ``range(start, stop, step=1)``, with ``stop`` included.

    Raises:
        MalformedRangeError: eagerly, when ``step`` is 0 or points away from ``stop``
    """
    if len(args) == 1:
        start, stop, step = 0, args[0], 1
    elif len(args) == 2:
        start, stop, step = args[0], args[1], 1
    elif len(args) == 3:
        start, stop, step = args
    else:
        raise TypeError(f"range expected 1 to 3 arguments, got {len(args)}")

    # Ascending is the common case, check it first
    if step > 0:
        if start > stop:
            raise MalformedRangeError(start, stop, step)
        return _ascending(start, stop, step)
    if step == 0 or start < stop:
        raise MalformedRangeError(start, stop, step)
    return _descending(start, stop, step)


def _ascending(start: int, stop: int, step: int) -> Iterator[int]:
    current = start
    while current <= stop:
        yield current
        current += step


def _descending(start: int, stop: int, step: int) -> Iterator[int]:
    current = start
    while current >= stop:
        yield current
        current += step


def count(start: int = 0, step: int = 1) -> Iterator[int]:
    """Infinite arithmetic sequence ``start, start + step, ...``."""
    current = start
    while True:
        yield current
        current += step


def cycle(source: Iterable[T]) -> Iterator[T]:
    """Replay ``source`` forever; an empty source produces nothing."""
    iterator = get_iterator(source)
    return _cycle(iterator)


def _cycle(iterator: Iterator[T]) -> Iterator[T]:
    saved = []
    for element in guarded(iterator):
        saved.append(element)
        yield element
    if not saved:
        return
    while True:
        yield from saved


def repeat(value: T) -> Iterator[T]:
    """Infinite sequence of ``value``."""
    while True:
        yield value
