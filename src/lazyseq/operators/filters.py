"""
Filtering operators.
"""

from typing import Callable, Iterable, Iterator, TypeVar

from lazyseq.core.dispatch import curry2
from lazyseq.core.types import Partitioned, Predicate
from lazyseq.memory.guard import guarded

T = TypeVar('T')


@curry2
def filter(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield the elements of ``source`` that match ``predicate``."""
    for element in source:
        if predicate(element):
            yield element


@curry2
def filter_not(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield the elements of ``source`` that do not match ``predicate``."""
    for element in source:
        if not predicate(element):
            yield element


@curry2
def filter_indexed(source: Iterable[T], predicate: Callable[[int, T], bool]) -> Iterator[T]:
    """Like ``filter`` but ``predicate`` receives ``(index, element)``."""
    for index, element in enumerate(source):
        if predicate(index, element):
            yield element


@curry2
def partition(source: Iterable[T], predicate: Predicate[T]) -> Partitioned:
    """
    Split ``source`` in a single pass.

    Returns:
        ``Partitioned(left, right)`` where ``right`` holds the matches and
        ``left`` everything else, both in source order.
    """
    left, right = [], []
    for element in guarded(source):
        if predicate(element):
            right.append(element)
        else:
            left.append(element)
    return Partitioned(left, right)
