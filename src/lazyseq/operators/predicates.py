"""
Short-circuiting boolean tests over sequences.
"""

from typing import Iterable, TypeVar

from lazyseq.core.dispatch import curry2, curry3
from lazyseq.core.probes import get_iterator, is_number
from lazyseq.core.types import Predicate

T = TypeVar('T')


@curry2
def some(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if at least one element matches; stops at the first match."""
    for element in source:
        if predicate(element):
            return True
    return False


@curry2
def all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if every element matches; stops at the first miss. Vacuously true."""
    for element in source:
        if not predicate(element):
            return False
    return True


@curry2
def none(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if no element matches; stops at the first match. Vacuously true."""
    for element in source:
        if predicate(element):
            return False
    return True


@curry3(is_number)
def more_than(source: Iterable[T], n: int, predicate: Predicate[T]) -> bool:
    """True if at least ``n`` elements match; stops once ``n`` matches are seen."""
    if n <= 0:
        return True
    matches = 0
    for element in source:
        if predicate(element):
            matches += 1
            if matches >= n:
                return True
    return False


@curry3(is_number)
def less_than(source: Iterable[T], n: int, predicate: Predicate[T]) -> bool:
    """True if fewer than ``n`` elements match; stops once ``n`` matches are seen."""
    if n <= 0:
        return False
    matches = 0
    for element in source:
        if predicate(element):
            matches += 1
            if matches >= n:
                return False
    return True


def empty(source: Iterable[T]) -> bool:
    """True if ``source`` yields nothing; pulls at most one element."""
    for _ in get_iterator(source):
        return False
    return True
