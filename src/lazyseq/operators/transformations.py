"""
Transformation operators: the map family, zip and unzip.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from lazyseq.core.dispatch import curry2, curry3_2
from lazyseq.core.probes import (
    entries_of, get_iterator, is_keyed_source, is_mapper, is_sequence, is_with_entries
)
from lazyseq.memory.guard import guarded

A = TypeVar('A')
B = TypeVar('B')
K = TypeVar('K')
R = TypeVar('R')

_MISSING = object()


@curry2
def map(source: Iterable[A], mapper: Callable[[A], B]) -> Iterator[B]:
    """Yield ``mapper(element)`` for each element of ``source``."""
    for element in source:
        yield mapper(element)


@curry2
def map_not_null(source: Iterable[A], mapper: Callable[[A], Optional[B]]) -> Iterator[B]:
    """Like ``map`` but drops results that are ``None``."""
    for element in source:
        result = mapper(element)
        if result is not None:
            yield result


def _pairs(source: Any) -> Iterator[Tuple[Any, Any]]:
    """Key/value pairs of a keyed collection, an indexable sequence or a pair iterable."""
    if is_with_entries(source):
        return entries_of(source)
    if isinstance(source, (list, tuple, str)):
        return enumerate(source)
    return iter(source)


@curry2(accepts=is_keyed_source)
def map_indexed(source: Any, mapper: Callable[[K, A], B]) -> Iterator[B]:
    """
    Map over key/value pairs, calling ``mapper(key, value)``.

    ``source`` may be a mapping (or anything with ``entries()``/``items()``),
    a list/tuple/str (keys are positions) or an iterable of 2-element pairs.
    """
    for key, value in _pairs(source):
        yield mapper(key, value)


@curry2(accepts=is_keyed_source)
def map_indexed_not_null(source: Any, mapper: Callable[[K, A], Optional[B]]) -> Iterator[B]:
    """``map_indexed`` that drops ``None`` results."""
    for key, value in _pairs(source):
        result = mapper(key, value)
        if result is not None:
            yield result


def _is_optional_mapper(value: Any) -> bool:
    return value is None or is_mapper(value)


@curry3_2(is_sequence, _is_optional_mapper)
def zip(source: Iterable[A], other: Iterable[B],
        mapper: Optional[Callable[[A, B], R]] = None) -> Iterator[Any]:
    """
    Pair elements positionally, stopping with the shorter sequence.

    ``zip(source, other)`` yields ``(a, b)`` tuples; with ``mapper`` it yields
    ``mapper(a, b)``. ``zip(other[, mapper])`` waits for ``source``.
    """
    left = get_iterator(source)
    right = get_iterator(other)
    for a in left:
        b = next(right, _MISSING)
        if b is _MISSING:
            return
        if mapper is None:
            yield (a, b)
        else:
            yield mapper(a, b)


def unzip(pairs: Iterable[Tuple[A, B]]) -> Tuple[List[A], List[B]]:
    """Split an iterable of pairs into two lists."""
    firsts: List[A] = []
    seconds: List[B] = []
    for a, b in guarded(pairs):
        firsts.append(a)
        seconds.append(b)
    return firsts, seconds
