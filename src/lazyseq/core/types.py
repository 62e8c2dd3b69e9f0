"""
Shared types: callables, Monoid/Semigroup configuration values and results.
"""

from dataclasses import dataclass
from typing import (
    Any, Callable, Generic, Iterator, List, NamedTuple, Protocol,
    Tuple, TypeVar, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Mapper = Callable[[T], U]
Combiner = Callable[[T, T], T]


@runtime_checkable
class WithEntries(Protocol[K, V]):
    """Keyed collection exposing ``entries()`` key/value pairs."""

    def entries(self) -> Iterator[Tuple[K, V]]:
        ...


@dataclass(frozen=True)
class Semigroup(Generic[T]):
    """An associative combining function."""
    concat: Callable[[T, T], T]


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """An identity element paired with an associative combining function."""
    empty: T
    concat: Callable[[T, T], T]


class Partitioned(NamedTuple):
    """Result of ``partition``.

    ``left`` holds the elements that did not match, ``right`` the matches.
    """
    left: List[Any]
    right: List[Any]


SUM: Monoid = Monoid(0, lambda a, b: a + b)
PRODUCT: Monoid = Monoid(1, lambda a, b: a * b)
CONCAT: Monoid = Monoid("", lambda a, b: a + b)
