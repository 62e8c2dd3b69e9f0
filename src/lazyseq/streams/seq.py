"""
Chainable, lazy pipelines over the operator set.
"""

from collections import Counter
from typing import (
    Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union
)

from lazyseq import operators as ops
from lazyseq.core.dispatch import PartialOperator
from lazyseq.core.probes import get_iterator, is_sequence
from lazyseq.core.types import Partitioned
from lazyseq.errors import NotASequenceError

T = TypeVar('T')
U = TypeVar('U')

Step = Union[PartialOperator, Callable[[Iterator[Any]], Iterator[Any]]]


class Seq(Iterable[T]):
    """
    A lazy pipeline. Steps are recorded and only run when the Seq is iterated.
    """

    def __init__(self, source: Union[Iterable[T], Callable[[], Iterator[T]]]):
        """
        Initialize pipeline.

        Args:
            source: Data source (iterable, or callable returning a fresh iterator)
        """
        if is_sequence(source):
            self._source = lambda: get_iterator(source)
        elif callable(source):
            self._source = source
        else:
            raise NotASequenceError(source)

        self._operators: List[Step] = []

    def __iter__(self) -> Iterator[T]:
        """Create iterator with all steps applied."""
        iterator = self._source()

        for op in self._operators:
            iterator = op(iterator)

        return iter(iterator)

    def __repr__(self) -> str:
        steps = " | ".join(repr(op) for op in self._operators)
        return f"Seq({steps})" if steps else "Seq()"

    def _then(self, step: Step) -> 'Seq[Any]':
        new_seq = Seq(self._source)
        new_seq._operators = self._operators.copy()
        new_seq._operators.append(step)
        return new_seq

    # Lazy steps

    def map(self, mapper: Callable[[T], U]) -> 'Seq[U]':
        return self._then(ops.map.with_config(mapper))

    def map_not_null(self, mapper: Callable[[T], Optional[U]]) -> 'Seq[U]':
        return self._then(ops.map_not_null.with_config(mapper))

    def map_indexed(self, mapper: Callable[[Any, Any], U]) -> 'Seq[U]':
        """Map the ``(key, value)`` pairs flowing through the pipeline."""
        return self._then(ops.map_indexed.with_config(mapper))

    def filter(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        return self._then(ops.filter.with_config(predicate))

    def filter_not(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        return self._then(ops.filter_not.with_config(predicate))

    def filter_indexed(self, predicate: Callable[[int, T], bool]) -> 'Seq[T]':
        return self._then(ops.filter_indexed.with_config(predicate))

    def take(self, n: int) -> 'Seq[T]':
        return self._then(ops.take.with_config(n))

    def take_while(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        return self._then(ops.take_while.with_config(predicate))

    def drop(self, n: int) -> 'Seq[T]':
        return self._then(ops.drop.with_config(n))

    def drop_while(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        return self._then(ops.drop_while.with_config(predicate))

    def chunked(self, size: int) -> 'Seq[List[T]]':
        return self._then(ops.chunked.with_config(size))

    def windowed(self, size: int, step: int = 1, partial_window: bool = False) -> 'Seq[List[T]]':
        return self._then(ops.windowed.with_config(size, step=step, partial_window=partial_window))

    def zip(self, other: Iterable[U], mapper: Optional[Callable[[T, U], Any]] = None) -> 'Seq[Any]':
        return self._then(ops.zip.with_config(other, mapper))

    def scan(self, semigroup: Any) -> 'Seq[T]':
        return self._then(ops.scan.with_config(semigroup))

    def scan_fold(self, *config) -> 'Seq[Any]':
        return self._then(ops.scan_fold.with_config(*config))

    def pipe(self, step: Callable[[Iterator[T]], Iterable[U]]) -> 'Seq[U]':
        """Append any single-argument function from iterator to iterable."""
        return self._then(step)

    # Terminal operators

    def as_array(self) -> List[T]:
        return ops.as_array(self)

    collect = as_array

    def as_count(self, predicate: Callable[[T], bool]) -> int:
        return ops.as_count.direct(self, predicate)

    def as_counter(self) -> Counter:
        return ops.as_counter(self)

    def group_by(self, key_selector: Callable[[T], Any],
                 element_transform: Optional[Callable[[T], Any]] = None) -> Dict[Any, List[Any]]:
        return ops.group_by.direct(self, key_selector, element_transform)

    def partition(self, predicate: Callable[[T], bool]) -> Partitioned:
        return ops.partition.direct(self, predicate)

    def unzip(self) -> Tuple[List[Any], List[Any]]:
        return ops.unzip(self)

    def fold(self, *config) -> Any:
        return ops.fold.direct(self, *config)

    def fold_right(self, *config) -> Any:
        return ops.fold_right.direct(self, *config)

    def reduce(self, semigroup: Any) -> Any:
        return ops.reduce.direct(self, semigroup)

    def reduce_right(self, semigroup: Any) -> Any:
        return ops.reduce_right.direct(self, semigroup)

    def some(self, predicate: Callable[[T], bool]) -> bool:
        return ops.some.direct(self, predicate)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return ops.all.direct(self, predicate)

    def none(self, predicate: Callable[[T], bool]) -> bool:
        return ops.none.direct(self, predicate)

    def more_than(self, n: int, predicate: Callable[[T], bool]) -> bool:
        return ops.more_than.direct(self, n, predicate)

    def less_than(self, n: int, predicate: Callable[[T], bool]) -> bool:
        return ops.less_than.direct(self, n, predicate)

    def empty(self) -> bool:
        return ops.empty(self)

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """Get first element, or ``default``."""
        for item in self:
            return item
        return default

    # Factory methods

    @classmethod
    def range(cls, *args: int) -> 'Seq[int]':
        """Inclusive integer range; validated immediately."""
        ops.range(*args)
        return cls(lambda: ops.range(*args))

    @classmethod
    def count(cls, start: int = 0, step: int = 1) -> 'Seq[int]':
        return cls(lambda: ops.count(start, step))

    @classmethod
    def repeat(cls, value: T) -> 'Seq[T]':
        return cls(lambda: ops.repeat(value))

    @classmethod
    def cycle(cls, source: Iterable[T]) -> 'Seq[T]':
        return cls(lambda: ops.cycle(source))

    @classmethod
    def generate(cls, seed: T, step: Callable[[T], Optional[T]], sentinel: Any = None) -> 'Seq[T]':
        return cls(lambda: ops.generator_from(seed, step, sentinel))
