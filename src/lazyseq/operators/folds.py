"""
Fold, reduce and scan families.

``fold``-style operators take either ``(initial, fn)`` or a single Monoid;
``reduce``-style operators take a Semigroup or a plain ``fn``. Right-hand
variants realize the source and walk it backwards, always calling
``fn(accumulator, element)``.
"""

from typing import Any, Callable, Iterable, Iterator, List, Tuple

from lazyseq.core.dispatch import Operator
from lazyseq.core.probes import is_monoid, is_semigroup
from lazyseq.core.types import Combiner
from lazyseq.errors import NotMonoidError, NotSemigroupError
from lazyseq.memory.guard import realize

_NOTHING = object()


def _fold_is_direct(args: Tuple[Any, ...]) -> bool:
    # (initial, fn) is configuration, (source, monoid) is a full call
    if len(args) >= 3:
        return True
    if len(args) == 2:
        return not callable(args[1])
    return False


def _fold_config(*config) -> Tuple[Any, Combiner]:
    if len(config) == 1:
        monoid = config[0]
        if not is_monoid(monoid):
            raise NotMonoidError(monoid)
        return monoid.empty, monoid.concat
    if len(config) == 2:
        initial, fn = config
        if not callable(fn):
            raise TypeError(f"Expected a combining function, got {fn!r}")
        return initial, fn
    raise TypeError(f"Expected a Monoid or (initial, fn), got {len(config)} arguments")


def _validate_fold(*config) -> None:
    _fold_config(*config)


def _combiner(semigroup: Any) -> Combiner:
    if is_semigroup(semigroup):
        return semigroup.concat
    if callable(semigroup):
        return semigroup
    raise NotSemigroupError(semigroup)


def _validate_reduce(semigroup: Any) -> None:
    _combiner(semigroup)


def fold_operator(logic: Callable) -> Operator:
    return Operator(logic, 2, _fold_is_direct, _validate_fold)


def reduce_operator(logic: Callable) -> Operator:
    return Operator(logic, 1, None, _validate_reduce)


@fold_operator
def fold(source: Iterable, *config) -> Any:
    """Accumulate from the left with ``(initial, fn)`` or a Monoid."""
    accumulator, fn = _fold_config(*config)
    for element in source:
        accumulator = fn(accumulator, element)
    return accumulator


@fold_operator
def fold_right(source: Iterable, *config) -> Any:
    """Accumulate from the right with ``(initial, fn)`` or a Monoid."""
    accumulator, fn = _fold_config(*config)
    for element in reversed(realize(source)):
        accumulator = fn(accumulator, element)
    return accumulator


@reduce_operator
def reduce(source: Iterable, semigroup: Any) -> Any:
    """
    Accumulate from the left, seeded with the first element.

    An empty source returns ``[]``.
    """
    fn = _combiner(semigroup)
    iterator = iter(source)
    accumulator = next(iterator, _NOTHING)
    if accumulator is _NOTHING:
        return []
    for element in iterator:
        accumulator = fn(accumulator, element)
    return accumulator


@reduce_operator
def reduce_right(source: Iterable, semigroup: Any) -> Any:
    """
    Accumulate from the right, seeded with the last element.

    An empty source returns ``[]``.
    """
    fn = _combiner(semigroup)
    elements = realize(source)
    if not elements:
        return []
    accumulator = elements[-1]
    for element in reversed(elements[:-1]):
        accumulator = fn(accumulator, element)
    return accumulator


@reduce_operator
def scan(source: Iterable, semigroup: Any) -> Iterator[Any]:
    """Lazily yield every intermediate ``reduce`` accumulator."""
    fn = _combiner(semigroup)
    first = True
    accumulator = None
    for element in source:
        accumulator = element if first else fn(accumulator, element)
        first = False
        yield accumulator


@reduce_operator
def scan_right(source: Iterable, semigroup: Any) -> List[Any]:
    """Every intermediate ``reduce_right`` accumulator, as a list."""
    fn = _combiner(semigroup)
    elements = realize(source)
    results = []
    for element in reversed(elements):
        accumulator = element if not results else fn(results[-1], element)
        results.append(accumulator)
    return results


@fold_operator
def scan_fold(source: Iterable, *config) -> Iterator[Any]:
    """Lazily yield the initial value and every intermediate ``fold`` accumulator."""
    accumulator, fn = _fold_config(*config)
    yield accumulator
    for element in source:
        accumulator = fn(accumulator, element)
        yield accumulator


@fold_operator
def scan_fold_right(source: Iterable, *config) -> List[Any]:
    """The initial value and every intermediate ``fold_right`` accumulator."""
    accumulator, fn = _fold_config(*config)
    results = [accumulator]
    for element in reversed(realize(source)):
        accumulator = fn(accumulator, element)
        results.append(accumulator)
    return results
