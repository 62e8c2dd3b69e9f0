"""
Slicing operators: take/drop, chunking and sliding windows.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, TypeVar

from lazyseq.core.dispatch import curry2
from lazyseq.core.types import Predicate
from lazyseq.errors import InvalidSizeError

T = TypeVar('T')


@curry2
def take(source: Iterable[T], n: int) -> Iterator[T]:
    """Yield at most the first ``n`` elements, never pulling an extra one."""
    if n <= 0:
        return
    taken = 0
    for element in source:
        yield element
        taken += 1
        if taken >= n:
            return


@curry2
def take_while(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield elements until the first one failing ``predicate`` (excluded)."""
    for element in source:
        if not predicate(element):
            return
        yield element


@curry2
def drop(source: Iterable[T], n: int) -> Iterator[T]:
    """Skip the first ``n`` elements and yield the rest."""
    for index, element in enumerate(source):
        if index >= n:
            yield element


@curry2
def drop_while(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Skip elements while ``predicate`` holds, then yield everything."""
    dropping = True
    for element in source:
        if dropping and predicate(element):
            continue
        dropping = False
        yield element


def _validate_size(size: int) -> None:
    if size <= 0:
        raise InvalidSizeError("size", size)


@curry2(validate=_validate_size)
def chunked(source: Iterable[T], size: int) -> Iterator[List[T]]:
    """
    Group consecutive elements into lists of ``size``.

    The last chunk may be shorter.

    Raises:
        InvalidSizeError: eagerly, when ``size`` <= 0
    """
    chunk = []
    for element in source:
        chunk.append(element)
        if len(chunk) == size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk


@dataclass(frozen=True)
class WindowOptions:
    """Options for ``windowed``."""
    step: int = 1
    partial_window: bool = False


DEFAULT_WINDOW_OPTIONS = WindowOptions()


def _window_options(**options) -> WindowOptions:
    return replace(DEFAULT_WINDOW_OPTIONS, **options)


def _validate_window(size: int, **options) -> None:
    _validate_size(size)
    step = _window_options(**options).step
    if step <= 0:
        raise InvalidSizeError("step", step)


@curry2(validate=_validate_window)
def windowed(source: Iterable[T], size: int, **options) -> Iterator[List[T]]:
    """
    Snapshots of a window of ``size`` elements sliding by ``step``.

    Keyword Args:
        step: Elements to move the window by (default 1)
        partial_window: Also yield the trailing window shorter than ``size``

    Raises:
        InvalidSizeError: eagerly, when ``size`` or ``step`` <= 0
    """
    opts = _window_options(**options)
    window: List[T] = []
    skip = 0
    for element in source:
        if skip:
            skip -= 1
            continue
        window.append(element)
        if len(window) == size:
            yield list(window)
            if opts.step >= size:
                skip = opts.step - size
                window = []
            else:
                window = window[opts.step:]
    if opts.partial_window and window:
        yield window
