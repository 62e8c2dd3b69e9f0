"""
Collectors: terminal operators that realize a sequence.
"""

from collections import Counter
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from lazyseq.core.dispatch import curry2
from lazyseq.memory.guard import guarded, realize

T = TypeVar('T')
K = TypeVar('K')


def as_array(source: Iterable[T]) -> List[T]:
    """Realize ``source`` into a list, preserving order."""
    return realize(source)


@curry2
def as_count(source: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Count the elements matching ``predicate``."""
    matches = 0
    for element in source:
        if predicate(element):
            matches += 1
    return matches


def as_counter(source: Iterable[Hashable]) -> Counter:
    """Occurrences of each distinct element, keyed in first-seen order."""
    return Counter(guarded(source))


@curry2(arity=2)
def group_by(source: Iterable[T],
             key_selector: Callable[[T], K],
             element_transform: Optional[Callable[[T], Any]] = None) -> Dict[K, List[Any]]:
    """
    Group elements by ``key_selector``.

    Keys appear in first-occurrence order and each group keeps source order.
    ``element_transform`` (optional) is applied to every grouped element.
    """
    groups: Dict[K, List[Any]] = {}
    for element in guarded(source):
        key = key_selector(element)
        value = element if element_transform is None else element_transform(element)
        groups.setdefault(key, []).append(value)
    return groups
