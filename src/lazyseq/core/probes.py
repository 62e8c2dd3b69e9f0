"""
Structural capability probes.

A value is judged by what it can do (iterate, expose entries, combine),
never by its concrete class.
"""

from collections.abc import Iterable, Mapping
from numbers import Number
from typing import Any, Iterator

from lazyseq.errors import NotASequenceError


def is_sequence(value: Any) -> bool:
    """True if ``value`` implements the iteration protocol."""
    return isinstance(value, Iterable)


def is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def is_mapper(value: Any) -> bool:
    """True for a callable that is not also a sequence."""
    return is_function(value) and not is_sequence(value)


def is_with_entries(value: Any) -> bool:
    """True if ``value`` exposes key/value pairs through ``entries()`` or ``items()``."""
    if isinstance(value, Mapping):
        return True
    return callable(getattr(value, 'entries', None)) or callable(getattr(value, 'items', None))


def is_semigroup(value: Any) -> bool:
    return value is not None and callable(getattr(value, 'concat', None))


def is_monoid(value: Any) -> bool:
    return is_semigroup(value) and hasattr(value, 'empty')


def get_iterator(value: Any) -> Iterator:
    """Return an iterator over ``value`` or raise ``NotASequenceError``."""
    if not is_sequence(value):
        raise NotASequenceError(value)
    return iter(value)


def entries_of(value: Any) -> Iterator:
    """Iterate the key/value pairs of a keyed collection."""
    entries = getattr(value, 'entries', None)
    if callable(entries):
        return iter(entries())
    return iter(value.items())


def is_keyed_source(value: Any) -> bool:
    """True for sequences and for keyed collections exposing ``entries()``."""
    return is_sequence(value) or is_with_entries(value)
