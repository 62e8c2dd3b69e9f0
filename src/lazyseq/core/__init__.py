"""Dispatch protocol, capability probes and shared types."""

from lazyseq.core.dispatch import (
    Operator,
    PartialOperator,
    Direct,
    Deferred,
    curry2,
    curry3,
    curry3_2,
)
from lazyseq.core.probes import (
    is_sequence,
    is_function,
    is_number,
    is_mapper,
    is_with_entries,
    is_keyed_source,
    is_semigroup,
    is_monoid,
    get_iterator,
)
from lazyseq.core.types import (
    Monoid,
    Semigroup,
    Partitioned,
    WithEntries,
    SUM,
    PRODUCT,
    CONCAT,
)

__all__ = [
    "Operator",
    "PartialOperator",
    "Direct",
    "Deferred",
    "curry2",
    "curry3",
    "curry3_2",
    "is_sequence",
    "is_function",
    "is_number",
    "is_mapper",
    "is_with_entries",
    "is_keyed_source",
    "is_semigroup",
    "is_monoid",
    "get_iterator",
    "Monoid",
    "Semigroup",
    "Partitioned",
    "WithEntries",
    "SUM",
    "PRODUCT",
    "CONCAT",
]
