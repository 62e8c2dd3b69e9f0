"""
lazyseq: composable, lazy operators over single-pass sequences.

Every operator can be called directly, ``filter(source, predicate)``, or
pointfree, ``filter(predicate)(source)``, and nothing is computed until a
consumer pulls elements.
"""

from lazyseq.config import LazySeqConfig
from lazyseq.core import (
    Monoid,
    Semigroup,
    Partitioned,
    WithEntries,
    Operator,
    PartialOperator,
    SUM,
    PRODUCT,
    CONCAT,
)
from lazyseq.errors import (
    LazySeqError,
    MalformedRangeError,
    InvalidSizeError,
    NotMonoidError,
    NotSemigroupError,
    NotASequenceError,
    MemoryLimitError,
)
from lazyseq.operators import *  # noqa: F401,F403
from lazyseq.operators import __all__ as _operator_names
from lazyseq.functional import pipe, add, eq, lt, le, gt, ge
from lazyseq.streams import Seq

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "LazySeqConfig",
    "Monoid",
    "Semigroup",
    "Partitioned",
    "WithEntries",
    "Operator",
    "PartialOperator",
    "SUM",
    "PRODUCT",
    "CONCAT",
    "LazySeqError",
    "MalformedRangeError",
    "InvalidSizeError",
    "NotMonoidError",
    "NotSemigroupError",
    "NotASequenceError",
    "MemoryLimitError",
    "pipe",
    "add",
    "eq",
    "lt",
    "le",
    "gt",
    "ge",
    "Seq",
    *_operator_names,
]
