"""Sequence operators built on the dispatch layer."""

from lazyseq.operators.constructors import (
    STOP,
    generator_from,
    new_generator,
    range,
    count,
    cycle,
    repeat,
)
from lazyseq.operators.filters import filter, filter_not, filter_indexed, partition
from lazyseq.operators.predicates import some, all, none, more_than, less_than, empty
from lazyseq.operators.transformations import (
    map,
    map_not_null,
    map_indexed,
    map_indexed_not_null,
    zip,
    unzip,
)
from lazyseq.operators.parts import (
    take,
    take_while,
    drop,
    drop_while,
    chunked,
    windowed,
    WindowOptions,
)
from lazyseq.operators.collectors import as_array, as_count, as_counter, group_by
from lazyseq.operators.folds import (
    fold,
    fold_right,
    reduce,
    reduce_right,
    scan,
    scan_right,
    scan_fold,
    scan_fold_right,
)

__all__ = [
    "STOP",
    "generator_from",
    "new_generator",
    "range",
    "count",
    "cycle",
    "repeat",
    "filter",
    "filter_not",
    "filter_indexed",
    "partition",
    "some",
    "all",
    "none",
    "more_than",
    "less_than",
    "empty",
    "map",
    "map_not_null",
    "map_indexed",
    "map_indexed_not_null",
    "zip",
    "unzip",
    "take",
    "take_while",
    "drop",
    "drop_while",
    "chunked",
    "windowed",
    "WindowOptions",
    "as_array",
    "as_count",
    "as_counter",
    "group_by",
    "fold",
    "fold_right",
    "reduce",
    "reduce_right",
    "scan",
    "scan_right",
    "scan_fold",
    "scan_fold_right",
]
