#!/usr/bin/env python3
"""
Tests for the map family, zip and unzip.
"""

import unittest

from lazyseq import (
    as_array, count, empty, map, map_indexed, map_indexed_not_null, map_not_null,
    range, take, unzip, zip
)
from lazyseq.functional import add, pipe


class Registry:
    """Keyed collection exposing entries()."""

    def __init__(self, **values):
        self._values = values

    def entries(self):
        return iter(self._values.items())


class TestMap(unittest.TestCase):
    """Test map and map_not_null."""

    def test_map(self):
        step = 3
        actual = pipe(range(1, 10), map(add(step)), as_array)
        self.assertEqual(len(actual), 10)
        self.assertEqual(actual[0], 1 + step)
        self.assertEqual(actual[-1], 10 + step)

    def test_map_is_lazy(self):
        self.assertEqual(pipe(count(), map(lambda x: x * x), take(4), as_array), [0, 1, 4, 9])

    def test_map_not_null_keeps_everything(self):
        self.assertEqual(as_array(map_not_null([1, 2], add())), [2, 3])

    def test_map_not_null_skips_none(self):
        actual = as_array(map_not_null(range(9), lambda x: x if x % 3 else None))
        self.assertEqual(actual, [1, 2, 4, 5, 7, 8])

    def test_falsy_results_are_kept(self):
        self.assertEqual(as_array(map_not_null([0, 1], lambda x: x * 0)), [0, 0])


class TestMapIndexed(unittest.TestCase):
    """Test map_indexed and map_indexed_not_null."""

    def test_mapping_source(self):
        source = {"a": 1, "b": 2}
        actual = as_array(map_indexed(source, lambda k, v: (k, v)))
        self.assertEqual(actual, [("a", 1), ("b", 2)])

    def test_entries_source(self):
        actual = as_array(map_indexed(lambda k, v: f"{k}={v}")(Registry(x=1, y=2)))
        self.assertEqual(actual, ["x=1", "y=2"])

    def test_list_is_keyed_by_position(self):
        actual = as_array(map_indexed(["a", "b"], lambda i, v: v * (i + 1)))
        self.assertEqual(actual, ["a", "bb"])

    def test_pair_iterable_source(self):
        pairs = ((k, k * 10) for k in [1, 2, 3])
        keys, values = unzip(map_indexed(pairs, lambda k, v: (k, v)))
        self.assertEqual(keys, [1, 2, 3])
        self.assertEqual(values, [10, 20, 30])

    def test_not_null(self):
        source = {"a": 1, "b": None, "c": 3}
        actual = as_array(map_indexed_not_null(source, lambda k, v: None if v is None else k))
        self.assertEqual(actual, ["a", "c"])


class TestZip(unittest.TestCase):
    """Test zip."""

    def test_same_length(self):
        source, other = [1, 2, 3], ["a", "b", "c"]
        self.assertEqual(unzip(zip(source, other)), (source, other))

    def test_shorter_side_wins(self):
        self.assertEqual(as_array(zip([1, 2, 3], [15, 16, 17, 18])), [(1, 15), (2, 16), (3, 17)])
        self.assertEqual(as_array(zip([1, 2, 3, 4], [15, 16])), [(1, 15), (2, 16)])

    def test_length_is_minimum(self):
        for a_len, b_len in [(0, 3), (3, 0), (2, 5), (5, 2)]:
            actual = as_array(zip([0] * a_len, [0] * b_len))
            self.assertEqual(len(actual), min(a_len, b_len))

    def test_mapper(self):
        self.assertEqual(as_array(zip([1, 2], [3, 4], lambda a, b: a * b)), [3, 8])

    def test_infinite_sources(self):
        actual = pipe(count(), zip(count(100)), take(2), as_array)
        self.assertEqual(actual, [(0, 100), (1, 101)])


class TestUnzip(unittest.TestCase):
    """Test unzip."""

    def test_with_contents(self):
        firsts, seconds = unzip([(1, "a"), (2, "b")])
        self.assertEqual(firsts, [1, 2])
        self.assertEqual(seconds, ["a", "b"])

    def test_without_contents(self):
        actual = unzip([])
        self.assertEqual(len(actual), 2)
        self.assertTrue(empty(actual[0]))
        self.assertTrue(empty(actual[1]))


if __name__ == "__main__":
    unittest.main()
