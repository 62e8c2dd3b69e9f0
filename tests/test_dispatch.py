#!/usr/bin/env python3
"""
Tests for the direct/pointfree dispatch protocol.
"""

import unittest

from lazyseq import (
    NotASequenceError, PartialOperator, as_array, count, filter, map, more_than,
    take, zip
)
from lazyseq.core import Deferred, Direct, curry2, curry3, is_number, is_sequence
from lazyseq.functional import gt, pipe


class Countdown:
    """A user-defined iterable."""

    def __init__(self, start):
        self.start = start

    def __iter__(self):
        current = self.start
        while current >= 0:
            yield current
            current -= 1


class Record:
    """Plain object without the iteration protocol."""

    def __init__(self, value):
        self.value = value


class TestSequenceProbe(unittest.TestCase):
    """Test structural sequence detection."""

    def test_builtin_iterables(self):
        for value in ([1], (1,), "ab", {1: 2}, {1}, iter([1]), range(3)):
            self.assertTrue(is_sequence(value), value)

    def test_user_iterable(self):
        self.assertTrue(is_sequence(Countdown(3)))

    def test_non_sequences(self):
        for value in (None, 3, 2.5, Record(1), lambda x: x, gt(3)):
            self.assertFalse(is_sequence(value), value)


class TestCurry2(unittest.TestCase):
    """Test two-argument operators."""

    def test_direct_and_pointfree_agree(self):
        direct = as_array(filter([1, 5, 2, 8], gt(2)))
        pointfree = as_array(filter(gt(2))([1, 5, 2, 8]))
        self.assertEqual(direct, [5, 8])
        self.assertEqual(direct, pointfree)

    def test_explicit_entry_points(self):
        self.assertEqual(as_array(map.direct([1, 2], str)), ["1", "2"])
        self.assertEqual(as_array(map.with_config(str)([1, 2])), ["1", "2"])

    def test_classify(self):
        call = filter.classify(([1, 2], bool), {})
        self.assertIsInstance(call, Direct)
        self.assertEqual(call.source, [1, 2])
        self.assertEqual(call.config, (bool,))

        call = filter.classify((bool,), {})
        self.assertIsInstance(call, Deferred)
        self.assertEqual(call.config, (bool,))

    def test_partial_is_reusable(self):
        evens = filter(lambda x: x % 2 == 0)
        self.assertIsInstance(evens, PartialOperator)
        self.assertEqual(as_array(evens(range(5))), [0, 2, 4])
        self.assertEqual(as_array(evens([7, 8])), [8])

    def test_logic_not_invoked_while_dispatching(self):
        calls = []

        @curry2
        def spy(source, config):
            calls.append(config)
            for element in source:
                yield element

        partial = spy(42)
        self.assertEqual(calls, [])
        result = partial([1, 2])
        self.assertEqual(calls, [])
        self.assertEqual(list(result), [1, 2])
        self.assertEqual(calls, [42])

    def test_non_sequence_source_raises(self):
        with self.assertRaises(NotASequenceError) as ctx:
            filter(5, gt(1))
        self.assertEqual(ctx.exception.value, 5)

        with self.assertRaises(NotASequenceError):
            filter(gt(1))(Record(1))

    def test_missing_arguments(self):
        with self.assertRaises(TypeError):
            filter()

    def test_partial_repr(self):
        self.assertEqual(repr(take(3)), "take.with_config(3)")

    def test_wrapper_metadata(self):
        self.assertEqual(filter.__name__, "filter")
        self.assertIn("predicate", filter.__doc__)

    def test_partial_metadata(self):
        """Partials report the name and docstring of the operator they wrap."""
        partial = take(3)
        self.assertEqual(partial.__name__, "take")
        self.assertEqual(partial.__doc__, take.__doc__)
        self.assertIs(partial.__wrapped__, take)

    def test_user_iterable_as_source(self):
        self.assertEqual(as_array(take(Countdown(5), 2)), [5, 4])


class TestCurry3(unittest.TestCase):
    """Test operators with two configuration values."""

    def test_discriminator(self):
        self.assertIsInstance(more_than.classify((2, bool), {}), Deferred)
        self.assertIsInstance(more_than.classify(([1], 2, bool), {}), Direct)

    def test_direct_and_pointfree_agree(self):
        source = [1, 5, 7, 0]
        self.assertEqual(more_than(source, 2, gt(2)), more_than(2, gt(2))(source))

    def test_custom_operator(self):
        @curry3(is_number)
        def between(source, low, high):
            return [x for x in source if low <= x <= high]

        self.assertEqual(between([1, 4, 9], 2, 5), [4])
        self.assertEqual(between(2, 5)([1, 4, 9]), [4])


class TestCurry3Two(unittest.TestCase):
    """Test zip, which takes a second sequence and an optional mapper."""

    def test_all_call_shapes_agree(self):
        a, b = [1, 2, 3], [15, 16, 17, 18]
        expected = [(1, 15), (2, 16), (3, 17)]
        self.assertEqual(as_array(zip(a, b)), expected)
        self.assertEqual(as_array(zip(b)(a)), expected)
        self.assertEqual(as_array(zip(b, None)(a)), expected)

    def test_mapper_call_shapes_agree(self):
        a, b = [1, 2, 3], [10, 20, 30]
        direct = as_array(zip(a, b, lambda x, y: x + y))
        pointfree = as_array(zip(b, lambda x, y: x + y)(a))
        self.assertEqual(direct, [11, 22, 33])
        self.assertEqual(direct, pointfree)

    def test_string_second_sequence(self):
        self.assertEqual(as_array(zip([1, 2], "ab")), [(1, "a"), (2, "b")])

    def test_non_sequence_other_raises(self):
        """A second argument that is neither a sequence nor a mapper fails at call time."""
        with self.assertRaises(NotASequenceError) as ctx:
            zip([1, 2], 5)
        self.assertEqual(ctx.exception.value, 5)

        with self.assertRaises(NotASequenceError):
            zip(5)

        with self.assertRaises(NotASequenceError):
            zip([1, 2], 5, lambda a, b: a + b)


class TestLaziness(unittest.TestCase):
    """Test that pipelines stay lazy end to end."""

    def test_infinite_pipeline(self):
        pulled = []

        def record(x):
            pulled.append(x)
            return x * 2

        result = pipe(count(), map(record), filter(gt(4)), take(2), as_array)
        self.assertEqual(result, [6, 8])
        self.assertEqual(pulled, [0, 1, 2, 3, 4])

    def test_nothing_runs_before_pull(self):
        pulled = []
        pipeline = map(count(), pulled.append)
        self.assertEqual(pulled, [])
        next(pipeline)
        self.assertEqual(pulled, [0])


if __name__ == "__main__":
    unittest.main()
