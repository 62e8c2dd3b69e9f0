"""
Error taxonomy for lazyseq operators.
"""

from typing import Any


class LazySeqError(Exception):
    """Base class for every error raised by lazyseq."""


class MalformedRangeError(LazySeqError, ValueError):
    """Raised by ``range`` when the step can never reach ``stop``."""

    def __init__(self, start: int, stop: int, step: int):
        self.start = start
        self.stop = stop
        self.step = step
        if step == 0:
            reason = "step must not be 0"
        else:
            reason = "step points away from stop"
        super().__init__(f"Malformed range({start}, {stop}, {step}): {reason}")


class InvalidSizeError(LazySeqError, ValueError):
    """Raised by chunking and windowing operators for non-positive sizes."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"`{name}` must be > 0, got {value!r}")


class NotMonoidError(LazySeqError, TypeError):
    """Raised when a single fold argument does not provide ``empty`` and ``concat``."""

    def __init__(self, value: Any, message: str = None):
        self.value = value
        super().__init__(
            message or
            f"If only one argument is passed it must be a Monoid, got {value!r}"
        )


class NotSemigroupError(NotMonoidError):
    """Raised when a reduce argument is neither a Semigroup nor a function."""

    def __init__(self, value: Any):
        super().__init__(
            value,
            f"Expected a Semigroup or a two-argument function, got {value!r}"
        )


class NotASequenceError(LazySeqError, TypeError):
    """Raised when a value used as a sequence is not iterable."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a sequence: {value!r} ({type(value).__name__})")

    def __repr__(self) -> str:
        return f"NotASequenceError(value={self.value!r})"


class MemoryLimitError(LazySeqError, MemoryError):
    """Raised by the realization guard once process memory passes the limit."""

    def __init__(self, info: Any):
        self.info = info
        super().__init__(f"Memory limit reached while realizing a sequence: {info}")
