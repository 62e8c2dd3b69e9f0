"""Chainable lazy pipelines."""

from lazyseq.streams.seq import Seq

__all__ = [
    "Seq",
]
