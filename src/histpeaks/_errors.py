"""Exceptions raised on invalid analysis input."""

from __future__ import annotations


class InvalidIntervalError(ValueError):
    """The analysis interval width ``dx`` is not a positive integer."""


class InvalidRangeError(ValueError):
    """A ``[lb, ub]`` index range does not lie within the histogram."""

    def __init__(self, lb: int, ub: int, length: int) -> None:
        super().__init__(f"invalid peak range [{lb}, {ub}] for histogram of length {length}")
        self.lb = lb
        self.ub = ub
        self.length = length
