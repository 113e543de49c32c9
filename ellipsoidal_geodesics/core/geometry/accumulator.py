"""Compensated (double-double) summation.

The running total is kept as an unevaluated sum ``s + t`` where ``s`` holds
the rounded value and ``t`` the rounding error of every addition so far.
Each addition uses two error-free two-sums, so the error of the total stays
bounded by a few units in the last place of the result instead of growing
with the number of terms.
"""

from __future__ import annotations

from typing import Union

from .angles import error_free_sum, remainder


class Accumulator:
    """Running sum with twice the working floating point precision."""

    __slots__ = ("_s", "_t")

    def __init__(self, y: Union[float, "Accumulator"] = 0.0):
        self.set(y)

    def set(self, y: Union[float, "Accumulator"]) -> None:
        """Replace the sum with y (a number or another accumulator)."""
        if isinstance(y, Accumulator):
            self._s, self._t = y._s, y._t
        else:
            self._s, self._t = float(y), 0.0

    def add(self, y: float) -> None:
        """Add y to the running sum."""
        y, u = error_free_sum(y, self._t)
        self._s, self._t = error_free_sum(y, self._s)
        # Fold u back in. When s is zero the correction becomes the sum
        # itself so that t stays small relative to s.
        if self._s == 0:
            self._s = u
        else:
            self._t += u

    def sum(self, y: float = 0.0) -> float:
        """Return the rounded sum plus y, leaving the accumulator unchanged."""
        if y == 0.0:
            return self._s
        b = Accumulator(self)
        b.add(y)
        return b._s

    def negate(self) -> None:
        """Negate the sum in place."""
        self._s *= -1
        self._t *= -1

    def remainder(self, y: float) -> None:
        """Reduce the sum to [-y/2, y/2)."""
        self._s = remainder(self._s, y)
        self.add(0.0)

    @property
    def correction(self) -> float:
        """The pending rounding error carried alongside the sum."""
        return self._t

    def __float__(self) -> float:
        return self._s

    def __repr__(self) -> str:
        return f"Accumulator(s={self._s!r}, t={self._t!r})"
