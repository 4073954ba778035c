"""Exceptions raised by :mod:`rationals`."""
from __future__ import annotations

from typing import Any


class RationalError(Exception):
    """Base class for errors raised by this package."""


class DenominatorZeroError(RationalError, ZeroDivisionError):
    """Raised when a :class:`~rationals.Rational` would get a zero denominator."""

    def __init__(self, numerator: Any = None) -> None:
        self.numerator = numerator
        super().__init__("denominator must be non-zero")


__all__ = ["RationalError", "DenominatorZeroError"]
