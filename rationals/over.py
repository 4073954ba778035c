"""Spelling helper: ``over(3, 4)`` reads like ``3 over 4``."""
from __future__ import annotations

from .rational import IntegerLike, Rational


def over(numerator: IntegerLike, denominator: IntegerLike) -> Rational:
    """Return ``Rational.of(numerator, denominator)``.

    Accepts ``int`` and NumPy integer scalars (``int32``, ``int64``) on either
    side.
    """
    return Rational.of(numerator, denominator)


__all__ = ["over"]
