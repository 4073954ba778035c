"""NumPy array helpers for :class:`~rationals.Rational`."""
from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any

import numpy as np

from .rational import Rational


def _as_rational(value: Any) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, Fraction):
        return Rational.of(value.numerator, value.denominator)
    if isinstance(value, numbers.Integral):
        return Rational.of(value, 1)
    raise TypeError(f"Cannot interpret {type(value)!r} as an exact Rational")


def as_rational_array(values: Any, *, copy: bool = True) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable of exact entries (``Rational``, ``Fraction``
    or integers) or an existing NumPy array. Floating entries are rejected
    since converting them would not be exact. When ``copy`` is ``False`` and
    ``values`` is already an object array holding only :class:`Rational`
    entries, it is returned as is.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(isinstance(item, Rational) for item in array.flat):
            return array
        vectorised = np.vectorize(_as_rational, otypes=[object])
        return vectorised(array.astype(object, copy=False))

    if isinstance(values, (list, tuple)):
        coerced = np.empty(len(values), dtype=object)
        coerced[:] = [_as_rational(item) for item in values]
        return coerced

    return as_rational_array(list(values), copy=copy)


def zeros(length: int) -> "np.ndarray":
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array([Rational(0, 1) for _ in range(length)], copy=False)


def zeros_like(values: Any) -> "np.ndarray":
    """Return a zero-filled array that matches the shape of ``values``."""

    shape = np.shape(values)
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(*shape):
        array[index] = Rational(0, 1)
    return array


__all__ = ["as_rational_array", "zeros", "zeros_like"]
