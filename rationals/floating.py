"""Floating-point conversions and mixed Rational/float arithmetic.

Mixing a :class:`~rationals.Rational` with a floating operand leaves exact
arithmetic: the rational is converted to the operand's precision and the
result is a native floating value.
"""
from __future__ import annotations

import operator
from typing import Any, Callable, Union

import numpy as np

FloatLike = Union[float, np.floating]

_FLOAT_OPERATORS: dict = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "truediv": operator.truediv,
    "pow": operator.pow,
}


def _divide(numerator: int, denominator: int, dtype) -> np.floating:
    # Each component is converted on its own; huge magnitudes become inf.
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return dtype(_component(numerator, dtype)) / dtype(_component(denominator, dtype))


def _round_to_precision(value: int, bits: int) -> int:
    """Round *value* to *bits* significant bits, ties to even."""
    magnitude = abs(value)
    excess = magnitude.bit_length() - bits
    if excess <= 0:
        return value
    quotient, remainder = divmod(magnitude, 1 << excess)
    half = 1 << (excess - 1)
    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    rounded = quotient << excess
    return rounded if value > 0 else -rounded


def _component(value: int, dtype) -> np.floating:
    # A single rounding step: the rounded int converts to float64 exactly.
    rounded = _round_to_precision(value, np.finfo(dtype).nmant + 1)
    try:
        return dtype(float(rounded))
    except OverflowError:
        return dtype(np.inf) if value > 0 else dtype(-np.inf)


def to_double(numerator: int, denominator: int) -> float:
    """Return ``numerator / denominator`` computed in 64-bit floating point."""
    return float(_divide(numerator, denominator, np.float64))


def to_float(numerator: int, denominator: int) -> np.float32:
    """Return ``numerator / denominator`` computed in 32-bit floating point."""
    return _divide(numerator, denominator, np.float32)


def is_float_operand(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def convert_like(rational, other: FloatLike) -> FloatLike:
    """Convert *rational* to the floating precision of *other*."""
    if isinstance(other, np.float32):
        return rational.to_float()
    if isinstance(other, np.floating) and not isinstance(other, float):
        # float16 and extended precisions combine through float64.
        return np.float64(rational.to_double())
    return rational.to_double()


def combine(rational, other: FloatLike, name: str, *, reflected: bool = False) -> FloatLike:
    """Apply the operator *name* between *rational* and a floating *other*."""
    op: Callable[[Any, Any], Any] = _FLOAT_OPERATORS[name]
    converted = convert_like(rational, other)
    if reflected:
        return op(other, converted)
    return op(converted, other)


__all__ = ["FloatLike", "to_double", "to_float", "is_float_operand", "convert_like", "combine"]
