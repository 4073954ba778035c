"""Exact rational numbers with NumPy interoperability."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

from . import floating
from .exceptions import DenominatorZeroError
from .logging import get_logger

logger = get_logger(__name__)

IntegerLike = Union[int, numbers.Integral]
NumberLike = Union["Rational", Fraction, numbers.Real]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _rational_pair(value: Any) -> Optional[Tuple[int, int]]:
    """Return ``(numerator, denominator)`` for exact operands, else ``None``."""
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if isinstance(value, Fraction):
        return value.numerator, value.denominator
    if isinstance(value, numbers.Integral):
        return int(value), 1
    return None


class Rational:
    """Immutable fraction over arbitrary-precision integers.

    Instances are kept in canonical form: reduced by the greatest common
    divisor with the sign carried by the numerator. A zero numerator keeps the
    denominator it was created with, sign included.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        num, den = self._normalize(num, den)
        object.__setattr__(self, "_numerator", num)
        object.__setattr__(self, "_denominator", den)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def of(cls, numerator: IntegerLike, denominator: IntegerLike) -> "Rational":
        """Return the normalized rational ``numerator / denominator``.

        Raises :class:`DenominatorZeroError` when *denominator* is zero.
        """
        return cls(numerator, denominator)

    @classmethod
    def _from_pair(cls, numerator: int, denominator: int) -> "Rational":
        # Bypasses normalization; only inverse() relies on this.
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_numerator", numerator)
        object.__setattr__(instance, "_denominator", denominator)
        return instance

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den == 0:
            logger.debug("denominator_zero", numerator=num)
            raise DenominatorZeroError(num)
        if num == 0:
            return num, den
        gcd = math.gcd(num, den)
        sign = -1 if (num < 0) != (den < 0) else 1
        return abs(num) // gcd * sign, abs(den) // gcd

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def signum(self) -> int:
        """Return -1, 0 or 1 according to the sign of the value."""
        if self._numerator == 0:
            return 0
        return 1 if _sign(self._numerator) == _sign(self._denominator) else -1

    def inverse(self) -> "Rational":
        """Swap numerator and denominator without normalizing.

        The inverse of a zero value has a zero denominator; no error is raised.
        """
        if self._numerator == 0:
            logger.debug("inverse_of_zero", denominator=self._denominator)
        return Rational._from_pair(self._denominator, self._numerator)

    def to_double(self) -> float:
        """Divide the components as 64-bit floats."""
        return floating.to_double(self._numerator, self._denominator)

    def to_float(self) -> np.float32:
        """Divide the components as 32-bit floats."""
        return floating.to_float(self._numerator, self._denominator)

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        num, den = self._numerator, self._denominator
        if (num < 0) != (den < 0):
            return -(abs(num) // abs(den))
        return abs(num) // abs(den)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        return format(self.to_double(), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    def _elementwise(self, array: "np.ndarray", method: str) -> "np.ndarray":
        def apply(item: Any) -> Any:
            result = getattr(self, method)(item)
            if result is NotImplemented:
                raise TypeError(f"unsupported operand type for Rational: {type(item)!r}")
            return result

        return np.vectorize(apply, otypes=[object])(array)

    def _binary_operation(self, other: Any, name: str, op, *, reflected: bool = False):
        if isinstance(other, np.ndarray):
            method = f"__r{name}__" if reflected else f"__{name}__"
            return self._elementwise(other, method)
        if floating.is_float_operand(other):
            return floating.combine(self, other, name, reflected=reflected)
        pair = _rational_pair(other)
        if pair is None:
            return NotImplemented
        return op(self._numerator, self._denominator, *pair)

    @staticmethod
    def _coerce_power(value: Any) -> Optional[int]:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Rational):
            if value.denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value.numerator
        return None

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        def _add(a: int, b: int, c: int, d: int) -> "Rational":
            return Rational.of(a * d + c * b, b * d)

        return self._binary_operation(other, "add", _add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(
            other, "add", lambda a, b, c, d: self + Rational._from_pair(c, d), reflected=True
        )

    def __sub__(self, other: Any) -> Any:
        def _sub(a: int, b: int, c: int, d: int) -> "Rational":
            return Rational.of(a * d - c * b, b * d)

        return self._binary_operation(other, "sub", _sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(
            other, "sub", lambda a, b, c, d: -self + Rational._from_pair(c, d), reflected=True
        )

    def __mul__(self, other: Any) -> Any:
        def _mul(a: int, b: int, c: int, d: int) -> "Rational":
            return Rational.of(a * c, b * d)

        return self._binary_operation(other, "mul", _mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(
            other, "mul", lambda a, b, c, d: self * Rational._from_pair(c, d), reflected=True
        )

    def __truediv__(self, other: Any) -> Any:
        def _truediv(a: int, b: int, c: int, d: int) -> "Rational":
            return Rational.of(a * d, b * c)

        return self._binary_operation(other, "truediv", _truediv)

    def __rtruediv__(self, other: Any) -> Any:
        # other / self, computed directly rather than by commuting.
        def _rtruediv(a: int, b: int, c: int, d: int) -> "Rational":
            return Rational.of(c * b, d * a)

        return self._binary_operation(other, "truediv", _rtruediv, reflected=True)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            return self._elementwise(exponent, "__pow__")
        if floating.is_float_operand(exponent):
            return floating.combine(self, exponent, "pow")
        power = self._coerce_power(exponent)
        if power is None:
            return NotImplemented
        if power >= 0:
            return Rational.of(self._numerator ** power, self._denominator ** power)
        return Rational.of(self._denominator ** -power, self._numerator ** -power)

    def __rpow__(self, base: Any) -> Any:
        if floating.is_float_operand(base):
            return floating.combine(self, base, "pow", reflected=True)
        return NotImplemented

    def __neg__(self) -> "Rational":
        return Rational.of(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational.of(abs(self._numerator), self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> Any:
        if floating.is_float_operand(other):
            return op(floating.convert_like(self, other), other)
        pair = _rational_pair(other)
        if pair is None:
            return NotImplemented
        c, d = pair
        lhs = self._numerator * d
        rhs = c * self._denominator
        if self._denominator * d < 0:
            lhs, rhs = -lhs, -rhs
        return op(lhs, rhs)

    def __eq__(self, other: Any) -> Any:
        pair = _rational_pair(other)
        if pair is None:
            return NotImplemented
        return (self._numerator, self._denominator) == pair

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        if self._denominator > 0:
            # Agrees with int and Fraction hashes for equal values.
            return hash(Fraction(self._numerator, self._denominator))
        return hash((self._numerator, self._denominator))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Rational._from_pair, (self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: ("__add__", "__radd__"),
        np.subtract: ("__sub__", "__rsub__"),
        np.multiply: ("__mul__", "__rmul__"),
        np.divide: ("__truediv__", "__rtruediv__"),
        np.true_divide: ("__truediv__", "__rtruediv__"),
        np.power: ("__pow__", "__rpow__"),
        np.equal: ("__eq__", "__eq__"),
        np.not_equal: ("__ne__", "__ne__"),
        np.less: ("__lt__", "__gt__"),
        np.less_equal: ("__le__", "__ge__"),
        np.greater: ("__gt__", "__lt__"),
        np.greater_equal: ("__ge__", "__le__"),
        np.negative: ("__neg__", None),
        np.positive: ("__pos__", None),
        np.absolute: ("__abs__", None),
    }

    @classmethod
    def _apply_ufunc(cls, methods, *args: Any) -> Any:
        forward, reflected = methods
        if len(args) == 1:
            (value,) = args
            if isinstance(value, Rational):
                return getattr(value, forward)()
            raise TypeError(f"unsupported operand type: {type(value)!r}")
        left, right = args
        if isinstance(left, Rational):
            result = getattr(left, forward)(right)
        elif isinstance(right, Rational):
            result = getattr(right, reflected)(left)
        else:
            result = NotImplemented
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand types: {type(left)!r} and {type(right)!r}"
            )
        return result

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        methods = self._UFUNC_DISPATCH.get(ufunc)
        if methods is None:
            return NotImplemented

        if any(isinstance(value, np.ndarray) for value in inputs):
            vectorised = np.vectorize(
                lambda *args: self._apply_ufunc(methods, *args),
                otypes=[object],
            )
            return vectorised(*inputs)
        try:
            return self._apply_ufunc(methods, *inputs)
        except TypeError:
            return NotImplemented


__all__ = ["Rational", "IntegerLike", "NumberLike"]
