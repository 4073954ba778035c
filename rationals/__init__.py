"""Exact rational numbers over arbitrary-precision integers."""

from .arrays import as_rational_array, zeros, zeros_like
from .exceptions import DenominatorZeroError, RationalError
from .floating import to_double, to_float
from .logging import configure_logging, get_logger
from .over import over
from .rational import Rational

__all__ = [
    "Rational",
    "over",
    "DenominatorZeroError",
    "RationalError",
    "to_double",
    "to_float",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "configure_logging",
    "get_logger",
]
