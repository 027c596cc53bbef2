"""Exact rational arithmetic on arbitrary-precision integers."""

from .arrays import as_rational_array, zeros, zeros_like
from .parsing import parse_rational
from .rational import (
    DEFAULT_MAX_DENOMINATOR,
    Rational,
    RationalLike,
    is_rational,
    rationalize,
)

__all__ = [
    "Rational",
    "RationalLike",
    "rationalize",
    "is_rational",
    "parse_rational",
    "DEFAULT_MAX_DENOMINATOR",
    "as_rational_array",
    "zeros",
    "zeros_like",
]
