"""Exact rational numbers with NumPy interoperability."""
from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from .parsing import _int_to_str, parse_integer, parse_rational

RationalLike = Union["Rational", numbers.Rational, float, str, np.generic]

DEFAULT_MAX_DENOMINATOR = 10**6


def _coerce_component(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, bool):  # bool is a subclass of int; reject explicitly.
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, np.generic):  # NumPy scalars
        return _coerce_component(value.item(), name=name)
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValueError(f"{name} must be integer-valued, got {value!r}")
        return int(value)
    if isinstance(value, str):
        return parse_integer(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class _RationalMeta(type):
    """Exposes the shared constants as read-only class attributes."""

    @property
    def zero(cls) -> "Rational":
        return _ZERO

    @property
    def one(cls) -> "Rational":
        return _ONE


class Rational(metaclass=_RationalMeta):
    """Immutable rational number, always kept in lowest terms.

    ``Rational(numerator, denominator)`` accepts two integer-like values
    (``int``, integer-valued ``float``, integer text or NumPy integer scalars).
    With a single argument the value may also be an existing
    :class:`Rational` (returned as is), a :class:`fractions.Fraction`, or text
    in fraction (``"2/3"``), decimal (``"2.3"``) or integer form; the empty
    string is zero.

    The denominator is always positive and coprime with the numerator, so two
    instances are equal exactly when their fields are equal.
    """

    __slots__ = ("_numerator", "_denominator")

    def __new__(
        cls,
        numerator: RationalLike = 0,
        denominator: Optional[Union[int, float, str]] = None,
    ) -> "Rational":
        if denominator is None:
            return cls._from_value(numerator)
        return cls._from_parts(
            _coerce_component(numerator, name="numerator"),
            _coerce_component(denominator, name="denominator"),
        )

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def _from_value(cls, value: Any) -> "Rational":
        if isinstance(value, Rational):
            if isinstance(value, cls):
                return value
            return cls._from_parts(value._numerator, value._denominator)
        if isinstance(value, str):
            return cls._from_parts(*parse_rational(value))
        if isinstance(value, bool):
            raise TypeError("Cannot interpret bool as Rational")
        if isinstance(value, numbers.Integral):
            return cls._from_parts(int(value), 1)
        if isinstance(value, numbers.Rational):
            return cls._from_parts(int(value.numerator), int(value.denominator))
        if isinstance(value, np.generic):
            return cls._from_value(value.item())
        if isinstance(value, float):
            return cls._from_parts(_coerce_component(value, name="value"), 1)
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    @classmethod
    def _from_parts(cls, numerator: int, denominator: int) -> "Rational":
        num, den = cls._normalize(numerator, denominator)
        instance = object.__new__(cls)
        object.__setattr__(instance, "_numerator", num)
        object.__setattr__(instance, "_denominator", den)
        return instance

    @classmethod
    def from_pair(cls, numerator: Any, denominator: Any) -> "Rational":
        """Create a :class:`Rational` from two integer-like components."""
        return cls(numerator, denominator)

    @classmethod
    def from_string(cls, text: str) -> "Rational":
        """Parse fraction, decimal or integer text."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text)!r}")
        return cls._from_parts(*parse_rational(text))

    @classmethod
    def from_int(cls, value: Any) -> "Rational":
        return cls._from_parts(_coerce_component(value, name="value"), 1)

    @classmethod
    def from_fraction(cls, value: numbers.Rational) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        if not isinstance(value, numbers.Rational) or isinstance(value, bool):
            raise TypeError(f"expected a rational number, got {type(value)!r}")
        return cls._from_parts(int(value.numerator), int(value.denominator))

    @classmethod
    def copy_of(cls, value: "Rational") -> "Rational":
        """Return *value* itself; instances are immutable so no copy is made."""
        if not isinstance(value, Rational):
            raise TypeError(f"expected Rational, got {type(value)!r}")
        return cls._from_value(value)

    @classmethod
    def rationalize(cls, value: RationalLike) -> "Rational":
        """Coerce a rational-like value into :class:`Rational`."""
        return cls._from_value(value)

    @staticmethod
    def is_rational(value: Any) -> bool:
        return isinstance(value, Rational)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def sign(self) -> int:
        return _sign(self._numerator)

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def limit_denominator(self, max_denominator: Optional[int] = None) -> "Rational":
        """Return the closest :class:`Rational` whose denominator is at most
        ``max_denominator``."""
        if max_denominator is None:
            max_denominator = DEFAULT_MAX_DENOMINATOR
        if max_denominator < 1:
            raise ValueError("max_denominator must be >= 1")
        if self._denominator <= max_denominator:
            return self
        return Rational.from_fraction(self.as_fraction().limit_denominator(max_denominator))

    def is_integer(self) -> bool:
        return self._denominator == 1

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Immutability
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo: dict) -> "Rational":
        return self

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # Representation
    def to_string(self) -> str:
        return f"{_int_to_str(self._numerator)}/{_int_to_str(self._denominator)}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({_int_to_str(self._numerator)}, {_int_to_str(self._denominator)})"

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den == 0:
            raise ZeroDivisionError("division by zero")
        if den < 0:
            num, den = -num, -den
        gcd = math.gcd(num, den)  # gcd(0, den) == den, so zero becomes 0/1
        return num // gcd, den // gcd

    def _coerce_scalar(self, value: Any) -> "Rational":
        return Rational._from_value(value)

    def _binary_operation(self, other: Any, op: Callable[["Rational", "Rational"], Any]):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        return op(self, self._coerce_scalar(other))

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, Rational):
            if value._denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value._numerator
        if isinstance(value, Fraction):
            if value.denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value.numerator
        return _coerce_component(value, name="exponent")

    # ------------------------------------------------------------------
    # Arithmetic
    def abs(self) -> "Rational":
        return Rational._from_parts(abs(self._numerator), self._denominator)

    def neg(self) -> "Rational":
        return Rational._from_parts(-self._numerator, self._denominator)

    def inv(self) -> "Rational":
        """Return the reciprocal; zero has none and raises ``ZeroDivisionError``."""
        return Rational._from_parts(self._denominator, self._numerator)

    def add(self, other: Any) -> Any:
        def _add(a: "Rational", b: "Rational") -> "Rational":
            return Rational._from_parts(
                a._numerator * b._denominator + b._numerator * a._denominator,
                a._denominator * b._denominator,
            )

        return self._binary_operation(other, _add)

    def sub(self, other: Any) -> Any:
        def _sub(a: "Rational", b: "Rational") -> "Rational":
            return Rational._from_parts(
                a._numerator * b._denominator - b._numerator * a._denominator,
                a._denominator * b._denominator,
            )

        return self._binary_operation(other, _sub)

    def mul(self, other: Any) -> Any:
        def _mul(a: "Rational", b: "Rational") -> "Rational":
            return Rational._from_parts(
                a._numerator * b._numerator,
                a._denominator * b._denominator,
            )

        return self._binary_operation(other, _mul)

    def div(self, other: Any) -> Any:
        def _div(a: "Rational", b: "Rational") -> "Rational":
            return Rational._from_parts(
                a._numerator * b._denominator,
                a._denominator * b._numerator,
            )

        return self._binary_operation(other, _div)

    def pow(self, exponent: Any) -> Any:
        """Raise to an integer power.

        Non-positive exponents invert first, so ``pow(0)`` is ``1`` for every
        value, zero included.
        """
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.pow(x), otypes=[object])
            return vectorised(exponent)
        power = self._coerce_power(exponent)
        if power > 0:
            return Rational._from_parts(
                self._numerator ** power,
                self._denominator ** power,
            )
        if power < 0 and self._numerator == 0:
            raise ZeroDivisionError("0 cannot be raised to a negative power")
        positive = -power
        return Rational._from_parts(
            self._denominator ** positive,
            self._numerator ** positive,
        )

    def floor(self) -> int:
        """Greatest integer less than or equal to this value.

        Negative values round down, so ``Rational(-8, 3).floor()`` is ``-3``;
        use :meth:`trunc` to round toward zero instead.
        """
        # int floor division rounds toward negative infinity
        return self._numerator // self._denominator

    def trunc(self) -> int:
        """Integer part, rounding toward zero."""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    # ------------------------------------------------------------------
    # Comparisons
    def cmp(self, other: Any) -> Any:
        """Return ``-1``, ``0`` or ``1`` as this value is below, equal to or
        above *other*."""

        def _cmp(a: "Rational", b: "Rational") -> int:
            a_sign, b_sign = a.sign, b.sign
            if a_sign != b_sign:
                return 1 if a_sign > b_sign else -1
            if a._denominator == b._denominator:
                return _sign(a._numerator - b._numerator)
            return _sign(a._numerator * b._denominator - b._numerator * a._denominator)

        return self._binary_operation(other, _cmp)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, numbers.Integral):
            return self._denominator == 1 and self._numerator == int(other)
        if isinstance(other, Fraction):
            return (
                self._numerator == other.numerator
                and self._denominator == other.denominator
            )
        return NotImplemented

    def __hash__(self) -> int:
        # Matches hash(int) and hash(Fraction) for equal values.
        return hash(self.as_fraction())


def is_rational(value: Any) -> bool:
    """Return ``True`` when *value* is a :class:`Rational`."""
    return Rational.is_rational(value)


def rationalize(value: RationalLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


_ZERO = Rational._from_parts(0, 1)
_ONE = Rational._from_parts(1, 1)


__all__ = [
    "Rational",
    "RationalLike",
    "rationalize",
    "is_rational",
    "DEFAULT_MAX_DENOMINATOR",
]
