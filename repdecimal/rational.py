"""Exact signed rational numbers kept in lowest terms."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

from .config import DEFAULT_MAGNITUDE_BITS
from .errors import DivisionByZeroError, InvalidDenominatorError, MagnitudeOverflowError
from .expansion import DecimalExpansion, DigitExpander
from .formatting import DEFAULT_STYLE, format_expansion

NumberLike = Union["RationalNumber", Fraction, numbers.Integral]


def _ensure_int(value: numbers.Integral, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _signum(value: int) -> int:
    return (value > 0) - (value < 0)


def _check_width(magnitude: int, bits: int) -> int:
    if magnitude.bit_length() > bits:
        raise MagnitudeOverflowError(magnitude, bits)
    return magnitude


def _checked_mul(bits: int, a: int, b: int) -> int:
    """Multiply two magnitudes, refusing results wider than ``bits``."""
    return _check_width(a * b, bits)


class RationalNumber:
    """Signed fraction stored as a sign flag plus an unsigned magnitude.

    Both magnitudes are limited to ``bits`` bits (64 unless configured) and
    every operator checks its intermediate products against that width instead
    of letting them grow. Instances are always in lowest terms, and zero is
    always ``0/1`` with a non-negative sign.
    """

    __slots__ = ("_sign", "_numerator", "_denominator", "_bits")

    def __init__(
        self,
        numerator: numbers.Integral = 0,
        denominator: numbers.Integral = 1,
        *,
        bits: Optional[int] = None,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise InvalidDenominatorError("denominator must not be zero")

        if bits is None:
            bits = DEFAULT_MAGNITUDE_BITS
        if bits < 1:
            raise ValueError("bits must be >= 1")

        sign = _signum(num) * _signum(den) == -1
        sign, num_mag, den_mag = self._reduce(
            sign, _check_width(abs(num), bits), _check_width(abs(den), bits)
        )

        self._sign = sign
        self._numerator = num_mag
        self._denominator = den_mag
        self._bits = bits

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(cls, value: Fraction, *, bits: Optional[int] = None) -> "RationalNumber":
        """Create a :class:`RationalNumber` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator, bits=bits)

    @classmethod
    def rationalize(cls, value: NumberLike, *, bits: Optional[int] = None) -> "RationalNumber":
        """Coerce an exact numeric value into :class:`RationalNumber`."""
        if isinstance(value, RationalNumber):
            if bits is None or bits == value._bits:
                return value
            return cls(value.signum() * value._numerator, value._denominator, bits=bits)
        if isinstance(value, Fraction):
            return cls.from_fraction(value, bits=bits)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1, bits=bits)
        raise TypeError(f"Cannot convert {type(value)!r} to RationalNumber")

    # ------------------------------------------------------------------
    # Properties and accessors
    @property
    def numerator(self) -> int:
        """Magnitude of the numerator; the sign lives in :attr:`sign`."""
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def sign(self) -> bool:
        """``True`` for negative values. Zero is never negative."""
        return self._sign

    @property
    def bits(self) -> int:
        return self._bits

    def signum(self) -> int:
        if self._numerator == 0:
            return 0
        return -1 if self._sign else 1

    def get_decimal(self) -> float:
        """Floating point approximation; no precision guarantee."""
        return self._numerator / self._denominator * self.signum()

    def reciprocal(self) -> "RationalNumber":
        if self._numerator == 0:
            raise DivisionByZeroError("numerator must not be zero")
        return RationalNumber(
            self._denominator * self.signum(),
            self._numerator,
            bits=self._bits,
        )

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self.signum() * self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Decimal expansion
    def digits(self) -> DigitExpander:
        """Return a fresh single-use digit stream for the magnitude."""
        return DigitExpander(self._numerator, self._denominator)

    def decimal_expansion(self) -> DecimalExpansion:
        return self.digits().get_repeating()

    def to_decimal_string(self, style: str = DEFAULT_STYLE) -> str:
        """Render as ``[-]whole.prefix`` followed by the marked repeating block.

        The repeating block of ``n/d`` can be up to ``d - 1`` digits long, and
        the expansion keeps every remainder until the cycle closes. A large
        prime denominator near the 64-bit limit therefore never finishes in
        practice. Build values with a smaller ``bits`` to cap the cost, or
        use :meth:`digits` for a bounded number of digits.
        """
        return format_expansion(self.decimal_expansion(), negative=self._sign, style=style)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self.get_decimal()

    def __int__(self) -> int:
        return self.signum() * (self._numerator // self._denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"RationalNumber({self.signum() * self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        """Full cycle-marked expansion; see :meth:`to_decimal_string` for the cost."""
        return self.to_decimal_string()

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            return str(self)
        if format_spec in ("r", "R"):
            if self._denominator == 1:
                return str(self.signum() * self._numerator)
            return f"{self.signum() * self._numerator}/{self._denominator}"
        if format_spec == "o":
            return self.to_decimal_string(style="overline")
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _reduce(sign: bool, num: int, den: int) -> Tuple[bool, int, int]:
        gcd = math.gcd(num, den)
        num //= gcd
        den //= gcd
        if num == 0:
            sign = False
        return sign, num, den

    def _coerce_scalar(self, value: Any) -> "RationalNumber":
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, Fraction):
            return RationalNumber.from_fraction(value, bits=self._bits)
        if isinstance(value, numbers.Integral):
            return RationalNumber(int(value), 1, bits=self._bits)
        raise TypeError(f"Cannot interpret {type(value)!r} as RationalNumber")

    def _binary_operation(self, other: Any, op):
        return op(self, self._coerce_scalar(other))

    def _reflected_operation(self, other: Any, op):
        return op(self._coerce_scalar(other), self)

    @staticmethod
    def _combine_bits(a: "RationalNumber", b: "RationalNumber") -> int:
        return max(a._bits, b._bits)

    # ------------------------------------------------------------------
    # Arithmetic operators
    @staticmethod
    def _add(a: "RationalNumber", b: "RationalNumber") -> "RationalNumber":
        bits = RationalNumber._combine_bits(a, b)
        total = (
            _checked_mul(bits, a._numerator, b._denominator) * a.signum()
            + _checked_mul(bits, b._numerator, a._denominator) * b.signum()
        )
        return RationalNumber(
            total,
            _checked_mul(bits, a._denominator, b._denominator),
            bits=bits,
        )

    @staticmethod
    def _mul(a: "RationalNumber", b: "RationalNumber") -> "RationalNumber":
        bits = RationalNumber._combine_bits(a, b)
        return RationalNumber(
            _checked_mul(bits, a._numerator, b._numerator) * a.signum() * b.signum(),
            _checked_mul(bits, a._denominator, b._denominator),
            bits=bits,
        )

    @staticmethod
    def _sub(a: "RationalNumber", b: "RationalNumber") -> "RationalNumber":
        return RationalNumber._add(a, -b)

    @staticmethod
    def _truediv(a: "RationalNumber", b: "RationalNumber") -> "RationalNumber":
        return RationalNumber._mul(a, b.reciprocal())

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._truediv)

    def __neg__(self) -> "RationalNumber":
        return RationalNumber(
            -self.signum() * self._numerator,
            self._denominator,
            bits=self._bits,
        )

    def __pos__(self) -> "RationalNumber":
        return self

    def __abs__(self) -> "RationalNumber":
        return RationalNumber(self._numerator, self._denominator, bits=self._bits)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        other_rat = self._coerce_scalar(other)
        return op(
            self.signum() * self._numerator * other_rat._denominator,
            other_rat.signum() * other_rat._numerator * self._denominator,
        )

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except TypeError:
            return False

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:  # matches hash() of equal ints and Fractions
        return hash(self.as_fraction())


def rationalize(value: NumberLike, *, bits: Optional[int] = None) -> RationalNumber:
    """Public helper to convert *value* into :class:`RationalNumber`."""

    return RationalNumber.rationalize(value, bits=bits)


__all__ = [
    "RationalNumber",
    "rationalize",
]
