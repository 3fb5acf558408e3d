"""Decimal expansion of whole NumPy arrays of fractions.

A grid such as ``1/d`` for ``d = 1..N`` is built once with
:func:`rational_grid` and then summarised element-wise: the rendered strings,
the length of each repeating block and the number of non-repeating
fractional digits. Every element goes through its own
:class:`~repdecimal.expansion.DigitExpander`.
"""
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .formatting import DEFAULT_STYLE
from .rational import RationalNumber


def rational_grid(numerators: Any, denominators: Any, *, bits: Optional[int] = None) -> np.ndarray:
    """Broadcast ``numerators`` against ``denominators`` into an object array.

    Raises :class:`~repdecimal.errors.InvalidDenominatorError` if any
    denominator is zero.
    """
    build = np.frompyfunc(lambda n, d: RationalNumber(n, d, bits=bits), 2, 1)
    return np.asarray(build(np.asarray(numerators), np.asarray(denominators)), dtype=object)


def as_rationals(values: Any, *, bits: Optional[int] = None) -> np.ndarray:
    """Coerce ints, Fractions or :class:`RationalNumber` items into an object array."""
    coerce = np.frompyfunc(lambda value: RationalNumber.rationalize(value, bits=bits), 1, 1)
    return np.asarray(coerce(np.asarray(values, dtype=object)), dtype=object)


def _map(values: Any, func, dtype) -> np.ndarray:
    rationals = as_rationals(values)
    return np.asarray(np.frompyfunc(func, 1, 1)(rationals)).astype(dtype)


def decimal_strings(values: Any, style: str = DEFAULT_STYLE) -> np.ndarray:
    """Cycle-marked rendering of every element, as a unicode array."""
    return _map(values, lambda value: value.to_decimal_string(style=style), str)


def cycle_lengths(values: Any) -> np.ndarray:
    """Length of the repeating block of every element; 0 when it terminates."""
    return _map(values, lambda value: len(value.decimal_expansion().cycle), np.int64)


def prefix_lengths(values: Any) -> np.ndarray:
    """Number of fractional digits written before the repeating block starts."""
    return _map(values, lambda value: len(value.decimal_expansion().fraction), np.int64)


def longest_cycle(values: Any) -> RationalNumber:
    """Return the element with the longest repeating block (first one on ties)."""
    rationals = as_rationals(values)
    if rationals.size == 0:
        raise ValueError("longest_cycle() arg is an empty array")
    return rationals.flat[int(np.argmax(cycle_lengths(rationals)))]


__all__ = [
    "rational_grid",
    "as_rationals",
    "decimal_strings",
    "cycle_lengths",
    "prefix_lengths",
    "longest_cycle",
]
