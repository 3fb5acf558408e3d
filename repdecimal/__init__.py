"""Exact rational arithmetic with repeating-decimal rendering."""

from .config import DEFAULT_MAGNITUDE_BITS, DisplayConfig, load_config
from .errors import (
    DivisionByZeroError,
    ExpanderConsumedError,
    InvalidDenominatorError,
    MagnitudeOverflowError,
    RationalError,
)
from .expansion import DecimalExpansion, DigitExpander, expand
from .formatting import format_expansion, format_truncated
from .rational import RationalNumber, rationalize
from .tables import (
    as_rationals,
    cycle_lengths,
    decimal_strings,
    longest_cycle,
    prefix_lengths,
    rational_grid,
)

__all__ = [
    "RationalNumber",
    "rationalize",
    "rational_grid",
    "as_rationals",
    "decimal_strings",
    "cycle_lengths",
    "prefix_lengths",
    "longest_cycle",
    "DecimalExpansion",
    "DigitExpander",
    "expand",
    "format_expansion",
    "format_truncated",
    "DisplayConfig",
    "load_config",
    "DEFAULT_MAGNITUDE_BITS",
    "RationalError",
    "InvalidDenominatorError",
    "DivisionByZeroError",
    "MagnitudeOverflowError",
    "ExpanderConsumedError",
]
