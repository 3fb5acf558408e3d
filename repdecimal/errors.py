"""Exception hierarchy shared by the rational and expansion modules."""


class RationalError(ArithmeticError):
    """Base class for every error raised by :mod:`repdecimal`."""


class InvalidDenominatorError(RationalError, ZeroDivisionError):
    """A fraction or expander was built with a zero denominator."""


class DivisionByZeroError(RationalError, ZeroDivisionError):
    """Division by (or reciprocal of) a zero rational."""


class MagnitudeOverflowError(RationalError, OverflowError):
    """A magnitude no longer fits in the configured unsigned width."""

    def __init__(self, value: int, bits: int) -> None:
        super().__init__(f"magnitude {value} does not fit in {bits} bits")
        self.value = value
        self.bits = bits


class ExpanderConsumedError(RationalError, RuntimeError):
    """A single-use :class:`~repdecimal.expansion.DigitExpander` was reused."""


__all__ = [
    "RationalError",
    "InvalidDenominatorError",
    "DivisionByZeroError",
    "MagnitudeOverflowError",
    "ExpanderConsumedError",
]
