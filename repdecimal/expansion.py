"""Exact decimal expansion of non-negative fractions by long division."""
from __future__ import annotations

import itertools
import logging
import numbers
from typing import Dict, Iterator, List, NamedTuple, Tuple

from .errors import ExpanderConsumedError, InvalidDenominatorError

logger = logging.getLogger(__name__)


class DecimalExpansion(NamedTuple):
    """Digits of a fraction split into the non-repeating prefix and the cycle.

    ``prefix[0]`` is the whole part; ``prefix[1:]`` are the fractional digits
    written before the repeating block starts. ``cycle`` is empty for a
    terminating expansion.
    """

    prefix: Tuple[int, ...]
    cycle: Tuple[int, ...]

    @property
    def whole(self) -> int:
        return self.prefix[0]

    @property
    def fraction(self) -> Tuple[int, ...]:
        return self.prefix[1:]

    @property
    def is_terminating(self) -> bool:
        return not self.cycle


def _ensure_natural(value: numbers.Integral, *, name: str) -> int:
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class DigitExpander:
    """Single-pass long-division engine for ``numerator / denominator``.

    The expander mutates its own state as it produces digits, so it can be
    driven exactly once: either call :meth:`get_repeating` or iterate over it.
    Build a new instance for every expansion request.

    Iterating yields the whole part first and then one fractional digit per
    step, forever. Bound the iteration yourself (see :meth:`take`) or use
    :meth:`get_repeating` for cycle-aware output.
    """

    __slots__ = ("_numerator", "_denominator", "_started", "_finished", "steps_taken")

    def __init__(self, numerator: numbers.Integral, denominator: numbers.Integral) -> None:
        num = _ensure_natural(numerator, name="numerator")
        den = _ensure_natural(denominator, name="denominator")
        if den == 0:
            raise InvalidDenominatorError("denominator must not be zero")
        self._numerator = num
        self._denominator = den
        self._started = False
        self._finished = False
        self.steps_taken = 0

    def __repr__(self) -> str:
        return f"DigitExpander({self._numerator}, {self._denominator})"

    # ------------------------------------------------------------------
    # Long division
    def _step(self) -> int:
        """Emit the next quotient digit and carry the remainder down."""
        digit, remainder = divmod(self._numerator, self._denominator)
        self._numerator = remainder * 10
        self.steps_taken += 1
        return digit

    def get_repeating(self) -> DecimalExpansion:
        """Expand fully, returning the prefix digits and the repeating cycle.

        At most ``denominator`` digits are produced: every loop iteration
        records a distinct non-zero remainder below ``denominator``.
        """
        if self._started:
            raise ExpanderConsumedError("DigitExpander has already been consumed")
        self._started = self._finished = True

        # remainder -> position of the digit it was recorded with
        history: Dict[int, int] = {}
        digits: List[int] = []
        remainder = self._numerator % self._denominator
        while self._numerator != 0 and remainder != 0 and remainder not in history:
            history[remainder] = len(digits)
            digits.append(self._step())
            remainder = self._numerator % self._denominator
        digits.append(self._step())

        index = history.get(remainder)
        if index is None:
            logger.debug("terminating expansion after %d digit(s)", len(digits))
            return DecimalExpansion(tuple(digits), ())
        logger.debug(
            "cycle of length %d detected after %d digit(s)",
            len(digits) - index - 1,
            index + 1,
        )
        return DecimalExpansion(tuple(digits[: index + 1]), tuple(digits[index + 1 :]))

    # ------------------------------------------------------------------
    # Iterator protocol
    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._finished:
            raise ExpanderConsumedError("DigitExpander has already been consumed")
        self._started = True
        return self._step()

    def take(self, count: int) -> List[int]:
        """Return the next ``count`` values of the digit stream."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return list(itertools.islice(self, count))


def expand(numerator: numbers.Integral, denominator: numbers.Integral) -> DecimalExpansion:
    """Shorthand for ``DigitExpander(numerator, denominator).get_repeating()``."""

    return DigitExpander(numerator, denominator).get_repeating()


__all__ = ["DecimalExpansion", "DigitExpander", "expand"]
