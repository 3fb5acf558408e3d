"""Render decimal expansions with the repeating block marked."""
from __future__ import annotations

from typing import Dict, Tuple

from .expansion import DecimalExpansion, DigitExpander

# style name -> (opening marker, closing marker) around the repeating block
CYCLE_MARKERS: Dict[str, Tuple[str, str]] = {
    "parentheses": ("(", ")"),
    "brackets": ("[", "]"),
    "overline": ("\x1b[53m", "\x1b[0m"),
}

DEFAULT_STYLE = "parentheses"


def _join(digits) -> str:
    return "".join(str(digit) for digit in digits)


def format_expansion(
    expansion: DecimalExpansion,
    *,
    negative: bool = False,
    style: str = DEFAULT_STYLE,
) -> str:
    """Return ``[-]whole.prefix<cycle>`` using the markers of ``style``.

    Integers are rendered without a fractional part and terminating values
    without any cycle marker.
    """
    try:
        opening, closing = CYCLE_MARKERS[style]
    except KeyError:
        raise ValueError(
            f"unknown cycle style {style!r}; expected one of {sorted(CYCLE_MARKERS)}"
        ) from None

    text = ("-" if negative else "") + str(expansion.whole)
    if not expansion.fraction and expansion.is_terminating:
        return text
    text += "." + _join(expansion.fraction)
    if not expansion.is_terminating:
        text += opening + _join(expansion.cycle) + closing
    return text


def format_truncated(expander: DigitExpander, count: int, *, negative: bool = False) -> str:
    """Render the whole part and the next ``count`` raw digits of ``expander``.

    No cycle detection takes place; trailing zeros of a terminating value are
    printed as they come.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    whole, *fraction = expander.take(count + 1)
    text = ("-" if negative else "") + str(whole)
    if fraction:
        text += "." + _join(fraction)
    return text


__all__ = ["CYCLE_MARKERS", "DEFAULT_STYLE", "format_expansion", "format_truncated"]
