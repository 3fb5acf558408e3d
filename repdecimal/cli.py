"""Print the float, truncated digits and cycle rendering of a fraction."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DisplayConfig, load_config
from .errors import RationalError
from .formatting import CYCLE_MARKERS, format_truncated
from .rational import RationalNumber

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repdecimal",
        description="Show the exact decimal expansion of numerator/denominator.",
    )
    parser.add_argument("numerator", type=int, help="Signed integer numerator")
    parser.add_argument("denominator", type=int, help="Signed, non-zero integer denominator")
    parser.add_argument("--digits", type=int, help="Number of raw fractional digits to print")
    parser.add_argument("--style", choices=sorted(CYCLE_MARKERS), help="Marker for the repeating block")
    parser.add_argument("--bits", type=int, help="Magnitude width in bits")
    parser.add_argument("--config", dest="config", help="TOML file with display settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> DisplayConfig:
    config = load_config(args.config) if args.config else DisplayConfig()
    return config.replace(digits=args.digits, style=args.style, bits=args.bits)


def render(number: RationalNumber, config: DisplayConfig) -> List[str]:
    negative = number.sign
    return [
        repr(number.get_decimal()),
        format_truncated(number.digits(), config.digits, negative=negative),
        number.to_decimal_string(style=config.style),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        number = RationalNumber(args.numerator, args.denominator, bits=config.bits)
        lines = render(number, config)
    except RationalError as exc:
        logger.error("%s/%s: %s", args.numerator, args.denominator, exc)
        return 1

    logger.debug("rendering %r with %s", number, config)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
