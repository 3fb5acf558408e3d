"""Display settings, optionally loaded from a TOML file."""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Union

from .formatting import CYCLE_MARKERS, DEFAULT_STYLE

DEFAULT_MAGNITUDE_BITS = 64
DEFAULT_DIGITS = 20


@dataclass(frozen=True)
class DisplayConfig:
    style: str = DEFAULT_STYLE
    digits: int = DEFAULT_DIGITS
    bits: int = DEFAULT_MAGNITUDE_BITS

    def __post_init__(self) -> None:
        if self.style not in CYCLE_MARKERS:
            raise ValueError(
                f"style must be one of {sorted(CYCLE_MARKERS)}, got {self.style!r}"
            )
        if isinstance(self.digits, bool) or not isinstance(self.digits, int) or self.digits < 0:
            raise ValueError(f"digits must be a non-negative integer, got {self.digits!r}")
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits < 1:
            raise ValueError(f"bits must be a positive integer, got {self.bits!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DisplayConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def replace(self, **overrides: Any) -> "DisplayConfig":
        """Return a copy with every non-``None`` override applied."""
        values = {field.name: getattr(self, field.name) for field in fields(self)}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return DisplayConfig(**values)


def load_config(path: Union[str, Path]) -> DisplayConfig:
    """Read a :class:`DisplayConfig` from ``path``.

    Settings may sit at the top level of the file or under a ``[repdecimal]``
    table, but not both.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with config_path.open("rb") as handle:
        data = tomllib.load(handle)
    if "repdecimal" in data:
        section = data["repdecimal"]
        if not isinstance(section, dict):
            raise ValueError("[repdecimal] must be a table")
        stray = sorted(key for key in data if key != "repdecimal")
        if stray:
            raise ValueError(
                f"Settings outside the [repdecimal] table: {', '.join(stray)}"
            )
        data = section
    return DisplayConfig.from_mapping(data)


__all__ = ["DEFAULT_DIGITS", "DEFAULT_MAGNITUDE_BITS", "DisplayConfig", "load_config"]
