"""Target descriptors: the codepoint sets a font is bound to.

A target is either a named script category (``latin``, ``han``, ...) or an
explicit inclusive codepoint range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, TypeAlias

from font_cycle.exceptions import ConfigError

MAX_CODEPOINT = 0x10FFFF

# Representative blocks per script; hosts use this to accept named targets.
SCRIPT_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    "latin": ((0x0000, 0x024F), (0x1E00, 0x1EFF)),
    "greek": ((0x0370, 0x03FF), (0x1F00, 0x1FFF)),
    "cyrillic": ((0x0400, 0x052F),),
    "armenian": ((0x0530, 0x058F),),
    "hebrew": ((0x0590, 0x05FF),),
    "arabic": ((0x0600, 0x06FF), (0x0750, 0x077F), (0xFB50, 0xFDFF)),
    "devanagari": ((0x0900, 0x097F),),
    "bengali": ((0x0980, 0x09FF),),
    "thai": ((0x0E00, 0x0E7F),),
    "georgian": ((0x10A0, 0x10FF),),
    "hangul": ((0x1100, 0x11FF), (0x3130, 0x318F), (0xAC00, 0xD7AF)),
    "kana": ((0x3040, 0x30FF), (0x31F0, 0x31FF)),
    "han": ((0x2E80, 0x2FDF), (0x3400, 0x4DBF), (0x4E00, 0x9FFF), (0xF900, 0xFAFF)),
    "symbol": ((0x2000, 0x2BFF),),
    "mathematical": ((0x1D400, 0x1D7FF),),
    "emoji": ((0x1F300, 0x1FAFF),),
}


@dataclass(frozen=True)
class NamedTarget:
    """A script category known to the host by name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CodepointRange:
    """An inclusive range of codepoints."""

    lower: int
    upper: int

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.lower <= codepoint <= self.upper

    def __str__(self) -> str:
        return f"U+{self.lower:04X}..U+{self.upper:04X}"


Target: TypeAlias = NamedTarget | CodepointRange

_RANGE_RE = re.compile(
    r"^\s*(?:U\+|0x)?([0-9a-f]+)\s*(?:\.\.|-)\s*(?:U\+|0x)?([0-9a-f]+)\s*$",
    re.IGNORECASE,
)


def _codepoint(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid codepoint: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # Strings are always hexadecimal, with or without a U+/0x prefix.
        text = value.strip()
        if text[:2].upper() == "U+":
            text = text[2:]
        try:
            return int(text, 16)
        except ValueError:
            raise ConfigError(f"Invalid codepoint: {value!r}") from None
    raise ConfigError(f"Invalid codepoint: {value!r}")


def parse_target(value: Any) -> Target:
    """Build a target from a configuration value.

    Accepts an existing target, a script name (``"latin"``), a range string
    (``"U+2500..U+257F"`` or ``"0x2500-0x257f"``) or a ``[lower, upper]`` pair.

    Raises:
        ConfigError: If the value cannot be interpreted as a target.
    """
    if isinstance(value, (NamedTarget, CodepointRange)):
        return value
    if isinstance(value, str):
        match = _RANGE_RE.match(value)
        if match:
            return CodepointRange(int(match.group(1), 16), int(match.group(2), 16))
        name = value.strip().lower()
        if not name:
            raise ConfigError("Empty target name")
        return NamedTarget(name)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return CodepointRange(_codepoint(value[0]), _codepoint(value[1]))
    raise ConfigError(f"Cannot interpret target: {value!r}")


def parse_targets(values: Any) -> list[Target]:
    """Parse a single target or a list of targets."""
    if isinstance(values, (str, NamedTarget, CodepointRange)):
        return [parse_target(values)]
    # A bare pair of integers is one range, whether given as a list or a tuple.
    if isinstance(values, (list, tuple)) and len(values) == 2 and all(
        isinstance(v, int) and not isinstance(v, bool) for v in values
    ):
        return [parse_target(values)]
    return [parse_target(v) for v in values]
