"""Host environment interface.

The host is the live rendering environment font-cycle drives. It only has to
answer whether a font exists, report its base font size, and bind a font to a
target. :class:`RecordingHost` keeps everything in memory and logs every call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from font_cycle.exceptions import HostEnvironmentError
from font_cycle.targets import (
    MAX_CODEPOINT,
    SCRIPT_RANGES,
    CodepointRange,
    NamedTarget,
    Target,
)

logger = logging.getLogger(__name__)


class BindMode(str, Enum):
    """How a binding combines with what a target already has."""

    PRIMARY = "primary"  # replaces existing bindings
    FALLBACK = "fallback"  # appended after existing bindings


@dataclass(frozen=True)
class FontRequest:
    """A font family requested at a given size."""

    family: str
    size: float

    def __str__(self) -> str:
        return f"{self.family} {self.size:g}"


@dataclass(frozen=True)
class BindCall:
    """One recorded ``bind_resource_to_range`` call."""

    target: Target
    font: FontRequest
    mode: BindMode


@runtime_checkable
class HostEnvironment(Protocol):
    """Capabilities font-cycle needs from the rendering environment."""

    def resource_exists(self, name: str) -> bool: ...

    def bind_resource_to_range(
        self, target: Target, font: FontRequest, mode: BindMode
    ) -> None: ...

    def current_base_resource_size(self) -> float: ...


def check_target(target: Target) -> None:
    """Reject targets no host can bind.

    Raises:
        HostEnvironmentError: For unknown script names or invalid ranges.
    """
    if isinstance(target, NamedTarget):
        if target.name not in SCRIPT_RANGES:
            raise HostEnvironmentError(f"Unknown script: {target.name}", target)
    elif isinstance(target, CodepointRange):
        if not 0 <= target.lower <= target.upper <= MAX_CODEPOINT:
            raise HostEnvironmentError(f"Invalid codepoint range: {target}", target)
    else:
        raise HostEnvironmentError(f"Unsupported target: {target!r}", target)


@dataclass
class Fontset:
    """Live mapping of targets to their ordered font bindings."""

    bindings: dict[Target, list[FontRequest]] = field(default_factory=dict)

    def bind(self, target: Target, font: FontRequest, mode: BindMode) -> None:
        if mode is BindMode.PRIMARY or target not in self.bindings:
            self.bindings[target] = [font]
        else:
            self.bindings[target].append(font)

    def fonts_for(self, target: Target) -> list[FontRequest]:
        return list(self.bindings.get(target, []))

    def primary(self, target: Target) -> FontRequest | None:
        fonts = self.bindings.get(target)
        return fonts[0] if fonts else None


class RecordingHost:
    """In-memory host with a fixed set of available fonts.

    Every binding is checked with :func:`check_target`, applied to
    :attr:`fontset`, and appended to :attr:`calls`.
    """

    def __init__(self, available: Iterable[str] = (), base_size: float = 12.0) -> None:
        self.available = set(available)
        self.base_size = base_size
        self.fontset = Fontset()
        self.calls: list[BindCall] = []

    def resource_exists(self, name: str) -> bool:
        return name in self.available

    def bind_resource_to_range(
        self, target: Target, font: FontRequest, mode: BindMode
    ) -> None:
        check_target(target)
        logger.debug("bind %s -> %s (%s)", target, font, mode.value)
        self.calls.append(BindCall(target, font, mode))
        self.fontset.bind(target, font, mode)

    def current_base_resource_size(self) -> float:
        return self.base_size

    def applied(self, target: Target) -> str | None:
        """Family currently bound as primary for ``target``."""
        font = self.fontset.primary(target)
        return font.family if font else None
