"""Exceptions and diagnostics for font-cycle.

Fatal conditions are exceptions rooted at :class:`FontCycleError`. Non-fatal
validation problems are not raised; they are recorded as :class:`Diagnostic`
values and logged, so loading of other specs carries on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FontCycleError(Exception):
    """Base exception for font-cycle."""


class NotFoundError(FontCycleError, KeyError):
    """A key or font was requested that is not configured.

    Callers only ever pass keys and fonts taken from a list presented to the
    user, so this signals a programming error rather than bad input.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return self.message


class HostEnvironmentError(FontCycleError):
    """The host environment rejected a target or a font binding."""

    def __init__(self, message: str, target: object | None = None) -> None:
        super().__init__(message)
        self.target = target


class SessionClosedError(FontCycleError):
    """A stepwise session was used after it was committed or cancelled."""


class ConfigError(FontCycleError):
    """Configuration file or target descriptor could not be parsed."""


class DiagnosticKind(str, Enum):
    """Kinds of non-fatal validation diagnostics."""

    CONFIGURATION_WARNING = "configuration-warning"
    EMPTY_RESOURCE_LIST = "empty-resource-list"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while validating a spec."""

    kind: DiagnosticKind
    key: str | None
    message: str

    def __str__(self) -> str:
        return self.message
