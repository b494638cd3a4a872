"""font-cycle: rotate per-script fonts in a live rendering environment.

This library provides:
- Per-key ordered font lists bound to scripts or codepoint ranges
- Stepwise (next/previous) and pick-from-list rotation
- Primary plus fallback bindings reconciled on every change
- Availability filtering against the installed fonts

Example:
    >>> from font_cycle import FontCycler, InputEvent, RecordingHost
    >>> host = RecordingHost(["A", "B", "C"])
    >>> cycler = FontCycler(host)
    >>> cycler.configure([("l", ["A", "B", "C"], ["latin"])])
    >>> cycler.rotate("l", [InputEvent.NEXT])
"""

from font_cycle.api import FontCycler
from font_cycle.config import Config
from font_cycle.engine import InputEvent, SessionState
from font_cycle.exceptions import (
    ConfigError,
    Diagnostic,
    DiagnosticKind,
    FontCycleError,
    HostEnvironmentError,
    NotFoundError,
    SessionClosedError,
)
from font_cycle.fonts import BindMode, RecordingHost, SystemFontHost
from font_cycle.registry import ResourceSpec, SpecRegistry
from font_cycle.targets import CodepointRange, NamedTarget

__version__ = "0.1.0"

__all__ = [
    # Main API
    "FontCycler",
    "Config",
    "InputEvent",
    "SessionState",
    "ResourceSpec",
    "SpecRegistry",
    # Hosts and targets
    "BindMode",
    "RecordingHost",
    "SystemFontHost",
    "CodepointRange",
    "NamedTarget",
    # Exceptions and diagnostics
    "FontCycleError",
    "NotFoundError",
    "HostEnvironmentError",
    "SessionClosedError",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    # Metadata
    "__version__",
]
