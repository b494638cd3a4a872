"""Filter configured font lists down to fonts the host actually has."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from font_cycle.exceptions import Diagnostic, DiagnosticKind
from font_cycle.fonts.host import HostEnvironment

logger = logging.getLogger(__name__)


class ResourceValidator:
    """Order-preserving availability filter.

    Missing fonts are expected (configs are shared between machines), so they
    never raise. Each dropped font is recorded as a configuration warning and
    an empty result as a single empty-list diagnostic.
    """

    def __init__(self, host: HostEnvironment) -> None:
        self.host = host
        self.diagnostics: list[Diagnostic] = []

    def _report(self, kind: DiagnosticKind, key: str | None, message: str) -> None:
        self.diagnostics.append(Diagnostic(kind, key, message))

    def forget(self, key: str | None) -> None:
        """Drop the diagnostics recorded for ``key``."""
        self.diagnostics[:] = [d for d in self.diagnostics if d.key != key]

    def validate(self, names: Iterable[str], key: str | None = None) -> list[str]:
        """Return the available names from ``names``, in input order.

        Duplicates are collapsed onto their first occurrence.
        """
        kept: list[str] = []
        for name in names:
            if name in kept:
                continue
            if self.host.resource_exists(name):
                kept.append(name)
                continue
            logger.warning("Font %r for key %r is not available; dropped", name, key)
            self._report(
                DiagnosticKind.CONFIGURATION_WARNING,
                key,
                f"Font '{name}' for key '{key}' is not available",
            )

        if not kept:
            logger.warning("No available fonts for key %r", key)
            self._report(
                DiagnosticKind.EMPTY_RESOURCE_LIST,
                key,
                f"No available fonts for key '{key}'",
            )
        return kept
