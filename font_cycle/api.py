"""High-level API: wire a host, a registry and the engines together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from font_cycle.config import Config
from font_cycle.engine import (
    ApplyEngine,
    InputEvent,
    RotationEngine,
    SessionState,
    StepSession,
)
from font_cycle.exceptions import Diagnostic
from font_cycle.fonts import HostEnvironment, ResourceValidator
from font_cycle.registry import ResourceSpec, SpecRegistry

logger = logging.getLogger(__name__)

Picker = Callable[[Sequence[str]], str | None]


class FontCycler:
    """Cycle through per-key font lists on a host environment.

    Example:
        >>> host = RecordingHost(["Iosevka", "Fira Code"])
        >>> cycler = FontCycler(host)
        >>> cycler.configure([("l", ["Iosevka", "Fira Code"], ["latin"])])
        >>> cycler.rotate("l", [InputEvent.NEXT])
    """

    def __init__(
        self,
        host: HostEnvironment,
        size_scale: float = 1.0,
        registry: SpecRegistry | None = None,
    ) -> None:
        self.host = host
        self.registry = (
            registry if registry is not None else SpecRegistry(ResourceValidator(host))
        )
        self.applier = ApplyEngine(self.registry, host, size_scale=size_scale)
        self.rotation = RotationEngine(self.registry, self.applier)

    @classmethod
    def from_config(cls, host: HostEnvironment, config: Config) -> FontCycler:
        cycler = cls(host, size_scale=config.size_scale)
        cycler.configure(config.entries())
        return cycler

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.registry.diagnostics

    def configure(
        self, entries: Iterable[tuple[str, Iterable[str], object]]
    ) -> list[ResourceSpec]:
        """Register ``(key, fonts, targets)`` entries; existing keys are replaced."""
        specs = []
        for key, fonts, targets in entries:
            specs.append(self.registry.register(key, fonts, targets))
        logger.info("Configured %d specs", len(specs))
        return specs

    def spec(self, key: str) -> ResourceSpec:
        return self.registry.get(key)

    def apply(self, key: str | None = None) -> int:
        """Apply after a change to ``key``, or reconcile everything."""
        if key is None:
            return self.applier.apply_all()
        return self.applier.apply(key)

    def session(self, key: str) -> StepSession:
        return self.rotation.session(key)

    def rotate(
        self,
        key: str,
        events: Iterable[object],
        on_event: Callable[[StepSession, InputEvent], None] | None = None,
    ) -> SessionState:
        """Run a stepwise session for ``key`` driven by ``events``."""
        return self.session(key).run(events, on_event=on_event)

    def select_from_list(self, key: str, picker: Picker) -> str | None:
        """Let ``picker`` choose a font for ``key`` and apply it.

        The picker receives the candidates, current font first, and returns
        one of them or None to leave things unchanged.
        """
        candidates = self.rotation.candidates(key)
        choice = picker(candidates)
        if choice is None:
            logger.debug("Selection for key %r aborted", key)
            return None
        self.rotation.select(key, choice)
        return choice
