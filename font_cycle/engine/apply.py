"""Push the current font of every spec onto the host."""

from __future__ import annotations

import logging

from font_cycle.fonts.host import BindMode, FontRequest, HostEnvironment
from font_cycle.registry import ResourceSpec, SpecRegistry

logger = logging.getLogger(__name__)


class ApplyEngine:
    """Reconcile the host's fontset with the registry.

    Each target gets the spec's head as primary binding, followed by the rest
    of the list as fallbacks, so the host falls back through them for glyphs
    the head cannot render. Host errors are not handled here.
    """

    def __init__(
        self, registry: SpecRegistry, host: HostEnvironment, size_scale: float = 1.0
    ) -> None:
        self.registry = registry
        self.host = host
        self.size_scale = size_scale

    def font_size(self) -> float:
        return round(self.host.current_base_resource_size() * self.size_scale, 2)

    def _apply_spec(self, spec: ResourceSpec, size: float) -> int:
        calls = 0
        for target in spec.targets:
            for position, family in enumerate(spec.resources):
                mode = BindMode.PRIMARY if position == 0 else BindMode.FALLBACK
                self.host.bind_resource_to_range(target, FontRequest(family, size), mode)
                calls += 1
        return calls

    def apply(self, key: str) -> int:
        """Apply after a change to ``key``; returns the number of host calls.

        All specs are re-applied, not only ``key``'s. A key whose font list
        is empty is reported and leaves the host untouched.

        Raises:
            NotFoundError: If ``key`` is not configured.
            HostEnvironmentError: If the host rejects a target or binding.
        """
        spec = self.registry.get(key)
        if spec.is_empty:
            logger.warning("Nothing to apply for key %r: no available fonts", key)
            return 0
        return self.apply_all()

    def apply_all(self) -> int:
        size = self.font_size()
        calls = 0
        for spec in self.registry:
            if spec.is_empty:
                continue
            calls += self._apply_spec(spec, size)
        logger.debug(
            "Applied %d specs with %d bindings at size %g", len(self.registry), calls, size
        )
        return calls
