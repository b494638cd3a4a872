"""Spec registry: per-key font lists and their targets.

The first font of a spec's list is the current one. Rotation reorders the
list in place instead of tracking a separate index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from font_cycle.exceptions import Diagnostic, NotFoundError
from font_cycle.fonts.validator import ResourceValidator
from font_cycle.targets import Target, parse_targets

logger = logging.getLogger(__name__)


@dataclass
class ResourceSpec:
    """Ordered fonts for one key and the targets they are applied to."""

    key: str
    resources: list[str] = field(default_factory=list)
    targets: list[Target] = field(default_factory=list)

    @property
    def head(self) -> str | None:
        """The current font, or None when no configured font is available."""
        return self.resources[0] if self.resources else None

    @property
    def fallbacks(self) -> list[str]:
        return self.resources[1:]

    @property
    def is_empty(self) -> bool:
        return not self.resources


class SpecRegistry:
    """Mapping of key to :class:`ResourceSpec`, shared by the engines."""

    def __init__(self, validator: ResourceValidator) -> None:
        self.validator = validator
        self._specs: dict[str, ResourceSpec] = {}

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.validator.diagnostics

    def register(
        self, key: str, raw_resources: Iterable[str], targets: Iterable[object]
    ) -> ResourceSpec:
        """Validate ``raw_resources`` and store the spec, replacing any for ``key``.

        Diagnostics from an earlier registration of ``key`` are discarded.
        """
        self.validator.forget(key)
        resources = self.validator.validate(list(raw_resources), key=key)
        spec = ResourceSpec(key, resources, parse_targets(targets))
        if key in self._specs:
            logger.debug("Replacing spec for key %r", key)
        self._specs[key] = spec
        return spec

    def get(self, key: str) -> ResourceSpec:
        try:
            return self._specs[key]
        except KeyError:
            raise NotFoundError(f"No spec configured for key '{key}'", key) from None

    def rotate_to(self, key: str, resource: str) -> None:
        """Left-rotate the spec's fonts so ``resource`` comes first.

        Raises:
            NotFoundError: If ``key`` is unknown or ``resource`` is not listed.
        """
        spec = self.get(key)
        try:
            index = spec.resources.index(resource)
        except ValueError:
            raise NotFoundError(
                f"Font '{resource}' is not configured for key '{key}'", key
            ) from None
        if index:
            spec.resources[:] = spec.resources[index:] + spec.resources[:index]
            logger.debug("Rotated %r to %r", key, resource)

    def keys(self) -> list[str]:
        return list(self._specs)

    def clear(self) -> None:
        """Drop all specs and diagnostics, ahead of a configuration reload."""
        self._specs.clear()
        self.validator.diagnostics.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ResourceSpec]:
        return iter(list(self._specs.values()))
