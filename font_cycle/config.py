"""Configuration loading for font-cycle.

The configuration file is YAML::

    size_scale: 1.0
    base_size: 13
    keys:
      next: ["n", "j"]
    specs:
      - key: l
        fonts: [Iosevka, Fira Code]
        targets: [latin, "U+2500..U+257F"]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from font_cycle.exceptions import ConfigError
from font_cycle.targets import Target, parse_targets

CONFIG_ENV_VAR = "FONT_CYCLE_CONFIG"


def default_config_path() -> Path:
    """Config path from the environment, else the XDG location."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "font-cycle" / "config.yaml"


@dataclass
class KeyBindings:
    """Terminal keys for the stepwise session."""

    next: list[str] = field(default_factory=lambda: ["n", "j", "\x1b[C"])
    previous: list[str] = field(default_factory=lambda: ["p", "k", "\x1b[D"])
    commit: list[str] = field(default_factory=lambda: ["\r", "\n", "q"])
    cancel: list[str] = field(default_factory=lambda: ["\x1b", "c"])


@dataclass
class SpecConfig:
    key: str
    fonts: list[str]
    targets: list[Target]

    def as_entry(self) -> tuple[str, list[str], list[Target]]:
        return (self.key, list(self.fonts), list(self.targets))


@dataclass
class Config:
    specs: list[SpecConfig] = field(default_factory=list)
    size_scale: float = 1.0
    base_size: float = 12.0
    keys: KeyBindings = field(default_factory=KeyBindings)
    path: Path | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration; a missing file gives the defaults.

        Raises:
            ConfigError: If the file is not valid YAML or has bad values.
        """
        config_path = path or default_config_path()
        if not config_path.exists():
            if path is not None:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        config = cls.from_dict(data or {})
        config.path = config_path
        return config

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        specs = [_parse_spec(i, raw) for i, raw in enumerate(data.get("specs") or [])]
        keys = KeyBindings()
        raw_keys = data.get("keys") or {}
        if not isinstance(raw_keys, dict):
            raise ConfigError("keys must be a mapping of action to key list")
        binding_names = {f.name for f in fields(KeyBindings)}
        for name, values in raw_keys.items():
            if name not in binding_names:
                raise ConfigError(f"Unknown key binding: {name}")
            setattr(keys, name, [values] if isinstance(values, str) else list(values))

        try:
            size_scale = float(data.get("size_scale", 1.0))
            base_size = float(data.get("base_size", 12.0))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid size setting: {e}") from e
        if size_scale <= 0 or base_size <= 0:
            raise ConfigError("size_scale and base_size must be positive")

        return cls(specs=specs, size_scale=size_scale, base_size=base_size, keys=keys)

    def entries(self) -> list[tuple[str, list[str], list[Target]]]:
        """Configuration tuples in the form :meth:`FontCycler.configure` takes."""
        return [spec.as_entry() for spec in self.specs]


def _parse_spec(index: int, raw: Any) -> SpecConfig:
    if not isinstance(raw, dict) or "key" not in raw:
        raise ConfigError(f"specs[{index}]: expected a mapping with a 'key'")
    fonts = raw.get("fonts") or []
    if isinstance(fonts, str):
        fonts = [fonts]
    if not all(isinstance(f, str) for f in fonts):
        raise ConfigError(f"specs[{index}]: font names must be strings")
    targets = parse_targets(raw.get("targets") or [])
    return SpecConfig(key=str(raw["key"]), fonts=list(fonts), targets=targets)
