"""Installed-font discovery and a host backed by it."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import sys
from pathlib import Path

from fontTools.ttLib import TTCollection, TTFont, TTLibError

from font_cycle.fonts.host import BindMode, FontRequest, Fontset, check_target
from font_cycle.targets import Target

logger = logging.getLogger(__name__)

FONT_SUFFIXES = {".ttf", ".otf", ".ttc", ".otc"}


def normalize_family(name: str) -> str:
    """Lowercase a family name and drop everything but letters and digits."""
    return re.sub(r"[^a-z0-9]+", "", name.lower().lstrip("."))


class SystemFonts:
    """Family names of the fonts installed on this machine.

    Discovery runs once per process: ``fc-list`` when fontconfig is present,
    otherwise a scan of the platform font directories with fontTools.
    """

    _families: dict[str, str] | None = None

    def _font_dirs(self) -> list[Path]:
        """Return the platform font directories that exist."""
        home = Path.home()
        if sys.platform == "darwin":
            candidates = [
                Path("/System/Library/Fonts"),
                Path("/Library/Fonts"),
                home / "Library/Fonts",
            ]
        elif sys.platform.startswith("win"):
            windir = Path(os.environ.get("WINDIR", "C:/Windows"))
            candidates = [
                windir / "Fonts",
                home / "AppData/Local/Microsoft/Windows/Fonts",
            ]
        else:
            candidates = [
                Path("/usr/share/fonts"),
                Path("/usr/local/share/fonts"),
                home / ".local/share/fonts",
                home / ".fonts",
            ]
        return [d for d in candidates if d.exists()]

    def _load_fc_list(self) -> list[str] | None:
        """Family names from fontconfig, or None when it is unavailable."""
        try:
            result = subprocess.run(
                ["fc-list", "--format=%{family}\\n"],
                capture_output=True,
                text=True,
                timeout=8,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return None
        if result.returncode != 0:
            return None
        names = []
        for line in result.stdout.splitlines():
            names.extend(f.strip() for f in line.split(",") if f.strip())
        return names

    def _read_families(self, path: Path) -> list[str]:
        """Typographic (or legacy) family names stored in a font file."""
        try:
            if path.suffix.lower() in (".ttc", ".otc"):
                fonts = TTCollection(path, lazy=True).fonts
            else:
                fonts = [TTFont(path, lazy=True)]
        except (TTLibError, OSError) as e:
            logger.debug("Skipping unreadable font %s: %s", path, e)
            return []
        names = []
        for font in fonts:
            if "name" not in font:
                continue
            table = font["name"]
            family = table.getDebugName(16) or table.getDebugName(1)
            if family:
                names.append(family.strip())
        return names

    def _scan_font_dirs(self) -> list[str]:
        names = []
        for font_dir in self._font_dirs():
            for path in sorted(font_dir.rglob("*")):
                if path.suffix.lower() in FONT_SUFFIXES:
                    names.extend(self._read_families(path))
        return names

    def prewarm(self) -> int:
        """Discover installed families; returns how many were found."""
        if SystemFonts._families is None:
            names = self._load_fc_list()
            if names is None:
                logger.info("fc-list unavailable, scanning font directories")
                names = self._scan_font_dirs()
            families: dict[str, str] = {}
            for name in names:
                families.setdefault(normalize_family(name), name)
            SystemFonts._families = families
            logger.debug("Indexed %d font families", len(families))
        return len(SystemFonts._families)

    def families(self) -> list[str]:
        """Installed family names, sorted case-insensitively."""
        self.prewarm()
        return sorted((SystemFonts._families or {}).values(), key=str.lower)

    def has_family(self, name: str) -> bool:
        self.prewarm()
        return normalize_family(name) in (SystemFonts._families or {})


class SystemFontHost:
    """Host over the installed fonts, holding the live fontset in memory."""

    def __init__(self, fonts: SystemFonts | None = None, base_size: float = 12.0) -> None:
        self.fonts = fonts or SystemFonts()
        self.base_size = base_size
        self.fontset = Fontset()

    def resource_exists(self, name: str) -> bool:
        return self.fonts.has_family(name)

    def bind_resource_to_range(
        self, target: Target, font: FontRequest, mode: BindMode
    ) -> None:
        check_target(target)
        logger.debug("bind %s -> %s (%s)", target, font, mode.value)
        self.fontset.bind(target, font, mode)

    def current_base_resource_size(self) -> float:
        return self.base_size
