"""Pytest configuration and shared fixtures for font-cycle tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from font_cycle import FontCycler, RecordingHost
from font_cycle.fonts import SystemFonts


@pytest.fixture
def host() -> RecordingHost:
    """Return a recording host where A, B, C and X are installed."""
    return RecordingHost(["A", "B", "C", "X"], base_size=12.0)


@pytest.fixture
def cycler(host: RecordingHost) -> FontCycler:
    """Return a cycler with key 'l' configured as A, B, C on latin."""
    cycler = FontCycler(host)
    cycler.configure([("l", ["A", "B", "C"], ["latin"])])
    return cycler


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a configuration file with two keys and one missing font."""
    content = """\
size_scale: 1.5
base_size: 10
specs:
  - key: l
    fonts: [Alpha Sans, Beta Mono, Missing Font]
    targets: [latin, "U+2500..U+257F"]
  - key: h
    fonts: [Gamma CJK]
    targets: [han, kana]
"""
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def installed_fonts() -> Generator[None, None, None]:
    """Pretend the system has exactly Alpha Sans, Beta Mono and Gamma CJK."""
    saved = SystemFonts._families
    SystemFonts._families = {
        "alphasans": "Alpha Sans",
        "betamono": "Beta Mono",
        "gammacjk": "Gamma CJK",
    }
    yield
    SystemFonts._families = saved


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

