"""Font availability and host environments for font-cycle.

This subpackage provides:
- The host environment protocol and an in-memory recording host
- Installed-font discovery (fontconfig or fontTools directory scan)
- The availability filter applied to configured font lists
"""

from font_cycle.fonts.host import (
    BindCall,
    BindMode,
    Fontset,
    FontRequest,
    HostEnvironment,
    RecordingHost,
)
from font_cycle.fonts.system import SystemFontHost, SystemFonts
from font_cycle.fonts.validator import ResourceValidator

__all__ = [
    "BindCall",
    "BindMode",
    "Fontset",
    "FontRequest",
    "HostEnvironment",
    "RecordingHost",
    "ResourceValidator",
    "SystemFontHost",
    "SystemFonts",
]
