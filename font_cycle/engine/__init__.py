"""Rotation and apply engines."""

from font_cycle.engine.apply import ApplyEngine
from font_cycle.engine.rotation import (
    Direction,
    InputEvent,
    RotationEngine,
    SessionState,
    StepSession,
)

__all__ = [
    "ApplyEngine",
    "Direction",
    "InputEvent",
    "RotationEngine",
    "SessionState",
    "StepSession",
]
