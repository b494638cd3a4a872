"""Rotation state machine.

Stepping moves a spec's head to the cyclically adjacent font and applies it
at once. A :class:`StepSession` wraps stepping in a modal loop that ends on
commit or cancel; cancelling puts back the font that was current when the
session started.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from font_cycle.engine.apply import ApplyEngine
from font_cycle.exceptions import SessionClosedError
from font_cycle.registry import SpecRegistry

logger = logging.getLogger(__name__)


class Direction(int, Enum):
    NEXT = 1
    PREVIOUS = -1


class InputEvent(str, Enum):
    """Events driving a stepwise session."""

    NEXT = "next"
    PREVIOUS = "previous"
    COMMIT = "commit"
    CANCEL = "cancel"


class SessionState(str, Enum):
    ACTIVE = "active"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class RotationEngine:
    """Step or jump through a spec's fonts, re-applying after every change."""

    def __init__(self, registry: SpecRegistry, applier: ApplyEngine) -> None:
        self.registry = registry
        self.applier = applier

    def adjacent(self, key: str, direction: Direction) -> str | None:
        """Font one step away from the head, wrapping at both ends."""
        resources = self.registry.get(key).resources
        if not resources:
            return None
        return resources[direction.value % len(resources)]

    def step(self, key: str, direction: Direction) -> str | None:
        """Rotate one step and apply; returns the new head."""
        target = self.adjacent(key, direction)
        if target is None:
            logger.warning("Cannot rotate key %r: no available fonts", key)
            return None
        self.select(key, target)
        return target

    def select(self, key: str, resource: str) -> None:
        """Make ``resource`` current in one step and apply.

        Selecting the current head leaves the list as is but still applies.
        """
        self.registry.rotate_to(key, resource)
        self.applier.apply(key)
        logger.debug("Key %r now uses %r", key, resource)

    def candidates(self, key: str) -> list[str]:
        """The fonts offered by direct selection, current one first."""
        return list(self.registry.get(key).resources)

    def session(self, key: str) -> StepSession:
        return StepSession(self, key)


class StepSession:
    """A stepwise cursor over one key's fonts.

    The session starts ACTIVE and ends COMMITTED or CANCELLED. A key without
    available fonts yields a session that is already committed.
    """

    def __init__(self, engine: RotationEngine, key: str) -> None:
        self.engine = engine
        self.key = key
        self.steps = 0
        self.original = engine.registry.get(key).head
        if self.original is None:
            logger.warning("Nothing to rotate for key %r: no available fonts", key)
            self.state = SessionState.COMMITTED
        else:
            self.state = SessionState.ACTIVE
            logger.info("Rotating %r starting at %r", key, self.original)

    @property
    def current(self) -> str | None:
        return self.engine.registry.get(self.key).head

    @property
    def active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def _ensure_active(self) -> None:
        if not self.active:
            raise SessionClosedError(
                f"Session for key '{self.key}' is already {self.state.value}"
            )

    def next(self) -> str | None:
        self._ensure_active()
        self.steps += 1
        return self.engine.step(self.key, Direction.NEXT)

    def previous(self) -> str | None:
        self._ensure_active()
        self.steps += 1
        return self.engine.step(self.key, Direction.PREVIOUS)

    def commit(self) -> None:
        self._ensure_active()
        self.state = SessionState.COMMITTED
        logger.info("Kept %r for key %r after %d steps", self.current, self.key, self.steps)

    def cancel(self) -> None:
        """Restore the font that was current when the session began."""
        self._ensure_active()
        self.engine.select(self.key, self.original)
        self.state = SessionState.CANCELLED
        logger.info("Cancelled rotation of %r, restored %r", self.key, self.original)

    def handle(self, event: InputEvent) -> None:
        handlers = {
            InputEvent.NEXT: self.next,
            InputEvent.PREVIOUS: self.previous,
            InputEvent.COMMIT: self.commit,
            InputEvent.CANCEL: self.cancel,
        }
        handlers[event]()

    def run(
        self,
        events: Iterable[object],
        on_event: Callable[[StepSession, InputEvent], None] | None = None,
    ) -> SessionState:
        """Consume events until the session ends.

        Events that are not :class:`InputEvent` members are ignored. Running
        out of events commits the current font. No event is read once the
        session has ended. ``on_event`` is called after each handled event.
        """
        if self.active:
            for event in events:
                if not isinstance(event, InputEvent):
                    logger.debug("Ignoring input %r", event)
                    continue
                self.handle(event)
                if on_event is not None:
                    on_event(self, event)
                if not self.active:
                    break
        if self.active:
            self.commit()
        return self.state
