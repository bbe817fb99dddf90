"""Host loop for the foxtype typing test."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from foxtype.core.models import APP_TITLE, InputEvent
from foxtype.core.session import Session

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    """Blocking source of input events."""

    def read_event(self) -> InputEvent: ...


class Renderer(Protocol):
    """Draws display lines inside a titled frame."""

    def draw(self, title: str, lines: Sequence[str]) -> None: ...


class TypingApp:
    """Main application class: draw, wait for an event, apply it, repeat."""

    def __init__(
        self,
        session: Session,
        events: EventSource,
        renderer: Renderer,
        title: str = APP_TITLE,
    ):
        """Initialize the application.

        Args:
            session: Session to drive
            events: Source of input events
            renderer: Renderer for the session's display lines
            title: Frame title
        """
        self.session = session
        self.events = events
        self.renderer = renderer
        self.title = title
        self.session.register_callback("state_changed", self._on_state_changed)

    def _on_state_changed(self, data: dict) -> None:
        logger.info(f"Session {data['previous'].value} -> {data['phase'].value}")

    def run(self) -> int:
        """Run until the session terminates.

        Errors raised by the event source or the renderer are not handled
        here; they abort the loop.

        Returns:
            Number of events processed
        """
        count = 0
        logger.info("Entering main loop")
        while not self.session.is_terminated():
            self.renderer.draw(self.title, self.session.render_lines())
            event = self.events.read_event()
            self.session.update(event)
            count += 1

        logger.info(f"Main loop finished after {count} events")
        return count
