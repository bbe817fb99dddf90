"""Terminal setup and teardown."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from blessed import Terminal

logger = logging.getLogger(__name__)


@contextmanager
def terminal_session(term: Terminal) -> Iterator[Terminal]:
    """Put the terminal into full-screen cbreak mode with a hidden cursor.

    The previous terminal state is restored on exit, including when the
    body raises.

    Args:
        term: Terminal to configure

    Yields:
        The configured terminal
    """
    logger.debug(f"Entering full-screen mode ({term.width}x{term.height})")
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        yield term
    logger.debug("Terminal restored")
