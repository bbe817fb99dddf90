"""Frame rendering with rich.

Draws the session's lines inside a bordered panel that fills the terminal,
with a centered title and a centered text block.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from blessed import Terminal
from rich.align import Align
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

logger = logging.getLogger(__name__)

TITLE_STYLE = "bold blue"


class FrameRenderer:
    """Draws display lines in a titled, bordered frame."""

    def __init__(self, console: Console, term: Optional[Terminal] = None):
        """Initialize the renderer.

        Args:
            console: Rich console to print to
            term: Optional terminal used to clear the screen and size the frame
        """
        self._console = console
        self._term = term

    def build(self, title: str, lines: Sequence[str], height: Optional[int] = None) -> RenderableType:
        """Build the frame for the given lines without drawing it.

        Args:
            title: Frame title
            lines: Display lines, top to bottom
            height: Frame height in rows (None to fit the content)

        Returns:
            Renderable panel
        """
        body = Text("\n".join(lines), justify="center", no_wrap=False)
        return Panel(
            Align.center(body, vertical="middle"),
            title=Text(title, style=TITLE_STYLE),
            title_align="center",
            height=height,
        )

    def draw(self, title: str, lines: Sequence[str]) -> None:
        """Clear the screen and draw the frame.

        Args:
            title: Frame title
            lines: Display lines, top to bottom
        """
        height = None
        if self._term is not None:
            self._console.file.write(self._term.home + self._term.clear)
            self._console.size = (self._term.width, self._term.height)
            # Leave the last row free so printing does not scroll the screen.
            height = max(self._term.height - 1, 3)

        self._console.print(self.build(title, lines, height=height))
        self._console.file.flush()
