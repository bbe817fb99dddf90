"""
foxtype CLI entry point.

This module provides the command-line interface for the foxtype application.
"""

import argparse
import logging
import os
import sys
from importlib.metadata import metadata
from pathlib import Path
from typing import Optional, Sequence

from foxtype.core.logging import setup_logging

# Load package metadata from pyproject.toml
_metadata = metadata("foxtype")
APP_NAME = _metadata["Name"]
APP_VERSION = _metadata["Version"]
APP_DESCRIPTION = _metadata["Summary"]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - {APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  s            start (or restart) the test
  Backspace    delete the last character
  Esc, Ctrl+C  quit

Examples:
  # Start the typing test
  python -m foxtype

  # Write a debug log while playing
  python -m foxtype --log-level DEBUG --log-file foxtype.log
        """,
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        metavar="LEVEL",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write logs to this file (default: no log file)",
    )

    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    return parser


def run_app() -> None:
    """Set up the terminal and run the typing test until the user quits."""
    from blessed import Terminal
    from rich.console import Console

    from foxtype.app import TypingApp
    from foxtype.core.session import Session
    from foxtype.terminal import BlessedEventSource, FrameRenderer, terminal_session

    term = Terminal()
    with terminal_session(term):
        console = Console(highlight=False)
        app = TypingApp(
            session=Session(),
            events=BlessedEventSource(term),
            renderer=FrameRenderer(console, term),
        )
        app.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the foxtype application.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code using os.EX_* constants:
        - os.EX_OK (0): Success
        - os.EX_SOFTWARE (70): Terminal input or output failed
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=args.log_file)
    logger = logging.getLogger(__name__)

    logger.info(f"Starting {APP_NAME} {APP_VERSION}")
    logger.debug(f"Command-line arguments: {args}")

    try:
        run_app()
        return os.EX_OK

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return os.EX_OK

    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return os.EX_SOFTWARE


if __name__ == "__main__":
    sys.exit(main())
