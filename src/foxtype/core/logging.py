"""Logging configuration for the foxtype application.

The terminal's standard output belongs to the full-screen UI, so console
logging goes to standard error and only for warnings and above. Detailed
logs are written to a file when one is requested.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(threadName)-15s] %(levelname)-5s %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds to the timestamp."""

    def formatTime(self, record, datefmt=None):
        """Format the time with milliseconds.

        Args:
            record: LogRecord instance
            datefmt: Date format string (default: ``DATE_FORMAT``)

        Returns:
            Formatted timestamp string with milliseconds
        """
        ct = self.converter(record.created)
        s = time.strftime(datefmt or DATE_FORMAT, ct)
        return f"{s}.{int(record.msecs):03d}"


def setup_logging(log_level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Configure application-wide logging.

    Log format: YYYY-MM-DD HH:MM:SS.mmm [ThreadName     ] LEVEL  filename.py:line - message

    Args:
        log_level: Logging level for the log file (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. No file is written when omitted.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    formatter = MillisecondFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(max(numeric_level, logging.WARNING))
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(min(numeric_level, logging.WARNING))

    for handler in handlers:
        root_logger.addHandler(handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {log_level}")
    if log_file is not None:
        logger.info(f"Log file: {Path(log_file).absolute()}")

