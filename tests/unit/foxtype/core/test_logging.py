"""Unit tests for logging module."""

import logging
import tempfile
from pathlib import Path

from foxtype.core.logging import MillisecondFormatter, setup_logging


def _close_root_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


class TestMillisecondFormatter:
    """Test MillisecondFormatter class."""

    def test_format_includes_milliseconds(self):
        """Test that timestamps end with milliseconds."""
        formatter = MillisecondFormatter(fmt="%(asctime)s %(message)s")
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        record.msecs = 42

        message = formatter.format(record)

        timestamp = message.split(" Test message")[0]
        assert timestamp.endswith(".042")


class TestSetupLogging:
    """Test setup_logging function."""

    def teardown_method(self):
        _close_root_handlers()

    def test_setup_logging_without_file(self):
        """Without a log file only the stderr handler is installed."""
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].level == logging.WARNING

    def test_setup_logging_with_file(self):
        """Test that a log file receives formatted records."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            setup_logging(log_level="INFO", log_file=log_file)

            logger = logging.getLogger(__name__)
            logger.info("Test message")

            assert log_file.exists()
            log_content = log_file.read_text()
            assert "Test message" in log_content
            assert "INFO" in log_content
            assert "[MainThread" in log_content
            assert "test_logging.py:" in log_content
            assert " - Test message" in log_content
            _close_root_handlers()

    def test_setup_logging_with_level(self):
        """Test that DEBUG records reach the log file at DEBUG level."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            setup_logging(log_level="DEBUG", log_file=log_file)

            logger = logging.getLogger(__name__)
            logger.debug("Debug message")

            log_content = log_file.read_text()
            assert "Debug message" in log_content
            assert "DEBUG" in log_content
            _close_root_handlers()

    def test_console_stays_quiet_below_warning(self):
        """Test that the stderr handler stays at WARNING for verbose levels."""
        setup_logging(log_level="DEBUG")

        stream_handler = logging.getLogger().handlers[0]
        assert stream_handler.level == logging.WARNING

    def test_setup_logging_replaces_handlers(self):
        """Test that repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_invalid_file(self, capsys):
        """An unwritable log file is reported but does not raise."""
        invalid_path = Path("/nonexistent/directory/test.log")

        setup_logging(log_file=invalid_path)

        logger = logging.getLogger(__name__)
        logger.info("Test message")
        assert "Could not create log file" in capsys.readouterr().err

