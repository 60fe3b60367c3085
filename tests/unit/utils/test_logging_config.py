"""
Unit tests for logging config.
"""

import logging

from pdfgen.utils.logging_config import (
    ColoredFormatter,
    LogLevel,
    resolve_log_level,
    setup_logging,
)


class TestLogLevel:
    """Test LogLevel enum."""

    def test_log_level_values(self):
        """Test LogLevel enum values."""
        assert LogLevel.MINIMAL == "minimal"
        assert LogLevel.NORMAL == "normal"
        assert LogLevel.DETAILED == "detailed"
        assert LogLevel.FULL == "full"

    def test_resolve_log_level(self):
        assert resolve_log_level("DETAILED") == LogLevel.DETAILED
        assert resolve_log_level(" minimal ") == LogLevel.MINIMAL
        assert resolve_log_level(None) == LogLevel.NORMAL
        assert resolve_log_level("loud") == LogLevel.NORMAL


class TestSetupLogging:
    """Test setup_logging function."""

    def test_setup_logging_normal(self):
        """Test setting up logging in normal mode."""
        logger = setup_logging(level=LogLevel.NORMAL)

        assert logger.name == "pdfgen"
        assert logger.level == logging.INFO

    def test_setup_logging_detailed(self):
        """Test setting up logging in detailed mode."""
        logger = setup_logging(level=LogLevel.DETAILED)

        assert logger.level == logging.DEBUG
        assert "%(name)s" not in logger.handlers[0].formatter._fmt

    def test_setup_logging_full(self):
        logger = setup_logging(level=LogLevel.FULL)

        assert logger.level == logging.DEBUG
        assert "%(name)s" in logger.handlers[0].formatter._fmt

    def test_setup_logging_minimal(self):
        """Test setting up logging in minimal mode."""
        logger = setup_logging(level=LogLevel.MINIMAL)

        assert logger.level == logging.WARNING

    def test_setup_logging_replaces_handlers(self):
        setup_logging(level=LogLevel.NORMAL)
        logger = setup_logging(level=LogLevel.NORMAL)

        assert len(logger.handlers) == 1

    def test_setup_logging_to_file(self, tmp_path):
        """Test setting up logging to file."""
        log_file = tmp_path / "logs" / "pdfgen.log"

        logger = setup_logging(level=LogLevel.MINIMAL, log_to_file=True, log_file=str(log_file))
        logging.getLogger("pdfgen.pipeline").debug("written to file only")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert "written to file only" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestColoredFormatter:
    """Test ColoredFormatter."""

    def test_colors_level_without_mutating_record(self):
        formatter = ColoredFormatter("%(levelname)s | %(message)s")
        record = logging.LogRecord("pdfgen", logging.ERROR, __file__, 1, "boom", None, None)

        out = formatter.format(record)

        assert "boom" in out
        assert "ERROR" in out
        assert record.levelname == "ERROR"
