"""
Tests for logging configuration.
"""

import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cadenza.core.logger import setup_logging, get_logger


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        logger = setup_logging()

        assert logger.name == "cadenza"
        assert isinstance(logger, logging.Logger)
        assert logger.propagate is False

    def test_setup_logging_custom_level(self):
        """Test setup_logging with custom level."""
        logger = setup_logging(level="DEBUG")

        assert logger.level == logging.DEBUG

    def test_setup_logging_level_is_case_insensitive(self):
        """Test lowercase level names are accepted."""
        logger = setup_logging(level="error")

        assert logger.level == logging.ERROR

    def test_setup_logging_writes_to_stderr(self):
        """Test that the console handler targets the error stream."""
        logger = setup_logging()

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_setup_logging_disable_console(self):
        """Test setup_logging with console disabled."""
        logger = setup_logging(enable_console=False)

        assert logger.handlers == []

    def test_setup_logging_removes_existing_handlers(self):
        """Test that setup_logging does not stack handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_invalid_level(self):
        """Test setup_logging with invalid level."""
        # Should default to INFO
        logger = setup_logging(level="INVALID_LEVEL")
        assert logger.level == logging.INFO


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_creates_logger(self):
        """Test that get_logger creates a logger."""
        logger = get_logger("test_module")

        assert logger.name == "cadenza.test_module"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_sets_up_main_logger(self):
        """Test that get_logger sets up main logger if needed."""
        main_logger = logging.getLogger("cadenza")
        main_logger.handlers.clear()

        get_logger("test_module")

        assert len(main_logger.handlers) > 0

    def test_get_logger_same_module_returns_same_logger(self):
        """Test that get_logger returns same logger for same module."""
        assert get_logger("test_module") is get_logger("test_module")

    def test_module_loggers_are_children(self):
        """Test package module loggers sit under the configured logger."""
        setup_logging(level="DEBUG")
        child = logging.getLogger("cadenza.services.library_model")

        assert child.getEffectiveLevel() == logging.DEBUG
