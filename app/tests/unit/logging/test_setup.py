"""Unit tests for logging setup."""

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

import uistrings
from uistrings.logging import configure_logging, get_module_logger

APP_DIR = Path(uistrings.__file__).resolve().parents[1]


@pytest.fixture
def restore_logging():
    """Restore structlog and root logger state changed by a test."""
    config = structlog.get_config()
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    structlog.reset_defaults()
    structlog.configure(**config)
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.mark.unit
class TestImportSideEffects:
    """Importing the package leaves the host's logging setup alone."""

    def test_import_keeps_host_configuration(self):
        """A structlog and root logger setup made before import survives it."""
        script = textwrap.dedent(
            """
            import logging
            import structlog

            def host_processor(logger, method_name, event_dict):
                return event_dict

            structlog.configure(
                processors=[host_processor, structlog.processors.KeyValueRenderer()]
            )
            before = structlog.get_config()

            import uistrings
            from uistrings.i18n.strings import Strings

            Strings({"en": {"ui": {"hi": "Hi"}}}, ["ui"]).get_str("hi")

            after = structlog.get_config()
            assert after == before, after
            assert host_processor in after["processors"]
            assert logging.root.handlers == [], logging.root.handlers
            assert logging.root.level == logging.WARNING, logging.root.level
            """
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(APP_DIR), env.get("PYTHONPATH")]))
        result = subprocess.run(
            [sys.executable, "-c", script],
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0, result.stderr

    def test_get_module_logger_does_not_configure(self):
        """Creating a module logger leaves the structlog configuration unchanged."""
        before = structlog.get_config()
        get_module_logger()
        assert structlog.get_config() == before


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for opt-in logging configuration."""

    def test_configure_logging_returns_bound_logger(self, restore_logging):
        """configure_logging returns a logger instance."""
        logger = configure_logging()
        assert logger is not None
        assert hasattr(logger, "bind")

    def test_configure_logging_console_renderer(self, restore_logging):
        """Development mode renders to the console."""
        configure_logging(is_production=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging_json_renderer(self, restore_logging):
        """Production mode renders JSON."""
        configure_logging(is_production=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_logging_with_level_override(self, restore_logging):
        """configure_logging accepts a log level override."""
        logging.root.handlers[:] = []
        configure_logging(log_level="DEBUG")
        assert logging.root.level == logging.DEBUG


@pytest.mark.unit
class TestLoggerUsage:
    """Tests for logger usage patterns."""

    def test_get_module_logger(self):
        """get_module_logger() returns a logger for the calling module."""
        logger = get_module_logger()
        assert logger is not None
        logger.info("test_event", key="value")

    def test_get_module_logger_context(self):
        """The logger carries the calling module's component and path."""
        logger = get_module_logger()
        assert logger._initial_values == {
            "component": __name__.split(".")[-1],
            "module_path": __name__,
        }

    def test_get_module_logger_with_none_frame(self):
        """get_module_logger handles None frame gracefully."""
        with patch("inspect.currentframe", return_value=None):
            logger = get_module_logger()
        assert logger._initial_values == {"component": "unknown"}
