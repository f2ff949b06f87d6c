"""Unit tests for structured logging setup."""

import json
from types import SimpleNamespace

import pytest
import structlog
from structlog.testing import LogCapture

from hookflow.core.config import Settings
from hookflow.core.hooks import HookRegistry
from hookflow.core.logging import (
    LoggingContext,
    add_logger_name,
    bind_context,
    clear_context,
    configure_default_logging,
    configure_logging,
    get_logger,
    rename_message_field,
)
from tests.doubles import StubHook


@pytest.fixture(autouse=True)
def _clear_log_context():
    yield
    clear_context()


class TestProcessors:
    """Tests for the custom structlog processors."""

    def test_add_logger_name_uses_logger_name(self) -> None:
        """Test that the logger's name is copied into the event."""
        event = add_logger_name(SimpleNamespace(name="hookflow.cli"), "info", {"event": "x"})
        assert event["logger"] == "hookflow.cli"

    def test_add_logger_name_falls_back(self) -> None:
        """Test that nameless loggers are reported as hookflow."""
        event = add_logger_name(object(), "info", {"event": "x"})
        assert event["logger"] == "hookflow"

    def test_rename_message_field(self) -> None:
        """Test that 'event' becomes 'message'."""
        event = rename_message_field(None, "info", {"event": "Hook registered", "plugin": "p"})
        assert event == {"message": "Hook registered", "plugin": "p"}


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_logs_go_to_stderr(self, capsys) -> None:
        """Test that JSON log lines are written to stderr only."""
        configure_logging(Settings(_env_file=None, log_level="DEBUG", log_format="json"))

        HookRegistry().register(StubHook())

        captured = capsys.readouterr()
        assert captured.out == ""
        line = json.loads(captured.err.strip().splitlines()[-1])
        assert line["message"] == "Hook registered"
        assert line["hook_identifier"] == "test-hook"
        assert line["level"] == "debug"

    def test_level_filters_lower_events(self, capsys) -> None:
        """Test that events below the configured level are dropped."""
        configure_logging(Settings(_env_file=None, log_level="ERROR", log_format="json"))

        get_logger("hookflow.test").warning("Not shown")

        assert capsys.readouterr().err == ""


class TestDefaultLogging:
    """Tests for logging before the host configures structlog."""

    def test_unconfigured_logging_is_quiet(self, capsys) -> None:
        """Test that only warnings reach stderr and nothing reaches stdout."""
        structlog.reset_defaults()

        logger = get_logger("hookflow.test")
        logger.debug("Debug detail")
        logger.info("Routine event")
        logger.warning("Needs attention")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Debug detail" not in captured.err
        assert "Routine event" not in captured.err
        assert "Needs attention" in captured.err

    def test_host_configuration_is_kept(self) -> None:
        """Test that an existing structlog configuration is not replaced."""
        capture = LogCapture()
        structlog.configure(processors=[capture])

        configure_default_logging()
        get_logger("hookflow.test").debug("Host sees debug")

        assert capture.entries == [{"event": "Host sees debug", "log_level": "debug"}]


@pytest.fixture
def log_capture() -> LogCapture:
    """Route structlog events, with context merged, into a LogCapture."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    return capture


class TestLoggingContext:
    """Tests for context binding helpers."""

    def test_logging_context_binds_and_unbinds(self, log_capture: LogCapture) -> None:
        """Test that context keys are present only inside the block."""
        logger = get_logger("hookflow.test")

        with LoggingContext(plugin="user-management"):
            logger.info("inside")
        logger.info("outside")

        assert log_capture.entries[0]["plugin"] == "user-management"
        assert "plugin" not in log_capture.entries[1]

    def test_bind_and_clear_context(self, log_capture: LogCapture) -> None:
        """Test that bound keys persist until cleared."""
        logger = get_logger("hookflow.test")

        bind_context(command="validate")
        logger.info("bound")
        clear_context()
        logger.info("cleared")

        assert log_capture.entries[0]["command"] == "validate"
        assert "command" not in log_capture.entries[1]
