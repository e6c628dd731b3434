"""
stdlib logging bridge tests.
"""

from __future__ import annotations

import logging

import pytest

from consoletap.interceptors import ConsoleHandler, intercept_stdlib_logging
from consoletap.tap import ConsoleTap


@pytest.fixture
def std_logger():
    logger = logging.getLogger("consoletap.tests.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.handlers = []


class TestConsoleHandler:
    @pytest.mark.parametrize(
        "levelno, kind",
        [
            (logging.DEBUG, "debug"),
            (logging.INFO, "log"),
            (logging.WARNING, "warn"),
            (logging.ERROR, "error"),
            (logging.CRITICAL, "error"),
        ],
    )
    def test_level_mapping(self, levelno, kind) -> None:
        assert ConsoleHandler.kind_for(levelno) == kind

    def test_records_reach_tap(self, console, std_logger, stdout, stderr) -> None:
        tap = ConsoleTap(types=["log", "warn"], sinks={"memory": {"history": 5}}, console=console)
        intercept_stdlib_logging(console, std_logger)

        std_logger.info("connected to %s", "db")
        std_logger.warning("slow query")

        assert [e.message for e in tap.logs["log"]] == ["connected to db"]
        assert [e.message for e in tap.logs["warn"]] == ["slow query"]
        assert stdout.getvalue() == "connected to db\n"
        assert stderr.getvalue() == "slow query\n"

    def test_formatter_applied(self, console, std_logger, stdout) -> None:
        handler = intercept_stdlib_logging(console, std_logger)
        handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
        std_logger.debug("details")
        assert stdout.getvalue() == "DEBUG:details\n"

    def test_listener_failure_goes_to_handle_error(self, console, std_logger, monkeypatch) -> None:
        tap = ConsoleTap(types=["error"], sinks={"emit": True}, console=console)
        tap.on("error", lambda m: 1 / 0)
        handler = intercept_stdlib_logging(console, std_logger)
        failures = []
        monkeypatch.setattr(handler, "handleError", failures.append)

        std_logger.error("kaboom")

        assert len(failures) == 1
        assert failures[0].getMessage() == "kaboom"


class TestInterceptStdlibLogging:
    def test_idempotent_per_console(self, console, std_logger) -> None:
        first = intercept_stdlib_logging(console, std_logger)
        second = intercept_stdlib_logging(console, std_logger)
        assert first is second
        assert std_logger.handlers == [first]

    def test_defaults_to_root(self, console) -> None:
        root = logging.getLogger()
        handler = intercept_stdlib_logging(console)
        try:
            assert handler in root.handlers
        finally:
            root.removeHandler(handler)
