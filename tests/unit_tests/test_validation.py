"""
Configuration validation tests.

Rules are checked in a fixed order and a rejected configuration never
installs an interception.
"""

from __future__ import annotations

import math

import pytest

from consoletap.exceptions import (
    ConfigurationError,
    InvalidFileDir,
    InvalidHistorySize,
    InvalidSinks,
    InvalidTimestamp,
    InvalidTypes,
    MissingSinks,
    MissingTypes,
    UnknownOutputKind,
    UnknownSink,
)
from consoletap.tap import ConsoleTap
from consoletap.validation import validate_config


class TestRequiredFields:
    def test_missing_types(self) -> None:
        with pytest.raises(MissingTypes, match="Missing types"):
            validate_config(None, {"emit": True})

    def test_missing_sinks(self) -> None:
        with pytest.raises(MissingSinks, match="Missing sinks"):
            validate_config(["log"], None)

    def test_types_checked_before_sinks(self) -> None:
        with pytest.raises(MissingTypes):
            validate_config(None, None)


class TestTypes:
    def test_scalar_types_rejected(self) -> None:
        with pytest.raises(InvalidTypes, match="list"):
            validate_config("log", {"emit": True})

    def test_empty_types_rejected(self) -> None:
        with pytest.raises(InvalidTypes, match="types are empty"):
            validate_config([], {"emit": True})

    def test_unknown_type_names_offender(self) -> None:
        with pytest.raises(UnknownOutputKind, match="trace") as exc_info:
            validate_config(["log", "trace"], {"emit": True})
        assert exc_info.value.code == "UNKNOWN_OUTPUT_KIND"
        assert "'trace'" in exc_info.value.details["kind"]

    def test_duplicates_collapse(self) -> None:
        config = validate_config(["error", "log", "error"], {"emit": True})
        assert config.types == ("error", "log")

    def test_tuple_accepted(self) -> None:
        assert validate_config(("warn",), {"emit": True}).types == ("warn",)


class TestSinks:
    def test_empty_sinks_rejected(self) -> None:
        with pytest.raises(InvalidSinks, match="sinks are empty"):
            validate_config(["log"], {})

    def test_non_mapping_sinks_rejected(self) -> None:
        with pytest.raises(InvalidSinks):
            validate_config(["log"], ["emit"])

    def test_unknown_sink_names_offender(self) -> None:
        with pytest.raises(UnknownSink, match="syslog"):
            validate_config(["log"], {"emit": True, "syslog": {}})

    @pytest.mark.parametrize("directory", ["", None, 42])
    def test_file_dir_must_be_non_empty_string(self, directory) -> None:
        with pytest.raises(InvalidFileDir):
            validate_config(["log"], {"file": {"dir": directory}})

    def test_file_without_dir_rejected(self) -> None:
        with pytest.raises(InvalidFileDir):
            validate_config(["log"], {"file": {}})

    @pytest.mark.parametrize("history", ["ten", None, math.nan, True, [3]])
    def test_history_must_be_a_number(self, history) -> None:
        with pytest.raises(InvalidHistorySize):
            validate_config(["log"], {"memory": {"history": history}})

    def test_timestamp_must_be_callable(self) -> None:
        with pytest.raises(InvalidTimestamp):
            validate_config(["log"], {"file": {"dir": "/tmp", "timestamp": "[ts] "}})

    def test_history_checked_before_timestamp(self) -> None:
        with pytest.raises(InvalidHistorySize):
            validate_config(
                ["log"],
                {"file": {"dir": "/tmp", "timestamp": 1}, "memory": {"history": "x"}},
            )

    def test_sink_fields_checked_before_type_names(self) -> None:
        with pytest.raises(InvalidFileDir):
            validate_config(["trace"], {"file": {"dir": ""}})

    def test_type_names_checked_before_sink_names(self) -> None:
        with pytest.raises(UnknownOutputKind):
            validate_config(["trace"], {"syslog": True})


class TestAcceptedConfig:
    def test_full_config(self) -> None:
        stamp = lambda d: d.isoformat() + " "  # noqa: E731
        config = validate_config(
            ["log", "error"],
            {"file": {"dir": "/var/log/app", "timestamp": stamp}, "memory": {"history": 5}, "emit": True},
        )
        assert config.types == ("log", "error")
        assert config.sinks.file.dir == "/var/log/app"
        assert config.sinks.file.timestamp is stamp
        assert config.sinks.memory.bound == 5
        assert config.sinks.emit is True
        assert config.sinks.enabled == ("file", "memory", "emit")

    def test_falsy_emit_disables_broadcast(self) -> None:
        config = validate_config(["log"], {"emit": False})
        assert config.sinks.enabled == ()

    def test_config_is_frozen(self) -> None:
        config = validate_config(["log"], {"emit": True})
        with pytest.raises(Exception):
            config.types = ("warn",)

    @pytest.mark.parametrize(
        "history, bound",
        [(3, 3), (2.5, 3), (0, 0), (-4, 0), (math.inf, None), (10**400, None), (1e19, None), (-(10**400), 0)],
    )
    def test_history_bound_normalization(self, history, bound) -> None:
        config = validate_config(["log"], {"memory": {"history": history}})
        assert config.sinks.memory.bound == bound

    @pytest.mark.parametrize("history", [10**400, 1e19])
    def test_huge_history_is_unbounded(self, console, history) -> None:
        tap = ConsoleTap(types=["log"], sinks={"memory": {"history": history}}, console=console)
        for i in range(3):
            console.log(i)
        assert [e.message for e in tap.logs["log"]] == ["0", "1", "2"]

    @pytest.mark.parametrize("value", [None, False, 0, ""])
    def test_falsy_sub_configs_leave_sink_off(self, value) -> None:
        config = validate_config(["log"], {"file": value, "memory": value, "emit": True})
        assert config.sinks.file is None
        assert config.sinks.memory is None
        assert config.sinks.enabled == ("emit",)


class TestNothingInstalledOnRejection:
    @pytest.mark.parametrize(
        "types, sinks",
        [
            ([], {"emit": True}),
            (["trace"], {"emit": True}),
            (["log"], {}),
            (["log"], {"memory": {"history": "lots"}}),
            (["log"], {"file": {"dir": "/tmp", "timestamp": "nope"}}),
        ],
    )
    def test_console_untouched(self, console, types, sinks) -> None:
        original = console.log
        with pytest.raises(ConfigurationError):
            ConsoleTap(types=types, sinks=sinks, console=console)
        assert console.log is original
        assert len(console.registry) == 0

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_config([], {"emit": True})
