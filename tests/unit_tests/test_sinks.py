"""
Sink unit tests.
"""

from __future__ import annotations

import math
import os
from datetime import datetime, timezone

from consoletap.events import EventEmitter
from consoletap.sinks import EmitSink, FileSink, MemorySink
from consoletap.types import FileSinkConfig, MemorySinkConfig


class TestFileSink:
    def test_file_name_not_zero_padded(self) -> None:
        now = datetime(2025, 1, 5, tzinfo=timezone.utc)
        assert FileSink.file_name("debug", now) == "debug_2025_1_5.log"

    def test_creates_file_in_existing_dir(self, tmp_path, fixed_now) -> None:
        sink = FileSink(FileSinkConfig(dir=str(tmp_path)))
        sink.emit("log", "created", fixed_now)
        path = sink.path_for("log", fixed_now)
        assert path == tmp_path / "log_2024_3_7.log"
        assert path.read_bytes() == f"created{os.linesep}".encode("utf-8")

    def test_appends_to_existing_file(self, tmp_path, fixed_now) -> None:
        path = tmp_path / "log_2024_3_7.log"
        path.write_bytes(b"earlier" + os.linesep.encode())
        FileSink(FileSinkConfig(dir=str(tmp_path))).emit("log", "later", fixed_now)
        assert path.read_bytes().decode("utf-8").split(os.linesep) == ["earlier", "later", ""]


class TestMemorySink:
    def test_unbounded_history(self, fixed_now) -> None:
        sink = MemorySink(MemorySinkConfig(history=math.inf))
        sink.register("log")
        for i in range(50):
            sink.emit("log", str(i), fixed_now)
        assert len(sink.history("log")) == 50

    def test_zero_history_keeps_nothing(self, fixed_now) -> None:
        sink = MemorySink(MemorySinkConfig(history=0))
        sink.register("log")
        sink.emit("log", "gone", fixed_now)
        assert sink.history("log") == []

    def test_unknown_kind_is_empty(self) -> None:
        assert MemorySink(MemorySinkConfig(history=3)).history("warn") == []


class TestEmitSink:
    def test_broadcasts_kind_and_message(self, fixed_now) -> None:
        emitter = EventEmitter()
        received = []
        emitter.on("warn", received.append)
        EmitSink(emitter).emit("warn", "careful", fixed_now)
        assert received == ["careful"]
