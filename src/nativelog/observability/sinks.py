from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from nativelog.observability.logging import LogMessage, level_rank
from nativelog.ports.log_sink import LogSink


def _dumps(message: LogMessage) -> str:
    return json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False, default=str)


class StderrLogSink(LogSink):
    # Structured log sink over stderr; stdout is reserved for written lines.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(_dumps(message), file=stream, flush=True)


class JsonlLogSink(LogSink):
    # File-backed structured log sink, append-only.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_dumps(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        _ = message


class LevelFilterLogSink(LogSink):
    # Drops records below the configured threshold before delegating.
    def __init__(self, inner: LogSink, level: str = "info") -> None:
        self._inner = inner
        self._threshold = level_rank(level)

    def emit(self, message: LogMessage) -> None:
        if level_rank(message.level) >= self._threshold:
            self._inner.emit(message)

    def close(self) -> None:
        close = getattr(self._inner, "close", None)
        if callable(close):
            close()


_SUPPORTED_SINKS = {"stderr", "jsonl", "none"}


def build_log_sink(settings: dict[str, Any]) -> LogSink:
    # Settings-driven factory; mirrors the `logging` config section.
    kind = settings.get("sink", "stderr")
    if kind not in _SUPPORTED_SINKS:
        raise ValueError(f"logging.sink must be one of: {', '.join(sorted(_SUPPORTED_SINKS))}")
    level = settings.get("level", "info")
    try:
        level_rank(str(level))
    except ValueError as exc:
        raise ValueError(f"logging.level: {exc}") from exc

    if kind == "none":
        return NullLogSink()
    if kind == "stderr":
        return LevelFilterLogSink(StderrLogSink(), level=str(level))

    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("logging.path must be a non-empty string when logging.sink is jsonl")
    return LevelFilterLogSink(JsonlLogSink(Path(path)), level=str(level))
