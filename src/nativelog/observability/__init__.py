from .logging import LOG_LEVELS, LogMessage
from .sinks import JsonlLogSink, LevelFilterLogSink, NullLogSink, StderrLogSink, build_log_sink

__all__ = [
    "LOG_LEVELS",
    "JsonlLogSink",
    "LevelFilterLogSink",
    "LogMessage",
    "NullLogSink",
    "StderrLogSink",
    "build_log_sink",
]
