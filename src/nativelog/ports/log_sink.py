from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nativelog.observability.logging import LogMessage


# LogSink receives structured diagnostics; it never shares the data channel with OutputSink.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: "LogMessage") -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
