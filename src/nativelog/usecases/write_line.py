from __future__ import annotations

import errno

from nativelog.adapters.output_sink import FdOutputSink
from nativelog.domain.errors import InvalidArgument
from nativelog.domain.messages import Message
from nativelog.observability.logging import LogMessage
from nativelog.ports.log_sink import LogSink
from nativelog.ports.output_sink import OutputSink


def _coerce_message(args: tuple[object, ...]) -> Message:
    # Exactly one str argument; everything else is a caller contract violation.
    if len(args) != 1:
        raise InvalidArgument(f"write_line expects exactly 1 argument, got {len(args)}")
    value = args[0]
    if not isinstance(value, str):
        raise InvalidArgument(f"write_line expects str, got {type(value).__name__}")
    return Message(value)


def write_all(sink: OutputSink, data: bytes) -> None:
    # Reissue the remainder after short writes until every byte is accepted.
    view = memoryview(data)
    while view:
        written = sink.write(view.tobytes())
        if written <= 0:
            raise OSError(errno.EIO, "output sink accepted no bytes")
        view = view[written:]
    sink.flush()


class LineWriter:
    """Writes one message plus a trailing newline per call.

    Stateless apart from the injected sinks: each call encodes the message,
    writes ``len(encoded) + 1`` bytes and returns ``len(encoded)``. No locking
    is done here; callers that need whole-line atomicity across threads must
    serialize calls themselves.
    """

    def __init__(self, sink: OutputSink | None = None, log_sink: LogSink | None = None) -> None:
        self._sink = sink if sink is not None else FdOutputSink()
        self._log_sink = log_sink

    @property
    def sink(self) -> OutputSink:
        return self._sink

    def write_line(self, *args: object) -> int:
        message = _coerce_message(args)
        # Encoding happens before any write so invalid input produces no output.
        line = message.to_line()
        length = len(line) - 1
        try:
            write_all(self._sink, line)
        except OSError as exc:
            self._log("error", "line_write_failed", byte_length=length, error=str(exc), errno=exc.errno)
            raise
        self._log("debug", "line_written", byte_length=length, bytes_written=len(line))
        return length

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self._log_sink is None:
            return
        try:
            self._log_sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))
        except (OSError, ValueError):
            # Diagnostics never change the write outcome; a closed stderr raises ValueError.
            return


def write_line(*args: object, sink: OutputSink | None = None, log_sink: LogSink | None = None) -> int:
    """Write ``message`` followed by ``\\n`` to stdout (or ``sink``).

    Returns the UTF-8 byte length of ``message`` without the newline. Raises
    ``InvalidArgument`` unless called with exactly one UTF-8 encodable str, and
    lets ``OSError`` from the underlying write propagate.
    """
    return LineWriter(sink=sink, log_sink=log_sink).write_line(*args)
