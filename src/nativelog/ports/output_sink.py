from __future__ import annotations

from typing import Protocol, runtime_checkable


# OutputSink port is the raw byte destination behind write_line (stdout by default).
@runtime_checkable
class OutputSink(Protocol):
    def write(self, data: bytes) -> int:
        """Write some prefix of data and return how many bytes were accepted."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def flush(self) -> None:
        """Push any bytes held by the sink to the underlying stream."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
