from __future__ import annotations

import pytest

from nativelog.observability.logging import LogMessage
from nativelog.ports import LogSink, OutputSink


def test_output_sink_port_default_raises() -> None:
    # Direct port calls without an adapter are wiring errors (port methods raise by default).
    class _PortOnly(OutputSink):
        pass

    port = _PortOnly()  # type: ignore[misc,abstract]
    with pytest.raises(NotImplementedError):
        port.write(b"x\n")
    with pytest.raises(NotImplementedError):
        port.flush()


def test_log_sink_port_default_raises() -> None:
    class _PortOnly(LogSink):
        pass

    port = _PortOnly()  # type: ignore[misc,abstract]
    with pytest.raises(NotImplementedError):
        port.emit(LogMessage(level="info", message="x"))


def test_ports_are_runtime_checkable() -> None:
    class _Bytes:
        def write(self, data: bytes) -> int:
            return len(data)

        def flush(self) -> None:
            return None

    assert isinstance(_Bytes(), OutputSink)
    assert not isinstance(object(), OutputSink)
