from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO

from nativelog.ports.output_sink import OutputSink

STDOUT_FD = 1


@dataclass(frozen=True, slots=True)
class FdOutputSink(OutputSink):
    # Raw descriptor sink; os.write may return a short count, which the writer retries.
    fd: int = STDOUT_FD

    def write(self, data: bytes) -> int:
        return os.write(self.fd, data)

    def flush(self) -> None:
        # Unbuffered by construction.
        return None


@dataclass(frozen=True, slots=True)
class StreamOutputSink(OutputSink):
    # Binary stream sink (io.BytesIO, sys.stdout.buffer, pipes opened with "wb").
    stream: BinaryIO

    def write(self, data: bytes) -> int:
        written = self.stream.write(data)
        # Raw streams return None when nothing could be written (non-blocking and full).
        return 0 if written is None else written

    def flush(self) -> None:
        self.stream.flush()


@dataclass
class FileOutputSink(OutputSink):
    # Path-backed sink: opens lazily so construction does not touch the filesystem.
    path: Path
    append: bool = True
    _fd: int | None = field(default=None, init=False, repr=False)

    def write(self, data: bytes) -> int:
        if self._fd is None:
            self._open()
        assert self._fd is not None
        return os.write(self._fd, data)

    def flush(self) -> None:
        return None

    def close(self) -> None:
        # Close is idempotent to simplify shutdown paths.
        if self._fd is None:
            return
        os.close(self._fd)
        self._fd = None

    def _open(self) -> None:
        flags = os.O_WRONLY | os.O_CREAT
        flags |= os.O_APPEND if self.append else os.O_TRUNC
        self._fd = os.open(self.path, flags, 0o644)


_SUPPORTED_KINDS = {"fd", "file"}


def build_output_sink(settings: dict[str, Any]) -> OutputSink:
    # Settings-driven factory; mirrors the `output` config section.
    kind = settings.get("kind", "fd")
    if kind not in _SUPPORTED_KINDS:
        raise ValueError(f"output.kind must be one of: {', '.join(sorted(_SUPPORTED_KINDS))}")

    if kind == "fd":
        fd = settings.get("fd", STDOUT_FD)
        if not isinstance(fd, int) or isinstance(fd, bool) or fd < 0:
            raise ValueError("output.fd must be a non-negative integer")
        return FdOutputSink(fd=fd)

    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("output.path must be a non-empty string when output.kind is file")
    return FileOutputSink(path=Path(path), append=bool(settings.get("append", True)))
