from __future__ import annotations

from dataclasses import dataclass, field

from nativelog.adapters.output_sink import build_output_sink
from nativelog.config.models import AppConfig
from nativelog.observability.sinks import build_log_sink
from nativelog.ports.log_sink import LogSink
from nativelog.ports.output_sink import OutputSink
from nativelog.usecases.write_line import LineWriter


@dataclass
class Runtime:
    # Wired writer plus the sinks it owns, so the shell can close them on exit.
    writer: LineWriter
    output_sink: OutputSink
    log_sink: LogSink
    _closed: bool = field(default=False, init=False, repr=False)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for sink in (self.output_sink, self.log_sink):
            close = getattr(sink, "close", None)
            if callable(close):
                close()


def build_runtime(config: AppConfig) -> Runtime:
    # Composition root: config sections -> adapter factories -> LineWriter.
    output_sink = build_output_sink(config.output.model_dump())
    log_sink = build_log_sink(config.logging.model_dump())
    return Runtime(
        writer=LineWriter(sink=output_sink, log_sink=log_sink),
        output_sink=output_sink,
        log_sink=log_sink,
    )
