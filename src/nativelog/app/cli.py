from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from nativelog.app.runtime import Runtime, build_runtime
from nativelog.config.loader import load_config
from nativelog.config.models import AppConfig, LoggingConfig, OutputConfig
from nativelog.domain.errors import InvalidArgument
from nativelog.observability.logging import LogMessage
from nativelog.observability.sinks import StderrLogSink

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nativelog",
        description="Write each message as one line to standard output",
    )
    parser.add_argument("messages", nargs="*", metavar="MESSAGE", help="Text to write, one line each")
    parser.add_argument("--config", help="Path to YAML config")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--output-fd", type=int, help="Override output file descriptor")
    target.add_argument("--output-path", help="Write lines to this file instead of a descriptor")
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="Truncate --output-path instead of appending",
    )
    parser.add_argument("--stdin", action="store_true", help="Also write each line read from stdin")
    parser.add_argument("--log", choices=["stderr", "jsonl", "none"], help="Override log sink")
    parser.add_argument("--log-path", help="Override JSONL log file path")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Override log level threshold",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI flags take precedence over config; models are re-validated after merging.
    output = config.output.model_dump()
    if args.output_fd is not None:
        output.update(kind="fd", fd=args.output_fd)
    if args.output_path is not None:
        output.update(kind="file", path=args.output_path)
    if args.truncate:
        output["append"] = False

    logging = config.logging.model_dump()
    if args.log is not None:
        logging["sink"] = args.log
    if args.log_path is not None:
        logging["path"] = args.log_path
        if args.log is None:
            logging["sink"] = "jsonl"
    if args.log_level is not None:
        logging["level"] = args.log_level

    return AppConfig(
        version=config.version,
        output=OutputConfig.model_validate(output),
        logging=LoggingConfig.model_validate(logging),
    )


def iter_messages(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    yield from args.messages
    if args.stdin:
        for line in stdin:
            yield line[:-1] if line.endswith("\n") else line


def run(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None) -> int:
    # Thin shell: load config, wire runtime, write lines, map failures to exit codes.
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        config = apply_overrides(config, args)
        runtime = build_runtime(config)
    except (ValueError, OSError) as exc:
        # ConfigError and pydantic ValidationError are both ValueError.
        StderrLogSink().emit(LogMessage(level="error", message="config_invalid", fields={"error": str(exc)}))
        return EXIT_CONFIG_ERROR

    try:
        return _write_all_messages(runtime, iter_messages(args, stdin if stdin is not None else sys.stdin))
    finally:
        runtime.close()


def _write_all_messages(runtime: Runtime, messages: Iterable[str]) -> int:
    lines = 0
    total = 0
    try:
        for text in messages:
            try:
                total += runtime.writer.write_line(text)
            except OSError:
                # LineWriter already logged the failure with its errno.
                return EXIT_IO_ERROR
            lines += 1
    except (InvalidArgument, UnicodeError) as exc:
        # Undecodable argv bytes arrive as lone surrogates; undecodable stdin fails while iterating.
        runtime.log_sink.emit(
            LogMessage(level="error", message="invalid_message", fields={"line": lines + 1, "error": str(exc)})
        )
        return EXIT_CONFIG_ERROR
    runtime.log_sink.emit(LogMessage(level="info", message="run_complete", fields={"lines": lines, "bytes": total}))
    return EXIT_OK
