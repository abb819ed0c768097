from __future__ import annotations

import io
import json
import os
from pathlib import Path

import pytest

from nativelog.app.cli import EXIT_CONFIG_ERROR, EXIT_IO_ERROR, EXIT_OK, apply_overrides, parse_args, run
from nativelog.config.models import AppConfig


def test_parse_args_reads_flags() -> None:
    args = parse_args(["--config", "cfg.yml", "--output-path", "out.txt", "--truncate", "--stdin", "a", "b"])
    assert args.config == "cfg.yml"
    assert args.output_path == "out.txt"
    assert args.truncate is True
    assert args.stdin is True
    assert args.messages == ["a", "b"]


def test_output_fd_and_path_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--output-fd", "1", "--output-path", "x"])


def test_overrides_take_precedence_over_config() -> None:
    args = parse_args(["--output-path", "o.txt", "--truncate", "--log-path", "l.jsonl", "--log-level", "debug"])
    config = apply_overrides(AppConfig(), args)
    assert config.output.kind == "file"
    assert config.output.path == "o.txt"
    assert config.output.append is False
    assert config.logging.sink == "jsonl"
    assert config.logging.path == "l.jsonl"
    assert config.logging.level == "debug"


def test_run_writes_each_message_to_stdout(capfd: pytest.CaptureFixture[str]) -> None:
    assert run(["--log", "none", "hello", "café", ""]) == EXIT_OK
    out, err = capfd.readouterr()
    assert out == "hello\ncafé\n\n"
    assert err == ""


def test_run_reads_stdin_lines(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    stdin = io.StringIO("x\ny\nno-newline")
    code = run(["--log", "none", "--output-path", str(path), "--stdin", "first"], stdin=stdin)
    assert code == EXIT_OK
    assert path.read_text(encoding="utf-8") == "first\nx\ny\nno-newline\n"


def test_run_uses_config_file_and_logs_to_jsonl(tmp_path: Path) -> None:
    out_path = tmp_path / "out.txt"
    log_path = tmp_path / "run.jsonl"
    config_path = tmp_path / "cfg.yml"
    config_path.write_text(
        f"version: 1\n"
        f"output:\n  kind: file\n  path: {out_path}\n"
        f"logging:\n  sink: jsonl\n  path: {log_path}\n  level: debug\n",
        encoding="utf-8",
    )
    assert run(["--config", str(config_path), "a", "é"]) == EXIT_OK
    assert out_path.read_bytes() == "a\né\n".encode("utf-8")

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["message"] for r in records] == ["line_written", "line_written", "run_complete"]
    assert records[-1]["fields"] == {"lines": 2, "bytes": 3}


def test_run_invalid_config_exits_with_config_error(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "cfg.yml"
    config_path.write_text("output:\n  kind: socket\n", encoding="utf-8")
    assert run(["--config", str(config_path), "x"]) == EXIT_CONFIG_ERROR
    out, err = capfd.readouterr()
    assert out == ""
    assert '"message":"config_invalid"' in err


def test_run_missing_config_exits_with_config_error(tmp_path: Path) -> None:
    assert run(["--config", str(tmp_path / "missing.yml"), "x"]) == EXIT_CONFIG_ERROR


def test_run_broken_output_exits_with_io_error(capfd: pytest.CaptureFixture[str]) -> None:
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    try:
        assert run(["--output-fd", str(write_fd), "x"]) == EXIT_IO_ERROR
    finally:
        os.close(write_fd)
    _, err = capfd.readouterr()
    assert '"message":"line_write_failed"' in err


def test_run_undecodable_argument_exits_with_usage_error(capfd: pytest.CaptureFixture[str]) -> None:
    # Undecodable argv bytes reach Python as lone surrogates (surrogateescape).
    assert run(["ok", "bad\udcff"]) == EXIT_CONFIG_ERROR
    out, err = capfd.readouterr()
    assert out == "ok\n"
    records = [json.loads(line) for line in err.splitlines()]
    assert [r["message"] for r in records] == ["invalid_message"]
    assert records[0]["level"] == "error"
    assert records[0]["fields"]["line"] == 2


def test_run_undecodable_stdin_exits_with_usage_error(tmp_path: Path) -> None:
    out_path = tmp_path / "out.txt"
    log_path = tmp_path / "run.jsonl"
    stdin = io.TextIOWrapper(io.BytesIO(b"good\n\xff\xfe\n"), encoding="utf-8")
    code = run(["--output-path", str(out_path), "--log-path", str(log_path), "--stdin"], stdin=stdin)
    assert code == EXIT_CONFIG_ERROR
    assert b"\xff" not in (out_path.read_bytes() if out_path.exists() else b"")
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert records[-1]["message"] == "invalid_message"
    assert "utf-8" in records[-1]["fields"]["error"]
