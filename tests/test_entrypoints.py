from __future__ import annotations

import os
import runpy
import subprocess
import sys
from pathlib import Path

import pytest

import nativelog.main as main_module


def test_main_delegates_to_cli_run(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def _fake_run(argv: list[str] | None) -> int:
        seen["argv"] = argv
        return 7

    monkeypatch.setattr(main_module, "run", _fake_run)

    assert main_module.main(["--log", "none", "x"]) == 7
    assert seen["argv"] == ["--log", "none", "x"]


def test_module_main_exits_with_code(monkeypatch: pytest.MonkeyPatch) -> None:
    # __main__ translates the main() return code into a SystemExit.
    monkeypatch.setattr(main_module, "main", lambda _argv=None: 3)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("nativelog", run_name="__main__")

    assert excinfo.value.code == 3


def test_package_import_does_not_load_config_stack() -> None:
    # The host-facing write_line surface needs neither pydantic nor PyYAML.
    code = (
        "import sys, nativelog\n"
        "loaded = sorted(m for m in ('pydantic', 'yaml', 'nativelog.config') if m in sys.modules)\n"
        "print(','.join(loaded))\n"
    )
    src = str(Path(__file__).resolve().parents[1] / "src")
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH", "")]))}
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, env=env, check=True)
    assert result.stdout.strip() == ""
