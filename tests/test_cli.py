from __future__ import annotations

import logging
import subprocess

import pytest

from luna import cli, speech
from luna.speech import LAUNCH_FAILURE_MESSAGE


def test_print_command_does_not_spawn(monkeypatch, capsys) -> None:
    def fail_run(*args, **kwargs):
        raise AssertionError("should not spawn")

    monkeypatch.setattr(speech.subprocess, "run", fail_run)
    assert cli.main(["--print-command"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "espeak-ng -v en+f4 -s175 -p75 -a300 -k0 'hello world,this is luna'"


def test_main_returns_zero_when_tool_runs(monkeypatch) -> None:
    monkeypatch.setattr(
        speech.subprocess,
        "run",
        lambda cmd, **kw: subprocess.CompletedProcess(cmd, 1, b"", b""),
    )
    assert cli.main([]) == 0


def test_main_exits_nonzero_when_tool_missing(monkeypatch, capsys) -> None:
    def missing(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(speech.subprocess, "run", missing)
    with pytest.raises(SystemExit) as info:
        cli.main([])
    assert info.value.code == 1
    assert LAUNCH_FAILURE_MESSAGE in capsys.readouterr().err


def test_config_overrides_flow_into_command(tmp_path, capsys) -> None:
    path = tmp_path / "params.yaml"
    path.write_text("pitch: 50\ntext: testing\n", encoding="utf-8")
    assert cli.main(["--config", str(path), "--print-command"]) == 0
    assert capsys.readouterr().out.strip() == "espeak-ng -v en+f4 -s175 -p50 -a300 -k0 testing"


def test_bad_config_exits_with_usage_status(tmp_path, capsys) -> None:
    path = tmp_path / "params.yaml"
    path.write_text("volume: 3\n", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        cli.main(["--config", str(path)])
    assert info.value.code == 2
    assert "volume" in capsys.readouterr().err


def test_no_files_written(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        speech.subprocess,
        "run",
        lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, b"", b""),
    )
    cli.main([])
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "body",
    ["1: foo\n", "null: x\n", "speed: '--5'\n", 'text: "a\\0b"\n'],
)
def test_malformed_config_values_exit_with_usage_status(tmp_path, capsys, body) -> None:
    path = tmp_path / "params.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        cli.main(["--config", str(path)])
    assert info.value.code == 2
    assert capsys.readouterr().err.strip()


def test_double_verbose_enables_debug(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(
        speech.subprocess,
        "run",
        lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, b"", b""),
    )
    assert cli.main(["-vv", "--print-command"]) == 0
    assert logging.getLogger("luna").level == logging.DEBUG


def test_help_names_bundled_template(capsys) -> None:
    with pytest.raises(SystemExit):
        cli.main(["--help"])
    out = "".join(capsys.readouterr().out.split())
    assert "voice_params.yaml" in out
