from __future__ import annotations

import json
from pathlib import Path

import pytest

from netstats_delta import cli as cli_module
from netstats_delta.cli import main


def test_cli_without_input_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "--in" in capsys.readouterr().out


def test_cli_text_output(tmp_path: Path, write_netstats_log, capsys: pytest.CaptureFixture[str]) -> None:
    log = tmp_path / "netstats.log"
    write_netstats_log(log)

    assert main(["-i", str(log)]) == 0

    out = capsys.readouterr().out
    assert "if: eth0 (4 samples)" in out
    assert "Processed 4 samples, 3 interfaces." in out


def test_cli_json_output(tmp_path: Path, write_netstats_log, capsys: pytest.CaptureFixture[str]) -> None:
    log = tmp_path / "netstats.log"
    write_netstats_log(log)

    assert main(["--in", str(log), "--format", "json", "--order", "first_seen"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [t["ifname"] for t in data["interfaces"]] == ["eth0", "lo", "eth1"]


def test_cli_parse_failure_exit_code(
    tmp_path: Path, write_lines, capsys: pytest.CaptureFixture[str]
) -> None:
    log = tmp_path / "netstats.log"
    write_lines(log, ["Tue, 14 Oct 2014 10:00:00 +0000 @ eth0 RX 1 TX 1,", "no date here"])

    assert main(["-i", str(log)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err
    assert "can't locate date" in captured.err


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(tmp_path / "missing.log")]) == 1
    assert "Error opening input file" in capsys.readouterr().err


def test_cli_invalid_label_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(tmp_path / "x.log"), "--label", "middle"])
    assert exc.value.code == 2


def test_cli_unreadable_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    log = tmp_path / "netstats.log"

    async def _denied(*args, **kwargs):
        raise PermissionError(13, "Permission denied", str(log))

    monkeypatch.setattr(cli_module, "analyze_file", _denied)

    assert main(["-i", str(log)]) == 1

    err = capsys.readouterr().err
    assert "Error opening input file" in err
    assert "Processing failed." in err


def test_cli_announces_file_on_stderr(
    tmp_path: Path, write_netstats_log, capsys: pytest.CaptureFixture[str]
) -> None:
    log = tmp_path / "netstats.log"
    write_netstats_log(log)

    assert main(["-i", str(log)]) == 0

    captured = capsys.readouterr()
    assert f"Processing file '{log}'." in captured.err
    assert "Processing file" not in captured.out
