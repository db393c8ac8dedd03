# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line contract: exit codes, stdout/stderr shape and --json payload.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sjavac.sjavac import main as sjavac_main

VALID = "int x = 5;\nvoid f(int y){\nx = y;\nreturn;\n}\n"


def _write(tmp_path: Path, name: str, text: str) -> Path:
	path = tmp_path / name
	path.write_text(text)
	return path


def _run_sjavac_json(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, dict]:
	exit_code = sjavac_main(argv + ["--json"])
	out = capsys.readouterr().out.strip()
	payload = json.loads(out) if out else {}
	return exit_code, payload


def test_valid_file_prints_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "ok.sjava", VALID)
	rc = sjavac_main([str(src)])
	captured = capsys.readouterr()
	assert rc == 0
	assert captured.out.strip() == "0"
	assert captured.err == ""


def test_invalid_file_prints_one_and_reason(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "bad.sjava", VALID.replace("x = y;", 'x = "hi";'))
	rc = sjavac_main([str(src)])
	captured = capsys.readouterr()
	assert rc == 1
	assert captured.out.strip() == "1"
	assert f"{src}:3:" in captured.err
	assert "error:" in captured.err


def test_json_payload_for_invalid_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "bad.sjava", "}\n")
	rc, payload = _run_sjavac_json([str(src)], capsys)
	assert rc == 1
	assert payload["exit_code"] == 1
	assert len(payload["diagnostics"]) == 1
	diag = payload["diagnostics"][0]
	assert diag["code"] == "E_SCOPE_CLOSE"
	assert diag["phase"] == "lenient"
	assert diag["file"] == str(src)
	assert diag["line"] == 1


def test_json_payload_for_valid_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "ok.sjava", VALID)
	rc, payload = _run_sjavac_json([str(src)], capsys)
	assert rc == 0
	assert payload == {"exit_code": 0, "diagnostics": []}


def test_wrong_suffix_is_io_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "prog.java", VALID)
	rc, payload = _run_sjavac_json([str(src)], capsys)
	assert rc == 2
	diag = payload["diagnostics"][0]
	assert diag["code"] == "E_IO"
	assert diag["message"] == "Wrong file format"


def test_allow_any_suffix(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write(tmp_path, "prog.txt", VALID)
	rc = sjavac_main([str(src), "--allow-any-suffix"])
	assert rc == 0
	assert capsys.readouterr().out.strip() == "0"


def test_missing_file_is_io_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	rc = sjavac_main([str(tmp_path / "missing.sjava")])
	captured = capsys.readouterr()
	assert rc == 2
	assert captured.out.strip() == "2"
	assert "Unable to open file" in captured.err


def test_missing_argument_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
	with pytest.raises(SystemExit) as excinfo:
		sjavac_main([])
	assert excinfo.value.code == 2
	assert "usage:" in capsys.readouterr().err
