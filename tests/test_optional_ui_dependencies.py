"""Regression tests for the optional Rich dependency.

These tests verify that help, version, ciphering and error reporting
all keep working when Rich is not importable, falling back to plain
``print``.
"""

from __future__ import annotations

import io
import sys

import pytest

from mpags_cipher.cli import exit_codes
from mpags_cipher.cli.app import cli, main
from mpags_cipher.cli.console import escape


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--help"]) == exit_codes.SUCCESS
    assert "Usage: mpags-cipher" in capsys.readouterr().out


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--version"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.strip() != ""


def test_cipher_run_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))

    assert main(["-c", "caesar", "-k", "1"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "BCD\n"


def test_errors_fall_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr("sys.argv", ["mpags-cipher", "-k"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Missing argument:" in capsys.readouterr().err


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape("[bold]key[/bold]") == "[bold]key[/bold]"
