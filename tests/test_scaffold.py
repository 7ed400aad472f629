"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from mpags_cipher import __version__
from mpags_cipher.cli import exit_codes
from mpags_cipher.cli.app import main
from mpags_cipher.exceptions import (
    InputOutputError,
    InvalidArgumentError,
    InvalidKeyError,
    MissingArgumentError,
    MpagsCipherError,
    TransformFailedError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            MissingArgumentError,
            InvalidArgumentError,
            InvalidKeyError,
            InputOutputError,
            TransformFailedError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[MpagsCipherError]
    ) -> None:
        assert issubclass(exc_class, MpagsCipherError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(MpagsCipherError, Exception)

    def test_missing_is_not_invalid(self) -> None:
        assert not issubclass(MissingArgumentError, InvalidArgumentError)
        assert not issubclass(InvalidArgumentError, MissingArgumentError)

    def test_hint_is_stored(self) -> None:
        err = MpagsCipherError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = MpagsCipherError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_help_returns_success(self) -> None:
        assert main(["--help"]) == exit_codes.SUCCESS

    def test_version_returns_success(self) -> None:
        assert main(["--version"]) == exit_codes.SUCCESS

    def test_run_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from mpags_cipher.cli import app as app_module

        seen: list[object] = []
        monkeypatch.setattr(
            app_module,
            "_handle_run",
            lambda settings: seen.append(settings) or exit_codes.SUCCESS,
        )
        assert main(["-c", "caesar", "-k", "3"]) == exit_codes.SUCCESS
        assert len(seen) == 1
