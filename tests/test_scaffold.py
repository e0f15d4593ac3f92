"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cmdline_utils import __version__, exit_codes
from cmdline_utils.cli.app import main
from cmdline_utils.exceptions import (
    ArgumentOrderError,
    CmdlineUtilsError,
    DuplicateArgumentError,
    DuplicateOptionError,
    EnvironmentError,
    InvalidTemplateError,
    OperationCancelledError,
    PreconditionError,
    UnsupportedValueTypeError,
    ValueParseError,
)
from cmdline_utils.infra.memory_console import MemoryConsole


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
            PreconditionError,
            InvalidTemplateError,
            DuplicateOptionError,
            DuplicateArgumentError,
            ArgumentOrderError,
            UnsupportedValueTypeError,
            ValueParseError,
            OperationCancelledError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CmdlineUtilsError]
    ) -> None:
        assert issubclass(exc_class, CmdlineUtilsError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CmdlineUtilsError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CmdlineUtilsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CmdlineUtilsError("boom").hint is None

    def test_value_parse_error_keeps_context(self) -> None:
        err = ValueParseError("bad", member_name="count", raw_value="x")
        assert err.member_name == "count"
        assert err.raw_value == "x"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_validation_error_is_one(self) -> None:
        assert exit_codes.VALIDATION_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_prints_usage(self) -> None:
        console = MemoryConsole()
        code = main([], console=console)
        assert code == exit_codes.SUCCESS
        assert "usage: cmdline-utils" in console.out.getvalue()

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    @patch("cmdline_utils.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"], console=MemoryConsole())
        assert code == exit_codes.SUCCESS

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"], console=MemoryConsole())
        assert exc_info.value.code == 2

    @patch("cmdline_utils.cli.app.configure_logging")
    def test_verbose_configures_logging(self, mock_configure: object) -> None:
        console = MemoryConsole()
        main(["-v"], console=console)
        mock_configure.assert_called_once_with(verbose=True, stream=console.error)  # type: ignore[attr-defined]
