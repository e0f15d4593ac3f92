"""Regression tests for optional UI dependencies (rich/questionary).

Bootstrap commands keep working when the UI packages are missing, and
interactive prompts fail cleanly only when the questionary path is
actually exercised.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock

import pytest

from cmdline_utils import exit_codes, prompt
from cmdline_utils.cli.app import main
from cmdline_utils.cli.console import ConsoleWriter
from cmdline_utils.exceptions import EnvironmentError
from cmdline_utils.infra.memory_console import MemoryConsole
from cmdline_utils.infra.physical_console import PhysicalConsole


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.color", "rich.table", "rich.logging"):
        monkeypatch.setitem(sys.modules, name, None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"], console=MemoryConsole())
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"], console=MemoryConsole())
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    console = MemoryConsole()

    code = main(["doctor"], console=console)
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)
    output = console.error.getvalue()
    assert "Component" in output
    assert "[bold" not in output


def test_writer_strips_markup_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    console = MemoryConsole()
    ConsoleWriter(console).print("[yellow]Hint:[/yellow] try again")
    assert console.error.getvalue() == "Hint: try again\n"


def test_physical_console_without_rich_disables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    tty = MagicMock()
    tty.isatty.return_value = True
    monkeypatch.setattr(sys, "stdout", tty)
    assert PhysicalConsole().colors_enabled is False


def test_line_prompt_works_without_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_questionary(monkeypatch)
    assert prompt.get_yes_no("Go?", False, MemoryConsole(input="y\n")) is True


def test_interactive_prompt_errors_cleanly_without_questionary(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)
    console = MagicMock(spec=PhysicalConsole)
    console.is_input_redirected = False

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        prompt.get_yes_no("Go?", False, console)
