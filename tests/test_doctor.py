"""Tests for the ``cmdline-utils doctor`` command (cli/doctor.py).

Runs against ``MemoryConsole`` so stream and colour results are
deterministic.

Coverage:
* Doctor returns SUCCESS when every check passes.
* Doctor returns GENERAL_ERROR when a required check fails.
* Individual check functions return correct tuples.
* The plain table layout.
"""

from __future__ import annotations

import importlib.metadata
from unittest.mock import patch

from cmdline_utils import exit_codes
from cmdline_utils.cli.doctor import (
    _color_check,
    _dependency_check,
    _package_version_check,
    _print_plain_doctor_table,
    _python_version_check,
    _status_plain,
    _stream_checks,
    collect_checks,
    run_doctor,
)
from cmdline_utils.infra.memory_console import MemoryConsole


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestPackageVersionCheck:
    def test_reports_installed_version(self) -> None:
        label, value, status = _package_version_check()
        assert label == "cmdline-utils"
        assert value != "unknown"
        assert "OK" in status


class TestDependencyCheck:
    def test_installed(self) -> None:
        label, value, status = _dependency_check("rich", required=True)
        assert label == "rich"
        assert value != "NOT INSTALLED"
        assert "OK" in status

    @patch("cmdline_utils.cli.doctor.importlib.metadata.version")
    def test_missing_required_fails(self, mock_version) -> None:  # type: ignore[no-untyped-def]
        mock_version.side_effect = importlib.metadata.PackageNotFoundError("rich")
        _, value, status = _dependency_check("rich", required=True)
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch("cmdline_utils.cli.doctor.importlib.metadata.version")
    def test_missing_optional_warns(self, mock_version) -> None:  # type: ignore[no-untyped-def]
        mock_version.side_effect = importlib.metadata.PackageNotFoundError("questionary")
        _, value, status = _dependency_check("questionary", required=False)
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestStreamChecks:
    def test_reports_each_stream(self) -> None:
        console = MemoryConsole(is_input_redirected=False)
        rows = _stream_checks(console)
        assert [(label, value) for label, value, _ in rows] == [
            ("stdin", "terminal"),
            ("stdout", "redirected"),
            ("stderr", "redirected"),
        ]

    def test_color_follows_output_redirection(self) -> None:
        assert _color_check(MemoryConsole())[1] == "disabled"
        assert _color_check(MemoryConsole(is_output_redirected=False))[1] == "enabled"


class TestStatusPlain:
    def test_strips_markup(self) -> None:
        assert _status_plain("[red]FAIL (>=3.10 required)[/red]") == "FAIL"
        assert _status_plain("[yellow]WARN[/yellow]") == "WARN"
        assert _status_plain("[green]OK[/green]") == "OK"


# ---------------------------------------------------------------------------
# Full doctor run
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass(self) -> None:
        console = MemoryConsole()
        assert run_doctor(console) == exit_codes.SUCCESS
        output = console.error.getvalue()
        assert "cmdline-utils doctor" in output
        assert "All checks passed." in output
        assert console.out.getvalue() == ""

    @patch("cmdline_utils.cli.doctor._python_version_check")
    def test_python_fail(self, mock_python) -> None:  # type: ignore[no-untyped-def]
        mock_python.return_value = ("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]")
        console = MemoryConsole()
        assert run_doctor(console) == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in console.error.getvalue()

    def test_collect_checks_labels(self) -> None:
        labels = [label for label, _, _ in collect_checks(MemoryConsole())]
        assert labels == [
            "cmdline-utils", "Python", "rich", "questionary",
            "stdin", "stdout", "stderr", "colour",
        ]


class TestPlainTable:
    def test_layout(self) -> None:
        console = MemoryConsole()
        _print_plain_doctor_table(console, [("Python", "3.12.1", "[green]OK[/green]")])
        lines = console.error.getvalue().splitlines()
        assert "cmdline-utils doctor" in lines
        assert lines[3].startswith("Component")
        assert lines[5].split() == ["Python", "3.12.1", "OK"]
