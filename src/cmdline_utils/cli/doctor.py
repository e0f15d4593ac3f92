"""``cmdline-utils doctor``: console and environment diagnostics.

Reports what the console abstraction sees in the current process:
which standard streams are redirected, whether colour output is
possible, and which versions of the package and its UI dependencies are
installed.  Renders a Rich table, or a plain table without Rich.
"""

from __future__ import annotations

import importlib.metadata
import platform
import sys

from cmdline_utils import exit_codes
from cmdline_utils.cli.console import ConsoleWriter
from cmdline_utils.core.protocols import Console
from cmdline_utils.core.versioning import resolve_version
from cmdline_utils.infra.package_version import PackageVersionSource
from cmdline_utils.infra.physical_console import PhysicalConsole, physical_console

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _package_version_check() -> Check:
    """Return (label, value, status) for the cmdline-utils version row."""
    version = resolve_version(PackageVersionSource("cmdline_utils"))
    if version is None:
        return "cmdline-utils", "unknown", "[yellow]WARN[/yellow]"
    return "cmdline-utils", version, "[green]OK[/green]"


def _python_version_check() -> Check:
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _dependency_check(distribution: str, *, required: bool) -> Check:
    """Return (label, value, status) for an installed distribution."""
    try:
        version = importlib.metadata.version(distribution)
    except importlib.metadata.PackageNotFoundError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return distribution, "NOT INSTALLED", status
    return distribution, version, "[green]OK[/green]"


def _stream_checks(console: Console) -> list[Check]:
    rows = (
        ("stdin", console.is_input_redirected),
        ("stdout", console.is_output_redirected),
        ("stderr", console.is_error_redirected),
    )
    return [
        (label, "redirected" if redirected else "terminal", "[green]OK[/green]")
        for label, redirected in rows
    ]


def _color_check(console: Console) -> Check:
    if isinstance(console, PhysicalConsole):
        enabled = console.colors_enabled
    else:
        enabled = not console.is_output_redirected
    return "colour", "enabled" if enabled else "disabled", "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(console: Console, checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    stream = console.error
    stream.write("\ncmdline-utils doctor\n")
    stream.write("=" * 48 + "\n")
    stream.write(f"{'Component':<14} {'Value':<24} {'Status':<8}\n")
    stream.write("-" * 48 + "\n")
    for label, value, status in checks:
        stream.write(f"{label:<14} {value:<24} {_status_plain(status):<8}\n")
    stream.write("\n")
    stream.flush()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks(console: Console) -> list[Check]:
    return [
        _package_version_check(),
        _python_version_check(),
        _dependency_check("rich", required=True),
        _dependency_check("questionary", required=False),
        *_stream_checks(console),
        _color_check(console),
    ]


def run_doctor(console: Console | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    console = console if console is not None else physical_console()
    checks = collect_checks(console)
    has_failure = any("FAIL" in status for _, _, status in checks)
    writer = ConsoleWriter(console)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(console, checks)
    else:
        table = Table(
            title="cmdline-utils doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=16)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        writer.print(table)

    if has_failure:
        writer.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    writer.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
