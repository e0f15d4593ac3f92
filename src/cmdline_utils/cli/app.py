"""Entry point and command routing for the ``cmdline-utils`` command.

This module is the **sole error boundary** of the package.  It catches
:class:`~cmdline_utils.exceptions.CmdlineUtilsError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message and returns a well-defined exit code.  Library code elsewhere
raises and never exits the process.

The command supports:

* ``cmdline-utils``            print usage
* ``cmdline-utils doctor``     console and environment diagnostics
* ``cmdline-utils --version``
* ``-v/--verbose`` on any of the above enables debug logging.
"""

from __future__ import annotations

import argparse
import sys

from cmdline_utils import exit_codes
from cmdline_utils.cli.console import ConsoleWriter
from cmdline_utils.constants import VERBOSE_OPTION_DESCRIPTION
from cmdline_utils.core.protocols import Console
from cmdline_utils.core.versioning import resolve_version
from cmdline_utils.exceptions import CmdlineUtilsError
from cmdline_utils.infra.package_version import PackageVersionSource
from cmdline_utils.infra.physical_console import physical_console
from cmdline_utils.utils.log import configure_logging


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    version = resolve_version(PackageVersionSource("cmdline_utils")) or "unknown"
    parser = argparse.ArgumentParser(
        prog="cmdline-utils",
        description="Diagnostics for the cmdline-utils console abstraction.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {version}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=VERBOSE_OPTION_DESCRIPTION,
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="'doctor' reports stream redirection and colour support.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor(console: Console) -> int:
    from cmdline_utils.cli.doctor import run_doctor

    return run_doctor(console)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Run the cmdline-utils CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    console:
        Console to render on; the physical console when omitted.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = console if console is not None else physical_console()

    if args.verbose:
        configure_logging(verbose=True, stream=console.error)

    if args.command is None:
        console.out.write(parser.format_help())
        return exit_codes.SUCCESS

    return _handle_doctor(console)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    writer = ConsoleWriter(physical_console())
    try:
        code = main()
        sys.exit(code)
    except CmdlineUtilsError as exc:
        writer.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            writer.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        writer.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        writer.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
