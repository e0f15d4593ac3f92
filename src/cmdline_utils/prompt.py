"""Console-aware interactive prompts.

On the physical console with an interactive stdin the prompts use
questionary (arrow keys, confirm widgets).  Everywhere else, including
a :class:`~cmdline_utils.infra.MemoryConsole` in tests, the prompt text
is written to ``console.out`` and one line is read from
``console.input``.  End of input selects the default.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from cmdline_utils.core.protocols import Console
from cmdline_utils.exceptions import PreconditionError, missing_dependency
from cmdline_utils.infra.physical_console import PhysicalConsole, physical_console

logger = logging.getLogger(__name__)

_YES: frozenset[str] = frozenset({"y", "yes"})
_NO: frozenset[str] = frozenset({"n", "no"})


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise missing_dependency("questionary") from exc
    return questionary


def _is_interactive(console: Console) -> bool:
    return isinstance(console, PhysicalConsole) and not console.is_input_redirected


def _read_line(console: Console, message: str) -> str | None:
    """Write *message* and return one stripped line, or ``None`` at end of input."""
    console.out.write(message)
    console.out.flush()
    line = console.input.readline()
    if not line:
        return None
    return line.strip()


# ---------------------------------------------------------------------------
# Public prompts
# ---------------------------------------------------------------------------

def get_yes_no(message: str, default: bool, console: Console | None = None) -> bool:
    """Ask a yes/no question; unrecognised answers ask again."""
    console = console if console is not None else physical_console()
    if _is_interactive(console):
        answer = _import_questionary().confirm(message, default=default).ask()
        return default if answer is None else bool(answer)

    suffix = " [Y/n] " if default else " [y/N] "
    while True:
        line = _read_line(console, message + suffix)
        if line is None or line == "":
            return default
        word = line.lower()
        if word in _YES:
            return True
        if word in _NO:
            return False
        logger.debug("Unrecognised yes/no answer %r", line)
        console.out.write("Please answer 'y' or 'n'.\n")


def get_string(message: str, default: str | None = None, console: Console | None = None) -> str | None:
    """Ask for free text; an empty answer returns *default*."""
    console = console if console is not None else physical_console()
    if _is_interactive(console):
        answer = _import_questionary().text(message, default=default or "").ask()
        return answer if answer else default

    suffix = f" [{default}] " if default else " "
    line = _read_line(console, message + suffix)
    if not line:
        return default
    return line


def get_choice(message: str, choices: Sequence[str], console: Console | None = None) -> str | None:
    """Pick one of *choices*, by number or by exact text.

    Returns ``None`` when the user aborts or input ends.
    """
    if not choices:
        raise PreconditionError("At least one choice is required.")
    console = console if console is not None else physical_console()
    if _is_interactive(console):
        return _import_questionary().select(message, choices=list(choices)).ask()

    console.out.write(f"{message}\n")
    for index, choice in enumerate(choices, start=1):
        console.out.write(f"  {index}. {choice}\n")
    while True:
        line = _read_line(console, "> ")
        if line is None:
            return None
        if line.isdigit() and 1 <= int(line) <= len(choices):
            return choices[int(line) - 1]
        if line in choices:
            return line
        console.out.write(f"Enter a number between 1 and {len(choices)}.\n")
