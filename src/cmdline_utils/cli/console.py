"""Rich rendering on top of the console abstraction.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is missing; output then falls back to plain text
with markup stripped.
"""

from __future__ import annotations

import re
from typing import Any

from cmdline_utils.core.protocols import Console
from cmdline_utils.exceptions import EnvironmentError, missing_dependency

_MARKUP = re.compile(r"\[/?[a-z_ ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console as RichConsole
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich") from exc
    return RichConsole


def get_rich_console(console: Console, *, stderr: bool = True) -> Any:
    """Create a Rich console writing to *console*'s error (or output) stream.

    Colour and terminal features follow the abstraction's redirection
    flags rather than rich's own detection, so a test console decides.
    """
    console_class = _load_rich_console_class()
    stream = console.error if stderr else console.out
    redirected = console.is_error_redirected if stderr else console.is_output_redirected
    return console_class(
        file=stream,
        force_terminal=not redirected,
        no_color=redirected,
        highlight=False,
        soft_wrap=redirected,
    )


def strip_markup(text: str) -> str:
    """Remove ``[bold]``-style markup tags."""
    return _MARKUP.sub("", text)


class ConsoleWriter:
    """Minimal ``print``-compatible writer with Rich fallback."""

    def __init__(self, console: Console, *, stderr: bool = True) -> None:
        self._console = console
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain text."""
        try:
            rich_console = get_rich_console(self._console, stderr=self._stderr)
        except EnvironmentError:
            stream = self._console.error if self._stderr else self._console.out
            stream.write(" ".join(strip_markup(str(obj)) for obj in objects) + "\n")
            stream.flush()
            return
        rich_console.print(*objects)
