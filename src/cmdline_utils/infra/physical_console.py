"""The real process console: standard streams plus the SIGINT hook.

Rules
-----
* Streams are looked up on :mod:`sys` at access time so that stream
  replacement (pytest's ``capsys``, ``contextlib.redirect_stdout``)
  is honoured.
* Redirection flags are decided once, at construction.
* Colour escape codes are only written when stdout is a colour-capable
  terminal according to rich's detection, which honours ``NO_COLOR``.
* The SIGINT handler is installed only while at least one cancel-key
  listener is attached, and the previous handler is restored after.
  Signal handlers can only be set from the main thread; elsewhere the
  cancel-key event is never raised.
"""

from __future__ import annotations

import functools
import logging
import signal
import sys
import threading
from types import FrameType
from typing import Any, TextIO

from cmdline_utils.core.events import Event
from cmdline_utils.core.models import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    CancelKey,
    CancelKeyEventArgs,
    ConsoleColor,
)
from cmdline_utils.exceptions import EnvironmentError, missing_dependency

logger = logging.getLogger(__name__)

_RESET_SEQUENCE = "\x1b[0m"


def _load_rich() -> tuple[type[Any], type[Any]]:
    """Return ``(rich.console.Console, rich.color.Color)`` or raise ``EnvironmentError``."""
    try:
        from rich.color import Color
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich") from exc
    return Console, Color


def _is_redirected(stream: TextIO | None) -> bool:
    if stream is None:
        return True
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        # Closed or non-file streams count as redirected.
        return True


class PhysicalConsole:
    """Console backed by ``sys.stdin`` / ``sys.stdout`` / ``sys.stderr``.

    Satisfies :class:`~cmdline_utils.core.protocols.Console` structurally.
    Most programs use the shared instance from :func:`physical_console`.
    """

    def __init__(self) -> None:
        self._is_input_redirected = _is_redirected(sys.stdin)
        self._is_output_redirected = _is_redirected(sys.stdout)
        self._is_error_redirected = _is_redirected(sys.stderr)
        self._foreground = DEFAULT_FOREGROUND
        self._background = DEFAULT_BACKGROUND
        self._colors_enabled = self._detect_color_support()
        self._original_handler: Any = None
        self._cancel_key_press: Event[CancelKeyEventArgs] = Event(
            on_first_attach=self._install_signal_handler,
            on_last_detach=self._restore_signal_handler,
        )

    def _detect_color_support(self) -> bool:
        if self._is_output_redirected:
            return False
        try:
            console_class, _ = _load_rich()
        except EnvironmentError:
            logger.debug("rich is not installed; colour output disabled")
            return False
        rich_console = console_class(file=sys.stdout)
        return rich_console.color_system is not None and not rich_console.no_color

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    @property
    def out(self) -> TextIO:
        return sys.stdout

    @property
    def error(self) -> TextIO:
        return sys.stderr

    @property
    def input(self) -> TextIO:
        return sys.stdin

    @property
    def is_input_redirected(self) -> bool:
        return self._is_input_redirected

    @property
    def is_output_redirected(self) -> bool:
        return self._is_output_redirected

    @property
    def is_error_redirected(self) -> bool:
        return self._is_error_redirected

    @property
    def colors_enabled(self) -> bool:
        """Whether colour changes produce escape codes on stdout."""
        return self._colors_enabled

    # ------------------------------------------------------------------
    # Colours
    # ------------------------------------------------------------------

    @property
    def foreground_color(self) -> ConsoleColor:
        return self._foreground

    @foreground_color.setter
    def foreground_color(self, color: ConsoleColor) -> None:
        self._foreground = color
        self._write_color(color, foreground=True)

    @property
    def background_color(self) -> ConsoleColor:
        return self._background

    @background_color.setter
    def background_color(self, color: ConsoleColor) -> None:
        self._background = color
        self._write_color(color, foreground=False)

    def reset_color(self) -> None:
        self._foreground = DEFAULT_FOREGROUND
        self._background = DEFAULT_BACKGROUND
        if self._colors_enabled:
            self.out.write(_RESET_SEQUENCE)
            self.out.flush()

    def _write_color(self, color: ConsoleColor, *, foreground: bool) -> None:
        if not self._colors_enabled:
            return
        _, color_class = _load_rich()
        codes = color_class.parse(color.value).get_ansi_codes(foreground=foreground)
        self.out.write(f"\x1b[{';'.join(codes)}m")
        self.out.flush()

    # ------------------------------------------------------------------
    # Cancel key
    # ------------------------------------------------------------------

    @property
    def cancel_key_press(self) -> Event[CancelKeyEventArgs]:
        return self._cancel_key_press

    def _install_signal_handler(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; SIGINT handler not installed")
            return
        logger.debug("Installing SIGINT handler")
        self._original_handler = signal.signal(signal.SIGINT, self._handle_signal)

    def _restore_signal_handler(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; SIGINT handler left in place")
            return
        if self._original_handler is not None:
            logger.debug("Restoring original SIGINT handler")
            signal.signal(signal.SIGINT, self._original_handler)
            self._original_handler = None

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        logger.debug("SIGINT received; notifying %d listener(s)", len(self._cancel_key_press))
        args = self._cancel_key_press.notify(CancelKeyEventArgs(special_key=CancelKey.CONTROL_C))
        if args.cancel:
            return
        original = self._original_handler
        if callable(original):
            original(signum, frame)
            return
        if original == signal.SIG_IGN:
            return
        raise KeyboardInterrupt


@functools.lru_cache(maxsize=1)
def physical_console() -> PhysicalConsole:
    """Return the process-wide :class:`PhysicalConsole`."""
    return PhysicalConsole()
