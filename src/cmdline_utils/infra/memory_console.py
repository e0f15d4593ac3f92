"""Deterministic in-memory console for tests.

Usage::

    console = MemoryConsole(input="yes\\n")
    app = CommandLineApplication(console=console)
    ...
    assert console.out.getvalue() == "expected output\\n"
    console.raise_cancel_key_press()
"""

from __future__ import annotations

import io
from typing import TextIO

from cmdline_utils.core.events import Event
from cmdline_utils.core.models import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    CancelKey,
    CancelKeyEventArgs,
    ConsoleColor,
)


class MemoryConsole:
    """A :class:`~cmdline_utils.core.protocols.Console` with fixed flags and buffers.

    Parameters
    ----------
    out, error:
        Sinks for standard output and error.  A fresh
        :class:`io.StringIO` is created when omitted.
    input:
        Either a readable stream or a string that becomes the content
        of an :class:`io.StringIO`.
    is_input_redirected, is_output_redirected, is_error_redirected:
        Fixed for the lifetime of the console.  All default to ``True``
        because nothing here is an interactive terminal.
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        error: TextIO | None = None,
        input: TextIO | str | None = None,
        is_input_redirected: bool = True,
        is_output_redirected: bool = True,
        is_error_redirected: bool = True,
    ) -> None:
        self._out: TextIO = out if out is not None else io.StringIO()
        self._error: TextIO = error if error is not None else io.StringIO()
        if input is None or isinstance(input, str):
            self._input: TextIO = io.StringIO(input or "")
        else:
            self._input = input
        self._is_input_redirected = is_input_redirected
        self._is_output_redirected = is_output_redirected
        self._is_error_redirected = is_error_redirected
        self.foreground_color: ConsoleColor = DEFAULT_FOREGROUND
        self.background_color: ConsoleColor = DEFAULT_BACKGROUND
        self.reset_count: int = 0
        self._cancel_key_press: Event[CancelKeyEventArgs] = Event()

    @property
    def out(self) -> TextIO:
        return self._out

    @property
    def error(self) -> TextIO:
        return self._error

    @property
    def input(self) -> TextIO:
        return self._input

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
    def cancel_key_press(self) -> Event[CancelKeyEventArgs]:
        return self._cancel_key_press

    def reset_color(self) -> None:
        self.foreground_color = DEFAULT_FOREGROUND
        self.background_color = DEFAULT_BACKGROUND
        self.reset_count += 1

    def raise_cancel_key_press(
        self,
        special_key: CancelKey = CancelKey.CONTROL_C,
    ) -> CancelKeyEventArgs:
        """Simulate the user pressing the interrupt key.

        Returns the event args after every listener ran so callers can
        check whether termination was suppressed.
        """
        return self._cancel_key_press.notify(CancelKeyEventArgs(special_key=special_key))
