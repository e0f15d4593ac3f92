"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations. A real terminal and an in-memory test double both
satisfy them.
"""

from __future__ import annotations

from typing import Protocol, TextIO, TypeVar

from cmdline_utils.core.events import Event
from cmdline_utils.core.models import CancelKeyEventArgs, ConsoleColor

T_co = TypeVar("T_co", covariant=True)


class Console(Protocol):
    """Everything a command needs from "the console".

    Colour properties and :meth:`reset_color` only have a visible
    effect when the corresponding stream is not redirected.  The
    protocol does not enforce this: callers check
    :attr:`is_output_redirected` before relying on colour.
    """

    @property
    def out(self) -> TextIO:
        """Standard output sink.  Writes are visible in call order."""
        ...  # pragma: no cover

    @property
    def error(self) -> TextIO:
        """Standard error sink."""
        ...  # pragma: no cover

    @property
    def input(self) -> TextIO:
        """Standard input source."""
        ...  # pragma: no cover

    @property
    def is_input_redirected(self) -> bool:
        """Is stdin piped from somewhere?"""
        ...  # pragma: no cover

    @property
    def is_output_redirected(self) -> bool:
        """Is stdout being piped to somewhere?"""
        ...  # pragma: no cover

    @property
    def is_error_redirected(self) -> bool:
        """Is stderr being piped to somewhere?"""
        ...  # pragma: no cover

    foreground_color: ConsoleColor
    background_color: ConsoleColor

    @property
    def cancel_key_press(self) -> Event[CancelKeyEventArgs]:
        """Raised when Ctrl+C is pressed.

        Listeners run in attachment order, possibly from a signal
        handling context distinct from the code currently executing.
        """
        ...  # pragma: no cover

    def reset_color(self) -> None:
        """Restore both colours to their defaults.  Safe to call at any time."""
        ...  # pragma: no cover


class VersionSource(Protocol):
    """Build metadata from which a version string is resolved."""

    @property
    def informational_version(self) -> str | None:
        """Optional human-readable version (e.g. ``"1.2.3-beta+abc123"``)."""
        ...  # pragma: no cover

    @property
    def version(self) -> str | None:
        """Structured version number; present on any valid artifact."""
        ...  # pragma: no cover


class ValueParser(Protocol[T_co]):
    """Converts one raw command-line string into a typed value.

    *name* is the option or argument being parsed and only appears in
    error messages.  Implementations raise
    :class:`~cmdline_utils.exceptions.ValueParseError` on bad input.
    """

    def __call__(self, name: str, raw: str) -> T_co:
        ...  # pragma: no cover
