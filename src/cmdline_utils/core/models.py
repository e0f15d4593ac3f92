"""Domain models for cmdline-utils.

Value objects and enumerations shared by the host model, the binding
layer and the console implementations.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Option kinds
# ---------------------------------------------------------------------------

class OptionType(enum.Enum):
    """How many values an option accepts."""

    NO_VALUE = "no-value"
    """A flag: present or absent."""

    SINGLE_VALUE = "single-value"
    """Exactly one value; a second occurrence is a parse failure."""

    MULTIPLE_VALUE = "multiple-value"
    """Zero or more values, one per occurrence."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Why an option or argument value failed validation."""

    error_message: str
    """Human-readable failure message."""

    member_names: tuple[str, ...] = ()
    """Names of the implicated options or arguments."""

    def __str__(self) -> str:
        return self.error_message


# ---------------------------------------------------------------------------
# Console colours and cancel key
# ---------------------------------------------------------------------------

class ConsoleColor(enum.Enum):
    """The sixteen standard terminal colours.

    Values are rich colour names, so a colour can be handed to
    :meth:`rich.color.Color.parse` without a lookup table.
    """

    BLACK = "black"
    DARK_BLUE = "blue"
    DARK_GREEN = "green"
    DARK_CYAN = "cyan"
    DARK_RED = "red"
    DARK_MAGENTA = "magenta"
    DARK_YELLOW = "yellow"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    BLUE = "bright_blue"
    GREEN = "bright_green"
    CYAN = "bright_cyan"
    RED = "bright_red"
    MAGENTA = "bright_magenta"
    YELLOW = "bright_yellow"
    WHITE = "bright_white"


DEFAULT_FOREGROUND: ConsoleColor = ConsoleColor.GRAY
DEFAULT_BACKGROUND: ConsoleColor = ConsoleColor.BLACK


class CancelKey(enum.Enum):
    """Which key combination raised the cancel notification."""

    CONTROL_C = "ctrl+c"
    CONTROL_BREAK = "ctrl+break"


@dataclass(slots=True)
class CancelKeyEventArgs:
    """Context passed to every cancel-key listener.

    Mutable on purpose: a listener sets :attr:`cancel` to ``True`` to
    suppress the default termination behaviour.
    """

    special_key: CancelKey = CancelKey.CONTROL_C
    cancel: bool = field(default=False)
