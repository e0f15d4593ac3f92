"""Core layer: pure models, protocols, parsers and handler adapters.

Rules
-----
* No terminal, signal or filesystem access.
* No imports from ``cli`` or ``infra``.
* Conversion and validation failures are raised, never swallowed.
"""

from cmdline_utils.core.arguments import CommandArgument, TypedCommandArgument
from cmdline_utils.core.cancellation import CancellationToken
from cmdline_utils.core.events import Event
from cmdline_utils.core.models import (
    CancelKey,
    CancelKeyEventArgs,
    ConsoleColor,
    OptionType,
    ValidationResult,
)
from cmdline_utils.core.options import CommandOption, TypedCommandOption
from cmdline_utils.core.parsers import ValueParserProvider
from cmdline_utils.core.protocols import Console, ValueParser, VersionSource
from cmdline_utils.core.versioning import StaticVersionSource, resolve_version

__all__: list[str] = [
    "CancelKey",
    "CancelKeyEventArgs",
    "CancellationToken",
    "CommandArgument",
    "CommandOption",
    "Console",
    "ConsoleColor",
    "Event",
    "OptionType",
    "StaticVersionSource",
    "TypedCommandArgument",
    "TypedCommandOption",
    "ValidationResult",
    "ValueParser",
    "ValueParserProvider",
    "VersionSource",
    "resolve_version",
]
