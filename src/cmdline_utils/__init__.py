"""cmdline-utils: typed options, handler adapters and a testable console.

The host model lives in :mod:`cmdline_utils.application`; the typed,
declarative helpers in :mod:`cmdline_utils.extensions`.
"""

from cmdline_utils.application import CommandLineApplication
from cmdline_utils.core.cancellation import CancellationToken
from cmdline_utils.core.models import (
    CancelKey,
    CancelKeyEventArgs,
    ConsoleColor,
    OptionType,
    ValidationResult,
)
from cmdline_utils.core.options import CommandOption, TypedCommandOption
from cmdline_utils.core.arguments import CommandArgument, TypedCommandArgument
from cmdline_utils.core.protocols import Console, VersionSource
from cmdline_utils.core.versioning import StaticVersionSource, resolve_version
from cmdline_utils.infra.memory_console import MemoryConsole
from cmdline_utils.infra.package_version import PackageVersionSource
from cmdline_utils.infra.physical_console import PhysicalConsole, physical_console
from cmdline_utils.version import __version__

__all__: list[str] = [
    "CancelKey",
    "CancelKeyEventArgs",
    "CancellationToken",
    "CommandArgument",
    "CommandLineApplication",
    "CommandOption",
    "Console",
    "ConsoleColor",
    "MemoryConsole",
    "OptionType",
    "PackageVersionSource",
    "PhysicalConsole",
    "StaticVersionSource",
    "TypedCommandArgument",
    "TypedCommandOption",
    "ValidationResult",
    "VersionSource",
    "__version__",
    "physical_console",
    "resolve_version",
]
