"""Custom exception hierarchy for cmdline-utils.

Every error this package raises inherits from :class:`CmdlineUtilsError`
so that an application's error boundary can render a clean message
without leaking internal stack traces.

Registration-time failures (bad templates, name collisions, missing
preconditions) are raised immediately from the registering call.  They
are never deferred to parse or dispatch time.

Hierarchy
---------
CmdlineUtilsError
├── PreconditionError
├── InvalidTemplateError
├── DuplicateOptionError
├── DuplicateArgumentError
├── ArgumentOrderError
├── UnsupportedValueTypeError
├── ValueParseError
├── OperationCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class CmdlineUtilsError(Exception):
    """Base exception for all cmdline-utils errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registration ----------------------------------------------------------

class PreconditionError(CmdlineUtilsError):
    """Raised when a required collaborator (application, source, type) is ``None``."""


class InvalidTemplateError(CmdlineUtilsError):
    """Raised when an option template string cannot be parsed."""


class DuplicateOptionError(CmdlineUtilsError):
    """Raised when an option alias is already registered on the same command."""


class DuplicateArgumentError(CmdlineUtilsError):
    """Raised when a positional argument name is already registered."""


class ArgumentOrderError(CmdlineUtilsError):
    """Raised when an argument is added after a multi-value argument."""


class UnsupportedValueTypeError(CmdlineUtilsError):
    """Raised when no value parser is registered for a requested type."""


# --- Parsing / execution ---------------------------------------------------

class ValueParseError(CmdlineUtilsError):
    """Raised by a value parser when a raw string cannot be converted."""

    def __init__(
        self,
        message: str,
        *,
        member_name: str | None = None,
        raw_value: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.member_name: str | None = member_name
        self.raw_value: str | None = raw_value


class OperationCancelledError(CmdlineUtilsError):
    """Raised by :meth:`CancellationToken.raise_if_cancellation_requested`."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdlineUtilsError):
    """Raised when an optional runtime dependency is not available."""


def missing_dependency(package: str) -> EnvironmentError:
    """Build the standard error for an optional UI dependency that is absent."""
    return EnvironmentError(
        f"{package} is not installed. Install with: pip install {package}",
    )
