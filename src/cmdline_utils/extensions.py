"""Typed, ergonomic registration helpers for :class:`CommandLineApplication`.

Every function takes the application as its first argument and
forwards to one canonical host call; defaults stand in for the option
kind, configuration callback and inherited flag.  Handler helpers adapt
the no-return shapes to the single ``token -> Awaitable[int]`` contract
the host invokes.

Example::

    from cmdline_utils import extensions as ext

    app = CommandLineApplication(name="copy")
    ext.help_option(app)
    ext.verbose_option(app)
    count = ext.option(app, int, "-c|--count <N>", "Copies", OptionType.SINGLE_VALUE)
    ext.on_execute(app, lambda: do_copy(count.parsed_value))
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from cmdline_utils.application import (
    ArgumentConfiguration,
    CommandLineApplication,
    OptionConfiguration,
)
from cmdline_utils.constants import (
    DEFAULT_HELP_TEMPLATE,
    DEFAULT_VERBOSE_TEMPLATE,
    DEFAULT_VERSION_TEMPLATE,
    VERBOSE_OPTION_DESCRIPTION,
)
from cmdline_utils.core.arguments import TypedCommandArgument
from cmdline_utils.core.cancellation import CancellationToken
from cmdline_utils.core.handlers import (
    from_action,
    from_async_action,
    from_cancellable_action,
    from_validation_action,
)
from cmdline_utils.core.models import OptionType, ValidationResult
from cmdline_utils.core.options import CommandOption, TypedCommandOption
from cmdline_utils.core.protocols import VersionSource
from cmdline_utils.core.versioning import resolve_version
from cmdline_utils.exceptions import PreconditionError

T = TypeVar("T")


def _noop(_member: Any) -> None:
    return None


def _require_app(app: CommandLineApplication | None) -> CommandLineApplication:
    if app is None:
        raise PreconditionError("An application is required.")
    return app


# ---------------------------------------------------------------------------
# Typed options and arguments
# ---------------------------------------------------------------------------

def argument(
    app: CommandLineApplication,
    value_type: type[T],
    name: str,
    description: str | None,
    configuration: ArgumentConfiguration | None = None,
    multiple_values: bool = False,
) -> TypedCommandArgument[T]:
    """Add a positional argument whose values parse into *value_type*."""
    return _require_app(app).typed_argument(
        value_type, name, description, configuration or _noop, multiple_values,
    )


def option(
    app: CommandLineApplication,
    value_type: type[T],
    template: str,
    description: str | None,
    option_type: OptionType,
    configuration: OptionConfiguration | None = None,
    inherited: bool = False,
) -> TypedCommandOption[T]:
    """Add an option whose values parse into *value_type*."""
    return _require_app(app).typed_option(
        value_type, template, description, option_type, configuration or _noop, inherited,
    )


def help_option(app: CommandLineApplication, inherited: bool = False) -> CommandOption:
    """Add the help option with the template ``-?|-h|--help``."""
    return _require_app(app).help_option(DEFAULT_HELP_TEMPLATE, inherited)


def verbose_option(
    app: CommandLineApplication,
    template: str = DEFAULT_VERBOSE_TEMPLATE,
) -> CommandOption:
    """Add the verbose option (``-v|--verbose`` by default).

    Always inherited, so subcommands accept it too.
    """
    return _require_app(app).option(
        template, VERBOSE_OPTION_DESCRIPTION, OptionType.NO_VALUE, inherited=True,
    )


# ---------------------------------------------------------------------------
# Execution handlers
# ---------------------------------------------------------------------------

def on_execute(
    app: CommandLineApplication,
    action: Callable[[], None] | Callable[[], Awaitable[None]],
) -> None:
    """Set *action* as the handler, with a return code of ``0``.

    Passing a coroutine function is deprecated and emits a
    :class:`DeprecationWarning`; use :func:`on_execute_async` so the
    handler can observe cancellation.
    """
    app = _require_app(app)
    if inspect.iscoroutinefunction(action):
        app.set_handler(from_async_action(action))
        return
    app.set_handler(from_action(action))  # type: ignore[arg-type]


def on_execute_async(
    app: CommandLineApplication,
    action: Callable[[CancellationToken], Awaitable[None]],
) -> None:
    """Set an async handler with a return code of ``0``.

    *action* receives the run's cancellation token.  It runs even if
    the token is already cancelled and is never aborted by the
    framework.  Because it returns nothing, it cannot report a non-zero
    exit code; use ``app.on_execute_async`` with an int-returning
    coroutine for that.
    """
    _require_app(app).set_handler(from_cancellable_action(action))


# ---------------------------------------------------------------------------
# Validation-error handlers
# ---------------------------------------------------------------------------

def on_validation_error(
    app: CommandLineApplication,
    handler: Callable[[ValidationResult], int],
) -> None:
    """Replace the validation-error handler; its return value is the exit code."""
    _require_app(app).validation_error_handler = handler


def on_validation_error_action(
    app: CommandLineApplication,
    action: Callable[[ValidationResult], None],
) -> None:
    """Replace the validation-error handler; the exit code is always ``1``."""
    on_validation_error(app, from_validation_action(action))


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

def version_option_from_metadata(
    app: CommandLineApplication,
    source: VersionSource,
    template: str = DEFAULT_VERSION_TEMPLATE,
) -> CommandOption:
    """Add the version option, reading the version from *source*.

    Uses ``source.informational_version`` when it is non-blank,
    otherwise ``source.version``.

    Raises
    ------
    PreconditionError
        When *app* or *source* is ``None``.
    """
    app = _require_app(app)
    return app.version_option(template, resolve_version(source))
