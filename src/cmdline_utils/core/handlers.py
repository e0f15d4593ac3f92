"""Handler shapes and the adapters that normalise them.

The host stores exactly one execution handler per command, always in
the canonical shape::

    async def handler(token: CancellationToken) -> int

and exactly one validation-error handler::

    def handler(result: ValidationResult) -> int

Every convenience entry point builds one of these with a small adapter
from this module.  Adapters only supply a default *return code*; any
exception raised by the wrapped action propagates unchanged.
"""

from __future__ import annotations

import inspect
import warnings
from collections.abc import Awaitable, Callable

from cmdline_utils import exit_codes
from cmdline_utils.core.cancellation import CancellationToken
from cmdline_utils.core.models import ValidationResult

ExecutionHandler = Callable[[CancellationToken], Awaitable[int]]
"""Canonical execution handler."""

ValidationErrorHandler = Callable[[ValidationResult], int]
"""Canonical validation-error handler."""


# ---------------------------------------------------------------------------
# Native shapes (explicit exit code)
# ---------------------------------------------------------------------------

def from_int_action(func: Callable[[], int]) -> ExecutionHandler:
    """Lift a synchronous ``() -> int`` handler; its code is returned as-is."""

    async def _handler(_token: CancellationToken) -> int:
        return func()

    return _handler


def from_int_async(func: Callable[[CancellationToken], Awaitable[int]]) -> ExecutionHandler:
    """The native asynchronous shape is already canonical."""
    return func


# ---------------------------------------------------------------------------
# Convenience shapes (implicit success)
# ---------------------------------------------------------------------------

def from_action(action: Callable[[], None]) -> ExecutionHandler:
    """Run *action* synchronously, then report :data:`~exit_codes.SUCCESS`.

    Raises
    ------
    TypeError
        When *action* returns an awaitable; it would never be awaited.
    """

    async def _handler(_token: CancellationToken) -> int:
        result = action()
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError(
                f"{action!r} returned an awaitable; register it with on_execute_async().",
            )
        return exit_codes.SUCCESS

    return _handler


def from_cancellable_action(
    action: Callable[[CancellationToken], Awaitable[None]],
) -> ExecutionHandler:
    """Await *action* with the cancellation token, then report success.

    The action runs even when the token is already cancelled; observing
    cancellation is its own responsibility.  This shape cannot report a
    non-zero code: use the native ``token -> Awaitable[int]`` shape for
    that.
    """

    async def _handler(token: CancellationToken) -> int:
        await action(token)
        return exit_codes.SUCCESS

    return _handler


def from_async_action(action: Callable[[], Awaitable[None]]) -> ExecutionHandler:
    """Await a token-less coroutine function, then report success.

    Deprecated: retained for compatibility with applications written
    before cancellable handlers existed and will be removed in a future
    version.  Use :func:`from_cancellable_action` instead.
    """
    warnings.warn(
        "Token-less async handlers are deprecated and will be removed in a "
        "future version. Accept a CancellationToken and use on_execute_async().",
        DeprecationWarning,
        stacklevel=3,
    )

    async def _handler(_token: CancellationToken) -> int:
        await action()
        return exit_codes.SUCCESS

    return _handler


def from_validation_action(action: Callable[[ValidationResult], None]) -> ValidationErrorHandler:
    """Run *action*, then report :data:`~exit_codes.VALIDATION_ERROR`."""

    def _handler(result: ValidationResult) -> int:
        action(result)
        return exit_codes.VALIDATION_ERROR

    return _handler
