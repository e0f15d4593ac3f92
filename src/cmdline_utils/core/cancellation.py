"""Cooperative cancellation signal passed to asynchronous handlers.

The framework never aborts a running handler.  Handlers poll
:attr:`CancellationToken.is_cancellation_requested`, call
:meth:`~CancellationToken.raise_if_cancellation_requested`, or await
:meth:`~CancellationToken.wait_async` and decide for themselves how to
stop.

:meth:`CancellationToken.cancel` is safe to call from a signal handler
or another thread.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

from cmdline_utils.exceptions import OperationCancelledError

logger = logging.getLogger(__name__)


class CancellationToken:
    """A one-shot, thread-safe cancellation flag with callbacks."""

    def __init__(self, cancelled: bool = False) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []
        if cancelled:
            self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation and run registered callbacks once (idempotent).

        Every callback runs even if an earlier one raises; the first
        exception is re-raised afterwards.
        """
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        logger.debug("Cancellation requested; running %d callback(s)", len(callbacks))
        error: Exception | None = None
        for callback in callbacks:
            try:
                callback()
            except Exception as exc:
                if error is None:
                    error = exc
                logger.debug("Cancellation callback %r raised %r", callback, exc)
        if error is not None:
            raise error

    def register(self, callback: Callable[[], None]) -> None:
        """Run *callback* on cancellation, or immediately if already cancelled."""
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def unregister(self, callback: Callable[[], None]) -> None:
        """Forget *callback*; unknown or already-run callbacks are ignored."""
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    def raise_if_cancellation_requested(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError("The operation was cancelled.")

    def wait(self, timeout: float | None = None) -> bool:
        """Block the calling thread until cancelled; ``False`` on timeout."""
        return self._event.wait(timeout)

    async def wait_async(self) -> None:
        """Suspend the current task until cancellation is requested."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[None] = loop.create_future()

        def _wake() -> None:
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve)

        def _resolve() -> None:
            if not future.done():
                future.set_result(None)

        self.register(_wake)
        try:
            await future
        finally:
            self.unregister(_wake)
