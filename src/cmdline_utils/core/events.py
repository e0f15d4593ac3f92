"""Ordered observer list used for the cancel-key notification."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Event(Generic[T]):
    """A list of listeners notified in attachment order.

    Optional ``on_first_attach`` / ``on_last_detach`` hooks let an owner
    acquire a process-level resource (e.g. a signal handler) only while
    somebody is listening.

    Usage::

        event: Event[CancelKeyEventArgs] = Event()
        event.attach(listener)
        event.notify(CancelKeyEventArgs())
        event.detach(listener)
    """

    def __init__(
        self,
        *,
        on_first_attach: Callable[[], None] | None = None,
        on_last_detach: Callable[[], None] | None = None,
    ) -> None:
        self._listeners: list[Listener[T]] = []
        self._on_first_attach = on_first_attach
        self._on_last_detach = on_last_detach

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def attach(self, listener: Listener[T]) -> None:
        """Append *listener*; attaching the same callable twice notifies it twice."""
        if not self._listeners and self._on_first_attach is not None:
            self._on_first_attach()
        self._listeners.append(listener)
        logger.debug("Listener attached (%d total)", len(self._listeners))

    def detach(self, listener: Listener[T]) -> None:
        """Remove the most recent attachment of *listener*; unknown listeners are ignored."""
        for index in range(len(self._listeners) - 1, -1, -1):
            if self._listeners[index] == listener:
                del self._listeners[index]
                break
        else:
            return
        logger.debug("Listener detached (%d remaining)", len(self._listeners))
        if not self._listeners and self._on_last_detach is not None:
            self._on_last_detach()

    def notify(self, args: T) -> T:
        """Invoke every currently attached listener with *args*, in order.

        The listener list is snapshotted first, so a listener that
        detaches itself does not skip its neighbour.
        """
        for listener in list(self._listeners):
            listener(args)
        return args
