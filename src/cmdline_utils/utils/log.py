"""Logging configuration for applications built on cmdline-utils.

Library modules only create loggers (``logging.getLogger(__name__)``);
nothing is configured on import.  An application's entry point calls
:func:`configure_logging` once, typically with the value of its verbose
option.
"""

from __future__ import annotations

import logging
from typing import Any, TextIO

from cmdline_utils.constants import LOGGER_NAME
from cmdline_utils.exceptions import missing_dependency

_HANDLER_NAME = "cmdline_utils.rich"


def _build_rich_handler(stream: TextIO | None) -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich") from exc
    rich_console: Any = Console(file=stream) if stream is not None else Console(stderr=True)
    return RichHandler(console=rich_console, show_path=False, rich_tracebacks=False)


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger (idempotent).

    Parameters
    ----------
    verbose:
        ``DEBUG`` when ``True``, ``WARNING`` otherwise.
    stream:
        Destination; stderr when omitted.

    Returns
    -------
    logging.Logger
        The configured ``cmdline_utils`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = _build_rich_handler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    level = logging.DEBUG if verbose else logging.WARNING
    handler.setLevel(level)
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
