"""Exit-code constants shared by the host model and the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the selected handler completed without error."""

VALIDATION_ERROR: int = 1
"""An option or argument failed validation before execution."""

GENERAL_ERROR: int = 1
"""A known CmdlineUtilsError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
