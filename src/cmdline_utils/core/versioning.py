"""Resolve a display version from build metadata."""

from __future__ import annotations

from dataclasses import dataclass

from cmdline_utils.core.protocols import VersionSource
from cmdline_utils.exceptions import PreconditionError


@dataclass(frozen=True, slots=True)
class StaticVersionSource:
    """A :class:`VersionSource` with fixed values, e.g. injected at build time."""

    version: str | None = None
    informational_version: str | None = None


def resolve_version(source: VersionSource | None) -> str | None:
    """Return the informational version, else the version number, else ``None``.

    A blank (empty or whitespace) informational version counts as absent.

    Raises
    ------
    PreconditionError
        When *source* is ``None``.
    """
    if source is None:
        raise PreconditionError("A version source is required.")
    informational = source.informational_version
    if informational is not None and informational.strip():
        return informational
    return source.version
