"""String-to-value conversion for typed options and arguments.

The binding layer never converts values itself: it forwards the
requested type to a :class:`ValueParserProvider`, which hands back the
parser the typed option will use.  Conversion failures surface as
:class:`~cmdline_utils.exceptions.ValueParseError` and are left to the
caller.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Any, TypeVar, cast

from cmdline_utils.core.protocols import ValueParser
from cmdline_utils.exceptions import UnsupportedValueTypeError, ValueParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_WORDS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS: frozenset[str] = frozenset({"false", "0", "no", "off"})


# ---------------------------------------------------------------------------
# Built-in parsers
# ---------------------------------------------------------------------------

def parse_str(name: str, raw: str) -> str:
    return raw


def parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueParseError(
            f"Invalid value specified for {name}. '{raw}' is not a valid integer.",
            member_name=name,
            raw_value=raw,
        ) from exc


def parse_float(name: str, raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ValueParseError(
            f"Invalid value specified for {name}. '{raw}' is not a valid number.",
            member_name=name,
            raw_value=raw,
        ) from exc


def parse_bool(name: str, raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueParseError(
        f"Invalid value specified for {name}. '{raw}' is not a valid boolean.",
        member_name=name,
        raw_value=raw,
    )


def parse_path(name: str, raw: str) -> Path:
    if not raw.strip():
        raise ValueParseError(
            f"Invalid value specified for {name}. A path cannot be empty.",
            member_name=name,
            raw_value=raw,
        )
    return Path(raw)


class EnumParser:
    """Parse enum members by name, case-insensitively."""

    def __init__(self, enum_type: type[enum.Enum]) -> None:
        self._enum_type = enum_type
        self._members = {member.name.lower(): member for member in enum_type}

    def __call__(self, name: str, raw: str) -> enum.Enum:
        member = self._members.get(raw.strip().lower())
        if member is None:
            allowed = ", ".join(m.name.lower() for m in self._enum_type)
            raise ValueParseError(
                f"Invalid value specified for {name}. "
                f"Allowed values are: {allowed}.",
                member_name=name,
                raw_value=raw,
            )
        return member


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------

class ValueParserProvider:
    """Registry of value parsers keyed by target type.

    A fresh provider knows ``str``, ``int``, ``float``, ``bool``,
    :class:`~pathlib.Path` and every :class:`enum.Enum` subclass.
    """

    def __init__(self) -> None:
        self._parsers: dict[type[Any], ValueParser[Any]] = {
            str: parse_str,
            int: parse_int,
            float: parse_float,
            bool: parse_bool,
            Path: parse_path,
        }

    def add(self, value_type: type[T], parser: ValueParser[T]) -> None:
        """Register (or replace) the parser for *value_type*."""
        if value_type in self._parsers:
            logger.debug("Replacing value parser for %s", value_type.__name__)
        self._parsers[value_type] = parser

    def __contains__(self, value_type: object) -> bool:
        return value_type in self._parsers or (
            isinstance(value_type, type) and issubclass(value_type, enum.Enum)
        )

    def get_parser(self, value_type: type[T]) -> ValueParser[T]:
        """Return the parser for *value_type*.

        Raises
        ------
        UnsupportedValueTypeError
            When no parser is registered and the type is not an enum.
        """
        parser = self._parsers.get(value_type)
        if parser is not None:
            return cast(ValueParser[T], parser)
        if isinstance(value_type, type) and issubclass(value_type, enum.Enum):
            return cast(ValueParser[T], EnumParser(value_type))
        type_name = getattr(value_type, "__name__", repr(value_type))
        raise UnsupportedValueTypeError(
            f"Could not find a value parser for type {type_name}.",
            hint="Register one with ValueParserProvider.add(value_type, parser).",
        )
