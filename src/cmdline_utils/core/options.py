"""Command-line options: templates, raw values and typed views.

Template grammar
----------------
Aliases are separated by ``|``; an optional value name in angle
brackets follows a space::

    -?|-h|--help
    -n|--name <NAME>

* ``--word`` is the long name.
* ``-x`` is the short name when ``x`` is alphanumeric (longer single
  dash names such as ``-abc`` are short names too).
* ``-?`` is a symbol name when the single character is not
  alphanumeric.

Anything else raises :class:`~cmdline_utils.exceptions.InvalidTemplateError`
from the constructor, i.e. at registration time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from cmdline_utils.core.models import OptionType, ValidationResult
from cmdline_utils.core.protocols import ValueParser
from cmdline_utils.exceptions import InvalidTemplateError

T = TypeVar("T")

OptionValidator = Callable[["CommandOption"], "ValidationResult | None"]


# ---------------------------------------------------------------------------
# Template parsing (pure)
# ---------------------------------------------------------------------------

def _invalid(template: str, reason: str) -> InvalidTemplateError:
    return InvalidTemplateError(
        f"Invalid template pattern '{template}': {reason}",
        hint="Use aliases such as '-n|--name <NAME>'.",
    )


def parse_template(template: str) -> dict[str, str | None]:
    """Split *template* into its short, long, symbol and value names."""
    names: dict[str, str | None] = {
        "short_name": None,
        "long_name": None,
        "symbol_name": None,
        "value_name": None,
    }
    if template is None or not template.strip():
        raise _invalid(str(template), "template is empty")

    alias_part, _, value_part = template.strip().partition(" ")
    value_part = value_part.strip()
    if value_part:
        if not (value_part.startswith("<") and value_part.endswith(">") and len(value_part) > 2):
            raise _invalid(template, f"unexpected '{value_part}'")
        value_name = value_part[1:-1]
        if any(char in "<>" or char.isspace() for char in value_name):
            raise _invalid(template, f"unexpected '{value_part}'")
        names["value_name"] = value_name

    for alias in alias_part.split("|"):
        if not alias:
            raise _invalid(template, "empty alias")
        if alias.startswith("---"):
            raise _invalid(template, f"too many dashes in '{alias}'")
        if alias.startswith("--"):
            key, name = "long_name", alias[2:]
        elif alias.startswith("-"):
            name = alias[1:]
            if len(name) == 1 and not name.isalnum():
                key = "symbol_name"
            else:
                key = "short_name"
        else:
            raise _invalid(template, f"'{alias}' does not start with '-'")
        if not name:
            raise _invalid(template, f"'{alias}' has no name")
        if names[key] is not None:
            raise _invalid(template, f"more than one {key.replace('_', ' ')}")
        names[key] = name

    return names


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class CommandOption:
    """A named, templated command-line switch holding raw string values."""

    def __init__(
        self,
        template: str,
        option_type: OptionType,
        description: str | None = None,
    ) -> None:
        names = parse_template(template)
        self.template: str = template
        self.short_name: str | None = names["short_name"]
        self.long_name: str | None = names["long_name"]
        self.symbol_name: str | None = names["symbol_name"]
        self.value_name: str | None = names["value_name"]
        self.option_type: OptionType = option_type
        self.description: str | None = description
        self.inherited: bool = False
        self.show_in_help: bool = True
        self.values: list[str | None] = []
        self.validators: list[OptionValidator] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.template!r}, {self.option_type.name})"

    @property
    def name(self) -> str:
        """The most descriptive alias, used in messages."""
        return self.long_name or self.short_name or self.symbol_name or self.template

    def aliases(self) -> Iterator[str]:
        """Yield every alias with its dashes, e.g. ``-h`` and ``--help``."""
        if self.symbol_name:
            yield f"-{self.symbol_name}"
        if self.short_name:
            yield f"-{self.short_name}"
        if self.long_name:
            yield f"--{self.long_name}"

    def matches(self, template_or_alias: str) -> bool:
        return template_or_alias == self.template or template_or_alias in set(self.aliases())

    # ------------------------------------------------------------------
    # Raw values
    # ------------------------------------------------------------------

    def try_parse(self, raw: str | None) -> bool:
        """Record one occurrence of the option; ``False`` when it does not fit the type."""
        if self.option_type is OptionType.NO_VALUE:
            if raw is not None:
                return False
            self.values.append(None)
            return True
        if raw is None:
            return False
        if self.option_type is OptionType.SINGLE_VALUE and self.values:
            return False
        self.values.append(raw)
        return True

    def has_value(self) -> bool:
        return bool(self.values)

    def value(self) -> str | None:
        """First recorded value, or ``None``."""
        return self.values[0] if self.values else None

    def reset(self) -> None:
        self.values.clear()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def is_required(self, error_message: str | None = None) -> CommandOption:
        """Fail validation when the option was not supplied.  Returns ``self``."""
        message = error_message or f"The {self.name} field is required."

        def _required(option: CommandOption) -> ValidationResult | None:
            if option.has_value():
                return None
            return ValidationResult(message, (option.name,))

        self.validators.append(_required)
        return self

    def on_validate(self, validator: OptionValidator) -> CommandOption:
        self.validators.append(validator)
        return self

    def validate(self) -> ValidationResult | None:
        """Run validators in order and return the first failure."""
        for validator in self.validators:
            result = validator(self)
            if result is not None:
                return result
        return None


class TypedCommandOption(CommandOption, Generic[T]):
    """A :class:`CommandOption` whose raw values convert to ``T``."""

    def __init__(
        self,
        template: str,
        option_type: OptionType,
        value_type: type[T],
        value_parser: ValueParser[T],
        description: str | None = None,
    ) -> None:
        super().__init__(template, option_type, description)
        self.value_type: type[T] = value_type
        self.value_parser: ValueParser[T] = value_parser
        self.default_value: T | None = None

    def _convert(self, raw: str | None) -> Any:
        if raw is None:
            # A bare flag only has a typed meaning for booleans.
            if self.value_type is bool:
                return self.value_parser(self.name, "true")
            return self.default_value
        return self.value_parser(self.name, raw)

    @property
    def parsed_value(self) -> T | None:
        """First value converted to ``T``, or :attr:`default_value` when absent."""
        if not self.values:
            if self.value_type is bool and self.option_type is OptionType.NO_VALUE:
                return self.default_value if self.default_value is not None else False  # type: ignore[return-value]
            return self.default_value
        return self._convert(self.values[0])

    @property
    def parsed_values(self) -> list[T]:
        """Every recorded value converted to ``T``."""
        return [self._convert(raw) for raw in self.values]
