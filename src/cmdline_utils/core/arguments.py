"""Positional command-line arguments and their typed views."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from cmdline_utils.core.models import ValidationResult
from cmdline_utils.core.protocols import ValueParser

T = TypeVar("T")

ArgumentValidator = Callable[["CommandArgument"], "ValidationResult | None"]


class CommandArgument:
    """A positional input.

    When :attr:`multiple_values` is set the argument swallows every
    trailing value, so it must be the last argument of its command.
    The host enforces that ordering at registration time.
    """

    def __init__(
        self,
        name: str,
        description: str | None = None,
        multiple_values: bool = False,
    ) -> None:
        self.name: str = name
        self.description: str | None = description
        self.multiple_values: bool = multiple_values
        self.show_in_help: bool = True
        self.values: list[str] = []
        self.validators: list[ArgumentValidator] = []

    def __repr__(self) -> str:
        suffix = ", multiple_values=True" if self.multiple_values else ""
        return f"{type(self).__name__}({self.name!r}{suffix})"

    @property
    def value(self) -> str | None:
        return self.values[0] if self.values else None

    def reset(self) -> None:
        self.values.clear()

    def is_required(self, error_message: str | None = None) -> CommandArgument:
        """Fail validation when no value was supplied.  Returns ``self``."""
        message = error_message or f"The {self.name} field is required."

        def _required(argument: CommandArgument) -> ValidationResult | None:
            if argument.values:
                return None
            return ValidationResult(message, (argument.name,))

        self.validators.append(_required)
        return self

    def on_validate(self, validator: ArgumentValidator) -> CommandArgument:
        self.validators.append(validator)
        return self

    def validate(self) -> ValidationResult | None:
        for validator in self.validators:
            result = validator(self)
            if result is not None:
                return result
        return None


class TypedCommandArgument(CommandArgument, Generic[T]):
    """A :class:`CommandArgument` whose values convert to ``T``."""

    def __init__(
        self,
        name: str,
        value_type: type[T],
        value_parser: ValueParser[T],
        description: str | None = None,
        multiple_values: bool = False,
    ) -> None:
        super().__init__(name, description, multiple_values)
        self.value_type: type[T] = value_type
        self.value_parser: ValueParser[T] = value_parser
        self.default_value: T | None = None

    @property
    def parsed_value(self) -> T | None:
        if not self.values:
            return self.default_value
        return self.value_parser(self.name, self.values[0])

    @property
    def parsed_values(self) -> list[T]:
        return [self.value_parser(self.name, raw) for raw in self.values]
