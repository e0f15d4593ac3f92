"""The host application model.

:class:`CommandLineApplication` is the non-generic surface the binding
layer (:mod:`cmdline_utils.extensions`) builds on.  It owns the
registered options and arguments, one execution handler, one
validation-error handler, and the version option.

It does **not** tokenize ``argv`` or render help text.  Raw values
reach options through :meth:`CommandOption.try_parse` and arguments
through :attr:`CommandArgument.values`, which is exactly what a
tokenizer does after matching tokens to templates.

Typical flow::

    app = CommandLineApplication(name="greet")
    name = app.typed_option(str, "-n|--name <NAME>", "Who to greet", OptionType.SINGLE_VALUE)
    app.on_execute(lambda: print(f"Hello {name.parsed_value}") or 0)
    name.try_parse("world")
    raise SystemExit(app.execute())
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator
from typing import TypeVar

from cmdline_utils import exit_codes
from cmdline_utils.constants import (
    HELP_OPTION_DESCRIPTION,
    VERSION_OPTION_DESCRIPTION,
)
from cmdline_utils.core.arguments import CommandArgument, TypedCommandArgument
from cmdline_utils.core.cancellation import CancellationToken
from cmdline_utils.core.handlers import (
    ExecutionHandler,
    ValidationErrorHandler,
    from_int_action,
    from_int_async,
)
from cmdline_utils.core.models import CancelKeyEventArgs, OptionType, ValidationResult
from cmdline_utils.core.options import CommandOption, TypedCommandOption
from cmdline_utils.core.parsers import ValueParserProvider
from cmdline_utils.core.protocols import Console
from cmdline_utils.exceptions import (
    ArgumentOrderError,
    DuplicateArgumentError,
    DuplicateOptionError,
    PreconditionError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

OptionConfiguration = Callable[[CommandOption], None]
ArgumentConfiguration = Callable[[CommandArgument], None]


def _default_console() -> Console:
    from cmdline_utils.infra.physical_console import physical_console

    return physical_console()


async def _default_execution_handler(_token: CancellationToken) -> int:
    return exit_codes.SUCCESS


class CommandLineApplication:
    """One command node: its options, arguments and handlers.

    Parameters
    ----------
    name:
        Command name shown in version output.
    description:
        Free-form description.
    parent:
        Enclosing command, if any.  Options registered on an ancestor
        with ``inherited=True`` are visible through :meth:`get_options`.
    console:
        Where output goes.  Defaults to the process-wide physical
        console; tests pass a :class:`~cmdline_utils.infra.MemoryConsole`.
    value_parsers:
        Provider used by the typed registration primitives.  Children
        share their parent's provider unless given their own.
    """

    def __init__(
        self,
        name: str | None = None,
        description: str | None = None,
        *,
        parent: CommandLineApplication | None = None,
        console: Console | None = None,
        value_parsers: ValueParserProvider | None = None,
    ) -> None:
        self.name: str | None = name
        self.description: str | None = description
        self.parent: CommandLineApplication | None = parent
        if console is None:
            console = parent.console if parent is not None else _default_console()
        self.console: Console = console
        if value_parsers is None:
            value_parsers = parent.value_parsers if parent is not None else ValueParserProvider()
        self.value_parsers: ValueParserProvider = value_parsers
        self.options: list[CommandOption] = []
        self.arguments: list[CommandArgument] = []
        self.option_help: CommandOption | None = None
        self.option_version: CommandOption | None = None
        self.short_version: str | None = None
        self.long_version: str | None = None
        self.validation_error_handler: ValidationErrorHandler = self._default_validation_error_handler
        self._handler: ExecutionHandler = _default_execution_handler

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def full_name(self) -> str | None:
        """Space-separated names from the root command down to this one."""
        names: list[str] = []
        node: CommandLineApplication | None = self
        while node is not None:
            if node.name:
                names.append(node.name)
            node = node.parent
        return " ".join(reversed(names)) or None

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def get_options(self) -> Iterator[CommandOption]:
        """Own options, then inherited options of every ancestor."""
        yield from self.options
        node = self.parent
        while node is not None:
            yield from (option for option in node.options if option.inherited)
            node = node.parent

    def get_option(self, template_or_alias: str) -> CommandOption | None:
        """Find a visible option by its full template or any single alias."""
        return next(
            (option for option in self.get_options() if option.matches(template_or_alias)),
            None,
        )

    def add_option(self, option: CommandOption) -> CommandOption:
        """Register an already-built option.

        Raises
        ------
        DuplicateOptionError
            When any alias is already used by an option on this command.
        """
        taken = {alias for existing in self.options for alias in existing.aliases()}
        clashes = sorted(taken.intersection(option.aliases()))
        if clashes:
            raise DuplicateOptionError(
                f"Option '{', '.join(clashes)}' is already registered on "
                f"{self.full_name or 'this command'}.",
            )
        self.options.append(option)
        logger.debug("Registered option %s (%s)", option.template, option.option_type.name)
        return option

    def option(
        self,
        template: str,
        description: str | None,
        option_type: OptionType,
        configuration: OptionConfiguration | None = None,
        inherited: bool = False,
    ) -> CommandOption:
        """Create, configure and register an untyped option."""
        option = CommandOption(template, option_type, description)
        option.inherited = inherited
        if configuration is not None:
            configuration(option)
        return self.add_option(option)

    def typed_option(
        self,
        value_type: type[T],
        template: str,
        description: str | None,
        option_type: OptionType,
        configuration: OptionConfiguration,
        inherited: bool,
    ) -> TypedCommandOption[T]:
        """Generic registration primitive used by the binding layer.

        Raises
        ------
        UnsupportedValueTypeError
            When :attr:`value_parsers` has no parser for *value_type*.
        """
        if value_type is None:
            raise PreconditionError("A value type is required.")
        parser = self.value_parsers.get_parser(value_type)
        option: TypedCommandOption[T] = TypedCommandOption(
            template, option_type, value_type, parser, description,
        )
        option.inherited = inherited
        configuration(option)
        self.add_option(option)
        return option

    def help_option(self, template: str, inherited: bool = False) -> CommandOption:
        """Register the no-value option that triggers help output."""
        option = self.option(template, HELP_OPTION_DESCRIPTION, OptionType.NO_VALUE, inherited=inherited)
        self.option_help = option
        return option

    def version_option(
        self,
        template: str,
        short_version: str | None,
        long_version: str | None = None,
    ) -> CommandOption:
        """Register the no-value option that prints the version and exits."""
        option = self.option(template, VERSION_OPTION_DESCRIPTION, OptionType.NO_VALUE)
        self.option_version = option
        self.short_version = short_version
        self.long_version = long_version if long_version is not None else short_version
        logger.debug("Version option %s -> %r", template, self.short_version)
        return option

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def add_argument(self, argument: CommandArgument) -> CommandArgument:
        """Register an already-built argument.

        Raises
        ------
        DuplicateArgumentError
            When the name is already used on this command.
        ArgumentOrderError
            When the previous argument accepts multiple values.
        """
        if any(existing.name == argument.name for existing in self.arguments):
            raise DuplicateArgumentError(f"Argument '{argument.name}' is already registered.")
        if self.arguments and self.arguments[-1].multiple_values:
            raise ArgumentOrderError(
                f"Argument '{argument.name}' cannot follow "
                f"'{self.arguments[-1].name}', which accepts multiple values.",
                hint="Only the last argument may accept multiple values.",
            )
        self.arguments.append(argument)
        logger.debug("Registered argument %s", argument.name)
        return argument

    def argument(
        self,
        name: str,
        description: str | None,
        configuration: ArgumentConfiguration | None = None,
        multiple_values: bool = False,
    ) -> CommandArgument:
        argument = CommandArgument(name, description, multiple_values)
        if configuration is not None:
            configuration(argument)
        return self.add_argument(argument)

    def typed_argument(
        self,
        value_type: type[T],
        name: str,
        description: str | None,
        configuration: ArgumentConfiguration,
        multiple_values: bool,
    ) -> TypedCommandArgument[T]:
        """Generic registration primitive used by the binding layer."""
        if value_type is None:
            raise PreconditionError("A value type is required.")
        parser = self.value_parsers.get_parser(value_type)
        argument: TypedCommandArgument[T] = TypedCommandArgument(
            name, value_type, parser, description, multiple_values,
        )
        configuration(argument)
        self.add_argument(argument)
        return argument

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_execute(self, handler: Callable[[], int]) -> None:
        """Set a synchronous handler whose return value is the exit code."""
        self.set_handler(from_int_action(handler))

    def on_execute_async(self, handler: Callable[[CancellationToken], Awaitable[int]]) -> None:
        """Set an asynchronous handler whose return value is the exit code."""
        self.set_handler(from_int_async(handler))

    def set_handler(self, handler: ExecutionHandler) -> None:
        """Store the canonical handler.  The last registration wins."""
        if self._handler is not _default_execution_handler:
            logger.debug("Replacing execution handler on %s", self.full_name or "command")
        self._handler = handler

    def _default_validation_error_handler(self, result: ValidationResult) -> int:
        self.console.error.write(f"{result.error_message}\n")
        self.console.error.flush()
        return exit_codes.VALIDATION_ERROR

    # ------------------------------------------------------------------
    # Validation and invocation
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult | None:
        """Validate own options, then arguments; return the first failure."""
        for option in self.options:
            result = option.validate()
            if result is not None:
                return result
        for argument in self.arguments:
            result = argument.validate()
            if result is not None:
                return result
        return None

    async def invoke_async(self, token: CancellationToken | None = None) -> int:
        """Run the execution handler and return its exit code."""
        return await self._handler(token if token is not None else CancellationToken())

    def invoke(self, token: CancellationToken | None = None) -> int:
        """Synchronous wrapper around :meth:`invoke_async`."""
        return asyncio.run(self.invoke_async(token))

    def show_version(self) -> None:
        name = self.full_name
        version = self.long_version or ""
        line = f"{name} {version}".strip() if name else version
        self.console.out.write(f"{line}\n")
        self.console.out.flush()

    async def execute_async(self, token: CancellationToken | None = None) -> int:
        """Version short-circuit, then validation, then invocation.

        While running, the first cancel-key press cancels *token* and
        suppresses process termination so the handler can stop
        cooperatively.  A second press is not suppressed.
        """
        token = token if token is not None else CancellationToken()

        if self.option_version is not None and self.option_version.has_value():
            self.show_version()
            return exit_codes.SUCCESS

        result = self.validate()
        if result is not None:
            logger.debug("Validation failed: %s", result.error_message)
            return self.validation_error_handler(result)

        def _on_cancel_key(args: CancelKeyEventArgs) -> None:
            if token.is_cancellation_requested:
                return
            logger.debug("Cancel key pressed; requesting cancellation")
            args.cancel = True
            token.cancel()

        self.console.cancel_key_press.attach(_on_cancel_key)
        try:
            return await self.invoke_async(token)
        finally:
            self.console.cancel_key_press.detach(_on_cancel_key)

    def execute(self, token: CancellationToken | None = None) -> int:
        """Synchronous wrapper around :meth:`execute_async`."""
        return asyncio.run(self.execute_async(token))
