"""Tests for option templates, raw values and typed options (core/options.py).

Coverage:
* Template grammar: short, long, symbol and value names.
* Malformed templates fail at construction.
* Raw value recording per option type.
* Typed conversion and defaults.
* Required-option validation.
"""

from __future__ import annotations

import pytest

from cmdline_utils.core.models import OptionType
from cmdline_utils.core.options import CommandOption, TypedCommandOption, parse_template
from cmdline_utils.core.parsers import parse_bool, parse_int
from cmdline_utils.exceptions import InvalidTemplateError, ValueParseError


# ---------------------------------------------------------------------------
# Template parsing
# ---------------------------------------------------------------------------

class TestParseTemplate:
    def test_help_template(self) -> None:
        names = parse_template("-?|-h|--help")
        assert names == {
            "short_name": "h",
            "long_name": "help",
            "symbol_name": "?",
            "value_name": None,
        }

    def test_value_name(self) -> None:
        names = parse_template("-n|--name <NAME>")
        assert names["short_name"] == "n"
        assert names["long_name"] == "name"
        assert names["value_name"] == "NAME"

    def test_multi_char_single_dash_is_short_name(self) -> None:
        assert parse_template("-abc")["short_name"] == "abc"

    @pytest.mark.parametrize(
        "template",
        [
            "",
            "   ",
            "help",
            "-h||--help",
            "---help",
            "--",
            "-",
            "-h|-x",
            "--name NAME",
            "--name <>",
            "-a <X> <Y>",
            "--name <A B>",
            "--name <<NAME>>",
        ],
    )
    def test_malformed_templates_raise(self, template: str) -> None:
        with pytest.raises(InvalidTemplateError):
            parse_template(template)

    def test_error_carries_hint(self) -> None:
        with pytest.raises(InvalidTemplateError) as exc_info:
            parse_template("oops")
        assert exc_info.value.hint is not None


# ---------------------------------------------------------------------------
# CommandOption
# ---------------------------------------------------------------------------

class TestCommandOption:
    def test_aliases_and_name(self) -> None:
        option = CommandOption("-?|-h|--help", OptionType.NO_VALUE)
        assert list(option.aliases()) == ["-?", "-h", "--help"]
        assert option.name == "help"

    def test_matches_template_or_alias(self) -> None:
        option = CommandOption("-v|--verbose", OptionType.NO_VALUE)
        assert option.matches("-v|--verbose")
        assert option.matches("--verbose")
        assert option.matches("-v")
        assert not option.matches("--quiet")

    def test_defaults(self) -> None:
        option = CommandOption("--flag", OptionType.NO_VALUE, "A flag")
        assert option.description == "A flag"
        assert option.inherited is False
        assert option.show_in_help is True
        assert not option.has_value()
        assert option.value() is None

    def test_no_value_rejects_values(self) -> None:
        option = CommandOption("--flag", OptionType.NO_VALUE)
        assert option.try_parse("x") is False
        assert option.try_parse(None) is True
        assert option.has_value()

    def test_single_value_accepts_once(self) -> None:
        option = CommandOption("--name <N>", OptionType.SINGLE_VALUE)
        assert option.try_parse(None) is False
        assert option.try_parse("a") is True
        assert option.try_parse("b") is False
        assert option.values == ["a"]

    def test_multiple_value_accumulates(self) -> None:
        option = CommandOption("--tag <T>", OptionType.MULTIPLE_VALUE)
        for raw in ("a", "b", "c"):
            assert option.try_parse(raw)
        assert option.values == ["a", "b", "c"]
        assert option.value() == "a"

    def test_reset_clears_values(self) -> None:
        option = CommandOption("--tag <T>", OptionType.MULTIPLE_VALUE)
        option.try_parse("a")
        option.reset()
        assert not option.has_value()

    def test_is_required_fails_without_value(self) -> None:
        option = CommandOption("--name <N>", OptionType.SINGLE_VALUE).is_required()
        result = option.validate()
        assert result is not None
        assert "name" in result.error_message
        assert result.member_names == ("name",)

    def test_is_required_passes_with_value(self) -> None:
        option = CommandOption("--name <N>", OptionType.SINGLE_VALUE).is_required("need a name")
        option.try_parse("x")
        assert option.validate() is None

    def test_custom_message(self) -> None:
        option = CommandOption("--name <N>", OptionType.SINGLE_VALUE).is_required("need a name")
        result = option.validate()
        assert result is not None
        assert result.error_message == "need a name"


# ---------------------------------------------------------------------------
# TypedCommandOption
# ---------------------------------------------------------------------------

class TestTypedCommandOption:
    def test_parsed_value(self) -> None:
        option = TypedCommandOption("-c|--count <N>", OptionType.SINGLE_VALUE, int, parse_int)
        option.try_parse("42")
        assert option.parsed_value == 42

    def test_default_when_absent(self) -> None:
        option = TypedCommandOption("-c|--count <N>", OptionType.SINGLE_VALUE, int, parse_int)
        option.default_value = 7
        assert option.parsed_value == 7

    def test_parsed_values(self) -> None:
        option = TypedCommandOption("--n <N>", OptionType.MULTIPLE_VALUE, int, parse_int)
        option.try_parse("1")
        option.try_parse("2")
        assert option.parsed_values == [1, 2]

    def test_bool_flag(self) -> None:
        option = TypedCommandOption("--force", OptionType.NO_VALUE, bool, parse_bool)
        assert option.parsed_value is False
        option.try_parse(None)
        assert option.parsed_value is True

    def test_conversion_failure_propagates(self) -> None:
        option = TypedCommandOption("--count <N>", OptionType.SINGLE_VALUE, int, parse_int)
        option.try_parse("many")
        with pytest.raises(ValueParseError):
            _ = option.parsed_value
