# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandLineParser`, the dialect-aware tokenizer at the heart of Dialex.

The parser walks the argument vector once, left to right. Each argument is
classified relative to the previous one and the active `StyleProfile`, then
resolved through the four `ParserCallbacks` lookups:

    Start/Command → option-or-positional
    `--`          → everything after it is positional
    Option        → next argument may be its value, depending on the value type
                    (Boolean: only an explicit literal; Normal: anything but `--`;
                    List/Dictionary: anything that is not itself an option)

Short option groups such as `-abc` are resolved lazily:

    1. As one multi-character short option, if the style allows it.
    2. As combined boolean flags when the first flag is boolean.
    3. As `-o` with the inline value `bc` when the style allows it.
    4. Otherwise the option is not found.

Structural failures (unknown options, malformed names) stop the parse and are
returned immediately. Per-value failures (bad boolean literals, malformed
dictionary items) are accumulated with `ParsingResult.combine` and parsing
continues.

Example:
    >>> parser = CommandLineParser(command_line, "build", callbacks)
    >>> parser.parse().throw_if_error()
"""
from __future__ import annotations

from dataclasses import dataclass, field

from dialex.command_line import CommandLine
from dialex.logger import logger
from dialex.parser.parser_types import (
    ArgumentType,
    OptionValueMatch,
    OptionValueType,
    ParseToken,
)
from dialex.parser.parsing_result import ParsingResult
from dialex.parser.values import parse_boolean, split_collection, split_dictionary
from dialex.protocols import ParserCallbacks
from dialex.style import OptionPrefix

_NAME_PUNCTUATION = frozenset("-_.?")


@dataclass
class ParsingState:
    """Mutable bookkeeping for one parse call."""

    last_type: ArgumentType = ArgumentType.START
    last_match: OptionValueMatch = OptionValueMatch.NOT_MATCH
    last_option_name: str = ""
    positional_index: int = 0
    result: ParsingResult = ParsingResult.SUCCESS
    tokens: list[tuple[int, ParseToken]] = field(default_factory=list)


def is_valid_option_name(name: str) -> bool:
    return all(char.isalnum() or char in _NAME_PUNCTUATION for char in name)


class CommandLineParser:
    """
    Tokenizes a `CommandLine` and reports every match through `ParserCallbacks`.

    Attributes:
        command_line (CommandLine): The normalized command line to parse.
        command_object_name (str): Name of the target, used in error messages.
        callbacks (ParserCallbacks): Option and positional lookups plus value assignment.
        command_count (int): Number of leading command/verb arguments to skip.
    """

    def __init__(
        self,
        command_line: CommandLine,
        command_object_name: str,
        callbacks: ParserCallbacks,
        command_count: int = 0,
    ) -> None:
        self.command_line = command_line
        self.command_object_name = command_object_name
        self.callbacks = callbacks
        self.command_count = command_count
        self.style = command_line.style
        self.ignore_unknown_options = command_line.parsing_options.ignore_unknown_options
        self.ignore_unknown_positional_arguments = (
            command_line.parsing_options.ignore_unknown_positional_arguments
        )
        self.tokens: list[tuple[int, ParseToken]] = []

    def parse(self) -> ParsingResult:
        """Parse the command line. Returns the first fatal failure, if any."""
        state = ParsingState()
        self.tokens = state.tokens
        for index, argument in enumerate(self.command_line.arguments):
            if index < self.command_count:
                state.last_type = ArgumentType.COMMAND
                state.tokens.append((index, ParseToken(ArgumentType.COMMAND, value=argument)))
                continue
            token = self.classify(
                argument, state.last_type, state.last_match.value_type
            )
            state.tokens.append((index, token))
            failure = self._handle(index, token, state)
            if failure is not None:
                return failure
        return state.result

    def classify(
        self,
        argument: str,
        last_type: ArgumentType,
        last_value_type: OptionValueType = OptionValueType.NOT_EXIST,
    ) -> ParseToken:
        """Classify one argument relative to the previous token."""
        if last_type in (
            ArgumentType.POSITIONAL_ARGUMENT_SEPARATOR,
            ArgumentType.POST_POSITIONAL_ARGUMENT,
        ):
            return ParseToken(ArgumentType.POST_POSITIONAL_ARGUMENT, value=argument)
        if argument == "--":
            return ParseToken(ArgumentType.POSITIONAL_ARGUMENT_SEPARATOR)
        if last_type in (
            ArgumentType.LONG_OPTION,
            ArgumentType.SHORT_OPTION,
            ArgumentType.OPTION,
        ):
            return self._classify_after_option(argument, last_value_type)
        if (
            last_type is ArgumentType.OPTION_VALUE
            and last_value_type.is_collection
            and self.style.supports_space_separated_collection_values
        ):
            return self._classify_option_or_value(argument)
        return self._classify_option_or_positional(argument)

    def _classify_after_option(
        self, argument: str, value_type: OptionValueType
    ) -> ParseToken:
        style = self.style
        if value_type is OptionValueType.BOOLEAN:
            if style.supports_explicit_boolean_option_value:
                boolean = parse_boolean(argument)
                if boolean is not None:
                    return ParseToken(
                        ArgumentType.OPTION_VALUE, value="true" if boolean else "false"
                    )
            return self._classify_option_or_positional(argument)
        if not style.supports_space_separated_option_value:
            return self._classify_option_or_positional(argument)
        if value_type is OptionValueType.NORMAL:
            return ParseToken(ArgumentType.OPTION_VALUE, value=argument)
        # Collections and ignored unknown options only take a non-option value.
        return self._classify_option_or_value(argument)

    def _classify_option_or_value(self, argument: str) -> ParseToken:
        token = self._classify_option_or_positional(argument)
        if token.type is ArgumentType.POSITIONAL_ARGUMENT:
            return ParseToken(ArgumentType.OPTION_VALUE, value=argument)
        return token

    def _classify_option_or_positional(self, argument: str) -> ParseToken:
        if len(argument) <= 1:
            return ParseToken(ArgumentType.POSITIONAL_ARGUMENT, value=argument)
        prefix = self.style.option_prefix
        if prefix is OptionPrefix.DOUBLE_DASH:
            if argument.startswith("--"):
                return self._classify_long_option(argument[2:])
            if argument[0] == "-":
                return self._classify_short_option(argument[1:])
            return ParseToken(ArgumentType.POSITIONAL_ARGUMENT, value=argument)
        if prefix is OptionPrefix.ANY and argument.startswith("--"):
            return self._classify_long_option(argument[2:])
        if prefix.is_option_start(argument):
            return self._classify_undetermined_option(argument[1:])
        return ParseToken(ArgumentType.POSITIONAL_ARGUMENT, value=argument)

    def _split_inline_value(self, body: str) -> tuple[str, str | None]:
        index = self.style.option_value_separators.index_of_any(body)
        if index < 0:
            return body, None
        return body[:index], body[index + 1 :]

    def _classify_long_option(self, body: str) -> ParseToken:
        name, value = self._split_inline_value(body)
        if not name or not is_valid_option_name(name):
            return ParseToken(ArgumentType.ERROR_OPTION, option_name=name, value=value)
        if value is None:
            return ParseToken(ArgumentType.LONG_OPTION, option_name=name)
        return ParseToken(ArgumentType.LONG_OPTION_WITH_VALUE, option_name=name, value=value)

    def _classify_short_option(self, body: str) -> ParseToken:
        name, value = self._split_inline_value(body)
        if not name:
            return ParseToken(ArgumentType.ERROR_OPTION, option_name=name, value=value)
        valid = is_valid_option_name(name)
        if value is not None and valid:
            return ParseToken(
                ArgumentType.SHORT_OPTION_WITH_VALUE, option_name=name, value=value
            )
        if self.style.supports_short_option_value_without_separator:
            # `-o/tmp=x` is option o with the value `/tmp=x`.
            name, value = body, None
        elif not valid:
            return ParseToken(ArgumentType.ERROR_OPTION, option_name=name, value=value)
        if len(name) == 1:
            return ParseToken(ArgumentType.SHORT_OPTION, option_name=name)
        return ParseToken(ArgumentType.MULTI_SHORT_OPTIONS, option_name=name)

    def _classify_undetermined_option(self, body: str) -> ParseToken:
        name, value = self._split_inline_value(body)
        if not name or not is_valid_option_name(name):
            return ParseToken(ArgumentType.ERROR_OPTION, option_name=name, value=value)
        if value is None:
            return ParseToken(ArgumentType.OPTION, option_name=name)
        return ParseToken(ArgumentType.OPTION_WITH_VALUE, option_name=name, value=value)

    def _location(self, index: int) -> str:
        return self.command_line.describe_location(index)

    def _handle(
        self, index: int, token: ParseToken, state: ParsingState
    ) -> ParsingResult | None:
        kind = token.type
        if kind is ArgumentType.ERROR_OPTION:
            return self._error_option(index, token)
        if kind.is_positional:
            return self._handle_positional(index, token, state)
        if kind is ArgumentType.POSITIONAL_ARGUMENT_SEPARATOR:
            state.last_type = kind
            state.last_match = OptionValueMatch.NOT_MATCH
            return None
        if kind is ArgumentType.OPTION_VALUE:
            assert token.value is not None
            state.result = state.result.combine(
                self._assign_value(index, state.last_match, state.last_option_name, token.value)
            )
            state.last_type = kind
            if not state.last_match.value_type.is_collection:
                state.last_match = OptionValueMatch.NOT_MATCH
            return None
        if kind is ArgumentType.MULTI_SHORT_OPTIONS:
            return self._handle_multi_short_options(index, token, state)
        return self._handle_option(index, token, state)

    def _error_option(self, index: int, token: ParseToken) -> ParsingResult:
        if not token.option_name:
            return ParsingResult.option_parse_error(
                self._location(index), "the option name is empty."
            )
        return ParsingResult.option_separator_not_supported(
            self._location(index), token.option_name
        )

    def _handle_positional(
        self, index: int, token: ParseToken, state: ParsingState
    ) -> ParsingResult | None:
        value = token.value or ""
        position = state.positional_index
        state.positional_index += 1
        state.last_type = token.type
        state.last_match = OptionValueMatch.NOT_MATCH

        match = self.callbacks.match_positional_argument(value, position)
        if not match.exists:
            if self.ignore_unknown_positional_arguments:
                logger.debug(
                    "Ignoring unknown positional argument %r at index %d.", value, index
                )
                return None
            return ParsingResult.positional_not_found(
                self._location(index), self.command_object_name, value, position
            )
        self.callbacks.assign_property_value(
            match.property_name, match.property_index, None, value
        )
        return None

    def _match_short_option(self, name: str) -> OptionValueMatch:
        style = self.style
        if not style.supports_short_option:
            return OptionValueMatch.NOT_MATCH
        if len(name) > 1 and not style.supports_multi_char_short_option:
            return OptionValueMatch.NOT_MATCH
        return self.callbacks.match_short_option(name, style.case_sensitive)

    def _match_long_option(self, name: str) -> OptionValueMatch:
        style = self.style
        if not style.supports_long_option:
            return OptionValueMatch.NOT_MATCH
        return self.callbacks.match_long_option(
            name, style.case_sensitive, style.naming_policy
        )

    def _handle_option(
        self, index: int, token: ParseToken, state: ParsingState
    ) -> ParsingResult | None:
        kind = token.type
        name = token.option_name or ""
        style = self.style

        if kind in (ArgumentType.LONG_OPTION, ArgumentType.LONG_OPTION_WITH_VALUE):
            match = self._match_long_option(name)
        elif kind in (ArgumentType.SHORT_OPTION, ArgumentType.SHORT_OPTION_WITH_VALUE):
            match = self._match_short_option(name)
        else:
            if (
                len(name) > 1
                and not style.supports_long_option
                and not style.supports_multi_char_short_option
            ):
                return ParsingResult.multi_char_short_option_not_supported(
                    self._location(index), name
                )
            match = self._match_long_option(name)
            if not match.exists:
                match = self._match_short_option(name)

        if not match.exists:
            return self._option_not_found(index, name, kind, state)
        return self._apply_option(index, kind, name, match, token.value, state)

    def _option_not_found(
        self, index: int, name: str, kind: ArgumentType, state: ParsingState
    ) -> ParsingResult | None:
        if not self.ignore_unknown_options:
            return ParsingResult.option_not_found(
                self._location(index), self.command_object_name, name
            )
        logger.debug("Ignoring unknown option %r at index %d.", name, index)
        state.last_type = kind
        state.last_match = OptionValueMatch.NOT_MATCH
        state.last_option_name = name
        return None

    def _apply_option(
        self,
        index: int,
        kind: ArgumentType,
        name: str,
        match: OptionValueMatch,
        value: str | None,
        state: ParsingState,
    ) -> None:
        state.last_type = kind
        state.last_option_name = name
        if kind.has_inline_value:
            assert value is not None
            state.last_match = OptionValueMatch.NOT_MATCH
            state.result = state.result.combine(
                self._assign_value(index, match, name, value)
            )
            return None

        state.last_match = match
        if match.value_type is OptionValueType.BOOLEAN:
            self.callbacks.assign_property_value(
                match.property_name, match.property_index, None, "true"
            )
        return None

    def _handle_multi_short_options(
        self, index: int, token: ParseToken, state: ParsingState
    ) -> ParsingResult | None:
        style = self.style
        name = token.option_name or ""

        if style.supports_multi_char_short_option and style.supports_short_option:
            match = self.callbacks.match_short_option(name, style.case_sensitive)
            if match.exists:
                return self._apply_option(
                    index, ArgumentType.SHORT_OPTION, name, match, None, state
                )

        first_name, rest = name[0], name[1:]
        first = self._match_short_option(first_name)
        if not first.exists:
            return self._option_not_found(
                index, name, ArgumentType.MULTI_SHORT_OPTIONS, state
            )

        if first.value_type is OptionValueType.BOOLEAN:
            if style.supports_short_option_combination:
                return self._combine_short_options(index, name, first, state)
            if (
                style.supports_short_option_value_without_separator
                and parse_boolean(rest) is not None
            ):
                return self._apply_option(
                    index, ArgumentType.SHORT_OPTION_WITH_VALUE, first_name, first, rest, state
                )
        elif style.supports_short_option_value_without_separator:
            return self._apply_option(
                index, ArgumentType.SHORT_OPTION_WITH_VALUE, first_name, first, rest, state
            )

        return self._option_not_found(index, name, ArgumentType.MULTI_SHORT_OPTIONS, state)

    def _combine_short_options(
        self,
        index: int,
        name: str,
        first: OptionValueMatch,
        state: ParsingState,
    ) -> ParsingResult | None:
        style = self.style
        rest = name[1:]
        matches = [(char, self._match_short_option(char)) for char in rest]

        if not all(match.value_type is OptionValueType.BOOLEAN for _, match in matches):
            if (
                style.supports_short_option_value_without_separator
                and parse_boolean(rest) is not None
            ):
                return self._apply_option(
                    index, ArgumentType.SHORT_OPTION_WITH_VALUE, name[0], first, rest, state
                )

        assign = self.callbacks.assign_property_value
        assign(first.property_name, first.property_index, None, "true")
        for char, match in matches:
            if not match.exists:
                failure = self._option_not_found(
                    index, char, ArgumentType.MULTI_SHORT_OPTIONS, state
                )
                if failure is not None:
                    return failure
                continue
            if match.value_type is not OptionValueType.BOOLEAN:
                return ParsingResult.combination_is_not_boolean(
                    self._location(index), name, char
                )
            assign(match.property_name, match.property_index, None, "true")

        state.last_type = ArgumentType.MULTI_SHORT_OPTIONS
        state.last_match = OptionValueMatch.NOT_MATCH
        state.last_option_name = name
        return None

    def _assign_value(
        self, index: int, match: OptionValueMatch, name: str, value: str
    ) -> ParsingResult:
        """Materialize `value` for `match` and hand each piece to the callbacks."""
        value_type = match.value_type
        if value_type is OptionValueType.NOT_EXIST:
            return ParsingResult.SUCCESS

        assign = self.callbacks.assign_property_value
        separators = self.style.collection_value_separators
        if value_type is OptionValueType.BOOLEAN:
            boolean = parse_boolean(value)
            if boolean is None:
                return ParsingResult.boolean_value_parse_error(
                    self._location(index), name, value
                )
            assign(match.property_name, match.property_index, None, "true" if boolean else "false")
        elif value_type is OptionValueType.LIST:
            try:
                items = split_collection(value, separators)
            except ValueError as error:
                return ParsingResult.option_parse_error(self._location(index), str(error))
            for item in items:
                assign(match.property_name, match.property_index, None, item)
        elif value_type is OptionValueType.DICTIONARY:
            try:
                pairs = split_dictionary(value, separators)
            except ValueError as error:
                return ParsingResult.dictionary_value_parse_error(
                    self._location(index), name, str(error)
                )
            for key, item in pairs.items():
                assign(match.property_name, match.property_index, key, item)
        else:
            assign(match.property_name, match.property_index, None, value)
        return ParsingResult.SUCCESS
