# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandObjectParser`, a runtime binder that declares options and
positional slots and implements the four `ParserCallbacks` lookups on top of
them.

The tokenizer only reports raw strings. `CommandObjectParser` collects them
per declaration and then materializes a plain dictionary:

    - Boolean options become `bool`.
    - Normal options and positionals go through their `type` converter.
    - List options become lists, Dictionary options become dicts.
    - Multi-slot positionals become lists.

Example:
    parser = CommandObjectParser("build", command="build")
    parser.add_option("output-directory", "o")
    parser.add_option("verbose", "v", type=bool)
    parser.add_value("project")
    values = parser.parse(["build", "app.csproj", "-o", "out", "-v"], command_count=1)
"""
from __future__ import annotations

from typing import Any, Callable, Sequence

from dialex.command_line import CommandLine
from dialex.exceptions import (
    CommandArgumentError,
    CommandLineParseError,
    RequiredPropertyNotAssignedError,
)
from dialex.naming import NamingResolver, make_kebab_case, names_equal
from dialex.options import ParsingOptions
from dialex.parser.argument import AssignedValues, OptionArgument, PositionalArgument
from dialex.parser.command_line_parser import CommandLineParser
from dialex.parser.parser_types import (
    OptionValueMatch,
    OptionValueType,
    PositionalArgumentValueMatch,
    PositionalArgumentValueType,
)
from dialex.parser.parsing_result import ParsingError, ParsingResult
from dialex.style import NamingPolicy

_KIND_BY_TYPE: dict[Any, OptionValueType] = {
    bool: OptionValueType.BOOLEAN,
    list: OptionValueType.LIST,
    dict: OptionValueType.DICTIONARY,
}


class CommandObjectParser:
    """
    Declares the options and positional slots of one command and binds parsed
    values to them.

    Attributes:
        name (str): Name used in error messages.
        command (str | None): Command/verb name used by `CommandRunner.add_command`.
        help_text (str): Description of the command.
        parsing_options (ParsingOptions | None): Used when `parse` is given raw arguments.
    """

    def __init__(
        self,
        name: str = "",
        command: str | None = None,
        help_text: str = "",
        parsing_options: ParsingOptions | None = None,
    ) -> None:
        self.name = name or command or "command"
        self.command = command
        self.help_text = help_text
        self.parsing_options = parsing_options
        self._options: list[OptionArgument] = []
        self._positionals: list[PositionalArgument] = []
        self._dests: set[str] = set()
        self._long_names: NamingResolver[OptionArgument] = NamingResolver()
        self._assigned: dict[str, AssignedValues] = {}

    @property
    def options(self) -> tuple[OptionArgument, ...]:
        return tuple(self._options)

    @property
    def positionals(self) -> tuple[PositionalArgument, ...]:
        return tuple(self._positionals)

    def _get_dest(self, long_name: str | None, short_names: Sequence[str], dest: str | None) -> str:
        if not dest:
            source = long_name or (short_names[0] if short_names else "")
            dest = make_kebab_case(source).replace("-", "_")
        if not dest or not dest.replace("_", "").isalnum():
            raise CommandArgumentError(
                "dest must be a valid identifier (letters, digits, and underscores only)"
            )
        if dest[0].isdigit():
            raise CommandArgumentError("dest must not start with a digit")
        if dest in self._dests:
            raise CommandArgumentError(f"Destination '{dest}' is already defined.")
        return dest

    def _resolve_kind(
        self, kind: OptionValueType | str | None, type: Any
    ) -> OptionValueType:
        if kind is None:
            return _KIND_BY_TYPE.get(type, OptionValueType.NORMAL)
        try:
            value_type = OptionValueType(kind)
        except ValueError as error:
            raise CommandArgumentError(str(error)) from error
        if value_type is OptionValueType.NOT_EXIST:
            raise CommandArgumentError("An option cannot be declared as not_exist.")
        return value_type

    def _validate_names(self, long_name: str | None, short_names: Sequence[str]) -> None:
        if not long_name and not short_names:
            raise CommandArgumentError("An option needs a long name or a short name.")
        for name in (long_name, *short_names):
            if name is None:
                continue
            if not isinstance(name, str) or not name:
                raise CommandArgumentError(f"Option name {name!r} must be a non-empty string.")
            if name[0] in "-/":
                raise CommandArgumentError(
                    f"Option name '{name}' must be declared without a prefix."
                )
        for option in self._options:
            if long_name and option.long_name and names_equal(
                option.long_name, long_name, False
            ):
                raise CommandArgumentError(f"Option '{long_name}' is already defined.")
            for short_name in short_names:
                if short_name in option.short_names:
                    raise CommandArgumentError(
                        f"Short option '{short_name}' is already defined."
                    )

    def add_option(
        self,
        long_name: str | None = None,
        short_name: str | Sequence[str] | None = None,
        *,
        dest: str | None = None,
        kind: OptionValueType | str | None = None,
        type: Callable[[str], Any] | Any = str,
        default: Any = None,
        required: bool = False,
        case_sensitive: bool | None = None,
        help: str = "",
    ) -> OptionArgument:
        """
        Declare a named option.

        Args:
            long_name: Long name without prefix, matched under the naming policy.
            short_name: One short name or a sequence of short aliases.
            dest: Result key. Defaults to the snake_case form of the first name.
            kind: Value shape. Inferred from `type` when omitted.
            type: Converter for each raw value. `bool`, `list` and `dict` select the
                matching kind and convert items as strings.
            default: Value used when the option is absent.
            required: Raise `RequiredPropertyNotAssignedError` when absent.
            case_sensitive: Override the style's case sensitivity for this option.
            help: Help text.
        """
        if short_name is None:
            short_names: tuple[str, ...] = ()
        elif isinstance(short_name, str):
            short_names = (short_name,)
        else:
            short_names = tuple(short_name)
        self._validate_names(long_name, short_names)
        value_type = self._resolve_kind(kind, type)
        if type in (bool, list, dict):
            type = str
        if not callable(type):
            raise CommandArgumentError(f"type for option {long_name!r} must be callable")
        dest = self._get_dest(long_name, short_names, dest)

        option = OptionArgument(
            dest=dest,
            long_name=long_name,
            short_names=short_names,
            value_type=value_type,
            type=type,
            default=default,
            required=required,
            case_sensitive=case_sensitive,
            help=help,
            property_index=len(self._options),
        )
        self._options.append(option)
        self._dests.add(dest)
        if long_name:
            self._long_names.add(long_name, option, case_sensitive)
        return option

    def add_value(
        self,
        dest: str,
        index: int | None = None,
        *,
        length: int | None = 1,
        type: Callable[[str], Any] = str,
        default: Any = None,
        required: bool = False,
        help: str = "",
    ) -> PositionalArgument:
        """
        Declare a positional slot covering `[index, index + length)`.

        `index` defaults to the first position after the previous slot, and a
        `length` of None takes all remaining positional values.
        """
        if self._positionals and self._positionals[-1].length is None:
            raise CommandArgumentError(
                "No positional slot can follow one that takes all remaining values."
            )
        if index is None:
            index = 0
            if self._positionals:
                last = self._positionals[-1]
                index = last.index + (last.length or 0)
        if index < 0:
            raise CommandArgumentError("index must be a non-negative integer")
        if length is not None and length < 1:
            raise CommandArgumentError("length must be a positive integer or None")
        if any(
            positional.covers(index) or (length is None and positional.index >= index)
            for positional in self._positionals
        ):
            raise CommandArgumentError(f"Positional index {index} is already covered.")
        if not callable(type):
            raise CommandArgumentError(f"type for positional '{dest}' must be callable")
        dest = self._get_dest(dest, (), dest)

        positional = PositionalArgument(
            dest=dest,
            index=index,
            length=length,
            type=type,
            default=default,
            required=required,
            help=help,
            property_index=len(self._positionals),
        )
        self._positionals.append(positional)
        self._dests.add(dest)
        return positional

    def get_argument(self, dest: str) -> OptionArgument | PositionalArgument | None:
        for argument in (*self._options, *self._positionals):
            if argument.dest == dest:
                return argument
        return None

    def match_long_option(
        self, name: str, case_sensitive: bool, naming_policy: NamingPolicy
    ) -> OptionValueMatch:
        option = self._long_names.resolve(name, case_sensitive, naming_policy)
        if option is None:
            return OptionValueMatch.NOT_MATCH
        return OptionValueMatch(option.dest, option.property_index, option.value_type)

    def match_short_option(self, name: str, case_sensitive: bool) -> OptionValueMatch:
        for option in self._options:
            sensitive = (
                case_sensitive if option.case_sensitive is None else option.case_sensitive
            )
            if any(names_equal(short, name, sensitive) for short in option.short_names):
                return OptionValueMatch(
                    option.dest, option.property_index, option.value_type
                )
        return OptionValueMatch.NOT_MATCH

    def match_positional_argument(
        self, value: str, index: int
    ) -> PositionalArgumentValueMatch:
        for positional in self._positionals:
            if positional.covers(index):
                return PositionalArgumentValueMatch(
                    positional.dest,
                    positional.property_index,
                    PositionalArgumentValueType.NORMAL,
                )
        return PositionalArgumentValueMatch.NOT_MATCH

    def assign_property_value(
        self, property_name: str, property_index: int, key: str | None, value: str
    ) -> None:
        assigned = self._assigned.setdefault(property_name, AssignedValues())
        argument = self.get_argument(property_name)
        if key is not None:
            assigned.pairs.pop(key, None)
            assigned.pairs[key] = value
        elif isinstance(argument, OptionArgument) and (
            argument.value_type is OptionValueType.LIST
        ):
            assigned.values.append(value)
        elif isinstance(argument, PositionalArgument) and argument.is_multiple:
            assigned.values.append(value)
        else:
            assigned.values[:] = [value]

    def parse_result(
        self, arguments: CommandLine | Sequence[str] | str, command_count: int = 0
    ) -> ParsingResult:
        """Tokenize `arguments` into this parser without raising on failure."""
        if not isinstance(arguments, CommandLine):
            arguments = CommandLine.parse(arguments, self.parsing_options)
        self._assigned = {}
        parser = CommandLineParser(arguments, self.name, self, command_count)
        return parser.parse()

    def parse(
        self, arguments: CommandLine | Sequence[str] | str, command_count: int = 0
    ) -> dict[str, Any]:
        """
        Parse `arguments` and return a dictionary keyed by each declaration's dest.

        Raises:
            CommandLineParseError: If tokenizing fails or a value cannot be converted.
            RequiredPropertyNotAssignedError: If a required declaration is absent.
        """
        self.parse_result(arguments, command_count).throw_if_error()
        return self._materialize()

    def _convert(self, dest: str, converter: Callable[[str], Any], value: str) -> Any:
        try:
            return converter(value)
        except (TypeError, ValueError) as error:
            raise CommandLineParseError(
                f"Invalid value for '{dest}': {value!r} ({error})",
                ParsingError.OPTIONAL_ARGUMENT_PARSE_ERROR,
            ) from error

    def _materialize_option(self, option: OptionArgument) -> Any:
        assigned = self._assigned.get(option.dest)
        if assigned is None or not assigned.assigned:
            if option.required:
                raise RequiredPropertyNotAssignedError(
                    f"Option '{option.long_name or option.short_names[0]}' is required "
                    f"by '{self.name}'.",
                    option.dest,
                )
            if option.default is not None:
                return option.default
            return option.empty_value()

        value_type = option.value_type
        if value_type is OptionValueType.BOOLEAN:
            return assigned.values[-1] == "true"
        if value_type is OptionValueType.LIST:
            return [self._convert(option.dest, option.type, item) for item in assigned.values]
        if value_type is OptionValueType.DICTIONARY:
            return {
                key: self._convert(option.dest, option.type, item)
                for key, item in assigned.pairs.items()
            }
        return self._convert(option.dest, option.type, assigned.values[-1])

    def _materialize_positional(self, positional: PositionalArgument) -> Any:
        assigned = self._assigned.get(positional.dest)
        if assigned is None or not assigned.assigned:
            if positional.required:
                raise RequiredPropertyNotAssignedError(
                    f"Positional argument '{positional.dest}' is required by "
                    f"'{self.name}'.",
                    positional.dest,
                )
            if positional.default is not None:
                return positional.default
            return positional.empty_value()
        if positional.is_multiple:
            return [
                self._convert(positional.dest, positional.type, item)
                for item in assigned.values
            ]
        return self._convert(positional.dest, positional.type, assigned.values[-1])

    def _materialize(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for positional in self._positionals:
            values[positional.dest] = self._materialize_positional(positional)
        for option in self._options:
            values[option.dest] = self._materialize_option(option)
        return values

    def __str__(self) -> str:
        required = sum(
            1 for argument in (*self._options, *self._positionals) if argument.required
        )
        return (
            f"CommandObjectParser(name={self.name!r}, options={len(self._options)}, "
            f"positionals={len(self._positionals)}, required={required})"
        )
