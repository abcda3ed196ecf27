"""
Dialex Command-Line Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

`python -m dialex` tokenizes a sample command line under a chosen style and
renders how every argument was classified.

    python -m dialex --style gnu --flag v -- --count 3 -v
    python -m dialex --scheme app -- "app://open/report.pdf?readonly=true"
"""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from dialex.command_line import CommandLine
from dialex.config import find_config, load_parsing_options
from dialex.console import console
from dialex.exceptions import DialexError
from dialex.naming import names_equal
from dialex.options import ParsingOptions
from dialex.parser.command_line_parser import CommandLineParser
from dialex.parser.parser_types import (
    ArgumentType,
    OptionValueMatch,
    OptionValueType,
    PositionalArgumentValueMatch,
    PositionalArgumentValueType,
)
from dialex.style import NamingPolicy, StyleProfile
from dialex.utils import setup_logging

_TOKEN_STYLES = {
    ArgumentType.ERROR_OPTION: "token.error",
    ArgumentType.OPTION_VALUE: "token.value",
    ArgumentType.POSITIONAL_ARGUMENT: "token.positional",
    ArgumentType.POST_POSITIONAL_ARGUMENT: "token.positional",
    ArgumentType.POSITIONAL_ARGUMENT_SEPARATOR: "token.meta",
    ArgumentType.COMMAND: "token.meta",
}


class InspectorCallbacks:
    """Accepts every option and positional, recording what was assigned.

    Options listed as flags, lists or dictionaries get that value shape; every
    other option is Normal.
    """

    def __init__(
        self,
        flags: Sequence[str] = (),
        lists: Sequence[str] = (),
        dictionaries: Sequence[str] = (),
    ) -> None:
        self.kinds: list[tuple[str, OptionValueType]] = [
            *((name, OptionValueType.BOOLEAN) for name in flags),
            *((name, OptionValueType.LIST) for name in lists),
            *((name, OptionValueType.DICTIONARY) for name in dictionaries),
        ]
        self.assignments: list[tuple[str, str | None, str]] = []

    def _match(self, name: str, case_sensitive: bool) -> OptionValueMatch:
        for index, (declared, kind) in enumerate(self.kinds):
            if names_equal(declared, name, case_sensitive):
                return OptionValueMatch(name, index, kind)
        return OptionValueMatch(name, -1, OptionValueType.NORMAL)

    def match_long_option(
        self, name: str, case_sensitive: bool, naming_policy: NamingPolicy
    ) -> OptionValueMatch:
        return self._match(name, case_sensitive)

    def match_short_option(self, name: str, case_sensitive: bool) -> OptionValueMatch:
        return self._match(name, case_sensitive)

    def match_positional_argument(
        self, value: str, index: int
    ) -> PositionalArgumentValueMatch:
        return PositionalArgumentValueMatch(
            f"#{index}", index, PositionalArgumentValueType.NORMAL
        )

    def assign_property_value(
        self, property_name: str, property_index: int, key: str | None, value: str
    ) -> None:
        self.assignments.append((property_name, key, value))


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="dialex",
        description="Inspect how Dialex tokenizes a command line.",
    )
    parser.add_argument("--style", help="Canonical style name (default: flexible).")
    parser.add_argument(
        "--scheme", action="append", default=[], help="URL scheme to normalize."
    )
    parser.add_argument("--config", type=Path, help="Path to a dialex YAML/TOML file.")
    parser.add_argument(
        "--flag", action="append", default=[], help="Declare a boolean option name."
    )
    parser.add_argument(
        "--list", action="append", default=[], help="Declare a list option name."
    )
    parser.add_argument(
        "--dict", action="append", default=[], help="Declare a dictionary option name."
    )
    parser.add_argument(
        "--commands", type=int, default=0, help="Number of leading command words."
    )
    parser.add_argument(
        "--ignore-unknown",
        action="store_true",
        help="Ignore unknown positional arguments.",
    )
    parser.add_argument(
        "--list-styles", action="store_true", help="List the canonical styles and exit."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("arguments", nargs="*", help="The command line to inspect.")
    return parser


def build_parsing_options(args: Namespace) -> ParsingOptions:
    overrides: dict[str, Any] = {}
    if args.style:
        overrides["style"] = args.style
    if args.scheme:
        overrides["scheme_names"] = tuple(args.scheme)
    if args.ignore_unknown:
        overrides["ignore_unknown_positional_arguments"] = True

    config_path = args.config or find_config()
    if config_path:
        return load_parsing_options(config_path, **overrides)
    return ParsingOptions(**overrides)


def render_styles() -> Table:
    table = Table(title="Dialex styles")
    for column in ("Style", "Prefix", "Case", "Long", "Short", "Combine", "Multi-char",
                   "Separators", "Naming", "Magic"):
        table.add_column(column)
    for profile in StyleProfile.canonical().values():
        table.add_row(
            profile.name,
            str(profile.option_prefix),
            "sensitive" if profile.case_sensitive else "insensitive",
            str(profile.supports_long_option),
            str(profile.supports_short_option),
            str(profile.supports_short_option_combination),
            str(profile.supports_multi_char_short_option),
            str(profile.option_value_separators) or "(space)",
            str(profile.naming_policy),
            f"0x{profile.magic_number:04X}",
        )
    return table


def render_tokens(command_line: CommandLine, parser: CommandLineParser) -> Table:
    table = Table(title=escape(f"{command_line.style.name}: {command_line}"))
    table.add_column("#", justify="right")
    table.add_column("Argument")
    table.add_column("Token")
    table.add_column("Option")
    table.add_column("Value")
    for index, token in parser.tokens:
        style = _TOKEN_STYLES.get(token.type, "token.option")
        table.add_row(
            str(index),
            escape(command_line.arguments[index]),
            f"[{style}]{token.type}[/]",
            escape(token.option_name or ""),
            escape(token.value) if token.value is not None else "",
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    if args.debug:
        setup_logging(log_filename="", console_log_level=logging.DEBUG)

    if args.list_styles:
        console.print(render_styles())
        return 0

    try:
        parsing_options = build_parsing_options(args)
    except (DialexError, ValueError) as error:
        console.print(f"[token.error]❌ {escape(str(error))}[/]")
        return 2

    command_line = CommandLine.parse(args.arguments, parsing_options)
    callbacks = InspectorCallbacks(args.flag, args.list, args.dict)
    parser = CommandLineParser(command_line, "inspector", callbacks, args.commands)
    result = parser.parse()

    console.print(render_tokens(command_line, parser))
    for property_name, key, value in callbacks.assignments:
        target = f"{property_name}[{key}]" if key is not None else property_name
        console.print(f"  {escape(target)} = [token.value]{escape(repr(value))}[/]")
    if not result.is_success:
        console.print(f"[token.error]❌ {escape(str(result))}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
