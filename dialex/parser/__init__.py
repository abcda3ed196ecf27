"""
Dialex Command-Line Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import OptionArgument, PositionalArgument
from .command_line_parser import CommandLineParser
from .parser_types import (
    ArgumentType,
    OptionValueMatch,
    OptionValueType,
    ParseToken,
    PositionalArgumentValueMatch,
    PositionalArgumentValueType,
)
from .parsing_result import ParsingError, ParsingResult
from .values import parse_boolean, split_collection, split_dictionary

__all__ = [
    "ArgumentType",
    "CommandLineParser",
    "OptionArgument",
    "OptionValueMatch",
    "OptionValueType",
    "ParseToken",
    "ParsingError",
    "ParsingResult",
    "PositionalArgument",
    "PositionalArgumentValueMatch",
    "PositionalArgumentValueType",
    "parse_boolean",
    "split_collection",
    "split_dictionary",
]
