"""
Dialex Command-Line Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command_line import CommandLine
from .command_object import CommandObjectParser
from .command_runner import CommandRunner
from .exceptions import CommandLineParseError, DialexError
from .options import ParsingOptions
from .parser.parsing_result import ParsingError, ParsingResult
from .separators import SeparatorSet
from .style import NamingPolicy, OptionPrefix, StyleProfile

logger = logging.getLogger("dialex")


__all__ = [
    "CommandLine",
    "CommandLineParseError",
    "CommandObjectParser",
    "CommandRunner",
    "DialexError",
    "NamingPolicy",
    "OptionPrefix",
    "ParsingError",
    "ParsingOptions",
    "ParsingResult",
    "SeparatorSet",
    "StyleProfile",
]
