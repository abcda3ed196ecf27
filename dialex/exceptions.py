# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Dialex command-line engine.

The tokenizer itself never raises for user input: it reports a structured
`ParsingResult`. These exceptions appear at the edges, when a result is
converted into an error (`ParsingResult.throw_if_error`), when a declaration
is invalid, or when the dispatcher cannot pick a handler.

All exceptions inherit from `DialexError`, the base exception for the package.

Exception Hierarchy:
- DialexError
    ├── StyleProfileError
    ├── CommandArgumentError
    ├── CommandLineParseError
    │   └── RequiredPropertyNotAssignedError
    ├── CommandNameAmbiguityError
    └── CommandNameNotFoundError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dialex.parser.parsing_result import ParsingError


class DialexError(Exception):
    """Base exception for the Dialex engine."""


class StyleProfileError(DialexError, ValueError):
    """Exception raised when a style profile or separator set is invalid."""


class CommandArgumentError(DialexError):
    """Exception raised when an option or positional declaration is invalid."""


class CommandLineParseError(DialexError):
    """Exception raised when the command line cannot be parsed.

    Attributes:
        reason (ParsingError | None): The taxonomy entry describing the failure,
            or None when the failure happened after tokenizing.
    """

    def __init__(self, message: str, reason: ParsingError | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class RequiredPropertyNotAssignedError(CommandLineParseError):
    """Exception raised when a required option or positional was never assigned."""

    def __init__(self, message: str, property_name: str) -> None:
        super().__init__(message)
        self.property_name = property_name


class CommandNameAmbiguityError(DialexError):
    """Exception raised when two handlers resolve to the same command name."""


class CommandNameNotFoundError(DialexError):
    """Exception raised when no handler matches the command line."""
