# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the closed error taxonomy of the tokenizer (`ParsingError`) and the
structured `ParsingResult` it returns.

A result is either a success (`ParsingError.NONE`, no message) or a failure
carrying both an error kind and a message. Fatal failures stop the tokenizer
immediately. Per-value failures are accumulated with `combine`:

    success.combine(failure)   → failure
    failure.combine(success)   → failure
    failure1.combine(failure2) → failure2

Callers decide what to do with a failure; `throw_if_error` converts it into a
`CommandLineParseError` whose `reason` is the taxonomy entry.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from dialex.exceptions import CommandLineParseError


class ParsingError(Enum):
    """The closed set of parse failures."""

    NONE = "none"
    OPTIONAL_ARGUMENT_NOT_FOUND = "optional_argument_not_found"
    OPTIONAL_ARGUMENT_SEPARATOR_NOT_SUPPORTED = "optional_argument_separator_not_supported"
    MULTI_CHAR_SHORT_OPTIONAL_ARGUMENT_NOT_SUPPORTED = (
        "multi_char_short_optional_argument_not_supported"
    )
    ARGUMENT_COMBINATION_IS_NOT_BOOLEAN = "argument_combination_is_not_boolean"
    OPTIONAL_ARGUMENT_PARSE_ERROR = "optional_argument_parse_error"
    POSITIONAL_ARGUMENT_NOT_FOUND = "positional_argument_not_found"
    BOOLEAN_VALUE_PARSE_ERROR = "boolean_value_parse_error"
    DICTIONARY_VALUE_PARSE_ERROR = "dictionary_value_parse_error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsingResult:
    """The outcome of one parse call."""

    SUCCESS: ClassVar[ParsingResult]

    error: ParsingError = ParsingError.NONE
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.error is ParsingError.NONE) != (self.message is None):
            raise ValueError(
                "A parsing result has a message if and only if it is a failure."
            )

    @property
    def is_success(self) -> bool:
        return self.error is ParsingError.NONE

    def combine(self, other: ParsingResult) -> ParsingResult:
        """Accumulate a per-value result; the latest failure wins."""
        if not other.is_success:
            return other
        return self

    def throw_if_error(self) -> None:
        if not self.is_success:
            raise CommandLineParseError(self.message or "", self.error)

    def __bool__(self) -> bool:
        return self.is_success

    def __str__(self) -> str:
        if self.is_success:
            return "Success"
        return f"{self.error}: {self.message}"

    @classmethod
    def failure(cls, error: ParsingError, message: str) -> ParsingResult:
        return cls(error=error, message=message)

    @classmethod
    def option_not_found(
        cls, location: str, command_object_name: str, option_name: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.OPTIONAL_ARGUMENT_NOT_FOUND,
            f"{location} does not match any option of {command_object_name!r}: "
            f"{option_name!r}.",
        )

    @classmethod
    def option_separator_not_supported(
        cls, location: str, option_name: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.OPTIONAL_ARGUMENT_SEPARATOR_NOT_SUPPORTED,
            f"{location} contains an option name with an unsupported separator: "
            f"{option_name!r}.",
        )

    @classmethod
    def multi_char_short_option_not_supported(
        cls, location: str, option_name: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.MULTI_CHAR_SHORT_OPTIONAL_ARGUMENT_NOT_SUPPORTED,
            f"{location} uses a multi-character short option, which this style "
            f"does not support: {option_name!r}.",
        )

    @classmethod
    def combination_is_not_boolean(
        cls, location: str, combination: str, option_name: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.ARGUMENT_COMBINATION_IS_NOT_BOOLEAN,
            f"{location} combines short options {combination!r}, but {option_name!r} "
            "is not a boolean option.",
        )

    @classmethod
    def option_parse_error(cls, location: str, detail: str) -> ParsingResult:
        return cls.failure(
            ParsingError.OPTIONAL_ARGUMENT_PARSE_ERROR,
            f"{location} has a malformed option: {detail}",
        )

    @classmethod
    def positional_not_found(
        cls, location: str, command_object_name: str, value: str, index: int
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.POSITIONAL_ARGUMENT_NOT_FOUND,
            f"{location} has no positional slot at index {index} in "
            f"{command_object_name!r} for {value!r}.",
        )

    @classmethod
    def boolean_value_parse_error(
        cls, location: str, option_name: str, value: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.BOOLEAN_VALUE_PARSE_ERROR,
            f"{location} assigns {value!r} to boolean option {option_name!r}; "
            "expected true/false, yes/no, on/off or 1/0.",
        )

    @classmethod
    def dictionary_value_parse_error(
        cls, location: str, option_name: str, detail: str
    ) -> ParsingResult:
        return cls.failure(
            ParsingError.DICTIONARY_VALUE_PARSE_ERROR,
            f"{location} has a malformed dictionary value for {option_name!r}: "
            f"{detail}",
        )


ParsingResult.SUCCESS = ParsingResult()
