# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token and match types shared by the tokenizer and the binding layer.

Contents:
- `ArgumentType`: The classification tag given to each input argument.
- `ParseToken`: One classified argument with its option name and value slices.
- `OptionValueType` / `PositionalArgumentValueType`: The value shape reported by
  the binding layer for a matched option or positional slot.
- `OptionValueMatch` / `PositionalArgumentValueMatch`: The binding layer's answer
  to "does this exist, where does it go, and what shape is its value".

`OptionValueType` accepts aliases so it can be given as a string in declarations:

    OptionValueType("bool") → OptionValueType.BOOLEAN
    OptionValueType("dict") → OptionValueType.DICTIONARY
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ArgumentType(Enum):
    """Classification of one input argument relative to the previous one."""

    START = "start"
    COMMAND = "command"
    POSITIONAL_ARGUMENT = "positional_argument"
    LONG_OPTION = "long_option"
    LONG_OPTION_WITH_VALUE = "long_option_with_value"
    SHORT_OPTION = "short_option"
    SHORT_OPTION_WITH_VALUE = "short_option_with_value"
    OPTION = "option"
    OPTION_WITH_VALUE = "option_with_value"
    ERROR_OPTION = "error_option"
    MULTI_SHORT_OPTIONS = "multi_short_options"
    OPTION_VALUE = "option_value"
    POSITIONAL_ARGUMENT_SEPARATOR = "positional_argument_separator"
    POST_POSITIONAL_ARGUMENT = "post_positional_argument"

    @property
    def is_option(self) -> bool:
        return self in _OPTION_TYPES

    @property
    def has_inline_value(self) -> bool:
        return self in _INLINE_VALUE_TYPES

    @property
    def is_positional(self) -> bool:
        return self in (
            ArgumentType.POSITIONAL_ARGUMENT,
            ArgumentType.POST_POSITIONAL_ARGUMENT,
        )

    def __str__(self) -> str:
        return self.value


_INLINE_VALUE_TYPES = frozenset(
    {
        ArgumentType.LONG_OPTION_WITH_VALUE,
        ArgumentType.SHORT_OPTION_WITH_VALUE,
        ArgumentType.OPTION_WITH_VALUE,
    }
)

_OPTION_TYPES = _INLINE_VALUE_TYPES | {
    ArgumentType.LONG_OPTION,
    ArgumentType.SHORT_OPTION,
    ArgumentType.OPTION,
    ArgumentType.MULTI_SHORT_OPTIONS,
}


@dataclass(frozen=True)
class ParseToken:
    """A classified input argument. Produced fresh for every argument."""

    type: ArgumentType
    option_name: str | None = None
    value: str | None = None

    def __str__(self) -> str:
        parts = [str(self.type)]
        if self.option_name is not None:
            parts.append(f"name={self.option_name!r}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return f"ParseToken({', '.join(parts)})"


class OptionValueType(Enum):
    """
    The value shape of an option.

    Members:
        NORMAL: A single string value.
        BOOLEAN: A flag; present means true unless an explicit literal follows.
        LIST: Values are split on the collection separators and appended.
        DICTIONARY: Items are split on the collection separators, then on `=`.
        NOT_EXIST: The option is not declared.
    """

    NORMAL = "normal"
    BOOLEAN = "boolean"
    LIST = "list"
    DICTIONARY = "dictionary"
    NOT_EXIST = "not_exist"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "normal",
            "string": "normal",
            "store": "normal",
            "bool": "boolean",
            "flag": "boolean",
            "array": "list",
            "append": "list",
            "dict": "dictionary",
            "map": "dictionary",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_collection(self) -> bool:
        return self in (OptionValueType.LIST, OptionValueType.DICTIONARY)

    def __str__(self) -> str:
        return self.value


class PositionalArgumentValueType(Enum):
    NORMAL = "normal"
    NOT_EXIST = "not_exist"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionValueMatch:
    """Where a matched option's values go and what shape they have."""

    NOT_MATCH: ClassVar[OptionValueMatch]

    property_name: str
    property_index: int
    value_type: OptionValueType

    @property
    def exists(self) -> bool:
        return self.value_type is not OptionValueType.NOT_EXIST


@dataclass(frozen=True)
class PositionalArgumentValueMatch:
    """Where a matched positional value goes."""

    NOT_MATCH: ClassVar[PositionalArgumentValueMatch]

    property_name: str
    property_index: int
    value_type: PositionalArgumentValueType

    @property
    def exists(self) -> bool:
        return self.value_type is not PositionalArgumentValueType.NOT_EXIST


OptionValueMatch.NOT_MATCH = OptionValueMatch("", -1, OptionValueType.NOT_EXIST)
PositionalArgumentValueMatch.NOT_MATCH = PositionalArgumentValueMatch(
    "", -1, PositionalArgumentValueType.NOT_EXIST
)
