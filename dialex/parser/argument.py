# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the declarations held by `CommandObjectParser`: `OptionArgument` for
named options and `PositionalArgument` for positional slots.

Declarations carry no prefix characters. The same `OptionArgument` with
`long_name="output-directory"` and `short_names=("o",)` is matched as
`--output-directory`, `-o`, `/OutputDirectory` or `-OutputDirectory` depending
on the active style.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from dialex.parser.parser_types import OptionValueType


@dataclass
class OptionArgument:
    """
    Represents a named option.

    Attributes:
        dest (str): Key of the option in the parsed result.
        long_name (str | None): Declared long name, matched under the naming policy.
        short_names (tuple[str, ...]): Declared short names.
        value_type (OptionValueType): Shape of the option's value.
        type (Callable[[str], Any]): Converter applied to each raw value.
        default (Any): Value used when the option is absent.
        required (bool): True if the option must be given.
        case_sensitive (bool | None): Overrides the style's case sensitivity.
        help (str): Help text for the option.
        property_index (int): Position of the option among all declarations.
    """

    dest: str
    long_name: str | None = None
    short_names: tuple[str, ...] = ()
    value_type: OptionValueType = OptionValueType.NORMAL
    type: Callable[[str], Any] = str
    default: Any = None
    required: bool = False
    case_sensitive: bool | None = None
    help: str = ""
    property_index: int = 0

    @property
    def names(self) -> tuple[str, ...]:
        if self.long_name:
            return (self.long_name, *self.short_names)
        return self.short_names

    def empty_value(self) -> Any:
        """The value of an absent option with no explicit default."""
        if self.value_type is OptionValueType.BOOLEAN:
            return False
        if self.value_type is OptionValueType.LIST:
            return []
        if self.value_type is OptionValueType.DICTIONARY:
            return {}
        return None

    def __str__(self) -> str:
        return (
            f"OptionArgument(dest={self.dest!r}, names={self.names!r}, "
            f"value_type={self.value_type}, required={self.required})"
        )


@dataclass
class PositionalArgument:
    """
    Represents a positional slot covering `[index, index + length)`.

    A `length` of None takes every remaining positional value.
    """

    dest: str
    index: int = 0
    length: int | None = 1
    type: Callable[[str], Any] = str
    default: Any = None
    required: bool = False
    help: str = ""
    property_index: int = 0

    @property
    def is_multiple(self) -> bool:
        return self.length is None or self.length > 1

    def covers(self, position: int) -> bool:
        if position < self.index:
            return False
        return self.length is None or position < self.index + self.length

    def empty_value(self) -> Any:
        return [] if self.is_multiple else None


@dataclass
class AssignedValues:
    """Raw string values collected for one declaration during a parse."""

    values: list[str] = field(default_factory=list)
    pairs: dict[str, str] = field(default_factory=dict)

    @property
    def assigned(self) -> bool:
        return bool(self.values) or bool(self.pairs)
