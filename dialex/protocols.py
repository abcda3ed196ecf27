# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""protocols.py"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from dialex.parser.parser_types import OptionValueMatch, PositionalArgumentValueMatch
from dialex.style import NamingPolicy


@runtime_checkable
class ParserCallbacks(Protocol):
    """The four lookups the tokenizer needs from whoever owns the values."""

    def match_long_option(
        self, name: str, case_sensitive: bool, naming_policy: NamingPolicy
    ) -> OptionValueMatch: ...

    def match_short_option(self, name: str, case_sensitive: bool) -> OptionValueMatch: ...

    def match_positional_argument(
        self, value: str, index: int
    ) -> PositionalArgumentValueMatch: ...

    def assign_property_value(
        self, property_name: str, property_index: int, key: str | None, value: str
    ) -> None: ...
