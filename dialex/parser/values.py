# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value materialization for option values: boolean literals and quote-aware
splitting of list and dictionary values.

`split_collection` is a small state machine. Separators inside a double-quoted
span are literal, `""` is an empty item, and every gap between separators is
an item, so leading and trailing separators yield empty strings:

    split_collection('a,b,"c,d",', SeparatorSet(","))  → ["a", "b", "c,d", ""]
    split_collection("a;;b", SeparatorSet(";"))         → ["a", "", "b"]

Malformed input raises `ValueError`; the tokenizer reports it as a parse result.
"""
from __future__ import annotations

from enum import Enum

from dialex.separators import SeparatorSet

TRUE_LITERALS = frozenset({"true", "yes", "on", "1"})
FALSE_LITERALS = frozenset({"false", "no", "off", "0"})


def parse_boolean(value: str) -> bool | None:
    """Parse a boolean literal, case insensitively.

    The empty string means True. Returns None when `value` is not a literal.
    """
    if value == "":
        return True
    if len(value) <= 4 and value.lower() in TRUE_LITERALS:
        return True
    if len(value) <= 5 and value.lower() in FALSE_LITERALS:
        return False
    return None


class _SplitState(Enum):
    START = "start"
    QUOTE_START = "quote_start"
    QUOTED_VALUE = "quoted_value"
    QUOTED_SEPARATOR = "quoted_separator"
    QUOTE_END = "quote_end"
    VALUE = "value"
    SEPARATOR = "separator"


_QUOTED_STATES = (
    _SplitState.QUOTE_START,
    _SplitState.QUOTED_VALUE,
    _SplitState.QUOTED_SEPARATOR,
)


def split_collection(value: str, separators: SeparatorSet) -> list[str]:
    """Split `value` into items on any of `separators`, honoring double quotes.

    Raises:
        ValueError: On a quote after an unquoted value character, a character
            after a closing quote, or an unterminated quote.
    """
    items: list[str] = []
    current: list[str] = []
    state = _SplitState.START

    for index, char in enumerate(value):
        if state in (_SplitState.START, _SplitState.SEPARATOR):
            if char == '"':
                state = _SplitState.QUOTE_START
            elif char in separators:
                items.append("")
                state = _SplitState.SEPARATOR
            else:
                current.append(char)
                state = _SplitState.VALUE
        elif state is _SplitState.VALUE:
            if char == '"':
                raise ValueError(
                    f"Unexpected quote at position {index} after an unquoted value "
                    f"in {value!r}."
                )
            if char in separators:
                items.append("".join(current))
                current.clear()
                state = _SplitState.SEPARATOR
            else:
                current.append(char)
        elif state in _QUOTED_STATES:
            if char == '"':
                state = _SplitState.QUOTE_END
            elif char in separators:
                current.append(char)
                state = _SplitState.QUOTED_SEPARATOR
            else:
                current.append(char)
                state = _SplitState.QUOTED_VALUE
        elif state is _SplitState.QUOTE_END:
            if char not in separators:
                raise ValueError(
                    f"Unexpected character {char!r} at position {index} after a "
                    f"closing quote in {value!r}."
                )
            items.append("".join(current))
            current.clear()
            state = _SplitState.SEPARATOR

    if state in _QUOTED_STATES:
        raise ValueError(f"Unterminated quote in {value!r}.")
    if state is _SplitState.SEPARATOR:
        items.append("")
    elif state in (_SplitState.VALUE, _SplitState.QUOTE_END):
        items.append("".join(current))
    return items


def split_dictionary(value: str, separators: SeparatorSet) -> dict[str, str]:
    """Split `value` into `key=value` pairs. Duplicate keys keep the last value.

    Raises:
        ValueError: If an item has no `=` or the collection split fails.
    """
    pairs: dict[str, str] = {}
    for item in split_collection(value, separators):
        key, equals, item_value = item.partition("=")
        if not equals:
            raise ValueError(f"Dictionary item {item!r} has no '='.")
        pairs.pop(key, None)
        pairs[key] = item_value
    return pairs
