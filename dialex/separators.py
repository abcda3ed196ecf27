# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SeparatorSet`, the small immutable set of characters used by a
`StyleProfile` to split an option from its inline value (`--name=value`) and to
split a collection value into items (`a,b;c`).

A separator set holds at most four distinct, non-NUL characters and keeps the
order in which they were declared. Membership tests go through a frozenset so
`contains_any` stays linear in the tested text only.

Example:
    >>> separators = SeparatorSet(":", "=")
    >>> separators.index_of_any("name=value")
    4
"""
from __future__ import annotations

from typing import Iterable, Iterator

from dialex.exceptions import StyleProfileError

MAX_SEPARATORS = 4


class SeparatorSet:
    """An ordered, immutable set of up to four separator characters."""

    __slots__ = ("_chars", "_lookup")

    def __init__(self, *chars: str) -> None:
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise StyleProfileError(
                    f"Separator must be a single character, got {char!r}."
                )
            if char == "\0":
                raise StyleProfileError("Separator cannot be the NUL character.")
        if len(set(chars)) != len(chars):
            raise StyleProfileError(f"Duplicate separators in {chars!r}.")
        if len(chars) > MAX_SEPARATORS:
            raise StyleProfileError(
                f"A separator set holds at most {MAX_SEPARATORS} characters, "
                f"got {len(chars)}."
            )
        self._chars: tuple[str, ...] = chars
        self._lookup: frozenset[str] = frozenset(chars)

    @classmethod
    def from_iterable(cls, chars: Iterable[str] | str) -> SeparatorSet:
        if isinstance(chars, SeparatorSet):
            return chars
        return cls(*chars)

    @property
    def chars(self) -> tuple[str, ...]:
        return self._chars

    def contains_any(self, text: str) -> bool:
        """Return True if any character of `text` is a separator."""
        lookup = self._lookup
        return any(char in lookup for char in text)

    def index_of_any(self, text: str, start: int = 0) -> int:
        """Return the index of the first separator in `text`, or -1."""
        lookup = self._lookup
        for index in range(start, len(text)):
            if text[index] in lookup:
                return index
        return -1

    def __contains__(self, char: object) -> bool:
        return char in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeparatorSet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        inner = ", ".join(repr(char) for char in self._chars)
        return f"SeparatorSet({inner})"


EMPTY_SEPARATORS = SeparatorSet()
