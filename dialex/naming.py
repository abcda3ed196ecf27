# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Naming helpers for converting identifiers between kebab-case and
PascalCase/camelCase, and the `NamingResolver` that matches user-typed option
names against declared names under a `NamingPolicy`.

Conversion rules:
    - `make_kebab_case` inserts `-` before each internal uppercase letter that
      does not already follow `-`, turns every other non-alphanumeric run into
      a single `-`, and lowercases everything. It is idempotent.
    - `make_pascal_case` splits on non-alphanumeric characters and uppercases
      the first letter of every word.

Resolution order, applied across all declared names before moving on:
    1. The raw declared spelling, with the configured case sensitivity.
    2. The raw declared spelling with the opposite case sensitivity
       (Ordinal policy only).
    3. The spellings produced by the naming policy.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

from dialex.style import NamingPolicy

T = TypeVar("T")


def make_kebab_case(name: str) -> str:
    """Convert `name` to kebab-case.

    Example:
        >>> make_kebab_case("OutputDirectory")
        'output-directory'
    """
    builder: list[str] = []
    pending_separator = False
    for char in name:
        if not char.isalnum():
            if builder:
                pending_separator = True
            continue
        if builder and (pending_separator or char.isupper()):
            builder.append("-")
        builder.append(char.lower())
        pending_separator = False
    return "".join(builder)


def make_pascal_case(name: str) -> str:
    """Convert `name` to PascalCase.

    Example:
        >>> make_pascal_case("output-directory")
        'OutputDirectory'
    """
    builder: list[str] = []
    word_start = True
    for char in name:
        if not char.isalnum():
            word_start = True
            continue
        if not builder and char.isdigit():
            continue
        builder.append(char.upper() if word_start else char)
        word_start = False
    return "".join(builder)


def is_kebab_case(name: str) -> bool:
    return bool(name) and make_kebab_case(name) == name


def is_pascal_case(name: str) -> bool:
    return bool(name) and make_pascal_case(name) == name


def naming_candidates(declared: str, policy: NamingPolicy) -> list[str]:
    """Return the ordered, de-duplicated spellings accepted for `declared`."""
    if policy is NamingPolicy.PASCAL_CASE:
        candidates = [make_pascal_case(declared), make_kebab_case(declared)]
    elif policy is NamingPolicy.BOTH:
        candidates = [declared, make_kebab_case(declared), make_pascal_case(declared)]
    else:
        candidates = [declared]
    return list(dict.fromkeys(candidate for candidate in candidates if candidate))


def names_equal(left: str, right: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return left == right
    return left.casefold() == right.casefold()


@dataclass(frozen=True)
class NamedCandidate(Generic[T]):
    """A declared name and the item it resolves to.

    `case_sensitive` overrides the configured sensitivity for this name when set.
    """

    declared: str
    item: T
    case_sensitive: bool | None = None


class NamingResolver(Generic[T]):
    """Resolves user-typed names against declared names under a naming policy."""

    def __init__(self, candidates: Iterable[NamedCandidate[T]] = ()) -> None:
        self._candidates: list[NamedCandidate[T]] = list(candidates)

    def add(self, declared: str, item: T, case_sensitive: bool | None = None) -> None:
        self._candidates.append(NamedCandidate(declared, item, case_sensitive))

    @property
    def candidates(self) -> Sequence[NamedCandidate[T]]:
        return tuple(self._candidates)

    def resolve(
        self, name: str, case_sensitive: bool, policy: NamingPolicy
    ) -> T | None:
        """Return the item whose declared name matches `name`, or None."""
        for candidate in self._candidates:
            sensitive = _sensitivity(candidate, case_sensitive)
            if names_equal(candidate.declared, name, sensitive):
                return candidate.item

        if policy is NamingPolicy.ORDINAL:
            for candidate in self._candidates:
                sensitive = not _sensitivity(candidate, case_sensitive)
                if names_equal(candidate.declared, name, sensitive):
                    return candidate.item
            return None

        for candidate in self._candidates:
            sensitive = _sensitivity(candidate, case_sensitive)
            for spelling in naming_candidates(candidate.declared, policy):
                if names_equal(spelling, name, sensitive):
                    return candidate.item
        return None


def _sensitivity(candidate: NamedCandidate, default: bool) -> bool:
    if candidate.case_sensitive is None:
        return default
    return candidate.case_sensitive
