# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandLine`, the immutable entry point that captures one invocation's
arguments together with the `ParsingOptions` they are parsed under.

`CommandLine.parse` accepts either an argument vector or a single string. A
single string is split with POSIX shell quoting rules. When the invocation is
exactly one `scheme://...` argument for a configured scheme, it is rewritten
into a flat argument vector and parsed with the Url style.

Example:
    >>> command_line = CommandLine.parse(["remote", "add", "--verbose"])
    >>> command_line.possible_command_names
    'remote add'
"""
from __future__ import annotations

import shlex
from typing import TYPE_CHECKING, Sequence

from dialex.options import ParsingOptions
from dialex.style import StyleProfile
from dialex.url import normalize_url_arguments
from dialex.utils import quote_argument

if TYPE_CHECKING:
    from dialex.command_runner import CommandRunner


class CommandLine:
    """An immutable, normalized command line."""

    def __init__(
        self,
        arguments: Sequence[str],
        parsing_options: ParsingOptions | None = None,
        *,
        raw_arguments: Sequence[str] | None = None,
        matched_url_scheme: str | None = None,
    ) -> None:
        self._arguments: tuple[str, ...] = tuple(arguments)
        self._raw_arguments: tuple[str, ...] = tuple(
            self._arguments if raw_arguments is None else raw_arguments
        )
        self._parsing_options = parsing_options or ParsingOptions()
        self._matched_url_scheme = matched_url_scheme

    @classmethod
    def parse(
        cls,
        arguments: Sequence[str] | str,
        parsing_options: ParsingOptions | None = None,
    ) -> CommandLine:
        """Capture `arguments`, splitting a single string and normalizing URLs."""
        parsing_options = parsing_options or ParsingOptions()
        if isinstance(arguments, str):
            arguments = shlex.split(arguments)
        raw_arguments = tuple(arguments)

        normalization = normalize_url_arguments(
            raw_arguments, parsing_options.scheme_names
        )
        if normalization is None:
            return cls(raw_arguments, parsing_options)
        return cls(
            normalization.arguments,
            parsing_options,
            raw_arguments=raw_arguments,
            matched_url_scheme=normalization.scheme,
        )

    @property
    def arguments(self) -> tuple[str, ...]:
        return self._arguments

    @property
    def raw_arguments(self) -> tuple[str, ...]:
        return self._raw_arguments

    @property
    def parsing_options(self) -> ParsingOptions:
        return self._parsing_options

    @property
    def matched_url_scheme(self) -> str | None:
        return self._matched_url_scheme

    @property
    def is_url(self) -> bool:
        return self._matched_url_scheme is not None

    @property
    def style(self) -> StyleProfile:
        if self.is_url:
            return StyleProfile.URL
        return self._parsing_options.style

    @property
    def possible_command_names(self) -> str:
        """The leading arguments before the first option, joined by spaces."""
        prefix = self.style.option_prefix
        names = []
        for argument in self._arguments:
            if prefix.is_option_start(argument):
                break
            names.append(argument)
        return " ".join(names)

    def describe_location(self, index: int | None = None) -> str:
        """Render where in this command line an error happened."""
        if self.is_url:
            location = f"URL {self._raw_arguments[0]!r}"
        else:
            location = f"Command line {str(self)!r}"
        if index is None or not 0 <= index < len(self._arguments):
            return location
        return f"{location} at argument {index} ({self._arguments[index]!r})"

    def to_runner(self) -> CommandRunner:
        from dialex.command_runner import CommandRunner

        return CommandRunner(self)

    def __len__(self) -> int:
        return len(self._arguments)

    def __str__(self) -> str:
        return " ".join(quote_argument(argument) for argument in self._raw_arguments)

    def __repr__(self) -> str:
        return (
            f"CommandLine(arguments={self._arguments!r}, "
            f"style={self.style.name!r}, matched_url_scheme={self._matched_url_scheme!r})"
        )
