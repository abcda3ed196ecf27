# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandRunner`, the dispatcher that selects a handler for a command line
by its leading command/verb words.

Handlers are registered once, before dispatch:

    runner = command_line.to_runner()
    runner.add_handler("remote add", remote_add)
    runner.add_command(build_parser, build)
    runner.add_handler(None, default_handler)
    runner.add_fallback_handler(report_error)
    exit_code = runner.run()

Each registered name is expanded under the style's naming policy, word by word.
Two registrations whose expanded names collide raise `CommandNameAmbiguityError`
immediately. Matching compares the leading words of the command line against
every expanded name, longest first, and only accepts a match that ends at a
word boundary, so `remote add` wins over `remote` and `fooo` never matches `foo`.

The registration table is not synchronized. Populate it from a single thread
before calling `run`.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from dialex.command_line import CommandLine
from dialex.command_object import CommandObjectParser
from dialex.exceptions import (
    CommandArgumentError,
    CommandLineParseError,
    CommandNameAmbiguityError,
    CommandNameNotFoundError,
)
from dialex.logger import logger
from dialex.naming import naming_candidates
from dialex.utils import ensure_async

CommandHandler = Callable[[CommandLine, int], "int | None | Awaitable[int | None]"]
FallbackHandler = Callable[
    [CommandLine, CommandLineParseError], "int | None | Awaitable[int | None]"
]


@dataclass
class CommandRegistration:
    """A registered handler and the spellings its command name resolves to."""

    name: str | None
    handler: CommandHandler
    spellings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def command_count(self) -> int:
        return len(self.name.split()) if self.name else 0


class CommandRunner:
    """Dispatches a `CommandLine` to the most specific registered handler."""

    def __init__(self, command_line: CommandLine) -> None:
        self.command_line = command_line
        self.style = command_line.style
        self._registrations: list[CommandRegistration] = []
        self._default: CommandRegistration | None = None
        self._fallback: FallbackHandler | None = None

    def _fold(self, text: str) -> str:
        return text if self.style.case_sensitive else text.casefold()

    def _expand(self, name: str) -> tuple[str, ...]:
        words = name.split()
        if not words:
            raise CommandArgumentError("A command name cannot be blank.")
        per_word = [naming_candidates(word, self.style.naming_policy) for word in words]
        spellings = []
        for position in range(max(len(variants) for variants in per_word)):
            spellings.append(
                " ".join(
                    variants[position] if position < len(variants) else variants[0]
                    for variants in per_word
                )
            )
        return tuple(dict.fromkeys(spellings))

    def add_handler(
        self, command_name: str | None, handler: CommandHandler
    ) -> CommandRunner:
        """Register `handler` for `command_name`, or as the default when None.

        The handler receives the command line and the number of command words it
        matched, and returns an exit code.

        Raises:
            CommandNameAmbiguityError: If the name collides with a registered one.
        """
        if command_name is None:
            if self._default is not None:
                raise CommandNameAmbiguityError(
                    "A default handler is already registered."
                )
            self._default = CommandRegistration(None, handler)
            return self

        spellings = self._expand(command_name)
        folded = {self._fold(spelling) for spelling in spellings}
        for registration in self._registrations:
            clash = folded & {self._fold(s) for s in registration.spellings}
            if clash:
                raise CommandNameAmbiguityError(
                    f"Command '{command_name}' conflicts with '{registration.name}' "
                    f"on {sorted(clash)!r}."
                )
        self._registrations.append(
            CommandRegistration(" ".join(command_name.split()), handler, spellings)
        )
        logger.debug("Registered command handler '%s' as %s.", command_name, spellings)
        return self

    def add_command(
        self,
        parser: CommandObjectParser,
        handler: Callable[[dict[str, Any]], Any],
    ) -> CommandRunner:
        """Register a `CommandObjectParser` and the handler that receives its values."""

        async def run_command(command_line: CommandLine, command_count: int) -> Any:
            values = parser.parse(command_line, command_count)
            return await ensure_async(handler)(values)

        return self.add_handler(parser.command, run_command)

    def add_fallback_handler(self, handler: FallbackHandler) -> CommandRunner:
        """Register the handler called when parsing fails inside a handler."""
        self._fallback = handler
        return self

    def match(self) -> CommandRegistration:
        """Select the handler for the command line.

        Raises:
            CommandNameNotFoundError: If nothing matches and there is no default.
        """
        text = self.command_line.possible_command_names
        candidates = sorted(
            (
                (spelling, registration)
                for registration in self._registrations
                for spelling in registration.spellings
            ),
            key=lambda item: len(item[0]),
            reverse=True,
        )
        folded_text = self._fold(text)
        for spelling, registration in candidates:
            folded = self._fold(spelling)
            if folded_text == folded or folded_text.startswith(folded + " "):
                logger.debug("Matched command '%s' for '%s'.", registration.name, text)
                return registration
        if self._default is not None:
            logger.debug("No command matched '%s'; using the default handler.", text)
            return self._default
        raise CommandNameNotFoundError(
            f"No command handler matches '{text}' in {self.command_line}."
        )

    async def run_async(self) -> int:
        registration = self.match()
        try:
            result = await ensure_async(registration.handler)(
                self.command_line, registration.command_count
            )
        except CommandLineParseError as error:
            if self._fallback is None:
                raise
            logger.debug("Parse error handled by fallback handler: %s", error)
            result = await ensure_async(self._fallback)(self.command_line, error)
        return 0 if result is None else int(result)

    def run(self) -> int:
        return asyncio.run(self.run_async())
