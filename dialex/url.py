# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rewrites a single `scheme://path?query#fragment` argument into the flat argument
vector understood by the tokenizer under the Url dialect.

    app://open/report.pdf?readonly=true&tag=a%20b#page-2

becomes

    ["open", "report.pdf", "--readonly=true", "--tag=a b", "--fragment=page-2"]

Path segments are split on `/` with empty segments dropped. Query items are
split on `&`; a bare key becomes a boolean `--key`. Every piece is
percent-decoded after splitting.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from urllib.parse import unquote

from dialex.logger import logger


@dataclass(frozen=True)
class UrlNormalization:
    """The outcome of normalizing a URL-shaped command line."""

    scheme: str
    arguments: tuple[str, ...]


def match_url_scheme(argument: str, scheme_names: Sequence[str]) -> str | None:
    """Return the configured scheme `argument` starts with, compared case insensitively."""
    for scheme in scheme_names:
        prefix_length = len(scheme) + 3
        if (
            len(argument) >= prefix_length
            and argument[: len(scheme)].casefold() == scheme.casefold()
            and argument[len(scheme) : prefix_length] == "://"
        ):
            return scheme
    return None


def split_url(url_body: str) -> tuple[str, str, str]:
    """Split the part after `scheme://` into path, query and fragment."""
    path, _, fragment = url_body.partition("#")
    path, _, query = path.partition("?")
    return path, query, fragment


def path_arguments(path: str) -> list[str]:
    return [unquote(segment) for segment in path.split("/") if segment]


def query_arguments(query: str) -> list[str]:
    arguments = []
    for part in query.split("&"):
        if not part:
            continue
        key, separator, value = part.partition("=")
        if separator:
            arguments.append(f"--{unquote(key)}={unquote(value)}")
        else:
            arguments.append(f"--{unquote(key)}")
    return arguments


def fragment_arguments(fragment: str) -> list[str]:
    if not fragment:
        return []
    return [f"--fragment={unquote(fragment)}"]


def normalize_url_arguments(
    arguments: Sequence[str], scheme_names: Sequence[str]
) -> UrlNormalization | None:
    """Normalize `arguments` if it is exactly one URL with a configured scheme.

    Returns None when the arguments are not URL shaped, in which case they are
    parsed as an ordinary command line.
    """
    if len(arguments) != 1 or not scheme_names:
        return None
    argument = arguments[0]
    scheme = match_url_scheme(argument, scheme_names)
    if scheme is None:
        return None

    path, query, fragment = split_url(argument[len(scheme) + 3 :])
    normalized = (
        path_arguments(path) + query_arguments(query) + fragment_arguments(fragment)
    )
    logger.debug("Normalized URL '%s' into %s", argument, normalized)
    return UrlNormalization(scheme=scheme, arguments=tuple(normalized))
