# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsingOptions`, the validated configuration handed to every parse call.

Options can be built in code or loaded from YAML/TOML through
`dialex.config.load_parsing_options`. The `style` field accepts a
`StyleProfile`, the name of a canonical profile, or a mapping of profile fields
(with an optional `base` profile to start from):

    ParsingOptions(style="gnu")
    ParsingOptions(style={"base": "flexible", "case_sensitive": True})
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from dialex.style import StyleProfile


class ParsingOptions(BaseModel):
    """Configuration for tokenizing one command line."""

    model_config = ConfigDict(frozen=True)

    style: InstanceOf[StyleProfile] = Field(default_factory=lambda: StyleProfile.FLEXIBLE)
    scheme_names: tuple[str, ...] = Field(default_factory=tuple)
    ignore_unknown_options: bool = False
    ignore_unknown_positional_arguments: bool = False

    @field_validator("style", mode="before")
    @classmethod
    def validate_style(cls, value: Any) -> StyleProfile:
        if isinstance(value, StyleProfile):
            return value
        if isinstance(value, str):
            return StyleProfile.from_name(value)
        if isinstance(value, dict):
            return StyleProfile.from_mapping(value)
        raise ValueError("style must be a StyleProfile, a profile name or a mapping.")

    @field_validator("scheme_names", mode="before")
    @classmethod
    def validate_scheme_names(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = (value,)
        schemes = tuple(value)
        for scheme in schemes:
            if not isinstance(scheme, str) or not scheme:
                raise ValueError("scheme names must be non-empty strings.")
            if "://" in scheme or ":" in scheme:
                raise ValueError(f"scheme name {scheme!r} must not contain ':'.")
        return schemes

    @classmethod
    def flexible(cls, **kwargs: Any) -> ParsingOptions:
        return cls(style=StyleProfile.FLEXIBLE, **kwargs)

    @classmethod
    def gnu(cls, **kwargs: Any) -> ParsingOptions:
        return cls(style=StyleProfile.GNU, **kwargs)

    @classmethod
    def posix(cls, **kwargs: Any) -> ParsingOptions:
        return cls(style=StyleProfile.POSIX, **kwargs)

    @classmethod
    def dotnet(cls, **kwargs: Any) -> ParsingOptions:
        return cls(style=StyleProfile.DOTNET, **kwargs)

    @classmethod
    def windows(cls, **kwargs: Any) -> ParsingOptions:
        return cls(style=StyleProfile.WINDOWS, **kwargs)

    @classmethod
    def url(cls, *scheme_names: str, **kwargs: Any) -> ParsingOptions:
        """Options that accept `scheme://` URLs and otherwise parse flexibly."""
        return cls(scheme_names=scheme_names, **kwargs)
