# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `StyleProfile`, the immutable bundle of capability flags that describes
one command-line dialect, together with the `NamingPolicy` and `OptionPrefix`
enums it is built from.

Six canonical profiles ship with Dialex:

    - `StyleProfile.POSIX`: `-abc` short options only, combinable, case sensitive.
    - `StyleProfile.GNU`: `--long` and `-s`, `--name=value`, `-ovalue`.
    - `StyleProfile.DOTNET`: `--long`, multi-character short options, `:` or `=`.
    - `StyleProfile.WINDOWS`: `-Name` or `/Name`, case insensitive, PascalCase.
    - `StyleProfile.FLEXIBLE`: any prefix, kebab-case and PascalCase spellings.
    - `StyleProfile.URL`: options synthesized from `scheme://path?query#fragment`.

Each profile can be packed into a 16-bit `magic_number`. The packed value is
used only by the regression tests that pin the canonical profiles.

Enums accept aliases when built from configuration values:

    NamingPolicy("kebab-case") → NamingPolicy.KEBAB_CASE
    OptionPrefix("--")        → OptionPrefix.DOUBLE_DASH
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, ClassVar

from dialex.exceptions import StyleProfileError
from dialex.separators import SeparatorSet


class NamingPolicy(Enum):
    """
    Which spellings of a declared option name are accepted from the user.

    Members:
        ORDINAL: Only the declared spelling.
        KEBAB_CASE: The declared spelling, expected to be kebab-case.
        PASCAL_CASE: PascalCase or camelCase spellings, plus kebab-case.
        BOTH: The declared spelling, its kebab-case and its PascalCase form.
    """

    ORDINAL = "ordinal"
    KEBAB_CASE = "kebab"
    PASCAL_CASE = "pascal"
    BOTH = "both"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "exact": "ordinal",
            "kebab-case": "kebab",
            "kebab_case": "kebab",
            "pascal-case": "pascal",
            "pascal_case": "pascal",
            "camel": "pascal",
            "kebab+pascal": "both",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> NamingPolicy:
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
    def supports_ordinal(self) -> bool:
        """True when the declared spelling is matched verbatim."""
        return self in (NamingPolicy.ORDINAL, NamingPolicy.KEBAB_CASE, NamingPolicy.BOTH)

    @property
    def supports_pascal_case(self) -> bool:
        return self in (NamingPolicy.PASCAL_CASE, NamingPolicy.BOTH)

    @property
    def supports_kebab_case(self) -> bool:
        return self in (NamingPolicy.PASCAL_CASE, NamingPolicy.BOTH)

    def __str__(self) -> str:
        return self.value


class OptionPrefix(Enum):
    """
    Which prefix characters introduce an option.

    Members:
        DOUBLE_DASH: `--long` and `-s`.
        SINGLE_DASH: `-name`, long or short resolved by lookup.
        SLASH: `/name`, long or short resolved by lookup.
        SLASH_OR_DASH: `-name` or `/name`.
        ANY: `--name`, `-name` or `/name`.
    """

    DOUBLE_DASH = "--"
    SINGLE_DASH = "-"
    SLASH = "/"
    SLASH_OR_DASH = "-/"
    ANY = "any"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "double-dash": "--",
            "double_dash": "--",
            "single-dash": "-",
            "single_dash": "-",
            "slash": "/",
            "slash-or-dash": "-/",
            "slash_or_dash": "-/",
            "/-": "-/",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionPrefix:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def is_option_start(self, argument: str) -> bool:
        """Return True if `argument` starts with a prefix character of this style."""
        if len(argument) < 2:
            return False
        first = argument[0]
        if self is OptionPrefix.DOUBLE_DASH or self is OptionPrefix.SINGLE_DASH:
            return first == "-"
        if self is OptionPrefix.SLASH:
            return first == "/"
        return first in "-/"

    def __str__(self) -> str:
        return self.value


_NAMING_BITS = {
    NamingPolicy.ORDINAL: 0,
    NamingPolicy.KEBAB_CASE: 1,
    NamingPolicy.PASCAL_CASE: 2,
    NamingPolicy.BOTH: 3,
}

_PREFIX_BITS = {
    OptionPrefix.DOUBLE_DASH: 0,
    OptionPrefix.ANY: 1,
    OptionPrefix.SINGLE_DASH: 2,
    OptionPrefix.SLASH: 4,
    OptionPrefix.SLASH_OR_DASH: 6,
}

_FLAG_FIELDS = (
    "case_sensitive",
    "supports_long_option",
    "supports_short_option",
    "supports_short_option_combination",
    "supports_multi_char_short_option",
    "supports_short_option_value_without_separator",
    "supports_space_separated_option_value",
    "supports_explicit_boolean_option_value",
    "supports_space_separated_collection_values",
)


def _separator_set(value: Any) -> SeparatorSet:
    if isinstance(value, SeparatorSet):
        return value
    if isinstance(value, (str, list, tuple)):
        return SeparatorSet.from_iterable(value)
    raise StyleProfileError(f"Cannot build a separator set from {value!r}.")


@dataclass(frozen=True)
class StyleProfile:
    """
    An immutable description of one command-line dialect.

    Attributes:
        name (str): Diagnostic name of the dialect.
        case_sensitive (bool): Whether option names are compared case sensitively.
        supports_long_option (bool): `--name` style options are recognized.
        supports_short_option (bool): `-n` style options are recognized.
        supports_short_option_combination (bool): `-abc` sets boolean options a, b, c.
        supports_multi_char_short_option (bool): `-tl` may name one short option.
        supports_short_option_value_without_separator (bool): `-ovalue` assigns `value`.
        supports_space_separated_option_value (bool): `--name value` assigns `value`.
        supports_explicit_boolean_option_value (bool): `--flag false` assigns False.
        supports_space_separated_collection_values (bool): `--items a b c`.
        naming_policy (NamingPolicy): Accepted spellings for declared names.
        option_prefix (OptionPrefix): Prefix characters introducing an option.
        option_value_separators (SeparatorSet): Splits `name` from an inline value.
        collection_value_separators (SeparatorSet): Splits collection items.
    """

    POSIX: ClassVar[StyleProfile]
    GNU: ClassVar[StyleProfile]
    DOTNET: ClassVar[StyleProfile]
    WINDOWS: ClassVar[StyleProfile]
    FLEXIBLE: ClassVar[StyleProfile]
    URL: ClassVar[StyleProfile]

    name: str = "Custom"
    case_sensitive: bool = False
    supports_long_option: bool = True
    supports_short_option: bool = True
    supports_short_option_combination: bool = False
    supports_multi_char_short_option: bool = False
    supports_short_option_value_without_separator: bool = False
    supports_space_separated_option_value: bool = True
    supports_explicit_boolean_option_value: bool = True
    supports_space_separated_collection_values: bool = False
    naming_policy: NamingPolicy = NamingPolicy.BOTH
    option_prefix: OptionPrefix = OptionPrefix.ANY
    option_value_separators: SeparatorSet = field(
        default_factory=lambda: SeparatorSet(":", "=")
    )
    collection_value_separators: SeparatorSet = field(
        default_factory=lambda: SeparatorSet(",", ";")
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "naming_policy", NamingPolicy(self.naming_policy))
        object.__setattr__(self, "option_prefix", OptionPrefix(self.option_prefix))
        object.__setattr__(
            self, "option_value_separators", _separator_set(self.option_value_separators)
        )
        object.__setattr__(
            self,
            "collection_value_separators",
            _separator_set(self.collection_value_separators),
        )
        if (
            self.supports_short_option_combination
            and self.supports_multi_char_short_option
        ):
            raise StyleProfileError(
                f"Style '{self.name}' cannot support both short option combination "
                "and multi-character short options."
            )

    @property
    def magic_number(self) -> int:
        """Pack every flag and enum field into a 16-bit regression value."""
        packed = _NAMING_BITS[self.naming_policy]
        packed |= _PREFIX_BITS[self.option_prefix] << 2
        for bit, name in enumerate(_FLAG_FIELDS, start=5):
            if getattr(self, name):
                packed |= 1 << bit
        return packed

    def replace(self, **changes: Any) -> StyleProfile:
        """Return a copy of this profile with the given fields changed."""
        return replace(self, **changes)

    @classmethod
    def canonical(cls) -> dict[str, StyleProfile]:
        """Return the built-in profiles keyed by lowercase name."""
        return {
            profile.name.lower(): profile
            for profile in (
                cls.FLEXIBLE,
                cls.DOTNET,
                cls.GNU,
                cls.POSIX,
                cls.WINDOWS,
                cls.URL,
            )
        }

    @classmethod
    def from_name(cls, name: str) -> StyleProfile:
        """Look up a canonical profile by name, case insensitively."""
        aliases = {"powershell": "windows", "dotnet-cli": "dotnet", ".net": "dotnet"}
        key = name.strip().lower()
        key = aliases.get(key, key)
        try:
            return cls.canonical()[key]
        except KeyError:
            valid = ", ".join(cls.canonical())
            raise StyleProfileError(
                f"Unknown style '{name}'. Must be one of: {valid}"
            ) from None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> StyleProfile:
        """Build a profile from a mapping, optionally based on a canonical one."""
        data = dict(data)
        base_name = data.pop("base", None)
        known = {item.name for item in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise StyleProfileError(
                f"Unknown style fields: {', '.join(sorted(unknown))}"
            )
        if base_name:
            return cls.from_name(base_name).replace(**data)
        return cls(**data)

    def __str__(self) -> str:
        return self.name


StyleProfile.FLEXIBLE = StyleProfile(
    name="Flexible",
    case_sensitive=False,
    supports_long_option=True,
    supports_short_option=True,
    supports_short_option_combination=False,
    supports_multi_char_short_option=False,
    supports_short_option_value_without_separator=False,
    supports_space_separated_option_value=True,
    supports_explicit_boolean_option_value=True,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.BOTH,
    option_prefix=OptionPrefix.ANY,
    option_value_separators=SeparatorSet(":", "="),
    collection_value_separators=SeparatorSet(",", ";"),
)

StyleProfile.DOTNET = StyleProfile(
    name="DotNet",
    case_sensitive=True,
    supports_long_option=True,
    supports_short_option=True,
    supports_short_option_combination=False,
    supports_multi_char_short_option=True,
    supports_short_option_value_without_separator=False,
    supports_space_separated_option_value=True,
    supports_explicit_boolean_option_value=True,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.KEBAB_CASE,
    option_prefix=OptionPrefix.DOUBLE_DASH,
    option_value_separators=SeparatorSet(":", "="),
    collection_value_separators=SeparatorSet(",", ";"),
)

StyleProfile.GNU = StyleProfile(
    name="Gnu",
    case_sensitive=True,
    supports_long_option=True,
    supports_short_option=True,
    supports_short_option_combination=True,
    supports_multi_char_short_option=False,
    supports_short_option_value_without_separator=True,
    supports_space_separated_option_value=True,
    supports_explicit_boolean_option_value=False,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.KEBAB_CASE,
    option_prefix=OptionPrefix.DOUBLE_DASH,
    option_value_separators=SeparatorSet("="),
    collection_value_separators=SeparatorSet(",", ";"),
)

StyleProfile.POSIX = StyleProfile(
    name="Posix",
    case_sensitive=True,
    supports_long_option=False,
    supports_short_option=True,
    supports_short_option_combination=True,
    supports_multi_char_short_option=False,
    supports_short_option_value_without_separator=False,
    supports_space_separated_option_value=True,
    supports_explicit_boolean_option_value=False,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.PASCAL_CASE,
    option_prefix=OptionPrefix.DOUBLE_DASH,
    option_value_separators=SeparatorSet(),
    collection_value_separators=SeparatorSet(",", ";"),
)

StyleProfile.WINDOWS = StyleProfile(
    name="Windows",
    case_sensitive=False,
    supports_long_option=True,
    supports_short_option=True,
    supports_short_option_combination=False,
    supports_multi_char_short_option=True,
    supports_short_option_value_without_separator=False,
    supports_space_separated_option_value=True,
    supports_explicit_boolean_option_value=True,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.PASCAL_CASE,
    option_prefix=OptionPrefix.SLASH_OR_DASH,
    option_value_separators=SeparatorSet(":", "="),
    collection_value_separators=SeparatorSet(",", ";"),
)

StyleProfile.URL = StyleProfile(
    name="Url",
    case_sensitive=False,
    supports_long_option=True,
    supports_short_option=False,
    supports_short_option_combination=False,
    supports_multi_char_short_option=False,
    supports_short_option_value_without_separator=False,
    supports_space_separated_option_value=False,
    supports_explicit_boolean_option_value=True,
    supports_space_separated_collection_values=False,
    naming_policy=NamingPolicy.BOTH,
    option_prefix=OptionPrefix.DOUBLE_DASH,
    option_value_separators=SeparatorSet("="),
    collection_value_separators=SeparatorSet(",", ";"),
)
