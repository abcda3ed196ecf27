import pytest

from dialex.exceptions import StyleProfileError
from dialex.separators import SeparatorSet
from dialex.style import NamingPolicy, OptionPrefix, StyleProfile


@pytest.mark.parametrize(
    "profile, magic_number",
    [
        (StyleProfile.FLEXIBLE, 0x18C7),
        (StyleProfile.DOTNET, 0x1AE1),
        (StyleProfile.WINDOWS, 0x1ADA),
        (StyleProfile.GNU, 0x0DE1),
        (StyleProfile.POSIX, 0x09A2),
        (StyleProfile.URL, 0x1043),
    ],
)
def test_canonical_magic_numbers(profile, magic_number):
    assert profile.magic_number == magic_number


def test_magic_number_changes_with_any_flag():
    base = StyleProfile.FLEXIBLE
    changed = {
        base.replace(case_sensitive=True).magic_number,
        base.replace(supports_long_option=False).magic_number,
        base.replace(supports_explicit_boolean_option_value=False).magic_number,
        base.replace(naming_policy=NamingPolicy.KEBAB_CASE).magic_number,
        base.replace(option_prefix=OptionPrefix.SLASH).magic_number,
    }
    assert base.magic_number not in changed
    assert len(changed) == 5


def test_gnu_literal_fields():
    gnu = StyleProfile.GNU
    assert gnu.name == "Gnu"
    assert gnu.case_sensitive is True
    assert gnu.supports_long_option is True
    assert gnu.supports_short_option is True
    assert gnu.supports_short_option_combination is True
    assert gnu.supports_multi_char_short_option is False
    assert gnu.supports_short_option_value_without_separator is True
    assert gnu.supports_space_separated_option_value is True
    assert gnu.supports_explicit_boolean_option_value is False
    assert gnu.supports_space_separated_collection_values is False
    assert gnu.naming_policy is NamingPolicy.KEBAB_CASE
    assert gnu.option_prefix is OptionPrefix.DOUBLE_DASH
    assert gnu.option_value_separators == SeparatorSet("=")
    assert gnu.collection_value_separators == SeparatorSet(",", ";")


def test_posix_literal_fields():
    posix = StyleProfile.POSIX
    assert posix.case_sensitive is True
    assert posix.supports_long_option is False
    assert posix.supports_short_option_combination is True
    assert posix.naming_policy is NamingPolicy.PASCAL_CASE
    assert len(posix.option_value_separators) == 0


def test_windows_and_dotnet_use_multi_char_short_options():
    for profile in (StyleProfile.WINDOWS, StyleProfile.DOTNET):
        assert profile.supports_multi_char_short_option is True
        assert profile.supports_short_option_combination is False
    assert StyleProfile.WINDOWS.option_prefix is OptionPrefix.SLASH_OR_DASH
    assert StyleProfile.WINDOWS.case_sensitive is False
    assert StyleProfile.DOTNET.case_sensitive is True


def test_canonical_profiles_take_one_collection_item_per_argument():
    for profile in StyleProfile.canonical().values():
        assert profile.supports_space_separated_collection_values is False
    assert StyleProfile().supports_space_separated_collection_values is False


def test_url_literal_fields():
    url = StyleProfile.URL
    assert url.case_sensitive is False
    assert url.supports_short_option is False
    assert url.supports_space_separated_option_value is False
    assert url.naming_policy is NamingPolicy.BOTH
    assert url.option_value_separators == SeparatorSet("=")


def test_combination_and_multi_char_short_are_exclusive():
    with pytest.raises(StyleProfileError):
        StyleProfile(
            supports_short_option_combination=True,
            supports_multi_char_short_option=True,
        )


def test_profile_is_immutable():
    with pytest.raises(AttributeError):
        StyleProfile.GNU.case_sensitive = False  # type: ignore[misc]


def test_enum_aliases():
    assert NamingPolicy("kebab-case") is NamingPolicy.KEBAB_CASE
    assert NamingPolicy("Pascal_Case") is NamingPolicy.PASCAL_CASE
    assert OptionPrefix("--") is OptionPrefix.DOUBLE_DASH
    assert OptionPrefix("slash-or-dash") is OptionPrefix.SLASH_OR_DASH
    with pytest.raises(ValueError):
        NamingPolicy("snake")


def test_from_name_and_mapping():
    assert StyleProfile.from_name("GNU") is StyleProfile.GNU
    assert StyleProfile.from_name("powershell") is StyleProfile.WINDOWS
    with pytest.raises(StyleProfileError):
        StyleProfile.from_name("cobol")

    custom = StyleProfile.from_mapping(
        {"base": "gnu", "case_sensitive": False, "option_value_separators": ":="}
    )
    assert custom.name == "Gnu"
    assert custom.case_sensitive is False
    assert custom.option_value_separators == SeparatorSet(":", "=")
    assert custom.supports_short_option_combination is True

    with pytest.raises(StyleProfileError):
        StyleProfile.from_mapping({"colour": "blue"})


def test_option_prefix_option_start():
    assert OptionPrefix.DOUBLE_DASH.is_option_start("-v")
    assert not OptionPrefix.DOUBLE_DASH.is_option_start("/v")
    assert OptionPrefix.SLASH_OR_DASH.is_option_start("/v")
    assert OptionPrefix.ANY.is_option_start("--verbose")
    assert not OptionPrefix.ANY.is_option_start("-")
