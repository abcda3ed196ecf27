import pytest

from dialex.naming import (
    NamingResolver,
    is_kebab_case,
    is_pascal_case,
    make_kebab_case,
    make_pascal_case,
    naming_candidates,
)
from dialex.style import NamingPolicy


@pytest.mark.parametrize(
    "name, expected",
    [
        ("OutputDirectory", "output-directory"),
        ("outputDirectory", "output-directory"),
        ("output-directory", "output-directory"),
        ("option-name1", "option-name1"),
        ("OptionName1", "option-name1"),
        ("snake_case_name", "snake-case-name"),
        ("IOPath", "i-o-path"),
        ("--leading", "leading"),
        ("a  b", "a-b"),
    ],
)
def test_make_kebab_case(name, expected):
    assert make_kebab_case(name) == expected


@pytest.mark.parametrize(
    "name",
    ["OutputDirectory", "a-B-c", "x__Y", "--Weird--Name--", "HTTPServer2", "", "-", "ÄpfelBaum"],
)
def test_kebab_case_is_idempotent(name):
    once = make_kebab_case(name)
    assert make_kebab_case(once) == once


@pytest.mark.parametrize(
    "name, expected",
    [
        ("option-name1", "OptionName1"),
        ("outputDirectory", "OutputDirectory"),
        ("OutputDirectory", "OutputDirectory"),
        ("sub-command", "SubCommand"),
        ("snake_case", "SnakeCase"),
    ],
)
def test_make_pascal_case(name, expected):
    assert make_pascal_case(name) == expected


def test_case_predicates():
    assert is_kebab_case("output-directory")
    assert not is_kebab_case("OutputDirectory")
    assert not is_kebab_case("")
    assert is_pascal_case("OutputDirectory")
    assert not is_pascal_case("outputDirectory")


def test_naming_candidates_per_policy():
    assert naming_candidates("OutputDirectory", NamingPolicy.ORDINAL) == ["OutputDirectory"]
    assert naming_candidates("output-directory", NamingPolicy.KEBAB_CASE) == [
        "output-directory"
    ]
    assert naming_candidates("output-directory", NamingPolicy.PASCAL_CASE) == [
        "OutputDirectory",
        "output-directory",
    ]
    assert naming_candidates("OutputDirectory", NamingPolicy.BOTH) == [
        "OutputDirectory",
        "output-directory",
    ]
    assert naming_candidates("output-directory", NamingPolicy.BOTH) == [
        "output-directory",
        "OutputDirectory",
    ]


def test_resolver_prefers_exact_declared_spelling():
    resolver: NamingResolver[str] = NamingResolver()
    resolver.add("output-dir", "kebab")
    resolver.add("OutputDir", "pascal")

    assert resolver.resolve("OutputDir", False, NamingPolicy.BOTH) == "pascal"
    assert resolver.resolve("output-dir", False, NamingPolicy.BOTH) == "kebab"


def test_resolver_policy_spellings():
    resolver: NamingResolver[str] = NamingResolver()
    resolver.add("OutputDirectory", "output")

    for spelling in ("output-directory", "OutputDirectory", "outputDirectory"):
        assert resolver.resolve(spelling, False, NamingPolicy.BOTH) == "output"
    assert resolver.resolve("output-directory", True, NamingPolicy.KEBAB_CASE) is None
    assert resolver.resolve("OutputDirectory", True, NamingPolicy.KEBAB_CASE) == "output"


def test_resolver_case_sensitivity():
    resolver: NamingResolver[str] = NamingResolver()
    resolver.add("option-name", "option")

    assert resolver.resolve("Option-Name", True, NamingPolicy.KEBAB_CASE) is None
    assert resolver.resolve("Option-Name", False, NamingPolicy.KEBAB_CASE) == "option"
    assert resolver.resolve("OptionName", True, NamingPolicy.KEBAB_CASE) is None
    assert resolver.resolve("optionName", False, NamingPolicy.PASCAL_CASE) == "option"


def test_resolver_ordinal_falls_back_to_opposite_case():
    resolver: NamingResolver[str] = NamingResolver()
    resolver.add("Name", "name")

    assert resolver.resolve("name", True, NamingPolicy.ORDINAL) == "name"
    assert resolver.resolve("name", True, NamingPolicy.KEBAB_CASE) is None


def test_resolver_per_name_case_override():
    resolver: NamingResolver[str] = NamingResolver()
    resolver.add("Strict", "strict", case_sensitive=True)

    assert resolver.resolve("strict", False, NamingPolicy.KEBAB_CASE) is None
    assert resolver.resolve("Strict", False, NamingPolicy.KEBAB_CASE) == "strict"
