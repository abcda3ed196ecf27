import pytest

from dialex.command_object import CommandObjectParser
from dialex.exceptions import (
    CommandArgumentError,
    CommandLineParseError,
    RequiredPropertyNotAssignedError,
)
from dialex.options import ParsingOptions
from dialex.parser.parser_types import OptionValueType
from dialex.parser.parsing_result import ParsingError


def build_parser(parsing_options: ParsingOptions | None = None) -> CommandObjectParser:
    parser = CommandObjectParser("build", command="build", parsing_options=parsing_options)
    parser.add_option("output-directory", "o")
    parser.add_option("verbose", "v", type=bool)
    parser.add_option("quiet", "q", type=bool)
    parser.add_value("project")
    return parser


def test_gnu_command_line():
    parser = build_parser(ParsingOptions.gnu())
    values = parser.parse(
        ["build", "app.csproj", "-o", "out", "-vq"], command_count=1
    )
    assert values == {
        "project": "app.csproj",
        "output_directory": "out",
        "verbose": True,
        "quiet": True,
    }


def test_gnu_count_and_flag():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.gnu())
    parser.add_option("count", type=int)
    parser.add_option(short_name="v", type=bool)
    assert parser.parse(["--count", "3", "-v"]) == {"count": 3, "v": True}


def test_gnu_short_option_with_equals_separator():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.gnu())
    parser.add_option(short_name="c")
    parser.add_option(short_name="v", type=bool)
    assert parser.parse(["-c=3"]) == {"c": "3", "v": False}
    assert parser.parse(["-c3", "-v=false"]) == {"c": "3", "v": False}


def test_posix_combined_flags():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.posix())
    parser.add_option(short_name="a", type=bool)
    parser.add_option(short_name="b", type=bool)
    parser.add_option(short_name="c", type=bool)
    assert parser.parse(["-abc"]) == {"a": True, "b": True, "c": True}


def test_posix_combined_option_cannot_take_value():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.posix())
    parser.add_option(short_name="a", type=bool)
    parser.add_option(short_name="b", type=bool)
    parser.add_option(short_name="c", required=True)
    with pytest.raises(CommandLineParseError):
        parser.parse(["-abc", "extra"])


@pytest.mark.parametrize(
    "spelling", ["--output-directory", "--OutputDirectory", "--outputDirectory"]
)
def test_flexible_naming_spellings(spelling):
    parser = CommandObjectParser("tool")
    parser.add_option("OutputDirectory")
    assert parser.parse([spelling, "out"]) == {"output_directory": "out"}


def test_posix_command_line():
    parser = build_parser(ParsingOptions.posix())
    values = parser.parse(["-vq", "-o", "out", "app.csproj"])
    assert values["output_directory"] == "out"
    assert values["verbose"] is True
    assert values["project"] == "app.csproj"


@pytest.mark.parametrize(
    "parsing_options, arguments",
    [
        (ParsingOptions.flexible(), ["--output-directory", "out"]),
        (ParsingOptions.flexible(), ["-OutputDirectory", "out"]),
        (ParsingOptions.flexible(), ["/outputDirectory:out"]),
        (ParsingOptions.flexible(), ["/o", "out"]),
        (ParsingOptions.gnu(), ["--output-directory=out"]),
        (ParsingOptions.gnu(), ["-oout"]),
        (ParsingOptions.dotnet(), ["--output-directory", "out"]),
        (ParsingOptions.dotnet(), ["-o:out"]),
        (ParsingOptions.windows(), ["/OutputDirectory", "out"]),
        (ParsingOptions.windows(), ["-outputdirectory", "out"]),
        (ParsingOptions.windows(), ["/output-directory:out"]),
        (ParsingOptions.posix(), ["-o", "out"]),
        (ParsingOptions.url("app"), ["app://?output-directory=out"]),
        (ParsingOptions.url("app"), ["app://?OutputDirectory=out"]),
    ],
)
def test_same_option_in_every_style(parsing_options, arguments):
    values = build_parser(parsing_options).parse(arguments)
    assert values["output_directory"] == "out"


def test_dotnet_is_case_sensitive():
    parser = build_parser(ParsingOptions.dotnet())
    with pytest.raises(CommandLineParseError) as error:
        parser.parse(["--Output-Directory", "out"])
    assert error.value.reason is ParsingError.OPTIONAL_ARGUMENT_NOT_FOUND


def test_per_option_case_override():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.dotnet())
    parser.add_option("verbose", "v", type=bool, case_sensitive=False)
    assert parser.parse(["--VERBOSE"])["verbose"] is True
    assert parser.parse(["-V"])["verbose"] is True


def test_url_command_line():
    parser = CommandObjectParser("open", parsing_options=ParsingOptions.url("app"))
    parser.add_value("action")
    parser.add_value("file")
    parser.add_option("readonly", type=bool)
    parser.add_option("page", type=int)

    values = parser.parse(["app://open/report%20v2.pdf?readonly&page=3"])
    assert values == {
        "action": "open",
        "file": "report v2.pdf",
        "readonly": True,
        "page": 3,
    }


def test_url_fragment_is_an_option_value():
    parser = CommandObjectParser("open", parsing_options=ParsingOptions.url("app"))
    parser.add_value("action")
    parser.add_option("fragment")
    values = parser.parse(["app://open#page%202"])
    assert values == {"action": "open", "fragment": "page 2"}


def test_url_unknown_option_mentions_url():
    parser = CommandObjectParser("open", parsing_options=ParsingOptions.url("app"))
    with pytest.raises(CommandLineParseError, match="URL"):
        parser.parse(["app://?missing=1"])


def test_defaults_for_absent_declarations():
    parser = CommandObjectParser("tool")
    parser.add_option("flag", type=bool)
    parser.add_option("items", type=list)
    parser.add_option("define", type=dict)
    parser.add_option("name")
    parser.add_option("level", type=int, default=3)
    parser.add_value("rest", length=None)

    assert parser.parse([]) == {
        "rest": [],
        "flag": False,
        "items": [],
        "define": {},
        "name": None,
        "level": 3,
    }


def test_required_option_missing():
    parser = CommandObjectParser("tool")
    parser.add_option("name", required=True)
    with pytest.raises(RequiredPropertyNotAssignedError) as error:
        parser.parse([])
    assert error.value.property_name == "name"
    assert isinstance(error.value, CommandLineParseError)


def test_required_positional_missing():
    parser = CommandObjectParser("tool")
    parser.add_value("source", required=True)
    with pytest.raises(RequiredPropertyNotAssignedError, match="source"):
        parser.parse([])


def test_conversion_error():
    parser = CommandObjectParser("tool")
    parser.add_option("count", type=int)
    with pytest.raises(CommandLineParseError) as error:
        parser.parse(["--count", "abc"])
    assert error.value.reason is ParsingError.OPTIONAL_ARGUMENT_PARSE_ERROR


def test_typed_list_option():
    parser = CommandObjectParser("tool")
    parser.add_option("port", "p", kind=OptionValueType.LIST, type=int)
    assert parser.parse(["--port", "80,443", "--port", "8080", "-p", "9000"])["port"] == [
        80,
        443,
        8080,
        9000,
    ]


@pytest.mark.parametrize(
    "parsing_options, option",
    [
        (ParsingOptions.flexible(), "--items"),
        (ParsingOptions.dotnet(), "--items"),
        (ParsingOptions.windows(), "/items"),
    ],
)
def test_list_option_takes_one_argument(parsing_options, option):
    parser = CommandObjectParser("tool", parsing_options=parsing_options)
    parser.add_option("items", type=list)
    parser.add_value("target")
    values = parser.parse([option, "a", "b"])
    assert values == {"target": "b", "items": ["a"]}


def test_windows_positional_separator():
    parser = CommandObjectParser("tool", parsing_options=ParsingOptions.windows())
    parser.add_option("name", "n")
    parser.add_value("file")
    assert parser.parse(["-n", "x", "--", "/file"]) == {"file": "/file", "name": "x"}


def test_dictionary_option_last_value_wins():
    parser = CommandObjectParser("tool")
    parser.add_option("define", "D", type=dict)
    values = parser.parse(["--define", "a=1", "--define", "b=2,a=3"])
    assert values["define"] == {"b": "2", "a": "3"}


def test_repeated_normal_option_keeps_last_value():
    parser = CommandObjectParser("tool")
    parser.add_option("name")
    assert parser.parse(["--name", "a", "--name", "b"])["name"] == "b"


def test_positional_slots():
    parser = CommandObjectParser("copy")
    parser.add_value("source")
    parser.add_value("targets", length=None)
    values = parser.parse(["a", "b", "c"])
    assert values == {"source": "a", "targets": ["b", "c"]}


def test_fixed_length_positional_slot():
    parser = CommandObjectParser("move")
    parser.add_value("point", length=2, type=int)
    assert parser.parse(["1", "2"])["point"] == [1, 2]
    with pytest.raises(CommandLineParseError) as error:
        parser.parse(["1", "2", "3"])
    assert error.value.reason is ParsingError.POSITIONAL_ARGUMENT_NOT_FOUND


def test_single_string_input():
    parser = build_parser()
    values = parser.parse('build "my app.csproj" --output-directory "out dir"', 1)
    assert values["project"] == "my app.csproj"
    assert values["output_directory"] == "out dir"


def test_parse_result_does_not_raise():
    parser = build_parser()
    result = parser.parse_result(["--missing"])
    assert not result.is_success
    assert result.error is ParsingError.OPTIONAL_ARGUMENT_NOT_FOUND


def test_each_parse_starts_fresh():
    parser = build_parser()
    assert parser.parse(["-v"])["verbose"] is True
    assert parser.parse([])["verbose"] is False


def test_get_argument():
    parser = build_parser()
    option = parser.get_argument("output_directory")
    assert option is not None
    assert option.long_name == "output-directory"
    assert option.short_names == ("o",)
    assert parser.get_argument("missing") is None


@pytest.mark.parametrize(
    "declare",
    [
        lambda parser: parser.add_option(),
        lambda parser: parser.add_option("--name"),
        lambda parser: parser.add_option("/name"),
        lambda parser: parser.add_option("name", kind="not_exist"),
        lambda parser: parser.add_option("name", kind="bogus"),
        lambda parser: parser.add_option("name", type=5),
        lambda parser: parser.add_option("name", dest="1name"),
        lambda parser: parser.add_option("name", dest="bad-dest"),
        lambda parser: parser.add_value("slot", length=0),
        lambda parser: parser.add_value("slot", index=-1),
    ],
)
def test_invalid_declarations(declare):
    parser = CommandObjectParser("tool")
    with pytest.raises(CommandArgumentError):
        declare(parser)


def test_duplicate_declarations():
    parser = CommandObjectParser("tool")
    parser.add_option("name", "n")
    with pytest.raises(CommandArgumentError):
        parser.add_option("Name")
    with pytest.raises(CommandArgumentError):
        parser.add_option("other", "n")
    with pytest.raises(CommandArgumentError):
        parser.add_option("other", dest="name")

    parser.add_value("rest", length=None)
    with pytest.raises(CommandArgumentError):
        parser.add_value("more")


def test_str():
    parser = build_parser()
    assert str(parser) == (
        "CommandObjectParser(name='build', options=3, positionals=1, required=0)"
    )
