import pytest

from dialex.parser.values import parse_boolean, split_collection, split_dictionary
from dialex.separators import SeparatorSet

COMMA = SeparatorSet(",")
SEMICOLON = SeparatorSet(";")
COMMA_OR_SEMICOLON = SeparatorSet(",", ";")


@pytest.mark.parametrize(
    "value", ["", "1", "true", "TRUE", "True", "yes", "YES", "on", "On"]
)
def test_parse_boolean_true(value):
    assert parse_boolean(value) is True


@pytest.mark.parametrize("value", ["0", "false", "FALSE", "no", "No", "off", "OFF"])
def test_parse_boolean_false(value):
    assert parse_boolean(value) is False


@pytest.mark.parametrize("value", ["2", "truex", "yess", "nope", "falsey", " ", "t", "y"])
def test_parse_boolean_rejects_other_tokens(value):
    assert parse_boolean(value) is None


def test_split_collection_examples():
    assert split_collection('a,b,"c,d",', COMMA) == ["a", "b", "c,d", ""]
    assert split_collection("a;;b", SEMICOLON) == ["a", "", "b"]
    assert split_collection(",a", COMMA) == ["", "a"]
    assert split_collection("a,b;c", COMMA_OR_SEMICOLON) == ["a", "b", "c"]


def test_split_collection_single_and_empty():
    assert split_collection("value", COMMA) == ["value"]
    assert split_collection("", COMMA) == []
    assert split_collection(",", COMMA) == ["", ""]


def test_split_collection_quotes():
    assert split_collection('""', COMMA) == [""]
    assert split_collection('"",a', COMMA) == ["", "a"]
    assert split_collection('"a;b";c', SEMICOLON) == ["a;b", "c"]
    assert split_collection('"x y"', COMMA) == ["x y"]


@pytest.mark.parametrize("value", ['"abc', 'a,"b', '"a,b', '"'])
def test_split_collection_unterminated_quote(value):
    with pytest.raises(ValueError, match="Unterminated"):
        split_collection(value, COMMA)


@pytest.mark.parametrize("value", ['ab"c"', 'a,b"'])
def test_split_collection_quote_after_value(value):
    with pytest.raises(ValueError, match="Unexpected quote"):
        split_collection(value, COMMA)


def test_split_collection_character_after_closing_quote():
    with pytest.raises(ValueError, match="closing quote"):
        split_collection('"a"b', COMMA)


def test_split_dictionary():
    assert split_dictionary("a=1;b=2", COMMA_OR_SEMICOLON) == {"a": "1", "b": "2"}
    assert split_dictionary("url=http://x?y=z", COMMA) == {"url": "http://x?y=z"}
    assert split_dictionary('"k=x,y"', COMMA) == {"k": "x,y"}
    assert split_dictionary("empty=", COMMA) == {"empty": ""}


def test_split_dictionary_keeps_last_duplicate():
    pairs = split_dictionary("a=1,b=2,a=3", COMMA)
    assert pairs == {"a": "3", "b": "2"}
    assert list(pairs) == ["b", "a"]


def test_split_dictionary_requires_equals():
    with pytest.raises(ValueError, match="has no '='"):
        split_dictionary("a=1,b", COMMA)
