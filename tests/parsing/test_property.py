"""Tests for tokenizing content lines into properties and parameters."""

import pytest

from vformat.exceptions import (
    MissingClosingQuote,
    MissingContentAfter,
    MissingDelimiter,
    MissingName,
    MissingParamKey,
    PropertyParseError,
)
from vformat.parsing.line import LineReader
from vformat.parsing.property import (
    ParsedProperty,
    ParsedPropertyParameter,
    PropertyParser,
    parse_contentlines,
    parse_line,
)


def test_multi_valued_parameter() -> None:
    """Test a parameter with a list of values."""
    prop = parse_line("TEL;TYPE=work,voice:+1-111-555-1212")
    assert prop == ParsedProperty(
        name="TEL",
        value="+1-111-555-1212",
        params=[ParsedPropertyParameter(name="TYPE", values=["work", "voice"])],
    )
    assert prop.get_parameter_values("type") == ["work", "voice"]


def test_quoted_parameter_value() -> None:
    """Test that delimiters inside a quoted parameter value are kept."""
    prop = parse_line(
        'ADR;TYPE=WORK;LABEL="100 Waters Edge\\nBaytown, LA":;;100 Waters Edge'
    )
    assert prop.name == "ADR"
    assert prop.params == [
        ParsedPropertyParameter(name="TYPE", values=["WORK"]),
        ParsedPropertyParameter(name="LABEL", values=["100 Waters Edge\nBaytown, LA"]),
    ]
    assert prop.value == ";;100 Waters Edge"


def test_quoted_parameter_value_at_end_of_line() -> None:
    """Test a quoted parameter value that ends the content line."""
    prop = parse_line('ADR;LABEL="100 Waters Edge"')
    assert prop.params == [
        ParsedPropertyParameter(name="LABEL", values=["100 Waters Edge"])
    ]
    assert prop.value is None


def test_quoted_and_raw_values() -> None:
    """Test a list mixing quoted and raw parameter values."""
    prop = parse_line(
        'ATTENDEE;DELEGATED-TO="mailto:jdoe@example.com","mailto:jqpublic@example.com";'
        "ROLE=REQ-PARTICIPANT:mailto:jsmith@example.com"
    )
    assert prop.get_parameter_values("DELEGATED-TO") == [
        "mailto:jdoe@example.com",
        "mailto:jqpublic@example.com",
    ]
    assert prop.get_parameter_value("ROLE") == "REQ-PARTICIPANT"
    assert prop.value == "mailto:jsmith@example.com"


@pytest.mark.parametrize(
    ("contentline", "values"),
    [
        ("X;P=a\\,b:v", ["a,b"]),
        ("X;P=a\\;b\\:c:v", ["a;b:c"]),
        ("X;P=a\\\\b:v", ["a\\b"]),
        ("X;P=a\\nb:v", ["a\nb"]),
        ("X;P=a\\\"b:v", ['a"b']),
        ('X;P="a\\"b":v', ['a"b']),
        ('X;P="a\\,b":v', ["a\\,b"]),
        ("X;P=a^nb^'c^^d:v", ['a\nb"c^d']),
        ('X;P="^\'quoted^\'":v', ['"quoted"']),
        ("X;P=a^b:v", ["a^b"]),
        ("X;P=:v", [""]),
        ("X;P=a,,b:v", ["a", "", "b"]),
    ],
)
def test_parameter_value_escapes(contentline: str, values: list[str]) -> None:
    """Test decoding of backslash and caret escapes in parameter values."""
    prop = parse_line(contentline)
    assert prop.params == [ParsedPropertyParameter(name="P", values=values)]
    assert prop.value == "v"


@pytest.mark.parametrize(
    ("contentline", "value"),
    [
        ("DESCRIPTION:a:b;c,d", "a:b;c,d"),
        ("SUMMARY:", None),
        ("SUMMARY;LANGUAGE=en:", None),
        ("SUMMARY:\\,\\;", "\\,\\;"),
        ("DTSTART;TZID=Europe/Berlin:20201206T170000", "20201206T170000"),
    ],
)
def test_raw_value(contentline: str, value: str | None) -> None:
    """Test that the value is everything after the value delimiter."""
    assert parse_line(contentline).value == value


@pytest.mark.parametrize(
    "contentline",
    [
        "BEGIN:VEVENT",
        "begin:VEVENT",
        "Begin:VEVENT",
        "bEgiN:VEVENT",
    ],
)
def test_names_are_upper_case(contentline: str) -> None:
    """Test that property names are normalized."""
    prop = parse_line(contentline)
    assert prop.name == "BEGIN"
    assert prop.value == "VEVENT"


def test_parameter_names_are_upper_case() -> None:
    """Test that parameter names are normalized."""
    prop = parse_line("x-qq;x-param=One:21588891")
    assert prop.name == "X-QQ"
    assert prop.params == [ParsedPropertyParameter(name="X-PARAM", values=["One"])]


@pytest.mark.parametrize(
    ("contentline", "error"),
    [
        ("PROP-VALUE", MissingDelimiter),
        (":VALUE", MissingName),
        (";P=1:VALUE", MissingName),
        ('X;P="abc:v', MissingClosingQuote),
        ('X;P="a"b:v', MissingDelimiter),
        ("X;P=abc", MissingContentAfter),
        ("X;", MissingContentAfter),
        ("X;PARAM:VALUE", MissingDelimiter),
        ("PROP;:VALUE", MissingDelimiter),
        ("X;=a:v", MissingParamKey),
    ],
)
def test_invalid_format(contentline: str, error: type[PropertyParseError]) -> None:
    """Test the error raised for each kind of malformed content line."""
    with pytest.raises(error):
        parse_line(contentline)


def test_error_line_number() -> None:
    """Test that errors report the content line and its line number."""
    with pytest.raises(MissingDelimiter) as exc_info:
        parse_line("INVALID", line_number=7)
    assert exc_info.value.line_number == 7
    assert exc_info.value.detailed_error == "INVALID"
    assert str(exc_info.value).startswith("Line 7: ")


def test_parameter_value() -> None:
    """Test accessing parameter values."""
    prop = ParsedProperty.from_ics("X;A=1;B=2,3;A=4:v")
    assert prop.get_parameter_value("A") == "1"
    assert prop.get_parameter_values("A") == ["1", "4"]
    assert prop.get_parameter_value("C") is None
    with pytest.raises(ValueError, match="single parameter value"):
        prop.get_parameter_value("B")


def test_equality_ignores_line_number() -> None:
    """Test that properties read from different lines compare equal."""
    assert parse_line("UID:1", line_number=1) == parse_line("UID:1", line_number=9)


def test_property_parser() -> None:
    """Test pulling properties from unfolded lines."""
    parser = PropertyParser(
        LineReader(["SUMMARY:Part \r\n", " one\r\n", "\r\n", "UID:1\r\n"])
    )
    props = list(parser)
    assert [(prop.name, prop.value, prop.line_number) for prop in props] == [
        ("SUMMARY", "Part one", 1),
        ("UID", "1", 4),
    ]


def test_property_parser_error() -> None:
    """Test that a tokenizer error is raised with the logical line number."""
    parser = PropertyParser.from_reader(["UID:1\n", "BROKEN\n"])
    assert next(parser).value == "1"
    with pytest.raises(MissingDelimiter) as exc_info:
        next(parser)
    assert exc_info.value.line_number == 2


def test_parse_contentlines() -> None:
    """Test parsing already unfolded content lines."""
    props = list(parse_contentlines(["BEGIN:VCARD", "", "FN:Forrest Gump"]))
    assert [(prop.name, prop.value) for prop in props] == [
        ("BEGIN", "VCARD"),
        ("FN", "Forrest Gump"),
    ]
    assert props[1].line_number == 3


def test_ics() -> None:
    """Test encoding a single property back to a content line."""
    prop = ParsedProperty(
        name="ATTENDEE",
        value="mailto:jdoe@example.com",
        params=[ParsedPropertyParameter(name="CN", values=["Doe, John"])],
    )
    assert prop.ics() == "ATTENDEE;CN=Doe\\, John:mailto:jdoe@example.com\r\n"
    assert ParsedProperty.from_ics(prop.ics().rstrip("\r\n")) == prop
