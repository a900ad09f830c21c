"""Library for tokenizing content lines into properties and parameters.

A property is the definition of an individual attribute describing a
calendar or contact object. A property is also really just a
"contentline", however properties in this file are the output of the
tokenizer and do not yet have any place in a component hierarchy.

This is a very simple tokenizer that converts lines in an iCalendar or
vCard file into an object structure with necessary relationships to
interpret the meaning of the content lines and how the parts break down
into properties and parameters. This library does not attempt to
interpret the meaning of the property values themselves.

For example, given a content line of:

  TEL;TYPE=work,voice:+1-111-555-1212

This library would create a ParsedProperty object with this structure:

  ParsedProperty(
    name='TEL',
    value='+1-111-555-1212',
    params=[
        ParsedPropertyParameter(
            name='TYPE',
            values=['work', 'voice']
        )
    ]
  )
"""

from __future__ import annotations

from collections.abc import Generator, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
import logging

from vformat.exceptions import (
    MissingClosingQuote,
    MissingContentAfter,
    MissingDelimiter,
    MissingName,
    MissingParamKey,
    PropertyParseError,
)

from .const import (
    ESCAPE_CHAR,
    PARAM_DELIMITER,
    PARAM_NAME_DELIMITER,
    PARAM_QUOTE,
    PARAM_VALUE_DELIMITER,
    VALUE_DELIMITER,
)
from .line import LineReader, LogicalLine

_LOGGER = logging.getLogger(__name__)

_NAME_DELIMITERS = (PARAM_DELIMITER, VALUE_DELIMITER)
_PARAM_NAME_DELIMITERS = (PARAM_NAME_DELIMITER, PARAM_DELIMITER, VALUE_DELIMITER)
_PARAM_DELIMITERS = (PARAM_VALUE_DELIMITER, PARAM_DELIMITER, VALUE_DELIMITER)

# Backslash escapes decoded in parameter values
_RAW_UNESCAPE = {
    "\\": "\\",
    ";": ";",
    ":": ":",
    ",": ",",
    '"': '"',
    "n": "\n",
    "N": "\n",
}
_QUOTED_UNESCAPE = {'"': '"', "n": "\n", "N": "\n"}

# rfc6868 parameter value encoding
_CARET = "^"
_CARET_UNESCAPE = {"'": '"', "n": "\n", "^": "^"}


def _find_unescaped(
    line: str, chars: Sequence[str], start: int = 0
) -> int | None:
    """Find the earliest occurrence of any character not escaped by a backslash."""
    pos = start
    line_len = len(line)
    while pos < line_len:
        char = line[pos]
        if char == ESCAPE_CHAR:
            pos += 2
            continue
        if char in chars:
            return pos
        pos += 1
    return None


def _unescape(value: str, escapes: dict[str, str]) -> str:
    """Decode backslash escapes and rfc6868 caret escapes in a parameter value."""
    if ESCAPE_CHAR not in value and _CARET not in value:
        return value
    result: list[str] = []
    pos = 0
    value_len = len(value)
    while pos < value_len:
        char = value[pos]
        if pos + 1 < value_len:
            nxt = value[pos + 1]
            if char == ESCAPE_CHAR and nxt in escapes:
                result.append(escapes[nxt])
                pos += 2
                continue
            if char == _CARET and nxt in _CARET_UNESCAPE:
                result.append(_CARET_UNESCAPE[nxt])
                pos += 2
                continue
        result.append(char)
        pos += 1
    return "".join(result)


@dataclass
class ParsedPropertyParameter:
    """A property parameter with one or more values."""

    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class ParsedProperty:
    """A property with its name, parameters and raw value."""

    name: str
    value: str | None = None
    params: list[ParsedPropertyParameter] = field(default_factory=list)
    line_number: int | None = field(default=None, compare=False, repr=False)
    """Line the property was read from, only used for error reporting."""

    def get_parameter(self, name: str) -> ParsedPropertyParameter | None:
        """Return the first ParsedPropertyParameter with the specified name."""
        for param in self.params:
            if param.name.upper() == name.upper():
                return param
        return None

    def get_parameter_values(self, name: str) -> list[str]:
        """Return the values of all parameters with the specified name."""
        values: list[str] = []
        for param in self.params:
            if param.name.upper() == name.upper():
                values.extend(param.values)
        return values

    def get_parameter_value(self, name: str) -> str | None:
        """Return the property parameter value."""
        if not (param := self.get_parameter(name)) or not param.values:
            return None
        if len(param.values) > 1:
            raise ValueError(
                f"Expected only a single parameter value, got {param.values}"
            )
        return param.values[0]

    def ics(self) -> str:
        """Encode the property as a folded content line."""
        # Imported here since the generator depends on this module
        from vformat.generator import encode_property

        return encode_property(self)

    @classmethod
    def from_ics(cls, contentline: str, line_number: int = 0) -> ParsedProperty:
        """Decode a ParsedProperty from an unfolded content line.

        Will raise a PropertyParseError on failure.
        """
        return parse_line(contentline, line_number)


def _parse_param_values(
    line: str, pos: int, line_number: int
) -> tuple[list[str], int]:
    """Parse one or more comma separated parameter values starting at pos.

    Returns the values and the position of the delimiter that ended them.
    """
    values: list[str] = []
    while True:
        if line.startswith(PARAM_QUOTE, pos):
            if (end_quote := _find_unescaped(line, PARAM_QUOTE, pos + 1)) is None:
                raise MissingClosingQuote(
                    "Quoted parameter value has no closing quote",
                    line_number=line_number,
                    detailed_error=line,
                )
            values.append(_unescape(line[pos + 1 : end_quote], _QUOTED_UNESCAPE))
            pos = end_quote + 1
            if pos >= len(line):
                # Line ends after the closing quote, the property has no value
                return values, pos
            if line[pos] not in _PARAM_DELIMITERS:
                raise MissingDelimiter(
                    f"Expected one of {_PARAM_DELIMITERS} after quoted parameter "
                    f"value, got '{line[pos]}'",
                    line_number=line_number,
                    detailed_error=line,
                )
        else:
            if (end_pos := _find_unescaped(line, _PARAM_DELIMITERS, pos)) is None:
                raise MissingContentAfter(
                    f"Unexpected end of line after '{PARAM_NAME_DELIMITER}', "
                    f"expected '{VALUE_DELIMITER}'",
                    line_number=line_number,
                    detailed_error=line,
                )
            values.append(_unescape(line[pos:end_pos], _RAW_UNESCAPE))
            pos = end_pos

        if line[pos] != PARAM_VALUE_DELIMITER:
            return values, pos
        pos += 1


def parse_line(line: str, line_number: int = 0) -> ParsedProperty:
    """Tokenize a single unfolded content line."""

    # parse NAME
    if (name_end := _find_unescaped(line, _NAME_DELIMITERS)) is None:
        raise MissingDelimiter(
            f"Invalid property line, expected one of {_NAME_DELIMITERS} "
            "after property name",
            line_number=line_number,
            detailed_error=line,
        )
    if name_end == 0:
        raise MissingName(
            "Property line has no name",
            line_number=line_number,
            detailed_error=line,
        )
    name = line[:name_end].upper()
    pos = name_end

    # parse PARAMS if any
    params: list[ParsedPropertyParameter] = []
    while line.startswith(PARAM_DELIMITER, pos):
        pos += 1
        if pos >= len(line):
            raise MissingContentAfter(
                f"Unexpected end of line after '{PARAM_DELIMITER}'",
                line_number=line_number,
                detailed_error=line,
            )
        key_end = _find_unescaped(line, _PARAM_NAME_DELIMITERS, pos)
        if key_end is None or line[key_end] != PARAM_NAME_DELIMITER:
            raise MissingDelimiter(
                f"Invalid parameter format: missing '{PARAM_NAME_DELIMITER}' "
                f"after parameter name part '{line[pos:key_end]}'",
                line_number=line_number,
                detailed_error=line,
            )
        if key_end == pos:
            raise MissingParamKey(
                "Parameter has an empty name",
                line_number=line_number,
                detailed_error=line,
            )
        key = line[pos:key_end].upper()
        values, pos = _parse_param_values(line, key_end + 1, line_number)
        params.append(ParsedPropertyParameter(name=key, values=values))

    # parse VALUE
    if line.startswith(VALUE_DELIMITER, pos):
        pos += 1
    value = line[pos:] or None

    return ParsedProperty(
        name=name, value=value, params=params, line_number=line_number
    )


class PropertyParser(Iterator[ParsedProperty]):
    """Pull tokenized properties out of a LineReader, one per logical line."""

    def __init__(self, line_reader: Iterator[LogicalLine]) -> None:
        """Initialize PropertyParser."""
        self._line_reader = line_reader

    @classmethod
    def from_reader(cls, source: Iterable[str | bytes]) -> PropertyParser:
        """Create a PropertyParser reading physical lines from a source."""
        return cls(LineReader(source))

    def __iter__(self) -> PropertyParser:
        return self

    def __next__(self) -> ParsedProperty:
        line = next(self._line_reader)
        try:
            return parse_line(line.text, line.line_number)
        except PropertyParseError as err:
            _LOGGER.debug("Failed to parse %s: %s", line, err.message)
            raise


def parse_contentlines(
    contentlines: Iterable[str | LogicalLine],
) -> Generator[ParsedProperty, None, None]:
    """Parse unfolded content lines into ParsedProperty objects."""
    for number, contentline in enumerate(contentlines, start=1):
        if isinstance(contentline, LogicalLine):
            yield parse_line(contentline.text, contentline.line_number)
        elif contentline:
            yield parse_line(contentline, number)
