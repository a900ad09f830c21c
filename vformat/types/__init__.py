"""Typed interpretation of raw property values.

The parsers keep every property value as the raw string read from the
content line. This package turns a raw value into a python value on
demand, e.g.

```python
from vformat.types import parse_property_value

dtstart = parse_property_value(event.get_property("DTSTART"))
```

The value type comes from the VALUE parameter of the property when
present, otherwise from the design table for the property name.
"""

from __future__ import annotations

from typing import Any

from vformat.exceptions import PropertyValueError
from vformat.parsing.const import ATTR_VALUE, ESCAPE_CHAR
from vformat.parsing.property import ParsedProperty

from .binary import BinaryEncoder
from .boolean import BooleanEncoder
from .data_types import DATA_TYPE
from .date import DateEncoder
from .date_time import DateAndOrTimeEncoder, DateTimeEncoder, TimeEncoder
from .design import DEFAULT_TYPE_TEXT, ICAL_DESIGN, VCARD_DESIGN, Design, DesignElem
from .duration import DurationEncoder
from .float import FloatEncoder
from .integer import IntEncoder
from .period import PeriodEncoder
from .recur import RecurEncoder
from .text import TextEncoder
from .uri import LanguageTagEncoder, UriEncoder
from .utc_offset import UtcOffsetEncoder

__all__ = [
    "BinaryEncoder",
    "BooleanEncoder",
    "DateAndOrTimeEncoder",
    "DateEncoder",
    "DateTimeEncoder",
    "DurationEncoder",
    "FloatEncoder",
    "IntEncoder",
    "LanguageTagEncoder",
    "PeriodEncoder",
    "RecurEncoder",
    "TextEncoder",
    "TimeEncoder",
    "UriEncoder",
    "UtcOffsetEncoder",
    "DATA_TYPE",
    "Design",
    "DesignElem",
    "ICAL_DESIGN",
    "VCARD_DESIGN",
    "encode_value",
    "parse_property_value",
    "parse_value",
    "split_value",
]


def split_value(value: str, separator: str) -> list[str]:
    """Split a raw value on every separator not escaped by a backslash."""
    parts: list[str] = []
    start = pos = 0
    while pos < len(value):
        char = value[pos]
        if char == ESCAPE_CHAR:
            pos += 2
            continue
        if char == separator:
            parts.append(value[start:pos])
            start = pos + 1
        pos += 1
    parts.append(value[start:])
    return parts


def parse_value(raw_value: str, value_type: str | None = None) -> Any:
    """Parse a single raw value, as TEXT when no value type is given."""
    return DATA_TYPE.parse_value(raw_value, value_type or DEFAULT_TYPE_TEXT.value_type)


def encode_value(value: Any, value_type: str) -> str:
    """Encode a python value as a raw value of the given value type."""
    return DATA_TYPE.encode_value(value, value_type)


def _parse_multi(raw_value: str, elem: DesignElem, value_type: str) -> Any:
    if elem.multi_value:
        return [
            DATA_TYPE.parse_value(item, value_type)
            for item in split_value(raw_value, elem.multi_value)
        ]
    return DATA_TYPE.parse_value(raw_value, value_type)


def _parse_design(raw_value: str, elem: DesignElem, value_type: str) -> Any:
    if elem.structured_value:
        return [
            _parse_multi(part, elem, value_type)
            for part in split_value(raw_value, elem.structured_value)
        ]
    return _parse_multi(raw_value, elem, value_type)


def parse_property_value(prop: ParsedProperty, design: Design = ICAL_DESIGN) -> Any:
    """Parse the raw value of a property into a python value.

    Multi-valued properties return a list, structured properties return a
    list with one entry per component. Returns None for a property that
    has no value.
    """
    if prop.value is None:
        return None
    elem = design.get(prop.name.upper(), DEFAULT_TYPE_TEXT)
    if declared := prop.get_parameter_value(ATTR_VALUE):
        if declared not in DATA_TYPE:
            # Unknown value types are treated as TEXT
            declared = DEFAULT_TYPE_TEXT.value_type
        value_types = [declared]
    else:
        value_types = [elem.value_type, *elem.allowed_types]

    error: PropertyValueError | None = None
    for value_type in value_types:
        try:
            return _parse_design(prop.value, elem, value_type)
        except PropertyValueError as err:
            error = err
    assert error is not None
    raise PropertyValueError(
        f"Property {prop.name} value does not match {value_types}: {error}"
    ) from error
