"""Encode components back into folded iCalendar or vCard text.

This is the inverse of the parsing pipeline. Each component is written as
a BEGIN line, its properties in their original order, its children in the
fixed order of its kind, and an END line. Every line ends with CRLF.

Lines are folded so that the first physical line holds at most 75
characters and each continuation line holds at most 74 characters after
the single leading space. Folding counts characters rather than bytes so
that a multi-byte character is never split across two physical lines.
"""

from __future__ import annotations

from collections.abc import Generator, Iterable
import logging
from typing import TYPE_CHECKING, TextIO

from .parsing.const import (
    ATTR_BEGIN,
    ATTR_END,
    ESCAPE_CHAR,
    FOLD,
    FOLD_CONTINUATION_LEN,
    FOLD_LEN,
    LINE_BREAK,
    PARAM_DELIMITER,
    PARAM_NAME_DELIMITER,
    PARAM_QUOTE,
    PARAM_VALUE_DELIMITER,
    VALUE_DELIMITER,
)

if TYPE_CHECKING:
    from .component import Component
    from .parsing.property import ParsedProperty, ParsedPropertyParameter

_LOGGER = logging.getLogger(__name__)

_CARET = "^"
_NEWLINE_ESCAPE = ESCAPE_CHAR + "n"
_UNQUOTED_SPECIAL = (PARAM_QUOTE, PARAM_DELIMITER, VALUE_DELIMITER, PARAM_VALUE_DELIMITER)


def fold(contentline: str) -> str:
    """Wrap an unfolded content line into physical lines joined by CRLF-space."""
    if len(contentline) <= FOLD_LEN:
        return contentline
    chunks = [contentline[:FOLD_LEN]]
    for start in range(FOLD_LEN, len(contentline), FOLD_CONTINUATION_LEN):
        chunks.append(contentline[start : start + FOLD_CONTINUATION_LEN])
    return FOLD.join(chunks)


def protect_param_value(value: str) -> str:
    """Escape a parameter value so the tokenizer reads it back unchanged.

    A value that already looks like a quoted literal keeps its quotes and
    only has embedded quotes and newlines escaped. Any other value has
    quotes, newlines, and the ';', ':', ',' and '\\' delimiters escaped.
    A '^' is always written as '^^'.
    """
    if len(value) >= 2 and value[0] == PARAM_QUOTE and value[-1] == PARAM_QUOTE:
        inner = (
            value[1:-1]
            .replace(_CARET, _CARET * 2)
            .replace(PARAM_QUOTE, ESCAPE_CHAR + PARAM_QUOTE)
            .replace("\n", _NEWLINE_ESCAPE)
        )
        return f"{PARAM_QUOTE}{inner}{PARAM_QUOTE}"
    result = value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace(_CARET, _CARET * 2)
    for char in _UNQUOTED_SPECIAL:
        result = result.replace(char, ESCAPE_CHAR + char)
    return result.replace("\n", _NEWLINE_ESCAPE)


def encode_params(params: Iterable[ParsedPropertyParameter]) -> str:
    """Encode property parameters as ';KEY=value1,value2' segments."""
    return "".join(
        PARAM_DELIMITER
        + param.name.upper()
        + PARAM_NAME_DELIMITER
        + PARAM_VALUE_DELIMITER.join(protect_param_value(v) for v in param.values)
        for param in params
    )


def protect_value(value: str) -> str:
    """Escape line breaks in a raw property value as '\\n'.

    A parsed value never contains a line break, but a hand built one may.
    Written unchanged it would split the content line.
    """
    return (
        value.replace(LINE_BREAK, _NEWLINE_ESCAPE)
        .replace("\r", _NEWLINE_ESCAPE)
        .replace("\n", _NEWLINE_ESCAPE)
    )


def encode_contentline(prop: ParsedProperty) -> str:
    """Encode a property as a single unfolded content line."""
    return (
        prop.name.upper()
        + encode_params(prop.params)
        + VALUE_DELIMITER
        + protect_value(prop.value or "")
    )


def encode_property(prop: ParsedProperty) -> str:
    """Encode a property as folded physical lines ending with CRLF."""
    return fold(encode_contentline(prop)) + LINE_BREAK


def iter_component_lines(component: Component) -> Generator[str, None, None]:
    """Generate the encoded text of a component one content line at a time."""
    keyword = component.name
    yield f"{ATTR_BEGIN}{VALUE_DELIMITER}{keyword}{LINE_BREAK}"
    for prop in component.properties:
        yield encode_property(prop)
    for child in component.components():
        yield from iter_component_lines(child)
    yield f"{ATTR_END}{VALUE_DELIMITER}{keyword}{LINE_BREAK}"


def encode_component(component: Component) -> str:
    """Encode a component and its children as text."""
    return "".join(iter_component_lines(component))


def encode_components(components: Iterable[Component]) -> str:
    """Encode a sequence of top level components as one text stream."""
    return "".join(
        line for component in components for line in iter_component_lines(component)
    )


def write_component(component: Component, fp: TextIO) -> None:
    """Write the encoded component to a text stream incrementally."""
    _LOGGER.debug("Writing component %s", component.name)
    for line in iter_component_lines(component):
        fp.write(line)
