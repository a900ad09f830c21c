"""Library for diagnostics or debugging information about calendars and contacts."""

from __future__ import annotations

from collections.abc import Generator
import io
import itertools

from .exceptions import PropertyParseError
from .generator import encode_contentline
from .parsing.line import LineReader
from .parsing.property import ParsedProperty, parse_line

__all__ = [
    "redact",
]


PROPERTY_ALLOWLIST = {
    "BEGIN",
    "END",
    "VERSION",
    "DTSTAMP",
    "CREATED",
    "LAST-MODIFIED",
    "REV",
    "DTSTART",
    "DTEND",
    "RRULE",
    "PRODID",
}
REDACT = "***"
MAX_CONTENTLINES = 5000


def redact_property(prop: ParsedProperty, property_allowlist: set[str]) -> str:
    """Return a redacted version of a property as a content line."""
    if prop.name in property_allowlist:
        return encode_contentline(prop)
    return f"{prop.name}:{REDACT}"


def redact(
    content: str,
    max_contentlines: int = MAX_CONTENTLINES,
    allowlist: set[str] | None = None,
) -> Generator[str, None, None]:
    """Generate redacted ics or vcf file contents one content line at a time.

    Parameters are dropped from redacted properties since they may also
    contain personal information. Lines that can't be parsed are replaced
    entirely.
    """
    allowlist = allowlist or PROPERTY_ALLOWLIST
    lines = LineReader(io.StringIO(content, newline=""))
    for line in itertools.islice(lines, max_contentlines):
        try:
            prop = parse_line(line.text, line.line_number)
        except PropertyParseError:
            yield REDACT
            continue
        yield redact_property(prop, allowlist)
