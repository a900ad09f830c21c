"""Read and write streams of iCalendar and vCard documents.

A single .ics or .vcf file may contain more than one top level object.
The `iter_*` functions parse one document per iteration so large
streams can be processed without holding every document in memory:

```python
from vformat.stream import iter_contacts

with open("contacts.vcf", "rb") as fp:
    for contact in iter_contacts(fp):
        print(contact.get_property("FN"))
```

A source may be a str, bytes, or any iterable of physical lines such as
an open text or binary file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import io
import logging
from typing import TextIO

from .component import Calendar, Component, Contact
from .generator import encode_components, write_component
from .parsing.component import IcalParser, VcardParser

__all__ = [
    "iter_calendars",
    "iter_contacts",
    "read_calendars",
    "read_contacts",
    "calendars_to_ics",
    "contacts_to_vcf",
    "write_components",
]

_LOGGER = logging.getLogger(__name__)

Source = str | bytes | Iterable[str] | Iterable[bytes]


def _lines(source: Source) -> Iterable[str | bytes]:
    if isinstance(source, str):
        return io.StringIO(source, newline="")
    if isinstance(source, bytes):
        return io.BytesIO(source)
    return source


def iter_calendars(source: Source, max_depth: int | None = None) -> Iterator[Calendar]:
    """Iterate over the VCALENDAR objects in a source."""
    return IcalParser.from_reader(_lines(source), max_depth=max_depth)


def iter_contacts(source: Source, max_depth: int | None = None) -> Iterator[Contact]:
    """Iterate over the VCARD objects in a source."""
    return VcardParser.from_reader(_lines(source), max_depth=max_depth)


def read_calendars(source: Source) -> list[Calendar]:
    """Parse every VCALENDAR object in a source.

    Raises a ParseError for the first document that fails to parse.
    """
    calendars = list(iter_calendars(source))
    _LOGGER.debug("Read %d calendars", len(calendars))
    return calendars


def read_contacts(source: Source) -> list[Contact]:
    """Parse every VCARD object in a source.

    Raises a ParseError for the first document that fails to parse.
    """
    contacts = list(iter_contacts(source))
    _LOGGER.debug("Read %d contacts", len(contacts))
    return contacts


def calendars_to_ics(calendars: Iterable[Calendar]) -> str:
    """Encode calendars as the text of an .ics file."""
    return encode_components(calendars)


def contacts_to_vcf(contacts: Iterable[Contact]) -> str:
    """Encode contacts as the text of a .vcf file."""
    return encode_components(contacts)


def write_components(components: Iterable[Component], fp: TextIO) -> None:
    """Write top level components to a text stream one at a time.

    The stream should be opened with `newline=""` so the CRLF line
    endings are written unchanged.
    """
    for component in components:
        write_component(component, fp)
