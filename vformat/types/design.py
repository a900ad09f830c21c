"""Default value types for well known iCalendar and vCard properties.

A property value is interpreted according to its VALUE parameter when
present, otherwise by the entry for its name in a design table. Names
without an entry are treated as TEXT.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DesignElem:
    """How to interpret the raw value of a property."""

    value_type: str = "TEXT"
    """Name of the registered value type used by default."""

    multi_value: str | None = None
    """Separator between repeated values within one property, if allowed."""

    structured_value: str | None = None
    """Separator between the components of a structured value."""

    allowed_types: tuple[str, ...] = field(default_factory=tuple)
    """Other value types tried when the default does not match."""


Design = dict[str, DesignElem]

DEFAULT_TYPE_TEXT = DesignElem()
DEFAULT_TYPE_TEXT_MULTI = DesignElem(multi_value=",")
DEFAULT_TYPE_TEXT_STRUCTURED = DesignElem(structured_value=";")
DEFAULT_TYPE_INTEGER = DesignElem("INTEGER")
DEFAULT_TYPE_URI = DesignElem("URI")
DEFAULT_TYPE_CAL_ADDRESS = DesignElem("CAL-ADDRESS")
DEFAULT_TYPE_DATE_TIME = DesignElem("DATE-TIME", allowed_types=("DATE",))
DEFAULT_TYPE_DATE_TIME_MULTI = DesignElem(
    "DATE-TIME", multi_value=",", allowed_types=("DATE",)
)
DEFAULT_TYPE_UTC_DATE_TIME = DesignElem("DATE-TIME")
DEFAULT_TYPE_UTC_OFFSET = DesignElem("UTC-OFFSET")

ICAL_DESIGN: Design = {
    # Calendar properties
    "CALSCALE": DEFAULT_TYPE_TEXT,
    "METHOD": DEFAULT_TYPE_TEXT,
    "PRODID": DEFAULT_TYPE_TEXT,
    "VERSION": DEFAULT_TYPE_TEXT,
    # Descriptive component properties
    "ATTACH": DesignElem("URI", allowed_types=("BINARY",)),
    "CATEGORIES": DEFAULT_TYPE_TEXT_MULTI,
    "CLASS": DEFAULT_TYPE_TEXT,
    "COMMENT": DEFAULT_TYPE_TEXT,
    "DESCRIPTION": DEFAULT_TYPE_TEXT,
    "GEO": DesignElem("FLOAT", structured_value=";"),
    "LOCATION": DEFAULT_TYPE_TEXT,
    "PERCENT-COMPLETE": DEFAULT_TYPE_INTEGER,
    "PRIORITY": DEFAULT_TYPE_INTEGER,
    "RESOURCES": DEFAULT_TYPE_TEXT_MULTI,
    "STATUS": DEFAULT_TYPE_TEXT,
    "SUMMARY": DEFAULT_TYPE_TEXT,
    # Date and time component properties
    "COMPLETED": DEFAULT_TYPE_UTC_DATE_TIME,
    "DTEND": DEFAULT_TYPE_DATE_TIME,
    "DUE": DEFAULT_TYPE_DATE_TIME,
    "DTSTART": DEFAULT_TYPE_DATE_TIME,
    "DURATION": DesignElem("DURATION"),
    "FREEBUSY": DesignElem("PERIOD", multi_value=","),
    "TRANSP": DEFAULT_TYPE_TEXT,
    # Time zone component properties
    "TZID": DEFAULT_TYPE_TEXT,
    "TZNAME": DEFAULT_TYPE_TEXT,
    "TZOFFSETFROM": DEFAULT_TYPE_UTC_OFFSET,
    "TZOFFSETTO": DEFAULT_TYPE_UTC_OFFSET,
    "TZURL": DEFAULT_TYPE_URI,
    # Relationship component properties
    "ATTENDEE": DEFAULT_TYPE_CAL_ADDRESS,
    "CONTACT": DEFAULT_TYPE_TEXT,
    "ORGANIZER": DEFAULT_TYPE_CAL_ADDRESS,
    "RECURRENCE-ID": DEFAULT_TYPE_DATE_TIME,
    "RELATED-TO": DEFAULT_TYPE_TEXT,
    "URL": DEFAULT_TYPE_URI,
    "UID": DEFAULT_TYPE_TEXT,
    # Recurrence component properties
    "EXDATE": DEFAULT_TYPE_DATE_TIME_MULTI,
    "RDATE": DesignElem("DATE-TIME", multi_value=",", allowed_types=("DATE", "PERIOD")),
    "RRULE": DesignElem("RECUR"),
    # Alarm component properties
    "ACTION": DEFAULT_TYPE_TEXT,
    "REPEAT": DEFAULT_TYPE_INTEGER,
    "TRIGGER": DesignElem("DURATION", allowed_types=("DATE-TIME",)),
    # Change management component properties
    "CREATED": DEFAULT_TYPE_UTC_DATE_TIME,
    "DTSTAMP": DEFAULT_TYPE_UTC_DATE_TIME,
    "LAST-MODIFIED": DEFAULT_TYPE_UTC_DATE_TIME,
    "SEQUENCE": DEFAULT_TYPE_INTEGER,
    # Miscellaneous component properties
    "REQUEST-STATUS": DEFAULT_TYPE_TEXT_STRUCTURED,
}

VCARD_DESIGN: Design = {
    "ADR": DesignElem(multi_value=",", structured_value=";"),
    "ANNIVERSARY": DesignElem("DATE-AND-OR-TIME", allowed_types=("TEXT",)),
    "BDAY": DesignElem("DATE-AND-OR-TIME", allowed_types=("TEXT",)),
    "CALADRURI": DEFAULT_TYPE_URI,
    "CALURI": DEFAULT_TYPE_URI,
    "CATEGORIES": DEFAULT_TYPE_TEXT_MULTI,
    "CLIENTPIDMAP": DEFAULT_TYPE_TEXT_STRUCTURED,
    "EMAIL": DEFAULT_TYPE_TEXT,
    "FBURL": DEFAULT_TYPE_URI,
    "FN": DEFAULT_TYPE_TEXT,
    "GENDER": DEFAULT_TYPE_TEXT_STRUCTURED,
    "GEO": DEFAULT_TYPE_URI,
    "IMPP": DEFAULT_TYPE_URI,
    "KEY": DesignElem("URI", allowed_types=("TEXT",)),
    "KIND": DEFAULT_TYPE_TEXT,
    "LANG": DesignElem("LANGUAGE-TAG"),
    "LOGO": DEFAULT_TYPE_URI,
    "MEMBER": DEFAULT_TYPE_URI,
    "N": DesignElem(multi_value=",", structured_value=";"),
    "NICKNAME": DEFAULT_TYPE_TEXT_MULTI,
    "NOTE": DEFAULT_TYPE_TEXT,
    "ORG": DEFAULT_TYPE_TEXT_STRUCTURED,
    "PHOTO": DEFAULT_TYPE_URI,
    "PRODID": DEFAULT_TYPE_TEXT,
    "RELATED": DesignElem("URI", allowed_types=("TEXT",)),
    "REV": DesignElem("TIMESTAMP"),
    "ROLE": DEFAULT_TYPE_TEXT,
    "SOUND": DEFAULT_TYPE_URI,
    "SOURCE": DEFAULT_TYPE_URI,
    "TEL": DesignElem("URI", allowed_types=("TEXT",)),
    "TITLE": DEFAULT_TYPE_TEXT,
    "TZ": DesignElem("TEXT", allowed_types=("URI", "UTC-OFFSET")),
    "UID": DesignElem("URI", allowed_types=("TEXT",)),
    "URL": DEFAULT_TYPE_URI,
    "VERSION": DEFAULT_TYPE_TEXT,
    "XML": DEFAULT_TYPE_TEXT,
}
