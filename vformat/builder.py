"""Builders for constructing components by hand.

Parsed components are immutable, so these builders collect properties
and child components and construct the finished component in `build()`.
Each setter returns the builder so calls can be chained:

```python
from vformat.builder import CalendarBuilder, EventBuilder, make_property

event = (
    EventBuilder(tzid="Europe/Berlin")
    .start(datetime.datetime(2020, 12, 6, 17, 0, 0))
    .set(make_property("SUMMARY", "Concert"))
    .build()
)
calendar = CalendarBuilder().gregorian().prodid().add_event(event).build()
print(calendar.ics())
```

Values may be given either as raw strings, which are used unchanged, or
as python dates and datetimes which are encoded as DATE and DATE-TIME
values.
"""

from __future__ import annotations

from collections.abc import Sequence
import datetime
import logging
from typing import Self

from .component import Alarm, Calendar, Contact, Event, Journal, TimeZone, Todo
from .parsing.property import ParsedProperty, ParsedPropertyParameter
from .types import encode_value
from .util import dtstamp_factory, format_utc_datetime, prodid_factory, uid_factory

__all__ = [
    "make_property",
    "CalendarBuilder",
    "EventBuilder",
    "ContactBuilder",
]

_LOGGER = logging.getLogger(__name__)

GREGORIAN = "GREGORIAN"
VALUE_DATE = "DATE"


def make_property(
    name: str, value: str | None = None, /, **params: str | Sequence[str]
) -> ParsedProperty:
    """Create a property from a name, a raw value, and parameters.

    Parameter names are given as keyword arguments, with underscores
    standing in for dashes, e.g. `x_qq="1"` becomes `X-QQ=1`. A parameter
    may have a single value or a sequence of values:

    ```python
    make_property("TEL", "tel:+1-111-555-1212", type=["work", "voice"], value="uri")
    ```
    """
    return ParsedProperty(
        name=name.upper(),
        value=value,
        params=[
            ParsedPropertyParameter(
                name=key.replace("_", "-").upper(),
                values=[values] if isinstance(values, str) else list(values),
            )
            for key, values in params.items()
        ],
    )


def _date_value(value: datetime.date | str) -> str:
    if isinstance(value, datetime.datetime):
        raise ValueError(f"Expected a date without a time, got {value}")
    if isinstance(value, datetime.date):
        return encode_value(value, "DATE")
    return value


def _date_time_value(value: datetime.datetime | str) -> str:
    if isinstance(value, datetime.datetime):
        return encode_value(value, "DATE-TIME")
    return value


class CalendarBuilder:
    """Build a VCALENDAR with its version, scale and product identifier."""

    def __init__(self, version: str = "2.0") -> None:
        """Initialize CalendarBuilder."""
        self._properties: list[ParsedProperty] = [make_property("VERSION", version)]
        self._events: list[Event] = []
        self._timezones: list[TimeZone] = []
        self._todos: list[Todo] = []
        self._journals: list[Journal] = []

    def gregorian(self) -> Self:
        """Set the calendar scale to GREGORIAN, the default."""
        return self.scale(GREGORIAN)

    def scale(self, scale: str) -> Self:
        """Set the calendar scale."""
        self._properties.append(make_property("CALSCALE", scale))
        return self

    def prodid(self, prodid: str | None = None) -> Self:
        """Set the product identifier, defaulting to this library."""
        self._properties.append(make_property("PRODID", prodid or prodid_factory()))
        return self

    def set(self, prop: ParsedProperty) -> Self:
        """Add an arbitrary property to the calendar."""
        self._properties.append(prop)
        return self

    def add_event(self, event: Event) -> Self:
        """Add an event to the calendar."""
        self._events.append(event)
        return self

    def add_timezone(self, timezone: TimeZone) -> Self:
        """Add a timezone definition to the calendar."""
        self._timezones.append(timezone)
        return self

    def add_todo(self, todo: Todo) -> Self:
        """Add a to-do to the calendar."""
        self._todos.append(todo)
        return self

    def add_journal(self, journal: Journal) -> Self:
        """Add a journal entry to the calendar."""
        self._journals.append(journal)
        return self

    def build(self) -> Calendar:
        """Create the calendar, adding a PRODID if none was set."""
        properties = list(self._properties)
        if not any(prop.name == "PRODID" for prop in properties):
            properties.append(make_property("PRODID", prodid_factory()))
        return Calendar(
            properties=properties,
            events=list(self._events),
            timezones=list(self._timezones),
            todos=list(self._todos),
            journals=list(self._journals),
        )


class EventBuilder:
    """Build a VEVENT whose local times are in a single timezone.

    When a `tzid` is given, DTSTAMP, DTSTART and DTEND values set with
    local times carry a TZID parameter.
    """

    def __init__(self, tzid: str | None = None) -> None:
        """Initialize EventBuilder."""
        self._tzid = tzid
        self._properties: list[ParsedProperty] = []
        self._alarms: list[Alarm] = []

    def _local(self, name: str, value: str) -> ParsedProperty:
        if self._tzid:
            return make_property(name, value, TZID=self._tzid)
        return make_property(name, value)

    def uid(self, uid: str) -> Self:
        """Set the unique identifier of the event."""
        self._properties.append(make_property("UID", uid))
        return self

    def changed(self, dtstamp: datetime.datetime | str) -> Self:
        """Set the DTSTAMP of the event as a local time."""
        self._properties.append(self._local("DTSTAMP", _date_time_value(dtstamp)))
        return self

    def changed_utc(self, dtstamp: datetime.datetime | str) -> Self:
        """Set the DTSTAMP of the event as a UTC time."""
        if isinstance(dtstamp, datetime.datetime):
            dtstamp = format_utc_datetime(dtstamp)
        self._properties.append(make_property("DTSTAMP", dtstamp))
        return self

    def start(self, value: datetime.datetime | str) -> Self:
        """Set the DTSTART of the event as a local time."""
        self._properties.append(self._local("DTSTART", _date_time_value(value)))
        return self

    def start_day(self, value: datetime.date | str) -> Self:
        """Set the DTSTART of an all day event."""
        self._properties.append(
            make_property("DTSTART", _date_value(value), VALUE=VALUE_DATE)
        )
        return self

    def end(self, value: datetime.datetime | str) -> Self:
        """Set the DTEND of the event as a local time."""
        self._properties.append(self._local("DTEND", _date_time_value(value)))
        return self

    def end_day(self, value: datetime.date | str) -> Self:
        """Set the DTEND of an all day event."""
        self._properties.append(
            make_property("DTEND", _date_value(value), VALUE=VALUE_DATE)
        )
        return self

    def duration(self, value: datetime.timedelta | str) -> Self:
        """Set the DURATION of the event, e.g. PT2H45M."""
        if isinstance(value, datetime.timedelta):
            value = encode_value(value, "DURATION")
        self._properties.append(make_property("DURATION", value))
        return self

    def repeat_rule(self, rule: str) -> Self:
        """Set the RRULE of the event, e.g. FREQ=YEARLY."""
        self._properties.append(make_property("RRULE", rule))
        return self

    def set(self, prop: ParsedProperty) -> Self:
        """Add an arbitrary property to the event."""
        self._properties.append(prop)
        return self

    def add_alarm(self, alarm: Alarm) -> Self:
        """Add an alarm to the event."""
        self._alarms.append(alarm)
        return self

    def build(self) -> Event:
        """Create the event, generating a UID and DTSTAMP if not set."""
        properties = list(self._properties)
        names = {prop.name for prop in properties}
        if "DTSTAMP" not in names:
            properties.insert(
                0, make_property("DTSTAMP", format_utc_datetime(dtstamp_factory()))
            )
        if "UID" not in names:
            properties.insert(0, make_property("UID", uid_factory()))
        _LOGGER.debug("Building event with %d properties", len(properties))
        return Event(properties=properties, alarms=list(self._alarms))


class ContactBuilder:
    """Build a VCARD with its structured and formatted name."""

    def __init__(self, version: str = "4.0") -> None:
        """Initialize ContactBuilder."""
        self._properties: list[ParsedProperty] = [make_property("VERSION", version)]
        self._names: list[str] = []

    def name(self, name: str) -> Self:
        """Set the raw N value, e.g. Public;John;Quinlan;Mr.;Esq."""
        self._names = name.split(";")
        self._properties.append(make_property("N", name))
        return self

    def names(
        self,
        family: str | None = None,
        given: str | None = None,
        additional: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
    ) -> Self:
        """Set the N value from its five name components."""
        parts = [family, given, additional, prefix, suffix]
        return self.name(";".join(part or "" for part in parts))

    def formatted_name(self, formatted_name: str) -> Self:
        """Set the FN value, e.g. Mr. John Q. Public, Esq."""
        self._properties.append(make_property("FN", formatted_name))
        return self

    def generate_fn(self) -> Self:
        """Set the FN value generated from the N name components.

        The name is written as prefix, given, additional, family and
        suffix separated by spaces, skipping empty components.
        """
        order = (3, 1, 2, 0, 4)
        parts = [
            self._names[index].strip()
            for index in order
            if index < len(self._names)
        ]
        return self.formatted_name(" ".join(part for part in parts if part))

    def set(self, prop: ParsedProperty) -> Self:
        """Add an arbitrary property to the contact."""
        self._properties.append(prop)
        return self

    def build(self) -> Contact:
        """Create the contact."""
        return Contact(properties=list(self._properties))
