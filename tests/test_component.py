"""Tests for the component data model."""

import pydantic
import pytest

from vformat.component import (
    CHILD_COMPONENTS,
    Alarm,
    Calendar,
    ComponentKind,
    Contact,
    Event,
    FreeBusy,
    Journal,
    TimeZone,
    TimeZoneTransition,
    Todo,
    allowed_children,
    new_component,
)
from vformat.parsing.property import ParsedProperty, ParsedPropertyParameter
from vformat.stream import read_calendars, read_contacts

END_TO_END = (
    "BEGIN:VCALENDAR\r\n"
    "VERSION:2.0\r\n"
    "BEGIN:VEVENT\r\n"
    "UID:1\r\n"
    "SUMMARY:Test\r\n"
    "END:VEVENT\r\n"
    "END:VCALENDAR\r\n"
)


@pytest.mark.parametrize(
    ("keyword", "kind"),
    [
        ("VCALENDAR", ComponentKind.CALENDAR),
        ("vevent", ComponentKind.EVENT),
        ("Daylight", ComponentKind.DAYLIGHT),
        ("VCARD", ComponentKind.CONTACT),
        ("X-UNKNOWN", None),
        ("", None),
        (None, None),
    ],
)
def test_from_keyword(keyword: str | None, kind: ComponentKind | None) -> None:
    """Test looking up a component kind from a BEGIN value."""
    assert ComponentKind.from_keyword(keyword) is kind


def test_adjacency_table() -> None:
    """Test the allowed child kinds of each parent."""
    assert list(allowed_children(ComponentKind.CALENDAR)) == [
        ComponentKind.TIMEZONE,
        ComponentKind.EVENT,
        ComponentKind.ALARM,
        ComponentKind.TODO,
        ComponentKind.JOURNAL,
        ComponentKind.FREEBUSY,
    ]
    assert list(allowed_children(ComponentKind.EVENT)) == [ComponentKind.ALARM]
    assert list(allowed_children(ComponentKind.TODO)) == [ComponentKind.ALARM]
    assert list(allowed_children(ComponentKind.TIMEZONE)) == [
        ComponentKind.STANDARD,
        ComponentKind.DAYLIGHT,
    ]
    for leaf in (
        ComponentKind.ALARM,
        ComponentKind.JOURNAL,
        ComponentKind.FREEBUSY,
        ComponentKind.STANDARD,
        ComponentKind.DAYLIGHT,
        ComponentKind.CONTACT,
    ):
        assert leaf not in CHILD_COMPONENTS
        assert allowed_children(leaf) == {}


@pytest.mark.parametrize(
    ("kind", "model"),
    [
        (ComponentKind.CALENDAR, Calendar),
        (ComponentKind.EVENT, Event),
        (ComponentKind.TODO, Todo),
        (ComponentKind.JOURNAL, Journal),
        (ComponentKind.FREEBUSY, FreeBusy),
        (ComponentKind.ALARM, Alarm),
        (ComponentKind.TIMEZONE, TimeZone),
        (ComponentKind.STANDARD, TimeZoneTransition),
        (ComponentKind.DAYLIGHT, TimeZoneTransition),
        (ComponentKind.CONTACT, Contact),
    ],
)
def test_new_component(kind: ComponentKind, model: type) -> None:
    """Test constructing each kind of component."""
    children = {field_name: [] for field_name in allowed_children(kind).values()}
    component = new_component(kind, [ParsedProperty(name="UID", value="1")], children)
    assert isinstance(component, model)
    assert component.kind is kind
    assert component.name == kind.value
    assert list(component.components()) == []


def test_property_access() -> None:
    """Test looking up properties by name."""
    event = Event(
        properties=[
            ParsedProperty(name="ATTENDEE", value="mailto:a@example.com"),
            ParsedProperty(name="SUMMARY", value="Meeting"),
            ParsedProperty(name="ATTENDEE", value="mailto:b@example.com"),
        ]
    )
    summary = event.get_property("summary")
    assert summary
    assert summary.value == "Meeting"
    assert [p.value for p in event.get_properties("ATTENDEE")] == [
        "mailto:a@example.com",
        "mailto:b@example.com",
    ]
    assert event.get_property("DTSTART") is None
    assert event.get_properties("DTSTART") == []


def test_components_are_frozen() -> None:
    """Test that a built component can't be reassigned."""
    event = Event()
    with pytest.raises(pydantic.ValidationError):
        event.properties = []  # type: ignore[misc]


def test_children_are_validated() -> None:
    """Test that a child of the wrong kind can't be attached."""
    with pytest.raises(pydantic.ValidationError):
        Event(alarms=[Todo()])
    with pytest.raises(pydantic.ValidationError):
        Calendar(events=[Contact()])


def test_end_to_end() -> None:
    """Test parsing a calendar and encoding it back."""
    calendars = read_calendars(END_TO_END)
    assert len(calendars) == 1
    calendar = calendars[0]
    assert calendar.properties == [ParsedProperty(name="VERSION", value="2.0")]
    assert len(calendar.events) == 1
    assert calendar.events[0].properties == [
        ParsedProperty(name="UID", value="1"),
        ParsedProperty(name="SUMMARY", value="Test"),
    ]
    assert calendar.ics() == END_TO_END


def test_round_trip_built_tree() -> None:
    """Test that a tree built in memory is reproduced by parsing its text."""
    calendar = Calendar(
        properties=[
            ParsedProperty(name="VERSION", value="2.0"),
            ParsedProperty(name="PRODID", value="-//example//1.2.3"),
            ParsedProperty(name="X-EMPTY"),
        ],
        timezones=[
            TimeZone(
                properties=[ParsedProperty(name="TZID", value="Europe/Berlin")],
                transitions=[
                    TimeZoneTransition(
                        transition=ComponentKind.STANDARD,
                        properties=[ParsedProperty(name="TZOFFSETTO", value="+0100")],
                    ),
                    TimeZoneTransition(
                        transition=ComponentKind.DAYLIGHT,
                        properties=[ParsedProperty(name="TZOFFSETTO", value="+0200")],
                    ),
                ],
            )
        ],
        events=[
            Event(
                properties=[
                    ParsedProperty(name="UID", value="event-1@example.com"),
                    ParsedProperty(
                        name="DTSTART",
                        value="20201206T170000",
                        params=[
                            ParsedPropertyParameter(
                                name="TZID", values=["Europe/Berlin"]
                            )
                        ],
                    ),
                    ParsedProperty(
                        name="ATTENDEE",
                        value="mailto:jdoe@example.com",
                        params=[
                            ParsedPropertyParameter(name="CN", values=["Doe, John"]),
                            ParsedPropertyParameter(
                                name="DELEGATED-TO",
                                values=["mailto:a@example.com", "mailto:b@example.com"],
                            ),
                        ],
                    ),
                    ParsedProperty(name="DESCRIPTION", value="Lorem ipsum " * 20),
                    ParsedProperty(name="LOCATION", value="Café Müller, 日本橋 " * 8),
                ],
                alarms=[
                    Alarm(properties=[ParsedProperty(name="ACTION", value="DISPLAY")])
                ],
            )
        ],
        todos=[Todo(properties=[ParsedProperty(name="UID", value="todo-1")])],
        journals=[Journal()],
        free_busys=[FreeBusy()],
        alarms=[Alarm(properties=[ParsedProperty(name="ACTION", value="AUDIO")])],
    )
    assert read_calendars(calendar.ics()) == [calendar]
    assert read_calendars(calendar.ics().encode("utf-8")) == [calendar]


def test_round_trip_contact() -> None:
    """Test that a contact with quoted parameters survives a round trip."""
    contact = Contact(
        properties=[
            ParsedProperty(name="VERSION", value="4.0"),
            ParsedProperty(
                name="ADR",
                value=";;100 Waters Edge;Baytown;LA;30314;United States of America",
                params=[
                    ParsedPropertyParameter(name="TYPE", values=["WORK"]),
                    ParsedPropertyParameter(
                        name="LABEL",
                        values=["100 Waters Edge\nBaytown, LA 30314\nUnited States"],
                    ),
                ],
            ),
        ]
    )
    assert read_contacts(contact.ics()) == [contact]
