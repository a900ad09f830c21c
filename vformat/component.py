"""Component data model for iCalendar and vCard objects.

An iCalendar object consists of one or more components, that may have
properties or sub-components. An example of a component might be the
calendar itself, an event, a to-do, a journal entry, timezone info, etc.
A vCard object is a single flat component holding the properties of a
contact.

Components here have no semantic meaning: each one holds the raw
`ParsedProperty` objects read from the content lines plus typed
collections of child components. Which child kinds may appear under
which parent is defined once, in `CHILD_COMPONENTS`, and that table is
used both when assembling components from a property stream and when
encoding them back to text.
"""

from __future__ import annotations

from collections.abc import Iterator
import enum
import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .parsing.property import ParsedProperty

_LOGGER = logging.getLogger(__name__)


class ComponentKind(str, enum.Enum):
    """Keyword used in BEGIN and END lines for each kind of component."""

    CALENDAR = "VCALENDAR"
    EVENT = "VEVENT"
    TODO = "VTODO"
    JOURNAL = "VJOURNAL"
    FREEBUSY = "VFREEBUSY"
    ALARM = "VALARM"
    TIMEZONE = "VTIMEZONE"
    STANDARD = "STANDARD"
    DAYLIGHT = "DAYLIGHT"
    CONTACT = "VCARD"

    @classmethod
    def from_keyword(cls, keyword: str | None) -> ComponentKind | None:
        """Return the kind for a BEGIN/END value, or None if not known."""
        if not keyword:
            return None
        try:
            return cls(keyword.upper())
        except ValueError:
            return None


CHILD_COMPONENTS: dict[ComponentKind, dict[ComponentKind, str]] = {
    ComponentKind.CALENDAR: {
        ComponentKind.TIMEZONE: "timezones",
        ComponentKind.EVENT: "events",
        ComponentKind.ALARM: "alarms",
        ComponentKind.TODO: "todos",
        ComponentKind.JOURNAL: "journals",
        ComponentKind.FREEBUSY: "free_busys",
    },
    ComponentKind.EVENT: {
        ComponentKind.ALARM: "alarms",
    },
    ComponentKind.TODO: {
        ComponentKind.ALARM: "alarms",
    },
    ComponentKind.TIMEZONE: {
        ComponentKind.STANDARD: "transitions",
        ComponentKind.DAYLIGHT: "transitions",
    },
}
"""Child kinds allowed under each parent kind, and the field holding them.

The order of each entry is also the order children are encoded in.
Kinds without an entry can't contain any child components.
"""


def allowed_children(kind: ComponentKind) -> dict[ComponentKind, str]:
    """Return the child kinds allowed under a parent kind."""
    return CHILD_COMPONENTS.get(kind, {})


class Component(BaseModel):
    """Base class for all components.

    Components are immutable once built, either by the parser when the
    matching END line is read or by a builder.
    """

    model_config = ConfigDict(frozen=True)

    kinds: ClassVar[tuple[ComponentKind, ...]] = ()
    """The BEGIN keywords that construct this component."""

    properties: list[ParsedProperty] = Field(default_factory=list)
    """Properties of this component in their original order."""

    @property
    def kind(self) -> ComponentKind:
        """Return the keyword used to encode this component."""
        return self.kinds[0]

    @property
    def name(self) -> str:
        """Return the BEGIN/END keyword of this component."""
        return self.kind.value

    def get_property(self, name: str) -> ParsedProperty | None:
        """Return the first property with the specified name."""
        name = name.upper()
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def get_properties(self, name: str) -> list[ParsedProperty]:
        """Return all properties with the specified name."""
        name = name.upper()
        return [prop for prop in self.properties if prop.name == name]

    def components(self) -> Iterator[Component]:
        """Iterate over child components in encoding order."""
        seen: set[str] = set()
        for field_name in allowed_children(self.kind).values():
            if field_name in seen:
                continue
            seen.add(field_name)
            yield from getattr(self, field_name)

    def ics(self) -> str:
        """Encode the component as folded content lines."""
        # Imported here since the generator depends on this module
        from .generator import encode_component

        return encode_component(self)


class Alarm(Component):
    """A reminder or alarm attached to an event, to-do or calendar."""

    kinds = (ComponentKind.ALARM,)


class Event(Component):
    """A scheduled amount of time on a calendar."""

    kinds = (ComponentKind.EVENT,)

    alarms: list[Alarm] = Field(default_factory=list)


class Todo(Component):
    """A to-do item or action item."""

    kinds = (ComponentKind.TODO,)

    alarms: list[Alarm] = Field(default_factory=list)


class Journal(Component):
    """A journal entry associated with a calendar date."""

    kinds = (ComponentKind.JOURNAL,)


class FreeBusy(Component):
    """A request for, response to, or published set of busy time."""

    kinds = (ComponentKind.FREEBUSY,)


class TimeZoneTransition(Component):
    """A STANDARD or DAYLIGHT observance within a timezone."""

    kinds = (ComponentKind.STANDARD, ComponentKind.DAYLIGHT)

    transition: ComponentKind = ComponentKind.STANDARD

    @property
    def kind(self) -> ComponentKind:
        return self.transition


class TimeZone(Component):
    """A set of standard and daylight saving time observances."""

    kinds = (ComponentKind.TIMEZONE,)

    transitions: list[TimeZoneTransition] = Field(default_factory=list)


class Calendar(Component):
    """A VCALENDAR object, the root of an iCalendar document."""

    kinds = (ComponentKind.CALENDAR,)

    events: list[Event] = Field(default_factory=list)
    alarms: list[Alarm] = Field(default_factory=list)
    todos: list[Todo] = Field(default_factory=list)
    journals: list[Journal] = Field(default_factory=list)
    free_busys: list[FreeBusy] = Field(default_factory=list)
    timezones: list[TimeZone] = Field(default_factory=list)


class Contact(Component):
    """A VCARD object, the root of a vCard document."""

    kinds = (ComponentKind.CONTACT,)


COMPONENT_MODELS: dict[ComponentKind, type[Component]] = {
    kind: model
    for model in (
        Calendar,
        Event,
        Todo,
        Journal,
        FreeBusy,
        Alarm,
        TimeZone,
        TimeZoneTransition,
        Contact,
    )
    for kind in model.kinds
}


def new_component(
    kind: ComponentKind,
    properties: list[ParsedProperty],
    children: dict[str, list[Component]],
) -> Component:
    """Construct a finished component of the given kind."""
    model = COMPONENT_MODELS[kind]
    _LOGGER.debug(
        "Building %s with %d properties", kind.value, len(properties)
    )
    if model is TimeZoneTransition:
        return TimeZoneTransition(
            properties=properties, transition=kind, **children
        )
    return model(properties=properties, **children)
