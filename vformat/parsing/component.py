"""Assemble tokenized properties into a tree of components.

Each pull from a document parser reads one top level component (a
VCALENDAR or a VCARD) from the property stream and returns it fully
built. Nested components are built by recursive descent on the same
property stream: a BEGIN line starts a child component which is parsed
until its END line and then attached to its parent. Only child kinds
listed in the adjacency table of `vformat.component` are accepted.

Documents are independent, so a stream may be consumed one document at
a time without keeping the previous ones in memory. Once a document
fails to parse the parser is poisoned and yields nothing further, since
the position of the underlying line cursor is no longer meaningful.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from typing import Generic, TypeVar, cast

from vformat.compat import parser_compat
from vformat.component import (
    Calendar,
    Component,
    ComponentKind,
    Contact,
    allowed_children,
    new_component,
)
from vformat.exceptions import (
    InvalidComponent,
    MissingHeader,
    NotComplete,
    VFormatError,
)

from .const import ATTR_BEGIN, ATTR_END
from .property import ParsedProperty, PropertyParser

_LOGGER = logging.getLogger(__name__)

T_COMPONENT = TypeVar("T_COMPONENT", bound=Component)


class ComponentParser:
    """Build components by recursive descent over a property stream."""

    def __init__(
        self, property_parser: Iterator[ParsedProperty], max_depth: int | None = None
    ) -> None:
        """Initialize ComponentParser."""
        self._property_parser = property_parser
        self._max_depth = (
            max_depth
            if max_depth is not None
            else parser_compat.get_max_nesting_depth()
        )
        self._last_line: int | None = None

    def next_property(self) -> ParsedProperty | None:
        """Return the next property, or None when the stream is exhausted."""
        try:
            prop = next(self._property_parser)
        except StopIteration:
            return None
        self._last_line = prop.line_number
        return prop

    def parse(self, kind: ComponentKind, depth: int = 1) -> Component:
        """Parse the body of a component whose BEGIN line was already read."""
        if depth > self._max_depth:
            raise InvalidComponent(
                f"Component {kind.value} exceeds the maximum nesting depth "
                f"of {self._max_depth}",
                line_number=self._last_line,
            )
        _LOGGER.debug("Parsing component %s at depth %d", kind.value, depth)
        properties: list[ParsedProperty] = []
        children: dict[str, list[Component]] = {
            field_name: [] for field_name in allowed_children(kind).values()
        }
        while True:
            if (prop := self.next_property()) is None:
                raise NotComplete(
                    f"Input ended before END:{kind.value}",
                    line_number=self._last_line,
                )
            if prop.name == ATTR_END:
                self._check_end(kind, prop)
                return new_component(kind, properties, children)
            if prop.name == ATTR_BEGIN:
                child_kind = ComponentKind.from_keyword(prop.value)
                field_name = (
                    allowed_children(kind).get(child_kind) if child_kind else None
                )
                if child_kind is None or field_name is None:
                    raise InvalidComponent(
                        f"Component {prop.value} is not allowed in {kind.value}",
                        line_number=prop.line_number,
                    )
                children[field_name].append(self.parse(child_kind, depth + 1))
                continue
            properties.append(prop)

    def _check_end(self, kind: ComponentKind, prop: ParsedProperty) -> None:
        if ComponentKind.from_keyword(prop.value) is kind:
            return
        if parser_compat.is_relaxed_end_enabled():
            _LOGGER.debug("Accepting END:%s for %s", prop.value, kind.value)
            return
        raise InvalidComponent(
            f"Unexpected END:{prop.value}, expected END:{kind.value}",
            line_number=prop.line_number,
        )


class DocumentParser(Iterator[T_COMPONENT], Generic[T_COMPONENT]):
    """Iterate over the top level components of a stream.

    Each call to `next()` returns one fully built document or raises the
    ParseError for that document. The iterator ends cleanly when the
    stream is exhausted between documents.
    """

    root: ComponentKind

    def __init__(
        self, property_parser: Iterator[ParsedProperty], max_depth: int | None = None
    ) -> None:
        """Initialize DocumentParser."""
        self._parser = ComponentParser(property_parser, max_depth=max_depth)
        self._poisoned = False

    @classmethod
    def from_reader(
        cls, source: Iterable[str | bytes], max_depth: int | None = None
    ) -> DocumentParser[T_COMPONENT]:
        """Create a parser reading physical lines from a source."""
        return cls(PropertyParser.from_reader(source), max_depth=max_depth)

    def _check_header(self) -> bool:
        """Read the first line of a document, returning False at end of input."""
        if (prop := self._parser.next_property()) is None:
            return False
        if (
            prop.name != ATTR_BEGIN
            or prop.value is None
            or prop.value.upper() != self.root.value
            or prop.params
        ):
            raise MissingHeader(
                f"Expected {ATTR_BEGIN}:{self.root.value}, got "
                f"{prop.name}:{prop.value or ''}",
                line_number=prop.line_number,
            )
        return True

    def __iter__(self) -> DocumentParser[T_COMPONENT]:
        return self

    def __next__(self) -> T_COMPONENT:
        if self._poisoned:
            raise StopIteration
        try:
            if self._check_header():
                return cast(T_COMPONENT, self._parser.parse(self.root))
        except VFormatError as err:
            _LOGGER.debug("Failed to parse %s document: %s", self.root.value, err)
            self._poisoned = True
            raise
        raise StopIteration


class IcalParser(DocumentParser[Calendar]):
    """Iterate over the VCALENDAR objects of an iCalendar stream."""

    root = ComponentKind.CALENDAR


class VcardParser(DocumentParser[Contact]):
    """Iterate over the VCARD objects of a vCard stream."""

    root = ComponentKind.CONTACT
