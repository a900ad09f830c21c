"""Exceptions for the vformat library."""

from __future__ import annotations


class VFormatError(Exception):
    """Base exception for all vformat errors."""


class ParseError(VFormatError):
    """Exception raised when parsing iCalendar or vCard content.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'line_number' attribute is the number of the
    first physical line of the logical line that failed, when known. The
    'detailed_error' attribute can provide additional information about
    the error, such as the offending content line.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        detailed_error: str | None = None,
    ) -> None:
        """Initialize the ParseError with a message."""
        if line_number is not None:
            super().__init__(f"Line {line_number}: {message}")
        else:
            super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.detailed_error = detailed_error


class PropertyParseError(ParseError):
    """A content line could not be tokenized into a property."""


class MissingName(PropertyParseError):
    """The content line has no property name before the first delimiter."""


class MissingClosingQuote(PropertyParseError):
    """A quoted parameter value is never closed."""


class MissingDelimiter(PropertyParseError):
    """An expected delimiter was not found in the content line."""


class MissingContentAfter(PropertyParseError):
    """The content line ended inside the parameter section."""


class MissingParamKey(PropertyParseError):
    """A parameter has an empty name."""


class ComponentParseError(ParseError):
    """The stream of properties does not form a valid component."""


class MissingHeader(ComponentParseError):
    """The document does not start with the expected BEGIN line."""


class NotComplete(ComponentParseError):
    """The input ended before the component was closed."""


class InvalidComponent(ComponentParseError):
    """A component is nested where it is not allowed."""


class SourceReadError(VFormatError):
    """The underlying line source failed while reading.

    These errors are fatal for the current document and are not retried.
    """


class PropertyValueError(VFormatError, ValueError):
    """Exception raised when a raw property value can't be typed.

    This is raised by the value typing layer, which is only invoked on
    demand after parsing, so it is never raised by the document parsers.
    """
