"""Library for parsing and encoding DATE-TIME, TIME and TIMESTAMP values.

A TZID parameter is not resolved here: values with a TZID are returned
as naive datetimes and the caller may attach the timezone it knows.
"""

from __future__ import annotations

import datetime
import logging
import re

from .data_types import DATA_TYPE
from .date import parse_date
from .utc_offset import parse_utc_offset

_LOGGER = logging.getLogger(__name__)

TIME_REGEX = re.compile(
    r"([0-9]{2}):?([0-9]{2}):?([0-9]{2})(Z|[-+][0-9]{2}(?::?[0-9]{2})?)?"
)
DATETIME_SEPARATOR = "T"


def _parse_zone(zone: str | None) -> datetime.tzinfo | None:
    if not zone:
        return None
    if zone == "Z":
        return datetime.timezone.utc
    return datetime.timezone(parse_utc_offset(zone))


def parse_time(value: str) -> datetime.time:
    """Parse a time like 230000, 230000Z or 23:00:00-05:00."""
    if not (match := TIME_REGEX.fullmatch(value)):
        raise ValueError(f"Expected value to match TIME pattern: {value}")
    hour, minute, second, zone = match.groups()
    # A leap second is clamped since python times can't represent it
    return datetime.time(
        int(hour), int(minute), min(int(second), 59), tzinfo=_parse_zone(zone)
    )


def parse_date_time(value: str) -> datetime.datetime:
    """Parse a date and time like 19980118T230000 or 19980119T070000Z."""
    date_part, sep, time_part = value.partition(DATETIME_SEPARATOR)
    if not sep:
        raise ValueError(f"Expected value to match DATE-TIME pattern: {value}")
    result = datetime.datetime.combine(parse_date(date_part), parse_time(time_part))
    _LOGGER.debug("DateTimeEncoder returned %s", result)
    return result


def _encode_zone(value: datetime.datetime | datetime.time) -> str:
    if (offset := value.utcoffset()) is None:
        return ""
    if not offset:
        return "Z"
    return DATA_TYPE.encode_value(offset, "UTC-OFFSET")


@DATA_TYPE.register("DATE-TIME")
@DATA_TYPE.register("TIMESTAMP")
class DateTimeEncoder:
    """Class to handle encoding for a datetime.datetime."""

    @classmethod
    def __parse_value__(cls, value: str) -> datetime.datetime:
        """Parse a rfc5545 into a datetime.datetime."""
        return parse_date_time(value)

    @classmethod
    def __encode_value__(cls, value: datetime.datetime) -> str:
        """Serialize a datetime as an ICS value."""
        return value.strftime("%Y%m%dT%H%M%S") + _encode_zone(value)


@DATA_TYPE.register("TIME")
class TimeEncoder:
    """Class to handle encoding for a datetime.time."""

    @classmethod
    def __parse_value__(cls, value: str) -> datetime.time:
        """Parse a rfc5545 into a datetime.time."""
        return parse_time(value)

    @classmethod
    def __encode_value__(cls, value: datetime.time) -> str:
        """Serialize a time as an ICS value."""
        return value.strftime("%H%M%S") + _encode_zone(value)


@DATA_TYPE.register("DATE-AND-OR-TIME")
class DateAndOrTimeEncoder:
    """A vCard value that may be a date-time, a date or a time."""

    @classmethod
    def __parse_value__(
        cls, value: str
    ) -> datetime.datetime | datetime.date | datetime.time:
        """Parse the most specific form the value matches."""
        if value.startswith(DATETIME_SEPARATOR):
            return parse_time(value[1:])
        if DATETIME_SEPARATOR in value:
            return parse_date_time(value)
        return parse_date(value)

    @classmethod
    def __encode_value__(
        cls, value: datetime.datetime | datetime.date | datetime.time
    ) -> str:
        if isinstance(value, datetime.datetime):
            return DateTimeEncoder.__encode_value__(value)
        if isinstance(value, datetime.time):
            return DATETIME_SEPARATOR + TimeEncoder.__encode_value__(value)
        return value.strftime("%Y%m%d")
