"""Library for parsing and encoding UTC-OFFSET values."""

from __future__ import annotations

import datetime
import re

from .data_types import DATA_TYPE

UTC_OFFSET_REGEX = re.compile(r"([-+])([0-9]{2}):?([0-9]{2})?(?::?([0-9]{2}))?")


def parse_utc_offset(value: str) -> datetime.timedelta:
    """Parse an offset like '-0500', '+053015' or the vCard forms '-05:00', '+05'."""
    if not (match := UTC_OFFSET_REGEX.fullmatch(value)):
        raise ValueError(f"Expected value to match UTC-OFFSET pattern: {value}")
    sign, hours, minutes, seconds = match.groups()
    result = datetime.timedelta(
        hours=int(hours), minutes=int(minutes or 0), seconds=int(seconds or 0)
    )
    if sign == "-":
        result = -result
    return result


@DATA_TYPE.register("UTC-OFFSET")
class UtcOffsetEncoder:
    """Class to handle encoding of a UTC-OFFSET as a timedelta."""

    @classmethod
    def __parse_value__(cls, value: str) -> datetime.timedelta:
        """Parse a UTC-OFFSET value."""
        return parse_utc_offset(value)

    @classmethod
    def __encode_value__(cls, value: datetime.timedelta) -> str:
        """Serialize a timedelta as a UTC-OFFSET value."""
        offset = int(value.total_seconds())
        sign = "-" if offset < 0 else "+"
        offset = abs(offset)
        hours, offset = divmod(offset, 3600)
        minutes, seconds = divmod(offset, 60)
        if seconds:
            return f"{sign}{hours:02}{minutes:02}{seconds:02}"
        return f"{sign}{hours:02}{minutes:02}"
