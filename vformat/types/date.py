"""Library for parsing and encoding DATE values."""

from __future__ import annotations

import datetime
import logging
import re

from .data_types import DATA_TYPE

_LOGGER = logging.getLogger(__name__)

DATE_REGEX = re.compile(r"([0-9]{4})-?([0-9]{2})-?([0-9]{2})")


def parse_date(value: str) -> datetime.date:
    """Parse a basic (19970714) or extended (1997-07-14) format date."""
    if not (match := DATE_REGEX.fullmatch(value)):
        raise ValueError(f"Expected value to match DATE pattern: {value}")
    year, month, day = (int(part) for part in match.groups())
    return datetime.date(year, month, day)


@DATA_TYPE.register("DATE")
class DateEncoder:
    """Class to handle encoding for a datetime.date."""

    @classmethod
    def __parse_value__(cls, value: str) -> datetime.date:
        """Parse a rfc5545 into a datetime.date."""
        result = parse_date(value)
        _LOGGER.debug("DateEncoder returned %s", result)
        return result

    @classmethod
    def __encode_value__(cls, value: datetime.date) -> str:
        """Serialize a date as an ICS value."""
        return value.strftime("%Y%m%d")
