"""Library for parsing and encoding PERIOD values."""

from __future__ import annotations

import datetime

from .data_types import DATA_TYPE
from .date_time import parse_date_time

PERIOD_SEPARATOR = "/"


@DATA_TYPE.register("PERIOD")
class PeriodEncoder:
    """A period of time, as a start and either an end or a duration.

    The python value is a (start, end-or-duration) tuple.
    """

    @classmethod
    def __parse_value__(
        cls, value: str
    ) -> tuple[datetime.datetime, datetime.datetime | datetime.timedelta]:
        """Parse a value like 19970101T180000Z/PT5H30M."""
        start, sep, end = value.partition(PERIOD_SEPARATOR)
        if not sep or not end:
            raise ValueError(f"Expected value to match PERIOD pattern: {value}")
        if end.lstrip("+-").startswith("P"):
            return parse_date_time(start), DATA_TYPE.parse_value(end, "DURATION")
        return parse_date_time(start), parse_date_time(end)

    @classmethod
    def __encode_value__(
        cls, value: tuple[datetime.datetime, datetime.datetime | datetime.timedelta]
    ) -> str:
        start, end = value
        end_type = "DURATION" if isinstance(end, datetime.timedelta) else "DATE-TIME"
        return PERIOD_SEPARATOR.join(
            (
                DATA_TYPE.encode_value(start, "DATE-TIME"),
                DATA_TYPE.encode_value(end, end_type),
            )
        )
