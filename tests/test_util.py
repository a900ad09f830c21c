"""Tests for utility methods."""

import datetime
import re

from freezegun import freeze_time

from vformat.util import (
    dtstamp_factory,
    format_utc_datetime,
    prodid_factory,
    uid_factory,
)


@freeze_time("2022-09-03 09:38:05")
def test_dtstamp_factory() -> None:
    """Test that timestamps are timezone aware in UTC."""
    dtstamp = dtstamp_factory()
    assert dtstamp == datetime.datetime(2022, 9, 3, 9, 38, 5, tzinfo=datetime.UTC)
    assert format_utc_datetime(dtstamp) == "20220903T093805Z"


def test_format_utc_datetime() -> None:
    """Test formatting datetimes in other timezones and naive datetimes."""
    tz = datetime.timezone(datetime.timedelta(hours=-5))
    value = datetime.datetime(1998, 1, 19, 2, 0, 0, tzinfo=tz)
    assert format_utc_datetime(value) == "19980119T070000Z"
    naive = datetime.datetime(1998, 1, 19, 7, 0, 0)
    assert format_utc_datetime(naive) == "19980119T070000Z"


def test_uid_factory() -> None:
    """Test that generated uids are unique."""
    assert uid_factory() != uid_factory()


def test_prodid_factory() -> None:
    """Test the product identifier of this library."""
    assert re.fullmatch(r"-//vformat//[^/]+//EN", prodid_factory())
