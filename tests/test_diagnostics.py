"""Tests for diagnostics."""

import pathlib
import textwrap

from vformat.diagnostics import redact

TESTDATA_PATH = pathlib.Path(__file__).parent / "testdata"

ICS = textwrap.dedent(
    """\
    BEGIN:VCALENDAR
    PRODID:-//example//1.2.3
    VERSION:2.0
    BEGIN:VEVENT
    DTSTAMP:19970901T130000Z
    SUMMARY;LANGUAGE=en:Secret meeting
    ATTENDEE;CN="Doe, John":mailto:jdoe@example.com
    DESCRIPTION:Long
     er description
    INVALID
    DTSTART;TZID=Europe/Berlin:20201206T170000
    END:VEVENT
    END:VCALENDAR
    """
)


def test_empty() -> None:
    """Test redaction of an empty file."""
    assert list(redact("")) == []
    assert list(redact("\n")) == []


def test_redact() -> None:
    """Test that only allow listed properties keep their values."""
    assert list(redact(ICS)) == [
        "BEGIN:VCALENDAR",
        "PRODID:-//example//1.2.3",
        "VERSION:2.0",
        "BEGIN:VEVENT",
        "DTSTAMP:19970901T130000Z",
        "SUMMARY:***",
        "ATTENDEE:***",
        "DESCRIPTION:***",
        "***",
        "DTSTART;TZID=Europe/Berlin:20201206T170000",
        "END:VEVENT",
        "END:VCALENDAR",
    ]


def test_max_contentlines() -> None:
    """Test that output stops after the maximum number of content lines."""
    assert list(redact(ICS, max_contentlines=2)) == [
        "BEGIN:VCALENDAR",
        "PRODID:-//example//1.2.3",
    ]


def test_custom_allowlist() -> None:
    """Test redaction with a custom allow list."""
    lines = list(redact(ICS, allowlist={"SUMMARY"}))
    assert lines[0] == "BEGIN:***"
    assert lines[5] == "SUMMARY;LANGUAGE=en:Secret meeting"


def test_redact_contacts() -> None:
    """Test redaction of a vCard file."""
    vcf = (TESTDATA_PATH / "wikipedia.vcf").read_text()
    lines = list(redact(vcf))
    assert lines[:4] == ["BEGIN:VCARD", "VERSION:4.0", "N:***", "FN:***"]
    assert "REV:20080424T195243Z" in lines
    assert not any("Gump" in line for line in lines)
