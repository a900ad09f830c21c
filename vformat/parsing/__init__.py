"""Streaming parser for the content line grammar of iCalendar and vCard."""
