"""Parse and generate iCalendar (rfc5545) and vCard (rfc6350) content.

The parsing pipeline unfolds physical lines into logical content lines,
tokenizes each content line into a property, and assembles properties
into a tree of components:

```python
from vformat.stream import iter_calendars

with open("calendar.ics", "rb") as fp:
    for calendar in iter_calendars(fp):
        for event in calendar.events:
            print(event.get_property("SUMMARY"))
```

Components are encoded back to folded CRLF text with `Component.ics()`.
"""

__all__ = [
    "builder",
    "compat",
    "component",
    "diagnostics",
    "exceptions",
    "generator",
    "parsing",
    "stream",
    "types",
    "util",
]
