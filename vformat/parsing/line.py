"""Read physical lines from a source and unfold them into logical lines.

Individual lines are delimited by a line break (CRLF). Long logical lines
may be split into multiple physical lines by inserting a line break
followed immediately by a single white space character (space or
horizontal tab). Unfolding removes that line break and the one white
space character that follows it.

For example, the physical lines:

  NOTE:This is a long description
    that exists on a long line.

are unfolded into the single logical line:

  NOTE:This is a long description that exists on a long line.

Blank physical lines between content lines are ignored, but they still
count towards the line numbers reported in errors.

Only the CR and LF terminators are removed from the end of a physical
line. Other trailing white space, such as a space before the line break,
is kept as part of the content line since a fold may follow a space.
"""

from __future__ import annotations

from collections.abc import Generator, Iterable, Iterator
from dataclasses import dataclass
import io

from vformat.exceptions import SourceReadError

from .const import WSP


_LINE_TERMINATORS = "\r\n"


@dataclass(frozen=True)
class LogicalLine:
    """A content line with all continuation lines joined."""

    text: str
    line_number: int
    """Number of the first physical line, starting at 1."""

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.text}"


class LineReader(Iterator[LogicalLine]):
    """Pull logical lines out of a source of physical lines.

    The source is any iterable of lines, e.g. an open file, a list of
    strings, or a `bytes` iterable which is decoded as UTF-8. A single
    physical line of lookahead is kept to know when a logical line ends.
    """

    def __init__(self, source: Iterable[str | bytes]) -> None:
        """Initialize LineReader."""
        self._source = iter(source)
        self._saved: str | None = None
        self._saved_number = 0
        self._number = 0

    def _read(self) -> str | None:
        """Return the next physical line without its terminator."""
        try:
            raw = next(self._source)
        except StopIteration:
            return None
        except UnicodeDecodeError as err:
            raise SourceReadError(
                f"Line {self._number + 1} is not valid UTF-8: {err}"
            ) from err
        except OSError as err:
            raise SourceReadError(
                f"Failed to read line {self._number + 1}: {err}"
            ) from err
        self._number += 1
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as err:
                raise SourceReadError(
                    f"Line {self._number} is not valid UTF-8: {err}"
                ) from err
        return raw.rstrip(_LINE_TERMINATORS)

    def next_line(self) -> LogicalLine | None:
        """Return the next logical line or None at the end of the source."""
        if self._saved is not None:
            parts = [self._saved]
            line_number = self._saved_number
            self._saved = None
        else:
            while (line := self._read()) is not None and not line:
                continue
            if line is None:
                return None
            parts = [line]
            line_number = self._number

        while (line := self._read()) is not None:
            if not line:
                continue
            if line[0] in WSP:
                parts.append(line[1:])
                continue
            self._saved = line
            self._saved_number = self._number
            break

        return LogicalLine(text="".join(parts), line_number=line_number)

    def __iter__(self) -> LineReader:
        return self

    def __next__(self) -> LogicalLine:
        if (line := self.next_line()) is None:
            raise StopIteration
        return line


def unfolded_lines(content: str) -> Generator[str, None, None]:
    """Read content and unfold lines."""
    for line in LineReader(io.StringIO(content, newline="")):
        yield line.text
