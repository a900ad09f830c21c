"""Library for parsing TEXT values."""

from .data_types import DATA_TYPE

UNESCAPE_CHAR = {"\\\\": "\\", "\\;": ";", "\\,": ",", "\\N": "\n", "\\n": "\n"}
ESCAPE_CHAR = {"\\": "\\\\", ";": "\\;", ",": "\\,", "\n": "\\n"}


@DATA_TYPE.register("TEXT")
class TextEncoder:
    """Encode an rfc5545 TEXT value."""

    @classmethod
    def __parse_value__(cls, value: str) -> str:
        """Parse a rfc5545 into a text value."""
        if "\\" not in value:
            return value
        result = []
        pos = 0
        while pos < len(value):
            if (pair := value[pos : pos + 2]) in UNESCAPE_CHAR:
                result.append(UNESCAPE_CHAR[pair])
                pos += 2
            else:
                result.append(value[pos])
                pos += 1
        return "".join(result)

    @classmethod
    def __encode_value__(cls, value: str) -> str:
        """Serialize text as an ICS value."""
        return "".join(ESCAPE_CHAR.get(char, char) for char in value)
