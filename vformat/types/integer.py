"""Library for parsing and encoding INTEGER values."""

import re

from .data_types import DATA_TYPE

INTEGER_REGEX = re.compile(r"[+-]?[0-9]+")


@DATA_TYPE.register("INTEGER")
class IntEncoder:
    """Encode an int value."""

    @classmethod
    def __parse_value__(cls, value: str) -> int:
        """Parse a rfc5545 int value."""
        if not INTEGER_REGEX.fullmatch(value):
            raise ValueError(f"Expected value to match INTEGER pattern: {value}")
        return int(value)

    @classmethod
    def __encode_value__(cls, value: int) -> str:
        return str(value)
