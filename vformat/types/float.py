"""Library for parsing and encoding FLOAT values."""

import re

from .data_types import DATA_TYPE

FLOAT_REGEX = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")


@DATA_TYPE.register("FLOAT")
class FloatEncoder:
    """Encode a float value."""

    @classmethod
    def __parse_value__(cls, value: str) -> float:
        """Parse a rfc5545 float value."""
        if not FLOAT_REGEX.fullmatch(value):
            raise ValueError(f"Expected value to match FLOAT pattern: {value}")
        return float(value)

    @classmethod
    def __encode_value__(cls, value: float) -> str:
        return str(value)
