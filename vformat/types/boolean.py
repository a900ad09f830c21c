"""Library for parsing and encoding BOOLEAN values."""

from .data_types import DATA_TYPE


@DATA_TYPE.register("BOOLEAN")
class BooleanEncoder:
    """Encode a boolean value."""

    @classmethod
    def __parse_value__(cls, value: str) -> bool:
        """Parse an rfc5545 property into a boolean."""
        if value.upper() == "TRUE":
            return True
        if value.upper() == "FALSE":
            return False
        raise ValueError(f"Unable to parse value as boolean: {value}")

    @classmethod
    def __encode_value__(cls, value: bool) -> str:
        """Serialize boolean as an ICS value."""
        return "TRUE" if value else "FALSE"
