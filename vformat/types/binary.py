"""Library for parsing and encoding BINARY values."""

import base64
import binascii

from .data_types import DATA_TYPE


@DATA_TYPE.register("BINARY")
class BinaryEncoder:
    """Class to handle base64 encoded inline BINARY values."""

    @classmethod
    def __parse_value__(cls, value: str) -> bytes:
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as err:
            raise ValueError(f"Invalid base64 BINARY value: {err}") from err

    @classmethod
    def __encode_value__(cls, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")
