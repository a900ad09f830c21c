"""Library for values that are kept as plain strings.

URI, CAL-ADDRESS and LANGUAGE-TAG values have no escaping, so the raw
property value is already the python value.
"""

from urllib.parse import urlparse

from .data_types import DATA_TYPE


@DATA_TYPE.register("URI")
@DATA_TYPE.register("CAL-ADDRESS")
class UriEncoder:
    """Class to handle URI values, e.g. 'mailto:jsmith@example.com'."""

    @classmethod
    def __parse_value__(cls, value: str) -> str:
        """Check the value has a URI scheme."""
        if not urlparse(value).scheme:
            raise ValueError(f"Expected URI with a scheme: {value}")
        return value

    @classmethod
    def __encode_value__(cls, value: str) -> str:
        return value


@DATA_TYPE.register("LANGUAGE-TAG")
class LanguageTagEncoder:
    """Class to handle rfc5646 language tags such as 'en-US'."""

    @classmethod
    def __parse_value__(cls, value: str) -> str:
        return value

    @classmethod
    def __encode_value__(cls, value: str) -> str:
        return value
