"""Library for parsing and encoding property value types."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any, Protocol, TypeVar

from vformat.exceptions import PropertyValueError

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)


class DataType(Protocol):
    """Defines the protocol implemented by data types in this library."""

    @classmethod
    def __parse_value__(cls, value: str) -> Any:
        """Parse the raw property value as a python type."""

    @classmethod
    def __encode_value__(cls, value: Any) -> str:
        """Encode the python value as a raw property value."""


class Registry:
    """Registry of data types, keyed by the VALUE parameter name."""

    def __init__(self) -> None:
        """Initialize Registry."""
        self._items: dict[str, type] = {}
        self._parse_value: dict[str, Callable[[str], Any]] = {}
        self._encode_value: dict[str, Callable[[Any], str]] = {}

    def register(self, name: str) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a type under a value type name."""

        def decorator(func: T_TYPE) -> T_TYPE:
            """Register decorated class."""
            key = name.upper()
            self._items[key] = func
            if parse_value := getattr(func, "__parse_value__", None):
                self._parse_value[key] = parse_value
            if encode_value := getattr(func, "__encode_value__", None):
                self._encode_value[key] = encode_value
            return func

        return decorator

    def __contains__(self, name: str) -> bool:
        return name.upper() in self._items

    @property
    def names(self) -> list[str]:
        """Return the names of all registered value types."""
        return list(self._items)

    def parse_value(self, value: str, value_type: str) -> Any:
        """Parse a raw value with the parser registered for value_type."""
        if not (parser := self._parse_value.get(value_type.upper())):
            raise PropertyValueError(f"Unsupported value type '{value_type}'")
        try:
            return parser(value)
        except PropertyValueError:
            raise
        except ValueError as err:
            _LOGGER.debug("Failed to parse %s value %r: %s", value_type, value, err)
            raise PropertyValueError(
                f"Invalid {value_type.upper()} value '{value}': {err}"
            ) from err

    def encode_value(self, value: Any, value_type: str) -> str:
        """Encode a python value with the encoder registered for value_type."""
        if not (encoder := self._encode_value.get(value_type.upper())):
            raise PropertyValueError(f"Unsupported value type '{value_type}'")
        return encoder(value)


DATA_TYPE: Registry = Registry()
