"""Library for parsing RECUR values into their rule parts.

The rule is only split into its parts, e.g. 'FREQ=DAILY;COUNT=10' becomes
{'FREQ': 'DAILY', 'COUNT': '10'}. Expanding the rule into occurrences is
not supported.
"""

from __future__ import annotations

from .data_types import DATA_TYPE

RULE_PART_SEPARATOR = ";"
RULE_VALUE_SEPARATOR = "="


@DATA_TYPE.register("RECUR")
class RecurEncoder:
    """Class to handle rfc5545 recurrence rules."""

    @classmethod
    def __parse_value__(cls, value: str) -> dict[str, str]:
        """Split a recurrence rule into an ordered dict of rule parts."""
        result: dict[str, str] = {}
        for part in value.split(RULE_PART_SEPARATOR):
            name, sep, part_value = part.partition(RULE_VALUE_SEPARATOR)
            if not name or not sep:
                raise ValueError(f"Invalid recurrence rule part '{part}' in {value}")
            result[name.upper()] = part_value
        if "FREQ" not in result:
            raise ValueError(f"Recurrence rule is missing FREQ: {value}")
        return result

    @classmethod
    def __encode_value__(cls, value: dict[str, str]) -> str:
        return RULE_PART_SEPARATOR.join(
            f"{name}{RULE_VALUE_SEPARATOR}{part}" for name, part in value.items()
        )
