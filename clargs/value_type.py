# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, the value cardinality of a declared flag.

Supports alias coercion for config-friendly values, so declaration files can
use short names.

Example:
    ValueType("required") → ValueType.REQUIRED_VALUE
    ValueType("none")     → ValueType.NO_VALUE
    ValueType("Optional") → ValueType.OPTIONAL_VALUE
"""
from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """
    Whether a flag takes a value.

    Members:
        NO_VALUE: The flag never takes a value.
        OPTIONAL_VALUE: The next token is used as value unless it looks like a flag.
        REQUIRED_VALUE: A value must follow the flag.
    """

    NO_VALUE = "none"
    OPTIONAL_VALUE = "optional"
    REQUIRED_VALUE = "required"

    @property
    def display_value(self) -> str:
        return self.value

    def expects_value(self) -> bool:
        return self is not ValueType.NO_VALUE

    def requires_value(self) -> bool:
        return self is ValueType.REQUIRED_VALUE

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "no": "none",
            "no_value": "none",
            "optional_value": "optional",
            "required_value": "required",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
