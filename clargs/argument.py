# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass, used both to declare an expected flag and to
carry the outcome of parsing it.

A declaration is built once per flag, either directly or through
`Argument.builder()`. Parsing never changes a declaration: it derives fresh
copies carrying a value (`with_value`) or an error (`with_error` and the three
`with_*_error` helpers).

Key Attributes:
- `key`: The `Key` identifying the flag (`-k` / `--kaas`)
- `required`: Whether the flag must appear on the command line
- `value_type`: `ValueType` cardinality (no value, optional, required)
- `description`: Human-readable description, shown in usage output
- `value`: The resolved value, set on parse results only
- `error`: An `ArgumentError`, set on failed parse results only

Used By:
- `Arguments` parsing and queries
- Declaration file loading (`clargs.config`)
- Rich usage rendering (`clargs.display`)
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from clargs.key import Key
from clargs.value_type import ValueType


class ArgumentErrorType(Enum):
    """Kinds of problems the parser reports for a single flag."""

    MISSING_ARGUMENT = "missing_argument"
    MISSING_ARGUMENT_VALUE = "missing_argument_value"
    NO_ARGUMENT_VALUE_EXPECTED = "no_argument_value_expected"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ArgumentError:
    """A parse problem for one flag, with a ready-to-print message."""

    type: ArgumentErrorType
    message: str


@dataclass(frozen=True)
class Argument:
    """
    Represents a declared flag or a parse result for it.

    Attributes:
        key (Key): The identity of the flag.
        required (bool): True if the flag must be present, False otherwise.
        value_type (ValueType): Whether the flag takes no, an optional or a required value.
        description (str | None): Help text for the flag.
        value (str | None): The value found on the command line, if any.
        error (ArgumentError | None): The parse problem for this entry, if any.
    """

    key: Key
    required: bool = False
    value_type: ValueType = ValueType.NO_VALUE
    description: str | None = None
    value: str | None = None
    error: ArgumentError | None = None

    @staticmethod
    def builder() -> ArgumentBuilder:
        return ArgumentBuilder()

    def is_success(self) -> bool:
        return self.error is None

    def contains_value(self) -> bool:
        return self.value is not None

    def matches(self, token: str) -> bool:
        return self.key.matches(token)

    def with_value(self, value: str | None) -> Argument:
        """Return a copy carrying `value` and no error."""
        return replace(self, value=value, error=None)

    def with_error(self, error: ArgumentError) -> Argument:
        """Return a copy carrying `error`. The value is kept as is."""
        return replace(self, error=error)

    def with_missing_argument_error(self) -> Argument:
        return self._with_error_type(
            ArgumentErrorType.MISSING_ARGUMENT, "Missing argument"
        )

    def with_missing_argument_value_error(self) -> Argument:
        return self._with_error_type(
            ArgumentErrorType.MISSING_ARGUMENT_VALUE, "Missing argument value"
        )

    def with_no_argument_value_expected_error(self) -> Argument:
        return self._with_error_type(
            ArgumentErrorType.NO_ARGUMENT_VALUE_EXPECTED, "No argument value expected"
        )

    def _with_error_type(self, error_type: ArgumentErrorType, prefix: str) -> Argument:
        return self.with_error(ArgumentError(error_type, f"{prefix} {self.display_value()}"))

    def get_value_text(self) -> str:
        """Get the value clause used in usage and error messages."""
        if self.value_type.expects_value():
            return f"a value is {self.value_type.display_value}"
        return "no value is expected"

    def display_value(self) -> str:
        """
        Render the declaration on one line, e.g.

            -k or --kaas; required: yes; a value is required; description: 'cheese'

        An unset description renders as 'null'.
        """
        description = "null" if self.description is None else self.description
        return "; ".join(
            [
                f"-{self.key.short_key} or --{self.key.long_key}",
                f"required: {'yes' if self.required else 'no'}",
                self.get_value_text(),
                f"description: '{description}'",
            ]
        )


class ArgumentBuilder:
    """Fluent builder for `Argument` declarations."""

    def __init__(self) -> None:
        self._key: Key | None = None
        self._required: bool = False
        self._value_type: ValueType = ValueType.NO_VALUE
        self._description: str | None = None
        self._value: str | None = None

    def set_key(self, key: Key) -> ArgumentBuilder:
        self._key = key
        return self

    def set_required(self, required: bool) -> ArgumentBuilder:
        self._required = required
        return self

    def set_value_required(self) -> ArgumentBuilder:
        return self.set_value_type(ValueType.REQUIRED_VALUE)

    def set_value_optional(self) -> ArgumentBuilder:
        return self.set_value_type(ValueType.OPTIONAL_VALUE)

    def set_value_type(self, value_type: ValueType | str) -> ArgumentBuilder:
        self._value_type = ValueType(value_type)
        return self

    def set_description(self, description: str | None) -> ArgumentBuilder:
        self._description = description
        return self

    def set_value(self, value: str | None) -> ArgumentBuilder:
        self._value = value
        return self

    def build(self) -> Argument:
        if self._key is None:
            raise TypeError("An Argument needs a key; call set_key() before build().")
        return Argument(
            key=self._key,
            required=self._required,
            value_type=self._value_type,
            description=self._description,
            value=self._value,
        )
