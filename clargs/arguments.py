# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arguments`, the collection of declared flags and their parse results.

An `Arguments` object starts out holding only declarations ("parameters").
`parse_args()` walks a raw argument vector and returns a new `Arguments` that
also holds the results ("arguments"), successes and failures together in the
order they were produced. Problems in the command line are reported as data on
the results; only misuse of the query API raises.

Parsing uses a single token of lookahead to decide whether the token following
a flag is its value or the next flag:

    -w knack    → `-w` with value "knack"
    -w -t       → `-w` without a value, then `-t`

A token is taken to be a flag when it looks like one (`-x` or `--xxxx`,
lowercase letters only), whether or not it was declared. Values that look like
flags, such as "-v", therefore cannot be passed.

Example:
    arguments = (
        Arguments.builder()
        .add(Argument.builder().set_key(CheeseKey.KAAS).set_required(True)
             .set_value_required().build())
        .build()
        .parse_args(["-k", "edammer"])
    )
    arguments.get_required_value(CheeseKey.KAAS)  → "edammer"
"""
from __future__ import annotations

import sys
from typing import Iterable, Sequence

from clargs.argument import Argument
from clargs.exceptions import ArgumentNotFoundError
from clargs.key import Key
from clargs.logger import logger


def parse_arguments(
    parameters: Sequence[Argument], args: Sequence[str]
) -> tuple[Argument, ...]:
    """
    Match `args` against `parameters` and return the parse results.

    Every declaration matching a token produces at least one result, in
    declaration order. Declarations sharing a key are not deduplicated. A flag
    that requires a value but is followed by another flag yields both a
    `MISSING_ARGUMENT_VALUE` result and a bare result. A flag that is the last
    token yields a bare result without checking whether it requires a value.
    Required declarations without any result get a `MISSING_ARGUMENT` result
    at the end.
    """
    result: list[Argument] = []
    position = 0
    while position < len(args):
        arg = args[position]
        position += 1
        for parameter in parameters:
            if not parameter.matches(arg):
                continue
            if position < len(args):
                peeked = args[position]
                if parameter.key.is_key(peeked):
                    if parameter.value_type.requires_value():
                        result.append(parameter.with_missing_argument_value_error())
                    result.append(parameter)
                elif parameter.value_type.expects_value():
                    result.append(parameter.with_value(peeked))
                    position += 1
                else:
                    result.append(parameter.with_no_argument_value_expected_error())
            else:
                result.append(parameter)
            logger.debug("Matched '%s' -> %s", arg, parameter.key)

    for parameter in parameters:
        if parameter.required and not any(
            argument.key == parameter.key for argument in result
        ):
            result.append(parameter.with_missing_argument_error())

    logger.debug(
        "Parsed %d token(s) into %d result(s), %d with errors",
        len(args),
        len(result),
        sum(1 for argument in result if not argument.is_success()),
    )
    return tuple(result)


class Arguments:
    """
    Declared flags plus, once parsed, the results of a command line.

    Instances are immutable. `parse_args` returns a new instance sharing the
    same declarations.
    """

    def __init__(
        self,
        parameters: Iterable[Argument],
        arguments: Iterable[Argument] = (),
    ) -> None:
        self._parameters: tuple[Argument, ...] = tuple(parameters)
        self._arguments: tuple[Argument, ...] = tuple(arguments)

    @classmethod
    def create(cls, parameters: Iterable[Argument]) -> Arguments:
        """Create an unparsed collection from declarations."""
        return cls(parameters)

    @staticmethod
    def builder() -> ArgumentsBuilder:
        return ArgumentsBuilder()

    @property
    def parameters(self) -> tuple[Argument, ...]:
        return self._parameters

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self._arguments

    def parse_args(self, args: Sequence[str] | None = None) -> Arguments:
        """Parse `args` (default: `sys.argv[1:]`) into a new `Arguments`."""
        if args is None:
            args = sys.argv[1:]
        return Arguments(self._parameters, parse_arguments(self._parameters, args))

    def get(self) -> list[Argument]:
        """All results without errors, in parse order."""
        return [argument for argument in self._arguments if argument.is_success()]

    def has_errors(self) -> bool:
        return any(not argument.is_success() for argument in self._arguments)

    def get_arguments_with_errors(self) -> list[Argument]:
        return [argument for argument in self._arguments if not argument.is_success()]

    def is_filled(self) -> bool:
        """True when there are parse results. An empty parse counts as unfilled."""
        return bool(self._arguments)

    def has_argument(self, key: Key) -> bool:
        return any(argument.key == key for argument in self._arguments)

    def get_argument(self, key: Key) -> Argument | None:
        return next(
            (argument for argument in self._arguments if argument.key == key), None
        )

    def get_value(self, key: Key) -> str | None:
        argument = self.get_argument(key)
        return argument.value if argument else None

    def get_required_value(self, key: Key) -> str:
        value = self.get_value(key)
        if value is None:
            raise ArgumentNotFoundError(
                f"There is no required value for argument '{key}'"
            )
        return value

    def get_required_argument(self, key: Key) -> Argument:
        argument = self.get_argument(key)
        if argument is None:
            raise ArgumentNotFoundError(f"There is no required argument '{key}'")
        return argument

    def get_parameter(self, key: Key) -> Argument | None:
        return next(
            (parameter for parameter in self._parameters if parameter.key == key),
            None,
        )

    def display_value(self) -> str:
        """One line per declaration, usable as a plain usage text."""
        return "\n".join(parameter.display_value() for parameter in self._parameters)

    def errors_display_value(self) -> str:
        return "\n".join(
            argument.error.message
            for argument in self._arguments
            if argument.error is not None
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arguments):
            return False
        return (
            self._parameters == other._parameters
            and self._arguments == other._arguments
        )

    def __hash__(self) -> int:
        return hash((self._parameters, self._arguments))

    def __str__(self) -> str:
        return (
            f"Arguments(parameters={len(self._parameters)}, "
            f"arguments={len(self._arguments)}, "
            f"errors={len(self.get_arguments_with_errors())})"
        )

    def __repr__(self) -> str:
        return str(self)


class ArgumentsBuilder:
    """Collects declarations for an `Arguments` instance."""

    def __init__(self) -> None:
        self._parameters: list[Argument] = []

    def add(self, parameter: Argument) -> ArgumentsBuilder:
        self._parameters.append(parameter)
        return self

    def build(self) -> Arguments:
        return Arguments.create(self._parameters)
