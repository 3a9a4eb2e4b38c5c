# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Key`, the identity of a command-line flag.

A key is anything that provides a `short_key` (used as `-x`) and a `long_key`
(used as `--xxxx`). The matching logic is implemented once on the `Key` mixin,
so an enum of flags only has to supply the two strings:

    class CheeseKey(KeyEnum):
        KAAS = ("k", "kaas")
        WORST = ("w", "worst")

    CheeseKey.KAAS.matches("--kaas")  → True

`SimpleKey` covers keys that are only known at runtime, such as keys read from
a declaration file.

Exports:
    - KEY_PATTERN: Pattern a token must fully match to look like a flag.
    - Key: Mixin providing `matches` and `is_key`.
    - KeyEnum: Enum base whose members are `(short_key, long_key)` pairs.
    - SimpleKey: Frozen dataclass implementation of `Key`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

KEY_PATTERN = re.compile(r"(-|--)([a-z]+)")


class Key:
    """
    Mixin for flag identities.

    Subclasses provide `short_key` and `long_key`. The class deliberately has
    no metaclass so it can be combined with `enum.Enum`.
    """

    short_key: str
    long_key: str

    def matches(self, token: str) -> bool:
        """Return True if `token` is `-<short_key>` or `--<long_key>`."""
        if token is None:
            raise TypeError("token must not be None")
        return token == f"-{self.short_key}" or token == f"--{self.long_key}"

    def is_key(self, token: str) -> bool:
        """Return True if `token` is shaped like a flag, declared or not."""
        return KEY_PATTERN.fullmatch(token) is not None


class KeyEnum(Key, Enum):
    """Enum base for flag keys. Member values are `(short_key, long_key)` tuples."""

    def __init__(self, short_key: str, long_key: str) -> None:
        self.short_key = short_key
        self.long_key = long_key

    def __str__(self) -> str:
        return f"-{self.short_key}/--{self.long_key}"


@dataclass(frozen=True)
class SimpleKey(Key):
    """A key defined by value, compared by its short and long forms."""

    short_key: str
    long_key: str

    def __str__(self) -> str:
        return f"-{self.short_key}/--{self.long_key}"
