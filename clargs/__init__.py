"""
clargs

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import Argument, ArgumentBuilder, ArgumentError, ArgumentErrorType
from .arguments import Arguments, ArgumentsBuilder, parse_arguments
from .exceptions import ArgumentNotFoundError, ClargsError, ConfigError
from .key import KEY_PATTERN, Key, KeyEnum, SimpleKey
from .value_type import ValueType

logger = logging.getLogger("clargs")


__all__ = [
    "Argument",
    "ArgumentBuilder",
    "ArgumentError",
    "ArgumentErrorType",
    "ArgumentNotFoundError",
    "Arguments",
    "ArgumentsBuilder",
    "ClargsError",
    "ConfigError",
    "KEY_PATTERN",
    "Key",
    "KeyEnum",
    "SimpleKey",
    "ValueType",
    "parse_arguments",
]
