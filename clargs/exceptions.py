# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clargs.

Problems found in a parsed command line are never raised: they are reported as
`ArgumentError` values on the parse results. The exceptions below signal that
the library itself was used incorrectly, or that a declaration file could not
be loaded.

Exception Hierarchy:
- ClargsError
    ├── ArgumentNotFoundError
    └── ConfigError
"""


class ClargsError(Exception):
    """Base exception for clargs."""


class ArgumentNotFoundError(ClargsError, LookupError):
    """Exception raised when a required argument or value is absent from the results."""


class ConfigError(ClargsError, ValueError):
    """Exception raised when a declaration file has invalid content."""
