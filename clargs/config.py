# clargs — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads flag declarations from YAML or TOML files."""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from clargs.argument import Argument
from clargs.arguments import Arguments
from clargs.exceptions import ConfigError
from clargs.key import SimpleKey
from clargs.logger import logger
from clargs.value_type import ValueType


class RawParameter(BaseModel):
    """Raw flag declaration as written in a declaration file."""

    short_key: str
    long_key: str
    required: bool = False
    value_type: ValueType = ValueType.NO_VALUE
    description: str | None = None

    @field_validator("value_type", mode="before")
    @classmethod
    def validate_value_type(cls, value: Any) -> ValueType:
        if isinstance(value, ValueType):
            return value
        # YAML 1.1 reads an unquoted `no`, `off` or `false` as False
        if value is False:
            return ValueType.NO_VALUE
        if isinstance(value, bool):
            raise ValueError(
                f"value_type {value!r} was read as a boolean; "
                "use one of: none, optional, required"
            )
        return ValueType(value)

    @field_validator("short_key", "long_key", mode="before")
    @classmethod
    def reject_boolean_key(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError(
                f"key was read as the boolean {value!r}; quote this key in the file"
            )
        return value

    @field_validator("short_key", "long_key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        if not value:
            raise ValueError("keys must not be empty")
        return value

    def to_argument(self) -> Argument:
        return Argument(
            key=SimpleKey(self.short_key, self.long_key),
            required=self.required,
            value_type=self.value_type,
            description=self.description,
        )


class ClargsConfig(BaseModel):
    """Declaration file model."""

    program: str = ""
    parameters: list[RawParameter] = Field(default_factory=list)

    @model_validator(mode="after")
    def warn_duplicate_keys(self) -> ClargsConfig:
        for attribute in ("short_key", "long_key"):
            counts = Counter(getattr(raw, attribute) for raw in self.parameters)
            for key, count in counts.items():
                if count > 1:
                    logger.warning(
                        "Key '%s' is declared %d times; each declaration will match.",
                        key,
                        count,
                    )
        return self

    def to_arguments(self) -> Arguments:
        return Arguments.create(raw.to_argument() for raw in self.parameters)


def load_config(file_path: Path | str) -> ClargsConfig:
    """
    Load and validate a YAML or TOML declaration file.

    The file should contain a dictionary with a list of parameters. Each
    parameter needs at least `short_key` and `long_key`, and may set
    `required`, `value_type` (none, optional, required) and `description`.

    Args:
        file_path (str | Path): Path to the declaration file (YAML or TOML).

    Returns:
        ClargsConfig: The validated declaration file.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ConfigError: If the file content is not a valid declaration set.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of parameters.\n"
            "Example:\n"
            "parameters:\n"
            "  - short_key: 'k'\n"
            "    long_key: 'kaas'\n"
            "    required: true\n"
            "    value_type: 'required'"
        )

    try:
        config = ClargsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid declarations in {path}:\n{error}") from error

    logger.debug("Loaded %d declaration(s) from %s", len(config.parameters), path)
    return config


def loader(file_path: Path | str) -> Arguments:
    """Load flag declarations from a YAML or TOML file as an unparsed `Arguments`."""
    return load_config(file_path).to_arguments()
