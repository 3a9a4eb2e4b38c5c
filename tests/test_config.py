import logging
from pathlib import Path

import pytest

from clargs.arguments import Arguments
from clargs.config import ClargsConfig, RawParameter, load_config, loader
from clargs.exceptions import ConfigError
from clargs.key import SimpleKey
from clargs.value_type import ValueType

YAML_CONFIG = """\
program: cheese
parameters:
  - short_key: k
    long_key: kaas
    required: true
    value_type: required
    description: Kind of cheese
  - short_key: w
    long_key: worst
    required: true
    value_type: optional
  - short_key: t
    long_key: topping
"""

TOML_CONFIG = """\
program = "cheese"

[[parameters]]
short_key = "k"
long_key = "kaas"
required = true
value_type = "required"
description = "Kind of cheese"

[[parameters]]
short_key = "t"
long_key = "topping"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


@pytest.mark.parametrize("name", ["flags.yaml", "flags.yml"])
def test_loader_yaml(tmp_path, name):
    arguments = loader(write(tmp_path, name, YAML_CONFIG))

    assert isinstance(arguments, Arguments)
    assert not arguments.is_filled()
    kaas = arguments.get_parameter(SimpleKey("k", "kaas"))
    assert kaas.required
    assert kaas.value_type is ValueType.REQUIRED_VALUE
    assert kaas.description == "Kind of cheese"

    topping = arguments.get_parameter(SimpleKey("t", "topping"))
    assert not topping.required
    assert topping.value_type is ValueType.NO_VALUE
    assert topping.description is None


def test_loaded_declarations_parse(tmp_path):
    arguments = loader(write(tmp_path, "flags.yaml", YAML_CONFIG)).parse_args(
        ["--kaas", "edammer", "-w", "knack"]
    )
    assert not arguments.has_errors()
    assert arguments.get_required_value(SimpleKey("k", "kaas")) == "edammer"
    assert arguments.get_value(SimpleKey("w", "worst")) == "knack"


def test_loader_toml(tmp_path):
    config = load_config(write(tmp_path, "flags.toml", TOML_CONFIG))

    assert config.program == "cheese"
    assert [raw.long_key for raw in config.parameters] == ["kaas", "topping"]
    assert config.to_arguments().display_value() == "\n".join(
        [
            "-k or --kaas; required: yes; a value is required; description: 'Kind of cheese'",
            "-t or --topping; required: no; no value is expected; description: 'null'",
        ]
    )


def test_loader_accepts_str_path(tmp_path):
    path = write(tmp_path, "flags.yaml", YAML_CONFIG)
    assert loader(str(path)) == loader(path)


def test_loader_rejects_non_path():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError, match="Unsupported config format: .json"):
        loader(write(tmp_path, "flags.json", "{}"))


def test_loader_rejects_non_mapping(tmp_path):
    with pytest.raises(ConfigError, match="must contain a dictionary"):
        loader(write(tmp_path, "flags.yaml", "- k\n- kaas\n"))


def test_loader_rejects_invalid_value_type(tmp_path):
    content = "parameters:\n  - short_key: k\n    long_key: kaas\n    value_type: many\n"
    with pytest.raises(ConfigError, match="Invalid declarations"):
        loader(write(tmp_path, "flags.yaml", content))


def test_loader_rejects_missing_keys(tmp_path):
    content = "parameters:\n  - short_key: k\n"
    with pytest.raises(ConfigError):
        loader(write(tmp_path, "flags.yaml", content))


def test_raw_parameter_rejects_empty_key():
    with pytest.raises(ValueError):
        RawParameter(short_key="", long_key="kaas")


def test_raw_parameter_value_type_aliases():
    raw = RawParameter(short_key="k", long_key="kaas", value_type="REQUIRED_VALUE")
    assert raw.value_type is ValueType.REQUIRED_VALUE
    assert raw.to_argument().key == SimpleKey("k", "kaas")


def test_duplicate_keys_are_kept_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="clargs"):
        config = ClargsConfig(
            parameters=[
                RawParameter(short_key="k", long_key="kaas"),
                RawParameter(short_key="k", long_key="kaas"),
            ]
        )
    assert len(config.to_arguments().parameters) == 2
    assert "Key 'k' is declared 2 times" in caplog.text
    assert "Key 'kaas' is declared 2 times" in caplog.text


@pytest.mark.parametrize("raw", ["no", "off", "false", "No"])
def test_yaml_boolean_value_type_means_no_value(tmp_path, raw):
    content = (
        "parameters:\n"
        "  - short_key: t\n"
        "    long_key: topping\n"
        f"    value_type: {raw}\n"
    )
    arguments = loader(write(tmp_path, "flags.yaml", content))
    topping = arguments.get_parameter(SimpleKey("t", "topping"))
    assert topping.value_type is ValueType.NO_VALUE


def test_yaml_true_value_type_is_rejected(tmp_path):
    content = "parameters:\n  - short_key: t\n    long_key: topping\n    value_type: yes\n"
    with pytest.raises(ConfigError, match="read as a boolean"):
        loader(write(tmp_path, "flags.yaml", content))


@pytest.mark.parametrize("raw", ["on", "off", "yes", "no"])
def test_yaml_boolean_key_asks_for_quotes(tmp_path, raw):
    content = f"parameters:\n  - short_key: o\n    long_key: {raw}\n"
    with pytest.raises(ConfigError, match="quote this key"):
        loader(write(tmp_path, "flags.yaml", content))


def test_quoted_yaml_key_loads(tmp_path):
    content = "parameters:\n  - short_key: o\n    long_key: 'on'\n"
    arguments = loader(write(tmp_path, "flags.yaml", content))
    assert arguments.get_parameter(SimpleKey("o", "on")) is not None
