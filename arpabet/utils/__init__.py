import json
from pathlib import Path
from typing import Any, List

import yaml
from loguru import logger

from arpabet import exceptions


def load_config_from_json_or_yaml_path(path: Path):
    if not path.exists():
        raise ValueError(f"Config file '{path}' does not exist")
    with open(path, "r", encoding="utf8") as f:
        config = json.load(f) if path.suffix == ".json" else yaml.safe_load(f)
    if config is None:
        raise exceptions.InvalidConfiguration(f"Your configuration at {path} was empty")
    if not isinstance(config, dict):
        raise exceptions.InvalidConfiguration(
            f"Your configuration at {path} must be a mapping of keys to values"
        )
    return config


def parse_config_value(value: str) -> Any:
    """Values given on the command line are read as YAML scalars or lists.

    >>> parse_config_value("false")
    False
    >>> parse_config_value("[a.dict, b.dict]")
    ['a.dict', 'b.dict']
    >>> parse_config_value("latin-1")
    'latin-1'
    """
    return yaml.safe_load(value)


def expand_config_string_syntax(config_arg: str) -> dict:
    """Expand a string of the form "key1.key2=value" into a dict.

    >>> expand_config_string_syntax("custom_dictionaries.0=names.dict")
    {'custom_dictionaries': {'0': 'names.dict'}}
    """
    config_dict: Any = {}
    try:
        key, value = config_arg.split("=", 1)
    except ValueError as e:
        raise ValueError(f"Invalid config string: {config_arg} - missing '='") from e
    current_dict = config_dict
    keys = key.split(".")
    for key in keys[:-1]:
        current_dict[key] = {}
        current_dict = current_dict[key]
    current_dict[keys[-1]] = parse_config_value(value)
    return config_dict


def update_config_from_cli_args(arg_list: List[str], original_config):
    if arg_list is None or not arg_list:
        return original_config
    for arg in arg_list:
        logger.info(f"Updating config with '{arg}'")
        original_config = original_config.update_config(
            expand_config_string_syntax(arg)
        )
    return original_config

