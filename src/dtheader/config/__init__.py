"""
dtheader.config - Configuration loading and defaults
"""

from dtheader.config.defaults import DEFAULT_CONFIG
from dtheader.config.loader import (
    _try_parse_env_value,
    apply_env_overrides,
    find_config_file,
    load_config,
    load_default_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "apply_env_overrides",
    "find_config_file",
    "load_config",
    "load_default_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "validate_config",
]
