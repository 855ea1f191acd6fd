"""
dtheader.config.loader - Find, load and merge .dtheader.toml files.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.toml_document import TOMLDocument

from dtheader.config.defaults import DEFAULT_CONFIG, OUTPUT_FORMATS

CONFIG_FILENAME = ".dtheader.toml"
ENV_PREFIX = "DTHEADER_"


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML keeping comments and layout, for round-trip edits."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start_dir: Path) -> Path | None:
    """
    Look for .dtheader.toml in start_dir and each of its parents.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to the config file, or None if there is none
    """
    current = Path(start_dir).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(defaults: dict[str, Any], user: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge user over defaults without modifying either."""
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """Booleans and JSON lists/objects are decoded; anything else stays a string."""
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply DTHEADER_<SECTION>_<KEY> environment variables.

    DTHEADER_OUTPUT_FORMAT=json sets config["output"]["format"].
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX):].lower().partition("_")
        if not section or not key:
            continue
        target = config.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = _try_parse_env_value(raw)
    return config


def validate_config(config: dict[str, Any]) -> list[str]:
    """Return a list of problems with config (empty when valid)."""
    errors = []

    for section in ("header", "validate"):
        strict = config.get(section, {}).get("strict", False)
        if not isinstance(strict, bool):
            errors.append(f"{section}.strict must be true or false, got {strict!r}")

    output_format = config.get("output", {}).get("format", "text")
    if output_format not in OUTPUT_FORMATS:
        errors.append(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    files = config.get("files", {})
    for key in ("patterns", "skip"):
        value = files.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            errors.append(f"files.{key} must be a list of strings")

    return errors


def load_config(config_path: Path) -> dict[str, Any]:
    """
    Load a config file merged over the defaults, then environment overrides.

    Raises:
        ValueError: If the merged configuration is invalid
    """
    user = parse_toml(Path(config_path).read_text(encoding="utf-8"))
    config = apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))
    errors = validate_config(config)
    if errors:
        raise ValueError(f"Invalid configuration in {config_path}: {'; '.join(errors)}")
    return config


def load_default_config() -> dict[str, Any]:
    """Defaults plus environment overrides, for runs without a config file."""
    config = apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))
    errors = validate_config(config)
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
    return config
