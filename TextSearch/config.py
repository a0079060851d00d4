"""
Configuration loading for TextSearch.
Settings live in a JSON file next to the package and are merged over built-in defaults.
"""
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "source": {
        "extensions": [],
        "encoding": "utf-8",
        "errors": "replace"
    },
    "tokenizer": {
        "keep_empty_tokens": False
    },
    "search": {
        "top_k": 0,
        "reindex": "replace"
    },
    "logging": {
        "level": "WARNING"
    }
}

REINDEX_POLICIES = ("replace", "reject")


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge overrides into a copy of base.

    Args:
        base: Dictionary with default values
        overrides: Dictionary whose values take precedence

    Returns:
        New merged dictionary
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, falling back to defaults.

    Args:
        config_path: Path to the JSON file (defaults to the packaged config.json)

    Returns:
        Configuration dictionary with every default key present
    """
    config_path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning("Config file %s not found, using default settings", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load config %s: %s, using default settings", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(loaded, dict):
        logger.warning("Config %s is not a JSON object, using default settings", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    return merge_config(DEFAULT_CONFIG, loaded)


def resolve_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Complete a partial configuration dictionary with defaults."""
    if config is None:
        return load_config()
    return merge_config(DEFAULT_CONFIG, config)
