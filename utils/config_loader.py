import copy
import yaml
import logging
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_PATH = "config.yml"

DEFAULT_CONFIG = {
    "settings": {
        "method": 3,
        "locale": "en",
    },
    "location": {
        "source": "static",
        "latitude": 41.0082,
        "longitude": 28.9784,
        "name": "Istanbul, Türkiye",
        "permission": True,
    },
    "compass": {
        "sensor": True,
    },
    "api": {
        "enabled": False,
        "host": "127.0.0.1",
        "port": 8000,
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> dict:
    """Load YAML configuration file, filled in with defaults.

    An explicit path that does not exist is an error; a missing default
    config.yml just means defaults.
    """
    config_file = Path(config_path or DEFAULT_CONFIG_PATH)
    if not config_file.exists():
        if config_path:
            raise FileNotFoundError(f"Config file not found at {config_file.resolve()}")
        logging.warning(f"[CONFIG] {config_file} not found, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_file, "r", encoding="utf-8") as f:
        return _merge(DEFAULT_CONFIG, yaml.safe_load(f) or {})
