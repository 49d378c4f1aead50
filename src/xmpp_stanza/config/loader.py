"""Config loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from xmpp_stanza.config.schema import Config, cfg

DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",
    "render": {"indent": "  "},
}


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML file. Use SafeLoader. Returns raw dict."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            logger.warning("Config file {} has invalid structure (expected dict)", path)
            return {}
        return data
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load .env into the process environment, then the YAML config over DEFAULT_CONFIG."""
    from dotenv import load_dotenv

    load_dotenv()
    return _deep_update(DEFAULT_CONFIG, load_config(path))


def reload_config(path: str | Path) -> Config:
    """Load config from path and update the global cfg."""
    data = load_config_with_env(path)
    cfg.reload(data)
    return cfg
