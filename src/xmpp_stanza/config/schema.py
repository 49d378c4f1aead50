"""Config schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from xmpp_stanza.core.errors import StanzaConfigurationError
from xmpp_stanza.xml.builder import DEFAULT_INDENT

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = ("STANZA_LOG_LEVEL",)

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: log_level={} render_indent={!r}", self.log_level, self.render_indent)

    def _validate(self) -> None:
        """Validate config structure; raise StanzaConfigurationError on failure."""
        render = self._data.get("render")
        if render is not None and not isinstance(render, dict):
            raise StanzaConfigurationError(
                "render must be a mapping",
                code="invalid_render",
                details={"type": type(render).__name__},
            )
        indent = self.get("render.indent", DEFAULT_INDENT)
        if not isinstance(indent, str) or indent.strip():
            raise StanzaConfigurationError(
                "render.indent must be a whitespace-only string",
                code="invalid_indent",
                details={"indent": indent},
            )
        if self.log_level not in _LOG_LEVELS:
            raise StanzaConfigurationError(
                f"Unknown log level {self.log_level!r}",
                code="invalid_log_level",
                details={"log_level": self.log_level},
            )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def log_level(self) -> str:
        env_val = self._env.get("STANZA_LOG_LEVEL", "").strip()
        if env_val:
            return env_val.upper()
        return str(self._data.get("log_level", "INFO")).upper()

    @property
    def render_indent(self) -> str:
        return str(self.get("render.indent", DEFAULT_INDENT))

    @property
    def render_options(self) -> dict[str, Any]:
        """Keyword arguments for Packet.render()."""
        return {"indent": self.render_indent}


cfg: Config = Config({})
