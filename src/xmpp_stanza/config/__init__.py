"""Configuration: YAML + env overlay."""

from xmpp_stanza.config.loader import DEFAULT_CONFIG, _deep_update, load_config, load_config_with_env, reload_config
from xmpp_stanza.config.schema import Config, cfg

__all__ = ["DEFAULT_CONFIG", "Config", "_deep_update", "cfg", "load_config", "load_config_with_env", "reload_config"]
