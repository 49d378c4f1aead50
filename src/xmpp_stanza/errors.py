"""Re-export from core.errors."""

from xmpp_stanza.core.errors import (
    StanzaConfigurationError,
    StanzaError,
    StanzaParseError,
    UnknownStanzaError,
    XMLBuildError,
)

__all__ = [
    "StanzaConfigurationError",
    "StanzaError",
    "StanzaParseError",
    "UnknownStanzaError",
    "XMLBuildError",
]
