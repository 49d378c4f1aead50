"""Core protocol tables and errors."""

from xmpp_stanza.core.constants import NS_CLIENT, NS_SERVER, NS_XML, TYPES_BY_KIND, PacketType
from xmpp_stanza.core.errors import (
    StanzaConfigurationError,
    StanzaError,
    StanzaParseError,
    UnknownStanzaError,
    XMLBuildError,
)

__all__ = [
    "NS_CLIENT",
    "NS_SERVER",
    "NS_XML",
    "TYPES_BY_KIND",
    "PacketType",
    "StanzaConfigurationError",
    "StanzaError",
    "StanzaParseError",
    "UnknownStanzaError",
    "XMLBuildError",
]
