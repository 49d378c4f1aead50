"""Shared attribute model and serialization contract for XMPP stanzas."""

from xmpp_stanza.attrs import Attrs
from xmpp_stanza.core.constants import (
    IQ_TYPE_ERROR,
    IQ_TYPE_GET,
    IQ_TYPE_RESULT,
    IQ_TYPE_SET,
    IQ_TYPES,
    MESSAGE_TYPE_CHAT,
    MESSAGE_TYPE_DEFAULT,
    MESSAGE_TYPE_ERROR,
    MESSAGE_TYPE_GROUPCHAT,
    MESSAGE_TYPE_HEADLINE,
    MESSAGE_TYPE_NORMAL,
    MESSAGE_TYPES,
    NS_CLIENT,
    NS_SERVER,
    NS_XML,
    PRESENCE_TYPE_ERROR,
    PRESENCE_TYPE_PROBE,
    PRESENCE_TYPE_SUBSCRIBE,
    PRESENCE_TYPE_SUBSCRIBED,
    PRESENCE_TYPE_UNAVAILABLE,
    PRESENCE_TYPE_UNSUBSCRIBE,
    PRESENCE_TYPE_UNSUBSCRIBED,
    PRESENCE_TYPES,
    TYPES_BY_KIND,
    PacketType,
)
from xmpp_stanza.dispatch import PacketFactory, packet_type_for
from xmpp_stanza.errors import (
    StanzaConfigurationError,
    StanzaError,
    StanzaParseError,
    UnknownStanzaError,
    XMLBuildError,
)
from xmpp_stanza.packet import Packet, Stanza
from xmpp_stanza.xml import XMLBuilder, parse_node

__version__ = "0.1.0"

__all__ = [
    "IQ_TYPES",
    "IQ_TYPE_ERROR",
    "IQ_TYPE_GET",
    "IQ_TYPE_RESULT",
    "IQ_TYPE_SET",
    "MESSAGE_TYPES",
    "MESSAGE_TYPE_CHAT",
    "MESSAGE_TYPE_DEFAULT",
    "MESSAGE_TYPE_ERROR",
    "MESSAGE_TYPE_GROUPCHAT",
    "MESSAGE_TYPE_HEADLINE",
    "MESSAGE_TYPE_NORMAL",
    "NS_CLIENT",
    "NS_SERVER",
    "NS_XML",
    "PRESENCE_TYPES",
    "PRESENCE_TYPE_ERROR",
    "PRESENCE_TYPE_PROBE",
    "PRESENCE_TYPE_SUBSCRIBE",
    "PRESENCE_TYPE_SUBSCRIBED",
    "PRESENCE_TYPE_UNAVAILABLE",
    "PRESENCE_TYPE_UNSUBSCRIBE",
    "PRESENCE_TYPE_UNSUBSCRIBED",
    "TYPES_BY_KIND",
    "Attrs",
    "Packet",
    "PacketFactory",
    "PacketType",
    "Stanza",
    "StanzaConfigurationError",
    "StanzaError",
    "StanzaParseError",
    "UnknownStanzaError",
    "XMLBuildError",
    "XMLBuilder",
    "packet_type_for",
    "parse_node",
    "__version__",
]
