"""Protocol constants: stanza kinds and permitted ``type`` values (RFC 6120 A.5, A.6)."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

NS_CLIENT = "jabber:client"
NS_SERVER = "jabber:server"
NS_XML = "http://www.w3.org/XML/1998/namespace"


class PacketType(Enum):
    """Stanza kind. Values are the element names."""

    PRESENCE = "presence"
    MESSAGE = "message"
    IQ = "iq"


IQ_TYPE_ERROR = "error"
IQ_TYPE_GET = "get"
IQ_TYPE_RESULT = "result"
IQ_TYPE_SET = "set"

MESSAGE_TYPE_CHAT = "chat"
MESSAGE_TYPE_ERROR = "error"
MESSAGE_TYPE_GROUPCHAT = "groupchat"
MESSAGE_TYPE_HEADLINE = "headline"
MESSAGE_TYPE_NORMAL = "normal"
MESSAGE_TYPE_DEFAULT = MESSAGE_TYPE_NORMAL

PRESENCE_TYPE_ERROR = "error"
PRESENCE_TYPE_PROBE = "probe"
PRESENCE_TYPE_SUBSCRIBE = "subscribe"
PRESENCE_TYPE_SUBSCRIBED = "subscribed"
PRESENCE_TYPE_UNAVAILABLE = "unavailable"
PRESENCE_TYPE_UNSUBSCRIBE = "unsubscribe"
PRESENCE_TYPE_UNSUBSCRIBED = "unsubscribed"

IQ_TYPES: frozenset[str] = frozenset({IQ_TYPE_ERROR, IQ_TYPE_GET, IQ_TYPE_RESULT, IQ_TYPE_SET})
MESSAGE_TYPES: frozenset[str] = frozenset(
    {
        MESSAGE_TYPE_CHAT,
        MESSAGE_TYPE_ERROR,
        MESSAGE_TYPE_GROUPCHAT,
        MESSAGE_TYPE_HEADLINE,
        MESSAGE_TYPE_NORMAL,
    }
)
PRESENCE_TYPES: frozenset[str] = frozenset(
    {
        PRESENCE_TYPE_ERROR,
        PRESENCE_TYPE_PROBE,
        PRESENCE_TYPE_SUBSCRIBE,
        PRESENCE_TYPE_SUBSCRIBED,
        PRESENCE_TYPE_UNAVAILABLE,
        PRESENCE_TYPE_UNSUBSCRIBE,
        PRESENCE_TYPE_UNSUBSCRIBED,
    }
)

# An absent type attribute means "available" (presence) or "normal" (message).
TYPES_BY_KIND: Mapping[PacketType, frozenset[str]] = MappingProxyType(
    {
        PacketType.IQ: IQ_TYPES,
        PacketType.MESSAGE: MESSAGE_TYPES,
        PacketType.PRESENCE: PRESENCE_TYPES,
    }
)
