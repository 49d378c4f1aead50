"""Route incoming nodes to the packet constructor registered for their kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger
from lxml import etree

from xmpp_stanza.core.constants import PacketType
from xmpp_stanza.core.errors import UnknownStanzaError
from xmpp_stanza.packet import Packet
from xmpp_stanza.xml.parser import parse_node

PacketConstructor = Callable[[Any], Packet]

_KINDS_BY_NAME = {kind.value: kind for kind in PacketType}


def packet_type_for(node: Any) -> PacketType | None:
    """Classify a node by its element local name; None for non-stanza elements."""
    return _KINDS_BY_NAME.get(etree.QName(node.tag).localname)


class PacketFactory:
    """Registry of packet constructors keyed by :class:`PacketType`."""

    def __init__(self) -> None:
        self._constructors: dict[PacketType, PacketConstructor] = {}

    def register(self, kind: PacketType, constructor: PacketConstructor) -> None:
        """Register (or replace) the constructor for ``kind``."""
        self._constructors[kind] = constructor

    def unregister(self, kind: PacketType) -> None:
        self._constructors.pop(kind, None)

    def registered(self) -> list[PacketType]:
        return list(self._constructors)

    def from_node(self, node: Any) -> Packet:
        """Build the packet for ``node``; raise UnknownStanzaError if it cannot be mapped."""
        kind = packet_type_for(node)
        if kind is None:
            raise UnknownStanzaError(
                f"Not a stanza element: {node.tag}",
                code="unknown_element",
                details={"tag": node.tag},
            )
        constructor = self._constructors.get(kind)
        if constructor is None:
            raise UnknownStanzaError(
                f"No constructor registered for {kind.value}",
                code="unregistered_kind",
                details={"kind": kind.value},
            )
        logger.debug("Dispatch: <{}> -> {}", node.tag, kind.name)
        return constructor(node)

    def from_string(self, data: str | bytes) -> Packet:
        """Parse XML text and build the packet for its root element."""
        return self.from_node(parse_node(data))
