"""Tests for routing nodes to packet constructors."""

from __future__ import annotations

import pytest

from tests.mocks import MockIQ, MockMessage, MockPresence
from xmpp_stanza import (
    NS_CLIENT,
    PacketFactory,
    PacketType,
    StanzaParseError,
    UnknownStanzaError,
    packet_type_for,
    parse_node,
)


@pytest.fixture
def factory() -> PacketFactory:
    f = PacketFactory()
    f.register(PacketType.PRESENCE, MockPresence)
    f.register(PacketType.MESSAGE, MockMessage)
    f.register(PacketType.IQ, MockIQ)
    return f


class TestPacketTypeFor:
    """Classification by element local name."""

    @pytest.mark.parametrize(
        ("xml", "expected"),
        [
            ("<presence/>", PacketType.PRESENCE),
            (f'<message xmlns="{NS_CLIENT}"/>', PacketType.MESSAGE),
            ('<iq xmlns="jabber:server"/>', PacketType.IQ),
            ("<features/>", None),
        ],
    )
    def test_classifies_elements(self, xml, expected):
        assert packet_type_for(parse_node(xml)) is expected


class TestPacketFactory:
    """PacketFactory builds the registered packet for each node."""

    def test_from_string_builds_registered_packet(self, factory):
        # Act
        packet = factory.from_string(f'<message xmlns="{NS_CLIENT}" type="chat" to="a@b"><body>hi</body></message>')

        # Assert
        assert isinstance(packet, MockMessage)
        assert packet.type_ == "chat"
        assert packet.body == "hi"
        assert packet.render() == f'<message xmlns="{NS_CLIENT}" type="chat" to="a@b">\n  <body>hi</body>\n</message>'

    def test_from_node(self, factory):
        packet = factory.from_node(parse_node('<iq type="result" id="r1"/>'))

        assert isinstance(packet, MockIQ)
        assert packet.attrs.export() == {"type": "result", "id": "r1"}

    def test_unknown_element_raises(self, factory):
        with pytest.raises(UnknownStanzaError) as excinfo:
            factory.from_string('<stream:features xmlns:stream="http://etherx.jabber.org/streams"/>')
        assert excinfo.value.code == "unknown_element"

    def test_unregistered_kind_raises(self, factory):
        factory.unregister(PacketType.IQ)

        with pytest.raises(UnknownStanzaError) as excinfo:
            factory.from_string("<iq/>")
        assert excinfo.value.code == "unregistered_kind"
        assert excinfo.value.details == {"kind": "iq"}

    def test_register_replaces_constructor(self, factory):
        factory.register(PacketType.PRESENCE, lambda node: MockPresence(node, status="replaced"))

        packet = factory.from_string("<presence/>")

        assert packet.status == "replaced"

    def test_registered_kinds(self, factory):
        assert factory.registered() == [PacketType.PRESENCE, PacketType.MESSAGE, PacketType.IQ]
        assert PacketFactory().registered() == []

    def test_malformed_text_raises_parse_error(self, factory):
        with pytest.raises(StanzaParseError):
            factory.from_string("<presence")
