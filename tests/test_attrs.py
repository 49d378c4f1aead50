"""Tests for attribute population and export."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest
from lxml import etree

from xmpp_stanza import NS_CLIENT, NS_XML, Attrs, parse_node


class TestPopulate:
    """Attrs.populate reads known attributes and the node namespace."""

    def test_plain_node_without_namespace(self):
        # Arrange
        node = parse_node('<message type="chat" from="a@b" to="c@d"/>')
        attrs = Attrs()

        # Act
        attrs.populate(node)

        # Assert
        assert attrs.type_ == "chat"
        assert attrs.from_ == "a@b"
        assert attrs.to == "c@d"
        assert attrs.id_ == ""
        assert attrs.lang == ""
        assert attrs.xmlns == ""

    def test_namespace_from_node(self):
        node = parse_node(f'<presence xmlns="{NS_CLIENT}" id="p1"/>')
        attrs = Attrs()

        attrs.populate(node)

        assert attrs.xmlns == NS_CLIENT
        assert attrs.id_ == "p1"

    def test_xml_lang_matches_lang_field(self):
        node = parse_node(f'<message xmlns="{NS_CLIENT}" xml:lang="en"/>')
        attrs = Attrs()

        attrs.populate(node)

        assert attrs.lang == "en"

    def test_unknown_attributes_are_ignored(self):
        node = parse_node('<iq unknownattr="x" xmlns:foo="urn:foo" foo:bar="y"/>')
        attrs = Attrs()

        attrs.populate(node)

        assert attrs == Attrs()

    def test_repopulate_overwrites_and_rederives_namespace(self):
        attrs = Attrs()
        attrs.populate(parse_node(f'<iq xmlns="{NS_CLIENT}" id="one" type="get"/>'))

        attrs.populate(parse_node('<iq id="two"/>'))

        assert attrs.id_ == "two"
        assert attrs.xmlns == ""
        # Attributes absent from the second node keep their earlier value
        assert attrs.type_ == "get"

    def test_accepts_stdlib_elementtree_nodes(self):
        node = ET.fromstring(f'<presence xmlns="{NS_CLIENT}" xml:lang="de" to="x@y"/>')
        attrs = Attrs()

        attrs.populate(node)

        assert attrs.xmlns == NS_CLIENT
        assert attrs.lang == "de"
        assert attrs.to == "x@y"

    def test_malformed_node_propagates(self):
        attrs = Attrs()

        with pytest.raises(AttributeError):
            attrs.populate(object())

    def test_repr_includes_namespace(self):
        namespaced = Attrs()
        namespaced.populate(parse_node(f'<presence xmlns="{NS_CLIENT}"/>'))

        assert NS_CLIENT in repr(namespaced)
        assert repr(namespaced) != repr(Attrs())

    def test_xmlns_is_read_only(self):
        attrs = Attrs()

        with pytest.raises(AttributeError):
            attrs.xmlns = "jabber:server"  # type: ignore[misc]


class TestExport:
    """Attrs.export returns only non-empty fields."""

    def test_scenario_without_namespace(self):
        attrs = Attrs()
        attrs.populate(parse_node('<message type="chat" from="a@b" to="c@d"/>'))

        assert attrs.export() == {"type": "chat", "from": "a@b", "to": "c@d"}

    def test_scenario_with_namespace(self):
        node = etree.Element(f"{{{NS_CLIENT}}}message", nsmap={None: NS_CLIENT})
        node.set("lang", "en")
        node.set("id", "abc1")
        attrs = Attrs()
        attrs.populate(node)

        assert attrs.export() == {"xmlns": NS_CLIENT, "id": "abc1", "xml:lang": "en"}

    def test_unknown_only_exports_nothing(self):
        attrs = Attrs()
        attrs.populate(parse_node('<presence unknownattr="x"/>'))

        assert attrs.export() == {}

    def test_lang_key_without_namespace(self):
        attrs = Attrs(lang="fr")

        assert attrs.export() == {"lang": "fr"}

    def test_key_order(self):
        node = etree.Element(f"{{{NS_CLIENT}}}iq", nsmap={None: NS_CLIENT})
        for key, value in [("to", "t@x"), (f"{{{NS_XML}}}lang", "en"), ("from", "f@x"), ("id", "i1"), ("type", "set")]:
            node.set(key, value)
        attrs = Attrs()
        attrs.populate(node)

        assert list(attrs.export()) == ["xmlns", "type", "id", "from", "to", "xml:lang"]

    def test_blank_values_are_omitted(self):
        attrs = Attrs(type_="", id_="   ", to="a@b")

        assert attrs.export() == {"to": "a@b"}

    def test_export_returns_fresh_mapping(self):
        attrs = Attrs(id_="x")

        first = attrs.export()
        first["id"] = "mutated"

        assert attrs.export() == {"id": "x"}

    def test_export_reflects_mutation(self):
        attrs = Attrs(to="a@b")
        attrs.to = "c@d"

        assert attrs.export() == {"to": "c@d"}
