"""Parse XML text into a navigable lxml node."""

from __future__ import annotations

from lxml import etree

from xmpp_stanza.core.errors import StanzaParseError


def _make_parser() -> etree.XMLParser:
    # No entity expansion, DTD loading or network access.
    return etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)


def parse_node(data: str | bytes) -> etree._Element:
    """Parse a single XML element (with any children) and return its node."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    try:
        return etree.fromstring(raw, parser=_make_parser())
    except etree.XMLSyntaxError as exc:
        raise StanzaParseError(
            f"Malformed XML: {exc}",
            code="malformed_xml",
            details={"length": len(raw)},
            original_error=exc,
        ) from exc
