"""XML collaborators: document builder and node parser."""

from xmpp_stanza.xml.builder import DEFAULT_INDENT, DEFAULT_QUOTE_CHAR, XML_DECLARATION, XMLBuilder
from xmpp_stanza.xml.parser import parse_node

__all__ = ["DEFAULT_INDENT", "DEFAULT_QUOTE_CHAR", "XML_DECLARATION", "XMLBuilder", "parse_node"]
