"""Incremental XML document builder backed by lxml.

Elements are opened with :meth:`XMLBuilder.element` and may receive attributes
until they get content (a child element or text), matching the emission order
of a streaming writer. The element itself is only created in the lxml tree once
its attributes are settled, so an ``xmlns`` attribute can still turn into the
element's default namespace.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field

from lxml import etree

from xmpp_stanza.core.constants import NS_XML
from xmpp_stanza.core.errors import XMLBuildError

XML_DECLARATION = '<?xml version="1.0"?>'
DEFAULT_INDENT = "  "
DEFAULT_QUOTE_CHAR = '"'


@dataclass
class _Frame:
    """An open element; ``element`` stays None until content or close."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    element: etree._Element | None = None


def _attribute_key(name: str) -> str:
    if name == "xml:lang":
        return f"{{{NS_XML}}}lang"
    return name


class XMLBuilder:
    """Build one XML document from element/attribute/text emissions."""

    def __init__(self, *, indent: str = DEFAULT_INDENT, quote_char: str = DEFAULT_QUOTE_CHAR) -> None:
        if quote_char != '"':
            raise XMLBuildError(
                "Only double-quoted attribute values are supported",
                code="unsupported_quote_char",
                details={"quote_char": quote_char},
            )
        self.indent = indent
        self.quote_char = quote_char
        self._root: etree._Element | None = None
        self._stack: list[_Frame] = []

    @contextmanager
    def element(self, name: str, attributes: Mapping[str, str] | None = None) -> Iterator[XMLBuilder]:
        """Open ``name`` for the duration of the block; nested calls create children."""
        self.start_element(name)
        for key, value in (attributes or {}).items():
            self.attribute(key, value)
        yield self
        self.end_element()

    def start_element(self, name: str) -> None:
        if self._stack:
            self._materialize(self._stack[-1])
        elif self._root is not None:
            raise XMLBuildError("Document already has a root element", code="second_root", details={"name": name})
        self._stack.append(_Frame(name))

    def end_element(self) -> None:
        if not self._stack:
            raise XMLBuildError("No open element to close", code="unbalanced_end")
        self._materialize(self._stack[-1])
        self._stack.pop()

    def attribute(self, name: str, value: str) -> None:
        """Add an attribute to the innermost open element."""
        if not self._stack:
            raise XMLBuildError("Attribute outside of an element", code="attribute_outside_element")
        frame = self._stack[-1]
        if frame.element is not None:
            raise XMLBuildError(
                f"Attribute {name!r} after element content",
                code="attribute_after_content",
                details={"element": frame.name, "attribute": name},
            )
        frame.attributes[name] = value

    def text(self, content: str) -> None:
        """Append character data to the innermost open element."""
        if not self._stack:
            raise XMLBuildError("Text outside of an element", code="text_outside_element")
        element = self._materialize(self._stack[-1])
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + content
        else:
            element.text = (element.text or "") + content

    def document(self) -> str:
        """Return the assembled document, starting with the XML declaration."""
        if self._stack:
            raise XMLBuildError(
                "Document has unclosed elements",
                code="unclosed_element",
                details={"open": [frame.name for frame in self._stack]},
            )
        if self._root is None:
            raise XMLBuildError("Document has no root element", code="empty_document")
        if self.indent:
            etree.indent(self._root, space=self.indent)
        body = etree.tostring(self._root, encoding="unicode")
        return f"{XML_DECLARATION}\n{body}"

    def _materialize(self, frame: _Frame) -> etree._Element:
        if frame.element is not None:
            return frame.element

        parent = self._stack[-2].element if len(self._stack) > 1 else None
        inherited = etree.QName(parent).namespace if parent is not None else None
        attributes = dict(frame.attributes)
        declared = attributes.pop("xmlns", None)
        namespace = inherited if declared is None else declared
        if declared == "" and inherited:
            raise XMLBuildError(
                "Cannot undeclare the default namespace inside a namespaced parent",
                code="namespace_undeclaration",
                details={"element": frame.name, "parent_namespace": inherited},
            )

        tag = f"{{{namespace}}}{frame.name}" if namespace else frame.name
        nsmap = {None: namespace} if namespace and namespace != inherited else None
        if parent is None:
            element = etree.Element(tag, nsmap=nsmap)
            self._root = element
        else:
            element = etree.SubElement(parent, tag, nsmap=nsmap)
        for key, value in attributes.items():
            element.set(_attribute_key(key), value)

        frame.element = element
        return element
