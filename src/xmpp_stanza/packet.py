"""Packet contract shared by presence, message and iq stanzas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar

from xmpp_stanza.attrs import Attrs
from xmpp_stanza.config.schema import cfg
from xmpp_stanza.core.constants import PacketType
from xmpp_stanza.xml.builder import XML_DECLARATION, XMLBuilder


class Packet(ABC):
    """A stanza that can serialize itself into an :class:`XMLBuilder`."""

    @abstractmethod
    def name(self) -> str:
        """Element name (e.g. 'presence', 'message', 'iq')."""
        ...

    @abstractmethod
    def serialize_into(self, builder: XMLBuilder) -> str | None:
        """Write element, attributes and children into ``builder``."""
        ...

    def render(self, *, indent: str | None = None) -> str:
        """Serialize to an XML fragment with no declaration and no leading newline.

        Each call builds a fresh document from current state. ``indent`` defaults
        to cfg.render_indent (two spaces unless configured).
        """
        if indent is None:
            indent = cfg.render_indent
        builder = XMLBuilder(indent=indent, quote_char='"')
        self.serialize_into(builder)
        text = builder.document()
        return text.removeprefix(XML_DECLARATION).lstrip("\n")


class _Forward:
    """Expose an ``Attrs`` field on the owning stanza."""

    def __init__(self, attr: str) -> None:
        self._attr = attr

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj.attrs, self._attr)

    def __set__(self, obj: Any, value: str) -> None:
        setattr(obj.attrs, self._attr, value)


class Stanza(Packet):
    """Packet composed with an :class:`Attrs` set; subclasses add their payload."""

    kind: ClassVar[PacketType]

    type_ = _Forward("type_")
    id_ = _Forward("id_")
    from_ = _Forward("from_")
    to = _Forward("to")
    lang = _Forward("lang")

    def __init__(self, node: Any = None) -> None:
        if not isinstance(getattr(type(self), "kind", None), PacketType):
            raise TypeError(f"Can't instantiate {type(self).__name__} without a PacketType kind")
        self.attrs = Attrs()
        if node is not None:
            self.attrs.populate(node)

    @property
    def xmlns(self) -> str:
        return self.attrs.xmlns

    def name(self) -> str:
        return self.kind.value

    @contextmanager
    def open_element(self, builder: XMLBuilder) -> Iterator[XMLBuilder]:
        """Open this stanza's element with its exported attributes."""
        with builder.element(self.name(), self.attrs.export()) as b:
            yield b

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.attrs.export()!r}>"
