"""Attributes shared by every stanza kind.

Message ``type`` values (RFC 6120 / RFC 6121):

* ``chat`` -- one-to-one chat session.
* ``error`` -- an error in processing a previously sent message.
* ``groupchat`` -- multi-user chat room.
* ``headline`` -- alert or notification; no reply is expected.
* ``normal`` -- standalone message outside a chat session. This is the default.

A ``to`` address for a message sent outside an existing session SHOULD be a
bare JID (``user@domain``) rather than a full JID (``user@domain/resource``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lxml import etree

# Attribute local name -> Attrs field
_FIELDS = {
    "type": "type_",
    "id": "id_",
    "from": "from_",
    "to": "to",
    "lang": "lang",
}


def _blank(value: str) -> bool:
    return not value.strip()


@dataclass
class Attrs:
    """Addressing and routing attributes common to presence, message and iq."""

    type_: str = ""
    id_: str = ""
    from_: str = ""
    to: str = ""
    lang: str = ""
    _xmlns: str = field(default="", init=False)

    @property
    def xmlns(self) -> str:
        """Namespace of the node this set was populated from; read-only."""
        return self._xmlns

    def populate(self, node: Any) -> None:
        """Load known attributes from an ElementTree-API node; others are ignored."""
        self._xmlns = etree.QName(node.tag).namespace or ""
        for key, value in node.attrib.items():
            name = etree.QName(key).localname
            attr = _FIELDS.get(name)
            if attr is not None:
                setattr(self, attr, value)

    def export(self) -> dict[str, str]:
        """Non-blank attributes keyed by their XML names.

        The language key is ``xml:lang`` for namespaced nodes and ``lang`` otherwise.
        """
        result: dict[str, str] = {}
        if not _blank(self.xmlns):
            result["xmlns"] = self.xmlns
        if not _blank(self.type_):
            result["type"] = self.type_
        if not _blank(self.id_):
            result["id"] = self.id_
        if not _blank(self.from_):
            result["from"] = self.from_
        if not _blank(self.to):
            result["to"] = self.to
        lang_key = "lang" if _blank(self.xmlns) else "xml:lang"
        if not _blank(self.lang):
            result[lang_key] = self.lang
        return result
