"""Markup decoding: BeautifulSoup trees and ordered-JSON trees to MarkupNode."""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.markup import AttributeMarker, Element, MarkupNode, Text
from framesmith.parser.errors import ParseError

logger = logging.getLogger(__name__)

TEXT_KEY = "#text"
ATTRIBUTES_KEY = ":@"


# ---------------------------------------------------------------------------
# HTML via BeautifulSoup
# ---------------------------------------------------------------------------


def parse_markup(source: str) -> list[MarkupNode]:
    """Parse markup text into top-level MarkupNodes in document order.

    Comments, doctypes, CDATA sections and processing instructions are
    dropped.  Text inside ``script`` and ``style`` stays ordinary text.
    """
    if not isinstance(source, str):
        raise ParseError(f"markup must be a string, got {type(source).__name__}", source="markup")
    try:
        soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise ParseError(str(e), source="markup") from e
    return _convert_children(soup)


def _convert_children(tag: Tag) -> list[MarkupNode]:
    nodes: list[MarkupNode] = []
    for child in tag.contents:
        node = _convert(child)
        if node is not None:
            nodes.append(node)
    return nodes


def _convert(item: Any) -> MarkupNode | None:
    if isinstance(item, Tag):
        attributes = {str(k).lower(): _attribute_text(v) for k, v in item.attrs.items()}
        return Element(
            tag=item.name.lower(),
            attributes=attributes,
            children=tuple(_convert_children(item)),
        )
    if isinstance(item, PreformattedString):
        logger.debug("Dropping %s node", type(item).__name__)
        return None
    if isinstance(item, NavigableString):
        return Text(str(item))
    return None


def _attribute_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return "" if value is None else str(value)


# ---------------------------------------------------------------------------
# Ordered-JSON trees: [{"div": [...], ":@": {...}}, {"#text": "..."}]
# ---------------------------------------------------------------------------


def decode_tree(raw: Any, diagnostics: DiagnosticLog | None = None) -> list[MarkupNode]:
    """Decode an ordered-JSON markup tree into MarkupNodes.

    Each entry is an object whose first key names the node: ``#text`` for
    character data, ``:@`` for an attribute record, anything else for an
    element whose value is the ordered child list.  The attribute record of
    an element may also sit beside the tag key in the same object.  Entries
    of any other shape are skipped and reported as ``malformed_node``.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
    entries = raw if isinstance(raw, list) else [raw]
    nodes: list[MarkupNode] = []
    for entry in entries:
        decoded = _decode_entry(entry, diagnostics)
        if isinstance(decoded, (Element, Text)):
            nodes.append(decoded)
    return nodes


def _decode_entry(
    entry: Any, diagnostics: DiagnosticLog
) -> Element | Text | AttributeMarker | None:
    if not isinstance(entry, dict) or not entry:
        diagnostics.warning("malformed_node", f"Skipping invalid node: {entry!r}")
        return None

    node_type = next(iter(entry))
    content = entry[node_type]

    if node_type == TEXT_KEY:
        if isinstance(content, (int, float)) and not isinstance(content, bool):
            content = str(content)
        if not isinstance(content, str):
            diagnostics.warning("malformed_node", f"Text node with non-string content: {content!r}")
            return None
        return Text(content)

    if node_type == ATTRIBUTES_KEY:
        if not isinstance(content, dict):
            diagnostics.warning("malformed_node", f"Attribute record is not a mapping: {content!r}")
            return None
        return AttributeMarker(_normalize_attributes(content))

    if not isinstance(node_type, str) or not node_type.strip():
        diagnostics.warning("malformed_node", f"Skipping node with invalid tag: {node_type!r}")
        return None

    attributes: dict[str, str] = {}
    sibling_attrs = entry.get(ATTRIBUTES_KEY)
    if isinstance(sibling_attrs, dict):
        attributes.update(_normalize_attributes(sibling_attrs))

    children: list[MarkupNode] = []
    if isinstance(content, list):
        for child in content:
            decoded = _decode_entry(child, diagnostics)
            if isinstance(decoded, AttributeMarker):
                attributes.update(decoded.attributes)
            elif decoded is not None:
                children.append(decoded)
    elif content not in (None, "", {}):
        diagnostics.warning(
            "malformed_node",
            f"Element <{node_type}> has non-list content; children ignored",
            location=node_type,
        )

    return Element(tag=node_type.lower(), attributes=attributes, children=tuple(children))


def _normalize_attributes(raw: dict[Any, Any]) -> dict[str, str]:
    return {str(k).lower(): _attribute_text(v) for k, v in raw.items()}
