"""Markup model: the closed node sum type the tree mapper walks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    content: str

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass(frozen=True)
class Element:
    """An element with a lower-cased tag, its attributes and ordered children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple["MarkupNode", ...] = ()

    @property
    def classes(self) -> list[str]:
        return self.attributes.get("class", "").split()

    @property
    def element_id(self) -> str:
        return self.attributes.get("id", "")

    def describe(self) -> str:
        """Short CSS-like label used in diagnostics, e.g. ``div#main.card``."""
        label = self.tag
        if self.element_id:
            label += f"#{self.element_id}"
        for cls in self.classes:
            label += f".{cls}"
        return label


@dataclass(frozen=True)
class AttributeMarker:
    """Synthetic attribute record found in ordered-JSON markup trees.

    Only produced while decoding; folded into the owning Element.
    """

    attributes: dict[str, str]


MarkupNode = Union[Element, Text]
