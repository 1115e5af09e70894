"""Layout model: containers and text leaves built by the in-memory host."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class StackingDirection(Enum):
    """Axis along which a container arranges its children."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class Axis(Enum):
    """Layout axis of a container: along the stacking direction, or across it."""

    PRIMARY = "primary"
    COUNTER = "counter"


class SizingMode(Enum):
    """Whether a container axis keeps its set size or hugs its children."""

    FIXED = "FIXED"
    AUTO = "AUTO"


class TextAutoResize(Enum):
    """How a text leaf grows to fit its characters."""

    NONE = "NONE"
    HEIGHT = "HEIGHT"
    WIDTH_AND_HEIGHT = "WIDTH_AND_HEIGHT"


@dataclass(frozen=True)
class RGB:
    """Color with channels in [0, 1]."""

    r: float
    g: float
    b: float

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b}


BLACK = RGB(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class FontName:
    family: str
    style: str


@dataclass
class Padding:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0


@dataclass
class Container:
    """A frame that stacks its children along one axis."""

    name: str = "Frame"
    stacking: StackingDirection = StackingDirection.VERTICAL
    primary_sizing: SizingMode = SizingMode.FIXED
    counter_sizing: SizingMode = SizingMode.FIXED
    item_spacing: int = 0
    padding: Padding = field(default_factory=Padding)
    fill: RGB | None = None
    width: float = 100.0
    height: float = 100.0
    children: list["LayoutNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "container",
            "name": self.name,
            "stacking": self.stacking.value,
            "primary_sizing": self.primary_sizing.value,
            "counter_sizing": self.counter_sizing.value,
            "item_spacing": self.item_spacing,
            "padding": [self.padding.top, self.padding.right, self.padding.bottom, self.padding.left],
            "fill": self.fill.to_dict() if self.fill else None,
            "width": self.width,
            "height": self.height,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class TextLeaf:
    """A run of rendered characters."""

    name: str = "Text"
    characters: str = ""
    font: FontName | None = None
    fill: RGB | None = None
    auto_resize: TextAutoResize = TextAutoResize.NONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "text",
            "name": self.name,
            "characters": self.characters,
            "font": {"family": self.font.family, "style": self.font.style} if self.font else None,
            "fill": self.fill.to_dict() if self.fill else None,
            "auto_resize": self.auto_resize.value,
        }


LayoutNode = Union[Container, TextLeaf]


def walk(node: LayoutNode):
    """Yield *node* and all of its descendants depth-first."""
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from walk(child)
