"""In-memory host: builds Container / TextLeaf objects without a design tool."""

from __future__ import annotations

import logging

from framesmith.host.base import FontUnavailableError, HostError
from framesmith.model.layout import (
    RGB,
    Axis,
    Container,
    FontName,
    LayoutNode,
    Padding,
    SizingMode,
    StackingDirection,
    TextAutoResize,
    TextLeaf,
)

logger = logging.getLogger(__name__)

FONT_STYLES = ("Regular", "Bold", "Italic", "Bold Italic")

DEFAULT_FAMILIES = (
    "Inter",
    "Roboto",
    "Arial",
    "Helvetica",
    "Georgia",
    "Times New Roman",
    "Courier New",
)


def default_fonts() -> set[tuple[str, str]]:
    return {(family, style) for family in DEFAULT_FAMILIES for style in FONT_STYLES}


class InMemoryHost:
    """A NodeFactory that keeps the produced tree in memory.

    ``available_fonts`` lists the (family, style) pairs ``request_font`` can
    load; ``None`` selects the default catalogue.  Text characters and fonts
    can only be set once the requested font has been loaded, matching
    design hosts that refuse text edits with unloaded fonts.
    """

    def __init__(self, available_fonts: set[tuple[str, str]] | None = None) -> None:
        self.available_fonts = set(available_fonts) if available_fonts is not None else default_fonts()
        self.loaded_fonts: set[tuple[str, str]] = set()
        self.font_requests: list[tuple[str, str]] = []
        self.document: list[Container] = []

    # --- creation ---------------------------------------------------------------

    def create_container(self) -> Container:
        return Container()

    def create_text_leaf(self) -> TextLeaf:
        return TextLeaf()

    # --- container properties ---------------------------------------------------

    def set_name(self, handle: LayoutNode, name: str) -> None:
        handle.name = name

    def set_stacking_direction(self, handle: Container, direction: StackingDirection) -> None:
        self._require_container(handle).stacking = direction

    def set_auto_size(self, handle: Container, axis: Axis, mode: SizingMode) -> None:
        container = self._require_container(handle)
        if axis is Axis.PRIMARY:
            container.primary_sizing = mode
        else:
            container.counter_sizing = mode

    def set_item_spacing(self, handle: Container, spacing: int) -> None:
        self._require_container(handle).item_spacing = spacing

    def set_padding(self, handle: Container, top: int, right: int, bottom: int, left: int) -> None:
        self._require_container(handle).padding = Padding(top, right, bottom, left)

    def set_fill(self, handle: LayoutNode, color: RGB) -> None:
        handle.fill = color

    def size(self, handle: Container) -> tuple[float, float]:
        container = self._require_container(handle)
        return container.width, container.height

    def resize(self, handle: Container, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise HostError(f"Cannot resize {handle.name} to {width}x{height}")
        container = self._require_container(handle)
        container.width = width
        container.height = height

    def append_child(self, parent: Container, child: LayoutNode) -> None:
        self._require_container(parent).children.append(child)

    # --- text -------------------------------------------------------------------

    async def request_font(self, family: str, style: str) -> None:
        self.font_requests.append((family, style))
        if (family, style) not in self.available_fonts:
            raise FontUnavailableError(family, style)
        self.loaded_fonts.add((family, style))
        logger.debug("Loaded font %s %s", family, style)

    def set_font(self, handle: TextLeaf, family: str, style: str) -> None:
        if (family, style) not in self.loaded_fonts:
            raise HostError(f"Font {family} {style} must be loaded before use")
        handle.font = FontName(family, style)

    def set_characters(self, handle: TextLeaf, text: str) -> None:
        if handle.font is None or (handle.font.family, handle.font.style) not in self.loaded_fonts:
            raise HostError("Cannot set characters before a loaded font is assigned")
        handle.characters = text

    def set_text_auto_resize(self, handle: TextLeaf, mode: TextAutoResize) -> None:
        handle.auto_resize = mode

    # --- document ---------------------------------------------------------------

    def attach_to_document(self, root: Container) -> None:
        self.document.append(root)

    @staticmethod
    def _require_container(handle: LayoutNode) -> Container:
        if not isinstance(handle, Container):
            raise HostError(f"Expected a container, got {type(handle).__name__}")
        return handle
