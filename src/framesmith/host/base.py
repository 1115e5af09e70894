"""Node-factory protocol: the host scene-graph operations the mapper needs."""

from __future__ import annotations

from typing import Any, Protocol

from framesmith.model.layout import RGB, Axis, SizingMode, StackingDirection, TextAutoResize


class HostError(Exception):
    """Raised by a host when a scene-graph operation cannot be carried out."""


class FontUnavailableError(HostError):
    """Raised by ``request_font`` when the family/style cannot be loaded."""

    def __init__(self, family: str, style: str) -> None:
        self.family = family
        self.style = style
        super().__init__(f"Font {family} {style} is not available")


class NodeFactory(Protocol):
    """Protocol for hosts that create and arrange layout nodes.

    Handles are opaque to the mapper; only the factory that produced a
    handle may be asked to mutate it.
    """

    def create_container(self) -> Any: ...

    def create_text_leaf(self) -> Any: ...

    def set_name(self, handle: Any, name: str) -> None: ...

    def set_stacking_direction(self, handle: Any, direction: StackingDirection) -> None: ...

    def set_auto_size(self, handle: Any, axis: Axis, mode: SizingMode) -> None: ...

    def set_item_spacing(self, handle: Any, spacing: int) -> None: ...

    def set_padding(self, handle: Any, top: int, right: int, bottom: int, left: int) -> None: ...

    def set_fill(self, handle: Any, color: RGB) -> None: ...

    def size(self, handle: Any) -> tuple[float, float]: ...

    def resize(self, handle: Any, width: float, height: float) -> None: ...

    def append_child(self, parent: Any, child: Any) -> None: ...

    async def request_font(self, family: str, style: str) -> None: ...

    def set_font(self, handle: Any, family: str, style: str) -> None: ...

    def set_characters(self, handle: Any, text: str) -> None: ...

    def set_text_auto_resize(self, handle: Any, mode: TextAutoResize) -> None: ...

    def attach_to_document(self, root: Any) -> None: ...
