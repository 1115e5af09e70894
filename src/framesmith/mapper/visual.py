"""Application of non-inherited visual properties to a container."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from framesmith.host.base import NodeFactory
from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.layout import RGB, Axis, SizingMode, StackingDirection
from framesmith.stylesheet.colors import ColorResolver
from framesmith.stylesheet.values import parse_integer


def _dimension(
    style: Mapping[str, str],
    prop: str,
    diagnostics: DiagnosticLog,
    location: str | None,
    positive: bool = True,
) -> int | None:
    raw = style.get(prop)
    if not raw:
        return None
    value = parse_integer(raw)
    if value is None or (positive and value <= 0):
        diagnostics.info(
            "malformed_dimension",
            f"Ignoring {prop}: {raw}; expected an integer" + (" above zero" if positive else ""),
            location=location,
        )
        return None
    return value


def stacking_direction(style: Mapping[str, str]) -> StackingDirection:
    if style.get("display", "").strip().lower() == "flex":
        flex_direction = style.get("flex-direction", "row").strip().lower() or "row"
        if flex_direction == "row":
            return StackingDirection.HORIZONTAL
    return StackingDirection.VERTICAL


def axis_for(dimension: str, direction: StackingDirection) -> Axis:
    """Map ``width`` or ``height`` onto the primary or counter layout axis."""
    horizontal = direction is StackingDirection.HORIZONTAL
    if (dimension == "width") == horizontal:
        return Axis.PRIMARY
    return Axis.COUNTER


def apply_visual_properties(
    factory: NodeFactory,
    container: Any,
    style: Mapping[str, str],
    colors: ColorResolver,
    default_fill: RGB,
    location: str | None = None,
) -> None:
    """Apply size, stacking, spacing and fill from *style* to *container*."""
    diagnostics = colors.diagnostics

    direction = stacking_direction(style)
    factory.set_stacking_direction(container, direction)

    # A resized axis is pinned so auto-layout keeps the explicit size.
    width = _dimension(style, "width", diagnostics, location)
    if width is not None:
        _, current_height = factory.size(container)
        factory.resize(container, width, current_height)
        factory.set_auto_size(container, axis_for("width", direction), SizingMode.FIXED)
    height = _dimension(style, "height", diagnostics, location)
    if height is not None:
        current_width, _ = factory.size(container)
        factory.resize(container, current_width, height)
        factory.set_auto_size(container, axis_for("height", direction), SizingMode.FIXED)

    if style.get("display", "").strip().lower() == "flex":
        gap = _dimension(style, "gap", diagnostics, location, positive=False)
        if gap is not None:
            factory.set_item_spacing(container, gap)

    background = style.get("background-color")
    if background:
        factory.set_fill(container, colors.resolve(background, location=location))
    else:
        factory.set_fill(container, default_fill)
