"""Tree mapper: walks MarkupNodes and builds host layout nodes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from framesmith.config import ConverterConfig
from framesmith.host.base import FontUnavailableError, NodeFactory
from framesmith.mapper.fonts import font_for
from framesmith.mapper.visual import apply_visual_properties
from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.layout import BLACK, Axis, SizingMode, StackingDirection, TextAutoResize
from framesmith.model.markup import Element, Text
from framesmith.model.outcome import MappingStats
from framesmith.model.style import RuleTable
from framesmith.stylesheet.colors import ColorResolver
from framesmith.stylesheet.resolver import resolve_style

logger = logging.getLogger(__name__)


class TreeMapper:
    """Depth-first, document-order mapping of markup onto a NodeFactory.

    The inherited style is threaded through the recursion as an argument;
    the mapper holds no per-element style state.  Font requests are awaited
    one text node at a time, in document order.
    """

    def __init__(
        self,
        factory: NodeFactory,
        rules: RuleTable,
        config: ConverterConfig | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.factory = factory
        self.rules = rules
        self.config = config or ConverterConfig()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.colors = ColorResolver(self.diagnostics)
        self.stats = MappingStats()

    async def map(
        self,
        nodes: Sequence[Any],
        parent: Any,
        inherited_style: Mapping[str, str] | None = None,
    ) -> None:
        """Map *nodes* into *parent*, in order."""
        inherited = dict(inherited_style or {})
        for node in nodes:
            if isinstance(node, Text):
                await self._map_text(node, parent, inherited)
            elif isinstance(node, Element):
                if node.tag in self.config.transparent_tags:
                    logger.debug("Skipping non-visual element: <%s>", node.tag)
                    await self.map(node.children, parent, inherited)
                else:
                    await self._map_element(node, parent, inherited)
            else:
                self.diagnostics.warning("malformed_node", f"Skipping invalid node: {node!r}")

    async def _map_element(self, element: Element, parent: Any, inherited: Mapping[str, str]) -> None:
        factory = self.factory
        frame = factory.create_container()
        factory.set_name(frame, element.tag)
        factory.set_stacking_direction(frame, StackingDirection.VERTICAL)
        factory.set_auto_size(frame, Axis.PRIMARY, SizingMode.AUTO)
        factory.set_auto_size(frame, Axis.COUNTER, SizingMode.AUTO)

        style = resolve_style(element.tag, element.attributes, self.rules, inherited)
        logger.debug("Applying styles to <%s>: %s", element.describe(), style)
        apply_visual_properties(
            factory,
            frame,
            style,
            self.colors,
            self.config.default_fill,
            location=element.describe(),
        )

        factory.append_child(parent, frame)
        self.stats.containers += 1
        if element.children:
            await self.map(element.children, frame, style)

    async def _map_text(self, node: Text, parent: Any, inherited: Mapping[str, str]) -> None:
        if node.is_blank:
            return
        factory = self.factory
        leaf = factory.create_text_leaf()

        font = font_for(inherited, self.config.default_font_family)
        try:
            await factory.request_font(font.family, font.style)
            factory.set_font(leaf, font.family, font.style)
        except FontUnavailableError:
            fallback_family = self.config.fallback_font_family
            fallback_style = self.config.fallback_font_style
            self.diagnostics.warning(
                "font_unavailable",
                f"Font {font.family} {font.style} not available, falling back to "
                f"{fallback_family} {fallback_style}",
            )
            await factory.request_font(fallback_family, fallback_style)
            factory.set_font(leaf, fallback_family, fallback_style)

        characters = node.content.strip()
        factory.set_characters(leaf, characters)
        factory.set_name(leaf, characters[:40])
        factory.set_text_auto_resize(leaf, TextAutoResize.WIDTH_AND_HEIGHT)

        color = inherited.get("color")
        factory.set_fill(leaf, self.colors.resolve(color) if color else BLACK)

        factory.append_child(parent, leaf)
        self.stats.text_leaves += 1
        logger.debug("Appended text leaf: %r", characters)
