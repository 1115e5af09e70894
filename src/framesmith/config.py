from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from framesmith.model.layout import RGB

TRANSPARENT_TAGS = frozenset({"html", "head", "meta", "title", "link", "script", "style"})


@dataclass(frozen=True)
class ConverterConfig:
    default_font_family: str = "Inter"
    fallback_font_family: str = "Inter"
    fallback_font_style: str = "Regular"
    default_fill: RGB = RGB(0.95, 0.95, 0.95)
    root_name: str = "Generated UI"
    root_padding: int = 20
    transparent_tags: frozenset[str] = field(default=TRANSPARENT_TAGS)
    success_message: str = "UI Generated Successfully!"
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_mapping(cls, values: dict[str, Any] | None) -> ConverterConfig:
        """Build a config from a plain mapping, ignoring unknown keys."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in values.items() if k in known}
        if "transparent_tags" in kwargs:
            kwargs["transparent_tags"] = frozenset(kwargs["transparent_tags"])
        if "default_fill" in kwargs and not isinstance(kwargs["default_fill"], RGB):
            kwargs["default_fill"] = RGB(*kwargs["default_fill"])
        return cls(**kwargs)
