"""Font selection from an effective style."""

from __future__ import annotations

from collections.abc import Mapping

from framesmith.model.layout import FontName
from framesmith.stylesheet.values import parse_integer

BOLD_THRESHOLD = 700


def font_family(style: Mapping[str, str], default: str = "Inter") -> str:
    """First family of the ``font-family`` list, quotes stripped."""
    raw = style.get("font-family", "")
    for candidate in raw.split(","):
        family = candidate.strip().replace('"', "").replace("'", "")
        if family:
            return family
    return default


def is_bold(weight: str) -> bool:
    weight = weight.strip().lower()
    if weight == "bold":
        return True
    number = parse_integer(weight)
    return number is not None and number >= BOLD_THRESHOLD


def font_style_name(style: Mapping[str, str]) -> str:
    """Map ``font-weight`` / ``font-style`` onto a named font style."""
    bold = is_bold(style.get("font-weight", "normal"))
    italic = style.get("font-style", "normal").strip().lower() == "italic"
    if bold and italic:
        return "Bold Italic"
    if bold:
        return "Bold"
    if italic:
        return "Italic"
    return "Regular"


def font_for(style: Mapping[str, str], default_family: str = "Inter") -> FontName:
    return FontName(font_family(style, default_family), font_style_name(style))
