"""Color resolution: CSS color tokens to normalized RGB triples."""

from __future__ import annotations

import re

from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.layout import BLACK, RGB

_HEX_RE = re.compile(r"^[0-9a-f]+$")

NAMED_COLORS: dict[str, RGB] = {
    "white": RGB(1.0, 1.0, 1.0),
    "black": RGB(0.0, 0.0, 0.0),
    "red": RGB(1.0, 0.0, 0.0),
    "green": RGB(0.0, 1.0, 0.0),
    "blue": RGB(0.0, 0.0, 1.0),
    "gray": RGB(128 / 255, 128 / 255, 128 / 255),
    "grey": RGB(128 / 255, 128 / 255, 128 / 255),
    "silver": RGB(192 / 255, 192 / 255, 192 / 255),
    "yellow": RGB(1.0, 1.0, 0.0),
    "cyan": RGB(0.0, 1.0, 1.0),
    "aqua": RGB(0.0, 1.0, 1.0),
    "magenta": RGB(1.0, 0.0, 1.0),
    "fuchsia": RGB(1.0, 0.0, 1.0),
    "orange": RGB(1.0, 165 / 255, 0.0),
    "purple": RGB(128 / 255, 0.0, 128 / 255),
    "navy": RGB(0.0, 0.0, 128 / 255),
    "maroon": RGB(128 / 255, 0.0, 0.0),
    "teal": RGB(0.0, 128 / 255, 128 / 255),
    "olive": RGB(128 / 255, 128 / 255, 0.0),
    "lime": RGB(0.0, 1.0, 0.0),
}


def parse_hex(token: str) -> RGB | None:
    """Parse ``#rgb`` or ``#rrggbb``; returns None for anything else."""
    hex_str = token[1:] if token.startswith("#") else token
    if len(hex_str) == 3:
        hex_str = "".join(c * 2 for c in hex_str)
    if len(hex_str) != 6 or not _HEX_RE.match(hex_str):
        return None
    return RGB(
        int(hex_str[0:2], 16) / 255,
        int(hex_str[2:4], 16) / 255,
        int(hex_str[4:6], 16) / 255,
    )


class ColorResolver:
    """Resolves named and hex colors; unknown tokens become opaque black.

    Unsupported tokens never raise.  They are reported as
    ``unsupported_color`` warnings on the attached DiagnosticLog.
    """

    def __init__(
        self,
        diagnostics: DiagnosticLog | None = None,
        extra_names: dict[str, RGB] | None = None,
    ) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.named_colors = dict(NAMED_COLORS)
        if extra_names:
            self.named_colors.update({k.lower(): v for k, v in extra_names.items()})

    def resolve(self, token: str, location: str | None = None) -> RGB:
        color = token.strip().lower()
        if color in self.named_colors:
            return self.named_colors[color]
        if color.startswith("#"):
            rgb = parse_hex(color)
            if rgb is not None:
                return rgb
        self.diagnostics.warning(
            "unsupported_color",
            f"Unsupported color format: {color}, defaulting to black",
            location=location,
        )
        return BLACK


def resolve_color(token: str, diagnostics: DiagnosticLog | None = None) -> RGB:
    """Resolve *token* with the default color table."""
    return ColorResolver(diagnostics).resolve(token)
