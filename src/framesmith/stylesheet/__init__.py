from framesmith.stylesheet.colors import NAMED_COLORS, ColorResolver, resolve_color
from framesmith.stylesheet.compiler import compile_rules, compile_stylesheet
from framesmith.stylesheet.resolver import matched_declarations, resolve_style
from framesmith.stylesheet.values import parse_integer

__all__ = [
    "ColorResolver",
    "NAMED_COLORS",
    "resolve_color",
    "compile_stylesheet",
    "compile_rules",
    "resolve_style",
    "matched_declarations",
    "parse_integer",
]
