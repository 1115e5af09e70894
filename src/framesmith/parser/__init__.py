from framesmith.parser.css import CssAtRule, CssDeclaration, CssItem, CssRule, CssSkipped, parse_css
from framesmith.parser.errors import ParseError
from framesmith.parser.markup import decode_tree, parse_markup

__all__ = [
    "ParseError",
    "parse_css",
    "parse_markup",
    "decode_tree",
    "CssRule",
    "CssAtRule",
    "CssDeclaration",
    "CssSkipped",
    "CssItem",
]
