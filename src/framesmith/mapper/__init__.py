from framesmith.mapper.fonts import font_family, font_for, font_style_name
from framesmith.mapper.tree import TreeMapper
from framesmith.mapper.visual import apply_visual_properties, stacking_direction

__all__ = [
    "TreeMapper",
    "apply_visual_properties",
    "stacking_direction",
    "font_for",
    "font_family",
    "font_style_name",
]
