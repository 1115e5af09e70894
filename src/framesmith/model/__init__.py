"""framesmith model layer -- public type re-exports."""

from framesmith.model.diagnostic import Diagnostic, DiagnosticLog, Severity
from framesmith.model.layout import (
    BLACK,
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
from framesmith.model.markup import AttributeMarker, Element, MarkupNode, Text
from framesmith.model.outcome import ConversionResult, MappingStats, Status
from framesmith.model.style import INHERITABLE_PROPERTIES, Declarations, EffectiveStyle, RuleTable

__all__ = [
    # markup
    "Element",
    "Text",
    "AttributeMarker",
    "MarkupNode",
    # style
    "RuleTable",
    "Declarations",
    "EffectiveStyle",
    "INHERITABLE_PROPERTIES",
    # layout
    "RGB",
    "BLACK",
    "Axis",
    "SizingMode",
    "StackingDirection",
    "TextAutoResize",
    "FontName",
    "Padding",
    "Container",
    "TextLeaf",
    "LayoutNode",
    # outcome
    "Status",
    "MappingStats",
    "ConversionResult",
    # diagnostic
    "Severity",
    "Diagnostic",
    "DiagnosticLog",
]
