"""Effective-style resolution: rule matching plus inheritance."""

from __future__ import annotations

from collections.abc import Mapping

from framesmith.model.style import INHERITABLE_PROPERTIES, EffectiveStyle, RuleTable


def matched_declarations(tag: str, attributes: Mapping[str, str], rules: RuleTable) -> dict[str, str]:
    """Merge the rules matching an element: tag, then classes in order, then id."""
    own: dict[str, str] = dict(rules.for_tag(tag) or {})
    for cls in attributes.get("class", "").split():
        own.update(rules.for_class(cls) or {})
    element_id = attributes.get("id", "").strip()
    if element_id:
        own.update(rules.for_id(element_id) or {})
    return own


def resolve_style(
    tag: str,
    attributes: Mapping[str, str],
    rules: RuleTable,
    parent_style: Mapping[str, str] | None = None,
) -> EffectiveStyle:
    """Compute the effective style of one element.

    Inheritable properties fall through from *parent_style* unless the
    element's own matched rules set them.  All other properties come only
    from the element's own rules; values the parent carried for them are
    never copied down.
    """
    own = matched_declarations(tag, attributes, rules)
    style: EffectiveStyle = {
        prop: value
        for prop, value in (parent_style or {}).items()
        if prop in INHERITABLE_PROPERTIES
    }
    for prop in INHERITABLE_PROPERTIES:
        if own.get(prop):
            style[prop] = own[prop]
    for prop, value in own.items():
        if prop not in INHERITABLE_PROPERTIES:
            style[prop] = value
    return style
