"""Style model: rule tables and the effective-style property sets."""

from __future__ import annotations

from typing import Dict

# Declaration map: property name -> raw string value.
Declarations = Dict[str, str]

# Effective style materialized for one element.
EffectiveStyle = Dict[str, str]

INHERITABLE_PROPERTIES: tuple[str, ...] = (
    "color",
    "font-family",
    "font-weight",
    "font-style",
    "font-size",
)


class RuleTable:
    """Compiled mapping from selector key to declaration map.

    Selector keys are a bare tag name, ``.`` + class or ``#`` + id.  Adding
    declarations for a key that already exists merges them per property, so
    later rules augment earlier ones instead of replacing them.
    """

    def __init__(self, rules: dict[str, Declarations] | None = None) -> None:
        self._rules: dict[str, Declarations] = {}
        for selector, declarations in (rules or {}).items():
            self.add(selector, declarations)

    def add(self, selector: str, declarations: Declarations) -> None:
        self._rules.setdefault(selector, {}).update(declarations)

    def get(self, selector: str) -> Declarations | None:
        declarations = self._rules.get(selector)
        return dict(declarations) if declarations is not None else None

    def for_tag(self, tag: str) -> Declarations | None:
        return self.get(tag)

    def for_class(self, class_name: str) -> Declarations | None:
        return self.get("." + class_name)

    def for_id(self, element_id: str) -> Declarations | None:
        return self.get("#" + element_id)

    def selectors(self) -> list[str]:
        return list(self._rules)

    def to_dict(self) -> dict[str, Declarations]:
        return {selector: dict(decls) for selector, decls in self._rules.items()}

    def __contains__(self, selector: str) -> bool:
        return selector in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleTable):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self) -> str:
        return f"RuleTable(selectors={self.selectors()})"
