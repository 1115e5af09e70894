"""Stylesheet compilation: parsed CSS rules to a selector-keyed RuleTable."""

from __future__ import annotations

import logging
import re

from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.style import RuleTable
from framesmith.parser.css import CssAtRule, CssItem, CssSkipped, parse_css

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
_CLASS_OR_ID_RE = re.compile(r"^[.#]-?[A-Za-z_][A-Za-z0-9_-]*$")
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def split_selector_list(prelude: str) -> list[str]:
    """Split ``h1, h2`` into its selectors, ignoring commas inside brackets."""
    selectors: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in prelude:
        if ch in "([":
            depth += 1
        elif ch in ")]" and depth:
            depth -= 1
        if ch == "," and depth == 0:
            selectors.append("".join(current))
            current = []
        else:
            current.append(ch)
    selectors.append("".join(current))
    return [" ".join(s.split()) for s in selectors if s.strip()]


def selector_key(selector: str) -> str | None:
    """Return the rule-table key for a simple selector, or None if unsupported."""
    if _TAG_RE.match(selector):
        return selector.lower()
    if _CLASS_OR_ID_RE.match(selector):
        return selector
    return None


def _clean_value(value: str) -> str:
    return _IMPORTANT_RE.sub("", value).strip()


_SKIPPED_MESSAGES = {
    "invalid_declaration": "Ignoring invalid declaration",
    "nested_rule": "Nested rule is not supported and was skipped",
    "orphan_block": "Ignoring block with no selector",
    "stray_token": "Ignoring unexpected CSS",
}


def _report_skipped(skipped: CssSkipped, diagnostics: DiagnosticLog, prelude: str | None = None) -> None:
    where = f" at line {skipped.line}" if skipped.line else ""
    diagnostics.warning(
        skipped.reason,
        f"{_SKIPPED_MESSAGES[skipped.reason]}: {skipped.text}{where}",
        location=prelude or skipped.text,
    )


def compile_rules(items: list[CssItem], diagnostics: DiagnosticLog | None = None) -> RuleTable:
    """Fold parsed rules into a RuleTable in source order."""
    diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
    table = RuleTable()

    for item in items:
        if isinstance(item, CssAtRule):
            diagnostics.info(
                "skipped_at_rule",
                f"At-rule @{item.name} is not supported and was skipped",
                location=f"@{item.name}",
            )
            continue

        if isinstance(item, CssSkipped):
            _report_skipped(item, diagnostics)
            continue

        for skipped in item.skipped:
            _report_skipped(skipped, diagnostics, item.prelude)

        selectors = split_selector_list(item.prelude)
        if not selectors:
            logger.debug("Skipping rule with empty selector at line %s", item.line)
            continue

        properties: dict[str, str] = {}
        for decl in item.declarations:
            value = _clean_value(decl.value)
            if value:
                properties[decl.name.lower()] = value

        if not properties:
            diagnostics.info(
                "empty_rule",
                f"Parsed CSS rule with no declarations: {item.prelude}",
                location=item.prelude,
            )
            continue

        for selector in selectors:
            key = selector_key(selector)
            if key is None:
                diagnostics.info(
                    "unsupported_selector",
                    f"Selector '{selector}' is not a tag, class or id selector and will never match",
                    location=selector,
                )
                key = selector
            table.add(key, properties)
            logger.debug("Parsed CSS rule: %s %s", key, properties)

    return table


def compile_stylesheet(css_text: str, diagnostics: DiagnosticLog | None = None) -> RuleTable:
    """Parse *css_text* and compile it into a RuleTable.

    Malformed pieces are skipped and reported on *diagnostics*.  Raises
    :class:`~framesmith.parser.ParseError` only when the text has no
    recoverable reading.
    """
    return compile_rules(parse_css(css_text), diagnostics)
