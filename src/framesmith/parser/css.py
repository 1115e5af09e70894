"""Lark-based parser for the CSS subset: produces an ordered rule list.

Parsing is best-effort.  Malformed declarations, nested rules, stray
``;``/``}`` tokens and selector-less blocks are returned as
:class:`CssSkipped` entries instead of aborting, and blocks left open at the
end of the input are closed.  Only input with no recoverable reading (for
example an at-rule with neither ``;`` nor a block) raises
:class:`~framesmith.parser.ParseError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Union

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, UnexpectedInput, UnexpectedToken

from framesmith.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "css.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_PROPERTY_RE = re.compile(r"^-{0,2}[A-Za-z_][A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class CssDeclaration:
    """A ``property: value`` pair with the value kept as raw text."""

    name: str
    value: str


@dataclass(frozen=True)
class CssSkipped:
    """Source text the parser recovered from; reported but never applied.

    ``reason`` is one of ``invalid_declaration``, ``nested_rule``,
    ``orphan_block`` or ``stray_token``.
    """

    text: str
    reason: str
    line: int | None = None


@dataclass(frozen=True)
class CssRule:
    """A qualified rule: selector prelude plus its declarations in order."""

    prelude: str
    declarations: list[CssDeclaration] = field(default_factory=list)
    line: int | None = None
    skipped: list[CssSkipped] = field(default_factory=list)


@dataclass(frozen=True)
class CssAtRule:
    """An at-rule such as ``@media``; recorded so callers can report it."""

    name: str
    prelude: str = ""
    line: int | None = None


CssItem = Union[CssRule, CssAtRule, CssSkipped]
_BlockEntry = Union[CssDeclaration, CssSkipped]


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _line(token: object) -> int | None:
    return getattr(token, "line", None)


def _blank_out(match: re.Match[str]) -> str:
    # Keep line numbers stable for error reporting.
    return "\n" * match.group(0).count("\n") or " "


def strip_comments(source: str) -> str:
    return _COMMENT_RE.sub(_blank_out, source)


def split_declaration(text: str, line: int | None = None) -> _BlockEntry | None:
    """Split raw ``name: value`` text; None for an empty value."""
    name, colon, value = text.partition(":")
    name = name.strip()
    if not colon or not _PROPERTY_RE.match(name):
        return CssSkipped(_collapse(text), "invalid_declaration", line)
    value = _collapse(value)
    if not value:
        return None
    return CssDeclaration(name=name, value=value)


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into CssRule / CssAtRule / CssSkipped objects."""

    def member(self, items: list[object]) -> _BlockEntry | None:
        text = items[0]
        if len(items) > 1:
            return CssSkipped(_collapse(str(text)), "nested_rule", _line(text))
        return split_declaration(str(text), _line(text))

    def block(self, items: list[_BlockEntry | None]) -> list[_BlockEntry]:
        return [item for item in items if item is not None]

    def rule(self, items: list[object]) -> CssRule:
        prelude = items[0]
        entries = items[1]
        return CssRule(
            prelude=_collapse(str(prelude)),
            declarations=[e for e in entries if isinstance(e, CssDeclaration)],  # type: ignore[union-attr]
            line=_line(prelude),
            skipped=[e for e in entries if isinstance(e, CssSkipped)],  # type: ignore[union-attr]
        )

    def orphan_block(self, items: list[object]) -> CssSkipped:
        return CssSkipped("{...}", "orphan_block")

    def stray(self, items: list[Token]) -> CssSkipped:
        return CssSkipped(_collapse("".join(str(t) for t in items)), "stray_token", _line(items[0]))

    def at_block(self, items: list[object]) -> None:
        return None

    def at_rule(self, items: list[object]) -> CssAtRule:
        keyword = items[0]
        prelude = ""
        if len(items) > 1 and isinstance(items[1], Token) and items[1].type == "AT_PRELUDE":
            prelude = _collapse(str(items[1]))
        return CssAtRule(
            name=str(keyword)[1:].lower(),
            prelude=prelude,
            line=_line(keyword),
        )

    def start(self, items: list[CssItem]) -> list[CssItem]:
        return list(items)


@lru_cache(maxsize=1)
def _css_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def _close_open_blocks(error: UnexpectedInput) -> bool:
    """Recover from input that ends inside a block by supplying the ``}``s."""
    if not isinstance(error, UnexpectedToken) or error.token.type != "$END":
        return False
    parser = error.interactive_parser
    accepts = parser.accepts()
    while "$END" not in accepts and "RBRACE" in accepts:
        parser.feed_token(Token("RBRACE", "}"))
        accepts = parser.accepts()
    return "$END" in accepts


def parse_css(source: str) -> list[CssItem]:
    """Parse CSS source into an ordered list of rules, at-rules and skipped pieces."""
    try:
        tree = _css_parser().parse(strip_comments(source), on_error=_close_open_blocks)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column, source="css") from e
    return CssTransformer().transform(tree)
