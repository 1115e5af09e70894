"""Conversion pipeline: stylesheet compilation and tree mapping into a root container."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from framesmith.config import ConverterConfig
from framesmith.host.base import NodeFactory
from framesmith.host.memory import InMemoryHost
from framesmith.mapper.tree import TreeMapper
from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.layout import Axis, SizingMode, StackingDirection
from framesmith.model.markup import MarkupNode
from framesmith.model.outcome import ConversionResult
from framesmith.parser import ParseError, parse_markup
from framesmith.stylesheet.compiler import compile_stylesheet

logger = logging.getLogger(__name__)

CONVERT_KIND = "convert"


class RequestError(ValueError):
    """Raised when a request payload is not a valid convert request."""


@dataclass(frozen=True)
class ConvertRequest:
    """A ``{kind: "convert", markup, stylesheet}`` request."""

    markup: str
    stylesheet: str = ""
    kind: str = CONVERT_KIND

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> ConvertRequest:
        if not isinstance(payload, Mapping):
            raise RequestError("request payload must be an object")
        kind = payload.get("kind", CONVERT_KIND)
        if kind != CONVERT_KIND:
            raise RequestError(f"unsupported request kind: {kind!r}")
        markup = payload.get("markup")
        stylesheet = payload.get("stylesheet", "")
        if not isinstance(markup, str):
            raise RequestError("markup must be a string")
        if stylesheet is None:
            stylesheet = ""
        if not isinstance(stylesheet, str):
            raise RequestError("stylesheet must be a string")
        return cls(markup=markup, stylesheet=stylesheet)


class ConversionPipeline:
    """Runs one conversion per call against a NodeFactory.

    Every call compiles its own rule table and builds its own root
    container.  Recoverable problems end up as diagnostics on the result;
    parse failures and host faults end the call with a failure result.
    """

    def __init__(self, factory: NodeFactory, config: ConverterConfig | None = None) -> None:
        self.factory = factory
        self.config = config or ConverterConfig()

    async def convert(self, request: ConvertRequest) -> ConversionResult:
        diagnostics = DiagnosticLog()
        try:
            nodes = parse_markup(request.markup)
        except ParseError as exc:
            return self._fail(exc, diagnostics)
        return await self._run(nodes, request.stylesheet, diagnostics)

    async def convert_nodes(
        self,
        nodes: Sequence[MarkupNode],
        stylesheet: str = "",
        diagnostics: DiagnosticLog | None = None,
    ) -> ConversionResult:
        """Convert an already-decoded markup tree."""
        return await self._run(nodes, stylesheet, diagnostics if diagnostics is not None else DiagnosticLog())

    async def _run(
        self,
        nodes: Sequence[MarkupNode],
        stylesheet: str,
        diagnostics: DiagnosticLog,
    ) -> ConversionResult:
        try:
            rules = compile_stylesheet(stylesheet, diagnostics)
            logger.debug("Compiled %d selector(s)", len(rules))

            root = self._create_root()
            mapper = TreeMapper(self.factory, rules, self.config, diagnostics)
            await mapper.map(nodes, root, {})
            self.factory.attach_to_document(root)
        except ParseError as exc:
            return self._fail(exc, diagnostics)
        except Exception as exc:
            logger.exception("Error generating layout tree")
            return self._fail(exc, diagnostics)

        stats = mapper.stats
        message = (
            f"{self.config.success_message} "
            f"({stats.containers} container(s), {stats.text_leaves} text leaf/leaves, "
            f"{len(diagnostics)} diagnostic(s))"
        )
        logger.info("%s", message)
        return ConversionResult.success(message, root, diagnostics.items, stats)

    def _create_root(self) -> Any:
        factory = self.factory
        padding = self.config.root_padding
        root = factory.create_container()
        factory.set_name(root, self.config.root_name)
        factory.set_stacking_direction(root, StackingDirection.VERTICAL)
        factory.set_auto_size(root, Axis.PRIMARY, SizingMode.AUTO)
        factory.set_auto_size(root, Axis.COUNTER, SizingMode.AUTO)
        factory.set_padding(root, padding, padding, padding, padding)
        return root

    @staticmethod
    def _fail(exc: Exception, diagnostics: DiagnosticLog) -> ConversionResult:
        if isinstance(exc, ParseError):
            where = f" (line {exc.line}, column {exc.column})" if exc.line and exc.line > 0 else ""
            message = f"Error: could not parse {exc.source}{where}: {exc}"
        else:
            message = f"Error: {exc}" if str(exc) else "An unknown error occurred."
        logger.error("%s", message)
        return ConversionResult.failure(message, diagnostics.items)


async def convert(
    markup: str,
    stylesheet: str = "",
    factory: NodeFactory | None = None,
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert *markup* styled by *stylesheet*; uses a fresh InMemoryHost by default."""
    pipeline = ConversionPipeline(factory or InMemoryHost(), config)
    return await pipeline.convert(ConvertRequest(markup=markup, stylesheet=stylesheet))
