"""CLI command: framesmith convert -- build a layout tree from markup and CSS."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from framesmith.config import ConverterConfig
from framesmith.host.memory import InMemoryHost
from framesmith.model.diagnostic import DiagnosticLog
from framesmith.parser import decode_tree
from framesmith.pipeline import ConversionPipeline, ConvertRequest


@click.command()
@click.argument("markup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "css_file", type=click.Path(exists=True, dir_okay=False), default=None, help="Stylesheet file")
@click.option("--json-tree", is_flag=True, help="MARKUP_FILE holds an ordered-JSON node tree")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write the tree JSON here")
@click.option("--font-family", default="Inter", show_default=True, help="Font family used when none is set")
@click.option("--padding", default=20, type=int, show_default=True, help="Root container padding")
def convert(
    markup_file: str,
    css_file: str | None,
    json_tree: bool,
    output: str | None,
    font_family: str,
    padding: int,
) -> None:
    """Convert MARKUP_FILE (styled by --css) into a layout tree printed as JSON."""
    config = ConverterConfig(default_font_family=font_family, root_padding=padding)
    host = InMemoryHost()
    pipeline = ConversionPipeline(host, config)

    markup_text = Path(markup_file).read_text(encoding="utf-8")
    stylesheet = Path(css_file).read_text(encoding="utf-8") if css_file else ""

    if json_tree:
        try:
            raw = json.loads(markup_text)
        except json.JSONDecodeError as exc:
            click.echo(f"Error: invalid JSON tree: {exc}", err=True)
            sys.exit(1)
        diagnostics = DiagnosticLog()
        nodes = decode_tree(raw, diagnostics)
        result = asyncio.run(pipeline.convert_nodes(nodes, stylesheet, diagnostics))
    else:
        result = asyncio.run(pipeline.convert(ConvertRequest(markup=markup_text, stylesheet=stylesheet)))

    for diag in result.diagnostics:
        click.echo(f"  {diag}", err=True)

    if result.failed:
        click.echo(result.message, err=True)
        sys.exit(1)

    rendered = json.dumps(result.root.to_dict(), indent=2)
    if output:
        Path(output).write_text(rendered + "\n", encoding="utf-8")
    else:
        click.echo(rendered)
    click.echo(result.message, err=True)
