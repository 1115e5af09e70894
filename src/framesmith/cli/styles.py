"""CLI command: framesmith styles -- display a compiled rule table."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from framesmith.model.diagnostic import DiagnosticLog
from framesmith.parser import ParseError
from framesmith.stylesheet import compile_stylesheet


@click.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
def styles(css_file: str) -> None:
    """Compile CSS_FILE and show the selector table it produces."""
    diagnostics = DiagnosticLog()
    try:
        table = compile_stylesheet(Path(css_file).read_text(encoding="utf-8"), diagnostics)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Selectors: {len(table)}")
    click.echo()
    for selector, declarations in table.to_dict().items():
        click.echo(f"  {selector}")
        for prop, value in declarations.items():
            click.echo(f"    {prop}: {value}")

    if len(diagnostics):
        click.echo()
        for diag in diagnostics:
            click.echo(str(diag))
