"""CLI command: framesmith serve -- run the conversion web API."""

from __future__ import annotations

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--font-family", default="Inter", help="Font family used when none is set")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, font_family: str, debug: bool) -> None:
    """Start the framesmith web server."""
    from framesmith.config import ConverterConfig
    from framesmith.web.app import create_app

    config = ConverterConfig(default_font_family=font_family, host=host, port=port)
    app = create_app(converter_config=config)
    click.echo(f"Starting framesmith on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
