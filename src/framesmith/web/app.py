from __future__ import annotations

from flask import Flask

from framesmith.config import ConverterConfig


def create_app(
    config: dict | None = None,
    converter_config: ConverterConfig | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    if converter_config is None:
        converter_config = ConverterConfig.from_mapping(app.config.get("FRAMESMITH"))
    app.extensions["converter_config"] = converter_config

    from framesmith.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
