from __future__ import annotations

import asyncio

from flask import Blueprint, current_app, jsonify, request

from framesmith.host.memory import InMemoryHost
from framesmith.pipeline import ConversionPipeline, ConvertRequest, RequestError

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    return response


@api_bp.route("/convert", methods=["OPTIONS"])
def convert_preflight():
    """Handle CORS preflight for conversions."""
    return "", 204


@api_bp.route("/convert", methods=["POST"])
def convert():
    """Convert a ``{kind, markup, stylesheet}`` payload into a layout tree."""
    try:
        convert_request = ConvertRequest.from_payload(request.get_json(silent=True))
    except RequestError as exc:
        return jsonify({"error": str(exc)}), 400

    # One host per request: conversions never share a tree.
    pipeline = ConversionPipeline(InMemoryHost(), current_app.extensions["converter_config"])
    result = asyncio.run(pipeline.convert(convert_request))

    body = {
        "status": result.status.value,
        "message": result.message,
        "diagnostics": [d.to_dict() for d in result.diagnostics],
        "stats": result.stats.to_dict(),
        "tree": result.root.to_dict() if result.root is not None else None,
    }
    return jsonify(body), (200 if result.succeeded else 422)
