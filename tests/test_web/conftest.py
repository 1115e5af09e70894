from __future__ import annotations

import pytest

from framesmith.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app({"FRAMESMITH": {"root_padding": 12}})
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
