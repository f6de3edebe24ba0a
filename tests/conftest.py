"""Pytest configuration and shared fixtures."""

import pytest

from comment_service import create_app
from comment_service.config import TestingConfig


@pytest.fixture
def app():
    """Provide a Flask app wired with the test configuration."""
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    """Provide Flask test client."""
    return app.test_client()


@pytest.fixture
def valid_submission():
    return {
        "slug": "hello-world",
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "replyTo": "",
        "comment": "Lovely post, thanks for writing it.",
    }
