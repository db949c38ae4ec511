"""Pytest configuration & shared fixtures."""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before any imports
os.environ.setdefault("HOST", "127.0.0.1")
os.environ.setdefault("PORT", "3001")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
def settings():
    """Isolated settings for the test environment."""
    from config import Settings

    return Settings(environment="test", debug=False, _env_file=None)


@pytest.fixture
def controller(settings):
    from app.controllers.processing_controller import ProcessingController

    return ProcessingController(settings)


@pytest.fixture
def app_client(controller):
    """Create a Flask test client around a real controller."""
    from app.views.routes import create_app

    app = create_app(controller)
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
