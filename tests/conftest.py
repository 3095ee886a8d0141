# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up the test environment before any app imports
# - Provides a fresh app (own store, own data directory) per test
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.main, which builds an app on import

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("LOG_LEVEL", "debug")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="user-api-test-"))

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services import UserMirror, UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a per-test data directory."""
    return Settings(
        DATA_DIR=str(tmp_path / "data"),
        STATIC_DIR=str(tmp_path / "static"),
        _env_file=None,
    )


@pytest.fixture
def data_dir(settings):
    """The directory mirror files are written to."""
    return Path(settings.DATA_DIR)


@pytest.fixture
def app(settings):
    """A fresh FastAPI app with an empty store."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    """An empty UserStore."""
    return UserStore()


@pytest.fixture
def mirror(tmp_path):
    """A UserMirror writing into a temporary directory."""
    return UserMirror(tmp_path / "mirror")


@pytest.fixture
def sample_user_payload():
    """Valid create request body."""
    return {"name": "John Doe", "email": "john@example.com"}
