"""Pytest configuration and fixtures."""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

# Stage uploads in a throwaway directory before importing app modules
os.environ.setdefault("SAMPLES_DATA_DIR", tempfile.mkdtemp(prefix="dv360_samples_test_"))
os.environ.setdefault("DV360_CREDENTIALS_PATH", "")


@pytest.fixture
def service():
    """Fake Display & Video 360 client; calls are configured per test."""
    return MagicMock(name="displayvideo")


@pytest.fixture
def app(service):
    from dv360_samples import create_app

    app = create_app(service=service)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
