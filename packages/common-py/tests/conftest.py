"""Pytest configuration and fixtures for common-py tests."""
import io
import os

import pytest


@pytest.fixture
def clean_env():
    """Provide a clean environment for tests that modify env vars."""
    original_env = os.environ.copy()
    yield
    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def log_stream():
    """In-memory stream for capturing depalign log output."""
    return io.StringIO()
