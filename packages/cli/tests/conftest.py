"""Pytest configuration and fixtures for CLI tests."""
import json
import os

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env():
    """Provide a clean environment for tests that modify env vars."""
    original_env = os.environ.copy()
    yield
    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def host_project(tmp_path):
    """Host project depending on "d", with library "foo" installed in node_modules."""
    host = tmp_path / "host"
    host.mkdir()
    (host / "package.json").write_text(json.dumps({
        "name": "host-app",
        "version": "0.0.1",
        "dependencies": {"d": "0.5.0"},
    }))

    foo = host / "node_modules" / "foo"
    (foo / "lib").mkdir(parents=True)
    (foo / "lib" / "index.js").write_text("module.exports = {};\n")
    (foo / "package.json").write_text(json.dumps({
        "name": "foo",
        "version": "2.0.0",
        "main": "lib/index.js",
        "dependencies": {"d": "^1.0.0", "extra": "1.0.0"},
        "devDependencies": {"t": "1.0.0"},
    }))
    return host
