"""Pytest configuration and fixtures for SDK tests."""
import pytest

from depalign_common import AlignConfig

from fixtures.manifests import RecordingInstaller, write_manifest


@pytest.fixture
def host_dir(tmp_path):
    """Host project directory with an empty node_modules."""
    host = tmp_path / "host"
    host.mkdir()
    (host / "node_modules").mkdir()
    return host


@pytest.fixture
def make_library(host_dir):
    """Factory creating node_modules/<name> with a manifest (optionally with main in a subdir)."""

    def _make(name, dependencies=None, dev_dependencies=None, main=None):
        package_dir = host_dir / "node_modules" / name
        extra = {"main": main} if main else {}
        write_manifest(package_dir, name=name, dependencies=dependencies,
                       dev_dependencies=dev_dependencies, **extra)
        if main:
            entry = package_dir / main
            entry.parent.mkdir(parents=True, exist_ok=True)
            entry.write_text("module.exports = {};\n")
        return package_dir

    return _make


@pytest.fixture
def config(host_dir):
    return AlignConfig(host_dir=host_dir, default_library="acme-preset")


@pytest.fixture
def recording_installer():
    return RecordingInstaller()
