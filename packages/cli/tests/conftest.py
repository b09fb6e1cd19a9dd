"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
import json
import pytest
from pathlib import Path
from typer.testing import CliRunner

from wpsync_schema import ComponentDescriptor, ComponentKind


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/cli)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


class StubHost:
    """Stands in for WpCliHost so no wp binary is needed."""

    def __init__(self, core_version="6.0.0", plugins=None, error=None):
        self._core_version = core_version
        self._plugins = plugins or []
        self._error = error

    def core_version(self):
        if self._error is not None:
            raise self._error
        return self._core_version

    def active_plugins(self):
        return list(self._plugins)

    def mu_plugins(self):
        return []

    def active_theme(self):
        return None

    def component_directories(self):
        return {}


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    for var in ("WPSYNC_MANIFEST_FILE", "WPSYNC_REPOSITORIES_FILE", "WPSYNC_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def composer_json(project_dir):
    """Write composer.json into the project directory."""

    def _write(data):
        path = project_dir / "composer.json"
        path.write_text(json.dumps(data, indent=4))
        return path

    return _write


@pytest.fixture
def stub_host(monkeypatch):
    """Replace WpCliHost in the sync command; returns the constructor kwargs seen."""
    calls = {}

    def _install(**host_kwargs):
        def _factory(**kwargs):
            calls.update(kwargs)
            return StubHost(**host_kwargs)

        monkeypatch.setattr("wpsync_cli.sync_cmd.WpCliHost", _factory)
        return calls

    return _install


@pytest.fixture
def akismet():
    return ComponentDescriptor(
        kind=ComponentKind.PLUGIN,
        display_name="Akismet",
        raw_version="5.0",
        slug="akismet",
    )
