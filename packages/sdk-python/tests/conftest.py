"""Pytest configuration and fixtures for SDK tests.

Provides in-memory stand-ins for the capabilities the sync engine is given:
a WordPress host, an operator prompt, a progress reporter and the public
package index.
"""
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from wpsync_schema import ComponentDescriptor, ComponentKind


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


class FakeHost:
    """WordPressHost returning canned components."""

    def __init__(
        self,
        core_version: str = "6.0.0",
        plugins: Optional[List[ComponentDescriptor]] = None,
        mu_plugins: Optional[List[ComponentDescriptor]] = None,
        theme: Optional[ComponentDescriptor] = None,
        directories: Optional[Dict[ComponentKind, Path]] = None,
    ):
        self._core_version = core_version
        self._plugins = plugins or []
        self._mu_plugins = mu_plugins or []
        self._theme = theme
        self._directories = directories or {}

    def core_version(self) -> str:
        return self._core_version

    def active_plugins(self) -> List[ComponentDescriptor]:
        return list(self._plugins)

    def mu_plugins(self) -> List[ComponentDescriptor]:
        return list(self._mu_plugins)

    def active_theme(self) -> Optional[ComponentDescriptor]:
        return self._theme

    def component_directories(self) -> Dict[ComponentKind, Path]:
        return dict(self._directories)


class CannedPrompter:
    """Prompter answering from a list; runs out -> default."""

    def __init__(self, answers: Sequence[bool] = ()):
        self.answers = list(answers)
        self.questions: List[str] = []

    def confirm(self, message: str, default: bool = False) -> bool:
        self.questions.append(message)
        if self.answers:
            return self.answers.pop(0)
        return default


class RecordingReporter:
    """Reporter that keeps everything it is told."""

    def __init__(self):
        self.lines: List[str] = []
        self.successes: List[str] = []
        self.warnings: List[str] = []
        self.tables: List[List[Dict[str, str]]] = []

    def log(self, message: str, style: Optional[str] = None) -> None:
        self.lines.append(message)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def table(self, rows: Sequence[Dict[str, str]], columns: Sequence[str]) -> None:
        self.tables.append([dict(row) for row in rows])

    @property
    def output(self) -> str:
        return "\n".join(self.lines + self.successes + self.warnings)


class FakeIndexClient:
    """PackageIndexClient answering from a set of (kind, slug) pairs."""

    def __init__(self, published=()):
        self.published = set(published)
        self.lookups: List[tuple] = []

    def exists(self, kind: str, slug: str) -> bool:
        self.lookups.append((kind, slug))
        return (kind, slug) in self.published


@pytest.fixture
def make_host():
    """Factory for FakeHost."""
    return FakeHost


@pytest.fixture
def make_prompter():
    """Factory for CannedPrompter."""
    return CannedPrompter


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def make_index():
    """Factory for FakeIndexClient."""
    return FakeIndexClient


@pytest.fixture
def write_manifest_file(tmp_path):
    """Write a composer.json into tmp_path and return its path."""

    def _write(data, name: str = "composer.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=4))
        return path

    return _write


@pytest.fixture
def plugin():
    """Factory for plugin descriptors."""

    def _plugin(name: str, version: str, slug: str, kind: ComponentKind = ComponentKind.PLUGIN, **kwargs):
        return ComponentDescriptor(kind=kind, display_name=name, raw_version=version, slug=slug, **kwargs)

    return _plugin


@pytest.fixture
def pro_definitions():
    """Two definitions where the first matches by name and the second by slug."""
    from wpsync_schema import ProRepositoryManifest

    return ProRepositoryManifest.model_validate(
        {
            "repositories": [
                {
                    "url": "https://first.example.com",
                    "plugins": {"SearchWP": "searchwp/searchwp"},
                },
                {
                    "url": "https://second.example.com",
                    "type": "vcs",
                    "plugins": {
                        "Search Pro": {"package": "other/searchwp-pro", "slug": "searchwp"},
                        "Gravity Forms": {"package": "gravity/gravityforms", "slug": "gravityforms"},
                    },
                },
            ]
        }
    ).repositories
