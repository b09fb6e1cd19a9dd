"""Pytest configuration and fixtures for schema tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
import pytest
from pathlib import Path


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/schema)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield
