"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_css_builders.adapters import AdapterRegistry, reset_default_registry
from chuk_css_builders.config import LIBRARY_PATH


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    """Every test starts and ends with an unbuilt default registry."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def library_registry() -> AdapterRegistry:
    """Registry over the built-in tables only."""
    return AdapterRegistry(library_path=LIBRARY_PATH)


@pytest.fixture
def project_registry(temp_dir: Path) -> AdapterRegistry:
    """Registry over the built-in tables plus an empty project directory."""
    return AdapterRegistry(library_path=LIBRARY_PATH, project_path=temp_dir)
