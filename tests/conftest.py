"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from pandoc_resources.models import SearchRoots


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a temporary project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def user_dir(tmp_path: Path) -> Path:
    """Return a user pandoc directory (not created)."""
    return tmp_path / "config" / "opencode" / "pandoc"


@pytest.fixture
def project_dir(project_root: Path) -> Path:
    """Return the project pandoc directory (not created)."""
    return project_root / ".opencode" / "pandoc"


@pytest.fixture
def roots(project_root: Path, user_dir: Path) -> SearchRoots:
    """Search roots pointing at the temporary directories."""
    return SearchRoots(project_root=project_root, user_dir=user_dir)


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Return a helper that creates a file and its parent directories."""
    def _make(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _make
