"""Shared fixtures for ccfind tests."""

from pathlib import Path

import pytest

from ccfind.models.config import WorkspaceConfig


def _make_tree(root: Path, files) -> None:
    """Create files below root; keys are '/'-separated relative paths."""
    if isinstance(files, dict):
        items = files.items()
    else:
        items = ((path, f"Content of {path}\n") for path in files)
    for relative_path, content in items:
        full_path = root / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)


@pytest.fixture
def home(tmp_path):
    """An empty home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def workspace_root(home):
    """The default workspace root inside the temporary home."""
    path = home / "Curbcut" / "cc_app"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def workspace_config(workspace_root):
    """Default configuration pointed at the temporary workspace."""
    return WorkspaceConfig(root=str(workspace_root))


@pytest.fixture
def make_tree():
    """Factory creating files from a list of paths or a {path: content} dict."""
    return _make_tree
