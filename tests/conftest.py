"""Shared test fixtures for globtree."""

import logging
import os
import sys
from pathlib import Path

import pytest

from globtree_core.config.models import GlobtreeConfig


@pytest.fixture
def scenario_tree(tmp_path: Path) -> Path:
    """``a/b/file.txt`` containing "hi" plus an empty ``a/c``."""
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "file.txt").write_bytes(b"hi")
    (tmp_path / "a" / "c").mkdir()
    return tmp_path


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """A slightly larger layout with nested dirs, dotfiles and siblings."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "__init__.py").write_text("")
    (root / "src" / "pkg" / "core.py").write_text("def f(): pass\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "docs").mkdir()
    (root / "docs" / "index.md").write_text("# Docs\n")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "secret.txt").write_text("shh")
    (root / "README.md").write_text("# Project\n")
    return root


@pytest.fixture
def sample_config():
    return GlobtreeConfig()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """CLI commands reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def undecodable_tree(scenario_tree: Path) -> Path:
    """The scenario tree plus ``a/bad<0xff>name`` holding ``x``.

    Skips where the filesystem refuses names that are not valid UTF-8.
    """
    if sys.platform == "win32":
        pytest.skip("bytes filenames are POSIX only")
    target = os.path.join(os.fsencode(scenario_tree), b"a", b"bad\xffname")
    try:
        with open(target, "wb") as f:
            f.write(b"x")
    except OSError:
        pytest.skip("filesystem rejects undecodable names")
    return scenario_tree


@pytest.fixture
def deep_tree_depth() -> int:
    # Past the default recursion limit, still well under PATH_MAX
    return 1100


@pytest.fixture
def deep_tree(tmp_path: Path, deep_tree_depth: int):
    """A single chain ``d/d/.../d`` deeper than the recursion limit, with ``leaf.txt`` at the bottom."""
    root = tmp_path / "deep"
    root.mkdir()
    current = root
    for _ in range(deep_tree_depth):
        current = current / "d"
        current.mkdir()
    (current / "leaf.txt").write_bytes(b"leaf")
    yield root

    # Remove bottom-up without recursion
    (current / "leaf.txt").unlink()
    while current != root:
        current.rmdir()
        current = current.parent
