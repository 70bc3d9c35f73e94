"""Lenient recursive listings of directories and files.

Both enumerators are best effort: an entry that errors during the walk is
skipped and the walk carries on. Callers that need to know about such
failures should use :func:`globtree_core.tree.walker.match` instead.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from globtree_core.errors import PathResolutionError
from globtree_core.tree.canonical import canonicalize, resolve_root

logger = logging.getLogger(__name__)


def _children(directory: str) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def _scan(directory: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(absolute_path, is_dir)`` depth-first, siblings sorted by name.

    Pending directories live on an explicit stack of sibling iterators, so
    depth is bounded by memory rather than the interpreter's recursion limit.
    """
    stack = [iter(_children(directory))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        try:
            is_dir = child.is_dir()
            is_link = child.is_symlink()
        except OSError as e:
            logger.debug("Skipping entry %s: %s", child.path, e)
            continue

        if is_link and not is_dir and not os.path.exists(child.path):
            logger.debug("Skipping broken symlink %s", child.path)
            continue

        yield child.path, is_dir

        # Linked directories are listed but never followed (no cycles)
        if is_dir and not is_link:
            stack.append(iter(_children(child.path)))


def _collect(root: str, unix_style: bool, want_dirs: bool) -> list[str]:
    try:
        abs_root = resolve_root(root)
    except PathResolutionError as e:
        logger.debug("Cannot resolve root %s: %s", root, e)
        return []

    out: list[str] = []
    for path, is_dir in _scan(abs_root):
        if is_dir is not want_dirs:
            continue
        try:
            rel = canonicalize(abs_root, path, unix_style)
        except PathResolutionError as e:
            logger.debug("Skipping %s: %s", path, e)
            continue
        if rel is not None:
            out.append(rel)
    return out


def list_directories(root: str | os.PathLike[str], unix_style: bool = True) -> list[str]:
    """Every directory below *root*, excluding *root* itself."""
    return _collect(os.fspath(root), unix_style, want_dirs=True)


def list_files(root: str | os.PathLike[str], unix_style: bool = True) -> list[str]:
    """Every non-directory entry below *root*."""
    return _collect(os.fspath(root), unix_style, want_dirs=False)
