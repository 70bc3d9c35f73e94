"""Strict, pattern-driven tree walker.

Traversal order is depth-first with each directory yielded before its
children and siblings sorted by name (code-point order). This order seeds the
fingerprint archive layout, so it must not change.

Symbolic links to directories are yielded as directories but never followed,
so a walk cannot cycle. A dangling link is yielded as a file.

Unlike :mod:`globtree_core.tree.listing`, any I/O error aborts the walk.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator

from globtree_core.errors import InvalidRootError, TraversalError
from globtree_core.tree.canonical import resolve_root
from globtree_core.tree.models import Entry, EntryKind
from globtree_core.tree.pattern import Pattern

logger = logging.getLogger(__name__)


def _open_root(root: str | os.PathLike[str]) -> str:
    abs_root = resolve_root(root)
    if not os.path.exists(abs_root):
        raise InvalidRootError(str(root), "does not exist")
    if not os.path.isdir(abs_root):
        raise InvalidRootError(str(root), "not a directory")
    return abs_root


def _children(base: str, rel: str) -> list[os.DirEntry[str]]:
    directory = os.path.join(base, *rel.split("/")) if rel else base
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        if not rel:
            raise InvalidRootError(base, f"cannot be opened: {e}") from e
        raise TraversalError(rel, e) from e


def _scan(base: str, descend: Callable[[str], bool]) -> Iterator[Entry]:
    # Stack of (relative dir, remaining sorted children); no recursion
    stack = [("", iter(_children(base, "")))]
    while stack:
        rel, siblings = stack[-1]
        child = next(siblings, None)
        if child is None:
            stack.pop()
            continue

        child_rel = f"{rel}/{child.name}" if rel else child.name
        try:
            is_dir = child.is_dir()
            is_link = child.is_symlink()
        except OSError as e:
            raise TraversalError(child_rel, e) from e

        yield Entry(child_rel, EntryKind.DIR if is_dir else EntryKind.FILE)

        if is_dir and not is_link and descend(child_rel):
            stack.append((child_rel, iter(_children(base, child_rel))))


def walk(root: str | os.PathLike[str]) -> Iterator[Entry]:
    """Yield every entry below *root* in traversal order."""
    abs_root = _open_root(root)
    return _scan(abs_root, lambda _: True)


def match(root: str | os.PathLike[str], pattern: str | Pattern) -> list[Entry]:
    """Entries below *root* selected by *pattern*, in traversal order.

    The pattern is compiled before any I/O so a malformed pattern fails fast.
    Directories that cannot contain a match are not opened.
    """
    compiled = pattern if isinstance(pattern, Pattern) else Pattern.compile(pattern)
    abs_root = _open_root(root)

    matched = [
        entry
        for entry in _scan(abs_root, compiled.can_descend)
        if compiled.matches(entry.path, entry.is_dir)
    ]
    logger.debug("Pattern %r matched %d entries under %s", compiled.text, len(matched), abs_root)
    return matched


def match_directories(root: str | os.PathLike[str], pattern: str | Pattern) -> list[str]:
    """Relative ``/``-joined paths of the directories selected by *pattern*."""
    return [entry.path for entry in match(root, pattern) if entry.is_dir]
