"""Root-relative, separator-stable path strings."""

from __future__ import annotations

import os

from globtree_core.errors import PathResolutionError


def resolve_root(root: str | os.PathLike[str]) -> str:
    """Return the absolute form of *root*, or raise PathResolutionError."""
    try:
        return os.path.abspath(os.fspath(root))
    except (OSError, ValueError) as e:
        raise PathResolutionError(str(root), e) from e


def canonicalize(
    root: str | os.PathLike[str],
    path: str | os.PathLike[str],
    use_forward_slash: bool = True,
) -> str | None:
    """Express *path* relative to *root*.

    Returns None for the root itself, which is never part of a listing.
    With *use_forward_slash* the native separator is rewritten to ``/``.
    """
    abs_root = resolve_root(root)
    abs_path = resolve_root(path)
    try:
        rel = os.path.relpath(abs_path, abs_root)
    except ValueError as e:
        # Windows: path and root on different drives
        raise PathResolutionError(str(path), e) from e

    if rel == os.curdir:
        return None
    if use_forward_slash and os.sep != "/":
        rel = rel.replace(os.sep, "/")
    return rel


def printable(path: str) -> str:
    """*path* with undecodable filename bytes shown as ``\\xNN`` escapes.

    Names that are not valid UTF-8 come back from the OS with surrogate
    escapes, which cannot be encoded for display or validated as text.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")
