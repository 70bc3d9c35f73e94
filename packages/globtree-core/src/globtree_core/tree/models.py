"""Data models for tree traversal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class Entry:
    """One filesystem object found during a walk.

    ``path`` is relative to the walk root and always joined with ``/``.
    Size, mtime and permissions are deliberately absent.
    """

    path: str
    kind: EntryKind

    def __post_init__(self) -> None:
        if not self.path or self.path.startswith("/"):
            raise ValueError(f"path must be a non-empty relative path, got {self.path!r}")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIR
