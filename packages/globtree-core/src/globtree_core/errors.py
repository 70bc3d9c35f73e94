"""Error taxonomy shared by the strict walker, the archive builder and the hasher."""

from __future__ import annotations


class GlobtreeError(Exception):
    """Base class for every error raised by globtree_core."""


class InvalidRootError(GlobtreeError):
    """Raised when the root does not exist or cannot be opened as a directory."""

    def __init__(self, root: str, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"invalid root {root!r}: {reason}")


class InvalidPatternError(GlobtreeError):
    """Raised when a glob pattern is syntactically malformed."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class TraversalError(GlobtreeError):
    """Wraps an I/O failure while listing a sub-directory during a strict walk."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        super().__init__(f"cannot read directory {path!r}: {cause}")
        self.__cause__ = cause


class ReadError(GlobtreeError):
    """Wraps an I/O failure while reading a matched file's contents."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        super().__init__(f"cannot read file {path!r}: {cause}")
        self.__cause__ = cause


class PathResolutionError(GlobtreeError):
    """Raised when a path cannot be resolved to an absolute form."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        super().__init__(f"cannot resolve {path!r}: {cause}")
        self.__cause__ = cause
