"""Content fingerprints over pattern-selected files."""

from __future__ import annotations

import hashlib
import logging
import os

from pydantic import BaseModel, Field

from globtree_core.fingerprint.archive import build_archive
from globtree_core.tree.canonical import printable
from globtree_core.tree.models import Entry
from globtree_core.tree.pattern import Pattern
from globtree_core.tree.walker import match

logger = logging.getLogger(__name__)


def digest(data: bytes) -> str:
    """SHA-256 of *data* as 64 lowercase hex characters."""
    return hashlib.sha256(data).hexdigest()


# An archive with no files is the empty byte string
EMPTY_ARCHIVE_DIGEST = digest(b"")


class FingerprintResult(BaseModel):
    """A fingerprint together with the files that went into it.

    ``files`` holds display forms (see :func:`~globtree_core.tree.canonical.printable`).
    """

    root: str
    pattern: str
    digest: str = Field(pattern=r"^[0-9a-f]{64}$")
    files: list[str] = Field(default_factory=list)


def _hash_matches(root: str | os.PathLike[str], pattern: str) -> tuple[str, list[Entry]]:
    compiled = Pattern.compile(pattern)
    files = [e for e in match(root, compiled) if not e.is_dir]
    h = digest(build_archive(root, files))
    logger.debug("Fingerprint of %s (%r) over %d files: %s", printable(os.fspath(root)), pattern, len(files), h)
    return h, files


def compute_fingerprint(root: str | os.PathLike[str], pattern: str) -> FingerprintResult:
    """Walk *root*, archive the files matching *pattern* and hash the archive."""
    h, files = _hash_matches(root, pattern)
    return FingerprintResult(
        root=printable(os.fspath(root)),
        pattern=printable(pattern),
        digest=h,
        files=[printable(e.path) for e in files],
    )


def dirhash(root: str | os.PathLike[str], pattern: str) -> str:
    """64-char hex fingerprint of the files under *root* matching *pattern*."""
    h, _ = _hash_matches(root, pattern)
    return h
