"""Fingerprint subsystem: deterministic archive plus SHA-256."""

from globtree_core.fingerprint.archive import build_archive
from globtree_core.fingerprint.hasher import (
    EMPTY_ARCHIVE_DIGEST,
    FingerprintResult,
    compute_fingerprint,
    digest,
    dirhash,
)

__all__ = [
    "EMPTY_ARCHIVE_DIGEST",
    "FingerprintResult",
    "build_archive",
    "compute_fingerprint",
    "digest",
    "dirhash",
]
