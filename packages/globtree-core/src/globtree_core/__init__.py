"""globtree core - deterministic directory listings, glob matching and content fingerprints."""

from globtree_core.config import GlobtreeConfig, load_config
from globtree_core.errors import (
    GlobtreeError,
    InvalidPatternError,
    InvalidRootError,
    PathResolutionError,
    ReadError,
    TraversalError,
)
from globtree_core.fingerprint import EMPTY_ARCHIVE_DIGEST, compute_fingerprint, dirhash
from globtree_core.tree import (
    Entry,
    EntryKind,
    Pattern,
    list_directories,
    list_files,
    match,
    match_directories,
)

__version__ = "0.1.0"

__all__ = [
    "EMPTY_ARCHIVE_DIGEST",
    "Entry",
    "EntryKind",
    "GlobtreeConfig",
    "GlobtreeError",
    "InvalidPatternError",
    "InvalidRootError",
    "PathResolutionError",
    "Pattern",
    "ReadError",
    "TraversalError",
    "compute_fingerprint",
    "dirhash",
    "list_directories",
    "list_files",
    "load_config",
    "match",
    "match_directories",
]
