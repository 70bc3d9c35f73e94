"""Tree traversal: canonical paths, lenient listings and the strict pattern walker."""

from globtree_core.tree.canonical import canonicalize, printable, resolve_root
from globtree_core.tree.listing import list_directories, list_files
from globtree_core.tree.models import Entry, EntryKind
from globtree_core.tree.pattern import Pattern
from globtree_core.tree.walker import match, match_directories, walk

__all__ = [
    "Entry",
    "EntryKind",
    "Pattern",
    "canonicalize",
    "list_directories",
    "list_files",
    "match",
    "match_directories",
    "printable",
    "resolve_root",
    "walk",
]
