"""Deterministic in-memory archive of matched files.

Each file contributes two netstrings, its path then its content::

    <len>:<path bytes>,<len>:<content bytes>,

Lengths are ASCII decimal. Paths are the ``/``-joined relative path encoded
with :func:`os.fsencode`, so names that are not valid UTF-8 keep their raw
bytes. Nothing else (mtime, mode, owner) is recorded, and an archive with no
files is the empty byte string.
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterable

from globtree_core.errors import ReadError
from globtree_core.tree.canonical import resolve_root
from globtree_core.tree.models import Entry


def _netstring(data: bytes) -> bytes:
    return b"%d:%s," % (len(data), data)


def _read(base: str, entry: Entry) -> bytes:
    path = os.path.join(base, *entry.path.split("/"))
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ReadError(entry.path, e) from e


def build_archive(root: str | os.PathLike[str], entries: Iterable[Entry]) -> bytes:
    """Serialize the file entries of *entries*, in order, into one byte string.

    Directory entries are skipped. Any unreadable file raises ReadError and
    no archive is returned.
    """
    base = resolve_root(root)
    buf = io.BytesIO()
    for entry in entries:
        if entry.is_dir:
            continue
        content = _read(base, entry)
        buf.write(_netstring(os.fsencode(entry.path)))
        buf.write(_netstring(content))
    return buf.getvalue()
