r"""Glob patterns evaluated against ``/``-joined, root-relative paths.

Dialect:

- literal segments match exactly
- ``*`` matches any run of characters inside one segment, ``?`` one character
- ``[abc]`` / ``[!abc]`` character classes
- ``**`` as a whole segment spans zero or more segments
- ``{a,b}`` brace alternation, nestable, at most :data:`MAX_ALTERNATIVES`
  alternatives after expansion
- a trailing ``/`` restricts the match to directories

Backslash is not an escape character: ``\*`` is a literal backslash followed
by a wildcard. Match a metacharacter literally with a one-character class,
e.g. ``[*]`` or ``[{]``.

Patterns only ever see what the walker yields, and the walker does not follow
symbolic links to directories, so ``**`` never crosses a linked directory.

Segment translation is delegated to :func:`glob.translate`, the same engine
behind :meth:`pathlib.PurePath.full_match`. Braces are expanded up front into
independent alternatives.
"""

from __future__ import annotations

import glob
import re
from dataclasses import dataclass

from globtree_core.errors import InvalidPatternError

_MAGIC = frozenset("*?[")

MAX_ALTERNATIVES = 1024


def _class_end(text: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at *start*, or -1."""
    i = start + 1
    if i < len(text) and text[i] == "!":
        i += 1
    if i < len(text) and text[i] == "]":
        i += 1
    while i < len(text) and text[i] != "]":
        i += 1
    return i if i < len(text) else -1


def _first_group(pattern: str, text: str) -> tuple[int, list[int], int] | None:
    """Locate the first top-level ``{...}`` of *text*: open index, commas, close index."""
    depth = 0
    open_at = -1
    commas: list[int] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "[":
            end = _class_end(text, i)
            if end != -1:
                i = end + 1
                continue
        elif ch == "{":
            if depth == 0:
                open_at = i
                commas = []
            depth += 1
        elif ch == "}":
            if depth == 0:
                raise InvalidPatternError(pattern, "unmatched '}'")
            depth -= 1
            if depth == 0:
                return open_at, commas, i
        elif ch == "," and depth == 1:
            commas.append(i)
        i += 1

    if depth:
        raise InvalidPatternError(pattern, "unmatched '{'")
    return None


def _expand_braces(pattern: str, text: str) -> list[str]:
    """Expand every ``{...}`` group of *text*, left to right, into plain alternatives."""
    out: list[str] = []
    pending = [text]
    while pending:
        current = pending.pop()
        group = _first_group(pattern, current)
        if group is None:
            out.append(current)
            continue

        open_at, commas, close_at = group
        head, tail = current[:open_at], current[close_at + 1 :]
        bounds = [open_at, *commas, close_at]
        options = [current[a + 1 : b] for a, b in zip(bounds, bounds[1:])]
        # Reversed so alternatives come out in written order
        pending.extend(head + option + tail for option in reversed(options))
        if len(out) + len(pending) > MAX_ALTERNATIVES:
            raise InvalidPatternError(
                pattern, f"expands to more than {MAX_ALTERNATIVES} alternatives"
            )
    return out


def _normalize(text: str) -> tuple[str, bool]:
    """Strip leading ``./`` and ``/``, collapse ``//``; report a trailing ``/``."""
    text = re.sub(r"/{2,}", "/", text)
    while text.startswith("./"):
        text = text[2:]
    text = text.lstrip("/")
    dirs_only = text.endswith("/")
    return text.rstrip("/"), dirs_only


def _validate_segment(pattern: str, segment: str) -> None:
    i = segment.find("[")
    while i != -1:
        end = _class_end(segment, i)
        if end == -1:
            raise InvalidPatternError(pattern, f"unterminated character class in {segment!r}")
        i = segment.find("[", end + 1)


@dataclass(frozen=True)
class _Alternative:
    regex: re.Pattern[str]
    prefix: tuple[str, ...]
    literal: bool
    dirs_only: bool

    def may_contain_matches(self, parts: list[str]) -> bool:
        n = len(self.prefix)
        if len(parts) < n:
            return tuple(parts) == self.prefix[: len(parts)]
        return not self.literal and tuple(parts[:n]) == self.prefix


@dataclass(frozen=True)
class Pattern:
    """A compiled glob pattern. Build with :meth:`compile`."""

    text: str
    alternatives: tuple[_Alternative, ...]

    @classmethod
    def compile(cls, text: str) -> Pattern:
        if "\x00" in text:
            raise InvalidPatternError(text, "NUL character")

        alternatives: list[_Alternative] = []
        for alt in dict.fromkeys(_expand_braces(text, text)):
            alt, dirs_only = _normalize(alt)
            segments = alt.split("/") if alt else []
            for segment in segments:
                _validate_segment(text, segment)

            prefix: list[str] = []
            for segment in segments:
                if _MAGIC.intersection(segment):
                    break
                prefix.append(segment)

            regex = re.compile(
                glob.translate(alt, recursive=True, include_hidden=True, seps="/")
            )
            alternatives.append(
                _Alternative(
                    regex=regex,
                    prefix=tuple(prefix),
                    literal=len(prefix) == len(segments),
                    dirs_only=dirs_only,
                )
            )
        return cls(text=text, alternatives=tuple(alternatives))

    def matches(self, path: str, is_dir: bool = False) -> bool:
        """Full match of a ``/``-joined relative path. The root never matches."""
        if not path:
            return False
        return any(
            alt.regex.match(path) and (is_dir or not alt.dirs_only)
            for alt in self.alternatives
        )

    def can_descend(self, path: str) -> bool:
        """Whether anything below directory *path* could still match."""
        parts = path.split("/")
        return any(alt.may_contain_matches(parts) for alt in self.alternatives)
