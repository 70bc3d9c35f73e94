"""Named host functions returning result/error pairs instead of raising."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, field_validator

from globtree_core.errors import GlobtreeError
from globtree_core.fingerprint import dirhash
from globtree_core.tree import list_directories, list_files, match_directories, printable

logger = logging.getLogger(__name__)


class FunctionNotFoundError(Exception):
    """Raised when a requested function name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No function registered with name '{name}'")


class FunctionResult(BaseModel):
    """Outcome of a single host function call."""

    value: list[str] | str | None = None
    error: str | None = None

    @field_validator("value", "error", mode="before")
    @classmethod
    def _printable_paths(cls, v: object) -> object:
        # Undecodable filenames carry surrogate escapes, which are not valid text
        if isinstance(v, str):
            return printable(v)
        if isinstance(v, list):
            return [printable(p) if isinstance(p, str) else p for p in v]
        return v

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class HostFunction:
    name: str
    summary: str
    params: tuple[str, ...]
    impl: Callable[..., list[str] | str]


def _directories(root: str, unix: bool | None) -> list[str]:
    return list_directories(root, bool(unix))


def _files(root: str, unix: bool | None) -> list[str]:
    return list_files(root, bool(unix))


FUNCTIONS: dict[str, HostFunction] = {
    f.name: f
    for f in (
        HostFunction(
            name="directories",
            summary="Walks the file tree rooted at root and finds all directories",
            params=("root", "unix"),
            impl=_directories,
        ),
        HostFunction(
            name="files",
            summary="Walks the file tree rooted at root and finds all files",
            params=("root", "unix"),
            impl=_files,
        ),
        HostFunction(
            name="dirset",
            summary="Finds the directories under path matching the given pattern",
            params=("path", "pattern"),
            impl=match_directories,
        ),
        HostFunction(
            name="dirhash",
            summary="Calculates the hash of the files under path matching the given pattern",
            params=("path", "pattern"),
            impl=dirhash,
        ),
    )
}


def get_function(name: str) -> HostFunction:
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise FunctionNotFoundError(name) from None


def call(name: str, *args: object) -> FunctionResult:
    """Run function *name*; library errors come back in ``error``."""
    fn = get_function(name)
    if len(args) != len(fn.params):
        raise TypeError(f"{name}() takes {len(fn.params)} arguments ({', '.join(fn.params)}), got {len(args)}")
    try:
        return FunctionResult(value=fn.impl(*args))
    except GlobtreeError as e:
        logger.warning("%s failed: %s", name, e)
        return FunctionResult(error=str(e))
