"""Tests for the host function registry (result/error pairs)."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from globtree_core.fingerprint import EMPTY_ARCHIVE_DIGEST, dirhash
from globtree_core.functions import FUNCTIONS, FunctionNotFoundError, FunctionResult, call, get_function


def test_registry_names():
    assert sorted(FUNCTIONS) == ["directories", "dirhash", "dirset", "files"]


def test_params_mirror_host_signatures():
    assert get_function("directories").params == ("root", "unix")
    assert get_function("dirhash").params == ("path", "pattern")


def test_unknown_function_raises():
    with pytest.raises(FunctionNotFoundError, match="nope"):
        call("nope", ".")


def test_wrong_arity_raises():
    with pytest.raises(TypeError):
        call("dirset", ".")


def test_directories_value(scenario_tree: Path):
    result = call("directories", str(scenario_tree), True)
    assert result.ok
    assert result.value == ["a", "a/b", "a/c"]


def test_files_null_unix_means_native(scenario_tree: Path):
    result = call("files", str(scenario_tree), None)
    assert result.value == [os.path.join("a", "b", "file.txt")]


def test_listing_of_missing_root_is_empty_not_error(tmp_path: Path):
    result = call("directories", str(tmp_path / "missing"), True)
    assert result.ok
    assert result.value == []


def test_dirset_value(scenario_tree: Path):
    assert call("dirset", str(scenario_tree), "a/**").value == ["a/b", "a/c"]


def test_dirhash_value(scenario_tree: Path):
    result = call("dirhash", str(scenario_tree), "a/**")
    assert result.value == dirhash(scenario_tree, "a/**")
    assert call("dirhash", str(scenario_tree), "zzz/**").value == EMPTY_ARCHIVE_DIGEST


def test_strict_errors_become_values(tmp_path: Path, caplog):
    result = call("dirhash", str(tmp_path / "missing"), "**")
    assert not result.ok
    assert result.value is None
    assert "does not exist" in result.error
    assert "dirhash failed" in caplog.text


def test_invalid_pattern_becomes_value(scenario_tree: Path):
    result = call("dirset", str(scenario_tree), "{a")
    assert isinstance(result, FunctionResult)
    assert "invalid pattern" in result.error


def test_undecodable_names_come_back_as_values(undecodable_tree: Path):
    hashed = call("dirhash", str(undecodable_tree), "a/**")
    assert hashed.ok
    assert hashed.value == dirhash(undecodable_tree, "a/**")
    listed = call("files", str(undecodable_tree), True)
    assert listed.value == ["a/b/file.txt", "a/bad\\xffname"]


def test_deep_tree_is_a_value_not_a_crash(deep_tree: Path, deep_tree_depth: int):
    result = call("dirset", str(deep_tree), "**")
    assert result.ok
    assert len(result.value) == deep_tree_depth
