"""Tests for synthetic directory tree helpers."""

from __future__ import annotations

import pytest

from cleardir.benchmarks.synthetic import build_tree, expected_directory_count
from cleardir.scanning import FileSystemDirectoryScanner


def test_build_tree_matches_expected_count(tmp_path) -> None:
    created = build_tree(tmp_path / "tree", depth=3, fanout=2)

    assert created == expected_directory_count(depth=3, fanout=2) == 14
    assert len(FileSystemDirectoryScanner().scan(tmp_path / "tree")) == 14


def test_build_tree_with_zero_depth_creates_only_root(tmp_path) -> None:
    assert build_tree(tmp_path / "tree", depth=0, fanout=5) == 0
    assert (tmp_path / "tree").is_dir()


def test_build_tree_rejects_negative_parameters(tmp_path) -> None:
    with pytest.raises(ValueError):
        build_tree(tmp_path, depth=-1, fanout=2)
