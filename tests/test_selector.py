"""Tests for recursive file selection."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from conftest import SAMPLE_FILES, TXT_FILES, SampleTree

from prefixer.engine import TraversalError, select_files


class TestSelectFiles:
    """Tests for select_files()."""

    def test_match_all_in_walk_order(self, sample_tree: SampleTree) -> None:
        files = select_files(sample_tree.root, "*")
        assert files == [sample_tree.path(rel) for rel in SAMPLE_FILES]

    def test_pattern_on_base_name(self, sample_tree: SampleTree) -> None:
        files = select_files(sample_tree.root, "*.txt")
        assert files == [sample_tree.path(rel) for rel in TXT_FILES]

    def test_pattern_is_case_sensitive(self, sample_tree: SampleTree) -> None:
        assert select_files(sample_tree.root, "*.TXT") == []
        assert select_files(sample_tree.root, "DONTREADME.md") == [
            sample_tree.path("inner_dir/DONTREADME.md")
        ]

    def test_question_mark_and_brackets(self, sample_tree: SampleTree) -> None:
        files = select_files(sample_tree.root, "file_[12].tx?")
        assert files == [sample_tree.path("file_1.txt"), sample_tree.path("inner_dir/file_2.txt")]

    def test_pattern_does_not_span_directories(self, sample_tree: SampleTree) -> None:
        assert select_files(sample_tree.root, "inner_dir/*") == []
        assert select_files(sample_tree.root, "**/*.json") == []

    def test_directories_are_skipped(self, sample_tree: SampleTree) -> None:
        files = select_files(sample_tree.root, "inner*")
        assert files == []

    def test_no_match_is_not_an_error(self, sample_tree: SampleTree) -> None:
        assert select_files(sample_tree.root, "*.go") == []

    def test_deterministic(self, sample_tree: SampleTree) -> None:
        assert select_files(sample_tree.root) == select_files(sample_tree.root)

    def test_root_is_a_file(self, sample_tree: SampleTree) -> None:
        target = sample_tree.path("file_1.txt")
        assert select_files(target, "*.txt") == [target]
        assert select_files(target, "*.json") == []

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(TraversalError, match="no such file or directory") as exc_info:
            select_files(tmp_path / "nope", "*")
        assert exc_info.value.root == tmp_path / "nope"

    def test_unlistable_directory_raises(
        self, sample_tree: SampleTree, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        blocked = sample_tree.path("inner_dir")
        real_scandir = os.scandir

        def scandir(path=".", *args, **kwargs):
            if Path(path) == blocked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path, *args, **kwargs)

        monkeypatch.setattr(os, "scandir", scandir)

        with pytest.raises(TraversalError, match="Permission denied"):
            select_files(sample_tree.root, "*")

    def test_broken_symlink_is_skipped(self, sample_tree: SampleTree) -> None:
        link = sample_tree.path("dangling.txt")
        link.symlink_to(sample_tree.root / "does-not-exist")
        assert link not in select_files(sample_tree.root, "*.txt")
