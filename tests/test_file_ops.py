"""Tests for whole-file byte I/O helpers."""

import os
import stat
from pathlib import Path

import pytest

from prefixer.engine import FileOperations, IOResult


def test_read_bytes(tmp_path: Path):
    path = tmp_path / "f"
    path.write_bytes(b"a\r\nb")
    result = FileOperations.read_bytes(path)
    assert result.is_success
    assert result.unwrap() == b"a\r\nb"


def test_read_empty_file_is_success(tmp_path: Path):
    path = tmp_path / "f"
    path.write_bytes(b"")
    assert FileOperations.read_bytes(path).unwrap() == b""


def test_read_directory_fails(tmp_path: Path):
    result = FileOperations.read_bytes(tmp_path)
    assert result.is_failure
    assert "Path is not a file" in (result.error or "")


def test_write_replaces_content_and_keeps_mode(tmp_path: Path):
    path = tmp_path / "script.sh"
    path.write_bytes(b"echo hi\n")
    path.chmod(0o751)

    result = FileOperations.write_bytes(path, b"#!/bin/sh\necho hi\n")

    assert result.unwrap() == len(b"#!/bin/sh\necho hi\n")
    assert path.read_bytes() == b"#!/bin/sh\necho hi\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o751
    assert not list(tmp_path.glob(".script.sh.*"))


def test_write_through_symlink_keeps_link(tmp_path: Path):
    target = tmp_path / "real.txt"
    target.write_bytes(b"x")
    link = tmp_path / "link.txt"
    link.symlink_to(target)

    FileOperations.write_bytes(link, b"PFXx")

    assert link.is_symlink()
    assert target.read_bytes() == b"PFXx"


def test_failed_replace_cleans_up(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "f"
    path.write_bytes(b"original")

    def fail_replace(src, dst):
        raise OSError("simulated failure")

    monkeypatch.setattr(os, "replace", fail_replace)

    result = FileOperations.write_bytes(path, b"new")
    assert result.is_failure
    assert "simulated failure" in (result.error or "")
    assert path.read_bytes() == b"original"
    assert not list(tmp_path.glob(".f.*"))


def test_result_state_validation():
    with pytest.raises(ValueError, match="must have an error message"):
        IOResult.failure("")


def test_write_refreshes_mtime(tmp_path: Path):
    path = tmp_path / "old.txt"
    path.write_bytes(b"x")
    os.utime(path, (1_000_000, 1_000_000))

    FileOperations.write_bytes(path, b"PFXx")

    assert path.stat().st_mtime > 1_000_000


def test_write_refuses_unwritable_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "locked.txt"
    path.write_bytes(b"x")
    monkeypatch.setattr(os, "access", lambda p, mode, **kwargs: False)

    result = FileOperations.write_bytes(path, b"PFXx")

    assert result.is_failure
    assert "file is not writable" in (result.error or "")
    assert path.read_bytes() == b"x"
