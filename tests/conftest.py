"""Shared test configuration for prefixer tests.

Provides:
- sample_tree: a fresh copy of the reference directory tree per test
- Environment isolation so a developer's own config never leaks into tests
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

# Relative path -> original content. Mixed extensions, nesting and one
# extensionless file so pattern selection can be checked.
SAMPLE_FILES: dict[str, bytes] = {
    "file_1.txt": b"First file content.\nSecond line.\n",
    "file_4.json": b'{"key": "value"}\n',
    "file_with_prefix": b"Copyright 2021\nPrefix read from file\n",
    "inner_dir/DONTREADME.md": b"# Do not read me\n",
    "inner_dir/file_2.txt": b"file two",
    "inner_dir/inner_inner_dir/file_3.txt": b"\nstarts with a blank line\r\nand has CRLF\r\n",
    "inner_dir/inner_inner_dir/ignore_me.json": b"[]",
}

TXT_FILES = [
    "file_1.txt",
    "inner_dir/file_2.txt",
    "inner_dir/inner_inner_dir/file_3.txt",
]


class SampleTree:
    """Reference tree written under a temporary directory."""

    def __init__(self, root: Path):
        self.root = root
        self.original: dict[Path, bytes] = {}
        for rel, content in SAMPLE_FILES.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
            self.original[path] = content

    def path(self, rel: str) -> Path:
        return self.root / rel

    def changed_files(self) -> set[Path]:
        """Files whose current content differs from the original."""
        return {p for p, content in self.original.items() if p.read_bytes() != content}

    def assert_unchanged(self) -> None:
        for p, content in self.original.items():
            assert p.read_bytes() == content, f"{p} was modified"

    def assert_have_prefix(self, rels: list[str], prefix: bytes) -> None:
        """Each file is exactly ``prefix`` + its original content."""
        for rel in rels:
            path = self.path(rel)
            assert path.read_bytes() == prefix + self.original[path], f"{path} missing prefix"


@pytest.fixture
def sample_tree(tmp_path: Path) -> SampleTree:
    """Fresh reference tree for one test."""
    return SampleTree(tmp_path / "testdata")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point HOME at an empty directory and clear PREFIXER_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("PREFIXER_CONFIG", raising=False)
    monkeypatch.delenv("PREFIXER_LOG_LEVEL", raising=False)
    yield
