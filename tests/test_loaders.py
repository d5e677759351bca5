"""Tests for the text sources."""

import pathlib

import pytest

from todoscan.core.config import ScanConfig
from todoscan.errors import TextRetrievalError
from todoscan.loaders import FileSystemTextSource, InMemoryTextSource, TextSource


def test_in_memory_source_keeps_insertion_order():
    source = InMemoryTextSource([("b.rs", "x"), ("a.rs", "y")])

    assert list(source.iter_texts()) == [("b.rs", "x"), ("a.rs", "y")]
    assert len(source) == 2
    assert isinstance(source, TextSource)


def test_filesystem_source_walks_sorted_and_filters(project_tree):
    source = FileSystemTextSource(project_tree)

    file_ids = [file_id for file_id, _ in source.iter_texts()]

    assert file_ids == ["src/lib.rs", "src/main.rs"]


def test_filesystem_source_honours_config(project_tree):
    config = ScanConfig(include_extensions=frozenset({".txt", ".js"}), exclude_dirs=frozenset())
    source = FileSystemTextSource(project_tree, config)

    file_ids = [file_id for file_id, _ in source.iter_texts()]

    assert file_ids == ["node_modules/dep/index.js", "src/notes.txt"]


def test_single_file_root(project_tree):
    source = FileSystemTextSource(project_tree / "src" / "main.rs")

    [(file_id, text)] = list(source.iter_texts())

    assert file_id == "main.rs"
    assert "parse arguments" in text


def test_missing_root_raises(tmp_path):
    source = FileSystemTextSource(tmp_path / "nowhere")

    with pytest.raises(TextRetrievalError, match="not found"):
        list(source.iter_texts())


def test_large_files_are_skipped(project_tree):
    (project_tree / "src" / "huge.rs").write_text("// TODO: big\n" * 100, encoding="utf-8")
    source = FileSystemTextSource(project_tree, ScanConfig(max_file_bytes=300))

    file_ids = [file_id for file_id, _ in source.iter_texts()]

    assert "src/huge.rs" not in file_ids
    assert "src/main.rs" in file_ids


def test_invalid_bytes_are_replaced(tmp_path):
    (tmp_path / "latin.c").write_bytes(b"// TODO: caf\xe9\n")

    [(_, text)] = list(FileSystemTextSource(tmp_path).iter_texts())

    assert text == "// TODO: caf\ufffd\n"


def _failing_read_text(self, *args, **kwargs):
    raise PermissionError(f"denied: {self.name}")


def test_unreadable_files_are_skipped(project_tree, monkeypatch):
    monkeypatch.setattr(pathlib.Path, "read_text", _failing_read_text)

    assert list(FileSystemTextSource(project_tree).iter_texts()) == []


def test_unreadable_files_raise_when_not_skipped(project_tree, monkeypatch):
    monkeypatch.setattr(pathlib.Path, "read_text", _failing_read_text)
    source = FileSystemTextSource(project_tree, ScanConfig(skip_unreadable=False))

    with pytest.raises(TextRetrievalError) as excinfo:
        list(source.iter_texts())

    assert excinfo.value.file_id.endswith("lib.rs")


def test_unknown_encoding_raises_retrieval_error(project_tree):
    source = FileSystemTextSource(project_tree, ScanConfig(encoding="no-such-codec"))

    with pytest.raises(TextRetrievalError, match="no-such-codec"):
        list(source.iter_texts())
