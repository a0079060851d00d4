#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Test document sources
"""

import pytest

from TextSearch.errors import SourceUnavailableError
from TextSearch.preprocessing.source import DirectorySource, InMemorySource


def test_directory_source_lists_files_sorted(tmp_path):
    (tmp_path / "b.txt").write_text("second", encoding="utf-8")
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    (tmp_path / "notes.md").write_text("third", encoding="utf-8")

    documents = list(DirectorySource(tmp_path).documents())

    assert documents == [("a.txt", "first"), ("b.txt", "second"), ("notes.md", "third")]


def test_directory_source_skips_subdirectories(tmp_path):
    (tmp_path / "a.txt").write_text("top level", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "inner.txt").write_text("not indexed", encoding="utf-8")

    names = [name for name, _ in DirectorySource(tmp_path).documents()]

    assert names == ["a.txt"]


def test_directory_source_extension_filter(tmp_path):
    (tmp_path / "a.txt").write_text("text", encoding="utf-8")
    (tmp_path / "b.TXT").write_text("upper", encoding="utf-8")
    (tmp_path / "c.log").write_text("log", encoding="utf-8")

    names = [name for name, _ in DirectorySource(tmp_path, extensions=[".txt"]).documents()]

    assert names == ["a.txt", "b.TXT"]


def test_directory_source_replaces_undecodable_bytes(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"caf\xe9 latte")

    [(name, text)] = list(DirectorySource(tmp_path).documents())

    assert name == "a.txt"
    assert text == "caf\ufffd latte"


def test_missing_directory(tmp_path):
    with pytest.raises(SourceUnavailableError):
        list(DirectorySource(tmp_path / "does-not-exist").documents())


def test_path_is_a_file(tmp_path):
    file_path = tmp_path / "a.txt"
    file_path.write_text("content", encoding="utf-8")

    with pytest.raises(SourceUnavailableError):
        list(DirectorySource(file_path).documents())


def test_in_memory_source_from_mapping():
    source = InMemorySource({"x": "one", "y": "two"})
    assert list(source.documents()) == [("x", "one"), ("y", "two")]
    assert len(source) == 2
