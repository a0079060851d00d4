#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Test vocabulary construction and term frequency tables
"""

import pytest

from TextSearch.build_vocabulary import Vocabulary, VocabularyBuilder, compute_term_frequencies
from TextSearch.errors import SourceUnavailableError
from TextSearch.preprocessing.source import DirectorySource, InMemorySource
from TextSearch.preprocessing.tokenizer import RegexSplitTokenizer


def test_vocabulary_is_sorted_and_deduplicated():
    vocabulary = Vocabulary(["dog", "cat", "fish", "cat"])
    assert vocabulary.terms == ("cat", "dog", "fish")
    assert len(vocabulary) == 3
    assert vocabulary.position("dog") == 1
    assert vocabulary.position("zebra") is None
    assert "fish" in vocabulary


def test_term_frequencies_are_relative():
    table = compute_term_frequencies(["cat", "dog", "cat"])
    assert table == pytest.approx({"cat": 2 / 3, "dog": 1 / 3})


def test_term_frequencies_sum_to_one():
    tokens = "the quick brown fox jumps over the lazy dog the end".split()
    table = compute_term_frequencies(tokens)
    assert sum(table.values()) == pytest.approx(1.0)


def test_term_frequencies_of_empty_document():
    assert compute_term_frequencies([]) == {}


def test_build_from_documents():
    source = InMemorySource([("a.txt", "cat dog cat"), ("b.txt", "dog dog fish")])
    vocabulary, tables = VocabularyBuilder().build(source)

    assert list(vocabulary) == ["cat", "dog", "fish"]
    assert list(tables) == ["a.txt", "b.txt"]
    assert tables["a.txt"] == pytest.approx({"cat": 2 / 3, "dog": 1 / 3})
    assert tables["b.txt"] == pytest.approx({"dog": 2 / 3, "fish": 1 / 3})


def test_every_document_contributes_to_vocabulary():
    source = InMemorySource({"one": "alpha", "two": "beta", "three": ""})
    vocabulary, tables = VocabularyBuilder().build(source)

    assert list(vocabulary) == ["alpha", "beta"]
    assert tables["three"] == {}


def test_build_is_idempotent(tmp_path):
    (tmp_path / "a.txt").write_text("Red green, blue. Red!", encoding="utf-8")
    (tmp_path / "b.txt").write_text("green yellow", encoding="utf-8")
    builder = VocabularyBuilder()

    first = builder.build(DirectorySource(tmp_path))
    second = builder.build(DirectorySource(tmp_path))

    assert first[0] == second[0]
    assert first[1] == second[1]


def test_empty_tokens_counted_when_kept():
    builder = VocabularyBuilder(RegexSplitTokenizer(keep_empty_tokens=True))
    vocabulary, tables = builder.build(InMemorySource({"a": "!cat!"}))

    assert list(vocabulary) == ["", "cat"]
    assert tables["a"] == pytest.approx({"": 2 / 3, "cat": 1 / 3})


def test_duplicate_names_keep_last_document():
    source = InMemorySource([("a", "cat"), ("b", "dog"), ("a", "fish")])
    vocabulary, tables = VocabularyBuilder().build(source)

    assert list(tables) == ["b", "a"]
    assert tables["a"] == {"fish": 1.0}
    assert "cat" in vocabulary


def test_missing_directory_raises(tmp_path):
    with pytest.raises(SourceUnavailableError):
        VocabularyBuilder().build(DirectorySource(tmp_path / "missing"))
