#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Test tokenization of raw text
"""

from TextSearch.preprocessing.tokenizer import RegexSplitTokenizer


def test_punctuation_is_removed_and_text_lowercased():
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("Hello, World!  Hello?") == ["hello", "world", "hello"]


def test_apostrophes_and_digits_are_kept():
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("Don't stop at 42nd street") == ["don't", "stop", "at", "42nd", "street"]


def test_underscore_separates_words():
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("snake_case-name") == ["snake", "case", "name"]


def test_unicode_letters():
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("Привет, МИР! Straße") == ["привет", "мир", "straße"]


def test_empty_tokens_dropped_by_default():
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("") == []
    assert tokenizer.tokenize("   ") == []
    assert tokenizer.tokenize("...cat dog!!!") == ["cat", "dog"]


def test_empty_tokens_kept_when_configured():
    """Leading and trailing delimiter runs leave empty strings behind"""
    tokenizer = RegexSplitTokenizer(keep_empty_tokens=True)
    assert tokenizer.tokenize("") == [""]
    assert tokenizer.tokenize("...cat dog!!!") == ["", "cat", "dog", ""]
    assert tokenizer.tokenize("  cat  ") == ["cat"]


def test_only_letters_and_decimal_digits_form_words():
    """Superscripts, fractions and roman numeral signs are delimiters"""
    tokenizer = RegexSplitTokenizer()
    assert tokenizer.tokenize("x² ½ Ⅷ") == ["x"]
    assert tokenizer.tokenize("x²y") == ["x", "y"]
    assert tokenizer.tokenize("١٢٣ arabic digits") == ["١٢٣", "arabic", "digits"]
