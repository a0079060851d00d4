"""
Tokenizers turning raw text into normalized word tokens.
"""
import re
from abc import ABC, abstractmethod
from typing import List

SPACE_RUN_PATTERN = re.compile(r" +")


def is_word_char(ch: str) -> bool:
    """Letters, decimal digits and the apostrophe belong to words."""
    return ch.isalpha() or ch.isdecimal() or ch == "'"


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        raise NotImplementedError()


class RegexSplitTokenizer(Tokenizer):
    """
    Replace non-word runs with a space, lowercase the text and split it on spaces.
    """

    def __init__(self, keep_empty_tokens: bool = False):
        """
        Initialize the tokenizer.

        Args:
            keep_empty_tokens: Keep the empty strings produced by leading/trailing
                delimiters or empty input instead of dropping them
        """
        self.keep_empty_tokens = keep_empty_tokens

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into lowercase word tokens.

        Args:
            text: Raw text

        Returns:
            List of tokens in text order, duplicates included
        """
        spaced = "".join(ch if is_word_char(ch) else " " for ch in text.strip())
        normalized = SPACE_RUN_PATTERN.sub(" ", spaced).lower()
        tokens = normalized.split(" ")

        if self.keep_empty_tokens:
            return tokens
        return [token for token in tokens if token]

    def __repr__(self):
        return f"RegexSplitTokenizer(keep_empty_tokens={self.keep_empty_tokens})"
