"""Tokenizer module for splitting text into words."""

from .tokenizer_interface import TokenizerInterface
from .word_tokenizer import WordTokenizer

__all__ = ["TokenizerInterface", "WordTokenizer"]
