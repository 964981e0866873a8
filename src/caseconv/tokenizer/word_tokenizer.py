"""
Regex word tokenizer.

Boundaries, in priority order:
- runs of whitespace, hyphens and underscores
- a lowercase letter followed by an uppercase letter ("helloWorld"),
  and the last capital of an uppercase run that opens a Titlecase
  word ("HTTPServer" -> "HTTP", "Server")

Every other non-alphanumeric character is dropped without splitting
the word it sits in. Case transitions are found before dropping.
"""

import re
from typing import List
from .tokenizer_interface import TokenizerInterface
from ..utils.logger import get_logger

logger = get_logger(__name__)

SEPARATOR_RUN = re.compile(r"[\s\-_]+")
LOWER_TO_UPPER = re.compile(r"([a-z])([A-Z])")
UPPER_RUN_TO_TITLE = re.compile(r"([A-Z])([A-Z][a-z])")
DROPPED_CHARS = re.compile(r"[^A-Za-z0-9 ]")


class WordTokenizer(TokenizerInterface):
    """Splits text on separator runs and letter-case transitions."""

    def tokenize(self, text: str) -> List[str]:
        spaced = SEPARATOR_RUN.sub(" ", text)
        spaced = LOWER_TO_UPPER.sub(r"\1 \2", spaced)
        spaced = UPPER_RUN_TO_TITLE.sub(r"\1 \2", spaced)
        words = DROPPED_CHARS.sub("", spaced).split()

        logger.debug(f"Tokenized {text!r} into {words}")
        return words
