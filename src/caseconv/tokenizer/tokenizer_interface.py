"""
Abstract tokenizer interface.
"""

from abc import ABC, abstractmethod
from typing import List


class TokenizerInterface(ABC):
    """Abstract interface for word tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """
        Split text into words.

        Args:
            text: The text to split; callers have already checked it is a str

        Returns:
            Words in input order, possibly empty
        """
        pass
