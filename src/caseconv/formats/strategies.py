"""
Per-format normalize and join rules.
"""

from typing import Dict, List
from .case_format import CaseFormat
from ..utils.string_utils import capitalize_word


class CaseStrategy:
    """How one format cases its words and what it joins them with."""

    def __init__(self, separator: str, capitalize_tail: bool = False):
        self.separator = separator
        self.capitalize_tail = capitalize_tail

    def normalize_word(self, word: str, index: int) -> str:
        if index > 0 and self.capitalize_tail:
            return capitalize_word(word)
        return word.lower()

    def join(self, words: List[str]) -> str:
        """
        Case-normalize and join words.

        Args:
            words: Tokenizer output

        Returns:
            The formatted string; empty when there are no words
        """
        return self.separator.join(
            self.normalize_word(word, index) for index, word in enumerate(words)
        )

    def __repr__(self) -> str:
        return f"CaseStrategy(separator={self.separator!r}, capitalize_tail={self.capitalize_tail})"


STRATEGIES: Dict[CaseFormat, CaseStrategy] = {
    CaseFormat.CAMEL: CaseStrategy("", capitalize_tail=True),
    CaseFormat.KEBAB: CaseStrategy("-"),
    CaseFormat.DOT: CaseStrategy("."),
}


def get_strategy(case_format: CaseFormat) -> CaseStrategy:
    """Look up the strategy for a format."""
    return STRATEGIES[case_format]
