"""Output formats and their normalize/join strategies."""

from .case_format import CaseFormat, FORMAT_ALIASES
from .strategies import CaseStrategy, STRATEGIES, get_strategy

__all__ = ["CaseFormat", "FORMAT_ALIASES", "CaseStrategy", "STRATEGIES", "get_strategy"]
