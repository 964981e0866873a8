"""
Convert strings to camelCase, kebab-case and dot.case.

    >>> from caseconv import normalize, CaseFormat
    >>> normalize("hello world", CaseFormat.CAMEL)
    'helloWorld'
    >>> normalize("HTTPServer", "kebab-case")
    'http-server'
"""

from .errors import CaseConversionError, InvalidInputError, EmptyInputError, UnknownFormatError
from .formats import CaseFormat, CaseStrategy
from .tokenizer import TokenizerInterface, WordTokenizer
from .converter import (
    CaseConverter,
    normalize,
    normalize_strict,
    tokenize,
    to_camel_case,
    to_kebab_case,
    to_dot_case,
)
from .utils.string_utils import require_non_empty

__all__ = [
    "CaseConversionError",
    "InvalidInputError",
    "EmptyInputError",
    "UnknownFormatError",
    "CaseFormat",
    "CaseStrategy",
    "TokenizerInterface",
    "WordTokenizer",
    "CaseConverter",
    "normalize",
    "normalize_strict",
    "tokenize",
    "require_non_empty",
    "to_camel_case",
    "to_kebab_case",
    "to_dot_case",
]
