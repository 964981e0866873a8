"""
Exceptions raised by caseconv.
"""


class CaseConversionError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(CaseConversionError, TypeError):
    """Raised when the text to convert is not a string."""


class EmptyInputError(CaseConversionError, ValueError):
    """Raised by the strict layer for empty or whitespace-only text."""


class UnknownFormatError(CaseConversionError, ValueError):
    """Raised when a case format name cannot be resolved."""
