"""
String helpers shared by the tokenizer, the strategies and the validators.
"""

from typing import Any
from ..errors import InvalidInputError, EmptyInputError


def type_name(value: Any) -> str:
    """Name of the value's type as shown in error messages."""
    return type(value).__name__


def ensure_string(value: Any) -> str:
    """
    Check that a value is a string.

    Args:
        value: Anything a caller passed in as text

    Returns:
        The value unchanged

    Raises:
        InvalidInputError: If the value is not a str
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected string, received {type_name(value)}")
    return value


def require_non_empty(value: Any) -> str:
    """
    Reject non-strings and strings that are empty or whitespace only.

    Strings made only of separators such as "___" are accepted; they
    convert to an empty result.
    """
    text = ensure_string(value)
    if not text.strip():
        raise EmptyInputError("Input must be a non-empty string")
    return text


def capitalize_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return word[:1].upper() + word[1:].lower()
