"""Utility modules for caseconv."""

from .string_utils import type_name, ensure_string, require_non_empty, capitalize_word
from .file_utils import read_file, write_file, ensure_directory
from .logger import get_logger, set_log_level

__all__ = [
    "type_name",
    "ensure_string",
    "require_non_empty",
    "capitalize_word",
    "read_file",
    "write_file",
    "ensure_directory",
    "get_logger",
    "set_log_level",
]
