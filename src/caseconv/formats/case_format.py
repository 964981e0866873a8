"""
Supported output formats and lookup by name.
"""

import re
from enum import Enum
from typing import Dict, Union
from ..errors import UnknownFormatError

# Characters ignored when matching a format name, so "kebab-case",
# "KEBAB_CASE" and "kebab case" all resolve the same way.
_NAME_NOISE = re.compile(r"[\s\-_.]")


class CaseFormat(Enum):
    """Target formats a string can be converted to."""

    CAMEL = "camelCase"
    KEBAB = "kebab-case"
    DOT = "dot.case"

    @classmethod
    def from_name(cls, name: Union["CaseFormat", str]) -> "CaseFormat":
        """
        Resolve a format from an enum member or a human-entered name.

        Args:
            name: A CaseFormat, or a name such as "camelCase", "kebab" or "DOT_CASE"

        Returns:
            The matching CaseFormat

        Raises:
            UnknownFormatError: If the name matches no format
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = _NAME_NOISE.sub("", name).lower()
            if key in FORMAT_ALIASES:
                return FORMAT_ALIASES[key]
        choices = ", ".join(f.value for f in cls)
        raise UnknownFormatError(f"Unknown case format {name!r}; expected one of {choices}")


FORMAT_ALIASES: Dict[str, CaseFormat] = {
    "camel": CaseFormat.CAMEL,
    "camelcase": CaseFormat.CAMEL,
    "kebab": CaseFormat.KEBAB,
    "kebabcase": CaseFormat.KEBAB,
    "dot": CaseFormat.DOT,
    "dotcase": CaseFormat.DOT,
}
