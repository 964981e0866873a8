"""
Case converter: tokenize, normalize each word, join.
"""

import sys
import argparse
from typing import Iterable, List, Optional, Union
from .errors import CaseConversionError
from .formats import CaseFormat, get_strategy
from .tokenizer import TokenizerInterface, WordTokenizer
from .utils.logger import get_logger, set_log_level
from .utils.file_utils import read_file, write_file
from .utils.string_utils import ensure_string, require_non_empty

logger = get_logger(__name__)

FormatLike = Union[CaseFormat, str]


class CaseConverter:
    """Converts text to a target case format."""

    def __init__(self, tokenizer: Optional[TokenizerInterface] = None):
        """
        Initialize the converter.

        Args:
            tokenizer: Tokenizer instance to use. Defaults to WordTokenizer.
        """
        self.tokenizer = tokenizer or WordTokenizer()

    def tokenize(self, text: str) -> List[str]:
        """Split text into words after checking it is a string."""
        return self.tokenizer.tokenize(ensure_string(text))

    def convert(self, text: str, case_format: FormatLike) -> str:
        """
        Convert text to the given format.

        Text with no alphanumeric content converts to "".

        Args:
            text: Text to convert
            case_format: A CaseFormat or a format name

        Returns:
            The converted string

        Raises:
            InvalidInputError: If text is not a string
            UnknownFormatError: If case_format cannot be resolved
        """
        words = self.tokenize(text)
        target = CaseFormat.from_name(case_format)
        result = get_strategy(target).join(words)
        logger.debug(f"{target.value}: {text!r} -> {result!r}")
        return result

    def convert_strict(self, text: str, case_format: FormatLike) -> str:
        """Like convert, but empty or whitespace-only text raises EmptyInputError."""
        return self.convert(require_non_empty(text), case_format)


_default_converter = CaseConverter()


def normalize(text: str, case_format: FormatLike) -> str:
    return _default_converter.convert(text, case_format)


def normalize_strict(text: str, case_format: FormatLike) -> str:
    return _default_converter.convert_strict(text, case_format)


def tokenize(text: str) -> List[str]:
    return _default_converter.tokenize(text)


def to_camel_case(text: str) -> str:
    """Convert text to camelCase."""
    return normalize(text, CaseFormat.CAMEL)


def to_kebab_case(text: str) -> str:
    """Convert text to kebab-case."""
    return normalize(text, CaseFormat.KEBAB)


def to_dot_case(text: str) -> str:
    """Convert text to dot.case."""
    return normalize(text, CaseFormat.DOT)


# ---------------------------
# Command-line caller
# ---------------------------

def _collect_inputs(args: argparse.Namespace) -> Optional[List[str]]:
    """Texts from arguments, the input file, or stdin, in that order of preference."""
    if args.text:
        return list(args.text)
    if args.input_file:
        content = read_file(args.input_file)
        if content is None:
            return None
        return content.splitlines()
    return [line.rstrip("\r\n") for line in sys.stdin]


def _convert_all(texts: Iterable[str], case_format: CaseFormat, strict: bool) -> List[str]:
    convert = normalize_strict if strict else normalize
    return [convert(text, case_format) for text in texts]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caseconv",
        description="Convert text to camelCase, kebab-case or dot.case",
    )
    parser.add_argument("format", help="Target format: camelCase, kebab-case or dot.case")
    parser.add_argument("text", nargs="*", help="Text to convert (default: read lines from stdin)")
    parser.add_argument("-i", "--input-file", help="Convert every line of this file")
    parser.add_argument("-o", "--output", help="Write results to this file instead of stdout")
    parser.add_argument(
        "--strict", action="store_true", help="Reject empty or whitespace-only input"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")
    elif args.log_level and not set_log_level(args.log_level):
        logger.warning(f"Ignoring unknown log level {args.log_level!r}")

    try:
        case_format = CaseFormat.from_name(args.format)
        texts = _collect_inputs(args)
        if texts is None:
            return 1
        results = _convert_all(texts, case_format, args.strict)
    except CaseConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    if args.output:
        content = "".join(f"{line}\n" for line in results)
        if not write_file(args.output, content):
            return 1
        logger.info(f"Wrote {len(results)} result(s) to {args.output}")
        return 0

    for line in results:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
