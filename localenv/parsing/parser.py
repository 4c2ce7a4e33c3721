"""
Environment file parsing module

Decodes the content of an environment file into a flat mapping of variable
names to string values. Two formats are understood and tried in order:

1. A JSON object, flattened by :func:`localenv.parsing.flattener.flatten`
2. ``KEY=VALUE`` lines, split on the first ``=``

Content that fails as JSON always falls back to the line format, and the line
format never fails: unusable lines are skipped.
"""

import codecs
import json
import math
from pathlib import Path
from typing import Dict, Union

from ..core.exceptions import ConfigurationError, EnvironmentDecodeError, EnvironmentReadError
from .flattener import flatten

DEFAULT_SEPARATOR = "_"
DEFAULT_ENCODING = "utf-8"


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    # Out of range literals such as 1e400 overflow to inf
    if not math.isfinite(value):
        raise ValueError(f"JSON number out of range: {literal}")
    return value


def decode_text(content: Union[bytes, str], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Decode raw file content to text

    Args:
        content: Raw bytes, or text that is passed through unchanged
        encoding: Codec used for bytes

    Returns:
        str: Text with any leading byte order mark removed
    """
    if isinstance(content, str):
        text = content
    else:
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {encoding}", error_code="CONFIG_ERROR") from e

        try:
            text = content.decode(encoding)
        except UnicodeDecodeError as e:
            raise EnvironmentDecodeError(
                f"Content is not valid {encoding} text: {e}",
                error_code="ENV_DECODE_ERROR",
                details={"encoding": encoding, "position": e.start},
            ) from e

    return text[1:] if text.startswith("\ufeff") else text


def parse_json(text: str, separator: str = DEFAULT_SEPARATOR) -> Dict[str, str]:
    """
    Parse text as a JSON object and flatten it

    Raises:
        ValueError: The text is not a JSON object
    """
    document = json.loads(text, parse_float=_parse_finite_float, parse_constant=_reject_constant)
    if not isinstance(document, dict):
        raise ValueError(f"Expected a JSON object, got {type(document).__name__}")
    return flatten(document, separator=separator)


def parse_lines(text: str) -> Dict[str, str]:
    """
    Parse text as ``KEY=VALUE`` lines

    Each line is split on its first ``=``. Key and value are trimmed of
    surrounding whitespace and otherwise kept as written. Lines without ``=``
    or with an empty key are skipped.
    """
    pairs: Dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            pairs[key] = value.strip()
    return pairs


def parse(
    content: Union[bytes, str],
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING
) -> Dict[str, str]:
    """
    Parse environment file content into variable pairs

    Args:
        content: File content
        separator: Separator for nested JSON keys
        encoding: Codec used when content is bytes

    Returns:
        Dict[str, str]: Flat mapping of variable name to value

    Raises:
        EnvironmentDecodeError: Bytes are not valid text in the given encoding
    """
    text = decode_text(content, encoding)

    try:
        return parse_json(text, separator=separator)
    except ValueError:
        return parse_lines(text)


def parse_file(
    path: Union[str, Path],
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING
) -> Dict[str, str]:
    """
    Read and parse an environment file

    Raises:
        FileNotFoundError: The file does not exist
        EnvironmentReadError: The file exists but cannot be read
        EnvironmentDecodeError: The file is not valid text
    """
    file_path = Path(path)

    try:
        raw = file_path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise EnvironmentReadError(
            f"Failed to read environment file {file_path}: {e}",
            error_code="ENV_READ_ERROR",
            details={"path": str(file_path)},
        ) from e

    try:
        return parse(raw, separator=separator, encoding=encoding)
    except EnvironmentDecodeError as e:
        e.details["path"] = str(file_path)
        raise
