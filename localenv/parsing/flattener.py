"""
Document flattening module

Turns a decoded JSON object tree into a single-level mapping of environment
variable names to string values. Nested object keys are joined with a
separator (``_`` by default): ``{"a": {"b": 1}}`` becomes ``{"a_b": "1"}``.

Scalar rendering:
- booleans become ``true`` / ``false``
- integer-valued numbers have no fractional part (``2.0`` -> ``2``)
- other numbers use the shortest round-trip digits in positional notation
- strings are kept verbatim
- ``null`` and arrays produce no variable
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class JsonKind(Enum):
    """Kinds of value a decoded JSON document can hold"""

    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"


# Kinds rendered as a single environment variable value
SCALAR_KINDS = frozenset({JsonKind.STRING, JsonKind.NUMBER, JsonKind.BOOLEAN})


def classify(value: Any) -> Optional[JsonKind]:
    """
    Map a Python value produced by ``json.loads`` to its JSON kind

    Returns None for values that cannot come out of a JSON decoder.
    """
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    if value is None:
        return JsonKind.NULL
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return None


def _format_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    # repr() gives the shortest round-trip digits, Decimal drops the exponent
    return format(Decimal(repr(value)), "f")


def format_scalar(value: Any) -> Optional[str]:
    """
    Render a scalar JSON value as an environment variable value

    Args:
        value: Decoded JSON value

    Returns:
        Optional[str]: The rendered value, or None if the value is not a scalar
    """
    kind = classify(value)
    if kind is JsonKind.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonKind.NUMBER:
        return _format_number(value)
    if kind is JsonKind.STRING:
        return value
    return None


def flatten(document: Mapping[str, Any], separator: str = "_") -> Dict[str, str]:
    """
    Flatten a JSON object tree into environment variable pairs

    Keys are visited in document order. When two paths produce the same
    joined key, the one that comes later in the document wins.

    Args:
        document: Decoded JSON object
        separator: Text placed between ancestor keys

    Returns:
        Dict[str, str]: Flat mapping of variable name to value
    """
    flat: Dict[str, str] = {}
    _flatten_into(flat, document, None, separator)
    return flat


def _flatten_into(flat: Dict[str, str], node: Mapping[str, Any], prefix: Optional[str], separator: str) -> None:
    for key, value in node.items():
        name = str(key) if prefix is None else f"{prefix}{separator}{key}"
        kind = classify(value)

        if kind is JsonKind.OBJECT:
            _flatten_into(flat, value, name, separator)
        elif kind in SCALAR_KINDS:
            if name:
                flat[name] = format_scalar(value)
        # NULL, ARRAY and unknown kinds produce no variable
