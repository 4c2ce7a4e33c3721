"""
Parsing Module

Converts environment file content into flat variable mappings:
- JSON object documents, flattened into underscore-joined keys
- KEY=VALUE line files
"""

from .flattener import JsonKind, classify, flatten, format_scalar
from .parser import parse, parse_file

__all__ = [
    "JsonKind",
    "classify",
    "flatten",
    "format_scalar",
    "parse",
    "parse_file",
]
