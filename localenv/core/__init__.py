"""
Core Utilities Module

Provides fundamental tools for the package, including:
- Exception handling
- Logging configuration
"""

from .exceptions import (
    LocalEnvironmentException,
    EnvironmentFileError,
    EnvironmentReadError,
    EnvironmentDecodeError,
    ConfigurationError,
)

from .logging import (
    get_project_logger,
)

__all__ = [
    "LocalEnvironmentException",
    "EnvironmentFileError",
    "EnvironmentReadError",
    "EnvironmentDecodeError",
    "ConfigurationError",
    "get_project_logger",
]
