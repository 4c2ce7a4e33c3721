"""
Unified exception handling module

This module defines the exception classes raised by localenv so that callers
can catch every failure of the loader through a single base class.
"""

from typing import Optional, Dict, Any


class LocalEnvironmentException(Exception):
    """Base exception class for the project"""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class EnvironmentFileError(LocalEnvironmentException):
    """Environment file related exceptions"""
    pass


class EnvironmentReadError(EnvironmentFileError):
    """The file exists but could not be read"""
    pass


class EnvironmentDecodeError(EnvironmentFileError):
    """The file content is not text in the configured encoding"""
    pass


class ConfigurationError(LocalEnvironmentException):
    """Configuration related exceptions"""
    pass
