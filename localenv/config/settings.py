"""
Loader settings module

Settings for locating and decoding environment files. Defaults can be
overridden in code or through LOCALENV_* environment variables.
"""

import codecs
import os
from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.exceptions import ConfigurationError

DEFAULT_FILES = ["env.json", ".env"]


class LoaderConfig(BaseModel):
    """Environment file loader settings"""

    default_files: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FILES),
        description="File names resolved by apply(), later files override earlier ones",
    )
    separator: str = Field("_", description="Separator joining nested JSON keys")
    encoding: str = Field("utf-8", description="Codec used to decode environment files")

    @field_validator("default_files")
    @classmethod
    def _check_files(cls, value: List[str]) -> List[str]:
        files = [name.strip() for name in value if name and name.strip()]
        if not files:
            raise ValueError("at least one default file name is required")
        return files

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must not be empty")
        return value

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}")
        return value

    @classmethod
    def from_env(cls) -> "LoaderConfig":
        """
        Build settings from environment variables

        Reads LOCALENV_FILES (comma separated), LOCALENV_SEPARATOR and
        LOCALENV_ENCODING. Unset variables keep their defaults.

        Raises:
            ConfigurationError: A variable holds an invalid value
        """
        overrides = {}

        files = os.getenv("LOCALENV_FILES")
        if files is not None:
            overrides["default_files"] = files.split(",")

        separator = os.getenv("LOCALENV_SEPARATOR")
        if separator is not None:
            overrides["separator"] = separator

        encoding = os.getenv("LOCALENV_ENCODING")
        if encoding is not None:
            overrides["encoding"] = encoding

        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid loader configuration: {e}",
                error_code="CONFIG_ERROR",
                details={"errors": e.errors()},
            ) from e
