"""
Configuration Management Module

Provides environment file loading, including:
- Applying env.json / .env files to the process environment
- Clearing previously applied variables
- Loader settings
"""

from .env_loader import (
    AppliedEnvironment,
    apply,
    apply_file,
    apply_files,
    clear,
    get_applied,
    load_env,
)
from .settings import LoaderConfig

__all__ = [
    "AppliedEnvironment",
    "LoaderConfig",
    "apply",
    "apply_file",
    "apply_files",
    "clear",
    "get_applied",
    "load_env",
]
