"""
localenv

Loads directory-local configuration files into process environment variables:
- config: applying and clearing env.json / .env files
- parsing: JSON flattening and KEY=VALUE parsing
- core: exceptions and logging

Example:

    import os
    import localenv

    localenv.apply()                 # env.json and .env in the working directory
    api_key = os.getenv("MY_API_KEY")
    localenv.clear()
"""

from .core.exceptions import (
    LocalEnvironmentException,
    EnvironmentFileError,
    EnvironmentReadError,
    EnvironmentDecodeError,
    ConfigurationError,
)

from .core.logging import (
    get_project_logger,
)

from .config import (
    AppliedEnvironment,
    LoaderConfig,
    apply,
    apply_file,
    apply_files,
    clear,
    get_applied,
    load_env,
)

from .parsing import (
    flatten,
    format_scalar,
    parse,
    parse_file,
)

# Version information
__version__ = "0.1.0"

# Export list
__all__ = [
    # Exceptions
    "LocalEnvironmentException",
    "EnvironmentFileError",
    "EnvironmentReadError",
    "EnvironmentDecodeError",
    "ConfigurationError",

    # Logging
    "get_project_logger",

    # Applying
    "AppliedEnvironment",
    "LoaderConfig",
    "apply",
    "apply_file",
    "apply_files",
    "clear",
    "get_applied",
    "load_env",

    # Parsing
    "flatten",
    "format_scalar",
    "parse",
    "parse_file",
]
