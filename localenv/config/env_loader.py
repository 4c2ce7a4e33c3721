"""
Environment configuration loading module

Applies variables from local environment files to the process environment
and remembers what was applied so it can be cleared again.

Each apply call returns an AppliedEnvironment handle owned by the caller.
The module-level functions also keep the most recent handle so that a plain
``apply()`` can later be undone with ``clear()``. That module state is not
thread safe: callers must serialise apply and clear calls themselves.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from ..core.exceptions import (
    EnvironmentDecodeError,
    EnvironmentFileError,
    EnvironmentReadError,
    LocalEnvironmentException,
)
from ..core.logging import get_project_logger
from ..parsing.parser import parse_file
from .settings import LoaderConfig

logger = get_project_logger(__name__)

PathLike = Union[str, Path]


class AppliedEnvironment(BaseModel):
    """Variables set by one apply call"""

    variables: Dict[str, str] = Field(default_factory=dict, description="Variables written to os.environ")
    sources: List[str] = Field(default_factory=list, description="Files that contributed, in load order")

    def clear(self) -> None:
        """Remove every applied variable from the environment"""
        for name in self.variables:
            os.environ.pop(name, None)
        if self.variables:
            logger.info(f"Cleared {len(self.variables)} environment variables")
        self.variables = {}
        self.sources = []


# Most recent handle applied through the module-level functions
_applied = AppliedEnvironment()


def get_applied() -> AppliedEnvironment:
    """Get the handle of the most recent module-level apply"""
    return _applied


def _load(paths: List[Path], config: LoaderConfig) -> AppliedEnvironment:
    variables: Dict[str, str] = {}
    sources: List[str] = []

    for path in paths:
        try:
            parsed = parse_file(path, separator=config.separator, encoding=config.encoding)
        except FileNotFoundError:
            logger.debug(f"Environment file {path} does not exist, skipping")
            continue
        except EnvironmentFileError as e:
            logger.error(f"Failed to load environment file {path}: {e}")
            raise

        variables.update(parsed)
        sources.append(str(path))

    return AppliedEnvironment(variables=variables, sources=sources)


def _check_names(applied: AppliedEnvironment) -> None:
    for name, value in applied.variables.items():
        usable = "=" not in name and "\x00" not in name and "\x00" not in value
        if usable:
            try:
                os.fsencode(name)
                os.fsencode(value)
            except UnicodeEncodeError:
                usable = False

        if not usable:
            raise EnvironmentDecodeError(
                f"Cannot set environment variable {name!r}",
                error_code="ENV_DECODE_ERROR",
                details={"name": name, "sources": applied.sources},
            )


def apply_files(paths: Iterable[PathLike], config: Optional[LoaderConfig] = None) -> AppliedEnvironment:
    """
    Apply several environment files

    All files are read before anything is set. Missing files are skipped, and
    later files override variables of earlier ones.

    Args:
        paths: Files to load, in order
        config: Loader settings, read from LOCALENV_* variables if None

    Returns:
        AppliedEnvironment: The variables that were set

    Raises:
        EnvironmentReadError: A file exists but cannot be read
        EnvironmentDecodeError: A file is not valid text, or holds a name
            that cannot be used as an environment variable
    """
    global _applied

    if config is None:
        config = LoaderConfig.from_env()

    applied = _load([Path(p) for p in paths], config)
    if not applied.sources:
        # No file present: nothing to apply, keep the previous handle
        return applied

    _check_names(applied)
    for name, value in applied.variables.items():
        os.environ[name] = value

    logger.info(f"Applied {len(applied.variables)} environment variables from {', '.join(applied.sources)}")
    _applied = applied
    return applied


def apply_file(path: PathLike, config: Optional[LoaderConfig] = None) -> AppliedEnvironment:
    """
    Apply a single environment file

    A missing file is not an error and leaves the environment unchanged.
    """
    return apply_files([path], config=config)


def apply(directory: Optional[PathLike] = None, config: Optional[LoaderConfig] = None) -> AppliedEnvironment:
    """
    Apply the default environment files of a directory

    Args:
        directory: Directory holding the files, defaults to the working directory
        config: Loader settings, read from LOCALENV_* variables if None

    Returns:
        AppliedEnvironment: The variables that were set
    """
    if config is None:
        config = LoaderConfig.from_env()

    if directory is None:
        try:
            base = Path.cwd()
        except OSError as e:
            raise EnvironmentReadError(
                f"Failed to resolve working directory: {e}",
                error_code="ENV_READ_ERROR",
            ) from e
    else:
        base = Path(directory)

    return apply_files([base / name for name in config.default_files], config=config)


def clear() -> None:
    """Remove the variables set by the most recent module-level apply"""
    _applied.clear()


def load_env(directory: Optional[PathLike] = None) -> bool:
    """
    Load the default environment files at program start

    Args:
        directory: Directory holding the files, defaults to the working directory

    Returns:
        bool: Whether an environment file was loaded

    Note:
        Failures are logged instead of raised, use apply() to handle them.
    """
    try:
        applied = apply(directory)
    except LocalEnvironmentException as e:
        logger.error(f"Failed to load environment files: {e}")
        return False

    if not applied.sources:
        logger.info("No environment file found")
        return False
    return True
