"""
Logging configuration module

Provides the named loggers used by localenv. The package runs inside a host
program, so the default level is WARNING and nothing is written to disk unless
LOCALENV_LOG_FILE is set.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _level_from_env() -> int:
    level_str = os.getenv('LOCALENV_LOG_LEVEL', 'WARNING').upper()
    return getattr(logging, level_str, logging.WARNING)


def _handlers_from_env() -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_file = os.getenv('LOCALENV_LOG_FILE')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    return handlers


def get_project_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get project logger instance

    Handlers are attached on the first call for a name only.

    Args:
        name: Module name
        level: Log level, read from LOCALENV_LOG_LEVEL if None

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level if level is not None else _level_from_env())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _handlers_from_env():
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
