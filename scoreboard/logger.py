import logging
import sys
from typing import Optional

from .config import board

ROOT_LOGGER = 'scoreboard'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _configure(logger: logging.Logger) -> None:
    if logger.handlers:
        return
    level = logging.getLevelName(board.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it when a name is given."""
    root = logging.getLogger(ROOT_LOGGER)
    _configure(root)
    if not name or name == ROOT_LOGGER:
        return root
    if name.startswith(ROOT_LOGGER + '.'):
        return logging.getLogger(name)
    return root.getChild(name)
