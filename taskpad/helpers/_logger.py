# taskpad/helpers/_logger.py

# SECTION: MODULE DOCSTRING
"""Logging setup for Taskpad.

All modules log through children of the ``Taskpad`` logger (``Taskpad.store``,
``Taskpad.controller``...), so one call to ``setup_logging`` decides where every
record goes: the Textual devtools console through ``TextualHandler`` and, when a
log directory is given, a rotating file. A ``SUCCESS`` level sits between INFO
and WARNING for completed task mutations.
"""

# SECTION: IMPORTS
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textual.logging import TextualHandler

# --- Constants ---
LOGGER_NAME = "Taskpad"
LOG_FILENAME = "taskpad.log"
LOG_FORMAT_FILE = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def _success(logger: logging.Logger, message: str, *args, **kwargs) -> None:
    if logger.isEnabledFor(SUCCESS_LEVEL_NUM):
        logger._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)


logging.Logger.success = _success


# FUNC: setup_logging
def setup_logging(
    log_level: int | str = logging.INFO,
    logger_name: str = LOGGER_NAME,
    log_dir: Path | None = None,
) -> logging.Logger:
    """(Re)configures the handlers of the application logger.

    Args:
        log_level: Minimum level for the logger itself.
        logger_name: Name of the logger to configure.
        log_dir: Directory for the rotating log file. No file is written when None.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(TextualHandler())
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_dir / LOG_FILENAME, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
        logger.addHandler(file_handler)

    # Records stop here instead of reaching whatever the root logger prints
    logger.propagate = False
    return logger


log = setup_logging()


# FUNC: get_logger
def get_logger(component: str | None = None) -> logging.Logger:
    """Returns the application logger, or its child for ``component``.

    Children have no handlers of their own and inherit the level and handlers
    set by ``setup_logging``.
    """
    if component is None:
        return log
    return log.getChild(component)
