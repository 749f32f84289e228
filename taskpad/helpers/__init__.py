# taskpad/helpers/__init__.py

"""Taskpad Helper Utilities Package.

- Logging setup (_logger.py)
- Pydantic base model (_pydantic.py)
"""

from ._logger import (  # Expose the configured log instance and getter
    SUCCESS_LEVEL_NUM,
    get_logger,
    log,
    setup_logging,
)
from ._pydantic import TaskpadBaseModel

__all__ = [
    # Logging
    "log",
    "get_logger",
    "setup_logging",
    "SUCCESS_LEVEL_NUM",
    # Pydantic
    "TaskpadBaseModel",
]
