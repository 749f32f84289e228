# taskpad/core/__init__.py

from .config import RenameStrategy, TaskpadConfig, app_config
from .exceptions import EmptyTaskNameError, InvalidTaskIndexError, TaskpadError

__all__ = [
    "app_config",
    "TaskpadConfig",
    "RenameStrategy",
    "TaskpadError",
    "InvalidTaskIndexError",
    "EmptyTaskNameError",
]
