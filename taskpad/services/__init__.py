# taskpad/services/__init__.py

from .controller import ALLOWED_ACTIONS, Action, ScreenController, StateListener
from .task_store import TaskStore

__all__ = ["TaskStore", "ScreenController", "Action", "ALLOWED_ACTIONS", "StateListener"]
