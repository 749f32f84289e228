# taskpad/models/__init__.py

from .state import NO_SELECTION, DialogState, FormBuffer, ScreenState
from .task import Task

__all__ = ["Task", "DialogState", "FormBuffer", "ScreenState", "NO_SELECTION"]
