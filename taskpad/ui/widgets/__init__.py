# taskpad/ui/widgets/__init__.py

from .task_list import TaskList

__all__ = ["TaskList"]
