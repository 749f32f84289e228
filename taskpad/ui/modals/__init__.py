# taskpad/ui/modals/__init__.py

from .base import TaskDialog
from .select_task import TaskSelectionModal
from .task_form import TaskFormModal

__all__ = ["TaskDialog", "TaskSelectionModal", "TaskFormModal"]
