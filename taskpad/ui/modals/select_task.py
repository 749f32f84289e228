# taskpad/ui/modals/select_task.py

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from taskpad.models.state import ScreenState
from taskpad.ui.modals.base import TaskDialog
from taskpad.ui.widgets.task_list import TaskList


class TaskSelectionModal(TaskDialog):
    """Lists the tasks; picking one opens the form in edit mode."""

    def compose(self) -> ComposeResult:
        state = self.controller.state
        with Vertical(classes="dialog"):
            yield Static("Edit Task", classes="dialog-title")
            yield TaskList(state.tasks, pickable=True, id="selector-list")
            with Horizontal(classes="dialog-actions"):
                yield Button("Cancel", id="cancel")

    def sync(self, state: ScreenState) -> None:
        self.query_one("#selector-list", TaskList).tasks = state.tasks

    @on(TaskList.TaskPicked)
    def _on_task_picked(self, message: TaskList.TaskPicked) -> None:
        self.controller.select(message.index)
