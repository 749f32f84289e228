# taskpad/ui/modals/task_form.py

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Static

from taskpad.core.exceptions import EmptyTaskNameError
from taskpad.helpers._logger import get_logger
from taskpad.models.state import ScreenState
from taskpad.ui.modals.base import TaskDialog
from taskpad.ui.widgets.task_list import TaskList

log = get_logger("ui")


class TaskFormModal(TaskDialog):
    """Create-or-edit dialog.

    Shows the task list with delete controls above two inputs. The submit
    button reads "Add" in create mode and "Edit" when seeded from a task.
    """

    def compose(self) -> ComposeResult:
        state = self.controller.state
        form = state.form
        name = form.name if form else ""
        description = form.description if form else ""
        with Vertical(classes="dialog"):
            yield Static("Edit Task" if state.is_editing else "Create Task", classes="dialog-title")
            yield TaskList(
                state.tasks,
                selected_index=state.selection,
                pickable=False,
                deletable=True,
                id="form-list",
            )
            yield Input(value=name, placeholder="Task Name", id="task-name")
            yield Input(value=description, placeholder="Task Description", id="task-description")
            with Horizontal(classes="dialog-actions"):
                yield Button(state.submit_label, id="submit", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#task-name", Input).focus()

    def sync(self, state: ScreenState) -> None:
        task_list = self.query_one("#form-list", TaskList)
        task_list.tasks = state.tasks
        task_list.selected_index = state.selection

    @on(Input.Changed, "#task-name")
    def _on_name_changed(self, event: Input.Changed) -> None:
        self.controller.update_form(name=event.value)

    @on(Input.Changed, "#task-description")
    def _on_description_changed(self, event: Input.Changed) -> None:
        self.controller.update_form(description=event.value)

    @on(Input.Submitted)
    @on(Button.Pressed, "#submit")
    def _on_submit(self) -> None:
        # Inputs are the source of truth at submit time; Changed may still be queued
        self.controller.update_form(
            name=self.query_one("#task-name", Input).value,
            description=self.query_one("#task-description", Input).value,
        )
        try:
            self.controller.submit()
        except EmptyTaskNameError as e:
            log.info(f"Submit rejected: {e}")
            self.notify(str(e), title="Task not saved", severity="error")

    @on(TaskList.DeleteRequested)
    def _on_delete_requested(self, message: TaskList.DeleteRequested) -> None:
        self.controller.delete(message.name)
