# taskpad/ui/app.py
from __future__ import annotations

from typing import Callable

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from taskpad.core.config import TaskpadConfig
from taskpad.helpers._logger import get_logger
from taskpad.models.state import DialogState, ScreenState
from taskpad.services.controller import ScreenController
from taskpad.ui.modals import TaskDialog, TaskFormModal, TaskSelectionModal
from taskpad.ui.widgets.task_list import TaskList

log = get_logger("ui")


class TaskpadApp(App):
    """Single-screen task manager.

    The app is a subscriber of the ScreenController: every snapshot refreshes
    the task overview, and a change of dialog state pushes, switches or pops
    the matching modal screen.
    """

    CSS_PATH = "style.tcss"
    TITLE = "Taskpad"
    BINDINGS = [
        Binding(key="c", action="create_task", description="Create Task"),
        Binding(key="e", action="edit_task", description="Edit Task"),
        Binding(key="q", action="quit", description="Quit"),
    ]

    def __init__(self, controller: ScreenController | None = None, config: TaskpadConfig | None = None):
        super().__init__()
        self.controller = controller if controller is not None else ScreenController(config=config)
        self._shown_dialog: DialogState = DialogState.HIDDEN
        self._unsubscribe: Callable[[], None] | None = None
        self._overview: TaskList | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main-content"):
            with Horizontal(id="entry-actions"):
                yield Button("Create Task", id="create-task", variant="primary")
                yield Button("Edit Task", id="edit-task", variant="default")
            yield Static("Tasks", id="overview-title")
            self._overview = TaskList(self.controller.state.tasks, pickable=False, id="task-overview")
            yield self._overview
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.controller.subscribe(self.on_state_changed)
        log.info("Taskpad started")

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # --- Rendering ---

    def on_state_changed(self, state: ScreenState) -> None:
        """Re-renders from a new controller snapshot."""
        if self._overview is not None:
            self._overview.tasks = state.tasks

        if state.dialog is self._shown_dialog:
            if isinstance(self.screen, TaskDialog):
                self.screen.sync(state)
            return

        previous, self._shown_dialog = self._shown_dialog, state.dialog
        log.debug(f"Dialog {previous.value} -> {state.dialog.value}")
        if state.dialog is DialogState.HIDDEN:
            self.pop_screen()
        elif previous is DialogState.HIDDEN:
            self.push_screen(self._dialog_for(state.dialog))
        else:
            self.switch_screen(self._dialog_for(state.dialog))

    def _dialog_for(self, dialog: DialogState) -> TaskDialog:
        if dialog is DialogState.SHOWING_SELECTOR:
            return TaskSelectionModal(self.controller)
        return TaskFormModal(self.controller)

    # --- Entry points ---

    def action_create_task(self) -> None:
        self.controller.open_create()

    def action_edit_task(self) -> None:
        self.controller.open_selector()

    @on(Button.Pressed, "#create-task")
    def _on_create_pressed(self) -> None:
        self.action_create_task()

    @on(Button.Pressed, "#edit-task")
    def _on_edit_pressed(self) -> None:
        self.action_edit_task()


if __name__ == "__main__":
    app = TaskpadApp()
    app.run()
