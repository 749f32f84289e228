# taskpad/ui/widgets/task_list.py

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Static

from taskpad.models.state import NO_SELECTION
from taskpad.models.task import Task


class TaskList(Vertical):
    """Rows of tasks in collection order.

    Each row shows the task name, as a button when ``pickable`` and as plain
    text otherwise, and a delete button when ``deletable``. The widget is
    rebuilt from a fresh snapshot whenever ``tasks`` or ``selected_index`` is
    reassigned.
    """

    DEFAULT_CSS = """
    TaskList {
        height: auto;
        max-height: 16;
        overflow-y: auto;
    }

    TaskList .task-row {
        height: 3;
    }

    TaskList .task-name {
        width: 1fr;
        content-align: left middle;
    }

    TaskList Static.task-name {
        height: 3;
        padding: 0 1;
    }

    TaskList .task-row.-selected .task-name {
        background: $accent;
    }

    TaskList .task-delete {
        min-width: 10;
    }

    TaskList .empty {
        color: $text-muted;
        padding: 1;
    }
    """

    tasks: reactive[tuple[Task, ...]] = reactive(tuple, recompose=True)
    selected_index: reactive[int] = reactive(NO_SELECTION, recompose=True)

    class TaskPicked(Message):
        """Sent when the name button of a row is pressed."""

        def __init__(self, index: int, task: Task) -> None:
            self.index = index
            self.task = task
            super().__init__()

    class DeleteRequested(Message):
        """Sent when the delete button of a row is pressed."""

        def __init__(self, name: str) -> None:
            self.name = name
            super().__init__()

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        selected_index: int = NO_SELECTION,
        pickable: bool = True,
        deletable: bool = False,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.pickable = pickable
        self.deletable = deletable
        self.set_reactive(TaskList.tasks, tuple(tasks))
        self.set_reactive(TaskList.selected_index, selected_index)

    def compose(self) -> ComposeResult:
        if not self.tasks:
            yield Static("No tasks yet.", classes="empty")
            return
        for position, task in enumerate(self.tasks):
            row_classes = "task-row -selected" if position == self.selected_index else "task-row"
            with Horizontal(classes=row_classes):
                if self.pickable:
                    yield Button(self._row_label(task), id=f"task-{position}", classes="task-name")
                else:
                    yield Static(self._row_label(task), id=f"task-{position}", classes="task-name")
                if self.deletable:
                    yield Button("Delete", id=f"delete-{position}", classes="task-delete", variant="error")

    @staticmethod
    def _row_label(task: Task) -> Text:
        label = Text(task.name or "<unnamed>", style="bold")
        if task.description:
            label.append(f"  {task.description}", style="dim")
        return label

    @staticmethod
    def _position(button: Button) -> int:
        # ids are "task-<n>" / "delete-<n>"
        return int((button.id or "").rsplit("-", 1)[-1])

    @on(Button.Pressed, ".task-name")
    def _on_name_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        index = self._position(event.button)
        self.post_message(self.TaskPicked(index, self.tasks[index]))

    @on(Button.Pressed, ".task-delete")
    def _on_delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        index = self._position(event.button)
        self.post_message(self.DeleteRequested(self.tasks[index].name))
