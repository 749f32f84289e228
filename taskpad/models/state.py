# taskpad/models/state.py

# SECTION: MODULE DOCSTRING
"""Immutable view-state models handed to the UI on every render.

``ScreenState`` bundles the ordered task snapshot with the dialog, the
selection index and the form buffer, so a render never mixes values taken
at different moments.
"""

# SECTION: IMPORTS
from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from taskpad.helpers._pydantic import TaskpadBaseModel
from taskpad.models.task import Task

NO_SELECTION = -1


# ENUM: DialogState
class DialogState(str, Enum):
    """Which modal surface is visible. Exactly one value at any time."""

    HIDDEN = "hidden"
    SHOWING_SELECTOR = "showing_selector"
    SHOWING_FORM = "showing_form"


# KLASS: FormBuffer
class FormBuffer(TaskpadBaseModel):
    """Transient copy of the form inputs.

    ``seed`` is the task the form was opened for; ``None`` means create mode.
    """

    name: str = ""
    description: str = ""
    seed: Task | None = None

    @classmethod
    def empty(cls) -> FormBuffer:
        return cls()

    @classmethod
    def seeded(cls, task: Task) -> FormBuffer:
        return cls(name=task.name, description=task.description, seed=task)

    @property
    def is_seeded(self) -> bool:
        return self.seed is not None

    def with_values(self, name: str | None = None, description: str | None = None) -> FormBuffer:
        """Returns a copy with the given fields replaced."""
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        return self.model_copy(update=changes)


# KLASS: ScreenState
class ScreenState(TaskpadBaseModel):
    """Snapshot of everything the screen renders."""

    tasks: tuple[Task, ...] = ()
    dialog: DialogState = DialogState.HIDDEN
    selection: int = Field(NO_SELECTION, ge=NO_SELECTION)
    form: FormBuffer | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> ScreenState:
        if self.selection >= len(self.tasks):
            raise ValueError(f"selection {self.selection} outside {len(self.tasks)} task(s)")
        if (self.form is not None) != (self.dialog is DialogState.SHOWING_FORM):
            raise ValueError("form buffer exists only while the form dialog is shown")
        return self

    @property
    def is_editing(self) -> bool:
        return self.form is not None and self.form.is_seeded

    @property
    def submit_label(self) -> str:
        return "Edit" if self.is_editing else "Add"

    @property
    def selected_task(self) -> Task | None:
        if self.selection == NO_SELECTION:
            return None
        return self.tasks[self.selection]
