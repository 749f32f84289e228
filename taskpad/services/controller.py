# taskpad/services/controller.py

# SECTION: MODULE DOCSTRING
"""Provides the ScreenController, the state container behind the task screen.

The controller owns the TaskStore plus the dialog, selection and form state.
User actions are checked against a per-dialog table of allowed actions; an
accepted action mutates the state, builds a fresh ``ScreenState`` snapshot
and notifies every subscriber. Actions that are not allowed in the current
dialog are ignored.
"""

# SECTION: IMPORTS
from __future__ import annotations

from enum import Enum
from typing import Callable

from taskpad.core.config import TaskpadConfig, app_config
from taskpad.core.exceptions import EmptyTaskNameError
from taskpad.helpers._logger import get_logger
from taskpad.models.state import NO_SELECTION, DialogState, FormBuffer, ScreenState
from taskpad.models.task import Task
from taskpad.services.task_store import TaskStore

log = get_logger("controller")

StateListener = Callable[[ScreenState], None]


# ENUM: Action
class Action(str, Enum):
    """User actions routed through the controller."""

    OPEN_CREATE = "open_create"
    OPEN_SELECTOR = "open_selector"
    SELECT = "select"
    UPDATE_FORM = "update_form"
    SUBMIT = "submit"
    DELETE = "delete"
    CANCEL = "cancel"


ALLOWED_ACTIONS: dict[DialogState, frozenset[Action]] = {
    DialogState.HIDDEN: frozenset({Action.OPEN_CREATE, Action.OPEN_SELECTOR}),
    DialogState.SHOWING_SELECTOR: frozenset({Action.SELECT, Action.CANCEL}),
    DialogState.SHOWING_FORM: frozenset({Action.UPDATE_FORM, Action.SUBMIT, Action.DELETE, Action.CANCEL}),
}


# KLASS: ScreenController
class ScreenController:
    """Routes user actions into task store and dialog state transitions."""

    # FUNC: __init__
    def __init__(self, store: TaskStore | None = None, config: TaskpadConfig | None = None):
        """Initializes the controller.

        Args:
            store: Task store to drive. A new empty store is created when omitted.
            config: Settings for empty-name and rename handling. Defaults to ``app_config``.
        """
        self.store = store if store is not None else TaskStore()
        self.config = config if config is not None else app_config
        self._dialog: DialogState = DialogState.HIDDEN
        self._selection: int = NO_SELECTION
        self._form: FormBuffer | None = None
        self._listeners: list[StateListener] = []
        self._state: ScreenState = self._build_state()
        log.debug("ScreenController initialized.")

    # SECTION: STATE CONTAINER

    @property
    def state(self) -> ScreenState:
        """The latest snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registers ``listener`` for every new snapshot.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def can(self, action: Action) -> bool:
        return action in ALLOWED_ACTIONS[self._dialog]

    def refresh(self) -> None:
        """Re-validates the selection and notifies after an outside change to ``store``."""
        self._commit()

    # SECTION: ENTRY POINTS

    def open_create(self) -> bool:
        """Hidden -> form dialog in create mode."""
        if not self._permits(Action.OPEN_CREATE):
            return False
        self._selection = NO_SELECTION
        self._form = FormBuffer.empty()
        self._dialog = DialogState.SHOWING_FORM
        self._commit()
        return True

    def open_selector(self) -> bool:
        """Hidden -> selector dialog."""
        if not self._permits(Action.OPEN_SELECTOR):
            return False
        self._dialog = DialogState.SHOWING_SELECTOR
        self._commit()
        return True

    # SECTION: SELECTOR DIALOG

    def select(self, index: int) -> bool:
        """Selector -> form dialog in edit mode for the task at ``index``.

        Raises:
            InvalidTaskIndexError: If ``index`` does not point at a task.
        """
        if not self._permits(Action.SELECT):
            return False
        task = self.store.get(index)
        self._selection = index
        self._form = FormBuffer.seeded(task)
        self._dialog = DialogState.SHOWING_FORM
        self._commit()
        return True

    # SECTION: FORM DIALOG

    def update_form(self, name: str | None = None, description: str | None = None) -> bool:
        """Replaces the buffered input values while the form is shown."""
        form = self._open_form(Action.UPDATE_FORM)
        if form is None:
            return False
        updated = form.with_values(name=name, description=description)
        if updated == form:
            return True
        self._form = updated
        self._commit()
        return True

    def submit(self) -> bool:
        """Applies the form buffer to the store and closes the form.

        Raises:
            EmptyTaskNameError: If the name is empty and empty names are disabled.
                The form stays open in that case.
        """
        form = self._open_form(Action.SUBMIT)
        if form is None:
            return False
        if form.name == "" and not self.config.allow_empty_name:
            log.warning("Rejected submit with empty task name")
            raise EmptyTaskNameError()

        if form.seed is None:
            self.store.add(form.name, form.description)
            log.success(f"Added task '{form.name}'")
        else:
            self._apply_edit(form.seed, form)
        self._close()
        return True

    def delete(self, name: str) -> bool:
        """Deletes ``name`` from the store and closes the form. No confirmation."""
        if not self._permits(Action.DELETE):
            return False
        if self.store.delete(name):
            log.success(f"Deleted task '{name}'")
        self._close()
        return True

    def cancel(self) -> bool:
        """Closes whichever dialog is open and clears the selection."""
        if not self._permits(Action.CANCEL):
            return False
        self._close()
        return True

    # SECTION: INTERNALS

    def _apply_edit(self, seed: Task, form: FormBuffer) -> None:
        original = seed.name
        if form.name == original:
            self.store.edit(form.name, form.description)
            log.success(f"Edited task '{form.name}'")
        elif self.config.rename_strategy == "in_place":
            self.store.rename(original, form.name, form.description)
            log.success(f"Renamed task '{original}' to '{form.name}' in place")
        else:
            self.store.delete(original)
            self.store.add(form.name, form.description)
            log.success(f"Replaced task '{original}' with '{form.name}'")

    def _permits(self, action: Action) -> bool:
        if self.can(action):
            return True
        log.debug(f"Ignored action '{action.value}' while {self._dialog.value}")
        return False

    def _open_form(self, action: Action) -> FormBuffer | None:
        """The form buffer if ``action`` is allowed now, otherwise None."""
        if not self._permits(action):
            return None
        return self._form

    def _close(self) -> None:
        self._dialog = DialogState.HIDDEN
        self._selection = NO_SELECTION
        self._form = None
        self._commit()

    def _build_state(self) -> ScreenState:
        # Positions shift on insert/delete; the seed name is what the form edits
        if self._form is not None and self._form.seed is not None:
            position = self.store.index_of(self._form.seed.name)
        elif self._selection < len(self.store):
            position = self._selection
        else:
            position = NO_SELECTION
        if position != self._selection:
            log.debug(f"Selection {self._selection} re-validated to {position}")
            self._selection = position
        return ScreenState(
            tasks=self.store.snapshot(),
            dialog=self._dialog,
            selection=self._selection,
            form=self._form,
        )

    def _commit(self) -> None:
        self._state = self._build_state()
        for listener in list(self._listeners):
            listener(self._state)
