# tests/test_controller.py

from __future__ import annotations

import pytest

from taskpad.core.config import TaskpadConfig
from taskpad.core.exceptions import EmptyTaskNameError, InvalidTaskIndexError
from taskpad.models.state import NO_SELECTION, DialogState, ScreenState
from taskpad.models.task import Task
from taskpad.services.controller import ALLOWED_ACTIONS, Action, ScreenController
from taskpad.services.task_store import TaskStore


def pairs(state: ScreenState) -> list[tuple[str, str]]:
    return [task.as_pair() for task in state.tasks]


def add_through_form(controller: ScreenController, name: str, description: str) -> None:
    assert controller.open_create()
    assert controller.update_form(name=name, description=description)
    assert controller.submit()


# --- Initial state ---


def test_starts_hidden_and_empty(controller: ScreenController) -> None:
    state = controller.state
    assert state.dialog is DialogState.HIDDEN
    assert state.selection == NO_SELECTION
    assert state.form is None
    assert state.tasks == ()


def test_every_dialog_state_has_transition_rules() -> None:
    assert set(ALLOWED_ACTIONS) == set(DialogState)


# --- Transitions ---


def test_create_opens_empty_form(controller: ScreenController) -> None:
    assert controller.open_create() is True

    state = controller.state
    assert state.dialog is DialogState.SHOWING_FORM
    assert state.selection == NO_SELECTION
    assert state.form is not None
    assert (state.form.name, state.form.description) == ("", "")
    assert state.is_editing is False
    assert state.submit_label == "Add"


def test_edit_opens_selector(seeded_controller: ScreenController) -> None:
    assert seeded_controller.open_selector() is True
    assert seeded_controller.state.dialog is DialogState.SHOWING_SELECTOR


def test_select_seeds_form_with_task_at_position(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()

    assert seeded_controller.select(1) is True

    state = seeded_controller.state
    assert state.dialog is DialogState.SHOWING_FORM
    assert state.selection == 1
    assert state.form is not None
    assert (state.form.name, state.form.description) == ("Pay rent", "")
    assert state.form.seed == Task(name="Pay rent", description="")
    assert state.selected_task == state.form.seed
    assert state.submit_label == "Edit"


def test_select_invalid_index_raises_and_keeps_state(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()
    before = seeded_controller.state

    with pytest.raises(InvalidTaskIndexError):
        seeded_controller.select(5)

    assert seeded_controller.state == before


def test_submit_in_create_mode_appends_task(controller: ScreenController, states: list[ScreenState]) -> None:
    add_through_form(controller, "Buy milk", "2L")

    assert pairs(controller.state) == [("Buy milk", "2L")]
    assert controller.state.dialog is DialogState.HIDDEN
    assert controller.state.form is None
    assert states[-1] is controller.state


def test_submit_in_edit_mode_overwrites_and_clears_selection(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()
    seeded_controller.select(0)
    seeded_controller.update_form(description="1L")

    assert seeded_controller.submit() is True

    assert pairs(seeded_controller.state) == [("Buy milk", "1L"), ("Pay rent", "")]
    assert seeded_controller.state.selection == NO_SELECTION
    assert seeded_controller.state.dialog is DialogState.HIDDEN


def test_submit_unchanged_seed_keeps_size(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()
    seeded_controller.select(1)
    seeded_controller.submit()

    assert len(seeded_controller.state.tasks) == 2
    assert pairs(seeded_controller.state) == [("Buy milk", "2L"), ("Pay rent", "")]


def test_delete_while_form_open_removes_and_closes(seeded_controller: ScreenController) -> None:
    seeded_controller.open_create()

    assert seeded_controller.delete("Buy milk") is True

    assert pairs(seeded_controller.state) == [("Pay rent", "")]
    assert seeded_controller.state.dialog is DialogState.HIDDEN


def test_delete_absent_name_still_closes_form(seeded_controller: ScreenController) -> None:
    seeded_controller.open_create()

    seeded_controller.delete("Walk dog")

    assert len(seeded_controller.state.tasks) == 2
    assert seeded_controller.state.dialog is DialogState.HIDDEN


def test_delete_in_edit_mode_resets_selection(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()
    seeded_controller.select(0)

    seeded_controller.delete("Buy milk")

    assert seeded_controller.state.selection == NO_SELECTION
    assert seeded_controller.state.dialog is DialogState.HIDDEN


@pytest.mark.parametrize(
    "open_dialog",
    [
        lambda c: c.open_create(),
        lambda c: c.open_selector(),
        lambda c: (c.open_selector(), c.select(0)),
    ],
    ids=["create-form", "selector", "edit-form"],
)
def test_cancel_always_returns_to_hidden(seeded_controller: ScreenController, open_dialog) -> None:
    open_dialog(seeded_controller)

    assert seeded_controller.cancel() is True

    state = seeded_controller.state
    assert state.dialog is DialogState.HIDDEN
    assert state.selection == NO_SELECTION
    assert state.form is None
    assert len(state.tasks) == 2


def test_cancel_discards_form_input(controller: ScreenController) -> None:
    controller.open_create()
    controller.update_form(name="draft")
    controller.cancel()
    controller.open_create()

    assert controller.state.form is not None
    assert controller.state.form.name == ""
    assert controller.state.tasks == ()


# --- Ignored actions ---


def test_actions_other_than_entry_points_ignored_while_hidden(
    seeded_controller: ScreenController,
) -> None:
    before = seeded_controller.state

    assert seeded_controller.select(0) is False
    assert seeded_controller.update_form(name="x") is False
    assert seeded_controller.submit() is False
    assert seeded_controller.delete("Buy milk") is False
    assert seeded_controller.cancel() is False

    assert seeded_controller.state == before


def test_form_actions_ignored_while_selector_is_open(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()
    before = seeded_controller.state

    assert seeded_controller.update_form(name="x", description="y") is False
    assert seeded_controller.submit() is False
    assert seeded_controller.delete("Buy milk") is False

    assert seeded_controller.state == before
    assert seeded_controller.state.form is None
    assert seeded_controller.store.as_dict() == {"Buy milk": "2L", "Pay rent": ""}


def test_entry_points_ignored_while_a_dialog_is_open(seeded_controller: ScreenController) -> None:
    seeded_controller.open_selector()

    assert seeded_controller.open_create() is False
    assert seeded_controller.open_selector() is False
    assert seeded_controller.delete("Buy milk") is False
    assert seeded_controller.state.dialog is DialogState.SHOWING_SELECTOR
    assert len(seeded_controller.state.tasks) == 2


def test_select_ignored_while_form_open(seeded_controller: ScreenController) -> None:
    seeded_controller.open_create()

    assert seeded_controller.select(0) is False
    assert seeded_controller.state.is_editing is False


def test_can_reports_allowed_actions(controller: ScreenController) -> None:
    assert controller.can(Action.OPEN_CREATE)
    assert not controller.can(Action.SUBMIT)
    controller.open_create()
    assert controller.can(Action.SUBMIT)
    assert not controller.can(Action.OPEN_SELECTOR)


# --- Subscription ---


def test_ignored_actions_do_not_notify(controller: ScreenController, states: list[ScreenState]) -> None:
    controller.submit()
    controller.cancel()

    assert states == []


def test_subscribers_receive_each_snapshot(controller: ScreenController, states: list[ScreenState]) -> None:
    add_through_form(controller, "A", "")

    dialogs = [state.dialog for state in states]
    assert dialogs == [DialogState.SHOWING_FORM, DialogState.SHOWING_FORM, DialogState.HIDDEN]


def test_unchanged_form_update_does_not_notify(controller: ScreenController, states: list[ScreenState]) -> None:
    controller.open_create()
    controller.update_form(name="")

    assert len(states) == 1


def test_unsubscribe_stops_notifications(controller: ScreenController) -> None:
    received: list[ScreenState] = []
    unsubscribe = controller.subscribe(received.append)

    controller.open_create()
    unsubscribe()
    controller.cancel()
    unsubscribe()

    assert len(received) == 1


def test_snapshots_are_not_affected_by_later_mutations(controller: ScreenController) -> None:
    add_through_form(controller, "A", "1")
    snapshot = controller.state

    add_through_form(controller, "B", "2")

    assert pairs(snapshot) == [("A", "1")]


# --- Store consistency ---


def test_duplicate_add_overwrites(controller: ScreenController) -> None:
    add_through_form(controller, "X", "d1")
    add_through_form(controller, "X", "d2")

    assert pairs(controller.state) == [("X", "d2")]


def test_refresh_resets_stale_selection() -> None:
    store = TaskStore({"a": "", "b": ""})
    controller = ScreenController(store=store, config=TaskpadConfig(_env_file=None))
    controller.open_selector()
    controller.select(1)

    store.delete("b")
    controller.refresh()

    assert controller.state.selection == NO_SELECTION
    assert controller.state.dialog is DialogState.SHOWING_FORM


@pytest.mark.parametrize(
    "change, expected",
    [
        (lambda store: store.delete("a"), 0),
        (lambda store: store.add("d", "D"), 1),
        (lambda store: store.rename("a", "z", "Z"), 1),
    ],
    ids=["delete-before", "append-after", "rename-before"],
)
def test_refresh_follows_selected_task_when_positions_shift(change, expected: int) -> None:
    store = TaskStore({"a": "A", "b": "B", "c": "C"})
    controller = ScreenController(store=store, config=TaskpadConfig(_env_file=None))
    controller.open_selector()
    controller.select(1)

    change(store)
    controller.refresh()

    state = controller.state
    assert state.selection == expected
    assert state.form is not None
    assert state.selected_task == state.form.seed == Task(name="b", description="B")


def test_edit_after_shift_still_targets_seeded_task() -> None:
    store = TaskStore({"a": "A", "b": "B", "c": "C"})
    controller = ScreenController(store=store, config=TaskpadConfig(_env_file=None))
    controller.open_selector()
    controller.select(1)
    store.delete("a")
    controller.refresh()

    controller.update_form(description="changed")
    controller.submit()

    assert pairs(controller.state) == [("b", "changed"), ("c", "C")]


# --- Form values ---


def test_values_are_taken_verbatim(controller: ScreenController) -> None:
    add_through_form(controller, "  padded  ", " desc ")

    assert pairs(controller.state) == [("  padded  ", " desc ")]


def test_empty_name_accepted_by_default(controller: ScreenController) -> None:
    add_through_form(controller, "", "nameless")

    assert pairs(controller.state) == [("", "nameless")]


def test_empty_name_rejected_when_disabled() -> None:
    controller = ScreenController(config=TaskpadConfig(_env_file=None, allow_empty_name=False))
    controller.open_create()
    controller.update_form(description="nameless")

    with pytest.raises(EmptyTaskNameError):
        controller.submit()

    assert controller.state.dialog is DialogState.SHOWING_FORM
    assert controller.state.form is not None
    assert controller.state.form.description == "nameless"
    assert controller.state.tasks == ()


def test_whitespace_name_is_not_empty_when_empty_names_disabled() -> None:
    controller = ScreenController(config=TaskpadConfig(_env_file=None, allow_empty_name=False))
    add_through_form(controller, " ", "")

    assert pairs(controller.state) == [(" ", "")]


# --- Renaming ---


def _rename_first(controller: ScreenController, new_name: str) -> None:
    controller.open_selector()
    controller.select(0)
    controller.update_form(name=new_name)
    controller.submit()


def test_rename_default_deletes_and_appends(seeded_controller: ScreenController) -> None:
    _rename_first(seeded_controller, "Buy oat milk")

    assert pairs(seeded_controller.state) == [("Pay rent", ""), ("Buy oat milk", "2L")]


def test_rename_in_place_keeps_position(seeded_store: TaskStore) -> None:
    controller = ScreenController(store=seeded_store, config=TaskpadConfig(_env_file=None, rename_strategy="in_place"))

    _rename_first(controller, "Buy oat milk")

    assert pairs(controller.state) == [("Buy oat milk", "2L"), ("Pay rent", "")]


@pytest.mark.parametrize("strategy", ["delete_insert", "in_place"])
def test_rename_onto_existing_name_leaves_single_entry(seeded_store: TaskStore, strategy: str) -> None:
    controller = ScreenController(store=seeded_store, config=TaskpadConfig(_env_file=None, rename_strategy=strategy))

    _rename_first(controller, "Pay rent")

    assert pairs(controller.state) == [("Pay rent", "2L")]


# --- Scenario ---


def test_buy_milk_scenario(controller: ScreenController) -> None:
    add_through_form(controller, "Buy milk", "2L")
    add_through_form(controller, "Pay rent", "")
    assert pairs(controller.state) == [("Buy milk", "2L"), ("Pay rent", "")]

    controller.open_selector()
    controller.select(0)
    assert controller.state.selection == 0
    controller.update_form(description="1L")
    controller.submit()
    assert pairs(controller.state) == [("Buy milk", "1L"), ("Pay rent", "")]

    controller.open_create()
    controller.delete("Buy milk")
    assert pairs(controller.state) == [("Pay rent", "")]
    assert controller.state.selection == NO_SELECTION
