# taskpad/ui/modals/base.py

from __future__ import annotations

from textual import events, on
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button

from taskpad.models.state import ScreenState
from taskpad.services.controller import ScreenController


class TaskDialog(ModalScreen[None]):
    """Base for the task dialogs.

    Dialogs never dismiss themselves: they forward user input to the
    controller and the app swaps screens when the dialog state changes.
    Escape and a click outside the dialog body both count as Cancel.
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, controller: ScreenController) -> None:
        super().__init__()
        self.controller = controller

    def sync(self, state: ScreenState) -> None:
        """Refreshes the dialog from a new snapshot with the same dialog state."""

    def action_cancel(self) -> None:
        self.controller.cancel()

    @on(Button.Pressed, "#cancel")
    def _on_cancel_pressed(self) -> None:
        self.action_cancel()

    def on_click(self, event: events.Click) -> None:
        widget, _ = self.get_widget_at(event.screen_x, event.screen_y)
        if widget is self:
            self.action_cancel()
