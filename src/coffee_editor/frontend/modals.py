"""Modal dialogs for the coffee editor."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ErrorAlertScreen(ModalScreen[None]):
    """Alert shown after a failed save; must be acknowledged before retrying."""

    def __init__(self, reason: str) -> None:
        super().__init__()
        self._reason = reason

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Could not save coffee", classes="modal-title"),
            Static(self._reason, id="alert-reason", classes="modal-body"),
            Horizontal(
                Button("OK", id="alert-ok", variant="primary"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--alert",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "alert-ok":
            self.dismiss(None)


class DiscardChangesScreen(ModalScreen[str]):
    """Prompt when cancelling with unsaved changes."""

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Discard changes?", classes="modal-title"),
            Static("Your edits to this coffee will be lost.", classes="modal-body"),
            Horizontal(
                Button("Discard", id="discard-confirm", variant="error"),
                Button("Keep editing", id="discard-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "discard-confirm":
            self.dismiss("discard")
        else:
            self.dismiss("keep")
