"""Main Textual app for editing a single coffee."""

from __future__ import annotations

from typing import Any, Callable, Optional

from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Static, TextArea

from coffee_editor.core.form_state import EditSession
from coffee_editor.core.models import FLAVOR_FIELDS, NEW_COFFEE_PLACEHOLDER, Coffee, SaveSuccess
from coffee_editor.core.orchestrator import SAVE_IN_PROGRESS, SaveOrchestrator

from .constants import COFFEE_BROWN
from .modals import DiscardChangesScreen, ErrorAlertScreen
from .widgets import FlavorRow


class CoffeeEditorApp(App[Optional[Coffee]]):
    """Editor form bound to an edit session and a save orchestrator.

    Exits with the saved record, or None when the edit is cancelled.
    """

    BINDINGS = [
        ("ctrl+s", "save_coffee", "Save"),
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    Screen {
        background: #1c1410;
        color: #f1e7dc;
    }

    #header {
        height: 4;
        padding: 0 2;
        border-bottom: solid #4a3a2e;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #c9b8a6;
    }

    .status-modified {
        color: #e0b040;
    }

    .status-error {
        color: #e06050;
    }

    #form {
        padding: 1 2;
    }

    .form-label {
        margin-top: 1;
        text-style: bold;
    }

    #tasting-notes {
        height: 8;
    }

    .flavor-row {
        height: 3;
    }

    .flavor-title {
        width: 12;
        padding-top: 1;
    }

    .flavor-row ProgressBar {
        width: 24;
        padding-top: 1;
    }

    .stepper {
        min-width: 5;
        width: 5;
    }

    .flavor-value {
        width: 4;
        padding-top: 1;
        text-align: right;
    }

    #actions {
        height: 3;
        padding: 0 2;
        align: right middle;
    }

    ErrorAlertScreen, DiscardChangesScreen {
        align: center middle;
        background: #000000 60%;
    }

    .modal-dialog {
        width: 52;
        height: auto;
        padding: 1 2;
        border: thick #4a3a2e;
        background: #2a1f18;
    }

    .modal-title {
        text-style: bold;
    }

    .modal-body {
        margin: 1 0;
    }

    .modal-actions {
        height: 3;
        align: right middle;
    }
    """

    def __init__(self, session: EditSession, orchestrator: SaveOrchestrator, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.session = session
        self.orchestrator = orchestrator
        self._unsubscribers: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            yield Static(self._title_text(), id="title")
            yield Static("", id="header-status", classes="subtle")

        with VerticalScroll(id="form"):
            yield Static("Coffee Name", classes="form-label")
            yield Input(
                value=self.session.name,
                placeholder=NEW_COFFEE_PLACEHOLDER,
                id="coffee-name",
            )
            yield Static("Tasting notes", classes="form-label")
            yield TextArea(self.session.tasting_notes, id="tasting-notes")
            yield Static("Flavor Profile", classes="form-label")
            with Vertical(id="flavor-profile"):
                for field in FLAVOR_FIELDS:
                    yield FlavorRow(field, getattr(self.session, field))

        with Horizontal(id="actions"):
            yield Button("Cancel", id="cancel-btn")
            yield Button("Save", id="save-btn", variant="success")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribers = [
            self.session.subscribe(self._on_field_changed),
            self.orchestrator.subscribe(self._on_save_state_changed),
        ]
        self.title = self.session.record.display_name
        self._refresh_header()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.action_save_coffee()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    @on(Input.Changed, "#coffee-name")
    def _on_name_changed(self, event: Input.Changed) -> None:
        self.session.name = event.value

    @on(TextArea.Changed, "#tasting-notes")
    def _on_notes_changed(self, event: TextArea.Changed) -> None:
        self.session.tasting_notes = event.text_area.text

    def step_flavor(self, field: str, delta: int) -> None:
        """Apply a stepper press to the session."""

        if delta > 0:
            self.session.increment(field)
        else:
            self.session.decrement(field)

    def action_save_coffee(self) -> None:
        self.save_coffee()

    def action_cancel(self) -> None:
        if self.session.dirty:
            self.push_screen(DiscardChangesScreen(), self._handle_discard_choice)
        else:
            self._close(None)

    async def action_quit(self) -> None:
        self._close(None)

    @work(exclusive=False, group="save")
    async def save_coffee(self) -> None:
        """Run one save attempt without blocking field edits."""

        outcome = await self.orchestrator.save_session(self.session)
        if isinstance(outcome, SaveSuccess):
            self._close(outcome.coffee)
            return
        if outcome.reason == SAVE_IN_PROGRESS:
            self.notify(SAVE_IN_PROGRESS, severity="warning")
            return
        self.push_screen(ErrorAlertScreen(outcome.reason), self._handle_alert_closed)

    def _handle_alert_closed(self, _result: None) -> None:
        self.orchestrator.dismiss_error()

    def _handle_discard_choice(self, choice: str | None) -> None:
        if choice == "discard":
            self._close(None)

    def _close(self, result: Optional[Coffee]) -> None:
        """Detach from the session and orchestrator, then exit with `result`."""

        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.exit(result)

    def _on_field_changed(self, field: str, value: Any) -> None:
        try:
            if field in FLAVOR_FIELDS:
                self._editor.query_one(f"#flavor-{field}", FlavorRow).set_value(value)
            elif field == "name":
                self.title = self.session.record.display_name
                self._editor.query_one("#title", Static).update(self._title_text())
            self._refresh_header()
        except (IndexError, NoMatches):
            # Not composed yet, or already torn down.
            return

    def _on_save_state_changed(self, _orchestrator: SaveOrchestrator) -> None:
        try:
            self._refresh_header()
        except (IndexError, NoMatches):
            return

    @property
    def _editor(self) -> Screen:
        # Modals sit above the form; widgets live on the bottom screen.
        return self.screen_stack[0]

    def _refresh_header(self) -> None:
        status = self._editor.query_one("#header-status", Static)
        save_btn = self._editor.query_one("#save-btn", Button)

        status.remove_class("status-modified", "status-error")
        if self.orchestrator.is_saving:
            status.update("saving...")
        elif self.orchestrator.current_error:
            status.update(f"error: {self.orchestrator.current_error}")
            status.add_class("status-error")
        elif self.session.dirty:
            status.update("modified *")
            status.add_class("status-modified")
        else:
            status.update("saved" if not self.session.original.is_new else "new coffee")

        save_btn.disabled = self.orchestrator.is_saving

    def _title_text(self) -> Text:
        return Text.assemble(
            ("COFFEE", COFFEE_BROWN),
            (f" > {self.session.record.display_name}", "bold"),
        )
