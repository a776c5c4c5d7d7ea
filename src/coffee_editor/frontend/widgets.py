"""Reusable widgets for the editor form."""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, ProgressBar, Static

from coffee_editor.core.models import FLAVOR_MAX

from .constants import FLAVOR_LABELS


class FlavorRow(Horizontal):
    """One flavor rating: label, gauge, stepper, and the current value."""

    def __init__(self, field: str, value: int, **kwargs: Any) -> None:
        super().__init__(id=f"flavor-{field}", classes="flavor-row", **kwargs)
        self.flavor_field = field
        self._rating = value

    def compose(self) -> ComposeResult:
        yield Static(FLAVOR_LABELS.get(self.flavor_field, self.flavor_field), classes="flavor-title")
        yield ProgressBar(
            total=FLAVOR_MAX,
            show_eta=False,
            show_percentage=False,
            id=f"{self.flavor_field}-gauge",
        )
        yield Button("-", id=f"{self.flavor_field}-dec", classes="stepper")
        yield Button("+", id=f"{self.flavor_field}-inc", classes="stepper")
        yield Static(str(self._rating), id=f"{self.flavor_field}-value", classes="flavor-value")

    def on_mount(self) -> None:
        self.set_value(self._rating)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        # Stepper presses are handled here; the app only sees Save/Cancel.
        event.stop()
        if event.button.id == f"{self.flavor_field}-inc":
            self.app.step_flavor(self.flavor_field, 1)
        elif event.button.id == f"{self.flavor_field}-dec":
            self.app.step_flavor(self.flavor_field, -1)

    @property
    def rating(self) -> int:
        return self._rating

    def set_value(self, value: int) -> None:
        self._rating = value
        self.query_one(f"#{self.flavor_field}-gauge", ProgressBar).update(progress=value)
        self.query_one(f"#{self.flavor_field}-value", Static).update(str(value))
