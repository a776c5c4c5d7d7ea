"""Bindable form state for one coffee edit session.

The session owns a private copy of the record under edit. The frontend binds
its widgets to the accessors here and subscribes for change notifications
instead of holding field values itself.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from typing import Any, Callable, Optional

from coffee_editor.core.models import (
    EDITABLE_FIELDS,
    FLAVOR_FIELDS,
    Coffee,
    clamp_flavor,
    new_coffee,
)

LOGGER = logging.getLogger(__name__)

ChangeCallback = Callable[[str, Any], None]


class EditSession:
    """Mutable form state wrapping a single coffee record."""

    def __init__(self, coffee: Optional[Coffee] = None) -> None:
        self._original = coffee if coffee is not None else new_coffee()
        self._values: dict[str, Any] = {
            field: getattr(self._original, field) for field in EDITABLE_FIELDS
        }
        self._subscribers: list[ChangeCallback] = []

    @classmethod
    def for_new(cls) -> "EditSession":
        return cls(new_coffee())

    @classmethod
    def for_existing(cls, coffee: Coffee) -> "EditSession":
        return cls(coffee)

    # Bound accessors -----------------------------------------------------

    @property
    def name(self) -> str:
        return self._values["name"]

    @name.setter
    def name(self, value: str) -> None:
        self._set("name", value)

    @property
    def tasting_notes(self) -> str:
        return self._values["tasting_notes"]

    @tasting_notes.setter
    def tasting_notes(self, value: str) -> None:
        self._set("tasting_notes", value)

    @property
    def sweetness(self) -> int:
        return self._values["sweetness"]

    @sweetness.setter
    def sweetness(self, value: int) -> None:
        self._set_flavor("sweetness", value)

    @property
    def acidity(self) -> int:
        return self._values["acidity"]

    @acidity.setter
    def acidity(self, value: int) -> None:
        self._set_flavor("acidity", value)

    def increment(self, field: str) -> int:
        """Step a flavor rating up by one, clamped."""

        self._set_flavor(field, self._flavor(field) + 1)
        return self._values[field]

    def decrement(self, field: str) -> int:
        """Step a flavor rating down by one, clamped."""

        self._set_flavor(field, self._flavor(field) - 1)
        return self._values[field]

    # Snapshots and dirty tracking ----------------------------------------

    @property
    def original(self) -> Coffee:
        return self._original

    @property
    def record(self) -> Coffee:
        """Snapshot of the edited record; mutating the session never changes it."""

        return replace(self._original, **self._values)

    @property
    def dirty_fields(self) -> set[str]:
        original = asdict(self._original)
        return {field for field, value in self._values.items() if original[field] != value}

    @property
    def dirty(self) -> bool:
        return bool(self.dirty_fields)

    def reset(self) -> None:
        """Restore every field to the value the session opened with."""

        for field in EDITABLE_FIELDS:
            self._set(field, getattr(self._original, field))

    def mark_saved(self, coffee: Optional[Coffee] = None) -> None:
        """Adopt the current (or given) record as the new clean baseline.

        Field values are left alone, so edits newer than `coffee` stay dirty.
        """

        self._original = coffee if coffee is not None else self.record

    # Change notification -------------------------------------------------

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a change callback and return a function that removes it."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _set(self, field: str, value: Any) -> None:
        if self._values[field] == value:
            return
        self._values[field] = value
        for callback in list(self._subscribers):
            callback(field, value)

    def _set_flavor(self, field: str, value: int) -> None:
        clamped = clamp_flavor(value)
        if clamped != value:
            LOGGER.debug("Clamped %s from %s to %s", field, value, clamped)
        self._set(field, clamped)

    def _flavor(self, field: str) -> int:
        if field not in FLAVOR_FIELDS:
            raise ValueError(f"Unsupported flavor field: {field}")
        return self._values[field]

