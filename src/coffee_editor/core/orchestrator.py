"""Save orchestration for the coffee editor.

This module is storage-agnostic. It only relies on the store port, so the
same orchestrator drives the SQLite adapter, the preview store, or test fakes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from coffee_editor.core.errors import PersistenceError
from coffee_editor.core.form_state import EditSession
from coffee_editor.core.models import Coffee, SaveFailure, SaveOutcome, SaveSuccess
from coffee_editor.core.ports import CoffeeStorePort

LOGGER = logging.getLogger(__name__)

SAVE_IN_PROGRESS = "save already in progress"

StateCallback = Callable[["SaveOrchestrator"], None]


class SaveOrchestrator:
    """Drives one save attempt at a time and keeps the alert state."""

    def __init__(self, store: CoffeeStorePort) -> None:
        self._store = store
        self._is_saving = False
        self._current_error: Optional[str] = None
        self._subscribers: list[StateCallback] = []

    @property
    def is_saving(self) -> bool:
        return self._is_saving

    @property
    def current_error(self) -> Optional[str]:
        return self._current_error

    @property
    def show_error_alert(self) -> bool:
        return self._current_error is not None

    async def save(self, coffee: Coffee) -> SaveOutcome:
        """Persist the coffee and report the outcome.

        Attempts made while another save is outstanding are rejected rather
        than queued, and leave the stored error untouched.
        """

        if self._is_saving:
            LOGGER.warning("Rejected save for %s: %s", coffee.display_name, SAVE_IN_PROGRESS)
            return SaveFailure(SAVE_IN_PROGRESS)

        self._set_saving(True)
        LOGGER.info("Saving coffee %s (%s)", coffee.display_name, coffee.id)
        try:
            stored = await self._store.persist(coffee)
        except PersistenceError as exc:
            return self._fail(coffee, exc.reason)
        except Exception as exc:
            # Environment failures (store unreachable, driver errors) share
            # the same failure channel as persistence rejections.
            return self._fail(coffee, str(exc) or type(exc).__name__)
        finally:
            self._set_saving(False)

        self._set_error(None)
        stored = stored if stored is not None else coffee
        LOGGER.info("Saved coffee %s (%s)", stored.display_name, stored.id)
        return SaveSuccess(stored)

    async def save_session(self, session: EditSession) -> SaveOutcome:
        """Save a snapshot of the session and adopt it as the clean baseline.

        Edits made while the save is in flight stay dirty, since they were
        not part of the snapshot that was written.
        """

        snapshot = session.record
        outcome = await self.save(snapshot)
        if isinstance(outcome, SaveSuccess):
            session.mark_saved(outcome.coffee or snapshot)
        return outcome

    def dismiss_error(self) -> None:
        """Acknowledge the current error; safe to call repeatedly."""

        self._set_error(None)

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a callback for is_saving/current_error changes."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _fail(self, coffee: Coffee, reason: str) -> SaveFailure:
        LOGGER.warning("Save failed for %s: %s", coffee.display_name, reason)
        self._set_error(reason)
        return SaveFailure(reason)

    def _set_saving(self, value: bool) -> None:
        if self._is_saving == value:
            return
        self._is_saving = value
        self._notify()

    def _set_error(self, value: Optional[str]) -> None:
        if self._current_error == value:
            return
        self._current_error = value
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)
