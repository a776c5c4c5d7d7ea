"""Exceptions shared by the core and the storage adapters."""

from __future__ import annotations


class CoffeeEditorError(Exception):
    """Base class for coffee editor errors."""


class PersistenceError(CoffeeEditorError):
    """Raised by a store when a coffee could not be persisted."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class CoffeeNotFoundError(CoffeeEditorError):
    """Raised when an existing coffee is requested but not stored."""

    def __init__(self, coffee_id: str) -> None:
        self.coffee_id = coffee_id
        super().__init__(f"coffee with id '{coffee_id}' not found")
