"""In-memory store for previews and demos.

Satisfies CoffeeStorePort without touching disk. A failure reason can be
injected so the error alert can be previewed.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import Optional

from coffee_editor.core.errors import PersistenceError
from coffee_editor.core.models import Coffee


class InMemoryCoffeeStore:
    """Keeps saved coffees in a dict keyed by id."""

    def __init__(self, fail_with: Optional[str] = None, delay: float = 0.0) -> None:
        self.fail_with = fail_with
        self._delay = delay
        self.coffees: dict[str, Coffee] = {}
        self.persist_calls = 0

    async def persist(self, coffee: Coffee) -> Coffee:
        self.persist_calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        stored = coffee.with_id(uuid.uuid4().hex) if coffee.is_new else coffee
        self.coffees[stored.id] = stored
        return stored

    def list_coffees(self) -> list[Coffee]:
        return sorted(self.coffees.values(), key=lambda coffee: (coffee.name, coffee.id))
