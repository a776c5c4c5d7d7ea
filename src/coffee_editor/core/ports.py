"""Ports (interfaces) used by the editing core.

Ports define the minimal contract for persistence adapters so that the core
can be reused with different backends.
"""

from __future__ import annotations

from typing import Optional, Protocol

from coffee_editor.core.models import Coffee


class CoffeeStorePort(Protocol):
    """Persistence operation required by the save orchestrator."""

    async def persist(self, coffee: Coffee) -> Optional[Coffee]:
        """Store the coffee and return it as stored, with its assigned id.

        Raises PersistenceError on failure.
        """
        ...
