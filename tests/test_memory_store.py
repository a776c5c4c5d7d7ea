from __future__ import annotations

import asyncio

from coffee_editor.adapters.memory_store import InMemoryCoffeeStore
from coffee_editor.core.errors import PersistenceError
from coffee_editor.core.models import Coffee


def test_new_and_existing_records_are_kept_by_id() -> None:
    store = InMemoryCoffeeStore()

    stored = asyncio.run(store.persist(Coffee(name="Panama Geisha")))
    assert store.coffees[stored.id] == stored
    asyncio.run(store.persist(Coffee(id="fixed", name="Costa Rica")))

    names = [coffee.name for coffee in store.list_coffees()]
    assert names == ["Costa Rica", "Panama Geisha"]
    assert "fixed" in store.coffees
    assert store.persist_calls == 2


def test_injected_failure_raises_persistence_error() -> None:
    store = InMemoryCoffeeStore(fail_with="preview failure")

    try:
        asyncio.run(store.persist(Coffee()))
    except PersistenceError as exc:
        assert exc.reason == "preview failure"
    else:
        raise AssertionError("expected PersistenceError")
    assert store.coffees == {}
