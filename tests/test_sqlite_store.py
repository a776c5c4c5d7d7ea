from __future__ import annotations

import asyncio
from pathlib import Path

from coffee_editor.adapters.sqlite_store import SQLiteCoffeeStore
from coffee_editor.core.errors import CoffeeNotFoundError, PersistenceError
from coffee_editor.core.form_state import EditSession
from coffee_editor.core.models import Coffee
from coffee_editor.core.orchestrator import SaveOrchestrator


def _store(tmp_path: Path, **kwargs) -> SQLiteCoffeeStore:
    store = SQLiteCoffeeStore(str(tmp_path / "coffees.db"), **kwargs)
    store.init_db()
    return store


def test_new_coffee_gets_generated_id(tmp_path: Path) -> None:
    store = _store(tmp_path)

    asyncio.run(store.persist(Coffee(name="Yirgacheffe", sweetness=7, acidity=9)))

    coffees = store.list_coffees()
    assert len(coffees) == 1
    assert not coffees[0].is_new
    assert coffees[0].name == "Yirgacheffe"
    assert (coffees[0].sweetness, coffees[0].acidity) == (7, 9)


def test_existing_coffee_is_updated_in_place(tmp_path: Path) -> None:
    store = _store(tmp_path)
    asyncio.run(store.persist(Coffee(name="Huila")))
    saved = store.list_coffees()[0]

    asyncio.run(store.persist(Coffee(id=saved.id, name="Huila Decaf", tasting_notes="cocoa")))

    assert store.get_coffee(saved.id).name == "Huila Decaf"
    assert store.get_coffee(saved.id).tasting_notes == "cocoa"
    assert len(store.list_coffees()) == 1


def test_get_coffee_unknown_id(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.find_coffee("missing") is None
    try:
        store.get_coffee("missing")
    except CoffeeNotFoundError as exc:
        assert exc.coffee_id == "missing"
    else:
        raise AssertionError("expected CoffeeNotFoundError")


def test_require_name_rejects_empty_name(tmp_path: Path) -> None:
    store = _store(tmp_path, require_name=True)

    try:
        asyncio.run(store.persist(Coffee(name="   ")))
    except PersistenceError as exc:
        assert exc.reason == "coffee name is required"
    else:
        raise AssertionError("expected PersistenceError")
    assert store.list_coffees() == []


def test_database_errors_reach_the_orchestrator_as_failures(tmp_path: Path) -> None:
    # init_db was never called, so the table is missing.
    store = SQLiteCoffeeStore(str(tmp_path / "empty.db"))
    orchestrator = SaveOrchestrator(store)

    outcome = asyncio.run(orchestrator.save(Coffee(name="Bourbon")))

    assert not outcome.ok
    assert orchestrator.current_error is not None
    assert orchestrator.current_error.startswith("database error: no such table")


def test_persist_returns_record_with_assigned_id(tmp_path: Path) -> None:
    store = _store(tmp_path)

    stored = asyncio.run(store.persist(Coffee(name="Sidamo")))

    assert not stored.is_new
    assert store.get_coffee(stored.id) == stored


def test_saving_a_session_twice_keeps_one_row(tmp_path: Path) -> None:
    store = _store(tmp_path)
    orchestrator = SaveOrchestrator(store)
    session = EditSession.for_new()
    session.name = "Tarrazu"

    asyncio.run(orchestrator.save_session(session))
    session.tasting_notes = "honey, orange"
    asyncio.run(orchestrator.save_session(session))

    coffees = store.list_coffees()
    assert len(coffees) == 1
    assert coffees[0].id == session.original.id
    assert coffees[0].tasting_notes == "honey, orange"
