from __future__ import annotations

from typing import Any

from coffee_editor.core.form_state import EditSession
from coffee_editor.core.models import Coffee, NEW_COFFEE_ID, NEW_COFFEE_PLACEHOLDER


def test_new_session_uses_default_record() -> None:
    session = EditSession.for_new()

    assert session.name == ""
    assert session.tasting_notes == ""
    assert session.sweetness == 0
    assert session.acidity == 0
    assert session.record.id == NEW_COFFEE_ID
    assert session.record.is_new
    assert not session.dirty


def test_flavor_setters_clamp_to_range() -> None:
    session = EditSession.for_new()

    for value in (-100, -1, 0, 3, 10, 11, 15, 10_000):
        session.sweetness = value
        session.acidity = value
        expected = max(0, min(10, value))
        assert session.sweetness == expected
        assert session.acidity == expected


def test_text_fields_are_stored_as_is() -> None:
    session = EditSession.for_new()

    session.name = "  Ethiopia Guji  "
    session.tasting_notes = "peach\nblack tea"

    assert session.name == "  Ethiopia Guji  "
    assert session.tasting_notes == "peach\nblack tea"


def test_stepper_helpers_stop_at_bounds() -> None:
    session = EditSession(Coffee(sweetness=9, acidity=1))

    assert session.increment("sweetness") == 10
    assert session.increment("sweetness") == 10
    assert session.decrement("acidity") == 0
    assert session.decrement("acidity") == 0


def test_stepper_rejects_text_fields() -> None:
    session = EditSession.for_new()

    try:
        session.increment("name")
    except ValueError as exc:
        assert "name" in str(exc)
    else:
        raise AssertionError("expected ValueError")


def test_editing_never_touches_the_source_record() -> None:
    existing = Coffee(id="abc", name="Kenya AA", tasting_notes="currant", sweetness=4, acidity=8)
    session = EditSession.for_existing(existing)

    session.name = "Kenya AB"
    session.acidity = 2

    assert existing.name == "Kenya AA"
    assert existing.acidity == 8
    assert session.original is existing
    assert session.record == Coffee(
        id="abc", name="Kenya AB", tasting_notes="currant", sweetness=4, acidity=2
    )


def test_dirty_fields_track_per_field_changes() -> None:
    session = EditSession(Coffee(id="abc", name="Kenya", sweetness=4))

    session.name = "Kenya AA"
    session.sweetness = 5
    assert session.dirty_fields == {"name", "sweetness"}

    # Back to the original value clears that field's flag.
    session.sweetness = 4
    assert session.dirty_fields == {"name"}
    assert session.dirty


def test_reset_and_mark_saved() -> None:
    session = EditSession(Coffee(name="Colombia"))
    session.name = "Colombia Huila"
    session.reset()
    assert session.name == "Colombia"
    assert not session.dirty

    session.acidity = 6
    session.mark_saved()
    assert not session.dirty
    assert session.original.acidity == 6


def test_subscribers_receive_actual_changes_only() -> None:
    session = EditSession.for_new()
    seen: list[tuple[str, Any]] = []
    unsubscribe = session.subscribe(lambda field, value: seen.append((field, value)))

    session.sweetness = 15
    session.sweetness = 12  # clamps to the same stored value
    session.name = "Brazil"
    unsubscribe()
    session.name = "Brazil Cerrado"

    assert seen == [("sweetness", 10), ("name", "Brazil")]


def test_display_name_falls_back_to_placeholder() -> None:
    session = EditSession.for_new()
    assert session.record.display_name == NEW_COFFEE_PLACEHOLDER

    session.name = "Sumatra"
    assert session.record.display_name == "Sumatra"


def test_coffee_constructor_clamps_ratings() -> None:
    coffee = Coffee(sweetness=42, acidity=-3)
    assert coffee.sweetness == 10
    assert coffee.acidity == 0
