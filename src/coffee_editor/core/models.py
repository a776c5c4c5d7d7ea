"""Core domain models.

These dataclasses are shared across the core, adapters, and frontend to avoid
tight coupling to any storage or rendering types.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

NEW_COFFEE_ID = "new"
NEW_COFFEE_PLACEHOLDER = "New Coffee"

FLAVOR_MIN = 0
FLAVOR_MAX = 10
FLAVOR_FIELDS = ("sweetness", "acidity")
EDITABLE_FIELDS = ("name", "tasting_notes") + FLAVOR_FIELDS


def clamp_flavor(value: int) -> int:
    """Clamp a flavor rating into the supported range."""

    return max(FLAVOR_MIN, min(FLAVOR_MAX, int(value)))


@dataclass(frozen=True)
class Coffee:
    """A single coffee record as stored and edited."""

    id: str = NEW_COFFEE_ID
    name: str = ""
    tasting_notes: str = ""
    sweetness: int = 0
    acidity: int = 0

    def __post_init__(self) -> None:
        # Frozen dataclass, so normalize through object.__setattr__.
        object.__setattr__(self, "sweetness", clamp_flavor(self.sweetness))
        object.__setattr__(self, "acidity", clamp_flavor(self.acidity))

    @property
    def is_new(self) -> bool:
        return self.id == NEW_COFFEE_ID

    @property
    def display_name(self) -> str:
        """Name shown as the editor title, falling back to the placeholder."""

        return self.name.strip() or NEW_COFFEE_PLACEHOLDER

    def with_id(self, coffee_id: str) -> "Coffee":
        return replace(self, id=coffee_id)


def new_coffee() -> Coffee:
    """Return the default record used when the editor opens for a new coffee."""

    return Coffee()


@dataclass(frozen=True)
class SaveSuccess:
    """Save attempt completed; the caller may close the edit session.

    `coffee` is the record as stored, carrying any id the store assigned.
    """

    coffee: Optional[Coffee] = None
    ok = True


@dataclass(frozen=True)
class SaveFailure:
    """Save attempt failed; the session stays open for a retry."""

    reason: str
    ok = False


SaveOutcome = Union[SaveSuccess, SaveFailure]
