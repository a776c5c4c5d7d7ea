"""Shared constants for the Textual UI."""

from __future__ import annotations

COFFEE_BROWN = "#C58940"

FLAVOR_LABELS = {
    "sweetness": "Sweetness",
    "acidity": "Acidity",
}
