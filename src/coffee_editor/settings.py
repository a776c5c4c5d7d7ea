"""Static configuration for the coffee editor.

User-editable settings (database location, logging) live in a single JSON
file for quick edits without touching Python. A missing file means defaults.
"""

from __future__ import annotations

import json
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

# .env may point COFFEE_EDITOR_CONFIG at another config file.
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

CONFIG_PATH = os.getenv("COFFEE_EDITOR_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def load_json_config(path: str = CONFIG_PATH) -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise ValueError("config root must be an object")
    return loaded


def resolve_path(path: str) -> str:
    """Resolve config paths relative to the project root."""

    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# SQLite database used by the default store.
# - DB_PATH: relative paths resolve against the project root
# - REQUIRE_NAME: reject saves of coffees with an empty name
_database = _CONFIG.get("database", {})
DB_PATH = resolve_path(_database.get("path", "coffees.db"))
REQUIRE_NAME = bool(_database.get("require_name", False))

# Logging configuration (optional). Console output is off by default because
# the TUI owns the terminal.
LOGGING = _CONFIG.get("logging", {})
