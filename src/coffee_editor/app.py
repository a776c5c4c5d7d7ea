"""Application entry point for the coffee editor."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Sequence

from coffee_editor import settings
from coffee_editor.adapters.memory_store import InMemoryCoffeeStore
from coffee_editor.adapters.sqlite_store import SQLiteCoffeeStore
from coffee_editor.core.errors import CoffeeNotFoundError
from coffee_editor.core.form_state import EditSession
from coffee_editor.core.orchestrator import SaveOrchestrator
from coffee_editor.frontend.app import CoffeeEditorApp

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/coffee_editor.log"


def _rotating_file_handler(file_cfg: dict) -> RotatingFileHandler:
    path = settings.resolve_path(file_cfg.get("path", DEFAULT_LOG_PATH))
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def _log_handlers(config: dict) -> list[logging.Handler]:
    """Handlers enabled by the logging section; stderr only when asked for."""

    handlers: list[logging.Handler] = []
    # The TUI draws on the terminal, so the console handler is opt-in.
    if config.get("console", False):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_rotating_file_handler(file_cfg))
    return handlers


def _configure_logging(config: Optional[dict] = None) -> None:
    config = settings.LOGGING if config is None else config
    if not config.get("enabled", False):
        return

    handlers = _log_handlers(config)
    if not handlers:
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coffee-editor", description="Create or edit a coffee.")
    parser.add_argument("--db", default=settings.DB_PATH, help="SQLite database path")
    parser.add_argument("--edit", metavar="ID", help="edit an existing coffee instead of a new one")
    parser.add_argument("--list", action="store_true", help="list stored coffees and exit")
    parser.add_argument(
        "--preview",
        action="store_true",
        help="use an in-memory store instead of the database",
    )
    parser.add_argument(
        "--fail-with",
        metavar="REASON",
        help="with --preview, make every save fail with this reason",
    )
    return parser


def _print_coffees(store: SQLiteCoffeeStore) -> None:
    coffees = store.list_coffees()
    if not coffees:
        print("No coffees stored.")
        return
    for coffee in coffees:
        print(f"{coffee.id}  {coffee.display_name}  sweetness={coffee.sweetness} acidity={coffee.acidity}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging()

    if args.preview:
        store = InMemoryCoffeeStore(fail_with=args.fail_with)
        if args.edit or args.list:
            print("--edit and --list need the database store", file=sys.stderr)
            return 2
        session = EditSession.for_new()
    else:
        store = SQLiteCoffeeStore(args.db, require_name=settings.REQUIRE_NAME)
        store.init_db()
        if args.list:
            _print_coffees(store)
            return 0
        if args.edit:
            try:
                session = EditSession.for_existing(store.get_coffee(args.edit))
            except CoffeeNotFoundError as exc:
                print(str(exc), file=sys.stderr)
                return 1
        else:
            session = EditSession.for_new()

    LOGGER.info("Opening editor for %s", session.original.display_name)
    result = CoffeeEditorApp(session, SaveOrchestrator(store)).run()
    if result is None:
        LOGGER.info("Edit cancelled")
        return 0
    print(f"Saved {result.display_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
