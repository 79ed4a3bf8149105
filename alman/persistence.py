"""Locations and JSON storage for the configuration, database and deleted commands."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path

from alman.database import Database, DeletedCommands
from alman.history import initialize_from_history

DATA_DIR_NAME = ".alman"
DB_FILE = "command_database.json"
DELETED_COMMANDS_FILE = "deleted_commands.json"
CONFIG_FILE = "config.json"
ALIAS_FILE = "aliases"


@dataclass
class AppConfig:
    """User configuration: the alias files to manage, default first."""

    alias_file_paths: list[str] = field(default_factory=list)


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return Path(".")


def data_directory() -> Path:
    """The directory holding all of the application's files."""
    return _home() / DATA_DIR_NAME


def config_path() -> str:
    return str(data_directory() / CONFIG_FILE)


def database_path() -> str:
    return str(data_directory() / DB_FILE)


def deleted_commands_path() -> str:
    return str(data_directory() / DELETED_COMMANDS_FILE)


def default_alias_file_path() -> str:
    return str(data_directory() / ALIAS_FILE)


def ensure_data_directory() -> Path:
    """Create the data directory if needed and return it."""
    directory = data_directory()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _write_json(path: str | Path, data: object) -> None:
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def save_config(config: AppConfig) -> None:
    _write_json(config_path(), asdict(config))


def load_config() -> AppConfig | None:
    """Read the configuration; None when it is missing or unreadable."""
    path = Path(config_path())
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    paths = data.get("alias_file_paths") if isinstance(data, dict) else None
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        return None
    return AppConfig(list(paths))


def save_database(db: Database, path: str | Path) -> None:
    _write_json(path, db.to_dict())


def _program_name() -> str | None:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return None


def _seed_from_history(db: Database) -> None:
    try:
        deleted = load_deleted_commands(deleted_commands_path())
    except (OSError, ValueError):
        deleted = DeletedCommands()
    try:
        count = initialize_from_history(db, deleted, program_name=_program_name())
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not initialize from history: {exc}", file=sys.stderr)
        return
    if count:
        print(f"Initialized database with {count} commands from history")


def load_database(path: str | Path) -> Database:
    """Load the database, seeding it from shell history when it is empty."""
    file = Path(path)
    if not file.exists():
        db = Database()
    else:
        db = Database.from_dict(json.loads(file.read_text(encoding="utf-8")))
    if not len(db):
        _seed_from_history(db)
    return db


def save_deleted_commands(deleted: DeletedCommands, path: str | Path) -> None:
    _write_json(path, deleted.to_dict())


def load_deleted_commands(path: str | Path) -> DeletedCommands:
    file = Path(path)
    if not file.exists():
        return DeletedCommands()
    return DeletedCommands.from_dict(json.loads(file.read_text(encoding="utf-8")))