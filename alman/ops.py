"""High-level operations tying the database to alias files."""

from __future__ import annotations

from pathlib import Path

from alman.aliases import add_alias_to_file, get_aliases, remove_alias_from_file
from alman.database import Database, DeletedCommands


def add_alias(
    db: Database, deleted: DeletedCommands, path: str | Path, alias: str, command: str
) -> None:
    """Stop suggesting ``command`` and write the alias to ``path``."""
    db.remove_command(command, deleted)
    add_alias_to_file(path, alias, command)


def remove_alias(deleted: DeletedCommands, path: str | Path, alias: str) -> None:
    """Remove an alias and allow its command to be tracked again."""
    for name, command in get_aliases(path):
        if name == alias:
            deleted.discard(command)
            break
    remove_alias_from_file(path, alias)


def delete_suggestion(alias: str, db: Database, deleted: DeletedCommands) -> None:
    """Stop tracking and suggesting the given command."""
    db.remove_command(alias, deleted)


def insert_command(
    command_text: str,
    db: Database,
    deleted: DeletedCommands,
    program_name: str | None = None,
) -> None:
    """Record a command and every word prefix of it."""
    command_text = command_text.strip()
    parts = command_text.split()
    if not parts:
        return
    if program_name is not None and parts[0] == program_name:
        return
    for count in range(1, len(parts) + 1):
        db.add_command(" ".join(parts[:count]), deleted)
    db.add_command(command_text, deleted)