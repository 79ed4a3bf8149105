"""Seed the command database from a shell history file."""

from __future__ import annotations

import os
import time
from pathlib import Path

from alman.database import Command, Database, DeletedCommands

HISTORY_INTERVAL_SECONDS = 120

_SKIP_PREFIXES = ("#", ":", "HISTTIMEFORMAT", "HISTSIZE", "HISTFILESIZE")
_HISTORY_CANDIDATES = (".zsh_history", ".bash_history", ".history", ".fish_history")


def find_history_file() -> Path:
    """Locate the user's history file from $HISTFILE or common defaults."""
    histfile = os.environ.get("HISTFILE", "")
    if histfile:
        return Path(histfile)
    home = Path.home()
    for name in _HISTORY_CANDIDATES:
        candidate = home / name
        if candidate.exists():
            return candidate
    raise FileNotFoundError("No history file found")


def extract_command(line: str) -> str:
    """Pull the command out of one history line in zsh, fish or bash form."""
    if line.startswith(": "):
        semicolon = line.find(";")
        if semicolon != -1:
            return line[semicolon + 1:].strip()
    if line.startswith("- cmd:"):
        return line[6:].strip()
    if line.startswith("#"):
        return ""
    return line


def parse_history(content: str) -> list[str]:
    """Commands found in history text, most recent first."""
    commands = []
    for raw in reversed(content.split("\n")):
        line = raw.strip()
        if not line or line.startswith(_SKIP_PREFIXES):
            continue
        command = extract_command(line)
        if len(command.encode("utf-8")) > 2:
            commands.append(command)
    return commands


def insert_with_timestamp(
    command: str,
    timestamp: int,
    db: Database,
    deleted: DeletedCommands,
    program_name: str | None = None,
) -> None:
    """Add a command and each of its word prefixes as seen at ``timestamp``."""
    if not command or command in deleted:
        return
    parts = command.split()
    if len(parts) <= 1 or len(command.encode("utf-8")) <= 5:
        return
    if program_name is not None and parts[0] == program_name:
        return

    full = Command.create(command, timestamp)
    for count in range(1, len(parts) + 1):
        prefix = " ".join(parts[:count])
        if len(prefix.encode("utf-8")) > 2:
            db.add_existing(Command.create(prefix, timestamp))
    db.add_existing(full)


def initialize_from_history(
    db: Database,
    deleted: DeletedCommands,
    history_path: str | os.PathLike | None = None,
    program_name: str | None = None,
) -> int:
    """Fill an empty database from shell history; return how many commands were read."""
    if len(db):
        return 0
    path = Path(history_path) if history_path is not None else find_history_file()
    if not path.exists():
        return 0
    commands = parse_history(path.read_text(encoding="utf-8"))
    if not commands:
        return 0
    now = int(time.time())
    for index, command in enumerate(commands):
        insert_with_timestamp(
            command, now - index * HISTORY_INTERVAL_SECONDS, db, deleted, program_name
        )
    return len(commands)