"""Reading and writing shell alias files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

_QUOTES = ("'", '"')


def _parse_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line.startswith("alias "):
        return None
    body = line[6:].strip()
    alias, sep, command = body.partition("=")
    if not sep:
        return None
    command = command.strip()
    if len(command) >= 2 and any(command[0] == q and command[-1] == q for q in _QUOTES):
        command = command[1:-1]
    return alias.strip(), command


def get_aliases(path: str | Path) -> list[tuple[str, str]]:
    """All (alias, command) pairs in a file; a missing file is created empty."""
    file = Path(path)
    try:
        raw = file.read_bytes()
    except OSError:
        try:
            file.touch()
        except OSError:
            pass
        return []
    aliases = []
    for raw_line in raw.split(b"\n"):
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            continue
        parsed = _parse_line(line)
        if parsed is not None:
            aliases.append(parsed)
    return aliases


def write_aliases(path: str | Path, aliases: Iterable[tuple[str, str]]) -> None:
    """Replace the file's contents with the given aliases."""
    text = "".join(f"alias {alias}='{command}'\n" for alias, command in aliases)
    Path(path).write_text(text, encoding="utf-8")


def add_alias_to_file(path: str | Path, alias: str, command: str) -> bool:
    """Append an alias unless the name is already taken; return whether it was added."""
    aliases = get_aliases(path)
    if any(name == alias for name, _ in aliases):
        return False
    aliases.append((alias, command))
    write_aliases(path, aliases)
    return True


def _without_first(aliases: list[tuple[str, str]], alias: str) -> list[tuple[str, str]] | None:
    for index, (name, _) in enumerate(aliases):
        if name == alias:
            return aliases[:index] + aliases[index + 1:]
    return None


def remove_alias_from_file(path: str | Path, alias: str) -> bool:
    """Remove the first definition of an alias; return whether one was found."""
    remaining = _without_first(get_aliases(path), alias)
    if remaining is None:
        return False
    write_aliases(path, remaining)
    return True


def get_aliases_from_files(paths: Iterable[str | Path]) -> list[tuple[str, str]]:
    return [pair for path in paths for pair in get_aliases(path)]


def add_alias_to_files(paths: Sequence[str | Path], alias: str, command: str) -> bool:
    """Add an alias to the primary file unless any file already defines it."""
    if any(name == alias for name, _ in get_aliases_from_files(paths)):
        return False
    return add_alias_to_files_force(paths, alias, command)


def add_alias_to_files_force(paths: Sequence[str | Path], alias: str, command: str) -> bool:
    """Add an alias to the primary file without checking the other files."""
    if not paths:
        return False
    return add_alias_to_file(paths[0], alias, command)


def remove_alias_from_files(paths: Iterable[str | Path], alias: str) -> bool:
    """Remove the alias from every file defining it; return whether any did."""
    found = False
    for path in paths:
        if remove_alias_from_file(path, alias):
            found = True
    return found