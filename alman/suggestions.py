"""Ranking alias suggestions and pairing them with the top tracked commands."""

from __future__ import annotations

import dataclasses
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from alman.alias_generators import AliasSuggestion, candidate_aliases
from alman.aliases import get_aliases
from alman.database import Command, Database

_SEMANTIC_MARKERS = ("Git", "Docker", "NPM", "SSH")
_SINGLE_WORD_MARKERS = ("abbreviation", "First-last", "LazyGit", "Docker", "Node")


def _size(text: str) -> int:
    return len(text.encode("utf-8"))


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


def _reason_rank(reason: str) -> int:
    if _contains_any(reason, _SEMANTIC_MARKERS):
        return 100
    if reason == "Abbreviation":
        return 90
    if reason == "Vowel Removal":
        return 80
    if "combination" in reason:
        return 70
    if reason == "Syllable-based":
        return 65
    if "Remove prefix" in reason or "Remove suffix" in reason:
        return 60
    if _contains_any(reason, _SINGLE_WORD_MARKERS):
        return 55
    if reason == "Phonetic":
        return 50
    if "Remove duplicates" in reason or "Smart consonants" in reason:
        return 45
    if reason == "Keyboard pattern":
        return 40
    if "Truncated" in reason:
        return 35
    return 30


def priority(suggestion: AliasSuggestion) -> int:
    """Rank of a suggestion: its kind first, shorter aliases breaking ties."""
    return _reason_rank(suggestion.reason) + 10 - _size(suggestion.alias)


def _is_executable_file(path: Path) -> bool:
    try:
        return path.is_file() and bool(path.stat().st_mode & 0o111)
    except OSError:
        return False


def _path_directories() -> list[str]:
    path = os.environ.get("PATH")
    return path.split(":") if path is not None else []


def _executables_on_path() -> set[str]:
    names: set[str] = set()
    for directory in _path_directories():
        try:
            entries = list(os.scandir(directory or "."))
        except OSError:
            continue
        for entry in entries:
            if _is_executable_file(Path(entry.path)):
                names.add(entry.name)
    return names


def _shell_aliases() -> set[str]:
    shell = os.environ.get("SHELL")
    if not shell:
        return set()
    try:
        result = subprocess.run(
            [shell, "-i", "-c", "alias"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return set()
    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return set()
    names: set[str] = set()
    for line in output.splitlines():
        name = line.split("=", 1)[0].strip('"').strip("'").strip()
        if name:
            names.add(name)
    return names


def load_system_commands() -> set[str]:
    """Executables on $PATH plus the aliases defined by the user's shell."""
    return _executables_on_path() | _shell_aliases()


def is_system_command(name: str) -> bool:
    """True if an executable file called ``name`` exists in a $PATH directory."""
    if not name:
        return False
    return any(
        _is_executable_file(Path(os.path.join(directory, name)))
        for directory in _path_directories()
    )


@dataclass
class AliasSuggester:
    """Proposes aliases for commands, avoiding names that are already taken."""

    existing_aliases: frozenset[str] = field(default_factory=frozenset)
    system_commands: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_alias_file(cls, alias_file_path: str | Path) -> "AliasSuggester":
        """A suggester aware of the aliases in the file and the system's commands."""
        existing = frozenset(alias for alias, _ in get_aliases(alias_file_path))
        return cls(existing_aliases=existing, system_commands=frozenset(load_system_commands()))

    def has_conflicts(self, alias: str) -> bool:
        """True if the alias is taken or too short to be safe."""
        return (
            alias in self.existing_aliases
            or alias in self.system_commands
            or _size(alias) < 2
        )

    def suggest_aliases(self, command: str) -> list[AliasSuggestion]:
        """Conflict-free, de-duplicated suggestions, best first."""
        seen: set[str] = set()
        unique = []
        for suggestion in candidate_aliases(command):
            if self.has_conflicts(suggestion.alias) or suggestion.alias in seen:
                continue
            seen.add(suggestion.alias)
            unique.append(suggestion)
        return sorted(unique, key=priority, reverse=True)


@dataclass
class CommandWithAlias:
    """A tracked command and the aliases suggested for it."""

    command: Command
    alias_suggestions: list[AliasSuggestion] = field(default_factory=list)


def get_suggestions_with_aliases(
    num: int | None,
    db: Database,
    alias_file_path: str | Path,
    suggester: AliasSuggester | None = None,
) -> list[CommandWithAlias]:
    """Refresh scores and pair the ``num`` top commands with alias suggestions."""
    db.update()
    commands = db.top_commands(num)
    if suggester is None:
        suggester = AliasSuggester.from_alias_file(alias_file_path)
    return [
        CommandWithAlias(
            command=dataclasses.replace(command),
            alias_suggestions=suggester.suggest_aliases(command.command_text),
        )
        for command in commands
    ]