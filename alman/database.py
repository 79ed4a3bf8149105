"""Command history database with frequency/recency scoring."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Iterator

SCORE_RESET_THRESHOLD = 10000

_HOUR = 3600
_DAY = 86400
_WEEK = 604800


def _now() -> int:
    return int(time.time())


def _halve(frequency: int) -> int:
    """Halve a frequency, rounding halves away from zero."""
    if frequency >= 0:
        return (frequency + 1) // 2
    return -((-frequency + 1) // 2)


def compute_score(command: "Command", now: int | None = None) -> int:
    """Score a command from its length, frequency and time since last use."""
    if now is None:
        now = _now()
    elapsed = now - command.last_access_time
    if elapsed <= _HOUR:
        multiplier = 4.0
    elif elapsed <= _DAY:
        multiplier = 2.0
    elif elapsed <= _WEEK:
        multiplier = 0.5
    else:
        multiplier = 0.25
    return int(multiplier * (float(command.length) ** (3.0 / 5.0)) * command.frequency)


def _word_stats(text: str) -> tuple[int, int]:
    words = text.split()
    return sum(len(word.encode("utf-8")) for word in words), len(words)


@dataclass
class Command:
    """A recorded command together with its usage statistics."""

    score: int
    last_access_time: int
    frequency: int
    length: int
    command_text: str
    number_of_words: int

    @classmethod
    def create(cls, command_text: str, timestamp: int | None = None) -> "Command":
        """Build a command seen once at ``timestamp`` (default: now)."""
        now = _now()
        length, words = _word_stats(command_text)
        command = cls(
            score=0,
            last_access_time=now if timestamp is None else int(timestamp),
            frequency=1,
            length=length,
            command_text=command_text,
            number_of_words=words,
        )
        command.score = compute_score(command, now)
        return command

    @property
    def sort_key(self) -> tuple[int, str]:
        return (-self.score, self.command_text)

    def __lt__(self, other: "Command") -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def is_trivial(self) -> bool:
        """True for short single-word commands, which are not tracked."""
        return self.length <= 5 and self.number_of_words == 1

    def touch(self) -> None:
        """Record another use of the command now."""
        self.last_access_time = _now()
        self.frequency += 1
        self.score = compute_score(self)

    def refresh(self) -> None:
        """Recompute the score for the current time."""
        self.score = compute_score(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "last_access_time": self.last_access_time,
            "frequency": self.frequency,
            "length": self.length,
            "command_text": self.command_text,
            "number_of_words": self.number_of_words,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        try:
            return cls(
                score=int(data["score"]),
                last_access_time=int(data["last_access_time"]),
                frequency=int(data["frequency"]),
                length=int(data["length"]),
                command_text=str(data["command_text"]),
                number_of_words=int(data["number_of_words"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed command record: {exc}") from exc


@dataclass
class DeletedCommands:
    """Commands that must no longer be tracked or suggested."""

    commands: set[str] = field(default_factory=set)

    def __contains__(self, command_text: object) -> bool:
        return command_text in self.commands

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.commands))

    def __len__(self) -> int:
        return len(self.commands)

    def add(self, command_text: str) -> None:
        self.commands.add(command_text)

    def discard(self, command_text: str) -> None:
        self.commands.discard(command_text)

    def to_dict(self) -> dict[str, Any]:
        return {"deleted_commands": sorted(self.commands)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeletedCommands":
        try:
            entries = data["deleted_commands"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed deleted commands record: {exc}") from exc
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise ValueError("deleted_commands must be a list of strings")
        return cls(set(entries))


@dataclass
class Database:
    """All tracked commands keyed by their text, with running totals."""

    commands: dict[str, Command] = field(default_factory=dict)
    total_num_commands: int = 0
    total_score: int = 0

    def __len__(self) -> int:
        return len(self.commands)

    def __contains__(self, command_text: object) -> bool:
        return command_text in self.commands

    def get(self, command_text: str) -> Command | None:
        return self.commands.get(command_text)

    def ordered(self) -> list[Command]:
        """All commands, highest score first, ties broken by text."""
        return sorted(self.commands.values())

    def _check_threshold(self) -> None:
        if self.total_score > SCORE_RESET_THRESHOLD:
            self.score_reset()

    def add_command(self, command_text: str, deleted: DeletedCommands) -> None:
        """Record one use of ``command_text`` unless it has been deleted."""
        if command_text in deleted:
            return
        existing = self.commands.get(command_text)
        if existing is not None:
            self.total_score -= existing.score
            existing.touch()
            self.total_score += existing.score
        else:
            command = Command.create(command_text)
            if command.is_trivial:
                return
            self.commands[command_text] = command
            self.total_num_commands += 1
            self.total_score += command.score
        self._check_threshold()

    def add_existing(self, command: Command) -> None:
        """Merge a prebuilt command, adding its frequency to any existing entry."""
        existing = self.commands.get(command.command_text)
        if existing is not None:
            self.total_score -= existing.score
            existing.frequency += command.frequency
            existing.refresh()
            self.total_score += existing.score
        else:
            if command.is_trivial:
                return
            self.commands[command.command_text] = command
            self.total_num_commands += 1
            self.total_score += command.score
        self._check_threshold()

    def remove_command(self, command_text: str, deleted: DeletedCommands) -> None:
        """Mark a command as deleted and drop it from the database."""
        if command_text in deleted:
            return
        deleted.add(command_text)
        command = self.commands.pop(command_text, None)
        if command is not None:
            self.total_num_commands -= 1
            self.total_score -= command.score

    def update(self) -> None:
        """Recompute every score for the current time."""
        for command in self.commands.values():
            self.total_score -= command.score
            command.refresh()
            self.total_score += command.score
        self._check_threshold()

    def top_commands(self, n: int | None = None) -> list[Command]:
        """The ``n`` best-scoring commands (default 5)."""
        if n is None:
            n = 5
        return self.ordered()[:n]

    def score_reset(self) -> None:
        """Halve every frequency, rescore, and drop commands that fall to zero."""
        now = _now()
        kept: dict[str, Command] = {}
        for text, command in self.commands.items():
            command.frequency = _halve(command.frequency)
            command.score = compute_score(command, now)
            if command.frequency >= 1:
                kept[text] = command
        self.commands = kept
        self.total_num_commands = len(kept)
        self.total_score = sum(command.score for command in kept.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "command_list": [command.to_dict() for command in self.ordered()],
            "reverse_command_map": {
                text: command.to_dict() for text, command in self.commands.items()
            },
            "total_num_commands": self.total_num_commands,
            "total_score": self.total_score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Database":
        if not isinstance(data, dict):
            raise ValueError("database record must be a mapping")
        try:
            mapping = data["reverse_command_map"]
            total_num = int(data["total_num_commands"])
            total_score = int(data["total_score"])
            listed = data["command_list"]
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed database record: {exc}") from exc
        if not isinstance(mapping, dict) or not isinstance(listed, list):
            raise ValueError("malformed database record")
        commands = {text: Command.from_dict(entry) for text, entry in mapping.items()}
        for entry in listed:
            command = Command.from_dict(entry)
            commands.setdefault(command.command_text, command)
        return cls(commands=commands, total_num_commands=total_num, total_score=total_score)