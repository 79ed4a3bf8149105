"""Command-line entry point for managing aliases and command suggestions."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from alman.aliases import (
    add_alias_to_files,
    add_alias_to_files_force,
    get_aliases_from_files,
    remove_alias_from_files,
)
from alman.database import Command, Database, DeletedCommands
from alman.ops import add_alias, delete_suggestion, insert_command, remove_alias
from alman.persistence import (
    AppConfig,
    database_path,
    default_alias_file_path,
    deleted_commands_path,
    ensure_data_directory,
    load_config,
    load_database,
    load_deleted_commands,
    save_config,
    save_database,
    save_deleted_commands,
)
from alman.shell import InitShell, ShellOpts, render_shell_init
from alman.suggestions import get_suggestions_with_aliases, is_system_command

_RED = "31"
_GREEN = "32"
_YELLOW = "33"

_VISIBLE_COMMANDS = "{add,remove,list,change,get-suggestions,delete-suggestion,tui}"

_EXAMPLES = """EXAMPLES:
  alman add --command "git status" gs
  alman remove gs
  alman change old-alias new-alias
  alman list
  alman get-suggestions -n 10
  alman tui"""


def _size(text: str) -> int:
    return len(text.encode("utf-8"))


def _color(text: str, code: str, stream: TextIO | None = None) -> str:
    stream = sys.stdout if stream is None else stream
    if os.environ.get("NO_COLOR") or not stream.isatty():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _error(message: str) -> None:
    print(_color(message, _RED, sys.stderr), file=sys.stderr)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"number must not be negative: {value}")
    return number


def _example(text: str) -> str:
    return f"EXAMPLE:\n  {text}"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for all subcommands."""
    formatter = argparse.RawDescriptionHelpFormatter
    parser = argparse.ArgumentParser(
        prog="alman",
        description=(
            "A powerful command-line tool and TUI for managing shell aliases with "
            "intelligent suggestions, analytics, and multi-shell support."
        ),
        epilog=_EXAMPLES,
        formatter_class=formatter,
    )
    parser.add_argument(
        "-a",
        "--alias-file-path",
        metavar="ALIAS_FILE_PATH",
        help="Path to the alias file to use",
    )
    sub = parser.add_subparsers(dest="operation", metavar=_VISIBLE_COMMANDS)

    add = sub.add_parser(
        "add",
        help="Add a new alias",
        epilog=_example('alman add --command "git status" gs'),
        formatter_class=formatter,
    )
    add.add_argument("-c", "--command", required=True, help="Command to associate with the alias")
    add.add_argument("alias", help="Alias name to add")

    remove = sub.add_parser(
        "remove",
        help="Remove an existing alias",
        epilog=_example("alman remove gs"),
        formatter_class=formatter,
    )
    remove.add_argument("alias", help="Alias name to remove")

    sub.add_parser(
        "list",
        help="List all aliases",
        epilog=_example("alman list"),
        formatter_class=formatter,
    )

    change = sub.add_parser(
        "change",
        help="Change an existing alias to a new alias",
        epilog=_example("alman change old-alias new-alias"),
        formatter_class=formatter,
    )
    change.add_argument("old_alias", help="Old alias name")
    change.add_argument("new_alias", help="New alias name")

    suggest = sub.add_parser(
        "get-suggestions",
        help="Get intelligent alias suggestions based on command history",
        epilog=_example("alman get-suggestions -n 10"),
        formatter_class=formatter,
    )
    suggest.add_argument(
        "-n", "--num", type=_non_negative_int, help="Number of suggestions to display"
    )

    delete = sub.add_parser(
        "delete-suggestion",
        help="Delete alias suggestions for a specific alias",
        epilog=_example("alman delete-suggestion gs"),
        formatter_class=formatter,
    )
    delete.add_argument("alias", help="Alias name to delete suggestions for")

    sub.add_parser(
        "tui",
        help="Launch the interactive terminal user interface (TUI)",
        epilog=_example("alman tui"),
        formatter_class=formatter,
    )

    init = sub.add_parser("init")
    init.add_argument(
        "shell",
        type=InitShell,
        choices=list(InitShell),
        metavar="{bash,zsh,fish,posix}",
        help="Shell type to initialize (bash, zsh, fish, posix)",
    )

    sub.add_parser("init-data")
    return parser


def to_absolute_path(path: str | os.PathLike) -> str:
    """Resolve a path; for a missing file resolve its directory instead."""
    text = os.fspath(path)
    try:
        return str(Path(text).resolve(strict=True))
    except (OSError, RuntimeError):
        pass
    parent = os.path.dirname(text)
    if parent:
        try:
            return str(Path(parent).resolve(strict=True) / os.path.basename(text))
        except (OSError, RuntimeError):
            pass
    return text


def source_message(shell_path: str) -> str:
    """Advice on which rc file to source for the given $SHELL value."""
    if "zsh" in shell_path:
        shell_file = "~/.zshrc"
    elif "bash" in shell_path:
        shell_file = "~/.bashrc"
    elif "fish" in shell_path:
        shell_file = "~/.config/fish/config.fish"
    else:
        shell_file = "your shell's config file"
    return (
        "\nTo use your new aliases immediately, run: "
        f"\x1b[32msource {shell_file}\x1b[0m"
    )


def _border(left: str, middle: str, right: str, widths: Sequence[int]) -> str:
    return left + middle.join("─" * (width + 2) for width in widths) + right


def format_alias_table(aliases: Iterable[tuple[str, str]], file_count: int) -> str:
    """A boxed table of aliases followed by a total line."""
    aliases = list(aliases)
    alias_width = max(max((_size(a) for a, _ in aliases), default=5), 5)
    command_width = max(max((_size(c) for _, c in aliases), default=7), 7)
    widths = (alias_width, command_width)
    lines = [
        _border("┌", "┬", "┐", widths),
        f"│ {'ALIAS'.ljust(alias_width)} │ {'COMMAND'.ljust(command_width)} │",
        _border("├", "┼", "┤", widths),
    ]
    lines.extend(
        f"│ {alias.ljust(alias_width)} │ {command.ljust(command_width)} │"
        for alias, command in aliases
    )
    lines.append(_border("└", "┴", "┘", widths))
    lines.append(f"Total: {len(aliases)} alias(es) across {file_count} file(s)")
    return "\n".join(lines)


def format_suggestion_table(items: Iterable[tuple[Command, str | None]]) -> str:
    """A boxed table of commands, their top alias and score, with a total line."""
    items = list(items)
    command_width = max(max((_size(c.command_text) for c, _ in items), default=7), 7)
    alias_width = max(max((_size(a) if a else 0 for _, a in items), default=9), 9)
    score_width = max(max((len(str(c.score)) for c, _ in items), default=5), 5)
    widths = (command_width, alias_width, score_width)
    lines = [
        _border("┌", "┬", "┐", widths),
        f"│ {'COMMAND'.ljust(command_width)} │ {'TOP ALIAS'.rjust(alias_width)} "
        f"│ {'SCORE'.rjust(score_width)} │",
        _border("├", "┼", "┤", widths),
    ]
    for command, alias in items:
        lines.append(
            f"│ {command.command_text.ljust(command_width)} │ "
            f"{(alias or '').rjust(alias_width)} │ {str(command.score).rjust(score_width)} │"
        )
    lines.append(_border("└", "┴", "┘", widths))
    lines.append(f"Total: {len(items)} suggestion(s)")
    return "\n".join(lines)


def _program_name() -> str | None:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return None


def _current_default_path() -> str:
    config = load_config()
    if config is not None and config.alias_file_paths:
        return to_absolute_path(config.alias_file_paths[0])
    return default_alias_file_path()


def _print_help(parser: argparse.ArgumentParser) -> None:
    print(f"Current default alias file path: {_color(_current_default_path(), _GREEN)}\n")
    parser.print_help()
    print()


def _save_state(db: Database | None, deleted: DeletedCommands) -> None:
    if db is not None:
        try:
            save_database(db, database_path())
        except OSError as exc:
            _error(f"Failed to save database: {exc}")
    try:
        save_deleted_commands(deleted, deleted_commands_path())
    except OSError as exc:
        _error(f"Failed to save deleted commands: {exc}")


def _load_state() -> tuple[Database, DeletedCommands]:
    try:
        db = load_database(database_path())
    except (OSError, ValueError) as exc:
        _error(f"Failed to load database: {exc}")
        db = Database()
    try:
        deleted = load_deleted_commands(deleted_commands_path())
    except (OSError, ValueError) as exc:
        _error(f"Failed to load deleted commands: {exc}")
        deleted = DeletedCommands()
    return db, deleted


def _print_source_message() -> None:
    print(source_message(os.environ.get("SHELL", "")))


def _run_custom(args: list[str]) -> int:
    if len(args) < 2:
        name = _program_name() or "alman"
        print(f"Usage: {name} custom <command>", file=sys.stderr)
        print(f"Example: {name} custom 'ls -la'", file=sys.stderr)
        return 1
    db, deleted = _load_state()
    insert_command(" ".join(args[1:]), db, deleted, _program_name())
    _save_state(db, deleted)
    return 0


def _get_suggestions(num: int | None, db: Database, alias_paths: list[str]) -> int:
    total = len(db)
    if num is not None:
        if num == 0:
            _error("Number of suggestions must be greater than 0.")
            return 1
        if num > total:
            _error(
                f"Requested number of suggestions (n = {num}) exceeds total "
                f"available commands ({total})."
            )
            return 1
    primary = alias_paths[0] if alias_paths else default_alias_file_path()
    results = get_suggestions_with_aliases(num, db, primary)
    if not results:
        print(_color("No suggestions found.", _YELLOW))
        return 0
    rows = []
    for item in results:
        top = next(
            (s.alias for s in item.alias_suggestions if not is_system_command(s.alias)),
            None,
        )
        rows.append((item.command, top))
    print(format_suggestion_table(rows))
    return 0


def _init_data() -> int:
    try:
        ensure_data_directory()
    except OSError as exc:
        print(f"Failed to create data directory: {exc}", file=sys.stderr)
        return 1
    if load_config() is None:
        try:
            save_config(AppConfig([default_alias_file_path()]))
        except OSError as exc:
            print(f"Failed to save config: {exc}", file=sys.stderr)
    if not Path(database_path()).exists():
        try:
            save_database(Database(), database_path())
        except OSError as exc:
            print(f"Failed to create database file: {exc}", file=sys.stderr)
    if not Path(deleted_commands_path()).exists():
        try:
            save_deleted_commands(DeletedCommands(), deleted_commands_path())
        except OSError as exc:
            print(f"Failed to create deleted commands file: {exc}", file=sys.stderr)
    alias_path = Path(default_alias_file_path())
    if not alias_path.exists():
        try:
            alias_path.write_text("# Alman aliases file\n", encoding="utf-8")
        except OSError as exc:
            print(f"Failed to create alias file: {exc}", file=sys.stderr)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if any(arg in ("--help", "-h") for arg in args):
        _print_help(parser)
        return 0

    try:
        ensure_data_directory()
    except OSError as exc:
        print(f"Failed to create data directory: {exc}", file=sys.stderr)
        return 1

    config = load_config()
    alias_paths = list(config.alias_file_paths) if config else [default_alias_file_path()]

    if not args:
        _print_help(parser)
        return 0

    if args[0] == "custom":
        return _run_custom(args)

    ns = parser.parse_args(args)

    if ns.alias_file_path is not None:
        chosen = to_absolute_path(ns.alias_file_path)
        if ns.operation is None:
            if chosen in alias_paths:
                alias_paths.remove(chosen)
            alias_paths.insert(0, chosen)
            try:
                save_config(AppConfig(alias_paths))
            except OSError:
                pass
            print(f"Default alias file path set to {_color(chosen, _GREEN)}")
            return 0
        if chosen not in alias_paths:
            alias_paths.append(chosen)
            try:
                save_config(AppConfig(alias_paths))
            except OSError:
                pass

    if ns.operation is None:
        return 0

    db, deleted = _load_state()
    primary = alias_paths[0] if alias_paths else None

    if ns.operation == "add":
        add_alias_to_files(alias_paths, ns.alias, ns.command)
        if primary is not None:
            add_alias(db, deleted, primary, ns.alias, ns.command)
        _save_state(db, deleted)
        _print_source_message()
    elif ns.operation == "remove":
        remove_alias_from_files(alias_paths, ns.alias)
        if primary is not None:
            remove_alias(deleted, primary, ns.alias)
        _save_state(None, deleted)
        _print_source_message()
    elif ns.operation == "list":
        aliases = get_aliases_from_files(alias_paths)
        if not aliases:
            print(_color("No aliases found.", _YELLOW))
            return 0
        print(format_alias_table(aliases, len(alias_paths)))
    elif ns.operation == "change":
        command = next(
            (cmd for name, cmd in get_aliases_from_files(alias_paths) if name == ns.old_alias),
            None,
        )
        if command is None:
            _error(f"Alias '{ns.old_alias}' not found.")
            return 1
        remove_alias_from_files(alias_paths, ns.old_alias)
        if primary is not None:
            remove_alias(deleted, primary, ns.old_alias)
        add_alias_to_files_force(alias_paths, ns.new_alias, command)
        if primary is not None:
            add_alias(db, deleted, primary, ns.new_alias, command)
        _save_state(db, deleted)
        _print_source_message()
    elif ns.operation == "get-suggestions":
        return _get_suggestions(ns.num, db, alias_paths)
    elif ns.operation == "delete-suggestion":
        delete_suggestion(ns.alias, db, deleted)
        print(_color(f"Deleted suggestions for: {ns.alias}", _YELLOW))
        _save_state(db, deleted)
    elif ns.operation == "tui":
        _error("TUI error: the interactive interface is not available in this build")
        return 1
    elif ns.operation == "init":
        print(render_shell_init(ns.shell, ShellOpts.from_environment()))
    elif ns.operation == "init-data":
        return _init_data()
    return 0


if __name__ == "__main__":
    sys.exit(main())