"""Shell integration scripts for bash, zsh, fish and POSIX shells."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from alman import persistence


class InitShell(enum.Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POSIX = "posix"

    @classmethod
    def _missing_(cls, value: object) -> "InitShell | None":
        if value == "ksh":
            return cls.POSIX
        return None


@dataclass
class ShellOpts:
    """Values substituted into the generated scripts."""

    app_path: str
    data_dir: str
    alias_file_path: str

    @classmethod
    def from_environment(cls) -> "ShellOpts":
        """Options for the running program and the current user's configuration."""
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""
        app_path = os.path.abspath(argv0) if argv0 else "alman"
        try:
            data_dir = str(persistence.ensure_data_directory())
        except OSError:
            data_dir = str(Path(".") / ".alman")
        config = persistence.load_config()
        if config is not None and config.alias_file_paths:
            alias_file_path = config.alias_file_paths[0]
        else:
            alias_file_path = persistence.default_alias_file_path()
        return cls(app_path=app_path, data_dir=data_dir, alias_file_path=alias_file_path)


def _header(title: str, rc_hint: str, opts: ShellOpts, fish: bool = False) -> list[str]:
    if fish:
        exports = [
            f'set -gx ALMAN_DATA_DIR "{opts.data_dir}"',
            f'set -gx ALMAN_BIN "{opts.app_path}"',
        ]
    else:
        exports = [
            f'export ALMAN_DATA_DIR="{opts.data_dir}"',
            f'export ALMAN_BIN="{opts.app_path}"',
        ]
    return [f"# Alman shell integration for {title}", f"# Add this to your {rc_hint}", "", *exports, ""]


_EXTRACT = "cat \"$ALMAN_DATA_DIR/config.json\" | grep -o '\"[^\"]*aliases[^\"]*\"' | tr -d '\"'"


def _sh_source_function(opts: ShellOpts, source: str) -> list[str]:
    return [
        "alman_source_aliases() {",
        "    # Source all alias files from alman config",
        f'    if [ -f "{opts.data_dir}/config.json" ]; then',
        "        # Extract alias file paths from config and source them",
        f"        local alias_files=$({_EXTRACT})",
        "        for file in $alias_files; do",
        '            if [ -f "$file" ]; then',
        f'                {source} "$file"',
        "            fi",
        "        done",
        "    else",
        "        # Fallback to default alias file",
        f'        if [ -f "{opts.alias_file_path}" ]; then',
        f'            {source} "{opts.alias_file_path}"',
        "        fi",
        "    fi",
        "}",
        "",
    ]


def _simple_preexec(opts: ShellOpts) -> list[str]:
    return [
        "alman_preexec() {",
        '    if [ -n "$1" ]; then',
        f'        {opts.app_path} custom "$1" 2>/dev/null',
        "    fi",
        "}",
        "",
    ]


_STARTUP = ["# Source aliases on shell startup", "alman_source_aliases"]


def _render_bash(opts: ShellOpts) -> list[str]:
    return [
        *_header("bash", "~/.bashrc", opts),
        "alman_preexec() {",
        "    # Skip if no command or if it's an alman internal command",
        '    if [ -n "$1" ] && [[ "$1" != alman_source_aliases* ]] '
        '&& [[ "$1" != alman_preexec* ]] && [[ "$1" != trap* ]]; then',
        f'        {opts.app_path} custom "$1" >/dev/null 2>&1',
        "    fi",
        "}",
        "",
        *_sh_source_function(opts, "source"),
        "# Initialize alman data directory and files",
        f"{opts.app_path} init-data >/dev/null 2>&1",
        "",
        "# Set up command tracking for interactive bash shells",
        'if [ -n "$BASH_VERSION" ] && [ -n "$PS1" ]; then',
        "    # Use DEBUG trap to capture commands before execution",
        "    trap 'alman_preexec \"$BASH_COMMAND\"' DEBUG",
        "fi",
        "",
        "# Source aliases on shell startup (don't track this command)",
        "alman_source_aliases",
    ]


def _render_zsh(opts: ShellOpts) -> list[str]:
    return [
        *_header("zsh", "~/.zshrc", opts),
        *_simple_preexec(opts),
        *_sh_source_function(opts, "source"),
        "autoload -U add-zsh-hook",
        "add-zsh-hook preexec alman_preexec",
        "",
        *_STARTUP,
    ]


def _render_fish(opts: ShellOpts) -> list[str]:
    return [
        *_header("fish", "~/.config/fish/config.fish", opts, fish=True),
        "function alman_preexec --on-event fish_preexec",
        '    if test -n "$argv[1]"',
        f'        {opts.app_path} custom "$argv[1]" 2>/dev/null',
        "    end",
        "end",
        "",
        "function alman_source_aliases",
        "    # Source all alias files from alman config",
        f'    if test -f "{opts.data_dir}/config.json"',
        "        # Extract alias file paths from config and source them",
        f"        for file in ({_EXTRACT})",
        '            if test -f "$file"',
        '                source "$file"',
        "            end",
        "        end",
        "    else",
        "        # Fallback to default alias file",
        f'        if test -f "{opts.alias_file_path}"',
        f'            source "{opts.alias_file_path}"',
        "        end",
        "    end",
        "end",
        "",
        *_STARTUP,
    ]


def _render_posix(opts: ShellOpts) -> list[str]:
    return [
        *_header("POSIX shells (ksh, dash, etc.)", "~/.profile or ~/.kshrc", opts),
        *_simple_preexec(opts),
        *_sh_source_function(opts, "."),
        "# Note: POSIX shells don't have built-in preexec hooks",
        "# You may need to manually call alman_preexec in your PS1",
        "# Example: PS1='$(alman_preexec $?) $ '",
        "",
        *_STARTUP,
    ]


_RENDERERS = {
    InitShell.BASH: _render_bash,
    InitShell.ZSH: _render_zsh,
    InitShell.FISH: _render_fish,
    InitShell.POSIX: _render_posix,
}


def render_shell_init(shell: InitShell | str, opts: ShellOpts) -> str:
    """The integration script for ``shell``; raises ValueError for unknown shells."""
    lines = _RENDERERS[InitShell(shell)](opts)
    return "\n".join(lines) + "\n"