# alman

`alman` manages shell aliases and suggests new ones based on the commands
you actually type. It records your commands, scores them by length,
frequency and recency, and proposes short aliases for the ones worth
shortening.

## Installation

```sh
pip install .
```

This installs the `alman` command. The package has no dependencies outside
the standard library.

## Shell integration

`alman init <shell>` prints a script for your shell's startup file. The
script records each command you run (through `alman custom`), sets up the
data directory (through `alman init-data`), and sources your alias files:

```sh
# bash (~/.bashrc)
eval "$(alman init bash)"

# zsh (~/.zshrc)
eval "$(alman init zsh)"

# fish (~/.config/fish/config.fish)
alman init fish | source
```

`posix` (or its other name `ksh`) is also accepted. POSIX shells have no
preexec hook, so the generated script defines `alman_preexec` but does not
call it for you.

## Usage

```sh
alman add --command "git status" gs    # add an alias
alman remove gs                        # remove an alias
alman change old-alias new-alias       # rename an alias, keeping its command
alman list                             # show all aliases in a table
alman get-suggestions -n 10            # top commands with a suggested alias
alman delete-suggestion "git status"   # stop tracking and suggesting a command
alman custom git status                # record a command by hand
alman init-data                        # create the data directory and files
```

`alman -h` prints the current default alias file followed by the help text.
Running `alman` with no arguments does the same.

`get-suggestions` shows 5 commands unless `-n` is given; `-n` must be greater
than 0 and no larger than the number of tracked commands. For each command
it shows the best-ranked suggested alias that is not an executable on your
`$PATH`. Suggestions that clash with an existing alias in the default alias
file, with a program on `$PATH` or with an alias defined by your `$SHELL`
are left out.

When a command is given an alias with `add`, `alman` stops tracking and
suggesting it. When the alias is removed, the command can be tracked again.

Commands of one word and at most five characters are not tracked. Recording
a command also records each of its leading word prefixes (`git`, `git add`,
`git add .`). Commands whose first word is the name `alman` was run under are
ignored.

Colour is used when output goes to a terminal and `NO_COLOR` is not set.

## Alias files

Aliases are stored as plain `alias name='command'` lines. The default file
is `~/.alman/aliases`. To make another file the default:

```sh
alman --alias-file-path ~/.my_aliases
```

Passing `--alias-file-path` (or `-a`) together with a subcommand adds the
file to the configured list without making it the default. Every configured
file is read by `list` and `change`, and `remove` removes the alias from
every file that defines it. New aliases are written to the default (first)
file, and `add` does nothing if any configured file already defines the
name.

## Data

Everything `alman` keeps lives in `~/.alman/`:

- `config.json` — the list of alias files, default first
- `command_database.json` — the tracked commands and their scores
- `deleted_commands.json` — commands that will no longer be tracked or suggested

When the command database is empty, it is seeded from your shell history
(`$HISTFILE`, or the first of `~/.zsh_history`, `~/.bash_history`,
`~/.history`, `~/.fish_history` that exists). Zsh extended-history lines and
fish `- cmd:` lines are understood.

Once the total score of all commands passes 10000, every frequency is halved
and commands that fall to zero are dropped.

## Library use

The modules can be used directly:

- `alman.database` — `Database`, `Command`, `DeletedCommands`, `compute_score`
- `alman.history` — `parse_history`, `extract_command`, `initialize_from_history`
- `alman.aliases` — reading and writing alias files
- `alman.ops` — `add_alias`, `remove_alias`, `delete_suggestion`, `insert_command`
- `alman.alias_generators` — the individual alias heuristics and `candidate_aliases`
- `alman.suggestions` — `AliasSuggester`, `priority`, `get_suggestions_with_aliases`
- `alman.shell` — `InitShell`, `ShellOpts`, `render_shell_init`
- `alman.persistence` — file locations and JSON storage

## What it does not do

There is no interactive terminal interface. `alman tui` is accepted but only
reports an error and exits with status 1.