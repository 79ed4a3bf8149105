"""Candidate alias names generated from a command line by several heuristics."""

from __future__ import annotations

from dataclasses import dataclass

_VOWELS = "aeiouAEIOU"
_PREFIXES = ("un", "re", "pre", "post", "anti", "pro", "sub", "super", "inter")
_SUFFIXES = ("ing", "ed", "er", "est", "ly", "tion", "sion", "ment")
_PHONETIC_RULES = (
    ("ph", "f"),
    ("ck", "k"),
    ("qu", "kw"),
    ("x", "ks"),
    ("ch", "c"),
    ("sh", "s"),
    ("th", "t"),
)


@dataclass(frozen=True)
class AliasSuggestion:
    """A proposed alias for a command and why it was proposed."""

    alias: str
    command: str
    reason: str


def _size(text: str) -> int:
    """Length of ``text`` in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def _first(text: str) -> str:
    return text[0] if text else "x"


def _is_relative(tool: str) -> bool:
    return tool.startswith("./") or tool.startswith("../")


def _git_alias(subcommand: str, rest: list[str]) -> AliasSuggestion | None:
    simple = {
        "status": ("gs", "git status", "Git status"),
        "push": ("gp", "git push", "Git push"),
        "pull": ("gl", "git pull", "Git pull"),
        "log": ("glg", "git log", "Git log"),
        "branch": ("gb", "git branch", "Git branch"),
    }
    if subcommand in simple:
        return AliasSuggestion(*simple[subcommand])
    if subcommand == "add":
        if rest and rest[0] == ".":
            return AliasSuggestion("gaa", "git add .", "Git add all")
        return AliasSuggestion("ga", "git add", "Git add")
    if subcommand == "commit":
        if len(rest) >= 2 and rest[0] == "-m":
            return AliasSuggestion("gcm", f'git commit -m "{rest[1]}"', "Git commit with message")
        return AliasSuggestion("gc", "git commit", "Git commit")
    if subcommand == "checkout":
        if len(rest) >= 2 and rest[0] == "-b":
            return AliasSuggestion("gcb", f"git checkout -b {rest[1]}", "Git checkout new branch")
        return AliasSuggestion("gco", "git checkout", "Git checkout")
    return None


_DOCKER = {
    "ps": ("dps", "docker ps", "Docker ps"),
    "run": ("dr", "docker run", "Docker run"),
    "build": ("db", "docker build", "Docker build"),
    "exec": ("de", "docker exec", "Docker exec"),
    "rm": ("drm", "docker rm", "Docker rm"),
    "rmi": ("drmi", "docker rmi", "Docker rmi"),
}

_NPM = {
    "install": ("ni", "npm install", "NPM install"),
    "run": ("nr", "npm run", "NPM run"),
    "start": ("ns", "npm start", "NPM start"),
    "test": ("nt", "npm test", "NPM test"),
    "publish": ("np", "npm publish", "NPM publish"),
}


def _ssh_alias(host: str) -> AliasSuggestion | None:
    short_name = host.split(".")[0]
    if _size(short_name) >= 2:
        return AliasSuggestion(short_name, f"ssh {host}", f"SSH to {host}")
    return None


def _tool_specific_alias(tool: str, args: list[str]) -> AliasSuggestion | None:
    if not args:
        return None
    subcommand, rest = args[0], args[1:]
    if tool == "git":
        return _git_alias(subcommand, rest)
    if tool == "docker":
        entry = _DOCKER.get(subcommand)
        return AliasSuggestion(*entry) if entry else None
    if tool == "npm":
        entry = _NPM.get(subcommand)
        return AliasSuggestion(*entry) if entry else None
    if tool == "ssh":
        return _ssh_alias(subcommand)
    return None


def _relative_path_aliases(command: str, tool: str, args: list[str]) -> list[AliasSuggestion]:
    executable = tool.split("/")[-1]
    name = executable[: -len(".exe")] if executable.endswith(".exe") else executable
    suggestions = [AliasSuggestion(name, command, "Executable name")]
    if _size(executable) > 2:
        suggestions.append(AliasSuggestion(executable[:3], command, "Executable abbreviation"))
    if args:
        first_arg = args[0]
        suggestions.append(
            AliasSuggestion(
                f"{_first(executable)}{first_arg}",
                command,
                f"{executable}-{first_arg} combination",
            )
        )
    return suggestions


def semantic_aliases(command: str) -> list[AliasSuggestion]:
    """Tool-aware aliases (git, docker, npm, ssh, relative paths) and tool+subcommand."""
    parts = command.split()
    if not parts:
        return []
    tool, args = parts[0], parts[1:]
    if _is_relative(tool):
        return _relative_path_aliases(command, tool, args)
    suggestions = []
    specific = _tool_specific_alias(tool, args)
    if specific is not None:
        suggestions.append(specific)
    if args:
        subcommand = args[0]
        suggestions.append(
            AliasSuggestion(
                f"{_first(tool)}{subcommand}", command, f"{tool}-{subcommand} combination"
            )
        )
    return suggestions


def abbreviation_aliases(command: str) -> list[AliasSuggestion]:
    """First letter of each word, for commands of two to four words."""
    parts = command.split()
    if len(parts) < 2:
        return []
    abbreviation = "".join(part[0] for part in parts)
    if 2 <= _size(abbreviation) <= 4:
        return [AliasSuggestion(abbreviation, command, "Abbreviation")]
    return []


def vowel_removal_aliases(command: str) -> list[AliasSuggestion]:
    """Up to three consonants from each word, joined and capped at eight characters."""
    pieces = []
    for word in command.split():
        consonants = "".join(c for c in word if c not in _VOWELS)[:3]
        if consonants:
            pieces.append(consonants)
    if not pieces:
        return []
    combined = "".join(pieces)
    if _size(combined) > 8:
        combined = combined[:8]
    if _size(combined) >= 2 and combined != command:
        return [AliasSuggestion(combined, command, "Vowel Removal")]
    return []


def combined_aliases(command: str) -> list[AliasSuggestion]:
    """The tool's first letter joined with its first or second argument."""
    parts = command.split()
    if len(parts) < 2:
        return []
    tool, args = parts[0], parts[1:]
    suggestions = []
    for arg in args[:2]:
        if _size(arg) >= 2:
            suggestions.append(
                AliasSuggestion(f"{_first(tool)}{arg}", command, f"{tool}-{arg} combination")
            )
    return suggestions


def single_word_aliases(command: str) -> list[AliasSuggestion]:
    """Short forms of a one-word command."""
    parts = command.split()
    if len(parts) != 1:
        return []
    tool = parts[0]
    if _is_relative(tool):
        return []
    suggestions = []
    if _size(tool) > 3:
        suggestions.append(AliasSuggestion(tool[:3], command, "3-letter abbreviation"))
    if _size(tool) > 2:
        suggestions.append(AliasSuggestion(tool[:2], command, "2-letter abbreviation"))
        suggestions.append(AliasSuggestion(f"{tool[0]}{tool[-1]}", command, "First-last character"))
    if "git" in tool:
        suggestions.append(AliasSuggestion("lg", command, "LazyGit abbreviation"))
    if "docker" in tool:
        suggestions.append(AliasSuggestion("dk", command, "Docker abbreviation"))
    if "node" in tool:
        suggestions.append(AliasSuggestion("nd", command, "Node abbreviation"))
    return suggestions


def truncated_aliases(command: str) -> list[AliasSuggestion]:
    """Prefixes of the tool name of two to five characters."""
    parts = command.split()
    if not parts:
        return []
    tool = parts[0]
    suggestions = []
    for size in range(2, min(_size(tool), 5) + 1):
        truncated = tool[:size]
        if truncated != tool:
            suggestions.append(AliasSuggestion(truncated, command, f"Truncated to {size} chars"))
    return suggestions


def extract_syllables(word: str) -> list[str]:
    """Split a word into rough syllables, breaking after each run of vowels."""
    syllables = []
    current = ""
    prev_vowel = False
    for char in word:
        if char in _VOWELS:
            current += char
            prev_vowel = True
        else:
            if prev_vowel and current:
                syllables.append(current)
                current = ""
            current += char
            prev_vowel = False
    if current:
        syllables.append(current)
    return syllables


def syllable_aliases(command: str) -> list[AliasSuggestion]:
    """First letter of each syllable of every longer word."""
    suggestions = []
    for word in command.split():
        if _size(word) <= 3:
            continue
        syllables = extract_syllables(word)
        if len(syllables) < 2:
            continue
        alias = "".join(_first(s) for s in syllables)
        if 2 <= _size(alias) <= 4:
            suggestions.append(AliasSuggestion(alias, command, "Syllable-based"))
    return suggestions


def phonetic_aliases(command: str) -> list[AliasSuggestion]:
    """Words rewritten with common phonetic simplifications."""
    suggestions = []
    for word in command.split():
        if _size(word) <= 2:
            continue
        phonetic = word
        for old, new in _PHONETIC_RULES:
            phonetic = phonetic.replace(old, new)
        if phonetic != word and 2 <= _size(phonetic) <= 6:
            suggestions.append(AliasSuggestion(phonetic, command, "Phonetic"))
    return suggestions


def keyboard_pattern_aliases(command: str) -> list[AliasSuggestion]:
    """Every other character of each word."""
    suggestions = []
    for word in command.split():
        if _size(word) <= 2:
            continue
        pattern = word[::2]
        if 2 <= _size(pattern) <= 4:
            suggestions.append(AliasSuggestion(pattern, command, "Keyboard pattern"))
    return suggestions


def smart_prefix_aliases(command: str) -> list[AliasSuggestion]:
    """Words with a common English prefix or suffix removed."""
    suggestions = []
    for word in command.split():
        if _size(word) <= 3:
            continue
        for prefix in _PREFIXES:
            if word.startswith(prefix):
                rest = word[len(prefix):]
                if _size(rest) >= 2:
                    suggestions.append(
                        AliasSuggestion(rest, command, f"Remove prefix '{prefix}'")
                    )
        for suffix in _SUFFIXES:
            if word.endswith(suffix):
                rest = word[: -len(suffix)]
                if _size(rest) >= 2:
                    suggestions.append(
                        AliasSuggestion(rest, command, f"Remove suffix '{suffix}'")
                    )
    return suggestions


def _collapse_repeats(word: str) -> str:
    collapsed = []
    for char in word:
        if not collapsed or collapsed[-1] != char:
            collapsed.append(char)
    return "".join(collapsed)


def common_pattern_aliases(command: str) -> list[AliasSuggestion]:
    """Words with doubled letters collapsed, and their first three consonants."""
    suggestions = []
    for word in command.split():
        if _size(word) <= 3:
            continue
        collapsed = _collapse_repeats(word)
        if _size(collapsed) >= 2 and collapsed != word:
            suggestions.append(AliasSuggestion(collapsed, command, "Remove duplicates"))
        if _size(word) > 4:
            consonants = [c for c in word if c not in _VOWELS]
            if len(consonants) >= 3:
                suggestions.append(
                    AliasSuggestion("".join(consonants[:3]), command, "Smart consonants")
                )
    return suggestions


_GENERATORS = (
    semantic_aliases,
    abbreviation_aliases,
    vowel_removal_aliases,
    combined_aliases,
    single_word_aliases,
    truncated_aliases,
    syllable_aliases,
    phonetic_aliases,
    keyboard_pattern_aliases,
    smart_prefix_aliases,
    common_pattern_aliases,
)


def candidate_aliases(command: str) -> list[AliasSuggestion]:
    """Every generator's suggestions, in generator order, unfiltered."""
    return [suggestion for generate in _GENERATORS for suggestion in generate(command)]