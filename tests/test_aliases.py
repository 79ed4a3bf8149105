from alman import aliases


def test_missing_file_is_created_empty(tmp_path):
    path = tmp_path / "aliases"
    assert aliases.get_aliases(path) == []
    assert path.exists()


def test_parse_various_lines(tmp_path):
    path = tmp_path / "aliases"
    path.write_text(
        "# comment\n"
        "alias gs='git status'\n"
        'alias ll="ls -la"\n'
        "   alias x = y   \n"
        "alias broken\n"
        "export FOO=bar\n"
    )
    assert aliases.get_aliases(path) == [("gs", "git status"), ("ll", "ls -la"), ("x", "y")]


def test_write_format(tmp_path):
    path = tmp_path / "aliases"
    aliases.write_aliases(path, [("gs", "git status")])
    assert path.read_text() == "alias gs='git status'\n"


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "aliases"
    pairs = [("gs", "git status"), ("gp", "git push")]
    aliases.write_aliases(path, pairs)
    assert aliases.get_aliases(path) == pairs


def test_add_does_not_duplicate(tmp_path):
    path = tmp_path / "aliases"
    assert aliases.add_alias_to_file(path, "gs", "git status") is True
    assert aliases.add_alias_to_file(path, "gs", "git stash") is False
    assert aliases.get_aliases(path) == [("gs", "git status")]


def test_remove_from_file(tmp_path):
    path = tmp_path / "aliases"
    aliases.write_aliases(path, [("gs", "git status"), ("gp", "git push")])
    assert aliases.remove_alias_from_file(path, "gs") is True
    assert aliases.get_aliases(path) == [("gp", "git push")]
    assert aliases.remove_alias_from_file(path, "gs") is False


def test_multiple_files(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    aliases.write_aliases(second, [("gp", "git push")])
    paths = [str(first), str(second)]
    assert aliases.add_alias_to_files(paths, "gp", "other") is False
    assert aliases.add_alias_to_files(paths, "gs", "git status") is True
    assert aliases.get_aliases(first) == [("gs", "git status")]
    assert aliases.get_aliases_from_files(paths) == [("gs", "git status"), ("gp", "git push")]


def test_force_add_only_checks_primary(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    aliases.write_aliases(second, [("gp", "git push")])
    assert aliases.add_alias_to_files_force([first, second], "gp", "git push") is True
    assert aliases.get_aliases(first) == [("gp", "git push")]


def test_force_add_no_paths():
    assert aliases.add_alias_to_files_force([], "gs", "git status") is False


def test_remove_from_all_files(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    aliases.write_aliases(first, [("gs", "git status")])
    aliases.write_aliases(second, [("gs", "git status"), ("gp", "git push")])
    assert aliases.remove_alias_from_files([first, second], "gs") is True
    assert aliases.get_aliases_from_files([first, second]) == [("gp", "git push")]
    assert aliases.remove_alias_from_files([first, second], "gs") is False