import json
from pathlib import Path

import pytest

from alman import persistence
from alman.database import Command, Database, DeletedCommands
from alman.persistence import AppConfig


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("HISTFILE", str(tmp_path / "no_history"))
    return tmp_path


def test_paths_live_in_data_directory(home):
    data = home / ".alman"
    assert persistence.data_directory() == data
    assert persistence.config_path() == str(data / "config.json")
    assert persistence.database_path() == str(data / "command_database.json")
    assert persistence.deleted_commands_path() == str(data / "deleted_commands.json")
    assert persistence.default_alias_file_path() == str(data / "aliases")


def test_ensure_data_directory_creates_it(home):
    result = persistence.ensure_data_directory()
    assert result.is_dir()
    assert result == home / ".alman"


def test_config_round_trip(home):
    persistence.ensure_data_directory()
    config = AppConfig(["/a/aliases", "/b/aliases"])
    persistence.save_config(config)
    assert persistence.load_config() == config


def test_load_config_missing_returns_none(home):
    assert persistence.load_config() is None


def test_load_config_invalid_returns_none(home):
    persistence.ensure_data_directory()
    Path(persistence.config_path()).write_text("{not json")
    assert persistence.load_config() is None


def test_database_round_trip(home, tmp_path):
    db = Database()
    deleted = DeletedCommands()
    db.add_command("git status", deleted)
    db.add_command("ls -la /tmp", deleted)
    path = tmp_path / "db.json"
    persistence.save_database(db, path)
    loaded = persistence.load_database(path)
    assert set(loaded.commands) == set(db.commands)
    assert loaded.total_score == db.total_score
    assert loaded.total_num_commands == db.total_num_commands


def test_saved_database_uses_expected_keys(home, tmp_path):
    db = Database()
    db.add_existing(Command.create("git status"))
    path = tmp_path / "db.json"
    persistence.save_database(db, path)
    data = json.loads(path.read_text())
    assert set(data) == {"command_list", "reverse_command_map", "total_num_commands", "total_score"}


def test_load_database_missing_without_history_is_empty(home, tmp_path):
    db = persistence.load_database(tmp_path / "missing.json")
    assert len(db) == 0


def test_load_database_seeds_from_history(home, tmp_path, monkeypatch):
    history = tmp_path / "hist"
    history.write_text("git commit -m msg\n")
    monkeypatch.setenv("HISTFILE", str(history))
    db = persistence.load_database(tmp_path / "missing.json")
    assert "git commit -m msg" in db


def test_load_database_invalid_json_raises(home, tmp_path):
    path = tmp_path / "db.json"
    path.write_text("garbage")
    with pytest.raises(ValueError):
        persistence.load_database(path)


def test_deleted_commands_round_trip(tmp_path):
    deleted = DeletedCommands({"git status", "ls -la"})
    path = tmp_path / "deleted.json"
    persistence.save_deleted_commands(deleted, path)
    assert persistence.load_deleted_commands(path).commands == deleted.commands


def test_load_deleted_commands_missing_is_empty(tmp_path):
    assert len(persistence.load_deleted_commands(tmp_path / "none.json")) == 0