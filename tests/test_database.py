import json

import pytest

from alman.database import (
    SCORE_RESET_THRESHOLD,
    Command,
    Database,
    DeletedCommands,
    compute_score,
)


def make(text, score, frequency=1, timestamp=None):
    cmd = Command.create(text, timestamp)
    cmd.score = score
    cmd.frequency = frequency
    return cmd


def assert_totals_consistent(db):
    assert db.total_num_commands == len(db)
    assert db.total_score == sum(c.score for c in db.commands.values())


def test_create_counts_words_and_length():
    cmd = Command.create("git   status", timestamp=1000)
    assert cmd.length == len("gitstatus")
    assert cmd.number_of_words == 2
    assert cmd.frequency == 1
    assert cmd.last_access_time == 1000
    assert cmd.command_text == "git   status"


def test_score_tiers_decrease_with_age():
    cmd = Command.create("git status", timestamp=1000)
    recent = compute_score(cmd, 1000)
    assert recent > 0
    assert compute_score(cmd, 1000 + 3600) == recent
    day = compute_score(cmd, 1000 + 3601)
    assert day < recent
    assert compute_score(cmd, 1000 + 86400) == day
    week = compute_score(cmd, 1000 + 86401)
    assert week < day
    assert compute_score(cmd, 1000 + 604800) == week
    assert compute_score(cmd, 1000 + 604801) <= week


def test_score_grows_with_frequency():
    cmd = Command.create("docker compose up", timestamp=1000)
    low = compute_score(cmd, 1000)
    cmd.frequency = 10
    assert compute_score(cmd, 1000) > low


def test_touch_increments_frequency():
    cmd = Command.create("git status", timestamp=0)
    cmd.touch()
    assert cmd.frequency == 2
    assert cmd.last_access_time > 0
    assert cmd.score == compute_score(cmd)


def test_ordering_by_score_then_text():
    db = Database()
    db.add_existing(make("bb two", 50))
    db.add_existing(make("zz top", 80))
    db.add_existing(make("aa one", 50))
    assert [c.command_text for c in db.top_commands(3)] == ["zz top", "aa one", "bb two"]


def test_top_commands_defaults_to_five():
    db = Database()
    for i in range(8):
        db.add_existing(make(f"cmd number{i}", 10 + i))
    assert len(db.top_commands()) == 5
    assert len(db.top_commands(2)) == 2


def test_add_command_ignores_short_single_word():
    db = Database()
    deleted = DeletedCommands()
    db.add_command("ls", deleted)
    db.add_command("ls -la", deleted)
    assert "ls" not in db
    assert "ls -la" in db
    assert_totals_consistent(db)


def test_add_command_repeat_increments_frequency():
    db = Database()
    deleted = DeletedCommands()
    db.add_command("git status", deleted)
    db.add_command("git status", deleted)
    assert db.get("git status").frequency == 2
    assert_totals_consistent(db)


def test_add_command_skips_deleted():
    db = Database()
    deleted = DeletedCommands({"git status"})
    db.add_command("git status", deleted)
    assert len(db) == 0


def test_remove_command_marks_deleted():
    db = Database()
    deleted = DeletedCommands()
    db.add_command("git status", deleted)
    db.add_command("git push origin", deleted)
    db.remove_command("git status", deleted)
    assert "git status" in deleted
    assert "git status" not in db
    assert_totals_consistent(db)
    db.add_command("git status", deleted)
    assert "git status" not in db


def test_remove_unknown_still_recorded():
    db = Database()
    deleted = DeletedCommands()
    db.remove_command("never seen", deleted)
    assert list(deleted) == ["never seen"]


def test_add_existing_merges_frequency():
    db = Database()
    db.add_existing(Command.create("git status"))
    extra = Command.create("git status")
    extra.frequency = 3
    db.add_existing(extra)
    assert db.get("git status").frequency == 4
    assert_totals_consistent(db)


def test_add_existing_ignores_trivial():
    db = Database()
    db.add_existing(Command.create("git"))
    assert len(db) == 0


def test_score_reset_halves_rounding_up():
    db = Database()
    db.add_existing(make("git status", 1, frequency=4))
    db.add_existing(make("git push", 1, frequency=3))
    db.add_existing(make("git pull", 1, frequency=1))
    db.score_reset()
    assert db.get("git status").frequency == 2
    assert db.get("git push").frequency == 2
    assert db.get("git pull").frequency == 1
    assert_totals_consistent(db)


def test_score_reset_drops_zero_frequency():
    db = Database()
    db.add_existing(make("git status", 1, frequency=0))
    db.add_existing(make("git push", 1, frequency=2))
    db.score_reset()
    assert "git status" not in db
    assert "git push" in db
    assert_totals_consistent(db)


def test_threshold_triggers_reset():
    db = Database()
    db.add_existing(make("git status", SCORE_RESET_THRESHOLD + 1, frequency=10000))
    assert db.get("git status").frequency == 5000
    assert_totals_consistent(db)


def test_update_keeps_totals_consistent():
    db = Database()
    db.add_existing(make("git status", 999, frequency=2))
    db.update()
    cmd = db.get("git status")
    assert cmd.score == compute_score(cmd)
    assert_totals_consistent(db)


def test_database_round_trip_through_json():
    db = Database()
    deleted = DeletedCommands()
    db.add_command("git status", deleted)
    db.add_command("cargo build --release", deleted)
    data = json.loads(json.dumps(db.to_dict()))
    restored = Database.from_dict(data)
    assert restored == db
    assert [c["command_text"] for c in data["command_list"]] == [
        c.command_text for c in db.ordered()
    ]


def test_database_from_dict_malformed():
    with pytest.raises(ValueError):
        Database.from_dict({"command_list": []})
    with pytest.raises(ValueError):
        Command.from_dict({"score": 1})


def test_deleted_commands_round_trip_sorted():
    deleted = DeletedCommands({"zz", "aa"})
    data = deleted.to_dict()
    assert data == {"deleted_commands": ["aa", "zz"]}
    assert DeletedCommands.from_dict(data) == deleted


def test_deleted_commands_from_dict_malformed():
    with pytest.raises(ValueError):
        DeletedCommands.from_dict({"deleted_commands": "oops"})