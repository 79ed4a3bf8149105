from alman import ops
from alman.aliases import get_aliases, write_aliases
from alman.database import Database, DeletedCommands


def test_insert_command_records_prefixes():
    db = Database()
    ops.insert_command("git add .", db, DeletedCommands())
    assert "git" not in db
    assert "git add" in db
    assert "git add ." in db


def test_insert_command_counts_full_command_twice():
    db = Database()
    ops.insert_command("git status", db, DeletedCommands())
    assert db.get("git status").frequency == 2


def test_insert_command_keeps_original_spacing_for_full_entry():
    db = Database()
    ops.insert_command("  git  status  ", db, DeletedCommands())
    assert db.get("git status").frequency == 1
    assert db.get("git  status").frequency == 1


def test_insert_command_skips_own_program():
    db = Database()
    ops.insert_command("alman list all", db, DeletedCommands(), program_name="alman")
    assert len(db) == 0


def test_insert_command_ignores_blank():
    db = Database()
    ops.insert_command("   ", db, DeletedCommands())
    assert len(db) == 0


def test_insert_command_respects_deleted():
    db = Database()
    deleted = DeletedCommands({"git status"})
    ops.insert_command("git status", db, deleted)
    assert "git status" not in db


def test_add_alias_marks_deleted_and_writes(tmp_path):
    path = tmp_path / "aliases"
    db = Database()
    deleted = DeletedCommands()
    ops.insert_command("git status", db, deleted)
    ops.add_alias(db, deleted, path, "gs", "git status")
    assert "git status" not in db
    assert "git status" in deleted
    assert get_aliases(path) == [("gs", "git status")]


def test_remove_alias_undeletes_command(tmp_path):
    path = tmp_path / "aliases"
    write_aliases(path, [("gs", "git status"), ("gp", "git push")])
    deleted = DeletedCommands({"git status", "git push"})
    ops.remove_alias(deleted, path, "gs")
    assert "git status" not in deleted
    assert "git push" in deleted
    assert get_aliases(path) == [("gp", "git push")]


def test_delete_suggestion_removes_command():
    db = Database()
    deleted = DeletedCommands()
    ops.insert_command("ls -la", db, deleted)
    ops.delete_suggestion("ls -la", db, deleted)
    assert "ls -la" not in db
    assert "ls -la" in deleted
    assert db.total_num_commands == len(db)