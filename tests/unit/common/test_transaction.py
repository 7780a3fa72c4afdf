from pathlib import Path

from berry.common import TransactionManager


def test_staged_operations_touch_nothing_until_commit(tmp_path: Path):
    tm = TransactionManager(tmp_path)
    tm.add_ensure_dir("stubs/App")
    tm.add_write("stubs/App/User.php", "<?php\n")

    assert tm.preview() == ["[MKDIR] stubs/App", "[WRITE] stubs/App/User.php"]
    assert not (tmp_path / "stubs").exists()

    tm.commit()

    assert (tmp_path / "stubs" / "App").is_dir()
    assert (tmp_path / "stubs" / "App" / "User.php").read_text() == "<?php\n"
    assert tm.pending_count == 0


def test_commit_overwrites_existing_files(tmp_path: Path):
    target = tmp_path / "User.php"
    target.write_text("stale")

    tm = TransactionManager(tmp_path)
    tm.add_write("User.php", "fresh\n")
    tm.commit()

    assert target.read_bytes() == b"fresh\n"
