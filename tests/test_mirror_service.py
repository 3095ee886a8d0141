# =============================================================================
# tests/test_mirror_service.py - UserMirror Tests
# =============================================================================

import json
import logging
import threading

from core.models import User
from core.services import UserStore, UserMirror
from lib.utils import utc_now


class TestUserMirror:
    """Test writing user mirror files."""

    def test_write_creates_directory_and_file(self, mirror):
        """The data directory is created on first write."""
        user = UserStore().create(name="John Doe", email="john@example.com")

        assert not mirror.data_dir.exists()
        assert mirror.write(user) is True

        path = mirror.data_dir / f"user_{user.id}.json"
        assert path.is_file()
        assert mirror.path_for(user.id) == path

    def test_file_contents_are_pretty_printed_json(self, mirror):
        user = UserStore().create(name="John Doe", email="john@example.com")
        mirror.write(user)

        text = mirror.path_for(user.id).read_text(encoding="utf-8")
        data = json.loads(text)

        assert data["id"] == user.id
        assert data["name"] == "John Doe"
        assert data["email"] == "john@example.com"
        assert "created_at" in data
        assert '\n  "name": "John Doe"' in text

    def test_write_overwrites_previous_snapshot(self, mirror):
        store = UserStore()
        user = store.create(name="A", email="a@x.com")
        mirror.write(user)

        mirror.write(store.update(user.id, name="B"))

        data = json.loads(mirror.path_for(user.id).read_text(encoding="utf-8"))
        assert data["name"] == "B"
        assert len(list(mirror.data_dir.iterdir())) == 1

    def test_unwritable_directory_is_logged_not_raised(self, tmp_path, caplog):
        """Failures return False and log a warning."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        mirror = UserMirror(blocker / "data")
        user = UserStore().create(name="A", email="a@x.com")

        with caplog.at_level(logging.WARNING, logger="core.services.mirror_service"):
            assert mirror.write(user) is False

        assert any("Failed to create data directory" in r.message for r in caplog.records)


class TestConcurrentWrites:
    """Overlapping writes for the same user leave a valid, current file."""

    def test_overlapping_writes_never_corrupt_file(self, mirror):
        """A long and a short payload written at once always parse as JSON."""
        created_at = utc_now()
        long_user = User(id="same-id", name="L" * 5000, email="long@x.com", created_at=created_at)
        short_user = User(id="same-id", name="S", email="s@x.com", created_at=created_at)
        corrupt = 0

        for _ in range(300):
            barrier = threading.Barrier(2)

            def writer(user):
                barrier.wait()
                mirror.write(user)

            threads = [
                threading.Thread(target=writer, args=(long_user,)),
                threading.Thread(target=writer, args=(short_user,)),
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            try:
                data = json.loads(mirror.path_for("same-id").read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                corrupt += 1
                continue
            assert data["name"] in (long_user.name, short_user.name)

        assert corrupt == 0
        assert [p.name for p in mirror.data_dir.iterdir()] == ["user_same-id.json"]

    def test_write_latest_uses_current_state(self, mirror):
        """A task scheduled for an older update still writes the newest data."""
        store = UserStore()
        user = store.create(name="A", email="a@x.com")
        store.update(user.id, name="B")
        store.update(user.id, name="C")

        assert mirror.write_latest(user.id, store.get) is True

        data = json.loads(mirror.path_for(user.id).read_text(encoding="utf-8"))
        assert data["name"] == "C"

    def test_write_latest_skips_deleted_user(self, mirror):
        """A pending task for a deleted user doesn't recreate its file."""
        store = UserStore()
        user = store.create(name="A", email="a@x.com")
        store.delete(user.id)

        assert mirror.write_latest(user.id, store.get) is False
        assert not mirror.path_for(user.id).exists()
