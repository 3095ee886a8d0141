# =============================================================================
# core/services/mirror_service.py - User Mirror Files
# =============================================================================
# Writes a pretty-printed JSON snapshot of a user to disk after every
# create/update, one file per user:
#
#   <data_dir>/user_<id>.json
#
# The files are for inspection only. The service never reads them back, and
# a failed write is logged and otherwise ignored.
#
# Writes go to a temp file in data_dir that is then os.replace()d onto the
# target, all under one lock, so a reader never sees a half-written file.
# Background tasks use write_latest(), which re-reads the user under that
# lock: the last task to run always writes the newest state, and a task for
# a user deleted in the meantime writes nothing. Deleting a user leaves its
# existing file in place.
# =============================================================================

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Callable

from core.models.user import User

logger = logging.getLogger(__name__)


class UserMirror:
    """
    Best-effort writer of per-user JSON files.

    Handlers schedule write_latest() as a background task, so it runs
    after the response has been sent.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._lock = threading.Lock()

    def path_for(self, user_id: str) -> Path:
        """Get the mirror file path for a user ID."""
        return self.data_dir / f"user_{user_id}.json"

    def write_latest(self, user_id: str, fetch: Callable[[str], User | None]) -> bool:
        """
        Mirror the current state of a user.

        Args:
            user_id: ID of the user to mirror
            fetch: Lookup returning the current user or None (e.g. UserStore.get)

        Returns:
            True if the file was written, False if the user is gone or the write failed
        """
        with self._lock:
            user = fetch(user_id)
            if user is None:
                logger.debug(f"User {user_id} no longer exists, mirror skipped")
                return False
            return self._write(user)

    def write(self, user: User) -> bool:
        """
        Write (or overwrite) the mirror file for a user.

        Creates the data directory if it doesn't exist.

        Args:
            user: Snapshot of the user to persist

        Returns:
            True if the file was written, False if anything failed
        """
        with self._lock:
            return self._write(user)

    def _write(self, user: User) -> bool:
        path = self.path_for(user.id)

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Failed to create data directory {self.data_dir}: {e}")
            return False

        try:
            payload = user.model_dump_json(indent=2)
        except (TypeError, ValueError) as e:
            logger.warning(f"Failed to serialize user {user.id}: {e}")
            return False

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".user_{user.id}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # mkstemp creates 0600
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.warning(f"Failed to save user to file {path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError as cleanup_error:
                    logger.warning(f"Failed to remove temp file {tmp_name}: {cleanup_error}")
            return False

        logger.info(f"User saved to persistent storage: {path}")
        return True
