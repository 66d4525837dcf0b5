"""Single running instance guard based on an exclusive file lock."""

from __future__ import annotations

import fcntl
import logging
import os
from typing import IO

logger = logging.getLogger(__name__)


class InstanceLock:
    """
    Non-blocking exclusive lock on a file.

    The lock is held for as long as the file stays open, so the OS releases
    it when the process dies.
    """

    def __init__(self, path: str):
        self.path = path
        self._fh: IO[str] | None = None

    @property
    def held(self) -> bool:
        return self._fh is not None

    def acquire(self) -> bool:
        """Returns False when another process already holds the lock."""
        if self._fh is not None:
            return True

        fh = open(self.path, "a+")
        try:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            fh.seek(0)
            owner = fh.read().strip() or "unknown"
            fh.close()
            logger.info("Bot process is already running with PID: %s", owner)
            return False

        fh.seek(0)
        fh.truncate()
        fh.write(str(os.getpid()))
        fh.flush()
        self._fh = fh
        return True

    def release(self) -> None:
        if self._fh is None:
            return
        try:
            fcntl.flock(self._fh.fileno(), fcntl.LOCK_UN)
        finally:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "InstanceLock":
        return self

    def __exit__(self, *exc) -> None:
        self.release()
