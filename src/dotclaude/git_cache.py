"""
File cache for the statusline's git status.

The statusline runs once per render tick, so querying git every time is
wasteful. The last result is kept in a single file whose mtime decides
freshness; anything older than ``max_age`` seconds is recomputed.

By default the cache has no key: one fixed path is shared by every
working directory, so two repositories rendered within the same window
can see each other's status. ``per_directory=True`` keys the file by a
hash of the directory instead.

There is no locking. Two processes that both see a stale cache both query
git and the later write wins; writes use os.replace so a reader never
sees a partial record.
"""

import hashlib
import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Optional

from .git_status import GitStatus
from .logging_config import get_logger
from .protocols import GitInterface

logger = get_logger("git_cache")


class GitStatusCache:
    """mtime-validated single-record cache of a GitStatus."""

    def __init__(
        self,
        path: Path,
        max_age: float = 5,
        per_directory: bool = False,
        clock: Callable[[], float] = time.time,
    ):
        self.path = Path(path)
        self.max_age = max_age
        self.per_directory = per_directory
        self._clock = clock

    def path_for(self, directory: str) -> Path:
        """Cache file used for directory."""
        if not self.per_directory:
            return self.path
        digest = hashlib.sha256(directory.encode("utf-8", errors="surrogatepass")).hexdigest()[:16]
        return self.path.with_name(f"{self.path.name}-{digest}")

    def age(self, directory: str) -> Optional[float]:
        """Seconds since the cache was written, None if there is no cache."""
        try:
            mtime = self.path_for(directory).stat().st_mtime
        except OSError:
            return None
        return self._clock() - mtime

    def is_stale(self, directory: str) -> bool:
        """Stale when absent or older than max_age seconds."""
        age = self.age(directory)
        return age is None or age > self.max_age

    def read(self, directory: str) -> Optional[GitStatus]:
        """Read the cached record, None if missing or unparseable."""
        path = self.path_for(directory)
        try:
            line = path.read_text(encoding="utf-8").splitlines()[0]
            return GitStatus.from_record(line)
        except (OSError, UnicodeDecodeError, IndexError, ValueError) as e:
            logger.warning(f"Unreadable git status cache {path}: {e}")
            return None

    def write(self, directory: str, status: GitStatus) -> bool:
        """Atomically replace the cache record.

        Returns:
            True on success, False if the file could not be written
        """
        path = self.path_for(directory)
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(status.to_record() + "\n")
            os.replace(temp_path, path)
            temp_path = None
            return True
        except OSError as e:
            logger.warning(f"Could not write git status cache {path}: {e}")
            return False
        finally:
            if temp_path is not None:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass

    def get(self, directory: str, git: GitInterface) -> GitStatus:
        """Return the git status for directory, querying git only when stale."""
        if not self.is_stale(directory):
            cached = self.read(directory)
            if cached is not None:
                logger.debug(f"Using cached git status for {directory}")
                return cached

        status = git.query_status(directory)
        self.write(directory, status)
        return status
