"""
Git repository status for the statusline.

Shells out to the git binary, the same queries the original shell
statusline ran:

    branch     git symbolic-ref --quiet --short HEAD
               (detached) git rev-parse --short HEAD, else "?"
    staged     git diff --cached --numstat       (line count)
    modified   git diff --numstat                (line count)
    untracked  git ls-files --others --exclude-standard (line count)

Every failure (no git binary, timeout, missing directory, not a repo)
degrades to empty results rather than raising.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .logging_config import get_logger

logger = get_logger("git")

UNKNOWN_BRANCH = "?"


@dataclass(frozen=True)
class GitStatus:
    """Branch plus staged/modified/untracked file counts."""
    branch: str = UNKNOWN_BRANCH
    staged: int = 0
    modified: int = 0
    untracked: int = 0

    def to_record(self) -> str:
        """Serialize as a single '|'-delimited cache record."""
        return f"{self.branch}|{self.staged}|{self.modified}|{self.untracked}"

    @classmethod
    def from_record(cls, record: str) -> "GitStatus":
        """Parse a cache record written by to_record().

        The counts are the last three fields, so a branch containing '|'
        survives. Counts that are not integers read as 0.

        Raises:
            ValueError: If the record has fewer than four fields
        """
        parts = record.strip("\n").rsplit("|", 3)
        if len(parts) != 4:
            raise ValueError(f"Malformed git status record: {record!r}")
        branch, staged, modified, untracked = parts
        return cls(
            branch=branch or UNKNOWN_BRANCH,
            staged=_parse_count(staged),
            modified=_parse_count(modified),
            untracked=_parse_count(untracked),
        )


def _parse_count(value: str) -> int:
    try:
        return max(0, int(value.strip()))
    except ValueError:
        return 0


def _count_lines(output: Optional[str]) -> int:
    if not output:
        return 0
    return len(output.splitlines())


class GitClient:
    """Runs git subprocesses against an arbitrary directory."""

    def __init__(self, timeout: float = 2.0, git_executable: str = "git"):
        self.timeout = timeout
        self.git_executable = git_executable

    def run(self, args: List[str], directory: str) -> Optional[str]:
        """Run a git command in directory.

        Returns:
            stdout on success, None on non-zero exit or any failure
        """
        try:
            result = subprocess.run(
                [self.git_executable, *args],
                cwd=directory,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"git {' '.join(args)} timed out in {directory}")
            return None
        except (subprocess.SubprocessError, OSError, ValueError) as e:
            # ValueError: null byte or unencodable character in directory
            logger.debug(f"git {' '.join(args)} failed in {directory}: {e}")
            return None
        if result.returncode != 0:
            return None
        return result.stdout

    def is_work_tree(self, directory: str) -> bool:
        """Check whether directory is inside a git work tree."""
        if not directory:
            return False
        output = self.run(["rev-parse", "--is-inside-work-tree"], directory)
        return output is not None and output.strip() == "true"

    def branch(self, directory: str) -> str:
        """Current branch, short hash when detached, "?" when neither resolves."""
        name = self.run(["symbolic-ref", "--quiet", "--short", "HEAD"], directory)
        if name and name.strip():
            return name.strip()
        short_hash = self.run(["rev-parse", "--short", "HEAD"], directory)
        if short_hash and short_hash.strip():
            return short_hash.strip()
        return UNKNOWN_BRANCH

    def query_status(self, directory: str) -> GitStatus:
        """Collect branch and change counts for the repository at directory."""
        status = GitStatus(
            branch=self.branch(directory),
            staged=_count_lines(self.run(["diff", "--cached", "--numstat"], directory)),
            modified=_count_lines(self.run(["diff", "--numstat"], directory)),
            untracked=_count_lines(
                self.run(["ls-files", "--others", "--exclude-standard"], directory)
            ),
        )
        logger.debug(f"Queried git status for {directory}: {status.to_record()}")
        return status
