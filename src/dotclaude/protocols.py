"""
Protocol definitions for external dependencies.

These interfaces allow dependency injection for testing, so the
statusline can be exercised with a fake git instead of subprocess calls.
"""

from typing import Protocol, runtime_checkable

from .git_status import GitStatus


@runtime_checkable
class GitInterface(Protocol):
    """Interface for the git queries the statusline needs"""

    def is_work_tree(self, directory: str) -> bool:
        """Check whether directory is inside a git work tree."""
        ...

    def query_status(self, directory: str) -> GitStatus:
        """Collect branch and change counts for the repository.

        Must not raise: unresolvable data degrades to the placeholder
        branch "?" and zero counts.
        """
        ...
