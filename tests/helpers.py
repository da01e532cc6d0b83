"""
Helpers shared by the test modules (importable because tests/ is on pythonpath).
"""

import re
import subprocess


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


def git(directory, *args) -> str:
    """Run a git command in directory with a throwaway identity."""
    result = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com",
         "-c", "commit.gpgsign=false", *args],
        cwd=directory,
        capture_output=True,
        text=True,
        timeout=10,
        check=True,
    )
    return result.stdout
