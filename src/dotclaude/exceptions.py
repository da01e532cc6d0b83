"""
Exception types for dotclaude.

The statusline never lets these escape to the user; they exist so the
CLI commands can report failures cleanly.
"""


class DotclaudeError(Exception):
    """Base class for dotclaude errors."""


class StatusInputError(DotclaudeError, ValueError):
    """Raised when the statusline stdin payload is not valid JSON."""


class InstallError(DotclaudeError):
    """Raised when the bundle cannot be installed."""
