"""Read and write Claude Code settings.json files.

Provides a small editor for Claude Code's JSON settings, with
convenience methods for the ``statusLine`` entry.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path

from .settings import get_claude_dir

STATUSLINE_COMMAND = "dotclaude-statusline"


class ClaudeConfigEditor:
    """Read and write Claude Code settings.json files."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def user_level(cls) -> ClaudeConfigEditor:
        """Editor for user-level settings (~/.claude/settings.json)."""
        return cls(get_claude_dir() / "settings.json")

    @classmethod
    def project_level(cls, project_dir: Path | None = None) -> ClaudeConfigEditor:
        """Editor for project-level settings (.claude/settings.json).

        Args:
            project_dir: Project root. Defaults to cwd.
        """
        base = Path(project_dir) if project_dir else Path.cwd()
        return cls(base / ".claude" / "settings.json")

    def load(self) -> dict:
        """Load settings from file.

        Returns empty dict if file doesn't exist.
        Raises ValueError on invalid JSON or non-object content.
        """
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} contains non-object JSON")
        return data

    def save(self, settings: dict) -> None:
        """Write settings to file. Creates parent dirs as needed.

        When settings.json is a symlink into the bundle checkout, the
        write lands in the bundle, which is what the installer intends.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings, indent=2) + "\n", encoding="utf-8")

    def get_status_line(self) -> dict | None:
        """Return the statusLine entry, or None if absent."""
        entry = self.load().get("statusLine")
        return entry if isinstance(entry, dict) else None

    def set_status_line(self, command: str = STATUSLINE_COMMAND, padding: int | None = None) -> bool:
        """Point the statusLine at a command.

        Returns True if settings changed, False if already configured.
        """
        settings = self.load()
        desired = {"type": "command", "command": command}
        if padding is not None:
            desired["padding"] = padding
        if settings.get("statusLine") == desired:
            return False

        updated = copy.deepcopy(settings)
        updated["statusLine"] = desired
        self.save(updated)
        return True

    def remove_status_line(self, command: str | None = None) -> bool:
        """Remove the statusLine entry.

        Args:
            command: Only remove if the entry runs this command. None removes
                any statusLine.

        Returns True if found and removed, False otherwise.
        """
        settings = self.load()
        entry = settings.get("statusLine")
        if entry is None:
            return False
        if command is not None and (not isinstance(entry, dict) or entry.get("command") != command):
            return False

        updated = copy.deepcopy(settings)
        del updated["statusLine"]
        self.save(updated)
        return True
