"""
Unit tests for settings module.

Tests path management and environment variable handling.
"""

import tempfile
from pathlib import Path

from dotclaude.settings import (
    AnsiColors,
    StatuslineSettings,
    get_claude_dir,
    get_default_cache_path,
    get_dotclaude_dir,
    get_log_dir,
)


class TestPaths:
    """Test path helpers."""

    def test_dotclaude_dir_default(self, monkeypatch):
        monkeypatch.delenv("DOTCLAUDE_DIR", raising=False)
        assert get_dotclaude_dir() == Path.home() / ".dotclaude"

    def test_dotclaude_dir_respects_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOTCLAUDE_DIR", str(tmp_path))
        assert get_dotclaude_dir() == tmp_path
        assert get_log_dir() == tmp_path / "logs"

    def test_claude_dir_default(self, monkeypatch):
        monkeypatch.delenv("CLAUDE_CONFIG_DIR", raising=False)
        assert get_claude_dir() == Path.home() / ".claude"

    def test_claude_dir_respects_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(tmp_path))
        assert get_claude_dir() == tmp_path

    def test_cache_path_is_fixed_temp_file(self):
        path = get_default_cache_path()
        assert path == Path(tempfile.gettempdir()) / "claude-statusline-git-cache"


class TestStatuslineSettings:
    """Test statusline defaults."""

    def test_color_codes(self):
        colors = AnsiColors()
        assert colors.cyan == "\033[36m"
        assert colors.green == "\033[32m"
        assert colors.yellow == "\033[33m"
        assert colors.red == "\033[31m"
        assert colors.dim == "\033[2m"
        assert colors.magenta == "\033[35m"
        assert colors.reset == "\033[0m"

    def test_glyphs(self):
        settings = StatuslineSettings()
        assert settings.filled_glyph == "█"
        assert settings.empty_glyph == "░"
