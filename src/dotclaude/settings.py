"""
Paths and typed defaults for dotclaude.

Path helpers respect environment overrides so tests (and users with
non-standard layouts) can relocate state:

    DOTCLAUDE_DIR      -> dotclaude's own state/config dir (~/.dotclaude)
    CLAUDE_CONFIG_DIR  -> Claude Code's config dir (~/.claude)
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path


# =============================================================================
# Paths
# =============================================================================

CACHE_FILE_NAME = "claude-statusline-git-cache"


def get_dotclaude_dir() -> Path:
    """Return the dotclaude state directory (~/.dotclaude by default)."""
    override = os.environ.get("DOTCLAUDE_DIR")
    if override:
        return Path(override)
    return Path.home() / ".dotclaude"


def get_log_dir() -> Path:
    """Return the directory for dotclaude log files."""
    return get_dotclaude_dir() / "logs"


def get_claude_dir() -> Path:
    """Return Claude Code's config directory (~/.claude by default)."""
    override = os.environ.get("CLAUDE_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".claude"


def get_default_cache_path() -> Path:
    """Fixed path of the shared git status cache.

    /tmp/claude-statusline-git-cache on Unix.
    """
    return Path(tempfile.gettempdir()) / CACHE_FILE_NAME


# =============================================================================
# Statusline defaults
# =============================================================================

@dataclass(frozen=True)
class AnsiColors:
    """ANSI escape sequences used by the statusline."""
    cyan: str = "\033[36m"
    green: str = "\033[32m"
    yellow: str = "\033[33m"
    red: str = "\033[31m"
    dim: str = "\033[2m"
    magenta: str = "\033[35m"
    reset: str = "\033[0m"


@dataclass(frozen=True)
class StatuslineSettings:
    """Every tunable of the statusline renderer.

    The defaults reproduce the original shell statusline exactly. Override
    by constructing with keyword arguments, or via the ``statusline:``
    section of ~/.dotclaude/config.yaml (see config.get_statusline_settings).

    Attributes:
        cache_path: File holding the cached git status record.
        cache_max_age: Seconds after which the cache is stale.
        cache_per_directory: Key the cache file by working directory.
            Off by default: a single shared file, as the original does.
        bar_width: Number of cells in the context bar.
        warn_threshold: Percentage at which the bar turns yellow.
        critical_threshold: Percentage at which the bar turns red.
        git_timeout: Seconds allowed for each git subprocess.
    """
    cache_path: Path = field(default_factory=get_default_cache_path)
    cache_max_age: float = 5
    cache_per_directory: bool = False
    bar_width: int = 10
    warn_threshold: int = 70
    critical_threshold: int = 90
    git_timeout: float = 2.0
    filled_glyph: str = "█"
    empty_glyph: str = "░"
    colors: AnsiColors = field(default_factory=AnsiColors)
