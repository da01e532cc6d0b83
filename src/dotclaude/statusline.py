"""
Claude Code statusline renderer.

Claude Code pipes a JSON snapshot to the configured statusLine command on
every render tick and shows whatever it prints. This module turns that
snapshot into two ANSI-colored lines:

    Opus ~/proj on main +2?5
    █████░░░░░ 58% | 45.2K in 12.1K out

Line 1 carries the model, the working directory (home shortened to ~) and,
inside a git work tree, the branch with staged (+), modified (~) and
untracked (?) counts. Line 2 is the context-window bar, colored by usage,
and the input/output token totals.

Rendering never fails: bad JSON, missing git, or an unwritable cache all
degrade to placeholder values.
"""

import os
import sys
from typing import Mapping, Optional

from .config import get_statusline_settings
from .exceptions import StatusInputError
from .formatters import build_bar, default_home, format_tokens, shorten_path
from .git_cache import GitStatusCache
from .git_status import GitClient, GitStatus
from .logging_config import get_logger, setup_statusline_logging
from .protocols import GitInterface
from .settings import StatuslineSettings
from .status_input import StatusInput, parse_status_input, status_input_from_dict

logger = get_logger("statusline")


class StatuslineRenderer:
    """Render statusline snapshots, caching git status between calls."""

    def __init__(
        self,
        settings: Optional[StatuslineSettings] = None,
        git: Optional[GitInterface] = None,
        cache: Optional[GitStatusCache] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or StatuslineSettings()
        self.git = git or GitClient(timeout=self.settings.git_timeout)
        self.cache = cache or GitStatusCache(
            self.settings.cache_path,
            max_age=self.settings.cache_max_age,
            per_directory=self.settings.cache_per_directory,
        )
        self.environ = os.environ if environ is None else environ

    # -- pieces ---------------------------------------------------------------

    def bar_color(self, percentage: int) -> str:
        """Red at the critical threshold, yellow at the warn threshold, else green."""
        colors = self.settings.colors
        if percentage >= self.settings.critical_threshold:
            return colors.red
        if percentage >= self.settings.warn_threshold:
            return colors.yellow
        return colors.green

    def status_suffix(self, status: GitStatus) -> str:
        """Colored +staged ~modified ?untracked, zero counts omitted."""
        colors = self.settings.colors
        suffix = ""
        if status.staged > 0:
            suffix += f"{colors.green}+{status.staged}{colors.reset}"
        if status.modified > 0:
            suffix += f"{colors.yellow}~{status.modified}{colors.reset}"
        if status.untracked > 0:
            suffix += f"{colors.red}?{status.untracked}{colors.reset}"
        return f" {suffix}" if suffix else ""

    def git_clause(self, directory: str) -> str:
        """' on <branch><suffix>' for git work trees, '' otherwise."""
        if not self.git.is_work_tree(directory):
            return ""
        status = self.cache.get(directory, self.git)
        colors = self.settings.colors
        return (
            f" {colors.dim}on{colors.reset} "
            f"{colors.magenta}{status.branch}{colors.reset}"
            f"{self.status_suffix(status)}"
        )

    def first_line(self, snapshot: StatusInput) -> str:
        colors = self.settings.colors
        directory = snapshot.working_directory
        short_dir = shorten_path(directory, default_home(self.environ))
        return (
            f"{colors.cyan}{snapshot.model_display_name}{colors.reset} "
            f"{short_dir}{self.git_clause(directory)}"
        )

    def second_line(self, snapshot: StatusInput) -> str:
        colors = self.settings.colors
        pct = snapshot.percentage
        bar = build_bar(
            pct,
            width=self.settings.bar_width,
            filled=self.settings.filled_glyph,
            empty=self.settings.empty_glyph,
        )
        tokens_in = format_tokens(snapshot.total_input_tokens)
        tokens_out = format_tokens(snapshot.total_output_tokens)
        return (
            f"{self.bar_color(pct)}{bar}{colors.reset} {pct}% "
            f"{colors.dim}|{colors.reset} "
            f"{colors.cyan}{tokens_in}{colors.reset}{colors.dim} in{colors.reset} "
            f"{colors.green}{tokens_out}{colors.reset}{colors.dim} out{colors.reset}"
        )

    # -- entry points -----------------------------------------------------------

    def render_snapshot(self, snapshot: StatusInput) -> str:
        """Two lines joined by a newline, no trailing newline."""
        return f"{self.first_line(snapshot)}\n{self.second_line(snapshot)}"

    def render(self, json_input: str) -> str:
        """Render the JSON document Claude Code sends on stdin."""
        try:
            snapshot = parse_status_input(json_input)
        except StatusInputError as e:
            logger.warning(f"{e}; rendering defaults")
            snapshot = status_input_from_dict({})
        return self.render_snapshot(snapshot)


def run_statusline(stdin=None, stdout=None) -> None:
    """Read one snapshot from stdin and write the rendered statusline."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        raw = stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read statusline input: {e}")
        raw = ""

    renderer = StatuslineRenderer(settings=get_statusline_settings())
    stdout.write(renderer.render(raw))
    stdout.flush()


def main() -> None:
    """Entry point for the dotclaude-statusline script."""
    setup_statusline_logging()
    run_statusline()


if __name__ == "__main__":
    main()
