"""
Install command: symlink the bundle into the Claude config directory.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print as rprint

from ._shared import app

ACTION_STYLES = {
    "ok": "green",
    "update": "yellow",
    "backup": "yellow",
    "new": "cyan",
    "skip": "dim",
}


@app.command("install")
def install_cmd(
    repo_dir: Annotated[
        Optional[Path],
        typer.Option("--repo-dir", "-r", help="Bundle checkout (default: install.repo_dir from config, else cwd)"),
    ] = None,
    claude_dir: Annotated[
        Optional[Path],
        typer.Option("--claude-dir", help="Claude Code config directory (default: ~/.claude)"),
    ] = None,
):
    """Symlink CLAUDE.md, settings.json and content dirs into ~/.claude.

    Existing files are backed up with a .bak suffix. Links that already
    point at the bundle are left untouched.
    """
    from ..config import get_install_config
    from ..exceptions import InstallError
    from ..installer import LinkAction, install
    from ..logging_config import setup_cli_logging
    from ..settings import get_claude_dir

    setup_cli_logging()

    repo = repo_dir or get_install_config()["repo_dir"] or Path.cwd()
    target = claude_dir or get_claude_dir()

    rprint(f"Installing Claude config from [bold]{repo}[/bold]")
    rprint(f"Target: [bold]{target}[/bold]\n")

    try:
        results = install(repo, target)
    except InstallError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    for result in results:
        style = ACTION_STYLES[result.action.value]
        if result.action == LinkAction.SKIP:
            rprint(f"  [{style}]skip[/{style}]  {result.name} (not in repo)")
        elif result.action == LinkAction.OK:
            rprint(f"  [{style}]ok[/{style}]  {result.dest} (already linked)")
        elif result.action == LinkAction.UPDATE:
            rprint(f"  [{style}]update[/{style}]  {result.dest} (repointing symlink)")
        elif result.action == LinkAction.BACKUP:
            rprint(f"  [{style}]backup[/{style}]  {result.dest} -> {result.dest}.bak")
        else:
            rprint(f"  [{style}]new[/{style}]  {result.dest}")

    rprint("\nDone. Restart Claude Code to pick up changes.")
