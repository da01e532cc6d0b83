"""
Config commands: init, show, path.
"""

from typing import Annotated

import typer
from rich import print as rprint

from ._shared import config_app


CONFIG_TEMPLATE = """\
# dotclaude configuration
# Location: ~/.dotclaude/config.yaml

# Statusline renderer (defaults match the original shell statusline)
# statusline:
#   cache_path: /tmp/claude-statusline-git-cache
#   cache_max_age: 5           # seconds before git status is re-queried
#   cache_per_directory: false # true keys the cache by working directory
#   bar_width: 10
#   warn_threshold: 70         # bar turns yellow at this percentage
#   critical_threshold: 90     # bar turns red at this percentage
#   git_timeout: 2             # seconds per git call

# Installer
# install:
#   repo_dir: ~/src/dotclaude  # default for 'dotclaude install'
"""


@config_app.callback(invoke_without_command=True)
def config_default(ctx: typer.Context):
    """Show current configuration (default when no subcommand given)."""
    if ctx.invoked_subcommand is None:
        _config_show()


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config file")
    ] = False,
):
    """Create a config file with documented defaults.

    Creates ~/.dotclaude/config.yaml with all options commented out.
    Use --force to overwrite an existing config file.
    """
    from .. import config

    path = config.CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists() and not force:
        rprint(f"[yellow]Config file already exists:[/yellow] {path}")
        rprint("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    path.write_text(CONFIG_TEMPLATE)
    rprint(f"[green]✓[/green] Created config file: [bold]{path}[/bold]")
    rprint("[dim]Edit to customize your settings[/dim]")


@config_app.command("show")
def config_show():
    """Show current configuration."""
    _config_show()


def _config_show():
    """Display the config file contents and the effective statusline settings."""
    from .. import config

    path = config.CONFIG_PATH
    if not path.exists():
        rprint(f"[dim]No config file found at {path}[/dim]")
        rprint("[dim]Run 'dotclaude config init' to create one[/dim]")
    else:
        rprint(f"[bold]Configuration[/bold] ({path}):")

    data = config.load_config()
    settings = config.get_statusline_settings(data)
    rprint("\n  statusline:")
    rprint(f"    cache_path: {settings.cache_path}")
    rprint(f"    cache_max_age: {settings.cache_max_age}s")
    rprint(f"    cache_per_directory: {settings.cache_per_directory}")
    rprint(f"    bar_width: {settings.bar_width}")
    rprint(f"    warn_threshold: {settings.warn_threshold}%")
    rprint(f"    critical_threshold: {settings.critical_threshold}%")
    rprint(f"    git_timeout: {settings.git_timeout}s")

    install = config.get_install_config(data)
    if install["repo_dir"] is not None:
        rprint("  install:")
        rprint(f"    repo_dir: {install['repo_dir']}")


@config_app.command("path")
def config_path():
    """Show the config file path."""
    from .. import config
    print(config.CONFIG_PATH)
