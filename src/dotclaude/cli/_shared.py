"""
Shared CLI state: Typer apps, shared options, and the version flag.
"""

from typing import Annotated

import typer
from rich import print as rprint

# Main app
app = typer.Typer(
    name="dotclaude",
    help="Install and run a personal Claude Code configuration bundle",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Statusline subcommand group (renders stdin when no subcommand is given)
statusline_app = typer.Typer(
    name="statusline",
    help="Render the statusline from stdin, or manage its settings.json entry.",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(statusline_app, name="statusline")

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage configuration",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")

# Shared --project flag for settings.json commands
ProjectOption = Annotated[
    bool,
    typer.Option("--project", "-p", help="Use project-level .claude/settings.json instead of user-level"),
]


def _version_callback(value: bool):
    if value:
        from .. import __version__

        rprint(f"dotclaude {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
):
    """Personal Claude Code configuration bundle."""
