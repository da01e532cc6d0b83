"""
Statusline commands: render (default), enable, disable, status.
"""

from typing import Annotated, Optional

import typer
from rich import print as rprint

from ._shared import ProjectOption, statusline_app


def _editor(project: bool):
    from ..claude_config import ClaudeConfigEditor

    if project:
        return ClaudeConfigEditor.project_level(), "project"
    return ClaudeConfigEditor.user_level(), "user"


@statusline_app.callback(invoke_without_command=True)
def statusline_default(ctx: typer.Context):
    """Render the statusline from the JSON snapshot on stdin.

    This is what Claude Code runs on every render tick. Output is two
    ANSI-colored lines with no trailing newline.
    """
    if ctx.invoked_subcommand is None:
        from ..logging_config import setup_statusline_logging
        from ..statusline import run_statusline

        setup_statusline_logging()
        run_statusline()


@statusline_app.command("enable")
def statusline_enable(
    project: ProjectOption = False,
    command: Annotated[
        Optional[str],
        typer.Option("--command", "-c", help="Command Claude Code should run (default: dotclaude-statusline)"),
    ] = None,
    padding: Annotated[
        Optional[int],
        typer.Option("--padding", help="statusLine padding setting"),
    ] = None,
):
    """Register the statusline in Claude Code settings.json."""
    from ..claude_config import STATUSLINE_COMMAND

    editor, level = _editor(project)
    try:
        changed = editor.set_status_line(command or STATUSLINE_COMMAND, padding=padding)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if changed:
        rprint(f"[green]✓[/green] Statusline enabled in {level} settings")
        rprint(f"  [dim]{editor.path}[/dim]")
    else:
        rprint(f"[green]✓[/green] Statusline already enabled in {level} settings")


@statusline_app.command("disable")
def statusline_disable(project: ProjectOption = False):
    """Remove the statusLine entry from Claude Code settings.json."""
    editor, level = _editor(project)
    try:
        removed = editor.remove_status_line()
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if removed:
        rprint(f"[green]✓[/green] Statusline removed from {level} settings")
    else:
        rprint(f"[dim]No statusline configured in {level} settings[/dim]")


@statusline_app.command("status")
def statusline_status():
    """Show the configured statusline at user and project level."""
    from ..claude_config import ClaudeConfigEditor

    for level_name, editor in [
        ("User-level", ClaudeConfigEditor.user_level()),
        ("Project-level", ClaudeConfigEditor.project_level()),
    ]:
        rprint(f"\n{level_name} ({editor.path}):")
        if not editor.path.exists():
            rprint("  [dim](no settings file)[/dim]")
            continue
        try:
            entry = editor.get_status_line()
        except ValueError:
            rprint("  [red](invalid JSON)[/red]")
            continue
        if entry is None:
            rprint("  [dim]not configured[/dim]")
        else:
            rprint(f"  {entry.get('command', '?')}  [green]✓[/green]")
