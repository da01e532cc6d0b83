"""
CLI interface for dotclaude using Typer.
"""

# Import shared state (apps, options) first
from ._shared import app, main_callback  # noqa: F401

# Import submodules to register their commands with the Typer apps
from . import statusline  # noqa: F401
from . import install  # noqa: F401
from . import config  # noqa: F401


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
