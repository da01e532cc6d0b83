"""
Pure formatting functions for the statusline.

These convert values (tokens, percentages, paths) into display strings.
No I/O and no colors beyond what the caller passes in.
"""

import getpass
import os
import sys
from typing import Mapping, Optional


def format_tokens(tokens: int) -> str:
    """Format token count to human readable (K/M).

    The single decimal is truncated rather than rounded, so a count never
    reads higher than it is: 45_250 -> "45.2K", 999_999 -> "999.9K".

    Args:
        tokens: Number of tokens

    Returns:
        Formatted string like "1.2K", "3.5M", or "500" for small counts
    """
    if tokens >= 1_000_000:
        return f"{tokens // 100_000 / 10:.1f}M"
    elif tokens >= 1_000:
        return f"{tokens // 100 / 10:.1f}K"
    else:
        return str(tokens)


def build_bar(percentage: int, width: int = 10, filled: str = "█", empty: str = "░") -> str:
    """Build a fixed-width progress bar, floor-rounded.

    Examples (width 10): 0 -> "░░░░░░░░░░", 58 -> "█████░░░░░", 100 -> "██████████"
    """
    pct = max(0, min(100, percentage))
    filled_cells = pct * width // 100
    return filled * filled_cells + empty * (width - filled_cells)


def default_home(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Resolve the user's home directory without trusting HOME to be set.

    Statusline commands may run with a stripped environment. Falls back to
    /Users/<user> on macOS and /home/<user> elsewhere.

    Returns:
        Home directory path, or None when neither HOME nor a user is known
    """
    if environ is None:
        environ = os.environ
    home = environ.get("HOME")
    if home:
        return home

    user = environ.get("USER")
    if not user:
        try:
            user = getpass.getuser()
        except (KeyError, OSError):
            return None
    if not user:
        return None
    base = "/Users" if sys.platform == "darwin" else "/home"
    return f"{base}/{user}"


def shorten_path(path: str, home: Optional[str]) -> str:
    """Replace a leading home directory with ~.

    Only whole path components match: with home /Users/alice,
    /Users/alice/proj -> ~/proj but /Users/alice2 is left alone.
    """
    if not home or not path:
        return path
    home = home.rstrip("/") or "/"
    if home == "/":
        return path
    if path == home:
        return "~"
    if path.startswith(home + "/"):
        return "~" + path[len(home):]
    return path
