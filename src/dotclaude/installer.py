"""
Install the configuration bundle into Claude Code's config directory.

Each bundle item is symlinked into ~/.claude. Existing real files are kept
as <name>.bak; symlinks that already point at the bundle are left alone.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from .exceptions import InstallError
from .logging_config import get_logger

logger = get_logger("installer")

# Files to symlink: source (relative to repo) -> same name under the claude dir
BUNDLE_FILES = (
    "CLAUDE.md",
    "settings.json",
)

# Directories to symlink, only when they have content
BUNDLE_DIRS = (
    "commands",
    "skills",
    "agents",
)

BACKUP_SUFFIX = ".bak"


class LinkAction(str, Enum):
    """What happened to one bundle item."""
    OK = "ok"            # already linked to the bundle
    UPDATE = "update"    # symlink repointed
    BACKUP = "backup"    # existing item moved to .bak, then linked
    NEW = "new"          # nothing there before
    SKIP = "skip"        # item not present in the bundle


@dataclass(frozen=True)
class LinkResult:
    name: str
    action: LinkAction
    dest: Path


def link_item(src: Path, dest: Path) -> LinkAction:
    """Point dest at src, backing up whatever real file is in the way.

    Raises:
        InstallError: If the filesystem refuses the change
    """
    try:
        if dest.is_symlink():
            if os.readlink(dest) == str(src):
                return LinkAction.OK
            dest.unlink()
            action = LinkAction.UPDATE
        elif dest.exists():
            # replaces an older backup file; refuses a non-empty backup directory
            os.rename(dest, dest.with_name(dest.name + BACKUP_SUFFIX))
            action = LinkAction.BACKUP
        else:
            action = LinkAction.NEW
        dest.symlink_to(src)
    except OSError as e:
        raise InstallError(f"Could not link {dest} -> {src}: {e}") from e

    logger.info(f"{action.value} {dest}")
    return action


def _has_content(directory: Path) -> bool:
    try:
        return any(directory.iterdir())
    except OSError:
        return False


def install(repo_dir: Path, claude_dir: Path) -> List[LinkResult]:
    """Symlink the bundle's files and directories into claude_dir.

    Args:
        repo_dir: Checkout of the configuration bundle
        claude_dir: Claude Code config directory (created if missing)

    Returns:
        One LinkResult per bundle file, plus one per linked directory.
        Empty or missing directories are not reported.

    Raises:
        InstallError: If repo_dir is missing or linking fails
    """
    repo_dir = Path(repo_dir).resolve()
    claude_dir = Path(claude_dir)
    if not repo_dir.is_dir():
        raise InstallError(f"Bundle directory not found: {repo_dir}")

    try:
        claude_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InstallError(f"Could not create {claude_dir}: {e}") from e

    results: List[LinkResult] = []
    for name in BUNDLE_FILES:
        src = repo_dir / name
        dest = claude_dir / name
        if src.is_file():
            results.append(LinkResult(name, link_item(src, dest), dest))
        else:
            results.append(LinkResult(name, LinkAction.SKIP, dest))

    for name in BUNDLE_DIRS:
        src = repo_dir / name
        dest = claude_dir / name
        if src.is_dir() and _has_content(src):
            results.append(LinkResult(name, link_item(src, dest), dest))

    return results
