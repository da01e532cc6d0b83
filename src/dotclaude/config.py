"""
User configuration loaded from ~/.dotclaude/config.yaml.

Every accessor tolerates a missing or broken file and falls back to
defaults, because the statusline must render even when the config is bad.
"""

from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .logging_config import get_logger
from .settings import StatuslineSettings, get_dotclaude_dir

CONFIG_PATH = get_dotclaude_dir() / "config.yaml"

logger = get_logger("config")

# statusline keys that may be overridden, with the types they accept
_STATUSLINE_KEYS: dict[str, tuple[type, ...]] = {
    "cache_path": (str,),
    "cache_max_age": (int, float),
    "cache_per_directory": (bool,),
    "bar_width": (int,),
    "warn_threshold": (int, float),
    "critical_threshold": (int, float),
    "git_timeout": (int, float),
    "filled_glyph": (str,),
    "empty_glyph": (str,),
}


def load_config() -> dict:
    """Load the YAML config file.

    Returns an empty dict if the file is missing, unreadable, invalid,
    or does not contain a mapping.
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Could not read config {CONFIG_PATH}: {e}")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(config: dict) -> None:
    """Write the config dict as YAML, creating parent directories."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)


def _is_valid(value: Any, accepted: tuple[type, ...]) -> bool:
    # bool is an int subclass; only accept it where bool is asked for
    if isinstance(value, bool) and bool not in accepted:
        return False
    return isinstance(value, accepted)


def get_statusline_settings(config: Optional[dict] = None) -> StatuslineSettings:
    """Build StatuslineSettings from defaults plus the ``statusline:`` section.

    Args:
        config: Pre-loaded config dict (loads from disk when None)

    Returns:
        StatuslineSettings with valid overrides applied. Unknown keys and
        values of the wrong type are ignored with a warning.
    """
    if config is None:
        config = load_config()
    section = config.get("statusline")
    defaults = StatuslineSettings()
    if not isinstance(section, dict):
        return defaults

    overrides: dict[str, Any] = {}
    known = {f.name for f in fields(StatuslineSettings)}
    for key, value in section.items():
        accepted = _STATUSLINE_KEYS.get(key)
        if accepted is None:
            if key not in known:
                logger.warning(f"Ignoring unknown statusline setting: {key}")
            else:
                logger.warning(f"Statusline setting {key} is not configurable")
            continue
        if not _is_valid(value, accepted):
            logger.warning(f"Ignoring statusline.{key}: unexpected value {value!r}")
            continue
        if key == "cache_path":
            value = Path(value).expanduser()
        overrides[key] = value

    return replace(defaults, **overrides)


def get_install_config(config: Optional[dict] = None) -> dict:
    """Return the ``install:`` section with defaults filled in.

    Keys:
        repo_dir: Default bundle checkout for 'dotclaude install' (or None)
    """
    if config is None:
        config = load_config()
    section = config.get("install")
    if not isinstance(section, dict):
        section = {}
    repo_dir = section.get("repo_dir")
    return {
        "repo_dir": Path(repo_dir).expanduser() if isinstance(repo_dir, str) else None,
    }
