"""
Parse the JSON snapshot Claude Code pipes to the statusline command.

Expected shape (extra keys ignored, every section optional):

    {
      "model": {"display_name": "Opus"},
      "workspace": {"current_dir": "/Users/alice/proj"},
      "context_window": {
        "used_percentage": 58,
        "total_input_tokens": 45200,
        "total_output_tokens": 12100
      }
    }
"""

import json
import math
import os
from dataclasses import dataclass
from typing import Any

from .exceptions import StatusInputError


@dataclass(frozen=True)
class StatusInput:
    """One statusline snapshot. Missing fields default to zero/empty."""
    model_display_name: str = ""
    working_directory: str = ""
    context_used_percentage: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0

    @property
    def percentage(self) -> int:
        """Usage percentage as displayed: truncated toward zero, clamped to 0..100."""
        return max(0, min(100, int(self.context_used_percentage)))


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _number(value: Any) -> float:
    """Coerce a JSON value to a finite float, 0 for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        # integers beyond float range
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _count(value: Any) -> int:
    return max(0, int(_number(value)))


def _string(value: Any) -> str:
    """Return value if it is a string, "" otherwise.

    Lone surrogates (legal in JSON escapes, unencodable in UTF-8) become "?"
    so the rendered line can always be written out.
    """
    if not isinstance(value, str):
        return ""
    return value.encode("utf-8", errors="replace").decode("utf-8")


def status_input_from_dict(data: Any) -> StatusInput:
    """Build a StatusInput from decoded JSON, tolerating any shape."""
    if not isinstance(data, dict):
        data = {}

    model = _section(data, "model")
    workspace = _section(data, "workspace")
    context = _section(data, "context_window")

    directory = _string(workspace.get("current_dir")) or _string(data.get("cwd"))
    if not directory:
        try:
            directory = os.getcwd()
        except OSError:
            directory = ""

    return StatusInput(
        model_display_name=_string(model.get("display_name")),
        working_directory=directory,
        context_used_percentage=_number(context.get("used_percentage")),
        total_input_tokens=_count(context.get("total_input_tokens")),
        total_output_tokens=_count(context.get("total_output_tokens")),
    )


def parse_status_input(text: str) -> StatusInput:
    """Parse the stdin JSON document.

    Raises:
        StatusInputError: If the text is not valid JSON
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError) as e:
        # ValueError also covers integers past the int-string digit limit
        raise StatusInputError(f"Invalid statusline JSON: {e}") from e
    return status_input_from_dict(data)
