"""Utility helpers for stable JSON output, file IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict

LOG_PREFIX = "snapmark: "
DEBUG_PREFIX = "snapmark debug: "


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2, default=repr) + "\n"


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> Path:
    """Write text content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str, *, verbose: bool = True) -> None:
    if verbose:
        print(LOG_PREFIX + msg, file=sys.stderr)


def debug_log(
    function: str,
    *,
    enabled: bool,
    details: str | None = None,
    data: Dict[str, Any] | None = None,
) -> None:
    """Print a diagnostic payload naming the function being run."""
    if not enabled:
        return
    payload: Dict[str, Any] = {"function": function}
    if details:
        payload["details"] = details
    if data:
        payload["data"] = data
    print(DEBUG_PREFIX + stable_json_dumps(payload), end="", file=sys.stderr)
