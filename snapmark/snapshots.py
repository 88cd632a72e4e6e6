"""Write and compare stored snapshot files."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import List, Tuple

from .io_utils import read_text, write_text


def _lines(text: str) -> List[str]:
    if text and not text.endswith("\n"):
        text += "\n"
    return text.splitlines(keepends=True)


def write_snapshot(path: Path, formatted: str) -> Path:
    return write_text(path, formatted + "\n")


def compare_snapshot(snapshot_path: Path, formatted: str) -> Tuple[bool, str]:
    """Compare ``formatted`` with the stored snapshot; returns (matches, unified diff)."""
    stored = read_text(snapshot_path) if snapshot_path.exists() else ""
    expected = _lines(stored)
    received = _lines(formatted)
    if expected == received:
        return True, ""
    diff = difflib.unified_diff(
        expected,
        received,
        fromfile=f"{snapshot_path.name} (stored)",
        tofile=f"{snapshot_path.name} (received)",
    )
    return False, "".join(diff)
