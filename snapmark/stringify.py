"""Readable text for live bound values injected into snapshots."""

from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Mapping, Set
from datetime import date, datetime, timezone
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _epoch_millis(value: date) -> int:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return round((value - _EPOCH).total_seconds() * 1000)


def stringify(value: Any) -> str:
    """Render ``value`` like source code, with unquoted mapping keys.

    >>> stringify({"subValue": {"key": "2"}})
    '{subValue:{key:"2"}}'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, date):
        return str(_epoch_millis(value))
    if isinstance(value, Set):
        items = sorted((stringify(item) for item in value))
        return "[" + ",".join(items) + "]"
    if isinstance(value, Mapping):
        return "{" + ",".join(f"{key}:{stringify(item)}" for key, item in value.items()) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(stringify(item) for item in value) + "]"
    if callable(value):
        return "Function"
    if dataclasses.is_dataclass(value):
        return stringify(dataclasses.asdict(value))
    if hasattr(value, "__dict__"):
        return stringify(vars(value))
    return str(value)


def swap_quotes(text: str) -> str:
    """Swap single and double quotes so values sit cleanly inside ``"..."``."""
    return text.translate(str.maketrans({"'": '"', '"': "'"}))
