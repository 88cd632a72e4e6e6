"""Process-wide serializer settings.

The store holds raw, user-supplied values. Every invocation takes a deep copy
and validates it into a frozen :class:`Settings`, so a pass never sees a value
changed halfway through a walk.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .models import Settings

_GLOBAL_SETTINGS: Dict[str, Any] = {}


def set_global_settings(raw: Mapping[str, Any] | None) -> None:
    """Replace the process-wide settings."""
    _GLOBAL_SETTINGS.clear()
    if raw:
        _GLOBAL_SETTINGS.update(raw)


def configure(**raw: Any) -> None:
    """Update individual process-wide settings, keeping the others."""
    _GLOBAL_SETTINGS.update(raw)


def reset_global_settings() -> None:
    _GLOBAL_SETTINGS.clear()


def get_global_settings() -> Dict[str, Any]:
    return copy.deepcopy(_GLOBAL_SETTINGS)


def current_settings() -> Settings:
    """Validate a snapshot of the process-wide settings for one invocation."""
    return Settings.model_validate(get_global_settings())


def load_settings_file(path: Path) -> Settings:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of settings.")
    return Settings.model_validate(data)
