"""Shared helpers for statbar: config location and debug logging."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def config_dir(*parts: str) -> Path:
    """Return a path under the statbar XDG config directory.

    >>> config_dir("settings.json")
    PosixPath('/home/user/.config/statbar/settings.json')
    """
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "statbar" / Path(*parts) if parts else base / "statbar"


# ── Debug logging ─────────────────────────────────────────


def _debug_enabled() -> bool:
    """Return True if debug logging is enabled via env var."""
    raw = os.environ.get("STATBAR_DEBUG", "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def _debug_log_path() -> Path:
    """Path to debug log file.

    Override with STATBAR_DEBUG_LOG_PATH, otherwise defaults to
    ~/.config/statbar/debug.log.
    """
    custom = os.environ.get("STATBAR_DEBUG_LOG_PATH", "").strip()
    if custom:
        return Path(custom).expanduser()
    return config_dir("debug.log")


def debug_log(phase: str, **fields: Any) -> None:
    """Write one JSON log event when STATBAR_DEBUG is set."""
    if not _debug_enabled():
        return

    event: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "phase": phase,
    }
    event.update({k: v for k, v in fields.items() if v is not None})

    path = _debug_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(event, default=str) + "\n")
    except OSError:
        # Debug logging must never break rendering.
        pass
