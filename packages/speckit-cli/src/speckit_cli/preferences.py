"""Repo-local wizard defaults persisted in ``.specify/wizard.json``."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from speckit_core.config import CONFIG_DIRNAME
from speckit_core.logging import get_logger

logger = get_logger("cli.preferences")

PREFERENCES_FILENAME = "wizard.json"


def preferences_path(cwd: Path | None = None) -> Path:
    base = Path.cwd() if cwd is None else cwd
    return base / CONFIG_DIRNAME / PREFERENCES_FILENAME


def load_preferences(cwd: Path | None = None) -> dict[str, Any]:
    """Return saved wizard defaults, or ``{}`` when none can be read."""
    path = preferences_path(cwd)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable preferences at %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def save_preferences(options: dict[str, Any], cwd: Path | None = None) -> None:
    """Persist the reusable subset of *options*.

    Only the agent, script variant, boolean flags and the last project
    name are kept.  Write failures are logged, not raised.
    """
    safe: dict[str, Any] = {
        "ai": options.get("ai"),
        "script": options.get("script") or "sh",
        "here": bool(options.get("here")),
        "noGit": bool(options.get("noGit")),
        "ignoreAgentTools": bool(options.get("ignoreAgentTools")),
        "debug": bool(options.get("debug")),
    }
    if options.get("projectName") is not None:
        safe["lastProjectName"] = options["projectName"]

    path = preferences_path(cwd)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(safe, indent=2) + "\n", encoding="utf-8")
    except OSError:
        logger.warning("Could not save preferences to %s", path, exc_info=True)
