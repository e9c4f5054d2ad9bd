"""Detect which agent command-line tools are installed."""
from __future__ import annotations

import re
import shutil
import subprocess

from speckit_core.logging import get_logger
from speckit_core.types import ToolStatus

logger = get_logger("cli.detect")

# Tools probed by name, in report order.
TOOLS: tuple[str, ...] = (
    "git",
    "claude",
    "gemini",
    "cursor-agent",
    "qwen",
    "opencode",
    "windsurf",
)

# CLI backing each agent; IDE-based agents have none.
AGENT_TOOLS: dict[str, str | None] = {
    "claude": "claude",
    "gemini": "gemini",
    "cursor": "cursor-agent",
    "qwen": "qwen",
    "opencode": "opencode",
    "codex": "codex-cli",
    "codex-cli": "codex-cli",
    "windsurf": None,
    "copilot": None,
}

_PROBE_TIMEOUT = 10
_COPILOT_EXT_RE = re.compile(r"copilot-cli\s+v?([\w.-]+)", re.IGNORECASE)


def _has_command(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def _run(args: list[str]) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=_PROBE_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError):
        logger.debug("Probe failed: %s", " ".join(args), exc_info=True)
        return None


def get_version(cmd: str, args: tuple[str, ...] = ("--version",)) -> str | None:
    """First line of ``cmd --version`` output, or *None*."""
    result = _run([cmd, *args])
    if result is None or result.returncode != 0:
        return None
    output = (result.stdout or result.stderr or "").strip()
    return output.splitlines()[0] if output else None


def _gh_copilot_version() -> str | None:
    listing = _run(["gh", "extension", "list"])
    if listing is None or listing.returncode != 0:
        return None
    for line in listing.stdout.splitlines():
        match = _COPILOT_EXT_RE.search(line)
        if match:
            return match.group(1)
    return None


def _detect_copilot() -> ToolStatus:
    if _has_command("copilot"):
        return ToolStatus(ok=True, version=get_version("copilot"))

    if not _has_command("gh"):
        return ToolStatus(ok=False)
    probe = _run(["gh", "copilot", "--help"])
    if probe is None or probe.returncode != 0:
        return ToolStatus(ok=False)
    return ToolStatus(ok=True, version=_gh_copilot_version())


def is_tool_available(tool: str) -> bool:
    """Cheap PATH-only check for a single tool (no version probe)."""
    if tool == "codex-cli":
        return _has_command("codex-cli") or _has_command("codex")
    return _has_command(tool)


def detect_tools() -> dict[str, ToolStatus]:
    """Probe every known tool; missing or failing tools report ``ok=False``."""
    result: dict[str, ToolStatus] = {}
    for tool in TOOLS:
        if _has_command(tool):
            result[tool] = ToolStatus(ok=True, version=get_version(tool))
        else:
            result[tool] = ToolStatus(ok=False)

    if _has_command("codex-cli") or _has_command("codex"):
        version = get_version("codex-cli") if _has_command("codex-cli") else None
        result["codex-cli"] = ToolStatus(ok=True, version=version or get_version("codex"))
    else:
        result["codex-cli"] = ToolStatus(ok=False)

    result["copilot"] = _detect_copilot()
    logger.debug(
        "Detected tools: %s",
        ", ".join(name for name, status in result.items() if status.ok) or "none",
    )
    return result
