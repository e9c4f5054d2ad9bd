from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ── Tool Detection Types ─────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Availability of one external command-line tool."""
    ok: bool
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"ok": self.ok}
        if self.version is not None:
            data["version"] = self.version
        return data


# ── Init Types ───────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class InitFlags:
    here: bool = False
    no_git: bool = False
    ignore_agent_tools: bool = False
    script: str = "sh"
    skip_tls: bool = False
    debug: bool = False


@dataclass(frozen=True, slots=True)
class InitResult:
    """Outcome of `specify init`, printed as the result envelope."""
    project_dir: str
    agent: str | None
    scripts: dict[str, str]
    templates: list[str] = field(default_factory=list)
    flags: InitFlags = field(default_factory=InitFlags)
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "projectDir": self.project_dir,
            "agent": self.agent,
            "scripts": dict(self.scripts),
            "templates": list(self.templates),
            "flags": {
                "here": self.flags.here,
                "noGit": self.flags.no_git,
                "ignoreAgentTools": self.flags.ignore_agent_tools,
                "script": self.flags.script,
                "skipTls": self.flags.skip_tls,
                "debug": self.flags.debug,
            },
            "notes": list(self.notes),
        }
