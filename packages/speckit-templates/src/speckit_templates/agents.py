"""Agent registry: destination directory and file format per AI assistant."""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from speckit_templates.types import AgentDescriptor, OutputFormat

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def _agent(key: str, path: str, output_format: OutputFormat) -> tuple[str, AgentDescriptor]:
    return key, AgentDescriptor(key=key, path=path, output_format=output_format)


AGENTS: Mapping[str, AgentDescriptor] = MappingProxyType(dict([
    _agent("claude", ".claude/commands", OutputFormat.PLAIN_MARKDOWN),
    _agent("cursor", ".cursor/commands", OutputFormat.PLAIN_MARKDOWN),
    _agent("copilot", ".github/prompts", OutputFormat.RENAMED_MARKDOWN),
    _agent("opencode", ".opencode/command", OutputFormat.PLAIN_MARKDOWN),
    _agent("windsurf", ".windsurf/workflows", OutputFormat.PLAIN_MARKDOWN),
    _agent("gemini", ".gemini/commands", OutputFormat.TOML),
    _agent("qwen", ".qwen/commands", OutputFormat.TOML),
    _agent("codex", ".codex/commands", OutputFormat.PLAIN_MARKDOWN),
    _agent("codex-cli", ".codex/commands", OutputFormat.PLAIN_MARKDOWN),
]))

# Agents offered by `specify init --ai` and the wizard, in menu order.
AI_CHOICES: tuple[str, ...] = (
    "claude",
    "gemini",
    "copilot",
    "cursor",
    "qwen",
    "opencode",
    "windsurf",
)


def resolve_target(agent: Any) -> AgentDescriptor | None:
    """Look up the descriptor for *agent*, case-insensitively.

    Falsy and unknown values return *None*; this never raises.
    """
    if not agent:
        return None
    return AGENTS.get(str(agent).lower())


def requires_toml_format(agent: Any) -> bool:
    """Whether command files for *agent* must be converted to TOML."""
    target = resolve_target(agent)
    return target is not None and target.output_format is OutputFormat.TOML


def destination_for(target: AgentDescriptor, source: Path) -> str:
    """File name a template at *source* gets in the agent's directory."""
    if target.output_format is OutputFormat.PLAIN_MARKDOWN:
        return source.name
    return f"{source.stem}.{target.output_format.value}"
