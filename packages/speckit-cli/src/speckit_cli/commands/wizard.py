from __future__ import annotations

import json
from dataclasses import replace
from typing import Any

import typer
from InquirerPy import inquirer
from rich.console import Console
from rich.panel import Panel
from speckit_templates import AI_CHOICES

from speckit_cli.commands.init import (
    DEFAULT_PROJECT_NAME,
    InitOptions,
    load_config,
    run_init,
)
from speckit_cli.detect import AGENT_TOOLS, detect_tools
from speckit_cli.preferences import load_preferences, save_preferences

console = Console()


def wizard_command(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Accept suggested defaults from persisted preferences (skip prompts)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print a suggested payload instead of asking questions",
    ),
) -> None:
    """Interactive walkthrough to initialize a project (guided mode)."""
    if json_output:
        suggested = {
            "projectName": DEFAULT_PROJECT_NAME,
            "ai": AI_CHOICES[0],
            "here": False,
            "script": "sh",
            "noGit": False,
            "ignoreAgentTools": False,
            "debug": False,
            "dryRun": False,
        }
        typer.echo(json.dumps({"wizard": suggested}))
        return

    if yes:
        options = InitOptions.from_preferences(
            load_preferences(), load_config().defaults
        )
    else:
        options = run_init_wizard(InitOptions())
    save_preferences(options.to_preferences())
    run_init(options)


def _agent_choices() -> list[dict[str, str]]:
    """Menu entries for each agent, annotated with CLI availability."""
    status = detect_tools()
    choices = []
    for agent in AI_CHOICES:
        tool = AGENT_TOOLS.get(agent)
        if tool is None:
            label = f"{agent} (IDE)"
        elif status.get(tool) is not None and status[tool].ok:
            label = f"{agent} (CLI found)"
        else:
            label = f"{agent} (CLI missing)"
        choices.append({"name": label, "value": agent})
    return choices


def _presets_banner(preview: dict[str, Any]) -> None:
    flags = ", ".join(
        f"{k}={'true' if v else 'false'}" for k, v in preview["flags"].items()
    )
    console.print(Panel.fit(
        "\n".join([
            f"project: {preview['projectName']}",
            f"ai: {preview['ai']}",
            f"script: {preview['script']}",
            f"flags: {flags}",
        ]),
        border_style="cyan",
        title="Detected saved presets (.specify/wizard.json)",
    ))


def run_init_wizard(
    preset: InitOptions,
    preset_name: str | None = None,
) -> InitOptions:
    """Ask for the init options, offering saved presets first.

    Values already present in *preset* or in the saved presets become
    the suggested defaults.  When the user accepts the saved presets,
    only fields the presets do not cover are asked.
    """
    console.print("[bold green]Specify Wizard[/bold green]")
    console.print("Let's set up your project with a few questions.\n")

    agent_choices = _agent_choices()
    persisted = load_preferences()
    merged: dict[str, Any] = {**persisted}
    for key, value in preset.to_preferences().items():
        # "sh" is the implicit default and must not mask a saved "ps"
        if value and not (key == "script" and value == "sh"):
            merged[key] = value

    name = inquirer.text(
        message="Project name (directory):",
        default=(
            preset_name
            or merged.get("projectName")
            or persisted.get("lastProjectName")
            or DEFAULT_PROJECT_NAME
        ),
    ).execute().strip() or DEFAULT_PROJECT_NAME

    answers: dict[str, Any] = {}
    if persisted:
        _presets_banner({
            "projectName": name,
            "ai": merged.get("ai") or "claude",
            "script": merged.get("script") or "sh",
            "flags": {
                "here": bool(merged.get("here")),
                "noGit": bool(merged.get("noGit")),
                "ignoreAgentTools": bool(merged.get("ignoreAgentTools")),
                "debug": bool(merged.get("debug")),
                "dryRun": preset.dry_run,
            },
        })
        use_saved = inquirer.confirm(
            message="Use saved presets from .specify/wizard.json?",
            default=True,
        ).execute()
        if use_saved:
            for key in ("here", "ai", "script", "noGit", "ignoreAgentTools", "debug"):
                if key in merged and merged[key] is not None:
                    answers[key] = merged[key]

    if "here" not in answers:
        answers["here"] = inquirer.confirm(
            message="Initialize in current directory?",
            default=bool(merged.get("here")),
        ).execute()
    if "ai" not in answers:
        answers["ai"] = inquirer.select(
            message="AI assistant to configure:",
            choices=agent_choices,
            default=merged.get("ai") or "claude",
        ).execute()
    if "script" not in answers:
        answers["script"] = inquirer.select(
            message="Script variant:",
            choices=["sh", "ps"],
            default="ps" if merged.get("script") == "ps" else "sh",
        ).execute()
    if "noGit" not in answers:
        answers["noGit"] = inquirer.confirm(
            message="Skip git initialization?",
            default=bool(merged.get("noGit")),
        ).execute()
    if "ignoreAgentTools" not in answers:
        answers["ignoreAgentTools"] = inquirer.confirm(
            message="Skip agent tool checks?",
            default=bool(merged.get("ignoreAgentTools")),
        ).execute()
    if "debug" not in answers:
        answers["debug"] = inquirer.confirm(
            message="Enable debug output?",
            default=bool(merged.get("debug")),
        ).execute()
    dry_run = inquirer.confirm(
        message="Perform a dry run (no files written)?",
        default=preset.dry_run,
    ).execute()

    return replace(
        preset,
        project_name=name,
        ai=str(answers["ai"]),
        here=bool(answers["here"]),
        script="ps" if answers["script"] == "ps" else "sh",
        no_git=bool(answers["noGit"]),
        ignore_agent_tools=bool(answers["ignoreAgentTools"]),
        debug=bool(answers["debug"]),
        dry_run=bool(dry_run),
        json_output=False,
    )
