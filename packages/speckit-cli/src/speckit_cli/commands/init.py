from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from speckit_core.config import DefaultsConfig, SpeckitConfig
from speckit_core.errors import SpeckitError
from speckit_core.logging import get_logger, setup_logging
from speckit_core.types import InitFlags, InitResult
from speckit_templates import AI_CHOICES, install_command_templates, resolve_target

from speckit_cli.detect import AGENT_TOOLS, is_tool_available
from speckit_cli.preferences import load_preferences, save_preferences

console = Console()
logger = get_logger("cli.init")

DEFAULT_PROJECT_NAME = "my-project"


@dataclass(frozen=True, slots=True)
class InitOptions:
    """Everything `specify init` needs, from flags, presets, or the wizard."""
    project_name: str | None = None
    ai: str | None = None
    here: bool = False
    script: str = "sh"
    no_git: bool = False
    ignore_agent_tools: bool = False
    skip_tls: bool = False
    debug: bool = False
    dry_run: bool = False
    json_output: bool = False

    def to_preferences(self) -> dict[str, Any]:
        return {
            "projectName": self.project_name,
            "ai": self.ai,
            "script": self.script,
            "here": self.here,
            "noGit": self.no_git,
            "ignoreAgentTools": self.ignore_agent_tools,
            "debug": self.debug,
        }

    @classmethod
    def from_preferences(
        cls,
        prefs: dict[str, Any],
        defaults: DefaultsConfig | None = None,
    ) -> InitOptions:
        """Options as saved by a previous run, falling back to *defaults*."""
        defaults = defaults or DefaultsConfig()
        return cls(
            project_name=prefs.get("lastProjectName") or DEFAULT_PROJECT_NAME,
            ai=prefs.get("ai") or defaults.ai,
            here=bool(prefs.get("here")),
            script=prefs.get("script") or defaults.script,
            no_git=bool(prefs.get("noGit")),
            ignore_agent_tools=bool(prefs.get("ignoreAgentTools")),
            debug=bool(prefs.get("debug")),
        )


def init_command(
    project_name: str | None = typer.Argument(
        None, help="Project directory to create (defaults to cwd)"
    ),
    ai: str | None = typer.Option(
        None,
        "--ai",
        help=f"AI assistant to configure (one of: {', '.join(AI_CHOICES)})",
    ),
    script: str | None = typer.Option(None, "--script", help="Script variant: sh|ps"),
    ignore_agent_tools: bool = typer.Option(
        False, "--ignore-agent-tools", help="Skip checking for installed agent CLIs"
    ),
    no_git: bool = typer.Option(False, "--no-git", help="Skip git initialization"),
    here: bool = typer.Option(
        False, "--here", help="Initialize in the current directory"
    ),
    skip_tls: bool = typer.Option(False, "--skip-tls"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    github_token: str | None = typer.Option(None, "--github-token"),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Preview without writing files"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Accept suggested defaults (non-interactive)"
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        help="Run an interactive walkthrough to collect options",
    ),
) -> None:
    """Initialize a new Specify project."""
    if script is not None and script not in ("sh", "ps"):
        raise typer.BadParameter("must be 'sh' or 'ps'", param_hint="--script")

    options = InitOptions(
        project_name=project_name,
        ai=ai,
        here=here,
        script=script or "sh",
        no_git=no_git,
        ignore_agent_tools=ignore_agent_tools,
        skip_tls=skip_tls,
        debug=debug,
        dry_run=dry_run,
        json_output=json_output,
    )

    if yes and not json_output:
        # flags given on the command line win over saved presets
        config = load_config()
        saved = InitOptions.from_preferences(load_preferences(), config.defaults)
        options = replace(
            saved,
            project_name=project_name or saved.project_name,
            ai=ai or saved.ai,
            here=here or saved.here,
            script=script or saved.script,
            no_git=no_git or saved.no_git,
            ignore_agent_tools=ignore_agent_tools or saved.ignore_agent_tools,
            debug=debug or saved.debug,
            skip_tls=skip_tls,
            dry_run=dry_run,
        )
        save_preferences(options.to_preferences())
    elif interactive and not json_output:
        from speckit_cli.commands.wizard import run_init_wizard

        options = run_init_wizard(options, project_name)
        save_preferences(options.to_preferences())

    run_init(options)


def load_config(cwd: Path | None = None) -> SpeckitConfig:
    """Load the layered config, ending the command on a malformed file."""
    try:
        return SpeckitConfig.load(cwd)
    except SpeckitError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


def run_init(options: InitOptions, cwd: Path | None = None) -> InitResult:
    """Create the project directory and install the agent's templates.

    Prints the result envelope and returns it.  Configuration and
    template errors end the command with exit code 1.
    """
    cwd = Path.cwd() if cwd is None else cwd
    config = load_config(cwd)

    setup_logging(
        "DEBUG" if options.debug else config.logging.level,
        json_output=config.logging.json,
    )

    if options.here:
        project_dir = cwd
    else:
        project_dir = (cwd / (options.project_name or ".")).resolve()

    logger.debug(
        "Initializing %s (agent=%s, dry_run=%s)",
        project_dir,
        options.ai,
        options.dry_run,
    )
    if not options.dry_run:
        project_dir.mkdir(parents=True, exist_ok=True)

    templates_dir = (
        Path(config.templates.source_dir)
        if config.templates.source_dir
        else None
    )
    try:
        created = install_command_templates(
            project_dir,
            options.ai,
            templates_dir=templates_dir,
            dry_run=options.dry_run,
        )
    except SpeckitError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    result = InitResult(
        project_dir=str(project_dir),
        agent=options.ai,
        scripts={
            "sh": str((cwd / "scripts" / "bash").resolve()),
            "ps": str((cwd / "scripts" / "powershell").resolve()),
        },
        templates=[str(p) for p in created],
        flags=InitFlags(
            here=options.here,
            no_git=options.no_git,
            ignore_agent_tools=options.ignore_agent_tools,
            script=options.script,
            skip_tls=options.skip_tls,
            debug=options.debug,
        ),
        notes=[_init_note(bool(created), options.dry_run)],
    )

    if options.json_output:
        typer.echo(json.dumps(result.to_dict()))
        return result

    if not options.ignore_agent_tools:
        _warn_missing_agent_tool(options.ai)
    _print_result(result, options.dry_run)
    return result


def _init_note(copied: bool, dry_run: bool) -> str:
    if copied:
        if dry_run:
            return "DRY RUN: Would initialize project directory and copy agent command templates"
        return "Initialized project directory and copied agent command templates"
    if dry_run:
        return "DRY RUN: Would initialize project directory (no agent templates – no/unknown agent)"
    return "Initialized project directory (no agent templates copied – no/unknown agent)"


def _warn_missing_agent_tool(ai: str | None) -> None:
    target = resolve_target(ai)
    if target is None:
        if ai:
            console.print(
                f"[yellow]![/yellow] Unknown agent '{ai}'. "
                f"Supported: {', '.join(AI_CHOICES)}"
            )
        return
    tool = AGENT_TOOLS.get(target.key)
    if tool and not is_tool_available(tool):
        console.print(
            f"[yellow]![/yellow] {tool} not found on PATH; "
            f"install it before using the {target.key} commands "
            "(or pass --ignore-agent-tools)"
        )


def _print_result(result: InitResult, dry_run: bool) -> None:
    console.print(
        "[green]Initialization complete.[/green]"
        + (" [dim](dry run)[/dim]" if dry_run else "")
    )
    lines = [
        f"[bold]Project:[/bold] {result.project_dir}",
        f"[bold]Agent:[/bold] {result.agent or '-'}",
        f"[bold]Script:[/bold] {result.flags.script}",
    ]
    if result.templates:
        lines.append("[bold]Templates:[/bold]")
        lines.extend(f"  {path}" for path in result.templates)
    console.print(Panel.fit("\n".join(lines), border_style="cyan"))
    for note in result.notes:
        console.print(f"[dim]{note}[/dim]")
