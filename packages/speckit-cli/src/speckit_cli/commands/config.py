from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from speckit_core.config import (
    SpeckitConfig,
    global_config_path,
    project_config_path,
)
from speckit_core.errors import ConfigError

console = Console()

config_app = typer.Typer(
    name="config",
    help="View and manage Spec Kit configuration",
    invoke_without_command=True,
)


def _show(path: Path, label: str) -> None:
    console.print(f"[bold]{label}[/bold] ({path}):")
    console.print(Syntax(path.read_text(encoding="utf-8"), "toml", theme="monokai"))


@config_app.callback(invoke_without_command=True)
def config_command(
    ctx: typer.Context,
    show_global: bool = typer.Option(
        False,
        "--global",
        "-g",
        help="Show global config only",
    ),
) -> None:
    """View configuration files."""
    if ctx.invoked_subcommand is not None:
        return

    global_path = global_config_path()
    if show_global:
        if not global_path.exists():
            console.print(f"[yellow]{global_path} not found.[/yellow]")
            raise typer.Exit(1)
        _show(global_path, "Global")
        return

    project_path = project_config_path()
    if not global_path.exists() and not project_path.exists():
        console.print(
            "[yellow]No config found."
            " Run `specify config init`.[/yellow]"
        )
        raise typer.Exit(1)

    if global_path.exists():
        _show(global_path, "Global")
        console.print()
    if project_path.exists():
        _show(project_path, "Project")


@config_app.command("init")
def config_init(
    use_global: bool = typer.Option(
        False,
        "--global/--project",
        help="Write the global or the project config",
    ),
) -> None:
    """Write a config file with the built-in defaults."""
    path = global_config_path() if use_global else project_config_path()
    if path.exists():
        console.print(f"[dim]{path} (exists)[/dim]")
        return

    defaults = SpeckitConfig()
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_toml(path, {
        "logging": {
            "level": defaults.logging.level,
            "json": defaults.logging.json,
        },
        "defaults": {
            "ai": defaults.defaults.ai,
            "script": defaults.defaults.script,
        },
    })
    console.print(f"[green]✓[/green] Wrote {path}")


@config_app.command("validate")
def config_validate() -> None:
    """Check that the global and project config files parse."""
    try:
        config = SpeckitConfig.load()
    except ConfigError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc
    console.print(
        f"[green]✓[/green] Config OK "
        f"(log level {config.logging.level}, default agent {config.defaults.ai})"
    )


def _write_toml(path: Path, config: dict) -> None:
    """Write a dict of flat sections as TOML to a file."""
    lines = []
    for section, values in config.items():
        lines.append(f"[{section}]")
        for k, v in values.items():
            if isinstance(v, bool):
                lines.append(f"{k} = {'true' if v else 'false'}")
            else:
                lines.append(f'{k} = "{v}"')
        lines.append("")
    path.write_text("\n".join(lines), encoding="utf-8")
