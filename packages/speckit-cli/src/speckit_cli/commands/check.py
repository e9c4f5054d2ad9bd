from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from speckit_cli.detect import detect_tools

console = Console()


def check_command(
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Validate availability of required/optional tools.

    CLI-based agents show as available when their command is on PATH.
    IDE-based agents (copilot, windsurf) may not have a CLI; they are
    optional.
    """
    results = detect_tools()

    if json_output:
        typer.echo(json.dumps({name: s.to_dict() for name, s in results.items()}))
        return

    table = Table(
        title="Tool Check",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("", justify="center")
    table.add_column("Tool", style="bold")
    table.add_column("Version")

    for name, status in results.items():
        mark = "[green]✓[/green]" if status.ok else "[red]✗[/red]"
        table.add_row(mark, name, status.version or "-")

    console.print(table)
    found = sum(1 for s in results.values() if s.ok)
    console.print(f"\n[dim]{found}/{len(results)} tool(s) available.[/dim]")
