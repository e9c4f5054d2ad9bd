"""List or show Copilot prompt files from .github/prompts."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

console = Console()

_PROMPT_SUFFIX = ".prompt.md"


def _prompts_dir() -> Path:
    return (Path.cwd() / ".github" / "prompts").resolve()


def _discover(prompts_dir: Path) -> list[dict[str, str]]:
    return [
        {"name": f.name[: -len(_PROMPT_SUFFIX)], "file": str(f)}
        for f in sorted(prompts_dir.iterdir())
        if f.is_file() and f.name.lower().endswith(_PROMPT_SUFFIX)
    ]


def _emit(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload))


def prompts_command(
    name: str | None = typer.Argument(
        None, help="Prompt to show, by base name or file name"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """List or show Copilot prompt files from .github/prompts."""
    prompts_dir = _prompts_dir()
    if not prompts_dir.is_dir():
        reason = "No .github/prompts directory found"
        if json_output:
            _emit({"ok": False, "reason": reason, "promptsDir": str(prompts_dir)})
        else:
            console.print(f"[yellow]{reason} at {prompts_dir}[/yellow]")
        return

    items = _discover(prompts_dir)

    if not name:
        if json_output:
            _emit({"ok": True, "count": len(items), "items": items})
            return
        console.print(f"[cyan]Found {len(items)} prompt(s):[/cyan]")
        for item in items:
            console.print(f"- {item['name']} ({item['file']})", highlight=False)
        return

    wanted = name.lower()
    match = next(
        (
            item for item in items
            if item["name"].lower() == wanted
            or Path(item["file"]).name.lower() == wanted
        ),
        None,
    )
    if match is None:
        reason = f"Prompt not found: {name}"
        available = [item["name"] for item in items]
        if json_output:
            _emit({"ok": False, "reason": reason, "available": available})
            return
        console.print(f"[red]{reason}[/red]")
        if available:
            console.print(f"[dim]Available: {', '.join(available)}[/dim]")
        return

    content = Path(match["file"]).read_text(encoding="utf-8")
    if json_output:
        _emit({"ok": True, "name": match["name"], "file": match["file"], "content": content})
    else:
        # raw so it can be piped to a clipboard tool
        typer.echo(content, nl=not content.endswith("\n"))
