from __future__ import annotations

import typer
from rich.console import Console
from speckit_templates import AI_CHOICES

from speckit_cli.commands.check import check_command
from speckit_cli.commands.config import config_app
from speckit_cli.commands.init import init_command
from speckit_cli.commands.prompts import prompts_command
from speckit_cli.commands.wizard import wizard_command

app = typer.Typer(
    name="specify",
    help=(
        "Spec Kit CLI for Spec-Driven Development (SDD). "
        "/constitution → /specify → /plan → /tasks → /implement."
    ),
    epilog=(
        "Examples: specify check | specify init my-app --ai claude | "
        "specify init --here --ai copilot. "
        f"Supported agents: {', '.join(AI_CHOICES)}"
    ),
    no_args_is_help=True,
)

app.command("check")(check_command)
app.command("init")(init_command)
app.command("wizard")(wizard_command)
app.command("prompts")(prompts_command)
app.add_typer(
    config_app,
    name="config",
    help="View and manage configuration",
)


@app.command()
def version() -> None:
    """Show the Spec Kit version."""
    from speckit_core import __version__

    Console().print(f"specify {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
