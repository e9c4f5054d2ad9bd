"""Copy command templates into an agent's command directory."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

from speckit_core.errors import TemplateSourceNotFoundError

from speckit_templates.agents import destination_for, resolve_target
from speckit_templates.tomlify import convert
from speckit_templates.types import OutputFormat

logger = logging.getLogger("speckit.templates.installer")

_BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "commands"


def default_templates_dir() -> Path:
    """Directory holding the command templates shipped with Spec Kit."""
    return _BUNDLED_TEMPLATES_DIR


def install_command_templates(
    project_dir: Path,
    agent: str | None,
    templates_dir: Path | None = None,
    dry_run: bool = False,
) -> list[Path]:
    """Write every command template in the format *agent* expects.

    Args:
        project_dir: Root of the project being initialized.
        agent: Agent identifier (case-insensitive).  Unknown or empty
            identifiers install nothing.
        templates_dir: Source directory of Markdown templates.  When
            *None*, the bundled templates are used.
        dry_run: Report the destination paths without touching disk.

    Returns:
        Destination paths, one per template, in source-name order.

    Raises:
        TemplateSourceNotFoundError: If an explicit *templates_dir*
            does not exist.
        OSError: If a template cannot be read or written.
    """
    target = resolve_target(agent)
    if target is None:
        logger.info("No known agent selected (%r); skipping templates", agent)
        return []

    if templates_dir is None:
        source_dir = default_templates_dir()
        if not source_dir.is_dir():
            logger.warning("Bundled templates missing: %s", source_dir)
            return []
    else:
        source_dir = Path(templates_dir).expanduser()
        if not source_dir.is_dir():
            msg = f"Template directory not found: {source_dir}"
            raise TemplateSourceNotFoundError(msg)

    target_dir = project_dir / target.path
    if not dry_run:
        target_dir.mkdir(parents=True, exist_ok=True)

    created: list[Path] = []
    for source in sorted(p for p in source_dir.iterdir() if p.is_file()):
        dest = target_dir / destination_for(target, source)
        if not dry_run:
            _write_template(source, dest, target.output_format)
        logger.debug("%s -> %s", source.name, dest)
        created.append(dest)

    logger.info(
        "%s %d template(s) for %s",
        "Would write" if dry_run else "Wrote",
        len(created),
        target.key,
    )
    return created


def _write_template(source: Path, dest: Path, output_format: OutputFormat) -> None:
    if output_format is OutputFormat.TOML:
        dest.write_text(convert(source.read_text(encoding="utf-8")), encoding="utf-8")
    elif output_format is OutputFormat.RENAMED_MARKDOWN:
        dest.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
    else:
        shutil.copyfile(source, dest)
