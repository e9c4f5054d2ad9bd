"""Spec Kit Templates: agent registry, Markdown-to-TOML conversion, installation."""
from __future__ import annotations

from speckit_templates.agents import (
    AGENTS,
    AI_CHOICES,
    destination_for,
    requires_toml_format,
    resolve_target,
)
from speckit_templates.installer import default_templates_dir, install_command_templates
from speckit_templates.tomlify import (
    DEFAULT_DESCRIPTION,
    convert,
    convert_file,
    parse_command_template,
    render_toml,
    substitute_placeholders,
    to_document,
)
from speckit_templates.types import (
    AgentDescriptor,
    CommandTemplate,
    ConvertedDocument,
    OutputFormat,
)

__all__ = [
    "AGENTS",
    "AI_CHOICES",
    "DEFAULT_DESCRIPTION",
    "AgentDescriptor",
    "CommandTemplate",
    "ConvertedDocument",
    "OutputFormat",
    "convert",
    "convert_file",
    "default_templates_dir",
    "destination_for",
    "install_command_templates",
    "parse_command_template",
    "render_toml",
    "requires_toml_format",
    "resolve_target",
    "substitute_placeholders",
    "to_document",
]
