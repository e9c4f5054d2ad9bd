"""Types for the speckit-templates package."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class OutputFormat(enum.Enum):
    """How command files are written for an agent.

    The value is the file suffix used for the written command.
    """

    PLAIN_MARKDOWN = "md"
    RENAMED_MARKDOWN = "prompt.md"
    TOML = "toml"


@dataclass(frozen=True, slots=True)
class AgentDescriptor:
    """Where an agent expects its command files and in which format."""

    key: str
    path: str
    output_format: OutputFormat


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """A Markdown command template split into frontmatter and body.

    ``description`` is *None* when the file has no frontmatter or the
    frontmatter carries no ``description`` field.
    """

    body: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ConvertedDocument:
    """The two fields of a TOML command file, ready to be rendered."""

    description: str
    prompt: str
