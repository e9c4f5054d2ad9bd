"""Markdown command template -> TOML command converter.

Agents such as Gemini CLI and Qwen Code read commands from TOML files with a
``description`` and a triple-quoted ``prompt``.  The converter keeps the
frontmatter ``description``, uses the Markdown body as the prompt, rewrites
the argument placeholders (``$ARGUMENTS`` and ``{ARGS}`` become ``{{args}}``)
and leaves ``{SCRIPT}`` for the agent to substitute later.

Conversion is best-effort: a malformed template falls back to defaults
instead of failing, so one bad file never stops an install.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from speckit_templates.types import CommandTemplate, ConvertedDocument

DEFAULT_DESCRIPTION = "Command"
ARGS_TOKEN = "{{args}}"
ARGUMENT_PLACEHOLDERS: tuple[str, ...] = ("$ARGUMENTS", "{ARGS}")

# Whitespace as ECMAScript defines it (WhiteSpace + LineTerminator).
# Unlike str.strip(), \x1c-\x1f and \x85 are kept and U+FEFF is removed.
_TRIM_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = f"[{re.escape(_TRIM_CHARS)}]"

_FRONTMATTER_RE = re.compile(rf"---\n([\s\S]*?)\n---{_WS}*")
_QUOTED_DESCRIPTION_RE = re.compile(
    rf'^description{_WS}*:{_WS}*"([^"]+)"', re.MULTILINE
)
_PLAIN_DESCRIPTION_RE = re.compile(
    rf"^description{_WS}*:{_WS}*(.+)$", re.MULTILINE
)

def parse_command_template(text: str) -> CommandTemplate:
    """Split *text* into its frontmatter ``description`` and body.

    Only a block at the very start of the text counts as frontmatter.
    The whole block, including the closing ``---`` and any whitespace
    after it, is removed from the body.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return CommandTemplate(body=text)

    return CommandTemplate(
        body=text[match.end():],
        description=_extract_description(match.group(1)),
    )


def _extract_description(frontmatter: str) -> str | None:
    # quoted form wins over the raw remainder of the line
    found = _QUOTED_DESCRIPTION_RE.search(frontmatter) or _PLAIN_DESCRIPTION_RE.search(
        frontmatter
    )
    if found is None:
        return None
    return found.group(1).strip(_TRIM_CHARS)


def substitute_placeholders(body: str) -> str:
    """Replace every argument placeholder with ``{{args}}``."""
    for placeholder in ARGUMENT_PLACEHOLDERS:
        body = body.replace(placeholder, ARGS_TOKEN)
    return body


def to_document(template: CommandTemplate) -> ConvertedDocument:
    """Resolve the description and escape the prompt body for TOML."""
    prompt = substitute_placeholders(template.body)
    # a bare """ would close the triple-quoted prompt early
    prompt = prompt.replace('"""', '\\"\\"\\"')
    description = template.description
    if description is None:
        description = DEFAULT_DESCRIPTION
    return ConvertedDocument(description=description, prompt=prompt)


def render_toml(document: ConvertedDocument) -> str:
    """Render *document* as ``description`` then ``prompt``."""
    description = document.description.replace('"', '\\"')
    return "\n".join([
        f'description = "{description}"',
        "",
        'prompt = """',
        document.prompt.strip(_TRIM_CHARS),
        '"""',
        "",
    ])


def convert(markdown: Any) -> str:
    """Convert a Markdown command template to a TOML command document.

    Args:
        markdown: Template text, optionally starting with a ``---``
            frontmatter block.  Anything that is not a ``str`` yields
            an empty string.

    Returns:
        The TOML text, always ending with a newline.
    """
    if not isinstance(markdown, str):
        return ""
    return render_toml(to_document(parse_command_template(markdown)))


def convert_file(path: Path | str) -> str:
    """Read the template at *path* and convert it.

    Raises:
        OSError: If the file cannot be read.
    """
    return convert(Path(path).read_text(encoding="utf-8"))
