from __future__ import annotations


class SpeckitError(Exception):
    """Base exception for all Spec Kit errors."""


# ── Config Errors ────────────────────────────────────────────────────

class ConfigError(SpeckitError):
    """Invalid or unreadable configuration."""


# ── Template Errors ──────────────────────────────────────────────────

class TemplateError(SpeckitError):
    """Base for command-template errors."""


class TemplateSourceNotFoundError(TemplateError):
    """Configured template source directory does not exist."""
