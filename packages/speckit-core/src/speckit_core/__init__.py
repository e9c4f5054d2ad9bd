"""Spec Kit Core: shared types, config, errors, and logging."""
from __future__ import annotations

from speckit_core._version import __version__
from speckit_core.config import (
    DefaultsConfig,
    LoggingConfig,
    SpeckitConfig,
    TemplatesConfig,
)
from speckit_core.errors import (
    ConfigError,
    SpeckitError,
    TemplateError,
    TemplateSourceNotFoundError,
)
from speckit_core.logging import get_logger, setup_logging
from speckit_core.types import InitFlags, InitResult, ToolStatus

__all__ = [
    # Errors
    "ConfigError",
    # Config
    "DefaultsConfig",
    # Types
    "InitFlags",
    "InitResult",
    "LoggingConfig",
    "SpeckitConfig",
    "SpeckitError",
    "TemplateError",
    "TemplateSourceNotFoundError",
    "TemplatesConfig",
    "ToolStatus",
    # Version
    "__version__",
    # Logging
    "get_logger",
    "setup_logging",
]
