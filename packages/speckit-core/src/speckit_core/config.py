from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from speckit_core.errors import ConfigError

CONFIG_DIRNAME = ".specify"
CONFIG_FILENAME = "config.toml"


def global_config_path() -> Path:
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def project_config_path(project_dir: Path | str | None = None) -> Path:
    base = Path.cwd() if project_dir is None else Path(project_dir)
    return base / CONFIG_DIRNAME / CONFIG_FILENAME


def _load_toml(path: Path) -> dict:
    """Load a TOML file, returning empty dict if missing.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (1 level deep for TOML sections)."""
    merged = dict(base)
    for key, val in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(val, dict)
        ):
            merged[key] = {**merged[key], **val}
        else:
            merged[key] = val
    return merged


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: str = "WARNING"
    json: bool = False


@dataclass(frozen=True, slots=True)
class TemplatesConfig:
    source_dir: str | None = None


@dataclass(frozen=True, slots=True)
class DefaultsConfig:
    ai: str = "claude"
    script: str = "sh"


@dataclass(frozen=True, slots=True)
class SpeckitConfig:
    """Top-level configuration, parsed from .specify/config.toml."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> SpeckitConfig:
        return cls._from_raw(_load_toml(Path(path)))

    @classmethod
    def load(
        cls, project_dir: Path | str | None = None
    ) -> SpeckitConfig:
        """Load config with global → project layering.

        Resolution order (later wins):
        1. Built-in defaults
        2. ~/.specify/config.toml (global)
        3. .specify/config.toml (project)
        """
        global_raw = _load_toml(global_config_path())
        project_raw = _load_toml(project_config_path(project_dir))
        return cls._from_raw(_deep_merge(global_raw, project_raw))

    @classmethod
    def _from_raw(cls, raw: dict) -> SpeckitConfig:
        """Build SpeckitConfig from a raw TOML dict."""

        def _pick(section: object, dc: type) -> dict:
            if not isinstance(section, dict):
                return {}
            fields = dc.__dataclass_fields__
            return {
                k: v for k, v in section.items() if k in fields
            }

        return cls(
            logging=LoggingConfig(
                **_pick(raw.get("logging", {}), LoggingConfig)
            ),
            templates=TemplatesConfig(
                **_pick(raw.get("templates", {}), TemplatesConfig)
            ),
            defaults=DefaultsConfig(
                **_pick(raw.get("defaults", {}), DefaultsConfig)
            ),
        )
