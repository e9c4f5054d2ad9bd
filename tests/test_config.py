from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from speckit_core.config import SpeckitConfig, global_config_path, project_config_path
from speckit_core.errors import ConfigError, SpeckitError


class TestConfig:
    def test_default_config(self):
        config = SpeckitConfig()
        assert config.logging.level == "WARNING"
        assert config.logging.json is False
        assert config.templates.source_dir is None
        assert config.defaults.ai == "claude"
        assert config.defaults.script == "sh"

    def test_from_toml_missing_file(self):
        config = SpeckitConfig.from_toml("/nonexistent/path/config.toml")
        assert config.defaults.ai == "claude"  # Returns defaults

    def test_from_toml(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
            f.write('''
[logging]
level = "DEBUG"
json = true

[templates]
source_dir = "~/templates"

[defaults]
ai = "gemini"
script = "ps"
unknown_key = "ignored"
''')
            f.flush()
            config = SpeckitConfig.from_toml(f.name)

        assert config.logging.level == "DEBUG"
        assert config.logging.json is True
        assert config.templates.source_dir == "~/templates"
        assert config.defaults.ai == "gemini"
        assert config.defaults.script == "ps"

        Path(f.name).unlink()

    def test_invalid_toml_raises(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[logging\nlevel = ", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            SpeckitConfig.from_toml(path)

    def test_config_error_is_speckit_error(self):
        assert issubclass(ConfigError, SpeckitError)

    def test_non_table_section_ignored(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('logging = "loud"\n', encoding="utf-8")
        assert SpeckitConfig.from_toml(path).logging.level == "WARNING"


class TestLayeredConfig:
    def test_project_overrides_global(self, workspace):
        global_path = global_config_path()
        global_path.parent.mkdir(parents=True)
        global_path.write_text(
            '[logging]\nlevel = "INFO"\n\n[defaults]\nai = "qwen"\nscript = "ps"\n',
            encoding="utf-8",
        )
        project_path = project_config_path(workspace)
        project_path.parent.mkdir(parents=True)
        project_path.write_text('[defaults]\nai = "gemini"\n', encoding="utf-8")

        config = SpeckitConfig.load(workspace)

        assert config.logging.level == "INFO"
        assert config.defaults.ai == "gemini"
        assert config.defaults.script == "ps"

    def test_defaults_without_files(self, workspace):
        config = SpeckitConfig.load()
        assert config == SpeckitConfig()

    def test_paths(self, workspace):
        assert project_config_path() == workspace / ".specify" / "config.toml"
        assert global_config_path() == Path.home() / ".specify" / "config.toml"
