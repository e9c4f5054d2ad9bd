"""Tests for persisted wizard preferences."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from speckit_cli.preferences import load_preferences, preferences_path, save_preferences

if TYPE_CHECKING:
    from pathlib import Path


class TestPreferences:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_preferences(tmp_path) == {}

    def test_save_then_load(self, tmp_path: Path) -> None:
        save_preferences(
            {
                "projectName": "demo",
                "ai": "gemini",
                "script": "ps",
                "here": True,
                "noGit": 1,
                "dryRun": True,
                "githubToken": "secret",
            },
            tmp_path,
        )

        assert load_preferences(tmp_path) == {
            "ai": "gemini",
            "script": "ps",
            "here": True,
            "noGit": True,
            "ignoreAgentTools": False,
            "debug": False,
            "lastProjectName": "demo",
        }

    def test_file_format(self, tmp_path: Path) -> None:
        save_preferences({"ai": "claude"}, tmp_path)

        text = preferences_path(tmp_path).read_text(encoding="utf-8")
        assert text.endswith("}\n")
        data = json.loads(text)
        assert data["script"] == "sh"
        assert "lastProjectName" not in data

    def test_invalid_json_ignored(self, tmp_path: Path) -> None:
        path = preferences_path(tmp_path)
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        assert load_preferences(tmp_path) == {}

    def test_non_object_ignored(self, tmp_path: Path) -> None:
        path = preferences_path(tmp_path)
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_preferences(tmp_path) == {}

    def test_save_failure_is_not_raised(self, tmp_path: Path) -> None:
        blocker = tmp_path / ".specify"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        save_preferences({"ai": "claude"}, tmp_path)
        assert load_preferences(tmp_path) == {}
