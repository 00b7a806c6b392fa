"""Tests for template discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write
from fastball.rendering.discovery import discover_templates


class TestDiscoverTemplates:
    @pytest.mark.unit
    def test_empty_directory(self, tmp_path):
        assert discover_templates(tmp_path) == []

    @pytest.mark.unit
    def test_dotenv_then_config_templates_sorted(self, tmp_path):
        write(tmp_path, "config/secrets.yml.erb", "")
        write(tmp_path, "config/database.yml.erb", "")
        write(tmp_path, ".env.erb", "")

        assert discover_templates(tmp_path) == [
            Path(".env.erb"),
            Path("config/database.yml.erb"),
            Path("config/secrets.yml.erb"),
        ]

    @pytest.mark.unit
    def test_ignores_other_locations_and_suffixes(self, tmp_path):
        write(tmp_path, "config/database.yml", "")
        write(tmp_path, "config/nested/deep.yml.erb", "")
        write(tmp_path, "other.yml.erb", "")
        write(tmp_path, "config/app.yml.erb", "")

        assert discover_templates(tmp_path) == [Path("config/app.yml.erb")]

    @pytest.mark.unit
    def test_directories_are_not_templates(self, tmp_path):
        (tmp_path / "config" / "dir.erb").mkdir(parents=True)
        (tmp_path / ".env.erb").mkdir()
        assert discover_templates(tmp_path) == []

    @pytest.mark.unit
    def test_hidden_config_templates_skipped(self, tmp_path):
        write(tmp_path, "config/.backup.yml.erb", "")
        write(tmp_path, "config/.erb", "")
        write(tmp_path, "config/app.yml.erb", "")

        assert discover_templates(tmp_path) == [Path("config/app.yml.erb")]
