"""Unit tests for GeneratorConfig (src.config).

Tests cover:
- Defaults and derived paths
- Immutability
- from_env: recognised variables, boolean parsing, CLI overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import GeneratorConfig

pytestmark = pytest.mark.unit


class TestGeneratorConfigDefaults:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.entity_type == ""
        assert config.industry is None
        assert config.project_root == Path(".")
        assert config.app_dir == "src/app"
        assert config.components_dir == "src/components"
        assert config.dry_run is False
        assert config.typescript_check is False
        assert config.dev_server_url == "http://localhost:3001"

    def test_derived_paths(self, tmp_path):
        config = GeneratorConfig(project_root=tmp_path)
        assert config.components_path == tmp_path / "src" / "components"

    def test_frozen(self):
        config = GeneratorConfig()
        with pytest.raises(ValidationError):
            config.dry_run = True

    def test_model_copy(self):
        config = GeneratorConfig(entity_type="LEAD")
        other = config.model_copy(update={"dry_run": True})
        assert other.dry_run is True
        assert config.dry_run is False


class TestFromEnv:
    def test_no_environment(self):
        assert GeneratorConfig.from_env() == GeneratorConfig()

    def test_reads_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HERA_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("HERA_APP_DIR", "app")
        monkeypatch.setenv("HERA_TYPESCRIPT_CHECK", "1")
        monkeypatch.setenv("HERA_DEV_SERVER_URL", "http://localhost:4000")

        config = GeneratorConfig.from_env()
        assert config.project_root == tmp_path
        assert config.app_dir == "app"
        assert config.typescript_check is True
        assert config.dev_server_url == "http://localhost:4000"

    @pytest.mark.parametrize("raw, expected", [("true", True), ("YES", True), ("0", False), ("off", False)])
    def test_typescript_flag_parsing(self, monkeypatch, raw, expected):
        monkeypatch.setenv("HERA_TYPESCRIPT_CHECK", raw)
        assert GeneratorConfig.from_env().typescript_check is expected

    def test_overrides_win(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HERA_PROJECT_ROOT", "/from/env")
        config = GeneratorConfig.from_env(project_root=tmp_path, entity_type="LEAD")
        assert config.project_root == tmp_path
        assert config.entity_type == "LEAD"

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("HERA_TYPESCRIPT_CHECK", "1")
        config = GeneratorConfig.from_env(typescript_check=None, industry=None)
        assert config.typescript_check is True
        assert config.industry is None
