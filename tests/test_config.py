"""Tests für das Konfigurationssystem."""

from pathlib import Path

import pytest

from config.defaults import default_planner_config
from config.manager import ConfigManager
from config.schema import (
    ImportConfig,
    LogLevel,
    OutputConfig,
    PlannerConfig,
    TreeInsertOrder,
)


# ─── DEFAULT-KONFIGURATION ────────────────────────────────────────────────────

class TestDefaultConfig:
    def test_default_config_valid(self):
        config = default_planner_config()
        assert config.importer.delimiter == ","
        assert config.importer.strict_prerequisites is True
        assert config.tree.insert_order == TreeInsertOrder.MOST_PREREQUISITES_FIRST
        assert config.output.log_level == LogLevel.WARNING

    def test_empty_config_uses_defaults(self):
        config = PlannerConfig.model_validate({})
        assert config == default_planner_config()

    def test_delimiter_single_char(self):
        with pytest.raises(Exception):
            ImportConfig(delimiter=";;")

    def test_log_level_case_insensitive(self):
        assert OutputConfig(log_level="debug").log_level == LogLevel.DEBUG

    def test_unknown_insert_order_raises(self):
        with pytest.raises(Exception):
            PlannerConfig.model_validate({"tree": {"insert_order": "zufall"}})


# ─── CONFIG-MANAGER ───────────────────────────────────────────────────────────

class TestConfigManager:
    def _manager(self, tmp_path: Path) -> ConfigManager:
        mgr = ConfigManager()
        mgr.CONFIG_DIR = tmp_path
        mgr.DEFAULT_CONFIG = tmp_path / "planner_config.yaml"
        return mgr

    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern, laden und validieren: vollständiger Roundtrip."""
        config = default_planner_config().model_copy(update={
            "tree": default_planner_config().tree.model_copy(
                update={"insert_order": TreeInsertOrder.AS_LOADED}),
        })
        mgr = self._manager(tmp_path)

        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()
        text = mgr.DEFAULT_CONFIG.read_text(encoding="utf-8")
        assert "Studienplaner" in text

        loaded = mgr.load()
        assert loaded == config

    def test_first_run_check(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        assert mgr.first_run_check() is True
        mgr.save(default_planner_config())
        assert mgr.first_run_check() is False

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ConfigManager().load(tmp_path / "not_there.yaml")

    def test_load_or_default_without_file(self, tmp_path: Path):
        mgr = self._manager(tmp_path)
        assert mgr.load_or_default() == default_planner_config()

    def test_invalid_file_raises_value_error(self, tmp_path: Path):
        p = tmp_path / "kaputt.yaml"
        p.write_text("importer:\n  delimiter: ';;;'\n", encoding="utf-8")
        with pytest.raises(ValueError, match="ungültig"):
            ConfigManager().load(p)
