"""Tests for configuration loading and validation."""

import pytest

from resume_builder.config import AppConfig, load_config, load_raw_config
from resume_builder.config_validator import ConfigError, Severity, has_errors, validate_config


class TestValidateConfig:
    """Tests for validate_config()."""

    def _valid_config(self) -> dict:
        """Return a minimal valid config."""
        return {
            "store": "memory",
            "db_path": "workspace/resumes.db",
            "state_file": "workspace/state.json",
            "log_level": "INFO",
        }

    def test_valid_config_no_issues(self):
        assert validate_config(self._valid_config()) == []

    def test_unknown_store_is_error(self):
        config = self._valid_config()
        config["store"] = "mongodb"
        issues = validate_config(config)
        assert has_errors(issues)
        assert [e.field for e in issues] == ["store"]

    def test_memory_without_state_file_warns(self):
        config = self._valid_config()
        config["state_file"] = ""
        issues = validate_config(config)
        assert not has_errors(issues)
        assert issues[0].field == "state_file"
        assert issues[0].severity == Severity.WARNING

    def test_sqlite_needs_db_path(self):
        config = self._valid_config()
        config.update(store="sqlite", db_path="", state_file="")
        issues = validate_config(config)
        assert has_errors(issues)
        assert issues[0].field == "db_path"

    def test_sqlite_db_path_cannot_be_directory(self, tmp_path):
        config = self._valid_config()
        config.update(store="sqlite", db_path=str(tmp_path), state_file="")
        issues = validate_config(config)
        assert [e.field for e in issues if e.severity == Severity.ERROR] == ["db_path"]

    def test_state_file_ignored_by_sqlite_warns(self):
        config = self._valid_config()
        config["store"] = "sqlite"
        issues = validate_config(config)
        assert not has_errors(issues)
        assert [e.field for e in issues] == ["state_file"]

    def test_bad_log_level(self):
        config = self._valid_config()
        config["log_level"] = "LOUD"
        issues = validate_config(config)
        assert has_errors(issues)
        assert issues[0].field == "log_level"


class TestHasErrors:
    def test_empty(self):
        assert not has_errors([])

    def test_only_warnings(self):
        assert not has_errors([ConfigError("x", "warn", Severity.WARNING)])

    def test_with_error(self):
        issues = [ConfigError("x", "warn", Severity.WARNING), ConfigError("y", "err", Severity.ERROR)]
        assert has_errors(issues)


class TestLoadConfig:
    def test_defaults(self):
        assert load_config() == AppConfig()

    def test_yaml_file_with_env_placeholder(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RESUME_DB", "/data/resumes.db")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("store: SQLite\ndb_path: ${RESUME_DB}\nlog_level: debug\n", encoding="utf-8")

        config = load_config(str(config_file))

        assert config.store == "sqlite"
        assert config.db_path == "/data/resumes.db"
        assert config.log_level == "DEBUG"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("store: sqlite\n", encoding="utf-8")
        monkeypatch.setenv("RESUME_BUILDER_CONFIG", str(config_file))
        monkeypatch.setenv("RESUME_BUILDER_STORE", "memory")
        monkeypatch.setenv("RESUME_BUILDER_STATE_FILE", "state.json")

        config = load_config()

        assert config.store == "memory"
        assert config.state_file == "state.json"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_config(str(tmp_path / "missing.yaml"))

    def test_non_mapping_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_raw_config(str(config_file))
