"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gosecrules.config.loader import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GOSECRULES_INCLUDE",
        "GOSECRULES_EXCLUDE",
        "GOSECRULES_TRACK_SUPPRESSIONS",
        "GOSECRULES_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.rules.include == []
        assert cfg.rules.exclude == []
        assert cfg.rules.track_suppressions is False
        assert cfg.output.format == "terminal"

    def test_custom_toml(self, tmp_path: Path, config_file: Path):
        cfg = load_config(tmp_path)
        assert cfg.rules.exclude == ["G104"]
        assert cfg.rules.track_suppressions is True
        assert cfg.output.format == "json"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text(
            '[rules]\ninclude = ["G101"]\nseverity = "high"\n[extra]\nx = 1\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.rules.include == ["G101"]

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[rules]\nexclude = ["G401"]\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.rules.exclude == ["G401"]

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_ids_must_be_list(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text('[rules]\nexclude = "G104"\n')
        with pytest.raises(ConfigError, match="exclude"):
            load_config(tmp_path)

    def test_ids_must_be_strings(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text('[rules]\nexclude = ["G104", 101]\n')
        with pytest.raises(ConfigError, match="exclude must be a list of rule IDs"):
            load_config(tmp_path)

    def test_track_suppressions_must_be_bool(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text(
            '[rules]\nexclude = ["G101"]\ntrack_suppressions = "false"\n'
        )
        with pytest.raises(ConfigError, match="track_suppressions must be a boolean"):
            load_config(tmp_path)

    def test_show_summary_must_be_bool(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text('[output]\nshow_summary = 0\n')
        with pytest.raises(ConfigError, match="show_summary must be a boolean"):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text('rules = "G104"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".gosecrules.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_include_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GOSECRULES_INCLUDE", "G101, G401")
        cfg = load_config(tmp_path)
        assert cfg.rules.include == ["G101", "G401"]

    def test_exclude_appends_to_file(self, tmp_path: Path, config_file: Path, monkeypatch):
        monkeypatch.setenv("GOSECRULES_EXCLUDE", "G601,")
        cfg = load_config(tmp_path)
        assert cfg.rules.exclude == ["G104", "G601"]

    @pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("yes", True), ("0", False)])
    def test_track_suppressions(self, tmp_path: Path, monkeypatch, value, expected):
        monkeypatch.setenv("GOSECRULES_TRACK_SUPPRESSIONS", value)
        cfg = load_config(tmp_path)
        assert cfg.rules.track_suppressions is expected

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GOSECRULES_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_invalid_format_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GOSECRULES_FORMAT", "xml")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
