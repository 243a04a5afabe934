"""Tests for AppConfig and its JSON file handling."""

import json
from pathlib import Path

import pytest

from berlinclock.exceptions import BerlinClockError, ConfigError
from berlinclock.models import AppConfig, OutputFormat


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.output_format is OutputFormat.COMPACT
        assert config.log_dir.name == "logs"

    @pytest.mark.unit
    def test_log_dir_serialized_as_string(self):
        dumped = AppConfig(log_dir=Path("/tmp/bc")).model_dump(mode="json")
        assert dumped["log_dir"] == str(Path("/tmp/bc"))

    @pytest.mark.unit
    def test_from_values_rejects_unknown_format(self, config_path):
        with pytest.raises(ConfigError) as exc_info:
            AppConfig.from_values({"output_format": "sideways"}, config_path)

        assert exc_info.value.field == "output_format"
        assert exc_info.value.path == config_path
        assert isinstance(exc_info.value, BerlinClockError)


class TestConfigFile:
    """Loading and saving the config file."""

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir, config_path):
        AppConfig(output_format=OutputFormat.ROWS, log_dir=temp_dir / "logs").save(config_path)

        loaded = AppConfig.load_or_default(config_path)
        assert loaded.output_format is OutputFormat.ROWS
        assert loaded.log_dir == temp_dir / "logs"

    @pytest.mark.unit
    def test_missing_file_gives_defaults_without_writing(self, config_path):
        loaded = AppConfig.load_or_default(config_path)
        assert loaded.output_format is OutputFormat.COMPACT
        assert not config_path.exists()

    @pytest.mark.unit
    def test_save_creates_parent_directories(self, temp_dir):
        path = temp_dir / "nested" / "deeper" / "config.json"
        AppConfig().save(path)
        assert path.exists()

    @pytest.mark.unit
    def test_save_keeps_backup_of_previous_file(self, config_path):
        AppConfig(output_format=OutputFormat.ROWS).save(config_path)
        AppConfig(output_format=OutputFormat.COMPACT).save(config_path)

        backup = json.loads(config_path.with_name("config.json.bak").read_text())
        assert backup["output_format"] == "rows"
        assert json.loads(config_path.read_text())["output_format"] == "compact"

    @pytest.mark.unit
    def test_save_leaves_no_staging_file(self, config_path):
        AppConfig().save(config_path)
        assert not config_path.with_name("config.json.tmp").exists()

    @pytest.mark.unit
    def test_empty_file_rejected(self, config_path):
        config_path.write_text("  \n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.reason == "file is empty"

    @pytest.mark.unit
    def test_broken_json_rejected_and_file_kept(self, config_path):
        config_path.write_text("{ broken", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.reason.startswith("invalid JSON")
        assert "config reset" in exc_info.value.recovery_hint
        assert config_path.read_text() == "{ broken"

    @pytest.mark.unit
    def test_bad_value_names_the_field(self, config_path):
        config_path.write_text(json.dumps({"output_format": "sideways"}), encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field == "output_format"
        assert "output_format" in exc_info.value.user_message
        assert str(config_path) in exc_info.value.technical_message

    @pytest.mark.unit
    def test_several_bad_values_listed(self, config_path):
        config_path.write_text(
            json.dumps({"output_format": "sideways", "log_dir": 12}), encoding="utf-8"
        )

        with pytest.raises(ConfigError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field is None
        assert "output_format" in exc_info.value.reason
        assert "log_dir" in exc_info.value.reason
