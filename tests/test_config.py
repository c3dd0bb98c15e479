"""Tests for configuration loading."""

import json

import pytest

from wsl_pathconv.config import settings
from wsl_pathconv.config.settings import ConverterConfig, get_config, reset_config, set_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "WSLCONV_DIRECTION",
        "WSLCONV_OUTPUT_FORMAT",
        "WSLCONV_COPY",
        "WSLCONV_LOG_LEVEL",
        "WSLCONV_LOG_FILE",
        "WSLCONV_DEBUG",
        "WSLCONV_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "_global_config", None)


class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_defaults(self):
        config = ConverterConfig.default()
        assert config.direction == "auto"
        assert config.output.format == "text"
        assert config.logging.level == "WARNING"
        assert config.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WSLCONV_DIRECTION", "TO-WSL")
        monkeypatch.setenv("WSLCONV_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("WSLCONV_COPY", "yes")
        monkeypatch.setenv("WSLCONV_LOG_LEVEL", "debug")
        monkeypatch.setenv("WSLCONV_DEBUG", "0")

        config = ConverterConfig.from_env()
        assert config.direction == "to-wsl"
        assert config.output.format == "json"
        assert config.output.copy_to_clipboard is True
        assert config.logging.level == "DEBUG"
        assert config.debug is False

    def test_save_and_load(self, tmp_path):
        config = ConverterConfig()
        config.direction = "to-windows"
        config.output.show_source = True
        config.logging.log_file = "wslconv.log"

        path = tmp_path / "config.json"
        config.save(str(path))
        loaded = ConverterConfig.from_file(str(path))

        assert loaded == config

    def test_from_file_partial(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fail_fast": True, "output": {"format": "json"}}))

        config = ConverterConfig.from_file(str(path))
        assert config.fail_fast is True
        assert config.output.format == "json"
        assert config.direction == "auto"

    def test_from_file_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output": {"colour": "red"}}))

        with pytest.raises(ValueError):
            ConverterConfig.from_file(str(path))

    def test_from_file_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]")

        with pytest.raises(ValueError):
            ConverterConfig.from_file(str(path))

    @pytest.mark.parametrize(
        "field, value",
        [("direction", "sideways"), ("format", "xml"), ("level", "LOUD"), ("level", 10)],
    )
    def test_validate_rejects(self, field, value):
        config = ConverterConfig()
        if field == "direction":
            config.direction = value
        elif field == "format":
            config.output.format = value
        else:
            config.logging.level = value
        assert config.validate() is False


class TestGlobalConfig:
    """Tests for the process-wide configuration accessors."""

    def test_get_config_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WSLCONV_DIRECTION", "to-windows")
        assert get_config().direction == "to-windows"
        assert get_config() is get_config()

    def test_get_config_from_file(self, monkeypatch, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"direction": "to-wsl"}))
        monkeypatch.setenv("WSLCONV_CONFIG_FILE", str(path))
        assert get_config().direction == "to-wsl"

    def test_set_and_reset(self):
        custom = ConverterConfig(direction="to-wsl")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config().direction == "auto"
