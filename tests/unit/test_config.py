"""Unit tests for the configuration module."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from arc_to_rocrate.config import CONFIG_PATH_ENV, Config, OtelConfig


def test_config_defaults() -> None:
    """Test Config with default values."""
    config = Config()

    assert config.log_level == "INFO"
    assert config.otel == OtelConfig()
    assert config.otel.endpoint is None
    assert config.otel.log_console_spans is False


def test_config_different_log_levels() -> None:
    """Test Config with different log levels."""
    log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NOTSET"]
    for level in log_levels:
        config = Config(log_level=level)  # type: ignore[arg-type]
        assert config.log_level == level


def test_config_log_level_case_insensitive() -> None:
    """Test that log levels are upper-cased."""
    assert Config.from_data({"log_level": "debug"}).log_level == "DEBUG"


def test_config_invalid_log_level() -> None:
    """Test that unknown log levels are rejected."""
    with pytest.raises(ValidationError):
        Config.from_data({"log_level": "LOUD"})


def test_config_otel_none() -> None:
    """Test that a null otel section falls back to defaults."""
    assert Config.model_validate({"otel": None}).otel == OtelConfig()


def test_config_from_data_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables override data."""
    monkeypatch.setenv("ARC_TO_ROCRATE_LOG_LEVEL", "WARNING")

    config = Config.from_data({"log_level": "DEBUG"})

    assert config.log_level == "WARNING"


def test_config_from_data_nested_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that nested otel settings are discovered in the environment."""
    monkeypatch.setenv("ARC_TO_ROCRATE_OTEL_ENDPOINT", "http://signoz:4318")
    monkeypatch.setenv("ARC_TO_ROCRATE_OTEL_LOG_CONSOLE_SPANS", "true")

    config = Config.from_data({})

    assert config.otel.endpoint == "http://signoz:4318"
    assert config.otel.log_console_spans is True


def test_config_from_yaml_file(tmp_path: Path) -> None:
    """Test loading the configuration from a YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        textwrap.dedent(
            """\
            log_level: DEBUG
            otel:
              endpoint: http://collector:4318
              log_console_spans: true
            """
        ),
        encoding="utf-8",
    )

    config = Config.from_yaml_file(config_file)

    assert config.log_level == "DEBUG"
    assert config.otel.endpoint == "http://collector:4318"
    assert config.otel.log_console_spans is True


def test_config_from_yaml_file_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables override the YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("log_level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("ARC_TO_ROCRATE_LOG_LEVEL", "ERROR")

    assert Config.from_yaml_file(config_file).log_level == "ERROR"


def test_config_from_yaml_file_not_found(tmp_path: Path) -> None:
    """Test that a missing config file raises RuntimeError."""
    with pytest.raises(RuntimeError, match="not found"):
        Config.from_yaml_file(tmp_path / "missing.yaml")


def test_config_from_yaml_file_not_a_mapping(tmp_path: Path) -> None:
    """Test that a YAML list is rejected."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(RuntimeError, match="mapping"):
        Config.from_yaml_file(config_file)


def test_config_from_environment_without_file() -> None:
    """Test loading defaults when no config file is named."""
    assert Config.from_environment() == Config()


def test_config_from_environment_with_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading the config file named by the environment."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("log_level: WARNING\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

    assert Config.from_environment().log_level == "WARNING"
