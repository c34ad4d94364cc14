"""Tests for settings resolution."""
import pytest

from volumectl.config import Settings, load_settings, normalize_target
from volumectl.const import DEFAULT_TIMEOUT_SECS
from volumectl.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("target: https://file.example.com/\ntoken: file-token\ntimeout: 15\n")
    return str(path)


def test_defaults_without_file(tmp_path):
    settings = load_settings(environ={}, config_path=str(tmp_path / "missing.yaml"))
    assert settings == Settings(target=None, token=None, timeout=DEFAULT_TIMEOUT_SECS)


def test_file_values(config_file):
    settings = load_settings(environ={}, config_path=config_file)
    assert settings.target == "https://file.example.com"
    assert settings.token == "file-token"
    assert settings.timeout == 15.0


def test_environment_overrides_file(config_file):
    environ = {"VOLUMECTL_TARGET": "env.example.com", "VOLUMECTL_TIMEOUT": "5"}
    settings = load_settings(environ=environ, config_path=config_file)
    assert settings.target == "https://env.example.com"
    assert settings.token == "file-token"
    assert settings.timeout == 5.0


def test_target_argument_wins(config_file):
    environ = {"VOLUMECTL_TARGET": "https://env.example.com"}
    settings = load_settings(target="http://flag.example.com", environ=environ, config_path=config_file)
    assert settings.target == "http://flag.example.com"


def test_config_path_from_environment(config_file):
    settings = load_settings(environ={"VOLUMECTL_CONFIG": config_file})
    assert settings.token == "file-token"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("target: [unclosed\n")
    with pytest.raises(ConfigError):
        load_settings(environ={}, config_path=str(path))


def test_config_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_settings(environ={}, config_path=str(path))


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_invalid_timeout(value, tmp_path):
    with pytest.raises(ConfigError):
        load_settings(environ={"VOLUMECTL_TIMEOUT": value}, config_path=str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize("raw,expected", [
    ("api.example.com", "https://api.example.com"),
    ("http://api.example.com///", "http://api.example.com"),
    (" https://api.example.com ", "https://api.example.com"),
])
def test_normalize_target(raw, expected):
    assert normalize_target(raw) == expected
