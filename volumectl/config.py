"""Settings for talking to the volume API."""
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from volumectl.const import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    DEFAULT_TIMEOUT_SECS,
    TARGET_ENV,
    TIMEOUT_ENV,
    TOKEN_ENV,
)
from volumectl.errors import ConfigError


@dataclass
class Settings:
    """Resolved client settings.

    ``target`` is the API base URL without the version segment.
    """
    target: Optional[str] = None
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECS


def normalize_target(target: str) -> str:
    """Strip trailing slashes and default the scheme to https."""
    target = target.strip().rstrip("/")
    if target and not target.startswith(("http://", "https://")):
        target = f"https://{target}"
    return target


def _load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _parse_timeout(value: Any, source: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout {value!r} in {source}")
    if timeout <= 0:
        raise ConfigError(f"Timeout in {source} must be positive, got {value!r}")
    return timeout


def load_settings(
    target: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[str] = None,
) -> Settings:
    """Resolve settings from defaults, config file, environment and ``target``.

    Later sources win: the YAML config file overrides the defaults, the
    environment overrides the file and an explicit ``target`` (the
    ``--target`` flag) overrides everything.
    """
    if environ is None:
        environ = os.environ
    if config_path is None:
        config_path = environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH

    settings = Settings()

    if os.path.exists(config_path):
        data = _load_yaml(config_path)
        if data.get("target"):
            settings.target = str(data["target"])
        if data.get("token"):
            settings.token = str(data["token"])
        if data.get("timeout") is not None:
            settings.timeout = _parse_timeout(data["timeout"], config_path)

    if environ.get(TARGET_ENV):
        settings.target = environ[TARGET_ENV]
    if environ.get(TOKEN_ENV):
        settings.token = environ[TOKEN_ENV]
    if environ.get(TIMEOUT_ENV):
        settings.timeout = _parse_timeout(environ[TIMEOUT_ENV], TIMEOUT_ENV)

    if target:
        settings.target = target

    if settings.target:
        settings.target = normalize_target(settings.target)
    return settings
