from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .utils import env_str, load_yaml_file, parse_env_bool

CONFIG_ENV_VAR = "CUE2M3U_CONFIG"
RECURSIVE_ENV_VAR = "CUE2M3U_RECURSIVE"
OVERWRITE_ENV_VAR = "CUE2M3U_OVERWRITE"
LOG_LEVEL_ENV_VAR = "CUE2M3U_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CUE2M3U_LOG_FILE"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    recursive: bool = False
    overwrite: bool = False
    log_level: str = "INFO"
    log_file: Path | None = None


def _coerce_bool(value: Any, *, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        parsed = parse_env_bool(value)
        if parsed is not None:
            return parsed
    raise ValueError(f"'{field_name}' must be a boolean (true/false, yes/no, on/off, 1/0)")


def _normalize_log_level(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{field_name}' must be a string")
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"'{field_name}' must be one of {', '.join(LOG_LEVELS)}")
    return level


def _build_settings(data: dict[str, Any]) -> Settings:
    log_file_raw = data.get("log_file")
    if log_file_raw is not None and not isinstance(log_file_raw, str):
        raise ValueError("'settings.log_file' must be a string path")

    return Settings(
        recursive=_coerce_bool(data.get("recursive", False), field_name="settings.recursive"),
        overwrite=_coerce_bool(data.get("overwrite", False), field_name="settings.overwrite"),
        log_level=_normalize_log_level(data.get("log_level", "INFO"), field_name="settings.log_level"),
        log_file=Path(log_file_raw).expanduser() if log_file_raw else None,
    )


def _apply_env_overrides(settings: Settings) -> Settings:
    overrides: dict[str, Any] = {}

    for field_name, env_name in (("recursive", RECURSIVE_ENV_VAR), ("overwrite", OVERWRITE_ENV_VAR)):
        raw = env_str(env_name)
        if raw is not None:
            overrides[field_name] = _coerce_bool(raw, field_name=env_name)

    log_level = env_str(LOG_LEVEL_ENV_VAR)
    if log_level is not None:
        overrides["log_level"] = _normalize_log_level(log_level, field_name=LOG_LEVEL_ENV_VAR)

    log_file = env_str(LOG_FILE_ENV_VAR)
    if log_file is not None:
        overrides["log_file"] = Path(log_file).expanduser()

    return replace(settings, **overrides)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from an optional YAML file, then apply environment overrides.

    The file is read from ``config_path``, or from ``$CUE2M3U_CONFIG`` when no
    path is given. Its ``settings`` mapping may define ``recursive``,
    ``overwrite``, ``log_level`` and ``log_file``.

    Raises:
        OSError: The configuration file could not be read.
        yaml.YAMLError: The configuration file is not valid YAML.
        ValueError: A setting has an invalid value.
    """
    if config_path is None:
        env_path = env_str(CONFIG_ENV_VAR)
        config_path = Path(os.path.expanduser(env_path)) if env_path else None

    data: dict[str, Any] = {}
    if config_path is not None:
        document = load_yaml_file(config_path)
        if not isinstance(document, dict):
            raise ValueError("Configuration file must contain a mapping at the top level")
        data = document.get("settings", {}) or {}
        if not isinstance(data, dict):
            raise ValueError("'settings' must be provided as a mapping when specified")

    return _apply_env_overrides(_build_settings(data))
