"""Settings from settings.yaml, with .env / environment overrides."""

import os
from dataclasses import dataclass

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

FALSE_WORDS = {"0", "false", "no", "off"}


class ConfigError(Exception):
    pass


@dataclass
class Settings:
    time_limit_seconds: int = 480  # 8 minutes
    type_delay_ms: int = 10
    audio_enabled: bool = True
    audio_dir: str = "assets/audio"
    log_dir: str | None = None


def _as_int(key: str, value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if number < 0:
        raise ConfigError(f"{key} must not be negative, got {number}")
    return number


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in FALSE_WORDS


def load_settings(path: str | None = None) -> Settings:
    """Build Settings from (in rising priority) defaults, the YAML file, and the environment."""
    load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

    if path is None:
        path = os.getenv("MANOR_SETTINGS", os.path.join(PROJECT_ROOT, "settings.yaml"))

    data = {}
    if os.path.exists(path):
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read settings file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

    env_overrides = {
        "time_limit_seconds": os.getenv("MANOR_TIME_LIMIT"),
        "type_delay_ms": os.getenv("MANOR_TYPE_DELAY_MS"),
        "audio_enabled": os.getenv("MANOR_AUDIO"),
        "audio_dir": os.getenv("MANOR_AUDIO_DIR"),
        "log_dir": os.getenv("MANOR_LOG_DIR"),
    }
    data.update({k: v for k, v in env_overrides.items() if v is not None})

    settings = Settings()
    if "time_limit_seconds" in data:
        settings.time_limit_seconds = _as_int("time_limit_seconds", data["time_limit_seconds"])
    if "type_delay_ms" in data:
        settings.type_delay_ms = _as_int("type_delay_ms", data["type_delay_ms"])
    if "audio_enabled" in data:
        settings.audio_enabled = _as_bool(data["audio_enabled"])
    if data.get("audio_dir"):
        settings.audio_dir = str(data["audio_dir"])
    if data.get("log_dir"):
        settings.log_dir = str(data["log_dir"])

    if not os.path.isabs(settings.audio_dir):
        settings.audio_dir = os.path.join(PROJECT_ROOT, settings.audio_dir)
    return settings
