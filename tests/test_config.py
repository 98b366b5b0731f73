import os

import pytest

from manor_logic.config import ConfigError, PROJECT_ROOT, load_settings

ENV_KEYS = ["MANOR_SETTINGS", "MANOR_TIME_LIMIT", "MANOR_TYPE_DELAY_MS", "MANOR_AUDIO",
            "MANOR_AUDIO_DIR", "MANOR_LOG_DIR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env out of these tests
    monkeypatch.setattr("manor_logic.config.load_dotenv", lambda *a, **k: False)


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "absent.yaml"))
    assert settings.time_limit_seconds == 480
    assert settings.type_delay_ms == 10
    assert settings.audio_enabled is True
    assert settings.audio_dir == os.path.join(PROJECT_ROOT, "assets/audio")
    assert settings.log_dir is None


def test_yaml_values(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "time_limit_seconds: 300\n"
        "type_delay_ms: 0\n"
        "audio_enabled: false\n"
        f"audio_dir: {tmp_path}\n"
        "log_dir: logs\n"
    )
    settings = load_settings(str(path))
    assert settings.time_limit_seconds == 300
    assert settings.type_delay_ms == 0
    assert settings.audio_enabled is False
    assert settings.audio_dir == str(tmp_path)
    assert settings.log_dir == "logs"


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("time_limit_seconds: 300\naudio_enabled: true\n")
    monkeypatch.setenv("MANOR_TIME_LIMIT", "90")
    monkeypatch.setenv("MANOR_AUDIO", "off")
    settings = load_settings(str(path))
    assert settings.time_limit_seconds == 90
    assert settings.audio_enabled is False


def test_settings_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("type_delay_ms: 25\n")
    monkeypatch.setenv("MANOR_SETTINGS", str(path))
    assert load_settings().type_delay_ms == 25


@pytest.mark.parametrize("content", [
    "time_limit_seconds: soon\n",
    "time_limit_seconds: -5\n",
    "- just\n- a list\n",
    "time_limit_seconds: [unclosed\n",
])
def test_bad_settings_raise_config_error(tmp_path, content):
    path = tmp_path / "settings.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_settings(str(path))
