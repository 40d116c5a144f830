from __future__ import annotations

import pytest

from cli.config import DisplayConfig, load_config, parse_monitors
from settings import get_settings


@pytest.fixture()
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_environment_overrides_apply(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("AMBIENT_CAMERA_INDEX", "2")
    monkeypatch.setenv("AMBIENT_WARMUP_FRAMES", "3")
    monkeypatch.setenv("AMBIENT_WARMUP_DELAY", "0.25")
    monkeypatch.setenv("AMBIENT_XRANDR_BINARY", "/usr/local/bin/xrandr")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.camera_index == 2
    assert settings.warmup_frames == 3
    assert settings.warmup_delay == 0.25
    assert settings.xrandr_binary == "/usr/local/bin/xrandr"
    assert settings.log_level == "DEBUG"


def test_invalid_environment_values_fall_back_to_defaults(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("AMBIENT_CAMERA_INDEX", "front")
    monkeypatch.setenv("AMBIENT_WARMUP_FRAMES", "-1")
    monkeypatch.setenv("AMBIENT_HTTP_TIMEOUT", " ")

    settings = get_settings()

    assert settings.camera_index == 0
    assert settings.warmup_frames == 5
    assert settings.http_timeout == 10.0


def test_load_config_defaults(monkeypatch) -> None:
    for name in (
        "OPENWEATHER_API_KEY",
        "AMBIENT_MIN_BRIGHTNESS",
        "AMBIENT_DAY_TEMP",
        "AMBIENT_NIGHT_TEMP",
        "AMBIENT_TRANSITION_HOURS",
        "AMBIENT_MONITORS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert load_config() == DisplayConfig()


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    monkeypatch.setenv("AMBIENT_MIN_BRIGHTNESS", "0.3")
    monkeypatch.setenv("AMBIENT_TRANSITION_HOURS", "not-a-number")
    monkeypatch.setenv("AMBIENT_MONITORS", "DP-0,HDMI-0")

    config = load_config()

    assert config.api_key == "from-env"
    assert config.min_brightness == 0.3
    assert config.transition_hours == 2.0
    assert config.monitors == ("DP-0", "HDMI-0")


def test_explicit_values_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    monkeypatch.setenv("AMBIENT_MIN_BRIGHTNESS", "0.3")

    config = load_config(api_key="cli-key", min_brightness=0.9, monitors="eDP-1")

    assert config.api_key == "cli-key"
    assert config.min_brightness == 0.9
    assert config.monitors == ("eDP-1",)


def test_out_of_range_environment_brightness_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("AMBIENT_MIN_BRIGHTNESS", "1.7")

    assert load_config().min_brightness == 0.6


def test_parse_monitors() -> None:
    assert parse_monitors(None) is None
    assert parse_monitors(" , ") is None
    assert parse_monitors("DP-0, HDMI-0,") == ("DP-0", "HDMI-0")
