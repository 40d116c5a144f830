from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_LOG_LEVEL_ENV = "LOG_LEVEL"
_CAMERA_INDEX_ENV = "AMBIENT_CAMERA_INDEX"
_WARMUP_FRAMES_ENV = "AMBIENT_WARMUP_FRAMES"
_WARMUP_DELAY_ENV = "AMBIENT_WARMUP_DELAY"
_HTTP_TIMEOUT_ENV = "AMBIENT_HTTP_TIMEOUT"
_LOCATION_URL_ENV = "AMBIENT_LOCATION_URL"
_WEATHER_URL_ENV = "AMBIENT_WEATHER_URL"
_XRANDR_BINARY_ENV = "AMBIENT_XRANDR_BINARY"


@dataclass(frozen=True)
class Settings:
    camera_index: int
    warmup_frames: int
    warmup_delay: float
    http_timeout: float
    location_url: str
    weather_url: str
    xrandr_binary: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_int_env(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _read_float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        camera_index=_read_int_env(_CAMERA_INDEX_ENV, 0),
        warmup_frames=_read_int_env(_WARMUP_FRAMES_ENV, 5),
        warmup_delay=_read_float_env(_WARMUP_DELAY_ENV, 0.1),
        http_timeout=_read_float_env(_HTTP_TIMEOUT_ENV, 10.0),
        location_url=_read_str_env(_LOCATION_URL_ENV, "http://ip-api.com/json"),
        weather_url=_read_str_env(
            _WEATHER_URL_ENV, "https://api.openweathermap.org/data/2.5/weather"
        ),
        xrandr_binary=_read_str_env(_XRANDR_BINARY_ENV, "xrandr"),
        log_level=_read_log_level("INFO"),
    )
