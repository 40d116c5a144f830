from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.records import ColorSchedule

DEFAULT_MIN_BRIGHTNESS = 0.6
DEFAULT_DAY_TEMP = 6500.0
DEFAULT_NIGHT_TEMP = 3500.0
DEFAULT_TRANSITION_HOURS = 2.0

_API_KEY_ENV = "OPENWEATHER_API_KEY"
_MIN_BRIGHTNESS_ENV = "AMBIENT_MIN_BRIGHTNESS"
_DAY_TEMP_ENV = "AMBIENT_DAY_TEMP"
_NIGHT_TEMP_ENV = "AMBIENT_NIGHT_TEMP"
_TRANSITION_HOURS_ENV = "AMBIENT_TRANSITION_HOURS"
_MONITORS_ENV = "AMBIENT_MONITORS"


@dataclass(frozen=True)
class DisplayConfig:
    api_key: Optional[str] = None
    min_brightness: float = DEFAULT_MIN_BRIGHTNESS
    day_temp_k: float = DEFAULT_DAY_TEMP
    night_temp_k: float = DEFAULT_NIGHT_TEMP
    transition_hours: float = DEFAULT_TRANSITION_HOURS
    monitors: Optional[Tuple[str, ...]] = field(default=None)

    @property
    def schedule(self) -> ColorSchedule:
        return ColorSchedule(
            day_temp_k=self.day_temp_k,
            night_temp_k=self.night_temp_k,
            transition_hours=self.transition_hours,
        )


def _read_float(value: Optional[str], default: float, lower: float, upper: float) -> float:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if lower <= parsed <= upper else default


def parse_monitors(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Split a comma-separated monitor list such as ``DP-0,HDMI-0``."""
    if value is None:
        return None
    names = tuple(part.strip() for part in value.split(",") if part.strip())
    return names or None


def load_config(
    api_key: Optional[str] = None,
    min_brightness: Optional[float] = None,
    day_temp: Optional[float] = None,
    night_temp: Optional[float] = None,
    transition_hours: Optional[float] = None,
    monitors: Optional[str] = None,
) -> DisplayConfig:
    key = api_key or os.getenv(_API_KEY_ENV) or None
    if min_brightness is None:
        min_brightness = _read_float(
            os.getenv(_MIN_BRIGHTNESS_ENV), DEFAULT_MIN_BRIGHTNESS, 0.0, 1.0
        )
    if day_temp is None:
        day_temp = _read_float(os.getenv(_DAY_TEMP_ENV), DEFAULT_DAY_TEMP, 1000.0, 40000.0)
    if night_temp is None:
        night_temp = _read_float(
            os.getenv(_NIGHT_TEMP_ENV), DEFAULT_NIGHT_TEMP, 1000.0, 40000.0
        )
    if transition_hours is None:
        transition_hours = _read_float(
            os.getenv(_TRANSITION_HOURS_ENV), DEFAULT_TRANSITION_HOURS, 0.0, 12.0
        )
    monitor_names = parse_monitors(monitors if monitors is not None else os.getenv(_MONITORS_ENV))
    return DisplayConfig(
        api_key=key,
        min_brightness=min_brightness,
        day_temp_k=day_temp,
        night_temp_k=night_temp,
        transition_hours=transition_hours,
        monitors=monitor_names,
    )
