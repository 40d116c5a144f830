"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class Location:
    """Coordinates used to parameterize the weather lookup."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class WeatherSnapshot:
    """Sun times and cloud cover taken from a single weather response."""

    sunrise: datetime
    sunset: datetime
    cloud_coverage_percent: float


@dataclass(frozen=True, slots=True)
class GammaTriple:
    """Per-channel gamma multipliers, each in [0, 1]."""

    red: float
    green: float
    blue: float

    def as_xrandr(self) -> str:
        return f"{self.red:.3f}:{self.green:.3f}:{self.blue:.3f}"


@dataclass(frozen=True, slots=True)
class ColorSchedule:
    """Day/night color temperatures and the evening transition width."""

    day_temp_k: float = 6500.0
    night_temp_k: float = 3500.0
    transition_hours: float = 2.0


@dataclass(frozen=True, slots=True)
class BrightnessReading:
    """Final brightness level and the estimator that produced it."""

    value: float
    source: str


@dataclass(frozen=True, slots=True)
class MonitorPlan:
    """Settings to apply to a single monitor."""

    monitor: str
    brightness: float
    gamma: GammaTriple


@dataclass(frozen=True, slots=True)
class ApplyOutcome:
    monitor: str
    ok: bool
    reason: Optional[str] = None
