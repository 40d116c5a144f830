"""Ambient light estimation from a webcam frame or from weather data."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

import numpy as np

from models.records import Location, WeatherSnapshot
from services.errors import EstimatorUnavailable, MissingCredential

logger = logging.getLogger(__name__)

# ITU-R BT.709 luma coefficients for R, G, B.
_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def _rescale(level: float, min_brightness: float) -> float:
    return min_brightness + level * (1.0 - min_brightness)


def brightness_from_frame(frame: np.ndarray, min_brightness: float) -> float:
    """Map the mean BT.709 luma of an RGB frame into ``[min_brightness, 1]``."""
    if frame.ndim != 3 or frame.shape[-1] != 3:
        raise ValueError(f"Expected an RGB frame of shape (H, W, 3), got {frame.shape}.")
    if frame.size == 0:
        raise ValueError("Frame contains no pixels.")

    luma = frame.astype(np.float64) @ _LUMA_WEIGHTS / 255.0
    average = float(np.clip(luma.mean(), 0.0, 1.0))
    return _rescale(average, min_brightness)


def brightness_from_weather(
    snapshot: WeatherSnapshot, now: datetime, min_brightness: float
) -> float:
    """Model outdoor brightness as a triangular arc between sunrise and sunset.

    The arc peaks at solar noon and is attenuated by cloud cover. Outside
    daylight the result is exactly ``min_brightness``. A naive ``now`` is taken
    as local time.
    """
    if now.tzinfo is None:
        now = now.astimezone(timezone.utc)

    if now < snapshot.sunrise or now > snapshot.sunset:
        return min_brightness

    day_length = (snapshot.sunset - snapshot.sunrise).total_seconds()
    if day_length <= 0:
        return min_brightness

    elapsed = (now - snapshot.sunrise).total_seconds()
    fraction_of_day = min(max(elapsed / day_length, 0.0), 1.0)

    if fraction_of_day <= 0.5:
        midday_bump = fraction_of_day * 2.0
    else:
        midday_bump = (1.0 - fraction_of_day) * 2.0

    cloud_factor = 1.0 - snapshot.cloud_coverage_percent / 100.0
    return _rescale(midday_bump * cloud_factor, min_brightness)


class AmbientLightEstimator(Protocol):
    """A source of ambient brightness readings."""

    name: str

    def estimate(self, now: datetime) -> float:
        """Return a brightness level or raise ``EstimatorUnavailable``."""
        ...


class FrameSource(Protocol):
    def capture(self) -> np.ndarray:
        ...


class WeatherSource(Protocol):
    def fetch_location(self) -> Location:
        ...

    def fetch_weather(self, location: Location, api_key: str) -> WeatherSnapshot:
        ...


class WebcamEstimator:
    """Estimate ambient light from the average luma of one webcam frame."""

    name = "webcam"

    def __init__(self, source: FrameSource, min_brightness: float) -> None:
        self.source = source
        self.min_brightness = min_brightness

    def estimate(self, now: datetime) -> float:
        frame = self.source.capture()
        try:
            level = brightness_from_frame(frame, self.min_brightness)
        except ValueError as exc:
            raise EstimatorUnavailable(str(exc)) from exc
        logger.info("Estimated brightness from webcam", extra={"brightness": f"{level:.3f}"})
        return level


class WeatherEstimator:
    """Estimate ambient light from sun times and cloud cover at the current location."""

    name = "weather"

    def __init__(
        self,
        source: WeatherSource,
        api_key: Optional[str],
        min_brightness: float,
    ) -> None:
        self.source = source
        self.api_key = api_key
        self.min_brightness = min_brightness

    def estimate(self, now: datetime) -> float:
        if not self.api_key:
            raise MissingCredential(
                "OpenWeather API key is required when the webcam is not available."
            )
        location = self.source.fetch_location()
        snapshot = self.source.fetch_weather(location, self.api_key)
        level = brightness_from_weather(snapshot, now, self.min_brightness)
        logger.info(
            "Estimated brightness from weather",
            extra={
                "brightness": f"{level:.3f}",
                "cloud_cover": snapshot.cloud_coverage_percent,
            },
        )
        return level
