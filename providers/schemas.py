"""Pydantic schemas for the location and weather service payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from models.records import Location, WeatherSnapshot


class LocationPayload(BaseModel):
    """Subset of the ip-api.com response used to locate the machine."""

    status: Optional[str] = None
    message: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def failed(self) -> bool:
        return self.status == "fail"

    def to_location(self) -> Location:
        if self.lat is None or self.lon is None:
            raise ValueError("Location response is missing lat/lon.")
        return Location(latitude=self.lat, longitude=self.lon)


class SunTimes(BaseModel):
    sunrise: int = Field(..., description="Sunrise as epoch seconds (UTC).")
    sunset: int = Field(..., description="Sunset as epoch seconds (UTC).")


class CloudCover(BaseModel):
    all: float = Field(..., ge=0, le=100, description="Cloud coverage in percent.")


class WeatherPayload(BaseModel):
    """Subset of the OpenWeather current-weather response."""

    sys: SunTimes
    clouds: CloudCover

    def to_snapshot(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            sunrise=datetime.fromtimestamp(self.sys.sunrise, tz=timezone.utc),
            sunset=datetime.fromtimestamp(self.sys.sunset, tz=timezone.utc),
            cloud_coverage_percent=self.clouds.all,
        )
