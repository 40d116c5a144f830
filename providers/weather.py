"""HTTP client for IP geolocation and current weather."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from models.records import Location, WeatherSnapshot
from providers.schemas import LocationPayload, WeatherPayload
from services.errors import NetworkFailure, ParseFailure
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


class WeatherClient:
    """Fetches the machine's location and the weather there."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = httpx.Client(timeout=self._settings.http_timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def fetch_location(self) -> Location:
        data = self._get_json(self._settings.location_url)
        try:
            payload = LocationPayload.model_validate(data)
        except ValidationError as exc:
            raise ParseFailure(f"Unexpected location payload: {exc}") from exc
        if payload.failed:
            raise NetworkFailure(
                f"Location lookup failed: {payload.message or 'no detail provided.'}"
            )
        try:
            location = payload.to_location()
        except ValueError as exc:
            raise ParseFailure(str(exc)) from exc
        logger.debug(
            "Resolved location",
            extra={"latitude": location.latitude, "longitude": location.longitude},
        )
        return location

    def fetch_weather(self, location: Location, api_key: str) -> WeatherSnapshot:
        data = self._get_json(
            self._settings.weather_url,
            params={
                "lat": str(location.latitude),
                "lon": str(location.longitude),
                "appid": api_key,
            },
        )
        try:
            payload = WeatherPayload.model_validate(data)
        except ValidationError as exc:
            raise ParseFailure(f"Unexpected weather payload: {exc}") from exc
        return payload.to_snapshot()

    def _get_json(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkFailure(
                f"Request to {exc.request.url.host} failed with status "
                f"{exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkFailure(f"Request to {url} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise ParseFailure(f"Response from {url} is not valid JSON.") from exc
