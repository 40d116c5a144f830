"""Unit tests for ordered estimator fallback."""

from __future__ import annotations

from datetime import datetime
from typing import List

import pytest

from services.errors import EstimatorUnavailable, MissingCredential
from services.policy import BrightnessPolicy

NOW = datetime(2024, 6, 1, 12, 0)


class FakeEstimator:
    def __init__(self, name: str, level: float | None = None, error: Exception | None = None) -> None:
        self.name = name
        self.level = level
        self.error = error
        self.calls: List[datetime] = []

    def estimate(self, now: datetime) -> float:
        self.calls.append(now)
        if self.error is not None:
            raise self.error
        assert self.level is not None
        return self.level


def test_first_available_estimator_wins() -> None:
    webcam = FakeEstimator("webcam", level=0.9)
    weather = FakeEstimator("weather", level=0.7)

    reading = BrightnessPolicy([webcam, weather], min_brightness=0.6).resolve(NOW)

    assert reading.value == 0.9
    assert reading.source == "webcam"
    assert weather.calls == []


def test_unavailable_estimator_falls_back_to_next() -> None:
    webcam = FakeEstimator("webcam", error=EstimatorUnavailable("no camera"))
    weather = FakeEstimator("weather", level=0.7)

    reading = BrightnessPolicy([webcam, weather], min_brightness=0.6).resolve(NOW)

    assert reading.source == "weather"
    assert reading.value == 0.7
    assert weather.calls == [NOW]


def test_fallback_is_logged(caplog) -> None:
    webcam = FakeEstimator("webcam", error=EstimatorUnavailable("no camera"))
    weather = FakeEstimator("weather", level=0.7)

    with caplog.at_level("WARNING"):
        BrightnessPolicy([webcam, weather], min_brightness=0.6).resolve(NOW)

    records = [record for record in caplog.records if record.name == "services.policy"]
    assert records
    assert getattr(records[0], "estimator", None) == "webcam"
    assert getattr(records[0], "reason", None) == "no camera"


def test_non_recoverable_errors_are_not_swallowed() -> None:
    webcam = FakeEstimator("webcam", error=EstimatorUnavailable("no camera"))
    weather = FakeEstimator("weather", error=MissingCredential("no key"))
    spare = FakeEstimator("spare", level=0.8)

    with pytest.raises(MissingCredential):
        BrightnessPolicy([webcam, weather, spare], min_brightness=0.6).resolve(NOW)
    assert spare.calls == []


def test_all_unavailable_raises_last_error() -> None:
    first = FakeEstimator("first", error=EstimatorUnavailable("first down"))
    second = FakeEstimator("second", error=EstimatorUnavailable("second down"))

    with pytest.raises(EstimatorUnavailable, match="second down"):
        BrightnessPolicy([first, second], min_brightness=0.6).resolve(NOW)


@pytest.mark.parametrize(("level", "expected"), [(1.4, 1.0), (0.2, 0.6), (0.75, 0.75)])
def test_result_is_clamped(level: float, expected: float) -> None:
    policy = BrightnessPolicy([FakeEstimator("fixed", level=level)], min_brightness=0.6)

    assert policy.resolve(NOW).value == expected


def test_policy_requires_estimators() -> None:
    with pytest.raises(ValueError):
        BrightnessPolicy([], min_brightness=0.6)


def test_exhausted_policy_raises_unavailable() -> None:
    policy = BrightnessPolicy([FakeEstimator("fixed", level=0.8)], min_brightness=0.6)
    policy.estimators = ()

    with pytest.raises(EstimatorUnavailable, match="No estimator"):
        policy.resolve(NOW)
