"""Ordered-fallback selection between ambient light estimators."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from models.records import BrightnessReading
from services.errors import EstimatorUnavailable
from services.estimators import AmbientLightEstimator

logger = logging.getLogger(__name__)


class BrightnessPolicy:
    """Try each estimator in order until one produces a reading.

    Only ``EstimatorUnavailable`` moves on to the next estimator. Any other
    error is fatal to the run and propagates to the caller.
    """

    def __init__(
        self,
        estimators: Sequence[AmbientLightEstimator],
        min_brightness: float,
    ) -> None:
        if not estimators:
            raise ValueError("At least one estimator is required.")
        self.estimators = tuple(estimators)
        self.min_brightness = min_brightness

    def resolve(self, now: datetime) -> BrightnessReading:
        last_error = EstimatorUnavailable("No estimator produced a reading.")
        for estimator in self.estimators:
            try:
                level = estimator.estimate(now)
            except EstimatorUnavailable as exc:
                logger.warning(
                    "Estimator unavailable, falling back",
                    extra={"estimator": estimator.name, "reason": str(exc)},
                )
                last_error = exc
                continue
            value = min(max(level, self.min_brightness), 1.0)
            return BrightnessReading(value=value, source=estimator.name)

        raise last_error
