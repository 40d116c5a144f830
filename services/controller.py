"""Single-run orchestration from ambient light to applied display settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence

from display.xrandr import XrandrDisplay
from models.records import ApplyOutcome, BrightnessReading, ColorSchedule, GammaTriple, MonitorPlan
from providers.weather import WeatherClient
from providers.webcam import WebcamCapture
from services.errors import ApplyFailure
from services.estimators import WeatherEstimator, WebcamEstimator
from services.gamma import kelvin_to_gamma
from services.planner import DisplaySink, plan_commands, resolve_monitors
from services.policy import BrightnessPolicy
from services.schedule import local_hour_fraction, schedule_temperature

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Everything decided and attempted during one run."""

    reading: BrightnessReading
    temperature_k: float
    gamma: GammaTriple
    plans: List[MonitorPlan] = field(default_factory=list)
    outcomes: List[ApplyOutcome] = field(default_factory=list)
    applied: bool = False

    @property
    def failed_monitors(self) -> List[str]:
        return [outcome.monitor for outcome in self.outcomes if not outcome.ok]


def apply_plans(sink: DisplaySink, plans: Iterable[MonitorPlan]) -> List[ApplyOutcome]:
    """Apply every plan, recording failures instead of stopping at the first one."""
    outcomes: List[ApplyOutcome] = []
    for plan in plans:
        try:
            sink.apply(plan)
        except ApplyFailure as exc:
            logger.error(
                "Failed to set brightness/gamma",
                extra={"monitor": plan.monitor, "reason": exc.reason},
            )
            outcomes.append(ApplyOutcome(monitor=plan.monitor, ok=False, reason=exc.reason))
            continue
        logger.info(
            "Applied display settings",
            extra={
                "monitor": plan.monitor,
                "brightness": f"{plan.brightness:.3f}",
                "gamma": plan.gamma.as_xrandr(),
            },
        )
        outcomes.append(ApplyOutcome(monitor=plan.monitor, ok=True))
    return outcomes


class DisplayController:
    """Coordinates estimation, scheduling, planning and the apply step."""

    def __init__(
        self,
        policy: BrightnessPolicy,
        schedule: ColorSchedule,
        sink: DisplaySink,
        monitors: Optional[Sequence[str]] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self.policy = policy
        self.schedule = schedule
        self.sink = sink
        self.monitors = tuple(monitors) if monitors else None
        self._on_close = on_close

    def close(self) -> None:
        if self._on_close is not None:
            self._on_close()

    def run(self, now: datetime, dry_run: bool = False) -> RunReport:
        """Run one adjustment for the instant ``now``.

        Estimation and monitor enumeration errors propagate before anything is
        applied. Per-monitor apply failures are collected in the report.
        """
        reading = self.policy.resolve(now)
        temperature_k = schedule_temperature(local_hour_fraction(now), self.schedule)
        logger.info(
            "Computed target settings",
            extra={
                "estimator": reading.source,
                "brightness": f"{reading.value:.3f}",
                "temperature_k": round(temperature_k),
            },
        )

        monitors = resolve_monitors(self.monitors, self.sink)
        plans = plan_commands(reading.value, temperature_k, monitors)
        report = RunReport(
            reading=reading,
            temperature_k=temperature_k,
            gamma=kelvin_to_gamma(temperature_k),
            plans=plans,
        )
        if dry_run:
            return report

        report.outcomes = apply_plans(self.sink, plans)
        report.applied = True
        return report


def build_default_controller(
    api_key: Optional[str],
    min_brightness: float,
    schedule: ColorSchedule,
    monitors: Optional[Sequence[str]] = None,
) -> DisplayController:
    """Factory that wires webcam-then-weather estimation to the xrandr sink."""
    weather_client = WeatherClient()
    policy = BrightnessPolicy(
        [
            WebcamEstimator(WebcamCapture(), min_brightness),
            WeatherEstimator(weather_client, api_key, min_brightness),
        ],
        min_brightness=min_brightness,
    )
    return DisplayController(
        policy=policy,
        schedule=schedule,
        sink=XrandrDisplay(),
        monitors=monitors,
        on_close=weather_client.close,
    )
