"""Time-of-day color temperature schedule."""

from __future__ import annotations

from datetime import datetime

from models.records import ColorSchedule

NIGHT_START_HOUR = 18.0
NIGHT_END_HOUR = 6.0


def local_hour_fraction(now: datetime) -> float:
    """Return the local wall-clock hour of ``now`` as a fraction (18:30 -> 18.5)."""
    local = now.astimezone() if now.tzinfo is not None else now
    return local.hour + local.minute / 60.0


def schedule_temperature(hour: float, schedule: ColorSchedule) -> float:
    """Target color temperature for a local hour.

    Full night from 18:00 through 06:00 inclusive. During the
    ``transition_hours`` before 18:00 the temperature ramps linearly from the
    day value down to the night value. There is no morning ramp; the schedule
    jumps back to the day value right after 06:00. A non-positive transition
    width switches to night instantly at 18:00.
    """
    if hour >= NIGHT_START_HOUR or hour <= NIGHT_END_HOUR:
        return schedule.night_temp_k

    window = schedule.transition_hours
    if window > 0 and hour >= NIGHT_START_HOUR - window:
        progress = (NIGHT_START_HOUR - hour) / window
        return schedule.day_temp_k * progress + schedule.night_temp_k * (1.0 - progress)

    return schedule.day_temp_k
