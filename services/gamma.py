"""Black-body approximation from color temperature to RGB gamma."""

from __future__ import annotations

import math

from models.records import GammaTriple


def _clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def kelvin_to_gamma(temp_k: float) -> GammaTriple:
    """Convert a color temperature in Kelvin to per-channel gamma multipliers."""
    temp = temp_k / 100.0

    if temp <= 66.0:
        red = 1.0
        green = _clamp(0.39008157876901960784 * math.log(temp) - 0.631841443788046)
    else:
        shifted = temp - 60.0
        red = _clamp(1.29293618606274514 * shifted ** -0.1332047592)
        green = _clamp(1.12989086089529411765 * shifted ** -0.0755148492)

    if temp >= 66.0:
        blue = 1.0
    elif temp <= 19.0:
        blue = 0.0
    else:
        blue = _clamp(0.54320678911019607843 * math.log(temp - 10.0) - 1.19625408914)

    return GammaTriple(red=red, green=green, blue=blue)
