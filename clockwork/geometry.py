"""
Rotation and endpoint helpers shared by the builder and the updater.
"""

import math
from typing import Tuple

from .vector import Vector2D


def next_rotation(rotation: float, rotation_change: float, speed: float) -> float:
    """
    Advance a heading by one tick.

    Overshooting either boundary snaps to the opposite boundary instead of
    wrapping by the overshoot: 363 becomes 0 and -2 becomes 360.
    """
    nxt = rotation + rotation_change * speed
    if nxt > 360:
        return 0.0
    elif nxt < 0:
        return 360.0
    return nxt


def end_point(x: float, y: float, length: float, rotation: float) -> Tuple[float, float]:
    offset = Vector2D.from_degrees(rotation, length)
    return x + offset.x, y + offset.y


def check_finite(**values: float):
    """Raise ValueError naming the first NaN/inf argument."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")
