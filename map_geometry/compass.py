"""
Compass rose conversions.

The rose has 24 points spaced 15 degrees apart, clockwise from north.
"""

import math

from constants import COMPASS_DIRECTIONS, COMPASS_TICK


def compass_to_degrees(compass: str) -> float:
    """
    Convert a compass direction to degrees.

    Args:
        compass: One of the 24 labels in COMPASS_DIRECTIONS

    Returns:
        Degrees clockwise from north

    Raises:
        ValueError: If the label is not part of the compass rose
    """
    try:
        index = COMPASS_DIRECTIONS.index(compass)
    except ValueError:
        raise ValueError(f"Unknown compass direction: {compass!r}") from None
    return index * COMPASS_TICK


def degrees_to_compass(degrees: float) -> str:
    """
    Convert degrees to the nearest compass direction.

    Any finite value is accepted; negative values and values of 360 or more
    wrap around the rose.

    Raises:
        ValueError: If degrees is infinite or NaN
    """
    if not math.isfinite(degrees):
        raise ValueError(f"Cannot convert non-finite angle to a compass direction: {degrees!r}")
    value = math.floor(degrees / COMPASS_TICK + 0.5)
    # Python's % is floored, so negative values still give a valid index
    return COMPASS_DIRECTIONS[value % len(COMPASS_DIRECTIONS)]
