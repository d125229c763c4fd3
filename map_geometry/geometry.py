"""
Geometry helpers built on the map transform.

Bearings follow the compass convention used on the map: 0 degrees is
north (up) and angles grow clockwise.
"""

import math
from typing import Union

from constants import (
    DEGREES_FULL_CIRCLE, DEGREES_HALF_CIRCLE, DEGREES_QUARTER_CIRCLE,
    TIME_FACTOR, SPEED_FACTOR,
)
from map_geometry.data_models import PointLike, to_point, to_tuple
from map_geometry.transform import to_engine


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * DEGREES_HALF_CIRCLE / math.pi


def degrees_to_radians(degrees: float) -> float:
    """
    Convert a compass bearing in degrees to radians in math convention.

    Subtracts 90 degrees first, so 0 (north) maps to -pi/2. This undoes the
    phase shift applied by ``rotation_angle_in_degrees``.
    """
    return (math.pi / DEGREES_HALF_CIRCLE) * (degrees - DEGREES_QUARTER_CIRCLE)


def rotation_angle_in_degrees(center: PointLike, target: PointLike) -> float:
    """
    Calculate the bearing from center to target.

    Args:
        center: Point the bearing is measured from
        target: Point the bearing points to

    Returns:
        Bearing in degrees within [0, 360). Coincident points give 270.
    """
    cx, cy = to_tuple(center)
    tx, ty = to_tuple(target)

    theta = math.atan2(ty - cy, tx - cx)
    theta -= math.pi / 2
    degrees = radians_to_degrees(theta)
    bearing = (degrees + DEGREES_FULL_CIRCLE) % DEGREES_FULL_CIRCLE
    # Float modulo can land exactly on 360 for tiny negative inputs
    return 0.0 if bearing >= DEGREES_FULL_CIRCLE else bearing


def rotation_angle_in_radians(center: PointLike, target: PointLike) -> float:
    """
    Difference between the polar angles of center and target.

    Each angle is measured from the coordinate origin, not from the other
    point, so this is not a bearing between the two points.
    """
    cx, cy = to_tuple(center)
    tx, ty = to_tuple(target)
    return math.atan2(cy, cx) - math.atan2(ty, tx)


def distance_points(p0: PointLike, p1: PointLike) -> float:
    """Euclidean distance between two points."""
    a = to_point(p0)
    b = to_point(p1)
    return math.hypot(a.x - b.x, a.y - b.y)


def get_distance(p0: PointLike, p1: PointLike) -> float:
    """
    Travel distance between two map-space points.

    Both points are mapped back to engine space; the engine-space distance
    is divided by TIME_FACTOR * SPEED_FACTOR.

    Args:
        p0: Start point in map space
        p1: End point in map space

    Returns:
        Distance in travel-time units
    """
    return distance_points(to_engine(p0), to_engine(p1)) / (TIME_FACTOR * SPEED_FACTOR)


def between(value: float, a: float, b: float, inclusive: bool) -> bool:
    """
    Test if value lies between two unordered bounds.

    Args:
        value: Value to be tested
        a: Upper or lower bound
        b: Upper or lower bound
        inclusive: True if the bounds themselves count as inside

    Returns:
        True if value is between a and b
    """
    low = min(a, b)
    high = max(a, b)
    if inclusive:
        return low <= value <= high
    return low < value < high


def nearest_pow2(size: float) -> Union[int, float]:
    """
    Largest power of two that is not greater than size.

    Integers are handled exactly; floats get a power of two as a float.

    Raises:
        ValueError: If size is not a positive finite number
    """
    if not size > 0:
        raise ValueError(f"nearest_pow2 requires a positive value, got {size!r}")
    if isinstance(size, int):
        return 1 << (size.bit_length() - 1)
    if not math.isfinite(size):
        raise ValueError(f"nearest_pow2 requires a finite value, got {size!r}")

    power = 2.0 ** math.floor(math.log2(size))
    # log2 rounds to the whole exponent for values just below a power of two
    if power > size:
        power /= 2
    elif power * 2 <= size:
        power *= 2
    return power
