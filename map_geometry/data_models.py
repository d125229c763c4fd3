"""
Point models for the map coordinate engine.

Points travel around the code base in two shapes: an indexed pair
``(x, y)`` and a named record ``{"x": ..., "y": ...}``. ``Point`` is the
canonical form; ``to_point`` and ``to_tuple`` convert at the boundary.
"""

from collections.abc import Mapping
from typing import Sequence, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


PointTuple = Tuple[float, float]


class Point(BaseModel):
    """A 2D point in engine or map space.

    Coordinates are strict floats: numbers are accepted, numeric strings
    are not. Integers are stored as floats, so integers above 2**53 lose
    precision.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    x: float = Field(description="Horizontal coordinate")
    y: float = Field(description="Vertical coordinate")

    def as_tuple(self) -> PointTuple:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)


PointLike = Union[Point, PointTuple, Sequence[float], Mapping]


def _scalar(value):
    # numpy scalars (np.float32, np.int64, ...) become plain Python numbers
    return value.item() if isinstance(value, np.generic) else value


def to_point(value: PointLike) -> Point:
    """
    Convert any supported point representation to a Point.

    Args:
        value: Point, 2-element sequence/array, or mapping with x and y keys

    Returns:
        Point with the same coordinates

    Raises:
        ValueError: If the value cannot be read as a point
    """
    if isinstance(value, Point):
        return value

    if isinstance(value, Mapping):
        try:
            return Point(x=_scalar(value["x"]), y=_scalar(value["y"]))
        except KeyError as e:
            raise ValueError(f"Point record is missing key {e}: {value!r}") from e

    if isinstance(value, (str, bytes)):
        raise ValueError(f"Cannot interpret {value!r} as a point")

    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot interpret {value!r} as a point") from e
    return Point(x=_scalar(x), y=_scalar(y))


def to_tuple(value: PointLike) -> PointTuple:
    """Convert any supported point representation to an ``(x, y)`` tuple."""
    return to_point(value).as_tuple()
