"""
Map origin adjustment.

The map renderer puts [0, 0] at the top left instead of the bottom left,
so Y is flipped to MAP_SIZE - y before points are handed to it.
"""

import logging
from numbers import Real
from typing import List, Optional, Sequence, Union

import numpy as np

from constants import MAP_SIZE
from map_geometry.data_models import PointTuple

logger = logging.getLogger(__name__)


def _is_sequence(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def coordinate_adjust(
    x: Union[float, Sequence[float], Sequence[Sequence[float]]],
    y: Optional[float] = None,
    map_size: float = MAP_SIZE,
) -> Union[PointTuple, List[PointTuple]]:
    """
    Flip the Y axis of a point or a list of points.

    Args:
        x: X coordinate, a single (x, y) pair, or a list of (x, y) pairs
        y: Y coordinate when x is a scalar
        map_size: Height of the map the points belong to

    Returns:
        (x, map_size - y) for a single point, or a list of such tuples

    Raises:
        ValueError: If neither a point nor both coordinates are supplied
    """
    if _is_sequence(x):
        if len(x) == 0:
            return []
        if _is_sequence(x[0]):
            arr = np.asarray(x, dtype=np.float64)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"Expected a list of (x, y) pairs, got shape {arr.shape}")
            logger.debug(f"Flipping {len(arr)} points against map size {map_size}")
            flipped = np.column_stack((arr[:, 0], map_size - arr[:, 1]))
            return [(px, py) for px, py in flipped.tolist()]
        if len(x) != 2:
            raise ValueError(f"Expected an (x, y) pair, got {len(x)} values: {x!r}")
        return (x[0], map_size - x[1])

    if y is not None and isinstance(x, Real):
        return (x, map_size - y)

    raise ValueError(f"Wrong parameters x: {x!r}, y: {y!r}")
