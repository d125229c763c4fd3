"""
Coordinate engine for the naval map.

Converts between engine space and map space and provides the bearing,
distance, compass and origin helpers built on that transform.
"""

from map_geometry.data_models import Point, PointTuple, to_point, to_tuple
from map_geometry.transform import (
    forward_x,
    forward_y,
    inverse_x,
    inverse_y,
    to_map,
    to_engine,
    transform_points,
)
from map_geometry.geometry import (
    radians_to_degrees,
    degrees_to_radians,
    rotation_angle_in_degrees,
    rotation_angle_in_radians,
    distance_points,
    get_distance,
    between,
    nearest_pow2,
)
from map_geometry.compass import compass_to_degrees, degrees_to_compass
from map_geometry.origin import coordinate_adjust

__all__ = [
    "Point",
    "PointTuple",
    "to_point",
    "to_tuple",
    "forward_x",
    "forward_y",
    "inverse_x",
    "inverse_y",
    "to_map",
    "to_engine",
    "transform_points",
    "radians_to_degrees",
    "degrees_to_radians",
    "rotation_angle_in_degrees",
    "rotation_angle_in_radians",
    "distance_points",
    "get_distance",
    "between",
    "nearest_pow2",
    "compass_to_degrees",
    "degrees_to_compass",
    "coordinate_adjust",
]
