"""
Affine transform between engine space and map space.

Both directions use the conformal form
    x' = A*x + B*y + C
    y' = B*x - A*y + D
with the calibrated coefficient tables from ``constants``. Each axis needs
both input coordinates because the rotation couples X and Y.
"""

import numpy as np

from constants import AffineCoefficients, FORWARD_TRANSFORM, INVERSE_TRANSFORM
from map_geometry.data_models import Point, PointLike, to_point


def _apply_x(coeffs: AffineCoefficients, x: float, y: float) -> float:
    return coeffs.A * x + coeffs.B * y + coeffs.C


def _apply_y(coeffs: AffineCoefficients, x: float, y: float) -> float:
    return coeffs.B * x - coeffs.A * y + coeffs.D


def forward_x(x: float, y: float) -> float:
    """Engine coordinate to map X."""
    return _apply_x(FORWARD_TRANSFORM, x, y)


def forward_y(x: float, y: float) -> float:
    """Engine coordinate to map Y."""
    return _apply_y(FORWARD_TRANSFORM, x, y)


def inverse_x(x: float, y: float) -> float:
    """Map coordinate to engine X."""
    return _apply_x(INVERSE_TRANSFORM, x, y)


def inverse_y(x: float, y: float) -> float:
    """Map coordinate to engine Y."""
    return _apply_y(INVERSE_TRANSFORM, x, y)


def to_map(point: PointLike) -> Point:
    """Transform an engine-space point into map space."""
    p = to_point(point)
    return Point(x=forward_x(p.x, p.y), y=forward_y(p.x, p.y))


def to_engine(point: PointLike) -> Point:
    """Transform a map-space point into engine space."""
    p = to_point(point)
    return Point(x=inverse_x(p.x, p.y), y=inverse_y(p.x, p.y))


def transform_points(points, coeffs: AffineCoefficients) -> np.ndarray:
    """
    Apply a coefficient set to many points at once.

    Args:
        points: Array-like of shape (N, 2)
        coeffs: FORWARD_TRANSFORM, INVERSE_TRANSFORM or a custom calibration

    Returns:
        Float array of shape (N, 2) with transformed coordinates
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array of points, got shape {arr.shape}")

    x = arr[:, 0]
    y = arr[:, 1]
    return np.column_stack((
        coeffs.A * x + coeffs.B * y + coeffs.C,
        coeffs.B * x - coeffs.A * y + coeffs.D,
    ))
