"""
Constants for the naval map coordinate engine.

Centralized definitions for the map calibration, travel scale factors,
angle constants and the compass rose.
"""

from typing import Tuple
from dataclasses import dataclass


# =============================================================================
# Map Dimensions
# =============================================================================

MAP_SIZE = 8192  # Map space edge length in pixels


# =============================================================================
# Affine Calibration (engine space <-> map space)
# =============================================================================

@dataclass(frozen=True)
class AffineCoefficients:
    """Conformal 2D transform coefficients.

    Maps (x, y) to:
        x' = A*x + B*y + C
        y' = B*x - A*y + D
    """
    A: float
    B: float
    C: float
    D: float


# Engine (F11) coordinates to map (SVG) coordinates
FORWARD_TRANSFORM = AffineCoefficients(
    A=-0.004_998_667_793_638_28,
    B=-0.000_000_214_642_549_806_45,
    C=4096.886_351_518_97,
    D=4096.902_827_874_69,
)

# Map (SVG) coordinates to engine (F11) coordinates.
# Calibrated separately, not derived from FORWARD_TRANSFORM.
INVERSE_TRANSFORM = AffineCoefficients(
    A=-200.053_302_087_577,
    B=-0.008_590_278_976_360_11,
    C=819_630.836_437_126,
    D=-819_563.745_651_571,
)


# =============================================================================
# Travel Scale Factors
# =============================================================================

TIME_FACTOR = 2.63
SPEED_FACTOR = 390


# =============================================================================
# Angles
# =============================================================================

DEGREES_FULL_CIRCLE = 360
DEGREES_HALF_CIRCLE = 180
DEGREES_QUARTER_CIRCLE = 90


# =============================================================================
# Compass Rose (clockwise from north, 15 degrees apart)
# =============================================================================

COMPASS_DIRECTIONS: Tuple[str, ...] = (
    "N",
    "N⅓NE",
    "N⅔NE",
    "NE",
    "E⅔NE",
    "E⅓NE",
    "E",
    "E⅓SE",
    "E⅔SE",
    "SE",
    "S⅔SE",
    "S⅓SE",
    "S",
    "S⅓SW",
    "S⅔SW",
    "SW",
    "W⅔SW",
    "W⅓SW",
    "W",
    "W⅓NW",
    "W⅔NW",
    "NW",
    "N⅔NW",
    "N⅓NW",
)

COMPASS_TICK = DEGREES_FULL_CIRCLE / len(COMPASS_DIRECTIONS)  # 15 degrees
