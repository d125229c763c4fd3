"""
Point file converter.

Reads a JSON list of points exported by the game data tooling, converts
them between engine space and map space and writes the result as JSON.

Each entry is either an ``[x, y]`` pair or a record with ``x`` and ``y``
keys. Records keep their other keys (names, ids, ...) untouched.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, Field

from constants import FORWARD_TRANSFORM, INVERSE_TRANSFORM, MAP_SIZE
from map_geometry.data_models import to_tuple
from map_geometry.origin import coordinate_adjust
from map_geometry.transform import transform_points

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which way points are converted."""
    TO_MAP = "to-map"        # engine -> map (forward transform)
    TO_ENGINE = "to-engine"  # map -> engine (inverse transform)


class ConversionConfig(BaseModel):
    """Settings for a single point file conversion."""
    input_file: str
    output_file: str
    direction: Direction = Direction.TO_MAP
    adjust_origin: bool = Field(
        default=False,
        description="Map side uses a top-left origin (Y flipped against the map size)",
    )
    precision: Optional[int] = Field(default=None, ge=0, le=12)
    map_size: float = Field(default=MAP_SIZE, gt=0)


def load_points(path: Union[str, Path]) -> List[Any]:
    """
    Load point entries from a JSON file.

    Entries that cannot be read as a point are skipped with a warning.

    Args:
        path: JSON file holding a list of pairs or x/y records

    Returns:
        List of valid entries in file order

    Raises:
        ValueError: If the file does not hold a JSON list
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of points, got {type(data).__name__}")

    records = []
    for idx, entry in enumerate(data):
        try:
            to_tuple(entry)
        except ValueError as e:
            logger.warning(f"{path}: skipping entry {idx}: {e}")
            continue
        records.append(entry)

    logger.debug(f"Loaded {len(records)} of {len(data)} entries from {path}")
    return records


def convert_records(
    records: List[Any],
    direction: Direction = Direction.TO_MAP,
    adjust_origin: bool = False,
    precision: Optional[int] = None,
    map_size: float = MAP_SIZE,
) -> List[Any]:
    """
    Convert point entries between engine space and map space.

    Args:
        records: Pairs or x/y records
        direction: Direction.TO_MAP or Direction.TO_ENGINE
        adjust_origin: Flip Y on the map side (output for TO_MAP, input for TO_ENGINE)
        precision: Round coordinates to this many digits (None = no rounding)
        map_size: Map height used for the origin flip

    Returns:
        Converted entries with the same shape as the input entries
    """
    if not records:
        return []

    coords = [to_tuple(r) for r in records]

    if direction == Direction.TO_MAP:
        converted = transform_points(coords, FORWARD_TRANSFORM).tolist()
        if adjust_origin:
            converted = coordinate_adjust(converted, map_size=map_size)
    else:
        if adjust_origin:
            coords = coordinate_adjust(coords, map_size=map_size)
        converted = transform_points(coords, INVERSE_TRANSFORM).tolist()

    if precision is not None:
        converted = np.round(np.asarray(converted, dtype=np.float64), precision).tolist()

    result = []
    for record, (x, y) in zip(records, converted):
        if isinstance(record, dict):
            result.append({**record, "x": x, "y": y})
        else:
            result.append([x, y])
    return result


def save_points(path: Union[str, Path], records: List[Any]) -> str:
    """
    Write point entries to a JSON file.

    Args:
        path: Output path; '.json' is added when it has no suffix
        records: Entries to write

    Returns:
        Path to the created file
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix('.json')
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(records, f, indent=2, ensure_ascii=False)

    return str(path)


def convert_file(config: ConversionConfig) -> Tuple[int, str]:
    """
    Convert a point file as described by config.

    Returns:
        (number of points written, path of the written file)
    """
    records = load_points(config.input_file)
    converted = convert_records(
        records,
        direction=config.direction,
        adjust_origin=config.adjust_origin,
        precision=config.precision,
        map_size=config.map_size,
    )
    output_path = save_points(config.output_file, converted)
    logger.info(
        f"Converted {len(converted)} points {config.direction.value} "
        f"from {config.input_file} to {output_path}"
    )
    return len(converted), output_path
