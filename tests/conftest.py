"""
Pytest configuration and fixtures for the map coordinate engine tests.

Provides sample points in both coordinate spaces and sample point files.
"""

import json

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from constants import MAP_SIZE


@pytest.fixture
def sample_map_points():
    """Points spread over the map surface, including corners and center."""
    return [
        (0.0, 0.0),
        (MAP_SIZE, 0.0),
        (0.0, MAP_SIZE),
        (MAP_SIZE, MAP_SIZE),
        (MAP_SIZE / 2, MAP_SIZE / 2),
        (1234.5, 6789.25),
        (4100.0, 3900.0),
    ]


@pytest.fixture
def sample_engine_points():
    """Engine-space points covering the playable area."""
    return [
        (0.0, 0.0),
        (-500_000.0, 250_000.0),
        (300_000.0, -700_000.0),
        (819_000.0, -819_000.0),
        (-12_345.678, 98_765.432),
    ]


@pytest.fixture
def sample_records():
    """Mixed point entries as they appear in exported game data."""
    return [
        [0.0, 0.0],
        {"name": "Port Royal", "x": -350_000.0, "y": 120_000.0},
        {"name": "La Habana", "x": 100_000.0, "y": -200_000.0, "id": 7},
    ]


@pytest.fixture
def points_file(tmp_path, sample_records):
    """Fixture providing a JSON point file on disk."""
    path = tmp_path / "points.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path
