"""Shared fixtures: raw cube records, built objects and surfaces."""

from __future__ import annotations

import copy

import pytest

from wirespin.builder import build_object_from_data
from wirespin.surface import RecordingSurface

CUBE_POINTS = [
    {"x": -0.5, "y": -0.5, "z": -0.5},
    {"x": 0.5, "y": -0.5, "z": -0.5},
    {"x": 0.5, "y": 0.5, "z": -0.5},
    {"x": -0.5, "y": 0.5, "z": -0.5},
    {"x": -0.5, "y": -0.5, "z": 0.5},
    {"x": 0.5, "y": -0.5, "z": 0.5},
    {"x": 0.5, "y": 0.5, "z": 0.5},
    {"x": -0.5, "y": 0.5, "z": 0.5},
]

CUBE_EDGES = [
    [0, 1], [1, 2], [2, 3], [3, 0],
    [4, 5], [5, 6], [6, 7], [7, 4],
    [0, 4], [1, 5], [2, 6], [3, 7],
]


@pytest.fixture()
def cube_data() -> list:
    return [{"color": "#00FF00",
             "points": copy.deepcopy(CUBE_POINTS),
             "vertices": copy.deepcopy(CUBE_EDGES)}]


@pytest.fixture()
def cube(cube_data):
    return build_object_from_data(cube_data)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


def assert_points_close(a, b, tol=1e-9):
    assert len(a) == len(b)
    for p, q in zip(a, b):
        for u, v in zip(p, q):
            assert u == pytest.approx(v, abs=tol)
