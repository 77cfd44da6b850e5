#
# PROJECT: wirespin
# MODULE: wirespin/builder.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.1
# LOG_REF: 2026-10-19
#
"""
Validating boundary between raw mesh records and mesh types.

Raw records look like::

    {"color": "#00ff00",
     "points": [{"x": 0, "y": 0, "z": 0}, ...],
     "vertices": [[0, 1], [1, 2], ...]}

"vertices" is the historical key for the edge list; each entry is a pair of
indices into "points". Nothing past this module sees a raw record.
"""

import logging
import math
import operator
from typing import Any, List, Mapping, Sequence

from .errors import EdgeIndexError, MalformedEdgeError, MalformedPointError, MeshError
from .geometry import Point2D, Point3D
from .mesh import Edge, Object3D, Polygon2D, Polygon3D

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]


def _record(raw, what: str) -> RawRecord:
    if not isinstance(raw, Mapping):
        raise MeshError(f"Invalid {what} {raw!r}: expected an object")
    return raw


def _number(raw: RawRecord, key: str, value) -> float:
    if isinstance(value, bool):
        raise MalformedPointError(raw, key)
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise MalformedPointError(raw, key) from None
    if not math.isfinite(result):
        raise MalformedPointError(raw, key)
    return result


def _coord(raw: RawRecord, key: str) -> float:
    try:
        value = raw[key]
    except KeyError:
        raise MalformedPointError(raw, key) from None
    return _number(raw, key, value)


def build_point_2d(raw: RawRecord) -> Point2D:
    raw = _record(raw, 'point')
    return Point2D(_coord(raw, 'x'), _coord(raw, 'y'))


def build_point_3d(raw: RawRecord) -> Point3D:
    """z is optional in the file format and defaults to 0."""
    raw = _record(raw, 'point')
    z = _number(raw, 'z', raw.get('z', 0.0))
    return Point3D(_coord(raw, 'x'), _coord(raw, 'y'), z)


def _edge_index(value) -> int:
    if isinstance(value, bool):
        raise MeshError(f"Invalid edge index {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise MeshError(f"Invalid edge index {value!r}") from None


def build_edges(raw_edges: Sequence[Sequence[int]], point_count: int) -> List[Edge]:
    """
    Convert raw index pairs to edges.

    Raises MalformedEdgeError when an entry is not a pair and EdgeIndexError
    when an index falls outside [0, point_count).
    """
    edges = []
    for raw in raw_edges:
        if isinstance(raw, (str, bytes, Mapping)):
            raise MeshError(f"Invalid edge {raw!r}")
        try:
            length = len(raw)
        except TypeError:
            raise MeshError(f"Invalid edge {raw!r}") from None
        if length != 2:
            raise MalformedEdgeError(length)
        start, end = _edge_index(raw[0]), _edge_index(raw[1])
        if not (0 <= start < point_count and 0 <= end < point_count):
            raise EdgeIndexError((start, end), point_count)
        edges.append((start, end))
    return edges


def _field(raw: RawRecord, key: str):
    raw = _record(raw, 'mesh record')
    try:
        return raw[key]
    except KeyError:
        raise MeshError(f"Mesh record is missing '{key}'") from None


def _sequence(raw: RawRecord, key: str):
    value = _field(raw, key)
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise MeshError(f"Mesh record '{key}' must be a list, got {type(value).__name__}")
    return value


def _color(raw: RawRecord) -> str:
    color = _field(raw, 'color')
    if not isinstance(color, str):
        raise MeshError(f"Mesh record 'color' must be a string, got {color!r}")
    return color


def build_polygon_2d(raw: RawRecord) -> Polygon2D:
    points = [build_point_2d(p) for p in _sequence(raw, 'points')]
    edges = build_edges(_sequence(raw, 'vertices'), len(points))
    return Polygon2D(_color(raw), points, edges)


def build_polygon_3d(raw: RawRecord) -> Polygon3D:
    points = [build_point_3d(p) for p in _sequence(raw, 'points')]
    edges = build_edges(_sequence(raw, 'vertices'), len(points))
    return Polygon3D(_color(raw), points, edges)


def build_object_from_data(raw_polygons: Sequence[RawRecord]) -> Object3D:
    """
    Build an Object3D from a list of raw polygon records.

    Records are converted in order and the first bad record aborts the
    whole batch; no partial object is ever returned.
    """
    polygons = [build_polygon_3d(raw) for raw in raw_polygons]
    obj = Object3D(polygons)
    logger.debug("Built object: %d polygons, %d points, %d edges",
                 len(obj), obj.point_count, obj.edge_count)
    return obj
