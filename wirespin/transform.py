#
# PROJECT: wirespin
# MODULE: wirespin/transform.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.2
# LOG_REF: 2026-10-19
#

import math

from .config import ROTATION_SPEED_DEG_PER_SEC
from .geometry import Point3D
from .mesh import Object3D


def rotate_point_y(point: Point3D, cos_a: float, sin_a: float) -> Point3D:
    """Right-handed rotation about Y given a precomputed cos/sin pair."""
    return Point3D(point.x * cos_a + point.z * sin_a,
                   point.y,
                   -point.x * sin_a + point.z * cos_a)


def rotate_y(obj: Object3D, angle_degrees: float):
    """
    Rotate every polygon of `obj` about the Y axis, in place.

    Each polygon gets a freshly built point sequence; the Y coordinate of
    every point is left untouched.
    """
    rad = angle_degrees * math.pi / 180.0
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    for polygon in obj.polygons:
        polygon.replace_points(
            rotate_point_y(p, cos_a, sin_a) for p in polygon.points)


def rotation_amount(delta_seconds: float,
                    speed: float = ROTATION_SPEED_DEG_PER_SEC) -> float:
    """Degrees to rotate for a tick lasting `delta_seconds`."""
    return speed * delta_seconds
