#
# PROJECT: wirespin
# MODULE: wirespin/projection.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.3
# LOG_REF: 2026-10-19
#
"""
3D -> 2D projection strategies.

A strategy is picked once (see make_projection) and then used for every
point of every frame. Both strategies map world units to screen pixels with
a fixed magnification and flip Y, since screen Y grows downward.
"""

import abc
from typing import Optional

from .config import DEFAULT_CONFIG, RenderConfig
from .geometry import Point2D, Point3D
from .mesh import Polygon2D, Polygon3D


class Projection(abc.ABC):
    """Base strategy: subclasses implement project()."""
    name = 'base'

    def __init__(self, config: Optional[RenderConfig] = None):
        config = config or DEFAULT_CONFIG
        self.half_w = config.half_width
        self.half_h = config.half_height
        self.scale = config.scale

    @abc.abstractmethod
    def project(self, point: Point3D) -> Point2D:
        ...

    def __call__(self, point: Point3D) -> Point2D:
        return self.project(point)

    def _to_screen(self, x: float, y: float) -> Point2D:
        return Point2D(self.half_w + x * self.scale,
                       self.half_h - y * self.scale)


class PerspectiveProjection(Projection):
    """
    Pinhole projection with the camera `camera_distance` units behind the
    origin looking down +Z.

    Depth is clamped to `near_clamp` before the divide. Points at or behind
    the camera therefore land near the clamp bound instead of being clipped;
    they are still drawn, just wrongly placed.
    """
    name = 'perspective'

    def __init__(self, config: Optional[RenderConfig] = None):
        super().__init__(config)
        config = config or DEFAULT_CONFIG
        self.camera_distance = config.camera_distance
        self.near_clamp = config.near_clamp
        self.focal_length = config.focal_length

    def safe_depth(self, point: Point3D) -> float:
        return max(point.z + self.camera_distance, self.near_clamp)

    def project(self, point: Point3D) -> Point2D:
        factor = self.focal_length / self.safe_depth(point)
        return self._to_screen(point.x * factor, point.y * factor)


class OrthographicProjection(Projection):
    """Drops Z entirely; no size falloff with distance."""
    name = 'orthographic'

    def project(self, point: Point3D) -> Point2D:
        return self._to_screen(point.x, point.y)


PROJECTIONS = {
    PerspectiveProjection.name: PerspectiveProjection,
    OrthographicProjection.name: OrthographicProjection,
}


def make_projection(name: str = 'perspective',
                    config: Optional[RenderConfig] = None) -> Projection:
    try:
        cls = PROJECTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown projection '{name}' "
                         f"(expected one of {sorted(PROJECTIONS)})") from None
    return cls(config)


DEFAULT_PROJECTION = PerspectiveProjection()
ORTHOGRAPHIC_PROJECTION = OrthographicProjection()


def project_point(point: Point3D) -> Point2D:
    return DEFAULT_PROJECTION.project(point)


def project_point_orthographic(point: Point3D) -> Point2D:
    return ORTHOGRAPHIC_PROJECTION.project(point)


def project_polygon(polygon: Polygon3D,
                    projection: Projection = DEFAULT_PROJECTION) -> Polygon2D:
    """Project every point; color and edges carry over unchanged."""
    return Polygon2D(polygon.color,
                     [projection.project(p) for p in polygon.points],
                     polygon.edges)
