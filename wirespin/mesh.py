#
# PROJECT: wirespin
# MODULE: wirespin/mesh.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3
# LOG_REF: 2026-10-19
#

from typing import Iterable, List, Sequence, Tuple

from .geometry import Point2D, Point3D

Edge = Tuple[int, int]


class Polygon2D:
    """Projected polygon: a color, screen points and index-pair edges."""
    __slots__ = ('color', 'points', 'edges')

    def __init__(self, color: str, points: Sequence[Point2D], edges: Iterable[Edge]):
        self.color = color
        self.points = list(points)
        self.edges = tuple(edges)

    def __repr__(self):
        return (f"Polygon2D(color={self.color!r}, points={len(self.points)}, "
                f"edges={len(self.edges)})")


class Polygon3D:
    """
    World-space polygon.

    Color and edges are fixed at construction. The point sequence is only
    ever swapped as a whole through replace_points(); a list handed out by
    `points` before a replacement keeps the old coordinates.
    """
    __slots__ = ('color', '_points', 'edges')

    def __init__(self, color: str, points: Sequence[Point3D], edges: Iterable[Edge]):
        self.color = color
        self._points = tuple(points)
        self.edges = tuple(edges)

    @property
    def points(self) -> Tuple[Point3D, ...]:
        return self._points

    def replace_points(self, points: Iterable[Point3D]):
        self._points = tuple(points)

    def __repr__(self):
        return (f"Polygon3D(color={self.color!r}, points={len(self._points)}, "
                f"edges={len(self.edges)})")


class Object3D:
    """An ordered collection of polygons animated as one unit."""
    __slots__ = ('polygons',)

    def __init__(self, polygons: Iterable[Polygon3D]):
        self.polygons: List[Polygon3D] = list(polygons)

    def __iter__(self):
        return iter(self.polygons)

    def __len__(self):
        return len(self.polygons)

    @property
    def point_count(self) -> int:
        return sum(len(p.points) for p in self.polygons)

    @property
    def edge_count(self) -> int:
        return sum(len(p.edges) for p in self.polygons)
