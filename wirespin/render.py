#
# PROJECT: wirespin
# MODULE: wirespin/render.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.4
# LOG_REF: 2026-10-19
#

from .config import LINE_WIDTH
from .mesh import Object3D, Polygon2D
from .projection import DEFAULT_PROJECTION, Projection, project_polygon
from .surface import DrawingSurface


def render_polygon(surface: DrawingSurface, polygon: Polygon2D,
                   line_width: float = LINE_WIDTH):
    """
    Stroke every edge of a projected polygon, one path per edge.

    An edge index outside the point list raises IndexError; no edge is
    silently skipped.
    """
    surface.set_stroke_color(polygon.color)
    surface.set_line_width(line_width)

    points = polygon.points
    for start, end in polygon.edges:
        p0 = points[start]
        p1 = points[end]
        surface.begin_path()
        surface.move_to(p0.x, p0.y)
        surface.line_to(p1.x, p1.y)
        surface.stroke()


def render_object(surface: DrawingSurface, obj: Object3D,
                  projection: Projection = DEFAULT_PROJECTION,
                  line_width: float = LINE_WIDTH):
    """Project and draw each polygon in declaration order (no depth sort)."""
    for polygon in obj.polygons:
        render_polygon(surface, project_polygon(polygon, projection), line_width)
