"""Perspective and orthographic projection."""

import math

import pytest

from wirespin.config import RenderConfig
from wirespin.geometry import Point2D, Point3D
from wirespin.mesh import Polygon3D
from wirespin.projection import (ORTHOGRAPHIC_PROJECTION, OrthographicProjection,
                                 PerspectiveProjection, Projection,
                                 make_projection, project_point,
                                 project_point_orthographic, project_polygon)

CENTER = (480.0, 300.0)


def _dist_from_center(p: Point2D) -> float:
    return math.hypot(p.x - CENTER[0], p.y - CENTER[1])


def test_origin_maps_to_screen_center():
    assert tuple(project_point(Point3D(0, 0, 0))) == pytest.approx(CENTER)
    assert tuple(project_point_orthographic(Point3D(0, 0, 9))) == pytest.approx(CENTER)


def test_perspective_values():
    # adjusted z = 5, focal length = 1 -> factor 0.2
    p = project_point(Point3D(1, 1, 0))
    assert p.x == pytest.approx(480 + 0.2 * 200)
    assert p.y == pytest.approx(300 - 0.2 * 200)


def test_y_axis_is_flipped():
    up = project_point(Point3D(0, 1, 0))
    assert up.y < CENTER[1]


def test_clamp_behind_camera():
    proj = PerspectiveProjection()
    point = Point3D(1, 1, -10)
    assert proj.safe_depth(point) == pytest.approx(0.1)
    p = proj.project(point)
    assert math.isfinite(p.x) and math.isfinite(p.y)


def test_clamp_at_camera_plane():
    proj = PerspectiveProjection()
    p = proj.project(Point3D(0.1, 0.1, -5))
    assert math.isfinite(p.x) and math.isfinite(p.y)
    assert proj.safe_depth(Point3D(0, 0, -5)) == pytest.approx(0.1)


def test_cube_corner_foreshortening():
    near = project_point(Point3D(0.5, 0.5, 0.5))
    far = project_point(Point3D(1.0, 1.0, 1.0))
    assert 0 < near.x < 960 and 0 < near.y < 600
    assert _dist_from_center(near) < _dist_from_center(far)


def test_perspective_shrinks_with_depth():
    close = project_point(Point3D(1, 0, 0))
    distant = project_point(Point3D(1, 0, 10))
    assert _dist_from_center(distant) < _dist_from_center(close)


def test_orthographic_ignores_depth():
    proj = OrthographicProjection()
    assert proj(Point3D(1, 1, 0)) == proj(Point3D(1, 1, 50))
    assert tuple(proj(Point3D(1, -1, 0))) == pytest.approx((680, 500))


def test_config_drives_strategy():
    config = RenderConfig(screen_width=100, screen_height=50, scale=10)
    p = OrthographicProjection(config).project(Point3D(1, 1, 0))
    assert tuple(p) == pytest.approx((60, 15))


def test_make_projection():
    assert isinstance(make_projection(), PerspectiveProjection)
    assert isinstance(make_projection("orthographic"), OrthographicProjection)
    with pytest.raises(ValueError):
        make_projection("fisheye")


def test_project_polygon_carries_color_and_edges():
    poly = Polygon3D("#abcdef", [Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)],
                     [(0, 1), (1, 2), (2, 0)])
    flat = project_polygon(poly)
    assert flat.color == "#abcdef"
    assert flat.edges == poly.edges
    assert len(flat.points) == 3
    assert flat.points[0] == project_point(poly.points[0])


def test_project_polygon_with_orthographic():
    poly = Polygon3D("#fff", [Point3D(1, 0, 3)], [])
    flat = project_polygon(poly, OrthographicProjection())
    assert tuple(flat.points[0]) == pytest.approx((680, 300))


def test_projection_base_is_abstract():
    with pytest.raises(TypeError):
        Projection()


def test_orthographic_convenience_reuses_one_strategy(monkeypatch):
    created = []
    original_init = OrthographicProjection.__init__

    def counting_init(self, config=None):
        created.append(self)
        original_init(self, config)

    monkeypatch.setattr(OrthographicProjection, "__init__", counting_init)
    project_point_orthographic(Point3D(1, 0, 0))
    project_point_orthographic(Point3D(0, 1, 0))
    assert created == []
    assert isinstance(ORTHOGRAPHIC_PROJECTION, OrthographicProjection)
