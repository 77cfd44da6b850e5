"""Render stage against the recording surface."""

import pytest

from wirespin.geometry import Point2D, Point3D
from wirespin.mesh import Object3D, Polygon2D, Polygon3D
from wirespin.projection import OrthographicProjection, project_polygon
from wirespin.render import render_object, render_polygon


def test_render_polygon_command_sequence(surface):
    poly = Polygon2D("#ff0000", [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10)],
                     [(0, 1), (1, 2)])
    render_polygon(surface, poly)

    assert surface.commands == [
        ("set_stroke_color", ("#ff0000",)),
        ("set_line_width", (2,)),
        ("begin_path", ()),
        ("move_to", (0.0, 0.0)),
        ("line_to", (10.0, 0.0)),
        ("stroke", ()),
        ("begin_path", ()),
        ("move_to", (10.0, 0.0)),
        ("line_to", (10.0, 10.0)),
        ("stroke", ()),
    ]
    assert surface.segments == [
        ("#ff0000", 2, (0.0, 0.0), (10.0, 0.0)),
        ("#ff0000", 2, (10.0, 0.0), (10.0, 10.0)),
    ]


def test_out_of_range_edge_raises_index_error(surface):
    poly = Polygon2D("#fff", [Point2D(0, 0)], [(0, 3)])
    with pytest.raises(IndexError):
        render_polygon(surface, poly)


def test_render_object_strokes_every_cube_edge(surface, cube):
    render_object(surface, cube)
    assert len(surface.segments) == 12
    expected = project_polygon(cube.polygons[0])
    first = surface.segments[0]
    assert first[2] == tuple(expected.points[0])
    assert first[3] == tuple(expected.points[1])


def test_render_object_keeps_declaration_order(surface):
    back = Polygon3D("#0000ff", [Point3D(0, 0, 5), Point3D(1, 0, 5)], [(0, 1)])
    front = Polygon3D("#ff0000", [Point3D(0, 0, -1), Point3D(1, 0, -1)], [(0, 1)])
    render_object(surface, Object3D([back, front]))
    assert [s[0] for s in surface.segments] == ["#0000ff", "#ff0000"]


def test_render_object_with_orthographic(surface):
    poly = Polygon3D("#fff", [Point3D(0, 0, 7), Point3D(1, 0, -7)], [(0, 1)])
    render_object(surface, Object3D([poly]), OrthographicProjection())
    assert surface.segments[0][2:] == ((480.0, 300.0), (680.0, 300.0))
