"""Loading meshes from JSON files."""

import json

import pytest

from wirespin.errors import LoadError, MalformedEdgeError
from wirespin.loader import (bundled_asset_path, load_default_object, load_object_from_file,
                             load_polygon_2d_from_file, load_raw)


def test_bundled_cube():
    obj = load_default_object()
    assert len(obj) == 1
    assert obj.point_count == 8
    assert obj.edge_count == 12


def test_bundled_pyramid_has_two_colors():
    obj = load_object_from_file(bundled_asset_path("pyramid.json"))
    assert [p.color for p in obj.polygons] == ["#FFAA00", "#00CCFF"]


def test_bundled_square_2d():
    poly = load_polygon_2d_from_file(bundled_asset_path("square.json"))
    assert len(poly.points) == 4
    assert poly.edges[-1] == (3, 0)


def test_single_record_file_is_one_polygon(tmp_path, cube_data):
    path = tmp_path / "one.json"
    path.write_text(json.dumps(cube_data[0]))
    assert len(load_object_from_file(path)) == 1


def test_missing_file(tmp_path):
    with pytest.raises(LoadError) as excinfo:
        load_raw(tmp_path / "nope.json")
    assert excinfo.value.path.endswith("nope.json")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[{")
    with pytest.raises(LoadError, match="invalid JSON"):
        load_object_from_file(path)


def test_wrong_top_level_shape(tmp_path):
    path = tmp_path / "num.json"
    path.write_text("42")
    with pytest.raises(LoadError):
        load_object_from_file(path)
    with pytest.raises(LoadError):
        load_polygon_2d_from_file(path)


def test_malformed_edge_propagates(tmp_path):
    path = tmp_path / "edge.json"
    path.write_text(json.dumps([{"color": "#fff",
                                 "points": [{"x": 0, "y": 0, "z": 0}],
                                 "vertices": [[0, 0, 0]]}]))
    with pytest.raises(MalformedEdgeError):
        load_object_from_file(path)
