#
# PROJECT: wirespin
# MODULE: wirespin/loader.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-19
#

import json
import logging
import os

from .builder import build_object_from_data, build_polygon_2d
from .errors import LoadError
from .mesh import Object3D, Polygon2D

logger = logging.getLogger(__name__)

ASSET_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'assets')
DEFAULT_MODEL = 'cube.json'


def bundled_asset_path(name: str) -> str:
    """Path of a mesh file shipped inside the package."""
    return os.path.join(ASSET_DIR, name)


def load_raw(path):
    """Read and decode a JSON mesh file. Failures raise LoadError."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise LoadError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON: {e.msg} at line {e.lineno}") from e
    logger.info("Loaded mesh data from %s", path)
    return data


def load_object_from_file(path) -> Object3D:
    """
    Load a 3D object. The file holds a list of polygon records; a single
    record object is accepted as a one-polygon list.
    """
    data = load_raw(path)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise LoadError(path, f"expected a list of polygons, got {type(data).__name__}")
    return build_object_from_data(data)


def load_polygon_2d_from_file(path) -> Polygon2D:
    data = load_raw(path)
    if not isinstance(data, dict):
        raise LoadError(path, f"expected a polygon record, got {type(data).__name__}")
    return build_polygon_2d(data)


def load_default_object() -> Object3D:
    return load_object_from_file(bundled_asset_path(DEFAULT_MODEL))
