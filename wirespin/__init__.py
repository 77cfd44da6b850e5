#
# PROJECT: wirespin
# MODULE: wirespin/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-19
#

from .geometry import Point2D, Point3D
from .mesh import Edge, Polygon2D, Polygon3D, Object3D
from .errors import (WirespinError, MeshError, MalformedEdgeError,
                     EdgeIndexError, MalformedPointError, LoadError)
from .config import RenderConfig
from .builder import build_object_from_data, build_polygon_2d, build_polygon_3d
from .loader import load_object_from_file, load_polygon_2d_from_file, bundled_asset_path
from .transform import rotate_y, rotation_amount
from .projection import (PerspectiveProjection, OrthographicProjection, make_projection,
                         project_point, project_point_orthographic, project_polygon)
from .surface import DrawingSurface, RecordingSurface
from .canvas import TerminalCanvas
from .render import render_polygon, render_object
from .driver import AnimationState, tick
