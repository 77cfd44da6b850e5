#
# PROJECT: wirespin
# MODULE: wirespin/errors.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-19
#


class WirespinError(Exception):
    """Base class for every error raised by the package."""


class MeshError(WirespinError):
    """Raw mesh data could not be turned into a mesh."""


class MalformedEdgeError(MeshError):
    """An edge record did not contain exactly two indices."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid edge: expected 2 elements, got {length}")


class EdgeIndexError(MeshError, IndexError):
    """An edge references a point that the polygon does not have."""

    def __init__(self, edge, point_count: int):
        self.edge = tuple(edge)
        self.point_count = point_count
        super().__init__(
            f"Edge {self.edge} out of range for polygon with {point_count} points")


class MalformedPointError(MeshError):
    """A point record is missing a required coordinate."""

    def __init__(self, record, missing: str):
        self.record = record
        self.missing = missing
        super().__init__(f"Invalid point {record!r}: missing '{missing}'")


class LoadError(WirespinError):
    """A mesh file could not be read or decoded."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load file: {self.path} ({reason})")
