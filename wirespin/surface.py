#
# PROJECT: wirespin
# MODULE: wirespin/surface.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.5
# LOG_REF: 2026-10-19
#

from typing import List, Optional, Protocol, Tuple

from .config import CLEAR_COLOR


class DrawingSurface(Protocol):
    """The 2D line-drawing capability the render stage draws onto."""

    def set_stroke_color(self, color: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def clear(self, color: str = CLEAR_COLOR) -> None: ...


Segment = Tuple[str, float, Tuple[float, float], Tuple[float, float]]


class PathState:
    """
    Canvas-style current-path bookkeeping shared by concrete surfaces.

    Tracks the stroke state and turns move_to/line_to calls into a list of
    pending segments that stroke() hands to _emit().
    """

    def __init__(self):
        self.stroke_color = '#FFFFFF'
        self.line_width = 1.0
        self._cursor: Optional[Tuple[float, float]] = None
        self._pending: List[Tuple[Tuple[float, float], Tuple[float, float]]] = []

    def set_stroke_color(self, color: str):
        self.stroke_color = color

    def set_line_width(self, width: float):
        self.line_width = width

    def begin_path(self):
        self._cursor = None
        self._pending = []

    def move_to(self, x: float, y: float):
        self._cursor = (x, y)

    def line_to(self, x: float, y: float):
        # line_to without a current point only sets it, like a 2D canvas
        if self._cursor is not None:
            self._pending.append((self._cursor, (x, y)))
        self._cursor = (x, y)

    def stroke(self):
        for start, end in self._pending:
            self._emit(start, end)

    def _emit(self, start, end):
        raise NotImplementedError


class RecordingSurface(PathState):
    """In-memory surface that remembers every call and stroked segment."""

    def __init__(self):
        super().__init__()
        self.commands: List[Tuple[str, tuple]] = []
        self.segments: List[Segment] = []
        self.clear_count = 0
        self.background: Optional[str] = None

    def set_stroke_color(self, color: str):
        self.commands.append(('set_stroke_color', (color,)))
        super().set_stroke_color(color)

    def set_line_width(self, width: float):
        self.commands.append(('set_line_width', (width,)))
        super().set_line_width(width)

    def begin_path(self):
        self.commands.append(('begin_path', ()))
        super().begin_path()

    def move_to(self, x: float, y: float):
        self.commands.append(('move_to', (x, y)))
        super().move_to(x, y)

    def line_to(self, x: float, y: float):
        self.commands.append(('line_to', (x, y)))
        super().line_to(x, y)

    def stroke(self):
        self.commands.append(('stroke', ()))
        super().stroke()

    def clear(self, color: str = CLEAR_COLOR):
        self.commands.append(('clear', (color,)))
        self.clear_count += 1
        self.background = color
        self.segments = []

    def _emit(self, start, end):
        self.segments.append((self.stroke_color, self.line_width, start, end))
