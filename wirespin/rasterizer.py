#
# PROJECT: wirespin
# MODULE: wirespin/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.5
# LOG_REF: 2026-10-19
#

from typing import Callable, Iterator, Tuple

Dot = Tuple[int, int]


def line_dots(p1, p2) -> Iterator[Dot]:
    """
    Yields the integer dots of the segment p1 -> p2 using the DDA algorithm.
    p1, p2 are (x, y) pairs in dot space; a zero-length segment yields one dot.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        yield (x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        yield (int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def draw_line_dda(plot: Callable[[int, int], None], p1, p2):
    """Feeds every dot of p1 -> p2 to `plot(x, y)`. Bounds are plot's job."""
    for x, y in line_dots(p1, p2):
        plot(x, y)
