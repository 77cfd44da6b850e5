#
# PROJECT: wirespin
# MODULE: wirespin/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.5
# LOG_REF: 2026-10-19
#

import curses
from typing import Optional

from .color import TerminalPalette
from .config import CLEAR_COLOR, DEFAULT_CONFIG, RenderConfig
from .rasterizer import draw_line_dda
from .surface import PathState


class DotGrid:
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        # Color grid stores the stroke color per cell (resolution w/2 x h/4)
        self.c_grid = [[None] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_dot(self, x, y, color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        # Last stroke wins the cell color; there is no depth ordering
        self.c_grid[cy][cx] = color

    def reset(self):
        for row in self.grid:
            row[:] = [0] * len(row)
        for row in self.c_grid:
            row[:] = [None] * len(row)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on dot density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(DotGrid.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


class TerminalCanvas(PathState):
    """
    DrawingSurface that rasterizes strokes into a terminal character grid.

    The logical viewport (config.screen_width x config.screen_height) is
    scaled uniformly onto the dot grid of `cols` x `rows` cells (2x4 dots per
    cell) and centred. Lines are always one dot wide whatever the line width.
    """

    def __init__(self, cols: int, rows: int, config: Optional[RenderConfig] = None,
                 palette: Optional[TerminalPalette] = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.palette = palette or TerminalPalette(enabled=False)
        self.background = self.config.clear_color
        self.resize(cols, rows)

    def resize(self, cols: int, rows: int):
        self.cols, self.rows = max(cols, 1), max(rows, 1)
        self.dots = DotGrid(self.cols * 2, self.rows * 4)
        sx = self.dots.w / self.config.screen_width
        sy = self.dots.h / self.config.screen_height
        self.scale = min(sx, sy)
        self.offset_x = (self.dots.w - self.config.screen_width * self.scale) / 2
        self.offset_y = (self.dots.h - self.config.screen_height * self.scale) / 2

    def to_dots(self, x: float, y: float):
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def clear(self, color: str = CLEAR_COLOR):
        self.background = color
        self.dots.reset()

    def _emit(self, start, end):
        color = self.stroke_color
        dots = self.dots
        draw_line_dda(lambda x, y: dots.set_dot(x, y, color),
                      self.to_dots(*start), self.to_dots(*end))

    def cell(self, col: int, row: int, use_braille: bool = True) -> str:
        mask = self.dots.grid[row][col]
        return render_cell_braille(mask) if use_braille else render_cell_ascii(mask)

    def flush(self, stdscr, top: int = 0):
        """
        Write the cell grid to a curses window starting at line `top`.
        Does NOT call stdscr.refresh().
        """
        th, tw = stdscr.getmaxyx()
        use_braille = self.config.use_braille
        use_color = self.config.use_color

        bg_attr = self.palette.background_attr() if use_color else 0
        if bg_attr:
            stdscr.bkgd(' ', bg_attr)

        grid = self.dots.grid
        c_grid = self.dots.c_grid
        for y in range(min(th - top, self.rows)):
            row_grid = grid[y]
            row_color = c_grid[y]
            for x in range(min(tw - 1, self.cols)):
                mask = row_grid[x]
                if not mask:
                    continue
                char = render_cell_braille(mask) if use_braille else render_cell_ascii(mask)
                attr = self.palette.attr_for(row_color[x]) if use_color else curses.A_NORMAL
                try:
                    stdscr.addstr(y + top, x, char, attr)
                except curses.error:
                    # Writing the bottom-right cell raises after the write succeeds
                    pass

    def to_text(self, use_braille: Optional[bool] = None) -> str:
        """The cell grid as plain text, one line per terminal row."""
        if use_braille is None:
            use_braille = self.config.use_braille
        return '\n'.join(
            ''.join(self.cell(x, y, use_braille) for x in range(self.cols)).rstrip()
            for y in range(self.rows))
