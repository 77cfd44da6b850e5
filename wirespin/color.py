#
# PROJECT: wirespin
# MODULE: wirespin/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.5
# LOG_REF: 2026-10-19
#

import curses
import logging

logger = logging.getLogger(__name__)

# Canvas-style color names accepted alongside hex strings
NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'lime': (0, 255, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'aqua': (0, 255, 255),
    'magenta': (255, 0, 255),
    'fuchsia': (255, 0, 255),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
}


def parse_hex_color(hex_str):
    """
    Parse a color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB', 'RRGGBB', '#RGB' or a basic color name
    (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    raw = str(hex_str).strip().lower()
    if raw in NAMED_COLORS:
        return NAMED_COLORS[raw]
    val = raw.lstrip('#')
    if len(val) == 3:
        val = ''.join(c * 2 for c in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# --- xterm-256 nearest-match ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _nearest_cube_val(v):
    """Find nearest index in the 6-level cube axis."""
    best_i = 0
    best_d = abs(v - _CUBE_VALUES[0])
    for i in range(1, 6):
        d = abs(v - _CUBE_VALUES[i])
        if d < best_d:
            best_d = d
            best_i = i
    return best_i


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""
    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


class TerminalPalette:
    """
    Maps stroke color strings to curses color-pair attributes.

    Pairs are allocated lazily the first time a color is seen. Color mode
    cascade, picked once in init():
      1. True color  – can_change_color(): init_color() with exact RGB
      2. xterm-256   – 256+ colors: nearest xterm-256 index
      3. 8-color     – basic ANSI palette approximation
      4. Mono        – every color maps to pair 0
    """

    # Color slots above the ANSI 16 that true-color mode may redefine
    FIRST_SLOT = 16

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.mode = 'mono'
        self._pairs = {}
        self._next_pair = 1
        self._next_slot = self.FIRST_SLOT
        self._max_pairs = 0
        self._bg_slot = -1
        self._bg_pair = 0

    def init(self, background=None):
        """Detect color support. Call once after curses has started."""
        if not self.enabled:
            return self.mode
        try:
            if not curses.has_colors():
                return self.mode
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                self._bg_slot = curses.COLOR_BLACK

            num_colors = getattr(curses, 'COLORS', 8)
            self._max_pairs = getattr(curses, 'COLOR_PAIRS', 64) - 1
            if num_colors >= 256 and curses.can_change_color():
                self.mode = 'truecolor'
            elif num_colors >= 256:
                self.mode = 'xterm256'
            elif num_colors >= 8:
                self.mode = 'ansi8'
        except curses.error as e:
            logger.warning("Color initialisation failed, using mono: %s", e)
            self.mode = 'mono'

        bg_rgb = parse_hex_color(background)
        if bg_rgb is not None and bg_rgb != (0, 0, 0) and self.mode != 'mono':
            self._bg_slot = self._slot_for(bg_rgb)
        if self._bg_slot != -1 and self.mode != 'mono':
            try:
                curses.init_pair(self._next_pair, curses.COLOR_WHITE, self._bg_slot)
                self._bg_pair = self._next_pair
                self._next_pair += 1
            except curses.error as e:
                logger.warning("Could not allocate background pair: %s", e)
        return self.mode

    def _slot_for(self, rgb):
        r, g, b = rgb
        if self.mode == 'truecolor':
            slot = self._next_slot
            try:
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                self._next_slot += 1
                return slot
            except curses.error:
                return rgb_to_nearest_xterm(r, g, b)
        if self.mode == 'xterm256':
            return rgb_to_nearest_xterm(r, g, b)
        return rgb_to_nearest_ansi8(r, g, b)

    def pair_for(self, color: str) -> int:
        """Curses pair number for `color`; 0 (terminal default) when unavailable."""
        if self.mode == 'mono':
            return 0
        if color in self._pairs:
            return self._pairs[color]

        pair_id = 0
        rgb = parse_hex_color(color)
        if rgb is None:
            logger.warning("Unrecognised stroke color %r, using default", color)
        elif self._next_pair <= self._max_pairs:
            try:
                curses.init_pair(self._next_pair, self._slot_for(rgb), self._bg_slot)
                pair_id = self._next_pair
                self._next_pair += 1
            except curses.error as e:
                logger.warning("Could not allocate color pair for %r: %s", color, e)
        self._pairs[color] = pair_id
        return pair_id

    def attr_for(self, color: str) -> int:
        return curses.color_pair(self.pair_for(color))

    def background_attr(self) -> int:
        if not self._bg_pair:
            return 0
        return curses.color_pair(self._bg_pair)
