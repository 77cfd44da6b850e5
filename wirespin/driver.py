#
# PROJECT: wirespin
# MODULE: wirespin/driver.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.6
# LOG_REF: 2026-10-19
#

import curses
import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from .canvas import TerminalCanvas
from .color import TerminalPalette
from .config import CLEAR_COLOR, ROTATION_SPEED_DEG_PER_SEC, RenderConfig
from .mesh import Object3D
from .projection import Projection, PerspectiveProjection, make_projection
from .render import render_object
from .surface import DrawingSurface
from .transform import rotate_y, rotation_amount

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """Everything one animation owns between ticks."""
    obj: Object3D
    surface: DrawingSurface
    projection: Projection = field(default_factory=PerspectiveProjection)
    rotation_speed: float = ROTATION_SPEED_DEG_PER_SEC
    clear_color: str = CLEAR_COLOR
    last_time_ms: Optional[float] = None
    paused: bool = False


def frame_delta(state: AnimationState, now_ms: float) -> float:
    """
    Seconds elapsed since the previous tick, recording `now_ms`.

    The first tick (no previous timestamp, or a zero one) yields 0 so the
    object does not jump. A clock that goes backwards also yields 0.
    """
    last = state.last_time_ms
    state.last_time_ms = now_ms
    if not last:
        return 0.0
    return max(0.0, (now_ms - last) / 1000.0)


def tick(state: AnimationState, now_ms: float) -> float:
    """
    Run one frame: clear, rotate by speed * elapsed time, draw.
    Returns the rotation applied in degrees.
    """
    delta = frame_delta(state, now_ms)
    state.surface.clear(state.clear_color)

    degrees = 0.0 if state.paused else rotation_amount(delta, state.rotation_speed)
    if degrees:
        rotate_y(state.obj, degrees)

    render_object(state.surface, state.obj, state.projection)
    return degrees


def now_ms() -> float:
    return time.monotonic() * 1000.0


class DemoApp:
    """
    Interactive curses harness: runs tick() once per loop iteration with a
    monotonic millisecond clock and draws a HUD line on top.
    """

    def __init__(self, stdscr, obj: Object3D, config: RenderConfig,
                 projection: str = 'perspective', max_fps: float = 60.0):
        self.stdscr = stdscr
        self.config = config
        self.running = True
        self.frame_budget = 1.0 / max_fps if max_fps > 0 else 0.0

        curses.curs_set(0)
        stdscr.nodelay(True)

        palette = TerminalPalette(enabled=config.use_color)
        mode = palette.init(background=config.clear_color)
        logger.info("Terminal color mode: %s", mode)

        th, tw = stdscr.getmaxyx()
        canvas = TerminalCanvas(tw - 1, th - 1, config, palette)
        self.canvas = canvas

        self.state = AnimationState(
            obj=obj,
            surface=canvas,
            projection=make_projection(projection, config),
            rotation_speed=config.rotation_speed,
            clear_color=config.clear_color,
        )

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.monotonic()

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        state = self.state
        config = self.config

        if key == ord('q'):
            self.running = False
        elif key == ord(' '):
            state.paused = not state.paused
        elif key == ord('p'):
            name = ('orthographic' if state.projection.name == 'perspective'
                    else 'perspective')
            state.projection = make_projection(name, config)
            logger.info("Projection switched to %s", name)
        elif key == ord('b'):
            config.use_braille = not config.use_braille
        elif key == ord('c'):
            config.use_color = not config.use_color
        elif key == curses.KEY_RESIZE:
            th, tw = self.stdscr.getmaxyx()
            self.canvas.resize(tw - 1, th - 1)

    def draw_hud(self, frame_ms: float):
        th, tw = self.stdscr.getmaxyx()
        state = self.state
        modestr = (f"{state.projection.name[:5].upper()} "
                   f"{'BRA' if self.config.use_braille else 'ASC'} "
                   f"{'COL' if self.config.use_color else 'MON'}"
                   f"{' PAUSE' if state.paused else ''}")
        hdr = (f" POLY:{len(state.obj)}"
               f" | V:{state.obj.point_count}"
               f" E:{state.obj.edge_count}"
               f" | FPS:{self.fps}"
               f" | {frame_ms:.1f}ms"
               f" | [{modestr}] ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        while self.running:
            start = time.monotonic()

            self.handle_input()

            tick(self.state, now_ms())
            self.stdscr.erase()
            self.canvas.flush(self.stdscr, top=1)

            self.frame_count += 1
            now = time.monotonic()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            self.draw_hud((now - start) * 1000)
            self.stdscr.refresh()

            remaining = self.frame_budget - (time.monotonic() - start)
            if remaining > 0:
                time.sleep(remaining)


def main(stdscr, obj: Object3D, config: RenderConfig, projection: str = 'perspective'):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, obj, config, projection)
    app.run()
