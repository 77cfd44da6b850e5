#
# PROJECT: wirespin
# MODULE: wirespin/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass

# Screen
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 600
HALF_SCREEN_WIDTH = SCREEN_WIDTH / 2
HALF_SCREEN_HEIGHT = SCREEN_HEIGHT / 2

# Perspective projection
FOV_DEGREES = 90.0
FOV_RADIANS = math.radians(FOV_DEGREES)
FOCAL_LENGTH = 1.0 / math.tan(FOV_RADIANS / 2.0)
CAMERA_DISTANCE = 5.0
NEAR_CLAMP = 0.1
PROJECTION_SCALE = 200.0

# Animation / drawing
ROTATION_SPEED_DEG_PER_SEC = 60.0
LINE_WIDTH = 2
CLEAR_COLOR = '#000000'


@dataclass
class RenderConfig:
    """Configuration for the projection pipeline and the terminal surface."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    fov: float = FOV_DEGREES
    camera_distance: float = CAMERA_DISTANCE
    near_clamp: float = NEAR_CLAMP
    scale: float = PROJECTION_SCALE
    rotation_speed: float = ROTATION_SPEED_DEG_PER_SEC
    line_width: float = LINE_WIDTH
    clear_color: str = CLEAR_COLOR
    use_color: bool = True
    use_braille: bool = True

    @property
    def half_width(self) -> float:
        return self.screen_width / 2

    @property
    def half_height(self) -> float:
        return self.screen_height / 2

    @property
    def aspect_ratio(self) -> float:
        return self.screen_width / self.screen_height

    @property
    def fov_radians(self) -> float:
        return math.radians(self.fov)

    @property
    def focal_length(self) -> float:
        return 1.0 / math.tan(self.fov_radians / 2.0)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and LANG and return a config.
        Accurate color detection needs curses, so this is a pre-init guess.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille
            use_braille=supports_utf8 and not is_linux_console,
        )


DEFAULT_CONFIG = RenderConfig()
