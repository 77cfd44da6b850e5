"""Color parsing and palette matching."""

import pytest

from wirespin.color import (TerminalPalette, parse_hex_color, rgb_to_nearest_ansi8,
                            rgb_to_nearest_xterm)


@pytest.mark.parametrize("text, rgb", [
    ("#00FF00", (0, 255, 0)),
    ("ff8800", (255, 136, 0)),
    ("#abc", (170, 187, 204)),
    ("Red", (255, 0, 0)),
    (" #000000 ", (0, 0, 0)),
])
def test_parse_hex_color(text, rgb):
    assert parse_hex_color(text) == rgb


@pytest.mark.parametrize("text", [None, "", "#12345", "#GGGGGG", "chartreuse-ish"])
def test_parse_hex_color_rejects(text):
    assert parse_hex_color(text) is None


def test_nearest_xterm():
    assert rgb_to_nearest_xterm(255, 0, 0) == 196
    assert rgb_to_nearest_xterm(0, 0, 0) == 16
    assert 232 <= rgb_to_nearest_xterm(128, 128, 128) <= 255


def test_nearest_ansi8():
    assert rgb_to_nearest_ansi8(250, 10, 10) == 1
    assert rgb_to_nearest_ansi8(200, 200, 200) == 7


def test_disabled_palette_is_mono():
    palette = TerminalPalette(enabled=False)
    assert palette.init() == "mono"
    assert palette.pair_for("#ff0000") == 0
    assert palette.background_attr() == 0
