"""Board colour themes and named colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Color = tuple[int, int, int, int]

BROWN_WHITE: Color = (242, 212, 174, 255)
BROWN_BLACK: Color = (192, 132, 98, 255)

GREEN_WHITE: Color = (235, 236, 208, 255)
GREEN_BLACK: Color = (115, 149, 82, 255)

ORANGE_WHITE: Color = (255, 226, 172, 255)
ORANGE_BLACK: Color = (221, 132, 24, 255)

PURPLE_WHITE: Color = (239, 241, 240, 255)
PURPLE_BLACK: Color = (132, 118, 185, 255)

RED_WHITE: Color = (250, 217, 193, 255)
RED_BLACK: Color = (200, 83, 71, 255)

SKY_WHITE: Color = (239, 241, 240, 255)
SKY_BLACK: Color = (190, 215, 227, 255)

BACKGROUND: Color = (48, 46, 43, 255)
FONT_COLOR: Color = (245, 245, 245, 255)


class ColorTheme(IntEnum):
    """Available board colour schemes."""

    BROWN = 0
    GREEN = 1
    ORANGE = 2
    PURPLE = 3
    RED = 4
    SKY = 5


@dataclass(frozen=True)
class ColorPair:
    """Colours of the light and dark squares of a theme."""

    white: Color
    black: Color


_PALETTE: dict[ColorTheme, ColorPair] = {
    ColorTheme.BROWN: ColorPair(BROWN_WHITE, BROWN_BLACK),
    ColorTheme.GREEN: ColorPair(GREEN_WHITE, GREEN_BLACK),
    ColorTheme.ORANGE: ColorPair(ORANGE_WHITE, ORANGE_BLACK),
    ColorTheme.PURPLE: ColorPair(PURPLE_WHITE, PURPLE_BLACK),
    ColorTheme.RED: ColorPair(RED_WHITE, RED_BLACK),
    ColorTheme.SKY: ColorPair(SKY_WHITE, SKY_BLACK),
}


def theme_colors(theme: ColorTheme | int) -> ColorPair:
    """Return the square colours of a theme; raise ValueError for an unknown theme."""
    return _PALETTE[ColorTheme(theme)]