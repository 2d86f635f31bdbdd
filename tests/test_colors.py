import pytest

from chessboard.colors import (
    BROWN_BLACK,
    BROWN_WHITE,
    ColorPair,
    ColorTheme,
    SKY_BLACK,
    theme_colors,
)


def test_brown_theme_matches_named_colors():
    pair = theme_colors(ColorTheme.BROWN)
    assert pair == ColorPair(BROWN_WHITE, BROWN_BLACK)
    assert pair.white == (242, 212, 174, 255)


def test_green_theme_values():
    pair = theme_colors(ColorTheme.GREEN)
    assert pair.black == (115, 149, 82, 255)


def test_integer_theme_index_accepted():
    assert theme_colors(5).black == SKY_BLACK


def test_every_theme_has_distinct_square_colors():
    for theme in ColorTheme:
        pair = theme_colors(theme)
        assert pair.white != pair.black
        assert len(pair.white) == 4 and len(pair.black) == 4


def test_theme_order():
    assert [t.value for t in ColorTheme] == list(range(len(ColorTheme)))
    for theme in ColorTheme:
        assert theme_colors(theme.value) == theme_colors(theme)
    assert theme_colors(0) == ColorPair(BROWN_WHITE, BROWN_BLACK)


@pytest.mark.parametrize("bad", [-1, 6, 100])
def test_unknown_theme_raises(bad):
    with pytest.raises(ValueError):
        theme_colors(bad)