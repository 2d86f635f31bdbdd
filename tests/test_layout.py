import pytest

from chessboard.layout import SPACE_TEXT, compute_layout, compute_square_length


@pytest.mark.parametrize("size", [(1280, 720), (480, 480), (800, 1200), (1000, 999)])
def test_square_length_is_largest_fitting(size):
    w, h = size
    sq = compute_square_length(w, h)
    assert sq * 8.75 <= min(w, h)
    assert (sq + 1) * 8.75 > min(w, h)


def test_square_length_symmetric():
    assert compute_square_length(1280, 720) == compute_square_length(720, 1280)


def test_board_is_horizontally_centred():
    layout = compute_layout(1280, 720)
    sq = layout.square_length
    left = layout.cell_position(0, 0)[0] - sq * SPACE_TEXT / 2
    right_edge = left + sq * 8.75
    assert abs(left - (1280 - right_edge)) <= 1


def test_cells_are_adjacent():
    layout = compute_layout(1024, 768)
    sq = layout.square_length
    for row in range(8):
        for col in range(7):
            x0, y0 = layout.cell_position(row, col)
            x1, y1 = layout.cell_position(row, col + 1)
            assert x1 - x0 == sq
            assert y1 == y0
    assert layout.cell_position(1, 0)[1] - layout.cell_position(0, 0)[1] == sq


def test_top_margin_is_half_label_space():
    layout = compute_layout(900, 900)
    assert layout.cell_position(0, 3)[1] == layout.square_length * SPACE_TEXT / 2


def test_font_size_bounds():
    layout = compute_layout(1280, 720)
    assert 10 <= layout.font_size <= layout.square_length


def test_font_size_clamped_to_square_on_tiny_window():
    layout = compute_layout(50, 50)
    assert layout.font_size == layout.square_length


def test_rank_label_left_of_board():
    layout = compute_layout(1280, 720)
    for row in range(8):
        x, y = layout.rank_label_position(row, 12)
        assert x + 12 < layout.board_left
        cell_y = layout.cell_position(row, 0)[1]
        assert cell_y <= y < cell_y + layout.square_length


def test_file_label_below_board_and_within_column():
    layout = compute_layout(1280, 720)
    bottom = layout.board_top + 8 * layout.square_length
    for col in range(8):
        x, y = layout.file_label_position(col, 10)
        cell_x = layout.cell_position(7, col)[0]
        assert y >= int(bottom)
        assert cell_x <= x < cell_x + layout.square_length