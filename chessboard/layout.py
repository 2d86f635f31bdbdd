"""Pixel layout of the board for a given window size."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
SPACE_TEXT = 0.75
SQUARE_COUNT = BOARD_SIZE + SPACE_TEXT
MIN_FONT_SIZE = 10


def compute_square_length(width: int, height: int) -> int:
    """Return the side of one square so the board and its labels fit the window."""
    return int(min(width, height) / SQUARE_COUNT)


@dataclass(frozen=True)
class Layout:
    """Positions of squares and labels for one window size."""

    square_length: int
    extra: int

    @property
    def board_left(self) -> float:
        return self.extra + self.square_length * SPACE_TEXT / 2.0

    @property
    def board_top(self) -> float:
        return self.square_length * SPACE_TEXT / 2.0

    @property
    def font_size(self) -> int:
        size = max(int(self.square_length * 0.25), MIN_FONT_SIZE)
        return min(size, self.square_length)

    def cell_position(self, row: int, col: int) -> tuple[float, float]:
        """Return the top-left pixel of a square."""
        return (
            self.board_left + col * self.square_length,
            row * self.square_length + self.board_top,
        )

    def rank_label_position(self, row: int, text_width: int) -> tuple[int, int]:
        """Return where the rank number of a row is drawn, left of the board."""
        font = self.font_size
        x = self.board_left - text_width - font * 0.25
        y = self.cell_position(row, 0)[1] + (self.square_length - font) * 0.5
        return int(x), int(y)

    def file_label_position(self, col: int, text_width: int) -> tuple[int, int]:
        """Return where the file letter of a column is drawn, below the board."""
        font = self.font_size
        x = self.cell_position(BOARD_SIZE - 1, col)[0] + (self.square_length - text_width) * 0.5
        y = int(self.board_top + BOARD_SIZE * self.square_length + font * 0.25)
        return int(x), y


def compute_layout(width: int, height: int) -> Layout:
    """Return the layout that centres the board horizontally in the window."""
    square = compute_square_length(width, height)
    extra = int((width - SQUARE_COUNT * square) / 2)
    return Layout(square, extra)