"""Drawing the board, its labels and piece images onto a pygame surface."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

import pygame

from chessboard.board import Board, PieceType, Team
from chessboard.colors import FONT_COLOR, ColorTheme, theme_colors
from chessboard.layout import BOARD_SIZE, Layout, compute_layout

log = logging.getLogger(__name__)

_PIECE_NAMES = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}


def piece_asset_path(
    piece_type: PieceType, team: Team, root: str | PathLike[str] = "assets"
) -> Path:
    """Return the image file of a piece, e.g. ``<root>/pieces/kingW.png``."""
    name = _PIECE_NAMES.get(PieceType(piece_type))
    if name is None:
        raise ValueError("an empty square has no image")
    suffix = "W" if Team(team) == Team.WHITE else "B"
    return Path(root) / "pieces" / f"{name}{suffix}.png".rstrip()


class PieceTextures:
    """Loads piece images on first use and keeps them for later frames."""

    def __init__(self, root: str | PathLike[str] = "assets") -> None:
        self.root = Path(root)
        self._cache: dict[tuple[PieceType, Team], pygame.Surface | None] = {}

    def get(self, piece_type: PieceType, team: Team) -> pygame.Surface | None:
        """Return the image of a piece, or None if it is missing or not square."""
        key = (PieceType(piece_type), Team(team))
        if key not in self._cache:
            self._cache[key] = self._load(*key)
        return self._cache[key]

    def _load(self, piece_type: PieceType, team: Team) -> pygame.Surface | None:
        path = piece_asset_path(piece_type, team, self.root)
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError):
            log.warning("Failed to load texture: %s", path)
            return None
        width, height = image.get_size()
        if width == 0 or height == 0:
            log.warning("Failed to load texture: %s", path)
            return None
        if width != height:
            log.warning("Invalid texture %s: its width must equal its height", path)
            return None
        return image


def _cell_rect(layout: Layout, row: int, col: int) -> pygame.Rect:
    x, y = layout.cell_position(row, col)
    return pygame.Rect(int(x), int(y), layout.square_length, layout.square_length)


def draw_board(
    surface: pygame.Surface,
    board: Board,
    theme: ColorTheme | int = ColorTheme.BROWN,
    textures: PieceTextures | None = None,
) -> Layout:
    """Draw squares, rank and file labels and pieces; return the layout used."""
    colors = theme_colors(theme)
    layout = compute_layout(*surface.get_size())
    square = layout.square_length

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            color = colors.black if (row + col) & 1 else colors.white
            surface.fill(color, _cell_rect(layout, row, col))

    if square > 0:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, layout.font_size)
        for row in range(BOARD_SIZE):
            label = font.render(str(BOARD_SIZE - row), True, FONT_COLOR)
            surface.blit(label, layout.rank_label_position(row, label.get_width()))
        for col in range(BOARD_SIZE):
            label = font.render(chr(ord("a") + col), True, FONT_COLOR)
            surface.blit(label, layout.file_label_position(col, label.get_width()))

    if textures is not None and square > 0:
        for cell in board.cells():
            if cell.piece.is_empty:
                continue
            image = textures.get(cell.piece.type, cell.piece.team)
            if image is None:
                continue
            scaled = pygame.transform.scale(image, (square, square))
            surface.blit(scaled, _cell_rect(layout, cell.row, cell.col).topleft)

    return layout