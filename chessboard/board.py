"""Chess board state: pieces, teams and the 8x8 grid of cells."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

BOARD_SIZE = 8


class PieceType(IntEnum):
    """Kind of a piece; NONE marks an empty square."""

    NONE = 0
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


class Team(IntEnum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1


@dataclass
class Piece:
    """Contents of a square."""

    type: PieceType = PieceType.NONE
    team: Team = Team.WHITE
    has_moved: bool = False
    en_passant: bool = False

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.NONE


@dataclass
class Cell:
    """One board square with its coordinates and piece."""

    row: int
    col: int
    piece: Piece = field(default_factory=Piece)


def _check(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"square ({row}, {col}) is off the board")


class Board:
    """An 8x8 grid of cells; row 0 is the top rank, column 0 the a-file."""

    def __init__(self) -> None:
        self._grid = [[Cell(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]

    def reset(self) -> None:
        """Give every cell its coordinates and an empty, unmoved piece."""
        for r, line in enumerate(self._grid):
            for c, cell in enumerate(line):
                cell.row = r
                cell.col = c
                cell.piece = Piece()

    def clear(self) -> None:
        """Remove all pieces and their flags."""
        for cell in self.cells():
            cell.piece.type = PieceType.NONE
            cell.piece.has_moved = False
            cell.piece.en_passant = False
            cell.piece.team = Team.WHITE

    def place(self, row: int, col: int, piece_type: PieceType, team: Team) -> None:
        """Put a piece of the given type and team on a square."""
        _check(row, col)
        piece_type = PieceType(piece_type)
        if piece_type == PieceType.NONE:
            raise ValueError("cannot place an empty piece")
        piece = self._grid[row][col].piece
        piece.type = piece_type
        piece.team = Team(team)

    def __getitem__(self, key: tuple[int, int]) -> Cell:
        row, col = key
        _check(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, rank by rank from the top."""
        for line in self._grid:
            yield from line