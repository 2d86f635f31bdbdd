"""Reading and writing the piece-placement field of FEN strings."""

from __future__ import annotations

from chessboard.board import BOARD_SIZE, Board, PieceType, Team

_LETTER_TO_TYPE = {
    "r": PieceType.ROOK,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
    "p": PieceType.PAWN,
}
_TYPE_TO_LETTER = {t: letter for letter, t in _LETTER_TO_TYPE.items()}


class FenError(ValueError):
    """Raised when a board cannot be written as FEN."""


def read_fen(board: Board, text: str) -> None:
    """Place the pieces described by a FEN placement string on the board.

    Unknown characters are skipped; letters that are not pieces still take a square.
    """
    text = text.split("\0", 1)[0]
    rank = 0
    file = 0
    for ch in text:
        if ch == "/":
            rank += 1
            file = 0
            if rank >= BOARD_SIZE:
                break
            continue
        if ch in "0123456789":
            file = min(file + int(ch), BOARD_SIZE)
            continue
        if not (ch.isascii() and ch.isalpha()):
            continue
        team = Team.BLACK if ch.islower() else Team.WHITE
        piece_type = _LETTER_TO_TYPE.get(ch.lower())
        if file < BOARD_SIZE and piece_type is not None:
            board.place(rank, file, piece_type, team)
        file += 1


def save_fen(board: Board) -> str:
    """Return the FEN placement string for the board, top rank first."""
    ranks = []
    for row in range(BOARD_SIZE):
        parts = []
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[row, col].piece
            if piece.type == PieceType.NONE:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            letter = _TYPE_TO_LETTER.get(piece.type)
            if letter is None:
                raise FenError(f"invalid piece type {piece.type!r} at ({row}, {col})")
            parts.append(letter if piece.team == Team.BLACK else letter.upper())
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return "/".join(ranks)