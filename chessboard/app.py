"""Window, main loop and start-up of the chess board viewer."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from chessboard.board import BOARD_SIZE, Board
from chessboard.colors import BACKGROUND, ColorTheme
from chessboard.fen import read_fen, save_fen
from chessboard.render import PieceTextures, draw_board

log = logging.getLogger(__name__)

STANDARD_GAME = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
WINDOW_SIZE = (1280, 720)
MIN_WINDOW_SIZE = (480, 480)
TARGET_FPS = 60


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chessboard", description="Show a chess board.")
    parser.add_argument("--fen", default=STANDARD_GAME, help="piece placement to show")
    parser.add_argument(
        "--theme",
        default=ColorTheme.BROWN.name.lower(),
        choices=[t.name.lower() for t in ColorTheme],
        help="board colour theme",
    )
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    parser.add_argument("--save", default="example.fen", help="file the position is saved to")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--debug", action="store_true", help="print the board's piece types")
    return parser.parse_args(argv)


def _print_board(board: Board) -> None:
    for row in range(BOARD_SIZE):
        print(" ".join(str(int(board[row, col].piece.type)) for col in range(BOARD_SIZE)))


def _open_window(size: tuple[int, int]) -> pygame.Surface:
    width = max(size[0], MIN_WINDOW_SIZE[0])
    height = max(size[1], MIN_WINDOW_SIZE[1])
    return pygame.display.set_mode((width, height), pygame.RESIZABLE)


def main(argv: list[str] | None = None) -> int:
    """Open the window, show the position and save it as FEN; return the exit status."""
    args = _parse_args(argv)
    theme = ColorTheme[args.theme.upper()]
    assets = Path(args.assets)

    board = Board()
    board.reset()
    read_fen(board, args.fen)
    if args.debug:
        _print_board(board)

    Path(args.save).write_text(save_fen(board))

    pygame.display.init()
    pygame.font.init()
    try:
        try:
            pygame.display.set_icon(pygame.image.load(str(assets / "icon.png")))
        except (pygame.error, FileNotFoundError, OSError):
            log.warning("Failed to load window icon from %s", assets / "icon.png")
        pygame.display.set_caption("Chess")
        screen = _open_window(WINDOW_SIZE)
        textures = PieceTextures(assets)
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    if event.w < MIN_WINDOW_SIZE[0] or event.h < MIN_WINDOW_SIZE[1]:
                        screen = _open_window((event.w, event.h))
                    else:
                        screen = pygame.display.get_surface()
            screen.fill(BACKGROUND)
            draw_board(screen, board, theme, textures)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        board.clear()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())