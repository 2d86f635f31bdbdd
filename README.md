# chessboard

A small chess board viewer. It opens a resizable window, sets up a position
from the piece-placement field of a FEN string, and draws the board with rank
numbers on the left and file letters below it. On start-up it also writes the
placement back out as FEN.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
chessboard
```

This opens a 1280x720 window titled "Chess" that shows the starting position
in the brown theme. Close the window to quit. Before the window opens, the
placement is written to `example.fen` in the current directory.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--fen TEXT` | the starting position | piece placement to show |
| `--theme NAME` | `brown` | one of `brown`, `green`, `orange`, `purple`, `red`, `sky` |
| `--assets DIR` | `assets` | directory that holds the images |
| `--save FILE` | `example.fen` | file the placement is written to |
| `--frames N` | none | close after N frames |
| `--debug` | off | print the piece type number of every square, rank by rank |

For example:

```
chessboard --fen "4k3/8/8/8/8/8/8/4K3" --theme green --save position.fen
```

Piece images are read from `<assets>/pieces/<piece><W|B>.png`; for example,
`assets/pieces/kingW.png` is the white king. An image that is missing or is
not square is logged as a warning and that piece is not drawn. The window
icon is read from `<assets>/icon.png` if it is there. If the window is
resized below 480x480 it is enlarged back to at least that size.

## Using the library

```python
from chessboard.board import Board, PieceType, Team
from chessboard.fen import read_fen, save_fen

board = Board()
read_fen(board, "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
print(save_fen(board))   # rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR

board.clear()
board.place(0, 4, PieceType.KING, Team.BLACK)
print(save_fen(board))   # 4k3/8/8/8/8/8/8/8
```

Row 0 is the top rank (rank 8) and column 0 is the a-file. `board[row, col]`
returns a `Cell`, whose `piece` holds its `type` and `team`; `board.cells()`
yields every cell rank by rank from the top. Indexing or placing off the
board raises `IndexError`.

`read_fen` skips characters it does not understand. `save_fen` raises
`FenError` (a `ValueError`) if a square holds something that is not a piece.

Other modules:

- `chessboard.layout`: `compute_layout(width, height)` returns a `Layout`
  giving the square size, the position of each square and of each label for
  a window of that size. `compute_square_length(width, height)` returns the
  square size alone.
- `chessboard.colors`: the themes are the members of `ColorTheme`, and
  `theme_colors(theme)` returns a `ColorPair` of the light and dark square
  colours.
- `chessboard.render`: `draw_board(surface, board, theme, textures)` draws
  onto a pygame surface; `PieceTextures(root)` loads piece images on first use
  and `piece_asset_path(piece_type, team, root)` gives an image's path.

## What it does not do

This is a viewer only. Pieces cannot be moved in the window, and there are no
chess rules: no move checking, check or checkmate detection, castling or en
passant. Only the piece-placement field of FEN is read and written; side to
move, castling rights, the en-passant square and the move counters are
neither read nor saved.