import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from chessboard.app import STANDARD_GAME, main


def _run(tmp_path, *extra):
    save = tmp_path / "out.fen"
    status = main(["--frames", "1", "--assets", str(tmp_path), "--save", str(save), *extra])
    return status, save


def test_default_game_saved(tmp_path):
    status, save = _run(tmp_path)
    assert status == 0
    assert save.read_text() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    assert save.read_text() == STANDARD_GAME


@pytest.mark.parametrize("fen", ["8/8/8/4k3/8/8/8/4K3", "r3k2r/8/8/8/8/8/8/R3K2R"])
def test_custom_position_round_trips(tmp_path, fen):
    status, save = _run(tmp_path, "--fen", fen, "--theme", "sky")
    assert status == 0
    assert save.read_text() == fen


def test_debug_prints_grid(tmp_path, capsys):
    _run(tmp_path, "--debug")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert all(len(line.split()) == 8 for line in lines)
    assert lines[3].split() == ["0"] * 8
    assert lines[0].split() == list(reversed(lines[0].split()))[::-1]
    assert lines[1].split() == lines[6].split()


def test_unknown_theme_rejected(tmp_path):
    with pytest.raises(SystemExit):
        _run(tmp_path, "--theme", "plaid")