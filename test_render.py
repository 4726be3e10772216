import numpy as np
import pytest

from config import DisplaySettings
from draughts import (
    BoardSnapshot,
    Coordinate,
    GameSession,
    Position,
    Side,
    format_legal_moves,
    legal_actions,
    render_text,
)

FIRST, SECOND = Side.FIRST, Side.SECOND


def test_snapshot_codes():
    pos = Position.from_layout(4, [(0, 0, SECOND, False), (1, 1, SECOND, True),
                                   (2, 2, FIRST, True), (3, 3, FIRST, False)])
    snap = BoardSnapshot.from_position(pos)
    assert snap.board_size == 4
    assert snap.grid.dtype == np.int8
    assert snap.code_at(Coordinate(0, 0)) == 1
    assert snap.code_at(Coordinate(1, 1)) == 2
    assert snap.code_at(Coordinate(2, 2)) == -2
    assert snap.code_at(Coordinate(3, 3)) == -1
    assert snap.code_at(Coordinate(3, 0)) == 0
    assert snap.counts() == (1, 1, 1, 1)


def test_snapshot_is_read_only_and_detached():
    game = GameSession.new_standard_game(8)
    snap = game.render_snapshot()
    with pytest.raises(ValueError):
        snap.grid[0, 0] = 5

    piece = game.get_piece_at(Coordinate(1, 5))
    game.position.move_piece(piece, Coordinate(0, 4))
    assert snap.code_at(Coordinate(1, 5)) == -1
    assert snap.code_at(Coordinate(0, 4)) == 0


def test_render_text_letters_with_borders():
    snap = BoardSnapshot.from_position(Position.standard(4))
    text = render_text(snap, DisplaySettings(show_indices=False))
    assert text.splitlines() == [
        "|b|| ||b|| |",
        "| || || || |",
        "| || || || |",
        "| ||r|| ||r|",
    ]


def test_render_text_kings_are_upper_case():
    pos = Position.from_layout(4, [(1, 0, FIRST, True), (2, 3, SECOND, True)])
    text = render_text(BoardSnapshot.from_position(pos), DisplaySettings(show_indices=False, show_borders=False))
    assert text.splitlines() == [" R  ", "    ", "    ", "  B "]


def test_render_text_with_indices_and_unicode():
    snap = BoardSnapshot.from_position(Position.standard(4))
    lines = render_text(snap, DisplaySettings(use_unicode=True, show_borders=False)).splitlines()
    assert lines[0] == "  0123"
    assert lines[1] == "0 ◉ ◉ "
    assert lines[4] == "3  ● ●"


def test_format_legal_moves():
    pos = Position.from_layout(8, [(2, 5, FIRST, False), (0, 7, FIRST, False), (1, 6, SECOND, False)])
    text = format_legal_moves(legal_actions(pos, FIRST))
    assert text.splitlines() == [
        "(0, 7) ->",
        "(2, 5) -> (3, 4), (1, 4),",
    ]
