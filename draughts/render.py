"""
Read-only board snapshots and their text rendering.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from config import DisplaySettings, get_display_settings
from draughts.position import Position
from draughts.types import Coordinate, LegalMoveSet, Side

# Signed piece codes: positive = SECOND, negative = FIRST, magnitude 2 = king.
EMPTY: int = 0
MAN: int = 1
KING: int = 2

_SIGN: Dict[Side, int] = {Side.SECOND: 1, Side.FIRST: -1}

_LETTERS: Dict[int, str] = {0: " ", -1: "r", -2: "R", 1: "b", 2: "B"}
_GLYPHS: Dict[int, str] = {0: " ", -1: "●", -2: "♛", 1: "◉", 2: "♕"}


def piece_code(side: Side, crowned: bool) -> int:
    return _SIGN[side] * (KING if crowned else MAN)


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """Immutable view of a position: an int8 grid indexed [y, x]."""

    grid: np.ndarray

    @classmethod
    def from_position(cls, position: Position) -> BoardSnapshot:
        grid = np.zeros((position.board_size, position.board_size), dtype=np.int8)
        for piece in position:
            grid[piece.coordinate.y, piece.coordinate.x] = piece_code(piece.side, piece.crowned)
        grid.setflags(write=False)
        return cls(grid)

    @property
    def board_size(self) -> int:
        return int(self.grid.shape[0])

    def code_at(self, coordinate: Coordinate) -> int:
        return int(self.grid[coordinate.y, coordinate.x])

    def counts(self) -> Tuple[int, int, int, int]:
        """(first_men, second_men, first_kings, second_kings)"""
        g = self.grid
        return (int(np.sum(g == -MAN)), int(np.sum(g == MAN)),
                int(np.sum(g == -KING)), int(np.sum(g == KING)))

    def rows(self) -> List[List[int]]:
        return self.grid.tolist()


def render_text(snapshot: BoardSnapshot, settings: Optional[DisplaySettings] = None) -> str:
    """Render a snapshot as text, one line per row, y = 0 at the top.

    FIRST pieces are 'r', SECOND pieces 'b'; kings are upper-case.
    """
    settings = settings if settings is not None else get_display_settings()
    symbols = _GLYPHS if settings.use_unicode else _LETTERS
    size = snapshot.board_size
    width = len(str(size - 1))

    lines: List[str] = []
    if settings.show_indices:
        cell = "|{}|" if settings.show_borders else "{}"
        header = "".join(cell.format(str(x)[-1]) for x in range(size))
        lines.append(" " * (width + 1) + header)
    for y, row in enumerate(snapshot.rows()):
        cells = [symbols[code] for code in row]
        body = "".join(f"|{c}|" for c in cells) if settings.show_borders else "".join(cells)
        if settings.show_indices:
            body = f"{y:>{width}} {body}"
        lines.append(body)
    return "\n".join(lines)


def format_legal_moves(moves: LegalMoveSet) -> str:
    """One line per piece: '(x, y) -> (x, y), (x, y), '."""
    lines: List[str] = []
    for piece in sorted(moves, key=lambda p: p.coordinate):
        targets = "".join(f"({dest}), " for dest in moves[piece])
        lines.append(f"({piece.coordinate}) -> {targets}".rstrip())
    return "\n".join(lines)
