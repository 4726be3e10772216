"""
Core value types for the draughts engine.

- Coordinate: an (x, y) square, compared and ordered by value
- Side: the two players and their direction of travel
- Piece: a man or king with a stable identity independent of its square
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


@dataclass(frozen=True, order=True)
class Coordinate:
    """A square on the board, 0-indexed from the top-left corner."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    def in_bounds(self, board_size: int) -> bool:
        return 0 <= self.x < board_size and 0 <= self.y < board_size

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


class Side(Enum):
    """FIRST advances toward y == 0, SECOND toward y == board_size - 1."""

    FIRST = "first"
    SECOND = "second"

    @property
    def opponent(self) -> Side:
        return Side.SECOND if self is Side.FIRST else Side.FIRST

    @property
    def forward(self) -> int:
        """The y step of a non-crowned piece of this side."""
        return -1 if self is Side.FIRST else 1

    def back_rank(self, board_size: int) -> int:
        """The row on which a piece of this side is crowned."""
        return 0 if self is Side.FIRST else board_size - 1


_piece_ids = itertools.count(1)


@dataclass(eq=False)
class Piece:
    """
    A single draughtsman.

    Equality and hashing are by identity: two pieces are the same piece only
    if they are the same object, so a piece keeps its identity while its
    coordinate changes.
    """

    coordinate: Coordinate
    side: Side
    crowned: bool = False
    piece_id: int = field(default_factory=lambda: next(_piece_ids))

    def crown(self) -> None:
        """Promote the piece to a king. Kings are never demoted."""
        self.crowned = True

    def __repr__(self) -> str:
        kind = "king" if self.crowned else "man"
        return f"Piece(#{self.piece_id} {self.side.name} {kind} at ({self.coordinate}))"


# Legal destinations per piece; every piece of the queried side is a key.
LegalMoveSet = Dict[Piece, List[Coordinate]]
Direction = Tuple[int, int]
