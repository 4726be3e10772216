"""
Board position: the set of pieces on an N x N board.
"""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from draughts.types import Coordinate, Piece, Side

MIN_BOARD_SIZE: int = 4


class PositionError(ValueError):
    """Raised when a position would break its placement invariants."""


class Position:
    """Pieces on the board plus the board size.

    Invariants: every piece lies inside [0, board_size) on both axes and no
    two pieces share a coordinate. The coordinate -> piece lookup is rebuilt
    from the piece list on every call to `occupancy`.
    """

    def __init__(self, board_size: int = 8, pieces: Optional[Iterable[Piece]] = None) -> None:
        if board_size < MIN_BOARD_SIZE:
            raise PositionError(f"board_size must be at least {MIN_BOARD_SIZE}, got {board_size}")
        self.board_size: int = board_size
        self.pieces: List[Piece] = []
        for piece in pieces or ():
            self.add(piece)

    # -------------------------
    # Construction
    # -------------------------
    @classmethod
    def standard(cls, board_size: int = 8) -> Position:
        """Standard setup: SECOND on the low-y rows, FIRST on the high-y rows.

        Each side gets (board_size - 2) // 2 rows, leaving a two-row empty
        band in the middle. On row y pieces start at x = y % 2 and sit on
        every other square.
        """
        if board_size % 2:
            raise PositionError(f"standard setup needs an even board_size, got {board_size}")
        position = cls(board_size)
        rows_per_side = (board_size - 2) // 2
        for y in range(board_size):
            if rows_per_side <= y < board_size - rows_per_side:
                continue
            side = Side.SECOND if y < rows_per_side else Side.FIRST
            for x in range(y % 2, board_size, 2):
                position.place(Coordinate(x, y), side)
        return position

    @classmethod
    def from_layout(cls, board_size: int,
                    layout: Iterable[Tuple[int, int, Side, bool]]) -> Position:
        """Build a custom position from (x, y, side, crowned) tuples."""
        position = cls(board_size)
        for x, y, side, crowned in layout:
            position.place(Coordinate(x, y), side, crowned=crowned)
        return position

    def add(self, piece: Piece) -> Piece:
        if not piece.coordinate.in_bounds(self.board_size):
            raise PositionError(f"({piece.coordinate}) is outside a {self.board_size}x{self.board_size} board")
        if self.piece_at(piece.coordinate) is not None:
            raise PositionError(f"({piece.coordinate}) is already occupied")
        self.pieces.append(piece)
        return piece

    def place(self, coordinate: Coordinate, side: Side, crowned: bool = False) -> Piece:
        return self.add(Piece(coordinate, side, crowned=crowned))

    # -------------------------
    # Queries
    # -------------------------
    def occupancy(self) -> Dict[Coordinate, Piece]:
        """Fresh coordinate -> piece mapping."""
        return {piece.coordinate: piece for piece in self.pieces}

    def piece_at(self, coordinate: Coordinate) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.coordinate == coordinate:
                return piece
        return None

    def pieces_of(self, side: Side) -> List[Piece]:
        return [piece for piece in self.pieces if piece.side is side]

    def has_pieces(self, side: Side) -> bool:
        return any(piece.side is side for piece in self.pieces)

    def in_bounds(self, coordinate: Coordinate) -> bool:
        return coordinate.in_bounds(self.board_size)

    def __contains__(self, piece: object) -> bool:
        return any(piece is p for p in self.pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)

    # -------------------------
    # Mutation (turn executor only)
    # -------------------------
    def move_piece(self, piece: Piece, destination: Coordinate) -> None:
        piece.coordinate = destination

    def remove(self, piece: Piece) -> None:
        self.pieces = [p for p in self.pieces if p is not piece]

    def __repr__(self) -> str:
        return f"Position(board_size={self.board_size}, pieces={len(self.pieces)})"
