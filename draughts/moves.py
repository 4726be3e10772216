from __future__ import annotations

from typing import Dict, List, Optional

from draughts.position import Position
from draughts.types import Coordinate, Direction, LegalMoveSet, Piece, Side

# -----------------------------
# Direction and geometry helpers
# -----------------------------
_DIRS: List[Direction] = [(1, -1), (-1, -1), (1, 1), (-1, 1)]

SIMPLE_STEP: int = 1
CAPTURE_STEP: int = 2


def directions(side: Side, crowned: bool) -> List[Direction]:
    """Diagonal unit steps available to a piece: all four for kings, the two forward ones otherwise."""
    if crowned:
        return list(_DIRS)
    dy = side.forward
    return [(1, dy), (-1, dy)]


def midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    """Square jumped over when moving from start to end."""
    return Coordinate((start.x + end.x) // 2, (start.y + end.y) // 2)


def should_crown(piece: Piece, board_size: int) -> bool:
    return piece.coordinate.y == piece.side.back_rank(board_size)


class MoveGenerator:
    """Generates legal simple-move and capture destinations for one side.

    Generation is read-only: it builds one occupancy snapshot per call and
    never touches the position's pieces.
    """

    def __init__(self, position: Position) -> None:
        self.position = position

    def candidates(self, piece: Piece, capture: bool) -> List[Coordinate]:
        step = CAPTURE_STEP if capture else SIMPLE_STEP
        return [piece.coordinate.offset(dx * step, dy * step)
                for dx, dy in directions(piece.side, piece.crowned)]

    def _is_valid_move(self, target: Coordinate, occupied: Dict[Coordinate, Piece]) -> bool:
        return self.position.in_bounds(target) and target not in occupied

    def _is_valid_capture(self, piece: Piece, target: Coordinate,
                          occupied: Dict[Coordinate, Piece]) -> bool:
        if not self._is_valid_move(target, occupied):
            return False
        jumped: Optional[Piece] = occupied.get(midpoint(piece.coordinate, target))
        return jumped is not None and jumped.side is not piece.side

    def destinations(self, piece: Piece, capture: bool,
                     occupied: Optional[Dict[Coordinate, Piece]] = None) -> List[Coordinate]:
        if occupied is None:
            occupied = self.position.occupancy()
        if capture:
            return [t for t in self.candidates(piece, True) if self._is_valid_capture(piece, t, occupied)]
        return [t for t in self.candidates(piece, False) if self._is_valid_move(t, occupied)]

    def legal_actions(self, side: Side, capture: bool) -> LegalMoveSet:
        occupied = self.position.occupancy()
        return {piece: self.destinations(piece, capture, occupied)
                for piece in self.position.pieces_of(side)}

    def all_legal_actions(self, capture: bool) -> LegalMoveSet:
        occupied = self.position.occupancy()
        return {piece: self.destinations(piece, capture, occupied) for piece in self.position}

    def has_any_capture(self, side: Side) -> bool:
        return any(self.legal_actions(side, capture=True).values())


class MoveValidator:
    """Validates a destination against a freshly generated legal set."""

    @staticmethod
    def _is_member(position: Position, piece: Piece, destination: Coordinate, capture: bool) -> bool:
        legal = MoveGenerator(position).legal_actions(piece.side, capture)
        return destination in legal.get(piece, [])

    @staticmethod
    def validate_simple_move(position: Position, piece: Piece, destination: Coordinate) -> bool:
        return MoveValidator._is_member(position, piece, destination, capture=False)

    @staticmethod
    def validate_next_capture(position: Position, piece: Piece, destination: Coordinate) -> bool:
        return MoveValidator._is_member(position, piece, destination, capture=True)


# Convenience functional API

def legal_actions(position: Position, side: Side, capture: bool = False) -> LegalMoveSet:
    return MoveGenerator(position).legal_actions(side, capture)


def all_legal_actions(position: Position, capture: bool = False) -> LegalMoveSet:
    return MoveGenerator(position).all_legal_actions(capture)


def has_any_capture(position: Position, side: Side) -> bool:
    return MoveGenerator(position).has_any_capture(side)


def validate_simple_move(position: Position, piece: Piece, destination: Coordinate) -> bool:
    return MoveValidator.validate_simple_move(position, piece, destination)


def validate_next_capture(position: Position, piece: Piece, destination: Coordinate) -> bool:
    return MoveValidator.validate_next_capture(position, piece, destination)
