"""Draughts package: rules engine for English draughts.

Usage examples:
    from draughts import GameSession, SimpleMove, CaptureSequence, Coordinate
    game = GameSession.new_standard_game()
    game.submit(SimpleMove(Coordinate(1, 5), Coordinate(0, 4)))
"""
from __future__ import annotations

from .types import Coordinate, Side, Piece, LegalMoveSet
from .position import Position, PositionError
from .requests import (
    SimpleMove,
    CaptureSequence,
    Skip,
    MoveRequest,
    TurnResult,
    ErrorKind,
)
from .moves import (
    MoveGenerator,
    MoveValidator,
    directions,
    midpoint,
    legal_actions,
    all_legal_actions,
    has_any_capture,
    validate_simple_move,
    validate_next_capture,
)
from .executor import TurnExecutor, TurnPhase
from .render import BoardSnapshot, render_text, format_legal_moves
from .session import GameSession

__all__ = [
    # Types
    "Coordinate",
    "Side",
    "Piece",
    "LegalMoveSet",
    "Position",
    "PositionError",

    # Requests and results
    "SimpleMove",
    "CaptureSequence",
    "Skip",
    "MoveRequest",
    "TurnResult",
    "ErrorKind",

    # Move generation and validation
    "MoveGenerator",
    "MoveValidator",
    "directions",
    "midpoint",
    "legal_actions",
    "all_legal_actions",
    "has_any_capture",
    "validate_simple_move",
    "validate_next_capture",

    # Turn execution and session
    "TurnExecutor",
    "TurnPhase",
    "GameSession",

    # Display
    "BoardSnapshot",
    "render_text",
    "format_legal_moves",
]
