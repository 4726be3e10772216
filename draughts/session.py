"""
Game session: owns the position, the side to move and the completion flag.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from config import RulesSettings, get_rules_settings
from draughts.executor import TurnExecutor
from draughts.moves import MoveGenerator
from draughts.position import Position
from draughts.render import BoardSnapshot
from draughts.requests import CaptureSequence, ErrorKind, MoveRequest, SimpleMove, Skip, TurnResult
from draughts.types import Coordinate, LegalMoveSet, Piece, Side

logger = logging.getLogger(__name__)


class GameSession:
    """A single game of draughts.

    The session never changes the side to move on its own: after a
    successful action the caller decides whether to call `advance_turn`.
    """

    def __init__(self, position: Position, side_to_move: Side = Side.FIRST,
                 rules: Optional[RulesSettings] = None) -> None:
        self.position = position
        self.side_to_move = side_to_move
        self.rules = rules if rules is not None else get_rules_settings()
        self.complete = False
        self.last_action: Optional[TurnResult] = None

    @classmethod
    def new_standard_game(cls, board_size: Optional[int] = None, first_to_move: Side = Side.FIRST,
                          rules: Optional[RulesSettings] = None) -> GameSession:
        """Start a game from the standard setup. `board_size` defaults to the configured size."""
        rules = rules if rules is not None else get_rules_settings()
        size = board_size if board_size is not None else rules.board_size
        return cls(Position.standard(size), first_to_move, rules)

    @classmethod
    def from_position(cls, position: Position, side_to_move: Side = Side.FIRST,
                      rules: Optional[RulesSettings] = None) -> GameSession:
        """Start a game from a custom position."""
        return cls(position, side_to_move, rules)

    # -------------------------
    # Queries
    # -------------------------
    @property
    def board_size(self) -> int:
        return self.position.board_size

    def get_piece_at(self, coordinate: Coordinate) -> Optional[Piece]:
        return self.position.piece_at(coordinate)

    def is_complete(self) -> bool:
        return self.complete

    @property
    def winner(self) -> Optional[Side]:
        """The side with pieces left once the game is complete, else None."""
        if not self.complete:
            return None
        for side in Side:
            if self.position.has_pieces(side):
                return side
        return None

    def legal_moves(self, side: Optional[Side] = None) -> LegalMoveSet:
        return MoveGenerator(self.position).legal_actions(side or self.side_to_move, capture=False)

    def legal_captures(self, side: Optional[Side] = None) -> LegalMoveSet:
        return MoveGenerator(self.position).legal_actions(side or self.side_to_move, capture=True)

    def piece_counts(self) -> Tuple[int, int, int, int]:
        """(first_men, second_men, first_kings, second_kings)"""
        return self.render_snapshot().counts()

    def render_snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_position(self.position)

    def advance_turn(self) -> Side:
        self.side_to_move = self.side_to_move.opponent
        return self.side_to_move

    # -------------------------
    # Actions
    # -------------------------
    def submit(self, request: MoveRequest) -> TurnResult:
        """Validate and execute one request for the side to move."""
        result = self._dispatch(request)
        if result.success:
            self.last_action = result
        else:
            logger.debug("%s request rejected: %s", self.side_to_move.name, result.message)
        return result

    def _dispatch(self, request: MoveRequest) -> TurnResult:
        if self.complete:
            return TurnResult.failure(ErrorKind.GAME_COMPLETE, "the game is already complete")

        if isinstance(request, Skip):
            if not self.rules.allow_skip:
                return TurnResult.failure(ErrorKind.SKIP_DISABLED, "skipping a turn is not allowed")
            if self._capture_required(self.side_to_move):
                return TurnResult.failure(ErrorKind.CAPTURE_REQUIRED, "a capture is available and must be taken")
            logger.debug("%s skips the turn", self.side_to_move.name)
            return TurnExecutor(self.position, self.complete).skip()

        if not isinstance(request, (SimpleMove, CaptureSequence)):
            return TurnResult.failure(ErrorKind.MALFORMED_REQUEST, f"cannot interpret request {request!r}")

        targets = [request.destination] if isinstance(request, SimpleMove) else list(request.destinations)
        for coordinate in [request.start, *targets]:
            if not self._is_square(coordinate):
                return TurnResult.failure(ErrorKind.MALFORMED_REQUEST, f"{coordinate!r} is not a square on this board")

        piece = self.position.piece_at(request.start)
        if piece is None:
            return TurnResult.failure(ErrorKind.INVALID_START, f"no piece at ({request.start})")
        if self.rules.enforce_side_to_move and piece.side is not self.side_to_move:
            return TurnResult.failure(
                ErrorKind.INVALID_START,
                f"the piece at ({request.start}) belongs to {piece.side.name}, not {self.side_to_move.name}",
                piece,
            )

        executor = TurnExecutor(self.position, self.complete)
        if isinstance(request, SimpleMove):
            if self._capture_required(piece.side):
                return TurnResult.failure(ErrorKind.CAPTURE_REQUIRED, "a capture is available and must be taken", piece)
            return executor.execute_simple_move(piece, request.destination)

        result = executor.execute_capture_sequence(piece, request.destinations)
        self.complete = executor.game_complete
        return result

    def _is_square(self, coordinate: object) -> bool:
        # Exact int check so bools, floats and strings are refused before any comparison.
        return (isinstance(coordinate, Coordinate)
                and type(coordinate.x) is int and type(coordinate.y) is int
                and self.position.in_bounds(coordinate))

    def _capture_required(self, side: Side) -> bool:
        return self.rules.captures_mandatory and MoveGenerator(self.position).has_any_capture(side)

    def __repr__(self) -> str:
        return (f"GameSession(board_size={self.board_size}, side_to_move={self.side_to_move.name}, "
                f"complete={self.complete})")
