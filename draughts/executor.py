"""
Turn execution: applies a validated simple move or capture sequence to a position.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List

from draughts.moves import MoveValidator, midpoint, should_crown
from draughts.position import Position
from draughts.requests import ErrorKind, TurnResult
from draughts.types import Coordinate, Piece

logger = logging.getLogger(__name__)


class TurnPhase(Enum):
    AWAITING_ACTION = "awaiting_action"
    AWAITING_FURTHER_CAPTURE = "awaiting_further_capture"
    TURN_COMPLETE = "turn_complete"


class TurnExecutor:
    """State machine for a single turn.

    AWAITING_ACTION -> TURN_COMPLETE on a simple move or skip.
    AWAITING_ACTION -> AWAITING_FURTHER_CAPTURE on the first capture, which
    stays there while further captures execute and moves to TURN_COMPLETE
    once the requested captures are used up, one is illegal, or the game
    ends. A rejected first action leaves the phase at AWAITING_ACTION and
    the position untouched.
    """

    def __init__(self, position: Position, game_complete: bool = False) -> None:
        self.position = position
        self.game_complete = game_complete
        self.phase = TurnPhase.AWAITING_ACTION

    def _require_awaiting(self) -> None:
        if self.phase is not TurnPhase.AWAITING_ACTION:
            raise RuntimeError(f"turn already started (phase={self.phase.value})")

    def _crown_if_eligible(self, piece: Piece) -> bool:
        if not piece.crowned and should_crown(piece, self.position.board_size):
            piece.crown()
            return True
        return False

    def skip(self) -> TurnResult:
        self._require_awaiting()
        self.phase = TurnPhase.TURN_COMPLETE
        return TurnResult(success=True, message="turn skipped")

    def execute_simple_move(self, piece: Piece, destination: Coordinate) -> TurnResult:
        """Move `piece` one square diagonally. A simple move never chains or ends the game."""
        self._require_awaiting()
        if not MoveValidator.validate_simple_move(self.position, piece, destination):
            logger.debug("rejected simple move %r -> (%s)", piece, destination)
            return TurnResult.failure(
                ErrorKind.ILLEGAL_DESTINATION,
                f"({destination}) is not a legal move for the piece at ({piece.coordinate})",
                piece,
            )

        start = piece.coordinate
        self.position.move_piece(piece, destination)
        crowned = self._crown_if_eligible(piece)
        self.phase = TurnPhase.TURN_COMPLETE
        logger.debug("moved %s piece (%s) -> (%s)%s", piece.side.name, start, destination,
                     " and crowned it" if crowned else "")
        return TurnResult(success=True, piece=piece, path=[start, destination], crowned=crowned)

    def _capture_once(self, piece: Piece, destination: Coordinate) -> Piece:
        jumped_square = midpoint(piece.coordinate, destination)
        jumped = self.position.piece_at(jumped_square)
        if jumped is None or jumped.side is piece.side:
            raise RuntimeError(f"no opposing piece on ({jumped_square}) to capture")
        self.position.remove(jumped)
        self.position.move_piece(piece, destination)
        return jumped

    def execute_capture_sequence(self, piece: Piece, destinations: Iterable[Coordinate]) -> TurnResult:
        """Jump through `destinations` in order.

        Each jump is validated against the position as it stands after the
        previous one. The first illegal jump stops the sequence without
        undoing earlier captures, and the sequence also stops as soon as the
        opposing side has no pieces left. The result is a success when at
        least one capture executed.
        """
        self._require_awaiting()
        requested: List[Coordinate] = list(destinations)
        if not requested:
            return TurnResult.failure(ErrorKind.MALFORMED_REQUEST, "no capture destinations given", piece)
        result = TurnResult(success=False, piece=piece, path=[piece.coordinate])

        for index, destination in enumerate(requested):
            if self.game_complete:
                result.remaining = requested[index:]
                break
            if not MoveValidator.validate_next_capture(self.position, piece, destination):
                logger.debug("rejected capture %r -> (%s)", piece, destination)
                result.remaining = requested[index:]
                break

            jumped = self._capture_once(piece, destination)
            self.phase = TurnPhase.AWAITING_FURTHER_CAPTURE
            result.captured.append(jumped)
            result.path.append(destination)
            if self._crown_if_eligible(piece):
                result.crowned = True
            logger.debug("%s piece captured (%s) landing on (%s)",
                         piece.side.name, jumped.coordinate, destination)

            if not self.position.has_pieces(jumped.side):
                self.game_complete = True
                logger.info("%s has no pieces left; game complete", jumped.side.name)

        result.success = bool(result.captured)
        result.stopped_early = bool(result.remaining)
        result.game_complete = self.game_complete
        if not result.success:
            first = requested[0]
            if self.game_complete:
                result.error = ErrorKind.GAME_COMPLETE
                result.message = "the game is already complete"
            else:
                result.error = ErrorKind.ILLEGAL_DESTINATION
                result.message = f"({first}) is not a legal capture for the piece at ({piece.coordinate})"
            return result

        self.phase = TurnPhase.TURN_COMPLETE
        return result
