"""
Structured move requests and turn results exchanged with the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from draughts.types import Coordinate, Piece


@dataclass(frozen=True)
class SimpleMove:
    start: Coordinate
    destination: Coordinate


@dataclass(frozen=True)
class CaptureSequence:
    """One or more jumps by the piece on `start`, executed in order."""

    start: Coordinate
    destinations: Tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of coordinates but store an immutable tuple.
        object.__setattr__(self, 'destinations', tuple(self.destinations))
        if not self.destinations:
            raise ValueError("CaptureSequence needs at least one destination")


@dataclass(frozen=True)
class Skip:
    """Explicit pass for the side to move."""


MoveRequest = Union[SimpleMove, CaptureSequence, Skip]


class ErrorKind(Enum):
    INVALID_START = "invalid_start"
    ILLEGAL_DESTINATION = "illegal_destination"
    MALFORMED_REQUEST = "malformed_request"
    GAME_COMPLETE = "game_complete"
    CAPTURE_REQUIRED = "capture_required"
    SKIP_DISABLED = "skip_disabled"


@dataclass
class TurnResult:
    """Outcome of one submitted request.

    `success` is True for a capture sequence as soon as one jump executed;
    `stopped_early` then tells whether some requested destinations were not
    played and `remaining` lists them.
    """

    success: bool
    error: Optional[ErrorKind] = None
    message: str = ""
    piece: Optional[Piece] = None
    path: List[Coordinate] = field(default_factory=list)
    captured: List[Piece] = field(default_factory=list)
    crowned: bool = False
    stopped_early: bool = False
    remaining: List[Coordinate] = field(default_factory=list)
    game_complete: bool = False

    @classmethod
    def failure(cls, error: ErrorKind, message: str, piece: Optional[Piece] = None) -> TurnResult:
        return cls(success=False, error=error, message=message, piece=piece)

    def __bool__(self) -> bool:
        return self.success
