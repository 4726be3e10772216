import pytest

from draughts import Coordinate, ErrorKind, Position, Side, TurnExecutor, TurnPhase

FIRST, SECOND = Side.FIRST, Side.SECOND


def C(x, y):
    return Coordinate(x, y)


def make_position(*layout, size=8):
    return Position.from_layout(size, [(e[0], e[1], e[2], e[3] if len(e) > 3 else False) for e in layout])


def snapshot(pos):
    return sorted((p.coordinate, p.side, p.crowned) for p in pos)


def test_simple_move_completes_turn():
    pos = make_position((2, 5, FIRST), (6, 1, SECOND))
    piece = pos.piece_at(C(2, 5))
    ex = TurnExecutor(pos)
    assert ex.phase is TurnPhase.AWAITING_ACTION

    result = ex.execute_simple_move(piece, C(1, 4))
    assert result.success
    assert result.path == [C(2, 5), C(1, 4)]
    assert piece.coordinate == C(1, 4)
    assert ex.phase is TurnPhase.TURN_COMPLETE
    assert not ex.game_complete


def test_rejected_simple_move_leaves_position_untouched():
    pos = make_position((2, 5, FIRST), (3, 4, SECOND))
    before = snapshot(pos)
    ex = TurnExecutor(pos)

    result = ex.execute_simple_move(pos.piece_at(C(2, 5)), C(3, 4))
    assert not result.success
    assert result.error is ErrorKind.ILLEGAL_DESTINATION
    assert ex.phase is TurnPhase.AWAITING_ACTION
    assert snapshot(pos) == before


def test_executor_handles_one_action_per_turn():
    pos = make_position((2, 5, FIRST), (6, 1, SECOND))
    ex = TurnExecutor(pos)
    ex.execute_simple_move(pos.piece_at(C(2, 5)), C(1, 4))
    with pytest.raises(RuntimeError):
        ex.execute_simple_move(pos.piece_at(C(1, 4)), C(0, 3))


def test_simple_move_to_back_rank_crowns():
    pos = make_position((3, 1, FIRST), (0, 1, SECOND, True), (6, 6, SECOND))
    piece = pos.piece_at(C(3, 1))
    result = TurnExecutor(pos).execute_simple_move(piece, C(2, 0))
    assert result.success and result.crowned
    assert piece.crowned

    second = pos.piece_at(C(6, 6))
    result = TurnExecutor(pos).execute_simple_move(second, C(7, 7))
    assert result.crowned and second.crowned


def test_crown_is_kept_after_leaving_back_rank():
    pos = make_position((2, 0, FIRST, True), (6, 6, SECOND))
    king = pos.piece_at(C(2, 0))
    assert TurnExecutor(pos).execute_simple_move(king, C(3, 1)).success
    assert king.crowned
    assert not TurnExecutor(pos).execute_simple_move(king, C(3, 1)).crowned
    assert king.crowned


def test_single_capture_removes_jumped_piece():
    pos = make_position((1, 2, SECOND), (2, 3, FIRST), (7, 7, FIRST))
    mover = pos.piece_at(C(1, 2))
    jumped = pos.piece_at(C(2, 3))

    ex = TurnExecutor(pos)
    result = ex.execute_capture_sequence(mover, [C(3, 4)])
    assert result.success
    assert result.captured == [jumped]
    assert jumped not in pos
    assert pos.piece_at(C(2, 3)) is None
    assert mover.coordinate == C(3, 4)
    assert ex.phase is TurnPhase.TURN_COMPLETE
    assert not result.game_complete


def test_partial_capture_sequence_reports_success():
    pos = make_position((0, 6, FIRST), (1, 5, SECOND), (6, 0, SECOND))
    mover = pos.piece_at(C(0, 6))

    result = TurnExecutor(pos).execute_capture_sequence(mover, [C(2, 4), C(4, 2)])
    assert result.success
    assert result.stopped_early
    assert result.remaining == [C(4, 2)]
    assert len(result.captured) == 1
    assert mover.coordinate == C(2, 4)
    assert pos.piece_at(C(6, 0)) is not None


def test_capture_sequence_failing_first_step_is_full_failure():
    pos = make_position((0, 6, FIRST), (1, 5, SECOND), (6, 0, SECOND))
    before = snapshot(pos)
    ex = TurnExecutor(pos)

    result = ex.execute_capture_sequence(pos.piece_at(C(0, 6)), [C(4, 2), C(2, 4)])
    assert not result.success
    assert result.error is ErrorKind.ILLEGAL_DESTINATION
    assert result.captured == []
    assert ex.phase is TurnPhase.AWAITING_ACTION
    assert snapshot(pos) == before


def test_double_capture():
    pos = make_position((0, 6, FIRST), (1, 5, SECOND), (3, 3, SECOND), (7, 1, SECOND))
    mover = pos.piece_at(C(0, 6))
    result = TurnExecutor(pos).execute_capture_sequence(mover, [C(2, 4), C(4, 2)])
    assert result.success and not result.stopped_early
    assert result.path == [C(0, 6), C(2, 4), C(4, 2)]
    assert len(pos.pieces_of(SECOND)) == 1


def test_capture_of_last_piece_completes_game_and_halts_sequence():
    pos = make_position((0, 6, FIRST), (1, 5, SECOND))
    mover = pos.piece_at(C(0, 6))
    ex = TurnExecutor(pos)

    result = ex.execute_capture_sequence(mover, [C(2, 4), C(4, 2)])
    assert result.success
    assert result.game_complete and ex.game_complete
    assert result.stopped_early
    assert result.remaining == [C(4, 2)]
    assert mover.coordinate == C(2, 4)
    assert not pos.has_pieces(SECOND)


def test_capture_to_back_rank_crowns_and_king_keeps_jumping():
    pos = make_position((2, 2, FIRST), (3, 1, SECOND), (5, 1, SECOND))
    mover = pos.piece_at(C(2, 2))

    result = TurnExecutor(pos).execute_capture_sequence(mover, [C(4, 0), C(6, 2)])
    assert result.success and result.crowned
    assert mover.crowned
    assert mover.coordinate == C(6, 2)
    assert result.game_complete


def test_capture_on_completed_game_is_rejected():
    pos = make_position((0, 6, FIRST), (1, 5, SECOND))
    ex = TurnExecutor(pos, game_complete=True)
    result = ex.execute_capture_sequence(pos.piece_at(C(0, 6)), [C(2, 4)])
    assert not result.success
    assert result.error is ErrorKind.GAME_COMPLETE
    assert pos.piece_at(C(1, 5)) is not None


def test_simple_move_never_completes_game():
    pos = make_position((2, 5, FIRST), (6, 1, SECOND))
    ex = TurnExecutor(pos)
    ex.execute_simple_move(pos.piece_at(C(2, 5)), C(3, 4))
    assert not ex.game_complete


def test_skip_mutates_nothing():
    pos = Position.standard(8)
    before = snapshot(pos)
    ex = TurnExecutor(pos)
    assert ex.skip().success
    assert ex.phase is TurnPhase.TURN_COMPLETE
    assert snapshot(pos) == before


def test_capture_without_jumped_piece_raises():
    pos = make_position((0, 6, FIRST), (6, 0, SECOND))
    with pytest.raises(RuntimeError):
        TurnExecutor(pos)._capture_once(pos.piece_at(C(0, 6)), C(2, 4))
    assert pos.piece_at(C(0, 6)) is not None
