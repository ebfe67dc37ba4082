"""Tests for BoardSession — the lock-guarded shared board."""

import threading

from chessgrid.core.board import Board
from chessgrid.core.enums import MoveStatus, PieceKind
from chessgrid.core.notation import board_from_placement
from chessgrid.session.board_session import BoardSession


class TestSnapshots:
    def test_repeated_reads_identical(self) -> None:
        session = BoardSession()
        assert session.get_board() == session.get_board()

    def test_snapshot_is_a_copy(self) -> None:
        session = BoardSession()
        snapshot = session.get_board()
        snapshot.clear_square(7, 4)
        snapshot.turn = 9
        assert session.get_board() == Board.initial()

    def test_reset(self) -> None:
        session = BoardSession()
        session.make_move(session.get_moves(6, 4), (6, 4), (4, 4))
        assert session.reset() == Board.initial()
        assert session.get_board().turn == 0

    def test_reset_to_custom_board(self) -> None:
        session = BoardSession()
        custom = board_from_placement("4k3/8/8/8/8/8/8/4K3")
        session.reset(custom)
        custom.turn = 5
        assert session.get_board().turn == 0


class TestMoves:
    def test_get_moves(self) -> None:
        session = BoardSession()
        assert set(session.get_moves(7, 1)) == {(5, 0), (5, 2)}

    def test_accepted_move(self) -> None:
        session = BoardSession()
        reply = session.make_move(session.get_moves(6, 4), (6, 4), (4, 4))
        assert reply.accepted
        assert reply.status == MoveStatus.OK
        assert reply.board.turn == 1
        assert reply.board[4, 4].kind == PieceKind.PAWN

    def test_rejected_move_surfaces_status(self) -> None:
        session = BoardSession()
        reply = session.make_move(session.get_moves(1, 4), (1, 4), (3, 4))
        assert not reply.accepted
        assert reply.status == MoveStatus.WRONG_TURN
        assert reply.board == Board.initial()

    def test_stale_moves_rejected(self) -> None:
        session = BoardSession()
        stale = session.get_moves(6, 4)
        assert (4, 4) in stale
        for from_coord, to_coord in [
            ((7, 1), (5, 2)),  # Nc3
            ((1, 4), (3, 4)),  # e5
            ((5, 2), (4, 4)),  # Ne4
            ((1, 0), (2, 0)),  # a6
        ]:
            assert session.make_move(None, from_coord, to_coord).accepted
        # The knight on e4 now blocks the double step the stale set allowed.
        reply = session.make_move(stale, (6, 4), (4, 4))
        assert reply.status == MoveStatus.ILLEGAL_DESTINATION
        assert reply.board[4, 4].kind == PieceKind.KNIGHT

    def test_locked_spans_query_and_apply(self) -> None:
        session = BoardSession()
        with session.locked() as s:
            moves = s.get_moves(6, 4)
            reply = s.make_move(moves, (6, 4), (4, 4))
        assert reply.accepted


class TestConcurrency:
    def test_only_one_racer_moves(self) -> None:
        session = BoardSession()
        moves = session.get_moves(6, 4)
        barrier = threading.Barrier(8)
        results: list[bool] = []
        results_lock = threading.Lock()

        def racer() -> None:
            barrier.wait()
            reply = session.make_move(moves, (6, 4), (4, 4))
            with results_lock:
                results.append(reply.accepted)

        threads = [threading.Thread(target=racer) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 1
        assert session.get_board().turn == 1
