"""Tests for move application and turn order."""

import pytest

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, MoveStatus, PieceKind
from chessgrid.core.movement import get_legal_moves
from chessgrid.core.notation import board_from_placement
from chessgrid.core.piece import Piece
from chessgrid.core.rules import make_move, try_move
from chessgrid.core.types import InvalidSquareError


def play(board: Board, from_rank: int, from_file: int, to_rank: int, to_file: int) -> bool:
    legal = get_legal_moves(board, from_rank, from_file)
    return make_move(board, legal, from_rank, from_file, to_rank, to_file)


class TestTurnOrder:
    def test_black_cannot_move_first(self) -> None:
        board = Board.initial()
        before = board.copy()
        legal = get_legal_moves(board, 1, 4)
        assert not make_move(board, legal, 1, 4, 3, 4)
        assert board == before

    def test_wrong_turn_status(self) -> None:
        board = Board.initial()
        outcome = try_move(board, None, 1, 4, 3, 4)
        assert outcome.status == MoveStatus.WRONG_TURN
        assert not outcome.accepted

    def test_alternation(self) -> None:
        board = Board.initial()
        assert play(board, 6, 4, 4, 4)
        assert board.side_to_move == Color.BLACK
        assert not play(board, 6, 3, 4, 3)
        assert play(board, 1, 4, 3, 4)
        assert board.turn == 2

    def test_empty_square_rejected(self) -> None:
        board = Board.initial()
        outcome = try_move(board, [(3, 3)], 4, 4, 3, 3)
        assert outcome.status == MoveStatus.EMPTY_SQUARE
        assert board.turn == 0


class TestApply:
    def test_round_trip_fields(self) -> None:
        board = Board.initial()
        source = board[6, 4]
        assert play(board, 6, 4, 4, 4)
        moved = board[4, 4]
        assert (moved.kind, moved.color) == (source.kind, source.color)
        assert (moved.rank, moved.file) == (4, 4)
        assert board[6, 4] == Piece.empty(6, 4)
        assert board.turn == 1

    def test_destination_not_in_set(self) -> None:
        board = Board.initial()
        legal = get_legal_moves(board, 6, 4)
        outcome = try_move(board, legal, 6, 4, 3, 4)
        assert outcome.status == MoveStatus.ILLEGAL_DESTINATION
        assert board.turn == 0

    def test_stale_caller_set_is_not_trusted(self) -> None:
        board = Board.initial()
        board[5, 4] = Piece(PieceKind.KNIGHT, Color.BLACK, 5, 4)
        # The caller claims a double step that the current board blocks.
        assert not make_move(board, [(5, 4), (4, 4)], 6, 4, 4, 4)
        assert board[6, 4].kind == PieceKind.PAWN

    def test_caller_set_must_contain_target(self) -> None:
        board = Board.initial()
        assert not make_move(board, [(5, 4)], 6, 4, 4, 4)
        assert board.turn == 0

    def test_none_set_uses_recomputation(self) -> None:
        board = Board.initial()
        assert make_move(board, None, 7, 6, 5, 5)
        assert board[5, 5].kind == PieceKind.KNIGHT

    def test_json_style_pairs_accepted(self) -> None:
        board = Board.initial()
        assert make_move(board, [[5, 4], [4, 4]], 6, 4, 5, 4)

    def test_capture_reports_piece(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        outcome = try_move(board, None, 4, 4, 3, 3)
        assert outcome.accepted
        assert outcome.captured == Piece(PieceKind.PAWN, Color.BLACK, 3, 3)
        assert board[3, 3].color == Color.WHITE

    def test_king_capture_allowed(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/K3R3")
        assert play(board, 7, 4, 0, 4)
        assert board.pieces(Color.BLACK, PieceKind.KING) == []
        assert board[0, 4] == Piece(PieceKind.ROOK, Color.WHITE, 0, 4)

    def test_out_of_range_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(InvalidSquareError):
            make_move(board, None, 6, 4, 8, 4)


class TestScenario:
    def test_scholars_line_pseudo_legal(self) -> None:
        board = Board.initial()
        line = [
            (6, 4, 4, 4),  # e4
            (1, 4, 3, 4),  # e5
            (7, 5, 4, 2),  # Bc4
            (0, 1, 2, 2),  # Nc6
            (7, 3, 3, 7),  # Qh5
            (0, 6, 2, 5),  # Nf6
            (3, 7, 1, 5),  # Qxf7
        ]
        for move in line:
            assert play(board, *move), move
        assert board.turn == len(line)
        assert board[1, 5] == Piece(PieceKind.QUEEN, Color.WHITE, 1, 5)
        # No mate detection: Black may still move.
        assert board.side_to_move == Color.BLACK
        assert play(board, 0, 4, 1, 5)
