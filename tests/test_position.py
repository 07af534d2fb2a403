import chess
import pytest

from heuribot import position
from tests.positions import EN_PASSANT, QUEEN_TRADE


def test_legal_moves_captures_only() -> None:
    board = chess.Board(QUEEN_TRADE)
    captures = position.legal_moves(board, captures_only=True)
    assert sorted(m.uci() for m in captures) == ["d4a7", "d4d6"]
    assert len(position.legal_moves(board)) > len(captures)


def test_attacked_by_opponent_uses_side_not_to_move() -> None:
    board = chess.Board(QUEEN_TRADE)
    assert position.attacked_by_opponent(board, chess.D6) is True
    assert position.attacked_by_opponent(board, chess.A7) is False


def test_piece_at_rejects_empty_square() -> None:
    board = chess.Board()
    assert position.piece_at(board, chess.G1) == chess.KNIGHT
    with pytest.raises(ValueError):
        position.piece_at(board, chess.E4)


def test_captured_piece_en_passant_is_pawn() -> None:
    board = chess.Board(EN_PASSANT)
    move = chess.Move.from_uci("e5d6")
    assert position.is_capture(board, move)
    assert board.piece_at(chess.D6) is None
    assert position.captured_piece(board, move) == chess.PAWN


def test_ply_count_and_castle_flag() -> None:
    board = chess.Board()
    assert position.ply_count(board) == 0
    board.push_uci("e2e4")
    assert position.ply_count(board) == 1

    castling = chess.Board("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    assert position.is_castle(castling, chess.Move.from_uci("e1g1"))
    assert not position.is_castle(castling, chess.Move.from_uci("e1f1"))


def test_simulate_restores_board() -> None:
    board = chess.Board()
    fen = board.fen()
    with position.simulate(board, chess.Move.from_uci("e2e4")) as after:
        assert after is board
        assert after.turn == chess.BLACK
    assert board.fen() == fen
    assert board.move_stack == []


def test_simulate_restores_board_on_exception() -> None:
    board = chess.Board()
    fen = board.fen()
    with pytest.raises(RuntimeError, match="boom"):
        with position.simulate(board, chess.Move.from_uci("g1f3")):
            raise RuntimeError("boom")
    assert board.fen() == fen


def test_simulate_detects_unbalanced_stack() -> None:
    board = chess.Board()
    with pytest.raises(position.SimulationError):
        with position.simulate(board, chess.Move.from_uci("e2e4")) as after:
            after.push(chess.Move.from_uci("e7e5"))
