import chess
import pytest

from heuribot import evaluate
from heuribot.constants import CASTLE_BONUS, DEVELOPMENT_PENALTY, OPENING_PAWN_BONUS, TEMPO_BONUS
from heuribot.evaluate import Weights
from tests.positions import (
    BACK_RANK,
    CASTLING,
    EN_PASSANT,
    IN_CHECK,
    KNIGHT_DEVELOPMENT,
    LONE_ROOK,
    QUEEN_TRADE,
)


def _move(uci: str) -> chess.Move:
    return chess.Move.from_uci(uci)


def test_king_safety_rewards_castling() -> None:
    board = chess.Board(CASTLING)
    assert evaluate.king_safety(board, _move("e1g1")) == CASTLE_BONUS
    assert evaluate.king_safety(board, _move("e1c1")) == CASTLE_BONUS
    assert evaluate.king_safety(board, _move("e1f1")) == 0


def test_king_safety_castle_bonus_is_tunable() -> None:
    board = chess.Board(CASTLING)
    assert evaluate.king_safety(board, _move("e1g1"), Weights(castle_bonus=7)) == 7


def test_king_safety_in_check_penalty_only_when_enabled() -> None:
    board = chess.Board(IN_CHECK)
    move = _move("e1d1")
    assert evaluate.king_safety(board, move) == 0
    assert evaluate.king_safety(board, move, Weights(in_check_penalty=-10_000)) == -10_000


def test_capture_undefended_gains_full_value() -> None:
    board = chess.Board(QUEEN_TRADE)
    assert evaluate.capture(board, _move("d4a7")) == 900


def test_capture_defended_subtracts_capturing_piece() -> None:
    board = chess.Board(QUEEN_TRADE)
    assert evaluate.capture(board, _move("d4d6")) == 100 - 900


def test_capture_en_passant() -> None:
    board = chess.Board(EN_PASSANT)
    assert evaluate.capture(board, _move("e5d6")) == 100


def test_capture_rejects_quiet_move() -> None:
    with pytest.raises(ValueError):
        evaluate.capture(chess.Board(), _move("e2e4"))


def test_development_penalizes_attacked_destination() -> None:
    board = chess.Board(KNIGHT_DEVELOPMENT)
    assert evaluate.development(board, _move("b1c3")) == DEVELOPMENT_PENALTY
    assert evaluate.development(board, _move("b1d2")) == 0
    assert evaluate.development(board, _move("b1a3")) == 0


def test_pawn_structure_opening_bonus_on_first_ply() -> None:
    board = chess.Board()
    assert evaluate.pawn_structure(board, _move("e2e4")) == OPENING_PAWN_BONUS
    assert evaluate.pawn_structure(board, _move("d2d4")) == 0


def test_pawn_structure_no_bonus_after_first_ply() -> None:
    board = chess.Board()
    board.push_uci("g1f3")
    board.push_uci("g8f6")
    board.push_uci("f3g1")
    board.push_uci("f6g8")
    assert evaluate.pawn_structure(board, _move("e2e4")) == 0


def test_pawn_structure_counts_captures_in_resulting_position() -> None:
    board = chess.Board()
    board.push_uci("e2e4")
    board.push_uci("d7d5")
    fen = board.fen()
    # After 2.a3 Black's only capture is dxe4.
    assert evaluate.pawn_structure(board, _move("a2a3")) == 1
    assert board.fen() == fen
    assert len(board.move_stack) == 2


def test_is_mate_detects_back_rank_mate() -> None:
    board = chess.Board(BACK_RANK)
    fen = board.fen()
    legal = list(board.legal_moves)
    assert evaluate.is_mate(board, _move("d1d8")) is True
    assert evaluate.is_mate(board, _move("f4h5")) is False
    assert board.fen() == fen
    assert list(board.legal_moves) == legal


def test_tempo_rewards_check_without_mate() -> None:
    board = chess.Board(LONE_ROOK)
    assert evaluate.tempo(board, _move("a1a8")) == TEMPO_BONUS
    assert evaluate.tempo(board, _move("a1a2")) == 0

    mate = chess.Board(BACK_RANK)
    assert evaluate.tempo(mate, _move("d1d8")) == 0
