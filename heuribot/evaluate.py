"""
Heuristic move rules: each maps (board, move) to an integer contribution.

The bot does not evaluate positions. It evaluates moves, one rule at a time,
and the scorer adds up whichever rules apply to a given move:

    king_safety     — every move
    capture         — capturing moves only
    development     — moves of any piece except a pawn
    pawn_structure  — pawn moves only
    tempo           — every move, but only when Weights.tempo_enabled is set

is_mate is not an additive rule. A move that mates is played outright, so
the scorer checks it separately and stops scoring as soon as it finds one.

Rules that need to look one ply ahead (pawn_structure, is_mate, tempo) go
through position.simulate, which guarantees the board is restored on return.
"""

from dataclasses import dataclass

import chess

from heuribot import position
from heuribot.constants import (
    CASTLE_BONUS,
    DEVELOPMENT_PENALTY,
    IN_CHECK_PENALTY,
    KING_PAWN_DOUBLE_STEP,
    OPENING_PAWN_BONUS,
    TEMPO_BONUS,
)


@dataclass(frozen=True)
class Weights:
    """
    Tunable rule weights for one bot instance.

    Attributes:
        castle_bonus:        Added by king_safety for a castling move.
        in_check_penalty:    Returned by king_safety for non-castling moves
                             when the side to move is in check. 0 disables.
        development_penalty: Returned by development when a piece lands on
                             an attacked square. Expected to be negative.
        opening_pawn_bonus:  Returned by pawn_structure for the king-pawn
                             double step on ply 0.
        tempo_bonus:         Returned by tempo for a checking, non-mating move.
        tempo_enabled:       Whether the scorer adds tempo into the total.
    """

    castle_bonus: int = CASTLE_BONUS
    in_check_penalty: int = IN_CHECK_PENALTY
    development_penalty: int = DEVELOPMENT_PENALTY
    opening_pawn_bonus: int = OPENING_PAWN_BONUS
    tempo_bonus: int = TEMPO_BONUS
    tempo_enabled: bool = False


DEFAULT_WEIGHTS = Weights()


def king_safety(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """
    Reward castling.

    The in-check penalty looks at the position before the move, not after:
    every legal move out of check gets the same penalty, so it only shifts
    the whole table and never changes which move wins on its own.
    """
    if position.is_castle(board, move):
        return weights.castle_bonus
    if weights.in_check_penalty and position.in_check(board):
        return weights.in_check_penalty
    return 0


def capture(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """
    Material won by a capture, assuming at most one recapture.

    If the opponent attacks the destination square, the capturing piece is
    assumed lost on the next ply and its value is subtracted. Whether our
    side could then recapture again is not considered.

    Raises:
        ValueError: The move does not capture anything.
    """
    if not position.is_capture(board, move):
        raise ValueError(f"{move.uci()} is not a capture")

    gained = position.value_of(position.captured_piece(board, move))
    if position.attacked_by_opponent(board, move.to_square):
        return gained - position.value_of(position.moved_piece(board, move))
    return gained


def development(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """Penalize moving a piece onto a square the opponent attacks."""
    if position.attacked_by_opponent(board, move.to_square):
        return weights.development_penalty
    # Centralization is not scored.
    return 0


def pawn_structure(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """
    Score a pawn move by the capture count it leaves on the board.

    On the first ply of the game the king-pawn double step gets a fixed
    bonus. Any other pawn move is played out and scored by how many legal
    captures the side to move then has.
    """
    if position.ply_count(board) == 0 and move == KING_PAWN_DOUBLE_STEP[board.turn]:
        return weights.opening_pawn_bonus

    with position.simulate(board, move) as after:
        return len(position.legal_moves(after, captures_only=True))


def is_mate(board: chess.Board, move: chess.Move) -> bool:
    with position.simulate(board, move) as after:
        return position.in_checkmate(after)


def tempo(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """Bonus for giving check without mating."""
    with position.simulate(board, move) as after:
        if position.in_check(after) and not position.in_checkmate(after):
            return weights.tempo_bonus
    return 0
