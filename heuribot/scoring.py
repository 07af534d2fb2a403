"""
Move scoring and selection.

score_moves walks the legal moves in generation order. For each move it
first asks whether the move mates; the first one that does ends the walk and
comes back as Decisive, so the remaining moves are never scored. Otherwise
every move gets exactly one entry in the score table, equal to the sum of
the rules that apply to it:

    king_safety
    + capture            if the move captures
    + development        if the mover is not a pawn
    + pawn_structure     if the mover is a pawn
    + tempo              if Weights.tempo_enabled

select_best then folds over the table left to right and keeps the first
entry with the highest score.
"""

from dataclasses import dataclass, field
from typing import Iterable, Union

import chess

from heuribot import evaluate, position
from heuribot.evaluate import DEFAULT_WEIGHTS, Weights


@dataclass(frozen=True)
class Decisive:
    """A move that checkmates. Played without comparing scores."""

    move: chess.Move


@dataclass(frozen=True)
class Scored:
    """
    Aggregate score per legal move.

    Attributes:
        table: Move → score, in legal-move generation order. chess.Move
               hashes on its fields, so a move rebuilt from UCI text finds
               the same entry.
    """

    table: dict[chess.Move, int] = field(default_factory=dict)


ScoreResult = Union[Decisive, Scored]


def score_move(board: chess.Board, move: chess.Move, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """Sum every applicable rule for one non-mating move."""
    score = evaluate.king_safety(board, move, weights)

    if position.is_capture(board, move):
        score += evaluate.capture(board, move, weights)

    if position.moved_piece(board, move) == chess.PAWN:
        score += evaluate.pawn_structure(board, move, weights)
    else:
        score += evaluate.development(board, move, weights)

    if weights.tempo_enabled:
        score += evaluate.tempo(board, move, weights)

    return score


def score_moves(
    board: chess.Board,
    moves: Iterable[chess.Move],
    weights: Weights = DEFAULT_WEIGHTS,
) -> ScoreResult:
    """
    Score every candidate, or stop at the first mate.

    Args:
        board:   The current position. Pushed and popped during the call,
                 identical on return.
        moves:   Legal moves for the side to move, in the order to consider them.
        weights: Rule weights.

    Returns:
        Decisive(move) for the first mating move, otherwise Scored(table).
    """
    table: dict[chess.Move, int] = {}
    for move in moves:
        if evaluate.is_mate(board, move):
            return Decisive(move)
        table[move] = score_move(board, move, weights)
    return Scored(table)


def select_best(table: dict[chess.Move, int]) -> chess.Move:
    """
    Move with the highest score; the earliest one wins a tie.

    Raises:
        ValueError: The table is empty.
    """
    best_move: chess.Move | None = None
    best_score = 0
    for move, score in table.items():
        if best_move is None or score > best_score:
            best_move = move
            best_score = score

    if best_move is None:
        raise ValueError("cannot select a move from an empty score table")
    return best_move
