"""
Per-turn decision pipeline and the decide() entry point.

A turn runs straight through, with no search and no clock checks:

    legal moves → score_moves → select_best (or the mating move)
                → RepetitionGuard.review → recorded and returned

The bot object holds the only state that survives between turns, the
repetition guard's move history. One bot should drive one side of one game;
call new_game() (or make a new bot) before the next game starts.

The Timer is accepted for compatibility with turn drivers that hand one in.
Nothing reads it. A time-aware bot would need a new cutoff policy rather
than a change here.
"""

import logging
import random
import time
from dataclasses import dataclass, field

import chess

from heuribot import position
from heuribot.constants import CHECKMATE_SCORE, HISTORY_CAPACITY
from heuribot.evaluate import DEFAULT_WEIGHTS, Weights
from heuribot.repetition import RepetitionGuard
from heuribot.scoring import Decisive, score_moves, select_best

_log = logging.getLogger(__name__)


@dataclass
class Timer:
    """
    Time budget for one turn.

    Attributes:
        budget_ms:  Milliseconds the turn driver allows for this move.
        start_time: Monotonic clock timestamp when the turn started.
    """

    budget_ms: float = float("inf")
    start_time: float = field(default_factory=time.monotonic)

    @property
    def elapsed_ms(self) -> float:
        return (time.monotonic() - self.start_time) * 1000

    @property
    def remaining_ms(self) -> float:
        return max(0.0, self.budget_ms - self.elapsed_ms)


@dataclass(frozen=True)
class Decision:
    """
    Outcome of one turn.

    Attributes:
        move:       The move to play.
        score:      Score of the selected move before any repetition override,
                    or CHECKMATE_SCORE when the move mates.
        decisive:   True if the move was played because it mates.
        overridden: True if the repetition guard replaced the selected move.
        scored:     Number of moves scored before the decision was made.
    """

    move: chess.Move
    score: int
    decisive: bool = False
    overridden: bool = False
    scored: int = 0


class HeuristicBot:
    """One-ply heuristic bot with a repetition guard."""

    def __init__(
        self,
        weights: Weights = DEFAULT_WEIGHTS,
        rng: random.Random | None = None,
        history_capacity: int = HISTORY_CAPACITY,
    ) -> None:
        self.weights = weights
        self.guard = RepetitionGuard(rng=rng, capacity=history_capacity)

    def new_game(self) -> None:
        self.guard.reset()

    def think(self, board: chess.Board, timer: Timer | None = None) -> Decision:
        """
        Choose a move for the side to move and record it.

        Args:
            board: The current position. Temporarily modified while moves are
                   simulated, identical on return.
            timer: Turn budget. Unused.

        Returns:
            The Decision for this turn.

        Raises:
            ValueError: The side to move has no legal moves.
        """
        moves = position.legal_moves(board)
        if not moves:
            raise ValueError(f"no legal moves in position {board.fen()}")

        result = score_moves(board, moves, self.weights)

        if isinstance(result, Decisive):
            # Mate is never second-guessed by the repetition guard.
            self.guard.record(result.move)
            _log.debug("mate with %s", result.move.uci())
            return Decision(
                move=result.move,
                score=CHECKMATE_SCORE,
                decisive=True,
                scored=moves.index(result.move),
            )

        best = select_best(result.table)
        score = result.table[best]
        _log.debug("best %s score %d of %d moves", best.uci(), score, len(result.table))

        final, overridden = self.guard.review(best, moves)
        return Decision(
            move=final,
            score=score,
            overridden=overridden,
            scored=len(result.table),
        )

    def decide(self, board: chess.Board, timer: Timer | None = None) -> chess.Move:
        return self.think(board, timer).move


# Process-wide bot behind the module-level decide().
_default_bot = HeuristicBot()


def decide(board: chess.Board, timer: Timer | None = None) -> chess.Move:
    """
    Return the move to play this turn, using the process-wide bot.

    Must be called once per turn for the side this process plays, and only
    when that side has a legal move.
    """
    return _default_bot.decide(board, timer)


def new_game() -> None:
    """Clear the process-wide bot's repetition history."""
    _default_bot.new_game()
