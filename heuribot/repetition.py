"""
One-turn-lookback repetition guard.

A one-ply bot is easily drawn into shuffling: the same position recurs, the
same move scores best, and the game goes nowhere. The guard remembers the
bot's own recent choices and, once it has seen at least two turns, replaces
a choice that repeats the previous turn's move with a uniformly random
legal move.

This is not threefold-repetition detection. It compares one move with one
move and nothing else.
"""

import logging
import random
from collections import deque
from typing import Sequence

import chess

from heuribot.constants import HISTORY_CAPACITY, REPETITION_ARM_LENGTH

_log = logging.getLogger(__name__)


class RepetitionGuard:
    """
    Remembers the bot's chosen moves across turns and vetoes repeats.

    Attributes:
        history: The most recent final choices, oldest first. Bounded by the
                 capacity given at construction.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        capacity: int = HISTORY_CAPACITY,
    ) -> None:
        if capacity < REPETITION_ARM_LENGTH:
            raise ValueError(f"history capacity must be at least {REPETITION_ARM_LENGTH}")
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.history: deque[chess.Move] = deque(maxlen=capacity)

    @property
    def armed(self) -> bool:
        return len(self.history) >= REPETITION_ARM_LENGTH

    @property
    def last(self) -> chess.Move | None:
        return self.history[-1] if self.history else None

    def review(self, choice: chess.Move, legal: Sequence[chess.Move]) -> tuple[chess.Move, bool]:
        """
        Accept or replace this turn's choice, then record the result.

        Args:
            choice: The move the selector picked.
            legal:  Every legal move this turn. The replacement is drawn from
                    all of them, not just the non-repeating ones.

        Returns:
            (final move, True if the choice was replaced).
        """
        final = choice
        overridden = False
        if self.armed and choice == self.history[-1]:
            final = self.rng.choice(list(legal))
            overridden = True
            _log.info("repeated %s, playing random %s instead", choice.uci(), final.uci())
        self.history.append(final)
        return final, overridden

    def record(self, move: chess.Move) -> None:
        """Append a move without reviewing it."""
        self.history.append(move)

    def reset(self) -> None:
        self.history.clear()
