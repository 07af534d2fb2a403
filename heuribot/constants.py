"""
Bot constants: piece values, heuristic weights, and history sizing.

Every number the heuristic rules use is defined here. The rule weights are
only defaults; evaluate.Weights bundles them so a caller can tune a single
bot instance without touching module state.

Piece values use the centipawn convention (1 pawn = 100). Knights and
bishops are deliberately equal: the bot has no positional evaluation that
would justify telling them apart.
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (centipawns)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 100
KNIGHT_VALUE: int = 300
BISHOP_VALUE: int = 300
ROOK_VALUE: int = 500
QUEEN_VALUE: int = 900
KING_VALUE: int = 10_000  # Never captured in a legal game; keeps the table total

PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Heuristic weights
# ---------------------------------------------------------------------------

# Flat bonus for any castling move.
CASTLE_BONUS: int = 1_000

# Returned by king safety when the side to move is already in check.
# 0 disables it; the first revision of the bot used -10_000.
IN_CHECK_PENALTY: int = 0

# Non-pawn move landing on a square the opponent attacks.
DEVELOPMENT_PENALTY: int = -200

# 1.e4 on the very first ply of the game.
OPENING_PAWN_BONUS: int = 1_000

# Check without mate. Only added when Weights.tempo_enabled is set.
TEMPO_BONUS: int = 50

# The double-step king-pawn advance for each side.
KING_PAWN_DOUBLE_STEP: dict[bool, chess.Move] = {
    chess.WHITE: chess.Move(chess.E2, chess.E4),
    chess.BLACK: chess.Move(chess.E7, chess.E5),
}

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------

# Reported as the score of a mating move. Never summed with other rules.
CHECKMATE_SCORE: int = 99_999

# ---------------------------------------------------------------------------
# Repetition guard
# ---------------------------------------------------------------------------

# Only the last entry is ever compared, but the guard needs two entries to
# arm; a few more keep the log readable without letting it grow forever.
HISTORY_CAPACITY: int = 8
REPETITION_ARM_LENGTH: int = 2
