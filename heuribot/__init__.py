"""
Heuristic one-ply chess bot package.

Each turn the bot scores every legal move with a handful of additive
heuristics and plays the highest-scoring one. There is no tree search: the
only lookahead is a single simulated ply used by the pawn-structure and
mate-detection rules.

Modules:
    constants  — Piece values, rule weights, and history capacity
    position   — Thin adapter over python-chess board queries and move simulation
    evaluate   — Heuristic rules (king safety, capture, development, pawns, mate, tempo)
    scoring    — Score accumulation with mate short-circuit, best-move selection
    repetition — One-turn-lookback repetition guard with random fallback
    bot        — Per-turn pipeline and the decide() entry point
"""
