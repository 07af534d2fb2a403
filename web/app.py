"""
FastAPI web application for the heuristic bot.

Exposes a single REST endpoint (POST /api/move) that accepts a FEN position,
a time limit, and the bot's own previous moves, asks the bot for a move, and
returns it with its score.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  which is the correct pattern for CPU-bound blocking calls.
- Stateless per request: the client sends the full FEN and the bot's move
  history each time. A fresh HeuristicBot is built per request and primed
  with that history, so concurrent requests never share a board or a guard.
"""

import logging

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from heuribot.bot import HeuristicBot, Timer

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="HeuriBot", version="1.0.0")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Client request to the bot.

    Fields:
        fen: Full FEN string representing the current board position.
        time_limit: Seconds allocated to the bot for this move, clamped to
                    [0.1, 30.0]. Passed through as the turn timer.
        history: The bot's previous moves in this game, oldest first, in UCI
                 notation. Lets the repetition guard see earlier turns.
    """

    fen: str
    time_limit: float = 1.0
    history: list[str] = []

    @field_validator("time_limit")
    @classmethod
    def clamp_time_limit(cls, v: float) -> float:
        """Clamp time_limit to a safe operating range."""
        return max(0.1, min(v, 30.0))


class MoveResponse(BaseModel):
    """
    Bot response.

    Fields:
        move: Chosen move in UCI notation (e.g. "e2e4", "e7e8q").
        fen: Board FEN after the move is applied.
        score: Heuristic score of the selected move.
        decisive: True if the move checkmates.
        overridden: True if the move was replaced by a random legal move
                    to avoid repeating the previous one.
    """

    move: str
    fen: str
    score: int
    decisive: bool
    overridden: bool


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Compute the bot's move for the given position.

    Args:
        request: MoveRequest with a FEN string, time limit, and move history.

    Returns:
        MoveResponse with the move (UCI), updated FEN, and decision details.

    Raises:
        HTTPException 400: Malformed FEN, malformed history move, or game
                           already over.
        HTTPException 500: The bot failed while deciding.
    """
    # --- Parse and validate the input ---
    try:
        board = chess.Board(request.fen)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {exc}") from exc

    if board.is_game_over():
        raise HTTPException(
            status_code=400,
            detail=f"Game is already over: {board.result()}",
        )

    bot = HeuristicBot()
    for uci_move in request.history:
        try:
            bot.guard.record(chess.Move.from_uci(uci_move))
        except ValueError as exc:
            raise HTTPException(
                status_code=400, detail=f"Invalid history move: {uci_move}"
            ) from exc

    # --- Decide ---
    timer = Timer(budget_ms=request.time_limit * 1000)
    try:
        decision = bot.think(board, timer)
    except Exception as exc:
        _log.exception("Bot failed for FEN=%s", request.fen)
        raise HTTPException(status_code=500, detail=f"Bot error: {exc}") from exc

    _log.info(
        "Move=%s score=%d decisive=%s overridden=%s fen=%s",
        decision.move.uci(),
        decision.score,
        decision.decisive,
        decision.overridden,
        request.fen[:40],
    )

    # --- Apply the move and return ---
    board.push(decision.move)
    return MoveResponse(
        move=decision.move.uci(),
        fen=board.fen(),
        score=decision.score,
        decisive=decision.decisive,
        overridden=decision.overridden,
    )
