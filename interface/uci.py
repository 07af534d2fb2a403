"""
UCI (Universal Chess Interface) protocol handler.

UCI is the standard text-based protocol that allows chess GUIs and testing
tools (like cutechess-cli) to communicate with chess engines. The engine
reads commands from stdin and writes responses to stdout. All output lines
must be flushed immediately — GUI programs won't block waiting for a newline.

Protocol overview:
    GUI → Engine: uci, isready, ucinewgame, setoption, position, go, stop, quit
    Engine → GUI: id name, id author, option, uciok, readyok, info, bestmove

Execution model:
    The heuristic bot answers in a single pass with no search, so "go" is
    handled synchronously on the main thread and "bestmove" is written before
    the next command is read. "stop" therefore has nothing to interrupt.

    One HeuristicBot lives for the whole game so its repetition history
    carries over between "go" commands. "ucinewgame" clears it.

Critical rule: NEVER print to stdout except for valid UCI responses.
Debug output must go to stderr or be suppressed entirely.
"""

import dataclasses
import os
import random
import sys

# ---------------------------------------------------------------------------
# Path setup: make 'heuribot' importable when this script is run directly.
# When run as `python interface/uci.py` from the repo root, sys.path may not
# include the repo root, so `import heuribot` would fail.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import chess
from heuribot.bot import HeuristicBot, Timer


def _send(line: str) -> None:
    """
    Write a line to stdout and flush immediately.

    Args:
        line: The UCI response line to send (without trailing newline).
    """
    print(line, flush=True)


def _log(message: str) -> None:
    """
    Write a debug/error message to stderr.

    In UCI mode, stdout is reserved for valid protocol messages.

    Args:
        message: The log message (without trailing newline).
    """
    print(message, file=sys.stderr, flush=True)


class UciHandler:
    """
    Stateful handler for the UCI protocol.

    Attributes:
        board: The current board position, updated by "position" commands.
        bot:   The bot playing this game. Persists across "go" commands.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.board: chess.Board = chess.Board()
        self.bot: HeuristicBot = HeuristicBot(rng=random.Random(seed))

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_uci(self) -> None:
        """
        Respond to the "uci" command with identity, options, and "uciok".

        Options:
            Seed   — seeds the random fallback used by the repetition guard.
            Tempo  — adds the check bonus into move scores.
        """
        _send("id name HeuriBot")
        _send("id author HeuriBot Project")
        _send("option name Seed type spin default 0 min 0 max 2147483647")
        _send("option name Tempo type check default false")
        _send("uciok")

    def handle_isready(self) -> None:
        _send("readyok")

    def handle_ucinewgame(self) -> None:
        """Reset the board and forget the previous game's moves."""
        self.board = chess.Board()
        self.bot.new_game()

    def handle_setoption(self, tokens: list[str]) -> None:
        """
        Apply a "setoption name <id> [value <x>]" command.

        Args:
            tokens: The command tokens with "setoption" already stripped.
        """
        if "name" not in tokens:
            _log("uci: setoption without name")
            return
        name_idx = tokens.index("name")
        if "value" in tokens:
            value_idx = tokens.index("value")
            name = " ".join(tokens[name_idx + 1:value_idx])
            value = " ".join(tokens[value_idx + 1:])
        else:
            name = " ".join(tokens[name_idx + 1:])
            value = ""

        key = name.lower()
        try:
            if key == "seed":
                self.bot.guard.rng.seed(int(value))
            elif key == "tempo":
                enabled = value.lower() == "true"
                self.bot.weights = dataclasses.replace(self.bot.weights, tempo_enabled=enabled)
            else:
                _log(f"uci: unknown option: {name}")
        except ValueError as e:
            _log(f"uci: bad value for option {name}: {e}")

    def handle_position(self, tokens: list[str]) -> None:
        """
        Parse and apply a "position" command.

        Command formats:
            position startpos
            position startpos moves e2e4 e7e5 ...
            position fen <FEN>
            position fen <FEN> moves e2e4 e7e5 ...

        Args:
            tokens: The command tokens with "position" already stripped.
                    tokens[0] is "startpos" or "fen".
        """
        try:
            if not tokens:
                return

            if tokens[0] == "startpos":
                self.board = chess.Board()
                move_tokens = tokens[2:] if len(tokens) > 1 and tokens[1] == "moves" else []
            elif tokens[0] == "fen":
                # FEN strings have 6 space-separated fields; find where "moves" appears
                if "moves" in tokens:
                    moves_idx = tokens.index("moves")
                    fen = " ".join(tokens[1:moves_idx])
                    move_tokens = tokens[moves_idx + 1:]
                else:
                    fen = " ".join(tokens[1:])
                    move_tokens = []
                self.board = chess.Board(fen)
            else:
                _log(f"uci: unknown position type: {tokens[0]}")
                return

            for uci_move in move_tokens:
                move = chess.Move.from_uci(uci_move)
                if move in self.board.legal_moves:
                    self.board.push(move)
                else:
                    _log(f"uci: illegal move in position command: {uci_move}")
                    break

        except ValueError as e:
            _log(f"uci: error in position command: {e}")

    def handle_go(self, tokens: list[str]) -> None:
        """
        Decide a move for the current position and reply with "bestmove".

        The time control is parsed into a Timer and handed to the bot, which
        does not consult it. The bot works on a copy so a failed turn cannot
        leave the handler's board half-modified.

        Args:
            tokens: The command tokens with "go" already stripped.
        """
        timer = Timer(budget_ms=self._parse_go_time(tokens))

        if not any(self.board.legal_moves):
            # No legal moves: the game is over (checkmate or stalemate).
            _send("bestmove (none)")
            return

        try:
            decision = self.bot.think(self.board.copy(), timer)
        except Exception as e:
            _log(f"uci: decision error: {e}")
            _send("bestmove (none)")
            return

        elapsed_ms = max(1, int(timer.elapsed_ms))
        _send(
            f"info depth 1 score cp {decision.score} "
            f"nodes {decision.scored} time {elapsed_ms}"
        )
        _send(f"bestmove {decision.move.uci()}")

    def handle_stop(self) -> None:
        """Nothing runs in the background; "stop" is accepted and ignored."""

    def handle_quit(self) -> None:
        sys.exit(0)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _parse_go_time(self, tokens: list[str]) -> float:
        """
        Extract the time budget in milliseconds from "go" command tokens.

        Supports:
            movetime <ms>       — use exactly this many milliseconds
            wtime <ms> btime <ms> [winc <ms> binc <ms>]
                                — use 1/40 of remaining time + increment

        Anything else (e.g. "go infinite") yields an unbounded budget.

        Args:
            tokens: The go command tokens (with "go" stripped).

        Returns:
            Time budget in milliseconds.
        """
        params: dict[str, int] = {}
        i = 0
        while i < len(tokens) - 1:
            key = tokens[i]
            try:
                params[key] = int(tokens[i + 1])
                i += 2
            except (ValueError, IndexError):
                i += 1

        if "movetime" in params:
            return float(params["movetime"])

        color = self.board.turn
        time_key = "wtime" if color == chess.WHITE else "btime"
        inc_key = "winc" if color == chess.WHITE else "binc"

        if time_key in params:
            time_left = params[time_key]
            increment = params.get(inc_key, 0)
            return float(max(1, time_left // 40 + increment))

        return float("inf")


def run_uci_loop() -> None:
    """
    Main UCI protocol loop.

    Reads lines from stdin and dispatches each command to the UciHandler.
    Runs until the "quit" command is received or stdin is closed.
    Errors in one command are logged to stderr and the loop continues.
    """
    handler = UciHandler()

    for raw_line in sys.stdin:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0]
        args = tokens[1:]

        try:
            if command == "uci":
                handler.handle_uci()
            elif command == "isready":
                handler.handle_isready()
            elif command == "ucinewgame":
                handler.handle_ucinewgame()
            elif command == "setoption":
                handler.handle_setoption(args)
            elif command == "position":
                handler.handle_position(args)
            elif command == "go":
                handler.handle_go(args)
            elif command == "stop":
                handler.handle_stop()
            elif command == "quit":
                handler.handle_quit()
            else:
                # Unknown commands are ignored per the UCI specification.
                _log(f"uci: ignoring unknown command: {command!r}")

        except Exception as e:
            _log(f"uci: unhandled error for command {command!r}: {e}")


if __name__ == "__main__":
    run_uci_loop()
