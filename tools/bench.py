#!/usr/bin/env python3
"""
Benchmark: record the bot's move, score, and time on fixed positions.

Run before and after changing a rule weight to see which positions change
their chosen move. The bot is deterministic on a fresh game (the repetition
guard is empty), so any difference in the table comes from the change.

Usage: python3 tools/bench.py
"""
import subprocess
import sys
import os

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PYTHON = sys.executable
ENGINE = os.path.join(REPO, "interface", "uci.py")

# Fixed positions spanning opening, tactics, and endgame.
POSITIONS = [
    ("Start",         "startpos"),
    ("After 1.e4",    "startpos moves e2e4"),
    ("Italian",       "startpos moves e2e4 e7e5 g1f3 b8c6 f1c4"),
    ("Castle ready",  "fen r3k2r/pppq1ppp/2np1n2/2b1p1B1/2B1P1b1/2NP1N2/PPPQ1PPP/R3K2R w KQkq - 0 8"),
    ("Queen trade",   "fen 6k1/q3p3/3p4/8/3Q4/8/7K/8 w - - 0 1"),
    ("Back rank",     "fen 6k1/5ppp/8/7q/5N2/8/8/3R2K1 w - - 0 1"),
    ("Rook ending",   "fen 8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 1"),
    ("Pawn race",     "fen 8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 1"),
]


def run_position(label: str, pos_spec: str) -> dict:
    """Run a single position through the bot and return metrics.

    Spawns the UCI script as a subprocess, sends the position, and parses
    the 'info' line for score, scored-move count, and time.

    Args:
        label: Human-readable position name for display.
        pos_spec: UCI position string (e.g. "startpos" or "fen <FEN>").

    Returns:
        Dict with keys: label, move, score, nodes, time_ms.
    """
    env = {**os.environ, "PYTHONPATH": REPO}
    proc = subprocess.Popen(
        [PYTHON, ENGINE],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        text=True,
        env=env,
    )
    cmds = f"uci\nisready\nucinewgame\nposition {pos_spec}\ngo movetime 1000\n"
    proc.stdin.write(cmds)
    proc.stdin.flush()

    nodes = time_ms = score = 0
    move = "(none)"
    for line in proc.stdout:
        line = line.strip()
        if line.startswith("info depth"):
            parts = line.split()

            def _get(key: str) -> int:
                try:
                    return int(parts[parts.index(key) + 1])
                except (ValueError, IndexError):
                    return 0

            score = _get("cp")
            nodes = _get("nodes")
            time_ms = _get("time")
        elif line.startswith("bestmove"):
            move = line.split()[1]
            break

    proc.stdin.write("quit\n")
    proc.stdin.flush()
    proc.wait(timeout=5)

    return {
        "label": label,
        "move": move,
        "score": score,
        "nodes": nodes,
        "time_ms": time_ms,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    print(f"HeuriBot benchmark — {PYTHON}")
    print(f"Engine: {ENGINE}")
    print()
    print(f"{'Position':<14} {'Move':<7} {'Score':>6} {'Moves':>6} {'Time(ms)':>9}")
    print("-" * 46)

    for label, pos in POSITIONS:
        r = run_position(label, pos)
        print(
            f"{r['label']:<14} {r['move']:<7} {r['score']:>6} "
            f"{r['nodes']:>6} {r['time_ms']:>9,}"
        )
    print()


if __name__ == "__main__":
    main()
