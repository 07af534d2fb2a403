"""
Board capability surface consumed by the heuristic rules.

The bot never implements chess rules itself. Everything it needs to know
about a position (legal moves, checks, attacked squares, piece lookup, ply
count) is answered by python-chess through the helpers below, so the rule
code reads in terms of the questions it asks rather than the library calls
that answer them.

Simulation discipline:
    Rules that look one ply ahead do so through simulate(), a context manager
    that pushes the move and pops it again on every exit path, including
    exceptions and early returns from the with-block. At most one simulated
    move is ever in flight.
"""

from contextlib import contextmanager
from typing import Iterator

import chess

from heuribot.constants import PIECE_VALUES


class SimulationError(RuntimeError):
    """Raised when a simulated move leaves the move stack unbalanced."""


def legal_moves(board: chess.Board, captures_only: bool = False) -> list[chess.Move]:
    """
    Snapshot the legal moves for the side to move, in generation order.

    Args:
        board:         The position to enumerate. Not modified.
        captures_only: If True, keep only capturing moves (en passant included).
    """
    if captures_only:
        return [m for m in board.legal_moves if board.is_capture(m)]
    return list(board.legal_moves)


def in_check(board: chess.Board) -> bool:
    return board.is_check()


def in_checkmate(board: chess.Board) -> bool:
    return board.is_checkmate()


def attacked_by_opponent(board: chess.Board, square: chess.Square) -> bool:
    """True if any piece of the side NOT to move attacks the square."""
    return board.is_attacked_by(not board.turn, square)


def piece_at(board: chess.Board, square: chess.Square) -> int:
    """
    Piece type on an occupied square.

    Raises:
        ValueError: The square is empty.
    """
    piece_type = board.piece_type_at(square)
    if piece_type is None:
        raise ValueError(f"no piece on {chess.square_name(square)}")
    return piece_type


def ply_count(board: chess.Board) -> int:
    return board.ply()


def moved_piece(board: chess.Board, move: chess.Move) -> int:
    return piece_at(board, move.from_square)


def is_capture(board: chess.Board, move: chess.Move) -> bool:
    return board.is_capture(move)


def is_castle(board: chess.Board, move: chess.Move) -> bool:
    return board.is_castling(move)


def captured_piece(board: chess.Board, move: chess.Move) -> int:
    """
    Piece type removed by a capturing move.

    En passant is the one capture whose victim is not on the destination
    square; the victim is always a pawn.
    """
    if board.is_en_passant(move):
        return chess.PAWN
    return piece_at(board, move.to_square)


def value_of(piece_type: int) -> int:
    return PIECE_VALUES[piece_type]


@contextmanager
def simulate(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """
    Apply a move for the duration of a with-block, then undo it.

    Yields the same board object with the move pushed. The move is popped
    when the block exits for any reason.

    Raises:
        SimulationError: The block pushed or popped moves of its own, so the
                         stack depth after undoing differs from before.
    """
    depth = len(board.move_stack)
    board.push(move)
    try:
        yield board
    finally:
        board.pop()
    if len(board.move_stack) != depth:
        raise SimulationError(
            f"move stack depth {len(board.move_stack)} after simulating "
            f"{move.uci()}, expected {depth}"
        )
