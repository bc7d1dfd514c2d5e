"""Command line demo: play the last generated move several times."""

from __future__ import annotations

import argparse

from .board import Board
from .movegen import all_moves
from .types import Move


def play_last_moves(board: Board, count: int) -> list[Move]:
    """Play the last generated move for the side to move ``count`` times."""
    if count < 0:
        raise ValueError("count must not be negative")
    played = []
    for _ in range(count):
        moves = all_moves(board, board.side_to_move)
        if not moves:
            raise ValueError("no moves available for the side to move")
        move = moves[-1]
        board.make_move(move)
        played.append(move)
    return played


def main(argv: list[str] | None = None) -> int:
    """Play a few moves from the initial position and print the board."""
    parser = argparse.ArgumentParser(prog="bitchess")
    parser.add_argument("--moves", type=int, default=7, help="number of moves to play")
    args = parser.parse_args(argv)
    board = Board()
    try:
        play_last_moves(board, args.moves)
    except ValueError as exc:
        parser.error(str(exc))
    board.print_board()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())