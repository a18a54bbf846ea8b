from __future__ import annotations

import numpy as np

from game.board import TicTacToeBoard
from game.errors import NoLegalMoves
from game.types import Position


def random_move(board: TicTacToeBoard, rng: np.random.Generator) -> Position:
    moves = board.empty_positions()
    if len(moves) == 0:
        raise NoLegalMoves("No legal moves: the board is full.")
    return moves[int(rng.integers(0, len(moves)))]
