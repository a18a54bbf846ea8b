from __future__ import annotations

import logging

import numpy as np

from agents.heuristic import heuristic_move
from agents.minimax_agent import minimax_move
from agents.random_agent import random_move
from agents.types import Difficulty
from game.board import TicTacToeBoard
from game.errors import NoLegalMoves
from game.rules import player_from_symbol
from game.types import Player, Position

logger = logging.getLogger(__name__)


def select_move(
    board: TicTacToeBoard,
    player: Player | str,
    difficulty: Difficulty | str,
    rng: np.random.Generator | None = None,
) -> Position:
    """Pick a move for `player` without mutating `board`."""
    level = Difficulty.parse(difficulty)
    mover = player_from_symbol(player)
    if board.is_full():
        raise NoLegalMoves("No legal moves: the board is full.")

    if level == Difficulty.EASY:
        position = random_move(board=board, rng=rng if rng is not None else np.random.default_rng())
    elif level == Difficulty.MEDIUM:
        position = heuristic_move(board=board, player=mover)
    else:
        position = minimax_move(board=board, player=mover)

    logger.debug(
        "ai_move_selected",
        extra={"difficulty": level.value, "player": mover, "position": position},
    )
    return position
