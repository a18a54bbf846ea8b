from __future__ import annotations

from engine.minimax import Minimax
from game.board import TicTacToeBoard
from game.types import Player, Position


def minimax_move(board: TicTacToeBoard, player: Player) -> Position:
    return Minimax().search(board, player).move
