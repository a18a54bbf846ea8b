from __future__ import annotations

from game.board import TicTacToeBoard
from game.constants import CENTER, CORNERS, EDGES
from game.errors import NoLegalMoves
from game.rules import opponent, winning_moves
from game.types import Player, Position


def heuristic_move(board: TicTacToeBoard, player: Player) -> Position:
    """
    Fixed priority, first match wins:
    1) complete own line, 2) block the opponent's line,
    3) center, 4) corner, 5) edge.
    Ties inside a tier go to the lowest index.
    """
    if board.is_full():
        raise NoLegalMoves("No legal moves: the board is full.")

    wins = winning_moves(board, player)
    if wins:
        return wins[0]

    blocks = winning_moves(board, opponent(player))
    if blocks:
        return blocks[0]

    if board.is_empty(CENTER):
        return CENTER

    for tier in (CORNERS, EDGES):
        for pos in tier:
            if board.is_empty(pos):
                return pos

    raise NoLegalMoves("No legal moves: the board is full.")
