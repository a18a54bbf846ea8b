"""
Negamax search with alpha-beta pruning for tic-tac-toe.

Scores are from the side-to-move perspective:
- win: WIN_SCORE - ply (faster wins score higher),
- loss: -(WIN_SCORE - ply) (slower losses score higher),
- draw: 0.
With `max_depth` set, non-terminal leaves at the horizon are scored by
`evaluate_lines` instead of being searched further.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from game.board import TicTacToeBoard
from game.constants import EMPTY, LINES
from game.errors import NoLegalMoves
from game.types import Player, Position

WIN_SCORE = 10
_INF = 1_000_000

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    move: Position
    score: int
    nodes: int


def _line_winner(cells: list[int]) -> int:
    for a, b, c in LINES:
        total = cells[a] + cells[b] + cells[c]
        if total == 3 or total == -3:
            return cells[a]
    return EMPTY


def _score_lines(cells: list[int], player: Player) -> int:
    score = 0
    for line in LINES:
        mine = sum(1 for pos in line if cells[pos] == player)
        theirs = sum(1 for pos in line if cells[pos] == -player)
        if mine > 0 and theirs == 0:
            score += mine * mine
        elif theirs > 0 and mine == 0:
            score -= theirs * theirs
    return score


def evaluate_lines(board: TicTacToeBoard, player: Player) -> int:
    """
    Static score of an unfinished board for `player`.

    Each line held only by `player` adds count**2, each line held only by the
    opponent subtracts count**2, mixed and empty lines add nothing.
    """
    return _score_lines(board.grid.tolist(), player)


class Minimax:
    def __init__(self, max_depth: int | None = None) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be >= 1 or None.")
        self.max_depth = max_depth
        self.nodes_evaluated = 0

    def search(self, board: TicTacToeBoard, player: Player) -> SearchResult:
        """Best move for `player`; lowest index among equal scores."""
        cells = board.grid.tolist()
        moves = [pos for pos, cell in enumerate(cells) if cell == EMPTY]
        if len(moves) == 0:
            raise NoLegalMoves("No legal moves: the board is full.")

        self.nodes_evaluated = 0
        best_move = moves[0]
        best_score = -_INF
        alpha = -_INF
        for pos in moves:
            cells[pos] = player
            score = -self._negamax(cells, -player, 1, -_INF, -alpha)
            cells[pos] = EMPTY
            # Strict comparison keeps the earliest move on ties.
            if score > best_score:
                best_score = score
                best_move = pos
                alpha = max(alpha, score)

        logger.debug(
            "minimax_search",
            extra={
                "player": player,
                "move": best_move,
                "score": best_score,
                "nodes": self.nodes_evaluated,
            },
        )
        return SearchResult(move=best_move, score=best_score, nodes=self.nodes_evaluated)

    def _negamax(
        self,
        cells: list[int],
        player: Player,
        ply: int,
        alpha: int,
        beta: int,
    ) -> int:
        self.nodes_evaluated += 1

        won_by = _line_winner(cells)
        if won_by == player:
            return WIN_SCORE - ply
        if won_by == -player:
            return -(WIN_SCORE - ply)

        moves = [pos for pos, cell in enumerate(cells) if cell == EMPTY]
        if len(moves) == 0:
            return 0
        if self.max_depth is not None and ply >= self.max_depth:
            return _score_lines(cells, player)

        best = -_INF
        for pos in moves:
            cells[pos] = player
            score = -self._negamax(cells, -player, ply + 1, -beta, -alpha)
            cells[pos] = EMPTY
            if score > best:
                best = score
            if best > alpha:
                alpha = best
            if alpha >= beta:
                break
        return best


def search(
    board: TicTacToeBoard,
    player: Player,
    max_depth: int | None = None,
) -> SearchResult:
    return Minimax(max_depth=max_depth).search(board, player)
