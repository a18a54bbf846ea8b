from __future__ import annotations

import numpy as np

from .board import TicTacToeBoard, check_position
from .constants import EMPTY, LINES, LINES_INDEX, PLAYER_O, PLAYER_X, SYMBOLS
from .errors import CellOccupied
from .status import Status
from .types import Player, Position

_PLAYERS_BY_SYMBOL = {symbol: player for player, symbol in SYMBOLS.items()}


def opponent(player: Player) -> Player:
    return -player


def player_symbol(player: Player) -> str:
    return SYMBOLS[player]


def player_from_symbol(symbol: str | Player) -> Player:
    if isinstance(symbol, str):
        player = _PLAYERS_BY_SYMBOL.get(symbol.strip().upper())
        if player is None:
            raise ValueError(f"Unknown player symbol: {symbol!r}. Expected 'X' or 'O'.")
        return player
    if isinstance(symbol, bool) or symbol not in (PLAYER_X, PLAYER_O):
        raise ValueError(f"Unknown player: {symbol!r}.")
    return int(symbol)


def side_to_move(board: TicTacToeBoard) -> Player:
    """X moves first and turns alternate, so equal counts mean X is to move."""
    return PLAYER_X if board.count(PLAYER_X) == board.count(PLAYER_O) else PLAYER_O


def evaluate(board: TicTacToeBoard) -> Status:
    sums = board.grid[LINES_INDEX].sum(axis=1)
    for idx, total in enumerate(sums):
        if total == 3 * PLAYER_X:
            return Status.won(PLAYER_X, LINES[idx])
        if total == 3 * PLAYER_O:
            return Status.won(PLAYER_O, LINES[idx])
    if board.is_full():
        return Status.draw()
    return Status.in_progress()


def is_terminal(board: TicTacToeBoard) -> bool:
    return evaluate(board).is_terminal


def apply_move(
    board: TicTacToeBoard,
    position: Position,
    player: Player,
) -> tuple[TicTacToeBoard, Status]:
    """
    Place `player` at `position` and return the board with its new status.

    Turn order is not checked here; the session owns it. Nothing is mutated
    when validation fails.
    """
    pos = check_position(position)
    if board.grid[pos] != EMPTY:
        raise CellOccupied(pos)
    board.set(pos, player)
    return board, evaluate(board)


def winning_moves(board: TicTacToeBoard, player: Player) -> list[Position]:
    """Empty positions that would complete a line for `player`, ascending."""
    cells = board.grid[LINES_INDEX]
    hits: set[int] = set()
    for line, values in zip(LINES, cells):
        if int(np.sum(values == player)) == 2 and int(np.sum(values == EMPTY)) == 1:
            hits.add(line[int(np.flatnonzero(values == EMPTY)[0])])
    return sorted(hits)
