from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from game.board import TicTacToeBoard
from game.constants import EMPTY, EMPTY_SYMBOL, LINES_INDEX, NUM_CELLS, PLAYER_O, PLAYER_X
from game.errors import InvalidBoard

_CELL_BY_SYMBOL = {EMPTY_SYMBOL: EMPTY, "X": PLAYER_X, "O": PLAYER_O}


def _parse_cell(idx: int, value: object) -> int:
    if not isinstance(value, str):
        raise InvalidBoard(f"board[{idx}] must be a string.")
    cell = _CELL_BY_SYMBOL.get(value.strip().upper())
    if cell is None:
        raise InvalidBoard(f"board[{idx}] must be one of 'X', 'O' or ''.")
    return cell


def board_to_symbols(board: TicTacToeBoard) -> list[str]:
    return board.to_sequence()


def board_from_symbols(payload: Sequence[object]) -> TicTacToeBoard:
    """Parse nine symbols into a board that could arise from legal play."""
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise InvalidBoard("board must be a sequence of 9 symbols.")
    if len(payload) != NUM_CELLS:
        raise InvalidBoard(f"board must have {NUM_CELLS} cells, got {len(payload)}.")

    grid = np.asarray(
        [_parse_cell(idx, value) for idx, value in enumerate(payload)],
        dtype=np.int8,
    )
    lead = int(np.count_nonzero(grid == PLAYER_X)) - int(np.count_nonzero(grid == PLAYER_O))
    if lead not in (0, 1):
        raise InvalidBoard("X count minus O count must be 0 or 1.")

    sums = grid[LINES_INDEX].sum(axis=1)
    if bool(np.any(sums == 3 * PLAYER_X)) and bool(np.any(sums == 3 * PLAYER_O)):
        raise InvalidBoard("Both players cannot have a completed line.")
    return TicTacToeBoard(grid=grid)
