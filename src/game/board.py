from __future__ import annotations

import numpy as np

from .constants import EMPTY, EMPTY_SYMBOL, NUM_CELLS, PLAYER_O, PLAYER_X, SYMBOLS
from .errors import CellOccupied, InvalidPosition
from .types import Grid, Player, Position

_VALID_CELL_VALUES = {EMPTY, PLAYER_X, PLAYER_O}


def check_position(position: object) -> Position:
    """Return `position` as an int, or raise InvalidPosition."""
    if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
        raise InvalidPosition(position)
    pos = int(position)
    if pos < 0 or pos >= NUM_CELLS:
        raise InvalidPosition(position)
    return pos


class TicTacToeBoard:
    """Nine cells in row-major order. Index 0 is top-left, 8 is bottom-right."""

    def __init__(self, grid: Grid | None = None) -> None:
        self.grid: Grid
        if grid is None:
            self.grid = np.zeros(NUM_CELLS, dtype=np.int8)
        else:
            grid_int8 = np.asarray(grid, dtype=np.int8).reshape(-1)
            if grid_int8.shape != (NUM_CELLS,):
                raise ValueError(f"grid must have {NUM_CELLS} cells, got {grid_int8.size}")
            if not set(int(v) for v in grid_int8).issubset(_VALID_CELL_VALUES):
                raise ValueError(f"grid cells must be one of {sorted(_VALID_CELL_VALUES)}")
            self.grid = grid_int8.copy()

    def copy(self) -> TicTacToeBoard:
        # Search clones boards constantly; the grid is already valid.
        new_board = object.__new__(TicTacToeBoard)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, position: Position) -> int:
        return int(self.grid[check_position(position)])

    def set(self, position: Position, mark: Player) -> None:
        pos = check_position(position)
        if mark not in (PLAYER_X, PLAYER_O):
            raise ValueError(f"mark must be PLAYER_X or PLAYER_O, got {mark!r}")
        if self.grid[pos] != EMPTY:
            raise CellOccupied(pos)
        self.grid[pos] = mark

    def is_empty(self, position: Position) -> bool:
        return bool(self.grid[check_position(position)] == EMPTY)

    def reset(self) -> None:
        self.grid[:] = EMPTY

    def empty_positions(self) -> list[Position]:
        return [int(i) for i in np.flatnonzero(self.grid == EMPTY)]

    def count(self, mark: int) -> int:
        return int(np.count_nonzero(self.grid == mark))

    def move_count(self) -> int:
        return int(np.count_nonzero(self.grid != EMPTY))

    def is_full(self) -> bool:
        return not bool(np.any(self.grid == EMPTY))

    def to_sequence(self) -> list[str]:
        return [SYMBOLS.get(int(cell), EMPTY_SYMBOL) for cell in self.grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeBoard):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        symbols = [SYMBOLS.get(int(cell), ".") for cell in self.grid]
        return "\n".join(" ".join(symbols[row * 3 : row * 3 + 3]) for row in range(3))
