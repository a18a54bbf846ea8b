from __future__ import annotations

import numpy as np

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

EMPTY = 0
PLAYER_X = 1
PLAYER_O = -1

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)

# Scan order matters: rows, then columns, then diagonals.
LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

LINES_INDEX = np.asarray(LINES, dtype=np.intp)
LINES_INDEX.setflags(write=False)

EMPTY_SYMBOL = ""
SYMBOLS = {PLAYER_X: "X", PLAYER_O: "O"}
