from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from game.constants import (
    CENTER,
    CORNERS,
    EDGES,
    EMPTY,
    LINES,
    LINES_INDEX,
    NUM_CELLS,
    PLAYER_O,
    PLAYER_X,
    SYMBOLS,
)


class TestGameConstantsConsistency(unittest.TestCase):
    def test_players_are_opposite_signs(self) -> None:
        self.assertEqual(PLAYER_X, -PLAYER_O)
        self.assertNotIn(EMPTY, (PLAYER_X, PLAYER_O))
        self.assertEqual(set(SYMBOLS), {PLAYER_X, PLAYER_O})

    def test_cell_groups_partition_the_board(self) -> None:
        cells = (CENTER, *CORNERS, *EDGES)
        self.assertEqual(sorted(cells), list(range(NUM_CELLS)))

    def test_lines_cover_rows_columns_and_diagonals(self) -> None:
        self.assertEqual(len(LINES), 8)
        self.assertEqual(len(set(LINES)), 8)
        self.assertEqual(LINES[0], (0, 1, 2))
        self.assertEqual(LINES[-1], (2, 4, 6))
        self.assertEqual([tuple(row) for row in LINES_INDEX.tolist()], list(LINES))
        self.assertFalse(LINES_INDEX.flags.writeable)


if __name__ == "__main__":
    unittest.main()
