from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from game.board import TicTacToeBoard
from game.constants import EMPTY, LINES, NUM_CELLS, PLAYER_O, PLAYER_X
from game.errors import CellOccupied, InvalidPosition
from game.rules import (
    apply_move,
    evaluate,
    opponent,
    player_from_symbol,
    side_to_move,
    winning_moves,
)
from game.status import Outcome, Status


def _board(cells: str) -> TicTacToeBoard:
    """Build a board from a 9-char string of X, O and '.'."""
    mapping = {"X": PLAYER_X, "O": PLAYER_O, ".": EMPTY}
    return TicTacToeBoard(grid=np.asarray([mapping[c] for c in cells], dtype=np.int8))


def _all_legal_count_boards() -> list[np.ndarray]:
    grids = []
    for cells in itertools.product((EMPTY, PLAYER_X, PLAYER_O), repeat=NUM_CELLS):
        lead = cells.count(PLAYER_X) - cells.count(PLAYER_O)
        if lead in (0, 1):
            grids.append(np.asarray(cells, dtype=np.int8))
    return grids


class TestBoard(unittest.TestCase):
    def test_new_board_is_empty(self) -> None:
        board = TicTacToeBoard()
        for pos in range(NUM_CELLS):
            self.assertTrue(board.is_empty(pos))
            self.assertEqual(board.get(pos), EMPTY)
        self.assertEqual(board.to_sequence(), [""] * 9)

    def test_set_marks_cell(self) -> None:
        board = TicTacToeBoard()
        board.set(4, PLAYER_X)
        self.assertEqual(board.get(4), PLAYER_X)
        self.assertFalse(board.is_empty(4))
        self.assertEqual(board.to_sequence()[4], "X")

    def test_set_rejects_occupied_cell(self) -> None:
        board = TicTacToeBoard()
        board.set(3, PLAYER_X)
        with self.assertRaises(CellOccupied):
            board.set(3, PLAYER_O)
        self.assertEqual(board.get(3), PLAYER_X)

    def test_out_of_range_positions_are_rejected(self) -> None:
        board = TicTacToeBoard()
        for bad in (-1, 9, 100, True, 1.5, "4", None):
            with self.assertRaises(InvalidPosition, msg=f"position={bad!r}"):
                board.get(bad)  # type: ignore[arg-type]
            with self.assertRaises(InvalidPosition, msg=f"position={bad!r}"):
                board.is_empty(bad)  # type: ignore[arg-type]
            with self.assertRaises(InvalidPosition, msg=f"position={bad!r}"):
                board.set(bad, PLAYER_X)  # type: ignore[arg-type]

    def test_numpy_integer_positions_are_accepted(self) -> None:
        board = TicTacToeBoard()
        board.set(np.int64(8), PLAYER_O)
        self.assertEqual(board.get(8), PLAYER_O)

    def test_reset_clears_every_cell(self) -> None:
        board = _board("XOXOXOX..")
        board.reset()
        self.assertEqual(board.to_sequence(), [""] * 9)
        self.assertEqual(board.move_count(), 0)

    def test_to_sequence_is_a_snapshot(self) -> None:
        board = TicTacToeBoard()
        snapshot = board.to_sequence()
        snapshot[0] = "X"
        self.assertTrue(board.is_empty(0))
        board.set(1, PLAYER_O)
        self.assertEqual(snapshot[1], "")

    def test_copy_creates_independent_board(self) -> None:
        board = _board("X........")
        copied = board.copy()
        copied.set(4, PLAYER_O)
        self.assertTrue(board.is_empty(4))
        self.assertFalse(copied.is_empty(4))

    def test_constructor_validates_grid(self) -> None:
        with self.assertRaises(ValueError):
            TicTacToeBoard(grid=np.zeros(8, dtype=np.int8))
        with self.assertRaises(ValueError):
            TicTacToeBoard(grid=np.full(9, 2, dtype=np.int8))

    def test_str_renders_three_rows(self) -> None:
        self.assertEqual(str(_board("XO..X...O")), "X O .\n. X .\n. . O")


class TestRules(unittest.TestCase):
    def test_evaluate_empty_board_is_in_progress(self) -> None:
        self.assertEqual(evaluate(TicTacToeBoard()), Status.in_progress())

    def test_evaluate_reports_each_line(self) -> None:
        for line in LINES:
            board = TicTacToeBoard()
            for pos in line:
                board.grid[pos] = PLAYER_O
            status = evaluate(board)
            self.assertEqual(status.outcome, Outcome.WON)
            self.assertEqual(status.winner, PLAYER_O)
            self.assertEqual(status.line, line)

    def test_evaluate_reports_first_line_in_scan_order(self) -> None:
        # X completes both the top row and the left column.
        status = evaluate(_board("XXXXOOXOO"))
        self.assertEqual(status.winner, PLAYER_X)
        self.assertEqual(status.line, (0, 1, 2))

    def test_full_board_without_line_is_draw(self) -> None:
        status = evaluate(_board("XOXXOOOXX"))
        self.assertEqual(status, Status.draw())
        self.assertTrue(status.is_terminal)

    def test_win_on_last_cell_beats_draw(self) -> None:
        status = evaluate(_board("XOXOXOOXX"))
        self.assertEqual(status.outcome, Outcome.WON)
        self.assertEqual(status.line, (0, 4, 8))

    def test_evaluate_matches_bruteforce_on_all_boards(self) -> None:
        for grid in _all_legal_count_boards():
            board = TicTacToeBoard(grid=grid)
            status = evaluate(board)
            owned = [
                line
                for line in LINES
                if grid[line[0]] != EMPTY and grid[line[0]] == grid[line[1]] == grid[line[2]]
            ]
            if owned:
                self.assertEqual(status.outcome, Outcome.WON)
                self.assertIn(status.line, owned)
                self.assertEqual(status.line, owned[0])
                self.assertEqual(status.winner, int(grid[owned[0][0]]))
            elif bool(np.all(grid != EMPTY)):
                self.assertEqual(status.outcome, Outcome.DRAW)
            else:
                self.assertEqual(status.outcome, Outcome.IN_PROGRESS)

    def test_apply_move_sets_cell_and_returns_status(self) -> None:
        board = _board("XX.OO....")
        returned, status = apply_move(board, 2, PLAYER_X)
        self.assertIs(returned, board)
        self.assertEqual(board.get(2), PLAYER_X)
        self.assertEqual(status, Status.won(PLAYER_X, (0, 1, 2)))

    def test_apply_move_failure_does_not_mutate(self) -> None:
        board = _board("X...O....")
        before = board.grid.copy()
        with self.assertRaises(CellOccupied):
            apply_move(board, 4, PLAYER_X)
        with self.assertRaises(InvalidPosition):
            apply_move(board, 9, PLAYER_X)
        self.assertTrue(np.array_equal(board.grid, before))

    def test_side_to_move_alternates_from_x(self) -> None:
        self.assertEqual(side_to_move(TicTacToeBoard()), PLAYER_X)
        self.assertEqual(side_to_move(_board("X........")), PLAYER_O)
        self.assertEqual(side_to_move(_board("X...O....")), PLAYER_X)

    def test_winning_moves_lists_completing_cells(self) -> None:
        board = _board("XX.X.....")
        self.assertEqual(winning_moves(board, PLAYER_X), [2, 6])
        self.assertEqual(winning_moves(board, PLAYER_O), [])

    def test_opponent_and_symbol_helpers(self) -> None:
        self.assertEqual(opponent(PLAYER_X), PLAYER_O)
        self.assertEqual(opponent(PLAYER_O), PLAYER_X)
        self.assertEqual(player_from_symbol("x"), PLAYER_X)
        self.assertEqual(player_from_symbol("O"), PLAYER_O)
        with self.assertRaises(ValueError):
            player_from_symbol("Z")


if __name__ == "__main__":
    unittest.main()
