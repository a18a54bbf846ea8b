from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from game.board import TicTacToeBoard
from game.constants import PLAYER_O, PLAYER_X
from game.errors import GameError, InvalidBoard
from game.serialization import board_from_symbols, board_to_symbols


class TestBoardSerialization(unittest.TestCase):
    def test_parses_symbols_into_board(self) -> None:
        board = board_from_symbols(["X", "", "", "", "o", "", "", "", "x"])
        self.assertEqual(board.get(0), PLAYER_X)
        self.assertEqual(board.get(4), PLAYER_O)
        self.assertEqual(board.get(8), PLAYER_X)
        self.assertEqual(board_to_symbols(board), ["X", "", "", "", "O", "", "", "", "X"])

    def test_empty_board_symbols(self) -> None:
        self.assertEqual(board_to_symbols(TicTacToeBoard()), [""] * 9)

    def test_rejects_wrong_length(self) -> None:
        with self.assertRaises(InvalidBoard):
            board_from_symbols([""] * 8)

    def test_rejects_non_sequence(self) -> None:
        with self.assertRaises(InvalidBoard):
            board_from_symbols("X........")

    def test_rejects_unknown_symbol(self) -> None:
        payload = [""] * 9
        payload[3] = "Z"
        with self.assertRaises(InvalidBoard):
            board_from_symbols(payload)

    def test_rejects_non_string_cell(self) -> None:
        payload: list[object] = [""] * 9
        payload[0] = 1
        with self.assertRaises(InvalidBoard):
            board_from_symbols(payload)

    def test_rejects_impossible_mark_counts(self) -> None:
        with self.assertRaises(InvalidBoard):
            board_from_symbols(["O", "", "", "", "", "", "", "", ""])
        with self.assertRaises(InvalidBoard):
            board_from_symbols(["X", "X", "", "", "", "", "", "", ""])

    def test_rejects_two_winners(self) -> None:
        with self.assertRaises(InvalidBoard):
            board_from_symbols(["X", "X", "X", "O", "O", "O", "", "", ""])

    def test_invalid_board_is_a_game_error(self) -> None:
        self.assertTrue(issubclass(InvalidBoard, GameError))
        self.assertTrue(issubclass(InvalidBoard, ValueError))


if __name__ == "__main__":
    unittest.main()
