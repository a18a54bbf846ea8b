from .board import TicTacToeBoard, check_position
from .constants import (
    BOARD_SIZE,
    CENTER,
    CORNERS,
    EDGES,
    EMPTY,
    LINES,
    NUM_CELLS,
    PLAYER_O,
    PLAYER_X,
)
from .errors import (
    CellOccupied,
    GameError,
    InvalidBoard,
    InvalidPosition,
    NoLegalMoves,
    OutOfTurn,
    UnknownDifficulty,
)
from .rules import apply_move, evaluate, opponent, side_to_move, winning_moves
from .serialization import board_from_symbols, board_to_symbols
from .status import Outcome, Status
from .types import Grid, Line, Player, Position

__all__ = [
    "BOARD_SIZE",
    "CENTER",
    "CORNERS",
    "EDGES",
    "EMPTY",
    "LINES",
    "NUM_CELLS",
    "PLAYER_O",
    "PLAYER_X",
    "CellOccupied",
    "GameError",
    "Grid",
    "InvalidBoard",
    "InvalidPosition",
    "Line",
    "NoLegalMoves",
    "Outcome",
    "OutOfTurn",
    "Player",
    "Position",
    "Status",
    "TicTacToeBoard",
    "UnknownDifficulty",
    "apply_move",
    "board_from_symbols",
    "board_to_symbols",
    "check_position",
    "evaluate",
    "opponent",
    "side_to_move",
    "winning_moves",
]
