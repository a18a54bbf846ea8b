from .heuristic import heuristic_move
from .minimax_agent import minimax_move
from .random_agent import random_move
from .selector import select_move
from .types import Difficulty

__all__ = ["Difficulty", "heuristic_move", "minimax_move", "random_move", "select_move"]
