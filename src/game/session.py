"""
One game of tic-tac-toe between a host-driven side and an automated side.

The session is a small state machine:
- AwaitingMove(player): `player` must move next (X on a fresh board),
- Finished(status): the board is won or drawn; no move is accepted.
Both the side to move and the status are derived from the board on every
access, so they can never disagree with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from agents.selector import select_move
from agents.types import Difficulty
from game.board import TicTacToeBoard
from game.constants import PLAYER_O
from game.errors import NoLegalMoves, OutOfTurn
from game.rules import apply_move, evaluate, player_from_symbol, player_symbol, side_to_move
from game.status import Status
from game.types import Line, Player, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwaitingMove:
    player: Player


@dataclass(frozen=True)
class Finished:
    status: Status


SessionState = AwaitingMove | Finished


@dataclass(frozen=True)
class MoveResult:
    position: Position
    board: tuple[str, ...]
    game_over: bool
    winner: str | None
    winning_line: Line | None

    def to_dict(self) -> dict[str, object]:
        return {
            "board": list(self.board),
            "game_over": self.game_over,
            "winner": self.winner,
            "winning_line": list(self.winning_line) if self.winning_line is not None else None,
        }


@dataclass(frozen=True)
class AIMoveResult:
    position: Position | None

    def to_dict(self) -> dict[str, object]:
        return {"position": self.position}


class GameSession:
    def __init__(
        self,
        ai_player: Player | str = PLAYER_O,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = TicTacToeBoard()
        self.ai_player: Player = player_from_symbol(ai_player)
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def new(
        cls,
        ai_player: Player | str = PLAYER_O,
        rng: np.random.Generator | None = None,
    ) -> GameSession:
        return cls(ai_player=ai_player, rng=rng)

    @property
    def status(self) -> Status:
        return evaluate(self.board)

    @property
    def state(self) -> SessionState:
        status = self.status
        if status.is_terminal:
            return Finished(status)
        return AwaitingMove(side_to_move(self.board))

    @property
    def next_player(self) -> Player | None:
        state = self.state
        return state.player if isinstance(state, AwaitingMove) else None

    def is_empty(self, position: Position) -> bool:
        return self.board.is_empty(position)

    def get_board(self) -> list[str]:
        return self.board.to_sequence()

    def make_move(self, position: Position, player: Player | str) -> MoveResult:
        state = self.state
        expected = player_symbol(state.player) if isinstance(state, AwaitingMove) else None
        try:
            mover = player_from_symbol(player)
        except ValueError:
            raise OutOfTurn(player, expected) from None

        if isinstance(state, Finished):
            raise OutOfTurn(player_symbol(mover), None)
        if state.player != mover:
            raise OutOfTurn(player_symbol(mover), expected)
        return self._apply(position, mover)

    def request_ai_move(self, difficulty: Difficulty | str) -> MoveResult:
        """Let the automated side choose and play its move."""
        level = Difficulty.parse(difficulty)
        state = self.state
        if isinstance(state, Finished):
            raise NoLegalMoves()
        if state.player != self.ai_player:
            raise OutOfTurn(player_symbol(self.ai_player), player_symbol(state.player))

        position = select_move(self.board, state.player, level, rng=self.rng)
        return self._apply(position, state.player)

    def get_ai_move(self, difficulty: Difficulty | str) -> AIMoveResult:
        """Suggest a move for the side to move without playing it."""
        level = Difficulty.parse(difficulty)
        state = self.state
        if isinstance(state, Finished):
            return AIMoveResult(position=None)
        return AIMoveResult(position=select_move(self.board, state.player, level, rng=self.rng))

    def reset(self) -> None:
        self.board.reset()
        logger.debug("game_reset")

    def _apply(self, position: Position, player: Player) -> MoveResult:
        _, status = apply_move(self.board, position, player)
        logger.debug(
            "move_applied",
            extra={"player": player_symbol(player), "position": int(position)},
        )
        if status.is_terminal:
            logger.info(
                "game_finished",
                extra={
                    "outcome": status.outcome.value,
                    "winner": player_symbol(status.winner) if status.winner is not None else None,
                    "moves": self.board.move_count(),
                },
            )
        return MoveResult(
            position=int(position),
            board=tuple(self.board.to_sequence()),
            game_over=status.is_terminal,
            winner=player_symbol(status.winner) if status.winner is not None else None,
            winning_line=status.line,
        )
