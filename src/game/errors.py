"""Typed failures raised by the engine.

Caller-input errors (bad position, occupied cell, unknown difficulty) can be
retried with corrected input. Protocol errors (out of turn, no legal moves)
mean the host called the API out of sequence.
"""

from __future__ import annotations


class GameError(ValueError):
    is_protocol_error = False


class InvalidPosition(GameError):
    def __init__(self, position: object) -> None:
        self.position = position
        super().__init__(f"Invalid position: {position!r}. Must be an integer in [0, 8].")


class CellOccupied(GameError):
    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Cell {position} is already occupied.")


class OutOfTurn(GameError):
    is_protocol_error = True

    def __init__(self, player: object, expected: object | None) -> None:
        self.player = player
        self.expected = expected
        if expected is None:
            message = f"Game is over; no move accepted for {player!r}."
        else:
            message = f"Out of turn: {player!r} moved but {expected!r} is to move."
        super().__init__(message)


class NoLegalMoves(GameError):
    is_protocol_error = True

    def __init__(self, message: str = "No legal moves: the game is already over.") -> None:
        super().__init__(message)


class UnknownDifficulty(GameError):
    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(
            f"Unknown difficulty: {token!r}. Expected one of 'easy', 'medium', 'hard'."
        )


class InvalidBoard(GameError):
    pass
