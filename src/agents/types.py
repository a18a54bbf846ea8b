from __future__ import annotations

from enum import Enum

from game.errors import UnknownDifficulty


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, token: Difficulty | str) -> Difficulty:
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise UnknownDifficulty(token)
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise UnknownDifficulty(token) from None
