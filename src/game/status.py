from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import Line, Player


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Status:
    """Outcome of a board. `winner` and `line` are only set when WON."""

    outcome: Outcome
    winner: Player | None = None
    line: Line | None = None

    @classmethod
    def in_progress(cls) -> Status:
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player, line: Line) -> Status:
        return cls(Outcome.WON, winner=player, line=line)

    @classmethod
    def draw(cls) -> Status:
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS
