from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt

Symbol = Literal["X", "O"]


class GameCreateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": {"ai_player": "O"}})

    ai_player: Symbol | None = None


class GameResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "game_id": "8bcbf808-c8ab-4f75-95e8-f5f0871500af",
                "board": ["X", "", "", "", "O", "", "", "", ""],
                "game_over": False,
                "winner": None,
                "winning_line": None,
                "next_player": "X",
                "ai_player": "O",
            }
        }
    )

    game_id: UUID
    board: list[str]
    game_over: bool
    winner: Symbol | None
    winning_line: list[int] | None
    next_player: Symbol | None
    ai_player: Symbol


class MoveRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": {"position": 4, "symbol": "X"}})

    # Range is checked by the engine so out-of-range positions surface as InvalidPosition.
    position: StrictInt
    symbol: Symbol


class MoveResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "position": 2,
                "board": ["X", "X", "X", "", "O", "O", "", "", ""],
                "game_over": True,
                "winner": "X",
                "winning_line": [0, 1, 2],
            }
        }
    )

    position: int
    board: list[str]
    game_over: bool
    winner: Symbol | None
    winning_line: list[int] | None


class AIMoveRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": {"difficulty": "hard"}})

    difficulty: str | None = None


class AIMoveResponse(BaseModel):
    position: int | None


class PredictMoveRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "board": ["X", "X", "", "", "", "O", "", "", ""],
                "difficulty": "medium",
            }
        }
    )

    board: list[str] = Field(min_length=9, max_length=9)
    difficulty: str | None = None
