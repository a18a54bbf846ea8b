from __future__ import annotations

from functools import lru_cache

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agents.types import Difficulty
from game.errors import UnknownDifficulty


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Tic-Tac-Toe Engine API"
    app_env: str = "development"
    app_debug: bool = False
    app_host: str = "127.0.0.1"
    app_port: int = 8000
    app_log_level: str = "INFO"
    app_log_json: bool = True
    app_log_requests: bool = True
    app_docs_enabled: bool = True
    app_cors_origins: list[str] = []
    app_cors_allow_credentials: bool = True
    app_cors_allow_methods: list[str] = ["*"]
    app_cors_allow_headers: list[str] = ["*"]

    # Game runtime configuration
    game_ai_player: str = "O"
    game_default_difficulty: str = "hard"
    # None draws fresh OS entropy for every session.
    game_rng_seed: int | None = None
    game_max_sessions: int = 1000

    @model_validator(mode="after")
    def validate_game_settings(self) -> Settings:
        ai_player = self.game_ai_player.strip().upper()
        if ai_player not in {"X", "O"}:
            raise ValueError("game_ai_player must be 'X' or 'O'.")
        self.game_ai_player = ai_player

        try:
            self.game_default_difficulty = Difficulty.parse(self.game_default_difficulty).value
        except UnknownDifficulty as exc:
            raise ValueError(str(exc)) from None

        if self.game_max_sessions < 1:
            raise ValueError("game_max_sessions must be >= 1.")
        return self

    @computed_field
    @property
    def docs_url(self) -> str | None:
        return "/docs" if self.app_docs_enabled else None

    @computed_field
    @property
    def redoc_url(self) -> str | None:
        return "/redoc" if self.app_docs_enabled else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
