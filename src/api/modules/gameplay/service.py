from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from uuid import UUID, uuid4

import numpy as np

from agents.selector import select_move
from agents.types import Difficulty
from api.observability import log_context
from game.rules import is_terminal, side_to_move
from game.serialization import board_from_symbols
from game.session import AIMoveResult, GameSession, MoveResult
from game.types import Position

logger = logging.getLogger(__name__)


class SessionNotFound(LookupError):
    def __init__(self, game_id: UUID) -> None:
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")


@dataclass
class _SessionEntry:
    session: GameSession
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameplayService:
    """
    In-memory registry of independent game sessions.

    `_lock` guards the registry itself. Each session has its own lock, held
    for the whole check-and-apply of a call, so two requests for the same
    game cannot both pass the turn check. When the registry is full the
    least recently created session is evicted.
    """

    def __init__(
        self,
        ai_player: str = "O",
        default_difficulty: Difficulty | str = Difficulty.HARD,
        rng_seed: int | None = None,
        max_sessions: int = 1000,
    ) -> None:
        self.ai_player = ai_player
        self.default_difficulty = Difficulty.parse(default_difficulty)
        self.max_sessions = max_sessions
        self._seed_sequence = np.random.SeedSequence(rng_seed)
        self._sessions: OrderedDict[UUID, _SessionEntry] = OrderedDict()
        self._lock = threading.Lock()

    def _spawn_rng(self) -> np.random.Generator:
        with self._lock:
            child = self._seed_sequence.spawn(1)[0]
        return np.random.default_rng(child)

    def _entry(self, game_id: UUID) -> _SessionEntry:
        with self._lock:
            entry = self._sessions.get(game_id)
        if entry is None:
            raise SessionNotFound(game_id)
        return entry

    @contextmanager
    def locked_game(self, game_id: UUID) -> Iterator[GameSession]:
        """Yield the session with its lock held; log records carry `game_id`."""
        entry = self._entry(game_id)
        with entry.lock, log_context(game_id=str(game_id)):
            yield entry.session

    def create_game(self, ai_player: str | None = None) -> tuple[UUID, GameSession]:
        session = GameSession(
            ai_player=ai_player or self.ai_player,
            rng=self._spawn_rng(),
        )
        game_id = uuid4()
        with self._lock:
            self._sessions[game_id] = _SessionEntry(session)
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info("game_evicted", extra={"game_id": str(evicted_id)})
        logger.info(
            "game_created",
            extra={"game_id": str(game_id), "ai_player": ai_player or self.ai_player},
        )
        return game_id, session

    def get_game(self, game_id: UUID) -> GameSession:
        return self._entry(game_id).session

    def delete_game(self, game_id: UUID) -> None:
        with self._lock:
            entry = self._sessions.pop(game_id, None)
        if entry is None:
            raise SessionNotFound(game_id)

    def count_games(self) -> int:
        with self._lock:
            return len(self._sessions)

    def make_move(self, game_id: UUID, position: Position, symbol: str) -> MoveResult:
        with self.locked_game(game_id) as session:
            return session.make_move(position, symbol)

    def play_ai_move(self, game_id: UUID, difficulty: Difficulty | str | None) -> MoveResult:
        with self.locked_game(game_id) as session:
            return session.request_ai_move(difficulty or self.default_difficulty)

    def suggest_ai_move(self, game_id: UUID, difficulty: Difficulty | str | None) -> AIMoveResult:
        with self.locked_game(game_id) as session:
            return session.get_ai_move(difficulty or self.default_difficulty)

    def reset_game(self, game_id: UUID) -> None:
        with self.locked_game(game_id) as session:
            session.reset()

    def predict_move(self, board_symbols: list[str], difficulty: Difficulty | str | None) -> AIMoveResult:
        """Stateless move choice for a board supplied by the caller."""
        level = Difficulty.parse(difficulty or self.default_difficulty)
        board = board_from_symbols(board_symbols)
        if is_terminal(board):
            return AIMoveResult(position=None)
        position = select_move(board, side_to_move(board), level, rng=self._spawn_rng())
        return AIMoveResult(position=position)
