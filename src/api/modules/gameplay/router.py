from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from api.deps.gameplay import get_gameplay_service_dep
from api.modules.gameplay.schemas import (
    AIMoveRequest,
    AIMoveResponse,
    GameCreateRequest,
    GameResponse,
    MoveRequest,
    MoveResponse,
    PredictMoveRequest,
)
from api.modules.gameplay.service import GameplayService, SessionNotFound
from game.rules import player_symbol
from game.session import GameSession, MoveResult

router = APIRouter(tags=["gameplay"])
GAMEPLAY_SERVICE_DEP = Depends(get_gameplay_service_dep)
logger = logging.getLogger(__name__)


def _to_game_response(game_id: UUID, session: GameSession) -> GameResponse:
    current = session.status
    next_player = session.next_player
    return GameResponse(
        game_id=game_id,
        board=session.get_board(),
        game_over=current.is_terminal,
        winner=player_symbol(current.winner) if current.winner is not None else None,
        winning_line=list(current.line) if current.line is not None else None,
        next_player=player_symbol(next_player) if next_player is not None else None,
        ai_player=player_symbol(session.ai_player),
    )


def _to_move_response(result: MoveResult) -> MoveResponse:
    return MoveResponse(position=result.position, **result.to_dict())


def _not_found(exc: SessionNotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post(
    "/games",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Game",
    description="Starts a new game with an empty board and X to move.",
)
def post_game(
    request: GameCreateRequest | None = None,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> GameResponse:
    ai_player = request.ai_player if request is not None else None
    game_id, _ = gameplay_service.create_game(ai_player=ai_player)
    try:
        with gameplay_service.locked_game(game_id) as session:
            return _to_game_response(game_id, session)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc


@router.get(
    "/games/{game_id}",
    response_model=GameResponse,
    summary="Get Game",
    description="Returns the board, outcome and side to move of a game.",
    responses={404: {"description": "Game not found."}},
)
def get_game(
    game_id: UUID,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> GameResponse:
    try:
        with gameplay_service.locked_game(game_id) as session:
            return _to_game_response(game_id, session)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc


@router.delete(
    "/games/{game_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Game",
    responses={404: {"description": "Game not found."}},
)
def delete_game(
    game_id: UUID,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> Response:
    try:
        gameplay_service.delete_game(game_id)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/games/{game_id}/moves",
    response_model=MoveResponse,
    summary="Make Move",
    description="Places `symbol` at `position` if it is that symbol's turn.",
    responses={
        400: {"description": "Position outside 0-8."},
        404: {"description": "Game not found."},
        409: {"description": "Cell occupied, wrong turn, or game over."},
    },
)
def post_move(
    game_id: UUID,
    request: MoveRequest,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> MoveResponse:
    try:
        result = gameplay_service.make_move(game_id, request.position, request.symbol)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc
    return _to_move_response(result)


@router.post(
    "/games/{game_id}/ai-move",
    response_model=MoveResponse,
    summary="Play AI Move",
    description="Lets the automated side choose and play its move.",
    responses={
        400: {"description": "Unknown difficulty."},
        404: {"description": "Game not found."},
        409: {"description": "Not the automated side's turn, or game over."},
    },
)
def post_ai_move(
    game_id: UUID,
    request: AIMoveRequest | None = None,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> MoveResponse:
    difficulty = request.difficulty if request is not None else None
    try:
        result = gameplay_service.play_ai_move(game_id, difficulty)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc
    logger.debug("ai_move_played", extra={"game_id": str(game_id), "position": result.position})
    return _to_move_response(result)


@router.get(
    "/games/{game_id}/ai-move",
    response_model=AIMoveResponse,
    summary="Suggest AI Move",
    description="Returns the move the AI would play for the side to move. Does not change the game.",
    responses={400: {"description": "Unknown difficulty."}, 404: {"description": "Game not found."}},
)
def get_ai_move(
    game_id: UUID,
    difficulty: str | None = Query(default=None),
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> AIMoveResponse:
    try:
        result = gameplay_service.suggest_ai_move(game_id, difficulty)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc
    return AIMoveResponse(position=result.position)


@router.post(
    "/games/{game_id}/reset",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset Game",
    description="Clears the board; X moves first again.",
    responses={404: {"description": "Game not found."}},
)
def post_reset(
    game_id: UUID,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> Response:
    try:
        gameplay_service.reset_game(game_id)
    except SessionNotFound as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/ai/move",
    response_model=AIMoveResponse,
    summary="Predict Move",
    description="Chooses a move for the side to move on a provided board. Does not persist game state.",
    responses={400: {"description": "Invalid board payload or unknown difficulty."}},
)
def post_predict_move(
    request: PredictMoveRequest,
    gameplay_service: GameplayService = GAMEPLAY_SERVICE_DEP,
) -> AIMoveResponse:
    result = gameplay_service.predict_move(request.board, request.difficulty)
    return AIMoveResponse(position=result.position)
