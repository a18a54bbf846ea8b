from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

from api.config import Settings, get_settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    app: str
    env: str
    active_games: int


def _resolve_settings(request: Request) -> Settings:
    state_settings = getattr(request.app.state, "settings", None)
    if isinstance(state_settings, Settings):
        return state_settings
    return get_settings()


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns basic application health, environment and number of live games.",
    responses={
        200: {
            "description": "Service is healthy.",
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "app": "tictactoe-engine-api",
                        "env": "development",
                        "active_games": 3,
                    }
                }
            },
        }
    },
)
def get_health(request: Request) -> HealthResponse:
    settings = _resolve_settings(request)
    service = getattr(request.app.state, "gameplay_service", None)
    return HealthResponse(
        status="ok",
        app=settings.app_name,
        env=settings.app_env,
        active_games=service.count_games() if service is not None else 0,
    )
