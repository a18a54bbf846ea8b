from __future__ import annotations

from fastapi import Request

from api.modules.gameplay.service import GameplayService


def get_gameplay_service_dep(request: Request) -> GameplayService:
    service = getattr(request.app.state, "gameplay_service", None)
    if not isinstance(service, GameplayService):
        raise RuntimeError("Gameplay service is not initialized.")
    return service
