from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, get_settings
from api.error_handling import register_error_handlers
from api.modules.gameplay.router import router as gameplay_router
from api.modules.gameplay.service import GameplayService
from api.modules.health.router import router as health_router
from api.observability import configure_logging, register_request_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    cfg = settings or get_settings()
    configure_logging(cfg)
    app = FastAPI(
        title=cfg.app_name,
        debug=cfg.app_debug,
        docs_url=cfg.docs_url,
        redoc_url=cfg.redoc_url,
    )
    register_error_handlers(app)
    if cfg.app_log_requests:
        register_request_logging(app)
    if cfg.app_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.app_cors_origins,
            allow_credentials=cfg.app_cors_allow_credentials,
            allow_methods=cfg.app_cors_allow_methods,
            allow_headers=cfg.app_cors_allow_headers,
        )
    app.state.settings = cfg
    app.state.gameplay_service = GameplayService(
        ai_player=cfg.game_ai_player,
        default_difficulty=cfg.game_default_difficulty,
        rng_seed=cfg.game_rng_seed,
        max_sessions=cfg.game_max_sessions,
    )
    app.include_router(health_router)
    app.include_router(gameplay_router, prefix="/api/v1")
    return app


app = create_app()
