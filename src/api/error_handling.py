from __future__ import annotations

import logging
from http import HTTPStatus
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from api.observability import log_context
from game.errors import (
    CellOccupied,
    GameError,
    InvalidBoard,
    InvalidPosition,
    NoLegalMoves,
    OutOfTurn,
    UnknownDifficulty,
)

logger = logging.getLogger(__name__)

_GAME_ERROR_STATUS: dict[type[GameError], int] = {
    InvalidPosition: 400,
    UnknownDifficulty: 400,
    InvalidBoard: 400,
    CellOccupied: 409,
    OutOfTurn: 409,
    NoLegalMoves: 409,
}


def _resolve_request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if isinstance(request_id, str) and request_id:
        return request_id
    return str(uuid4())


def _status_to_error_code(status_code: int) -> str:
    if status_code == 400:
        return "bad_request"
    if status_code == 404:
        return "not_found"
    if status_code == 409:
        return "conflict"
    if status_code == 422:
        return "validation_error"
    if 500 <= status_code <= 599:
        return "internal_error"
    return f"http_{status_code}"


def game_error_status(exc: GameError) -> int:
    for error_type in type(exc).__mro__:
        status_code = _GAME_ERROR_STATUS.get(error_type)  # type: ignore[arg-type]
        if status_code is not None:
            return status_code
    return 400


def _build_error_body(
    *,
    status_code: int,
    request_id: str,
    detail: object,
    details: object | None = None,
    error_type: str | None = None,
) -> dict[str, object]:
    message = detail if isinstance(detail, str) else HTTPStatus(status_code).phrase
    body: dict[str, object] = {
        "error_code": _status_to_error_code(status_code),
        "message": message,
        "detail": detail,
        "request_id": request_id,
    }
    if error_type is not None:
        body["error_type"] = error_type
    if details is not None:
        body["details"] = details
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.middleware("http")
    async def attach_request_id(
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        incoming_request_id = request.headers.get("x-request-id")
        request.state.request_id = incoming_request_id or str(uuid4())
        with log_context(request_id=request.state.request_id):
            response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        detail = exc.detail if exc.detail is not None else HTTPStatus(exc.status_code).phrase
        body = _build_error_body(
            status_code=exc.status_code,
            request_id=_resolve_request_id(request),
            detail=detail,
            details=detail if isinstance(detail, (dict, list)) else None,
        )
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        body = _build_error_body(
            status_code=422,
            request_id=_resolve_request_id(request),
            detail="Validation failed",
            details=exc.errors(),
        )
        return JSONResponse(status_code=422, content=body)

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
        status_code = game_error_status(exc)
        if exc.is_protocol_error:
            # Out-of-sequence calls point at a host bug, not at user input.
            logger.warning(
                "game_protocol_error",
                extra={"error_type": type(exc).__name__, "path": request.url.path},
            )
        body = _build_error_body(
            status_code=status_code,
            request_id=_resolve_request_id(request),
            detail=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", exc_info=exc)
        body = _build_error_body(
            status_code=500,
            request_id=_resolve_request_id(request),
            detail="Internal server error",
        )
        return JSONResponse(status_code=500, content=body)
