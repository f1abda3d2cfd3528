from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("kanban.access")

# Starlette's own routing failures carry the bare HTTP phrase as detail.
_ROUTING_MESSAGES = {
    404: "not found",
    405: "method not supported",
}


def http_error_message(exc: StarletteHTTPException) -> str:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code in _ROUTING_MESSAGES and detail == HTTPStatus(exc.status_code).phrase:
        return _ROUTING_MESSAGES[exc.status_code]
    return detail


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_message(errors: list[dict[str, Any]]) -> str:
    if any(e.get("type") == "json_invalid" for e in errors):
        return "malformed JSON payload"

    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        msg = str(err.get("msg", "invalid value"))
        # pydantic prefixes our ValueErrors
        msg = msg.removeprefix("Value error, ")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid payload"


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, http_error_message(exc), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        message = validation_message(exc.errors())
        logger.info(
            "request.invalid",
            extra={
                "category": "http",
                "event": "request.invalid",
                "request_id": getattr(request.state, "request_id", None),
                "path": request.url.path,
                "error": message,
            },
        )
        return error_response(400, message)
