"""
Exception handlers that give every failure the same JSON shape:
``{"message": ...}`` plus, for request validation, a list of field errors.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from careers.app.schemas.errors import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

_VALIDATION_MESSAGES = {
    "/auth/": "Invalid login data",
    "/jobs": "Invalid job data",
}


@contextmanager
def internal_errors(detail: str) -> Iterator[None]:
    """Turn unexpected failures inside a route into a 500 with a fixed message."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception(detail)
        raise HTTPException(status_code=500, detail=detail) from exc


def _validation_message(path: str) -> str:
    for marker, message in _VALIDATION_MESSAGES.items():
        if marker in path:
            return message
    return "Invalid request data"


def _field_errors(errors: List[Dict[str, Any]]) -> List[FieldError]:
    out = []
    for err in errors:
        # Drop the leading "body"/"query"/"path" segment
        loc = [str(part) for part in err.get("loc", ())][1:]
        out.append(
            FieldError(
                field=".".join(loc),
                message=err.get("msg", ""),
                type=err.get("type", ""),
            )
        )
    return out


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(
        message=_validation_message(request.url.path),
        errors=_field_errors(exc.errors()),
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message="Internal server error").model_dump(exclude_none=True),
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
