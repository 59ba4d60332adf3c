"""
Exception handlers - translate failures into problem documents

Every handled error is returned as application/problem+json with a type URI
under settings.PROBLEM_BASE_URL and the request path as `instance`.
"""
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional, Sequence, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apparel_store.core.config import settings
from apparel_store.core.exceptions import ApparelOrderError, ConcurrencyConflictError, NotFoundError
from apparel_store.domain.problem import ProblemDetails

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

# First element of a FastAPI error location names the request part
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def field_path(loc: Sequence[Union[str, int]]) -> str:
    """
    Render a validation error location as a field path

    ("body", "apparelOrderLines", 0, "orderQuantity") -> "apparelOrderLines[0].orderQuantity"
    """
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]

    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def problem_response(
    request: Request,
    status: int,
    type_suffix: str,
    title: str,
    detail: Optional[str] = None,
    extensions: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build a problem+json response for the current request"""
    problem = ProblemDetails(
        type=f"{settings.PROBLEM_BASE_URL}{type_suffix}",
        title=title,
        status=status,
        detail=detail,
        instance=request.url.path,
        extensions=extensions,
    )
    return JSONResponse(
        status_code=status,
        content=problem.to_dict(),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {field_path(error["loc"]): error["msg"] for error in exc.errors()}
    logger.info(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return problem_response(
        request, 400, "/validation-error", "Validation Error",
        detail="Input validation failed",
        extensions=errors,
    )


async def apparel_order_error_handler(request: Request, exc: ApparelOrderError) -> JSONResponse:
    logger.warning(f"Apparel order rejected on {request.url.path}: {exc.message}")
    return problem_response(request, 400, "/apparel-order-error", "Apparel Order Error", detail=exc.message)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(f"Not found on {request.url.path}: {exc.message}")
    return problem_response(request, 404, "/not-found", "Resource Not Found", detail=exc.message)


async def concurrency_conflict_handler(request: Request, exc: ConcurrencyConflictError) -> JSONResponse:
    logger.warning(f"Concurrency conflict on {request.url.path}: {exc.message}")
    return problem_response(request, 409, "/conflict", "Concurrency Conflict", detail=exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "HTTP Error"

    return problem_response(
        request, exc.status_code, "/http-error", title,
        detail=str(exc.detail) if exc.detail is not None else None,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return problem_response(
        request, 500, "/internal-error", "Internal Server Error",
        detail="An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install every problem-document handler on the application"""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApparelOrderError, apparel_order_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConcurrencyConflictError, concurrency_conflict_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
