"""
Exception handlers for the FastAPI application

Every error body has the same shape:
    {"status": int, "title": str, "detail": str, "instance": path, "errors"?: {field: [messages]}}
"""
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from orderdesk.core.errors import ErrorKind, ServiceError

logger = logging.getLogger(__name__)

# kind -> (HTTP status, title)
ERROR_KIND_RESPONSES = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "Validation Error"),
    ErrorKind.BUSINESS_RULE: (status.HTTP_400_BAD_REQUEST, "Business Rule Violation"),
}


def problem_response(
    request: Request,
    status_code: int,
    title: str,
    detail: str,
    errors: Optional[Dict[str, List[str]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {
        "status": status_code,
        "title": title,
        "detail": detail,
        "instance": request.url.path,
    }
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate a tagged ServiceError by its kind"""
    status_code, title = ERROR_KIND_RESPONSES[exc.kind]

    logger.info(f"{request.method} {request.url.path} -> {status_code} ({exc.kind.value}): {exc.message}")
    return problem_response(request, status_code, title, exc.message, errors=exc.errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/path validation errors, reported per field"""
    errors: Dict[str, List[str]] = defaultdict(list)
    for error in exc.errors():
        # Drop the leading "body"/"path"/"query" segment
        location = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        errors[".".join(location)].append(error["msg"])

    logger.warning(f"Validation error on {request.url.path}: {dict(errors)}")
    return problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "One or more validation errors occurred.",
        errors=dict(errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return problem_response(
        request,
        exc.status_code,
        _http_title(exc.status_code),
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An error occurred while processing your request",
        "Internal server error",
    )


def _http_title(status_code: int) -> str:
    titles = {
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Resource Not Found",
        405: "Method Not Allowed",
    }
    return titles.get(status_code, "Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application"""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
