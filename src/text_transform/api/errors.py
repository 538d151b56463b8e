"""
API Errors

ApiException carries an error code and HTTP status; the handlers below
render it, and framework errors, in the response envelope.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from text_transform.api.schemas import ApiResponse
from text_transform.logging_config import get_logger

logger = get_logger("api")


class ApiException(Exception):
    """Error returned to the client as an enveloped JSON response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details

    @classmethod
    def bad_request(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ApiException":
        return cls("BAD_REQUEST", message, status.HTTP_400_BAD_REQUEST, details)

    @classmethod
    def not_found(cls, resource: str) -> "ApiException":
        return cls("NOT_FOUND", f"{resource} not found", status.HTTP_404_NOT_FOUND)

    @classmethod
    def validation(cls, field: str, message: str) -> "ApiException":
        return cls("VALIDATION_ERROR", message, status.HTTP_400_BAD_REQUEST, {"field": field})

    @classmethod
    def unavailable(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ApiException":
        return cls("TOOL_UNAVAILABLE", message, status.HTTP_503_SERVICE_UNAVAILABLE, details)


def error_response(
    code: str,
    message: str,
    status_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    envelope = ApiResponse.fail(code, message, details)
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    return error_response(exc.code, exc.message, exc.status_code, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response("NOT_FOUND", f"Route {request.url.path} not found", exc.status_code)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response("METHOD_NOT_ALLOWED", "Method not allowed", exc.status_code)
    return error_response("HTTP_ERROR", str(exc.detail), exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(
        "BAD_REQUEST",
        "Invalid request body",
        status.HTTP_400_BAD_REQUEST,
        {"errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return error_response("INTERNAL_ERROR", "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
