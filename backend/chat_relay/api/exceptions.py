"""
HTTP errors raised by the relay and the handlers that render them.

Every error body has the shape {"error": <message>}.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INVALID_REQUEST_MESSAGE = "Invalid request data"
UPSTREAM_FAILURE_MESSAGE = "Failed to contact OpenAI API"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


class InvalidRequestError(HTTPException):
    def __init__(self, detail: str = INVALID_REQUEST_MESSAGE):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UpstreamFailureError(HTTPException):
    def __init__(self, detail: str = UPSTREAM_FAILURE_MESSAGE):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = METHOD_NOT_ALLOWED_MESSAGE
    else:
        detail = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body type mismatches are reported without field detail."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_REQUEST_MESSAGE},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
